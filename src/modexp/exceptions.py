# SPDX-License-Identifier: LGPL-3-or-later
"""exceptions

malformed precompile input never raises: overflowed length fields are
carried as a flag (see `modexp.precompile.LengthField`) and resolve to an
empty output.  the exceptions here are internal invariant violations that
the precompile entry point never reaches.  division by zero uses the
builtin ZeroDivisionError.
"""


class ModExpError(Exception):
    pass


class NaturalUnderflowError(ModExpError, ArithmeticError):
    """raised by `Natural.subtract` when the subtrahend is larger"""

    def __init__(self, a, b):
        super().__init__(f"subtraction underflow: {a!r} - {b!r}")
        self.a = a
        self.b = b
