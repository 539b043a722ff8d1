# SPDX-License-Identifier: LGPL-3-or-later
""" reduction modulo a fixed modulus

one ModularReducer lives for one exponentiation: it is applied after every
multiplication so intermediate values stay below modulus**2.
"""

from cached_property import cached_property

from modexp.natural import DivModKnuthAlgorithmD, Ordering


class ModularReducer:
    def __init__(self, modulus):
        if modulus.is_zero:
            raise ZeroDivisionError("reduction modulo zero")
        self.modulus = modulus

    @cached_property
    def divider(self):
        return DivModKnuthAlgorithmD(self.modulus)

    def reduce(self, n):
        """ remainder of n divided by the modulus """
        if n.compare(self.modulus) is Ordering.Less:
            return n
        q, r = self.divider.divmod(n)
        return r


def reduce(n, modulus):
    return ModularReducer(modulus).reduce(n)
