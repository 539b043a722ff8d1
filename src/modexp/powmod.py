# SPDX-License-Identifier: LGPL-3-or-later
""" modular exponentiation (`pow(x, y, z)`) by binary square-and-multiply
"""

from modexp.natural import Natural
from modexp.reducer import ModularReducer
from modexp.util import log, LogType


def iter_exponent_bits(exponent):
    """ yield the bits of the big-endian byte string `exponent`, most
    significant first, starting at its highest set bit.  a zero exponent
    (including the empty string) yields nothing.
    """
    started = False
    for byte in exponent:
        for shift in range(7, -1, -1):
            bit = (byte >> shift) & 1
            started = started or bit
            if started:
                yield bit


def modpow(base, exponent, modulus):
    """ (base ** exponent) % modulus

    base, modulus: Natural
    exponent: big-endian bytes, read bit by bit without ever being
        decoded into a Natural.

    the modulus must be nonzero, the precompile intercepts zero earlier.
    """
    reducer = ModularReducer(modulus)
    log("modpow: base bits", base.bit_length(), "exponent bytes",
        len(exponent), "modulus bits", modulus.bit_length(),
        kind=LogType.PowMod)

    x = reducer.reduce(base)
    retval = reducer.reduce(Natural.one())
    for bit in iter_exponent_bits(exponent):
        retval = reducer.reduce(retval * retval)
        if bit:
            retval = reducer.reduce(retval * x)
    return retval
