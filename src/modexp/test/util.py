# SPDX-License-Identifier: LGPL-3-or-later
import hashlib

from modexp.consts import LENGTH_FIELD_WIDTH


def hash_256(v):
    """ deterministic pseudo-random 256-bit value derived from `v` """
    return int.from_bytes(hashlib.sha256(str(v).encode("utf-8")).digest(),
                          byteorder="little")


def to_bytes(value, length):
    """ big-endian, exactly `length` bytes """
    return value.to_bytes(length, "big")


def make_input(base, exponent, modulus, base_len=None, exp_len=None,
               mod_len=None):
    """ build a precompile input buffer.

    base/exponent/modulus are byte strings.  the declared lengths default
    to the actual lengths and may be given as ints (encoded into 32 bytes)
    or as raw 32-byte fields.
    """
    def field(declared, actual):
        if declared is None:
            declared = len(actual)
        if isinstance(declared, int):
            declared = to_bytes(declared, LENGTH_FIELD_WIDTH)
        assert len(declared) == LENGTH_FIELD_WIDTH, "bad length field"
        return declared

    return (field(base_len, base) + field(exp_len, exponent) +
            field(mod_len, modulus) + base + exponent + modulus)


def expected_output(base, exponent, modulus, mod_len):
    """ reference result via python's builtin pow """
    m = int.from_bytes(modulus, "big")
    if m == 0:
        value = 0
    else:
        value = pow(int.from_bytes(base, "big"),
                    int.from_bytes(exponent, "big"), m)
    return to_bytes(value, mod_len)
