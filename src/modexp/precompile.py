# SPDX-License-Identifier: LGPL-3-or-later
""" the MODEXP precompiled contract: byte buffer in, byte buffer out

input layout:

    bytes[0:32]     base_len  (32-byte big-endian)
    bytes[32:64]    exp_len
    bytes[64:96]    mod_len
    bytes[96:...]   base, then exponent, then modulus

any region may run past the end of the buffer, missing bytes read as
zero.  malformed input never raises: it produces an empty output.  the
result is left-padded with zeros to exactly mod_len bytes.
"""

from collections import namedtuple

from cached_property import cached_property

from modexp.bytecodec import from_big_endian, to_big_endian
from modexp.consts import (LENGTH_FIELD_WIDTH, OVERFLOW_PREFIX_WIDTH,
                           LENGTH_CEILING, HEADER_SIZE)
from modexp.powmod import modpow
from modexp.util import log, LogType

LengthField = namedtuple("LengthField", ["value", "overflow"])


def read_length_field(data, start, ceiling=LENGTH_CEILING):
    """ decode the 32-byte length field at `start`.

    the field is split into a 24-byte overflow prefix and a trailing
    8-byte big-endian integer.  it only decodes when the prefix is all
    zeros and the integer is strictly below `ceiling`, otherwise
    `overflow` is set.  bytes past the end of `data` read as zero.
    """
    length = len(data)
    from_zero = min(start, length)
    split = min(from_zero + OVERFLOW_PREFIX_WIDTH, length)
    end = min(start + LENGTH_FIELD_WIDTH, length)
    prefix = data[from_zero:split]
    tail_width = LENGTH_FIELD_WIDTH - OVERFLOW_PREFIX_WIDTH
    tail = data[split:end].ljust(tail_width, b"\x00")
    value = int.from_bytes(tail, "big")
    overflow = not (value < ceiling and not any(prefix))
    return LengthField(value, overflow)


def read_padded(data, start, length):
    """ data[start:start + length], zero-filled where it runs off the end """
    end = min(start + length, len(data))
    start = min(start, len(data))
    chunk = data[start:end]
    return chunk + bytes(length - len(chunk))


def pad_result(result, mod_len):
    """ left-pad `result` with zeros to mod_len bytes.  a result longer
    than mod_len can't be produced by a correct reduction: return empty.
    """
    if len(result) == mod_len:
        return result
    if len(result) < mod_len:
        return bytes(mod_len - len(result)) + result
    return b""


class ModExpInput:
    """ view over one precompile input buffer.

    `base`, `exponent` and `modulus` are only meaningful when none of the
    length fields overflowed.
    """

    def __init__(self, data, length_ceiling=LENGTH_CEILING):
        self.data = bytes(data)
        self.length_ceiling = length_ceiling

    def _length_field(self, index):
        return read_length_field(self.data, index * LENGTH_FIELD_WIDTH,
                                 self.length_ceiling)

    @cached_property
    def base_len(self):
        return self._length_field(0)

    @cached_property
    def exp_len(self):
        return self._length_field(1)

    @cached_property
    def mod_len(self):
        return self._length_field(2)

    @cached_property
    def base(self):
        assert not self.base_len.overflow
        return read_padded(self.data, HEADER_SIZE, self.base_len.value)

    @cached_property
    def exponent(self):
        assert not (self.base_len.overflow or self.exp_len.overflow)
        start = HEADER_SIZE + self.base_len.value
        return read_padded(self.data, start, self.exp_len.value)

    @cached_property
    def modulus(self):
        assert not any(f.overflow for f in
                       (self.base_len, self.exp_len, self.mod_len))
        start = HEADER_SIZE + self.base_len.value + self.exp_len.value
        return read_padded(self.data, start, self.mod_len.value)


def modexp(base, exponent, modulus):
    """ computes `(base ** exponent) % modulus`, where all values are
    big-endian byte strings.  the result is the minimal big-endian
    encoding, so a zero result (and a zero modulus) gives b"".
    """
    m = from_big_endian(modulus)
    if m.is_zero or m.is_one:
        return b""
    result = modpow(from_big_endian(base), bytes(exponent), m)
    return to_big_endian(result)


def modexp_precompiled(data, length_ceiling=LENGTH_CEILING):
    args = ModExpInput(data, length_ceiling)
    base_len, exp_len, mod_len = args.base_len, args.exp_len, args.mod_len
    log("modexp: base_len", base_len, "exp_len", exp_len, "mod_len", mod_len,
        kind=LogType.Precompile)

    if base_len.overflow or mod_len.overflow:
        return b""

    if base_len.value == 0 and mod_len.value == 0:
        result = b""
    elif exp_len.overflow:
        return b""
    else:
        result = modexp(args.base, args.exponent, args.modulus)

    output = pad_result(result, mod_len.value)
    log("modexp: output length", len(output), kind=LogType.Precompile)
    return output
