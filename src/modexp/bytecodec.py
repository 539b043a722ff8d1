# SPDX-License-Identifier: LGPL-3-or-later
""" big-endian byte strings <-> Natural

leading zero bytes carry no value: they are absorbed when decoding, and
never produced when encoding.  zero encodes to the empty byte string.
"""

from modexp.consts import WORD_BYTES
from modexp.natural import Natural


def from_big_endian(data):
    data = bytes(data)
    digits = []
    # walk words from the least-significant (rightmost) end
    for end in range(len(data), 0, -WORD_BYTES):
        start = max(0, end - WORD_BYTES)
        digits.append(int.from_bytes(data[start:end], "big"))
    return Natural(digits)


def to_big_endian(n):
    if n.is_zero:
        return b""
    out = b"".join(d.to_bytes(WORD_BYTES, "big") for d in reversed(n.digits))
    return out.lstrip(b"\x00")
