# SPDX-License-Identifier: LGPL-3-or-later
""" Natural: arbitrary-precision unsigned integer as a vector of words

digits are WORD_SIZE-bit words stored least-significant first in a tuple.
the vector is always normalized: at least one digit, and the most
significant digit is nonzero unless the value is zero, in which case the
vector is exactly `(0,)`.  every operation returns a new Natural.

the word-level primitives (`maddedu`, `adde`, `subfe`, `divmod2du`) are
named after the Power ISA instructions that the bigint code is written
around, and only ever see values of at most two words.
"""

import functools
from enum import Enum

from cached_property import cached_property

from modexp.consts import WORD_SIZE, WORD_MASK
from modexp.exceptions import NaturalUnderflowError


def maddedu(a, b, c):
    """ a * b + c, returns (low word, high word) """
    y = a * b + c
    return y & WORD_MASK, y >> WORD_SIZE


def adde(a, b, c):
    """ a + b + carry-in, returns (sum word, carry-out) """
    y = a + b + c
    return y & WORD_MASK, y >> WORD_SIZE


def subfe(a, b, borrow):
    """ a - b - borrow-in, returns (difference word, borrow-out) """
    y = a - b - borrow
    return y & WORD_MASK, int(y < 0)


def divmod2du(RA, RB, RC):
    # type: (int, int, int) -> tuple[int, int, bool]
    """ divide the two-word value RC:RA by the single word RB.
    when the quotient does not fit in one word (or RB is zero) the
    quotient saturates to all-ones and overflow is flagged.
    """
    if RC < RB and RB != 0:
        RT, RS = divmod(RC << WORD_SIZE | RA, RB)
        overflow = False
    else:
        overflow = True
        RT = WORD_MASK
        RS = 0
    return RT, RS, overflow


def _normalize(digits):
    n = len(digits)
    while n > 1 and digits[n - 1] == 0:
        n -= 1
    if n == 0:
        return (0,)
    return tuple(digits[:n])


def _shift_left(digits, s):
    # returns len(digits) + 1 words
    out = []
    carry = 0
    for d in digits:
        t = (d << s) | carry
        out.append(t & WORD_MASK)
        carry = t >> WORD_SIZE
    out.append(carry)
    return out


def _shift_right(digits, s, n):
    # lower n words of digits >> s, digits must have at least n + 1 words
    if s == 0:
        return list(digits[:n])
    out = []
    for i in range(n):
        out.append((digits[i] >> s) |
                   ((digits[i + 1] << (WORD_SIZE - s)) & WORD_MASK))
    return out


class Ordering(Enum):
    Less = -1
    Equal = 0
    Greater = 1


@functools.total_ordering
class Natural:
    """Natural - unsigned integer of unbounded size

    digits: tuple[int, ...]
        WORD_SIZE-bit words, least-significant first, normalized.
    """
    __slots__ = "digits",

    def __init__(self, digits=(0,)):
        digits = list(digits)
        for d in digits:
            assert 0 <= d <= WORD_MASK, f"digit out of range: {d:#x}"
        self.digits = _normalize(digits)

    @classmethod
    def zero(cls):
        return cls((0,))

    @classmethod
    def one(cls):
        return cls((1,))

    @classmethod
    def from_int(cls, value):
        if value < 0:
            raise ValueError(f"Natural can't hold negative value {value}")
        digits = []
        while value:
            digits.append(value & WORD_MASK)
            value >>= WORD_SIZE
        return cls(digits)

    def __int__(self):
        value = 0
        for d in reversed(self.digits):
            value = value << WORD_SIZE | d
        return value

    def __len__(self):
        return len(self.digits)

    @property
    def is_zero(self):
        return self.digits == (0,)

    @property
    def is_one(self):
        return self.digits == (1,)

    def bit_length(self):
        return (len(self.digits) - 1) * WORD_SIZE + \
            self.digits[-1].bit_length()

    def __repr__(self):
        return f"Natural({int(self):#x})"

    def __hash__(self):
        return hash(self.digits)

    def __eq__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.digits == other.digits

    def __lt__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.compare(other) is Ordering.Less

    def compare(self, other):
        """ digit count first, then digits from most significant down.
        only valid because both sides are normalized.
        """
        a, b = self.digits, other.digits
        if len(a) != len(b):
            return Ordering.Less if len(a) < len(b) else Ordering.Greater
        for x, y in zip(reversed(a), reversed(b)):
            if x != y:
                return Ordering.Less if x < y else Ordering.Greater
        return Ordering.Equal

    def add(self, other):
        a, b = self.digits, other.digits
        if len(a) < len(b):
            a, b = b, a
        out = []
        carry = 0
        for i, x in enumerate(a):
            y = b[i] if i < len(b) else 0
            s, carry = adde(x, y, carry)
            out.append(s)
        if carry:
            out.append(carry)
        return Natural(out)

    def subtract(self, other):
        if self.compare(other) is Ordering.Less:
            raise NaturalUnderflowError(self, other)
        a, b = self.digits, other.digits
        out = []
        borrow = 0
        for i, x in enumerate(a):
            y = b[i] if i < len(b) else 0
            d, borrow = subfe(x, y, borrow)
            out.append(d)
        assert borrow == 0, "borrow out of subtraction after compare"
        return Natural(out)

    def multiply(self, other):
        """ schoolbook multiply: one row of partial products per word of
        `self`, each accumulated into the result with a one-word carry.
        """
        a, b = self.digits, other.digits
        if self.is_zero or other.is_zero:
            return Natural.zero()
        y = [0] * (len(a) + len(b))
        for i, x in enumerate(a):
            if x == 0:
                continue
            t = 0  # use t as a 64-bit carry
            for j, d in enumerate(b):
                y[i + j], t = maddedu(x, d, y[i + j] + t)
            y[i + len(b)] = t
        return Natural(y)

    def divmod(self, other):
        """ returns (quotient, remainder), raises ZeroDivisionError """
        return DivModKnuthAlgorithmD(other).divmod(self)

    def __add__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.multiply(other)

    def __divmod__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.divmod(other)

    def __floordiv__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.divmod(other)[0]

    def __mod__(self, other):
        if not isinstance(other, Natural):
            return NotImplemented
        return self.divmod(other)[1]


class DivModKnuthAlgorithmD:
    """ long division by one fixed divisor using Knuth's Algorithm D
    (TAOCP vol. 2, 4.3.1).

    the normalization of the divisor (step D1) depends only on the divisor,
    so it is done once and reused for every dividend passed to `divmod`.
    """

    def __init__(self, divisor):
        if divisor.is_zero:
            raise ZeroDivisionError("Natural division by zero")
        self.divisor = divisor

    @cached_property
    def shift(self):
        # count leading zeros of the top divisor word
        return WORD_SIZE - self.divisor.digits[-1].bit_length()

    @cached_property
    def vn(self):
        # normalized divisor, top word has its msb set
        v = self.divisor.digits
        vn = _shift_left(v, self.shift)
        assert vn[-1] == 0, "normalized divisor grew"
        return tuple(vn[:len(v)])

    def divmod(self, dividend):
        u = dividend.digits
        v = self.divisor.digits
        m = len(u)
        n = len(v)

        if n == 1:
            # Algorithm D requires the divisor to have length >= 2,
            # handle single-word divisors separately
            q = [0] * m
            t = 0
            for i in reversed(range(m)):
                q[i], t, overflow = divmod2du(u[i], v[0], t)
                assert not overflow
            return Natural(q), Natural((t,))

        if m < n:
            # dividend < divisor
            return Natural.zero(), dividend

        return self._algorithm_d(u)

    def _algorithm_d(self, u):
        s = self.shift
        vn = self.vn
        m = len(u)
        n = len(vn)

        # Step D1: normalize, un has one more word than u
        un = _shift_left(u, s)
        q = [0] * (m - n + 1)

        # Step D2 and Step D7: loop
        for j in range(m - n, -1, -1):
            # Step D3: calculate q̂
            qhat, rhat, overflow = divmod2du(un[j + n - 1], vn[n - 1],
                                             un[j + n])
            if overflow:
                # only happens when un[j + n] == vn[n - 1].  q̂ saturates to
                # the largest word, and r̂ may then need more than one word
                assert un[j + n] == vn[n - 1]
                rhat = (un[j + n] << WORD_SIZE | un[j + n - 1]) - \
                    qhat * vn[n - 1]
            while rhat >> WORD_SIZE == 0:
                if qhat * vn[n - 2] <= (rhat << WORD_SIZE | un[j + n - 2]):
                    break
                qhat -= 1
                rhat += vn[n - 1]

            # Step D4: multiply and subtract
            carry = 0
            borrow = 0
            for i in range(n):
                product, carry = maddedu(qhat, vn[i], carry)
                un[j + i], borrow = subfe(un[j + i], product, borrow)
            un[j + n], borrow = subfe(un[j + n], carry, borrow)

            # Step D5: test remainder
            if borrow:
                # Step D6: add back
                qhat -= 1
                carry = 0
                for i in range(n):
                    un[j + i], carry = adde(un[j + i], vn[i], carry)
                un[j + n] = (un[j + n] + carry) & WORD_MASK

            q[j] = qhat

        # Step D8: un-normalize
        assert un[n] == 0, "remainder wider than divisor"
        r = _shift_right(un, s, n)
        return Natural(q), Natural(r)
