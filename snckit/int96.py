"""Fixed-width 96-bit two's complement integer."""

from __future__ import annotations

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1
_MASK96 = (1 << 96) - 1
_SIGN_BIT = 1 << 95


class Int96:
    """A 96-bit two's complement integer held as three 32-bit words.

    Arithmetic wraps modulo 2**96. Values are immutable: every operation
    returns a new instance.
    """

    __slots__ = ("_bits",)

    def __init__(self, value: int | Int96 = 0) -> None:
        if isinstance(value, Int96):
            self._bits = value._bits
        elif isinstance(value, int):
            self._bits = value & _MASK96
        else:
            raise TypeError(f"cannot build Int96 from {type(value).__name__}")

    @classmethod
    def from_parts(cls, hi: int, mid: int, lo: int) -> Int96:
        """Build a value from its high, middle and low 32-bit words."""
        for word in (hi, mid, lo):
            if not 0 <= word <= _MASK32:
                raise ValueError(f"word {word!r} does not fit in 32 bits")
        return cls((hi << 64) | (mid << 32) | lo)

    @property
    def hi(self) -> int:
        return (self._bits >> 64) & _MASK32

    @property
    def mid(self) -> int:
        return (self._bits >> 32) & _MASK32

    @property
    def lo(self) -> int:
        return self._bits & _MASK32

    @property
    def unsigned(self) -> int:
        """The raw 96 bits as a non-negative integer."""
        return self._bits

    def __repr__(self) -> str:
        return f"Int96({int(self)})"

    def __hash__(self) -> int:
        return hash(self._bits)

    def __int__(self) -> int:
        if self._bits & _SIGN_BIT:
            return self._bits - (1 << 96)
        return self._bits

    # arithmetic

    def __add__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits + value._bits)

    def __sub__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits - value._bits)

    def __neg__(self) -> Int96:
        return self.negate()

    def __invert__(self) -> Int96:
        return Int96(~self._bits)

    def __mul__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits * value._bits)

    def __truediv__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self.modulus(value)

    # comparison

    def __eq__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self._bits == value._bits

    def __gt__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self._greater(value)

    def __ge__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self._greater(value) or self._bits == value._bits

    def __lt__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self._less(value)

    def __le__(self, other: object) -> bool:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return self._less(value) or self._bits == value._bits

    def _greater(self, other: Int96) -> bool:
        # Word-wise comparison: exact across signs and for non-negative pairs.
        if self.is_positive():
            if other.is_negative():
                return True
        elif other.is_positive():
            return False
        if self.hi > other.hi:
            return self.is_positive()
        if self.hi == other.hi:
            if self.mid > other.mid:
                return self.is_positive()
            if self.mid == other.mid:
                return self.lo > other.lo and self.is_positive()
            return self.is_negative()
        return self.is_negative()

    def _less(self, other: Int96) -> bool:
        if self.is_negative():
            if other.is_positive():
                return True
        elif other.is_negative():
            return False
        if self.hi < other.hi:
            return self.is_positive()
        if self.hi == other.hi:
            if self.mid < other.mid:
                return self.is_positive()
            if self.mid == other.mid:
                return self.lo < other.lo and self.is_positive()
        return self.is_negative()

    # bit operations

    def __lshift__(self, shift: int) -> Int96:
        _check_shift(shift)
        return Int96(self._bits << shift) if shift < 96 else Int96(0)

    def __rshift__(self, shift: int) -> Int96:
        _check_shift(shift)
        return Int96(self._bits >> shift) if shift < 96 else Int96(0)

    def __and__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits & value._bits)

    def __or__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits | value._bits)

    def __xor__(self, other: object) -> Int96:
        value = _coerce(other)
        if value is None:
            return NotImplemented
        return Int96(self._bits ^ value._bits)

    def get_bit(self, index: int) -> bool:
        """Return bit ``index``, counting from the most significant bit (0)."""
        _check_bit_index(index)
        return bool((self._bits >> (95 - index)) & 1)

    def set_bit(self, index: int, value: bool) -> Int96:
        """Return a copy with bit ``index`` (0 = most significant) set or cleared."""
        _check_bit_index(index)
        mask = 1 << (95 - index)
        return Int96(self._bits | mask if value else self._bits & ~mask)

    # predicates

    def is_zero(self) -> bool:
        return self._bits == 0

    def is_negative(self) -> bool:
        return bool(self._bits & _SIGN_BIT)

    def is_positive(self) -> bool:
        return not self._bits & _SIGN_BIT

    def negate(self) -> Int96:
        """Return the two's complement negation."""
        return Int96(-self._bits)

    # division and fixed-point helpers

    def modulus(self, divisor: int | Int96) -> Int96:
        """Return the quotient of ``self / divisor``, truncated toward zero.

        Exact for divisors below 2**32; larger divisors are scaled down
        together with the dividend and give an approximate quotient.
        """
        value = _require(divisor)
        dividend = self.negate()._bits if self.is_negative() else self._bits
        div = value.negate()._bits if value.is_negative() else value._bits
        initial = dividend

        shift = (dividend >> 64).bit_length()
        dividend >>= shift
        small_divisor = ((div >> 32) & _MASK32) == 0
        if not small_divisor:
            div >>= shift

        quotient = 0
        if div >> 64 == 0:
            if div == 0:
                raise ZeroDivisionError("Int96 division by zero")
            quotient = (dividend & _MASK64) // div
            if small_divisor:
                quotient = (quotient << shift) & _MASK96
                remainder = (initial - div * quotient) & _MASK96
                quotient = (quotient + (remainder & _MASK64) // div) & _MASK96

        result = Int96(quotient)
        if self.is_negative() != value.is_negative():
            result = result.negate()
        return result

    def mul_div95(self, factor: int | Int96) -> Int96:
        """Return ``self * factor / 2**95`` from the upper partial products."""
        value = _require(factor)
        a = self.negate() if self.is_negative() else self
        b = value.negate() if value.is_negative() else value
        b = b + b

        ah, am, al = a.hi, a.mid, a.lo
        bh, bm, bl = b.hi, b.mid, b.lo

        sum_hi = ah * bh
        product = ah * bm
        sum_mid = product & _MASK32
        sum_hi += product >> 32
        product = ah * bl
        sum_lo = product & _MASK32
        sum_mid += product >> 32
        product = am * bh
        sum_mid += product & _MASK32
        sum_hi += product >> 32
        product = am * bm
        sum_lo += product & _MASK32
        sum_mid += product >> 32
        sum_lo += (am * bl) >> 32
        product = al * bh
        sum_lo += product & _MASK32
        sum_mid += product >> 32
        sum_lo += (al * bm) >> 32

        sum_lo &= _MASK64
        sum_mid = (sum_mid + (sum_lo >> 32)) & _MASK64
        sum_hi = (sum_hi + (sum_mid >> 32)) & _MASK64

        result = Int96.from_parts(sum_hi >> 32, sum_hi & _MASK32, sum_mid & _MASK32)
        if self.is_negative() != value.is_negative():
            result = result.negate()
        return result

    def div_3(self, value: int | Int96) -> Int96:
        """Return ``value`` scaled by this value taken as a factor of 2**95."""
        return _require(value).mul_div95(self)

    def cbrt(self, estimate: int | Int96) -> Int96:
        """Refine ``estimate`` toward the cube root of this value.

        A linear first guess is built from the estimate, followed by up to
        three Newton steps.
        """
        test = _require(estimate)
        if self.is_negative():
            negated = test.negate()
            return negated.cbrt(negated).negate()
        if test.is_zero():
            raise ValueError("cube root estimate must be non-zero")

        shift = 63
        while test.hi < 0x10000000:
            shift += 1
            test <<= 3
        test = test.mul_div95(_CBRT_SLOPE) + _CBRT_OFFSET
        test >>= shift

        for _ in range(3):
            quotient = self / (test * test)
            if quotient.lo == test.lo:
                break
            test = (test + test + quotient).mul_div95(_ONE_THIRD)
        return test

    def icbrt(self) -> Int96:
        """Return the integer cube root by bitwise search; zero for negatives."""
        if self.is_negative():
            return Int96(0)
        root = 0
        add = 1 << 31
        while add:
            candidate = root + add
            cube = Int96(candidate * candidate) * Int96(candidate)
            if self >= cube:
                root = candidate
            add >>= 1
        return Int96(root)


def _coerce(value: object) -> Int96 | None:
    if isinstance(value, Int96):
        return value
    if isinstance(value, int):
        return Int96(value)
    return None


def _require(value: object) -> Int96:
    result = _coerce(value)
    if result is None:
        raise TypeError(f"expected Int96 or int, got {type(value).__name__}")
    return result


def _check_shift(shift: int) -> None:
    if shift < 0:
        raise ValueError("shift count must be non-negative")


def _check_bit_index(index: int) -> None:
    if not 0 <= index < 96:
        raise IndexError(f"bit index {index} out of range 0..95")


_CBRT_SLOPE = Int96.from_parts(1029864972, 0, 0)
_CBRT_OFFSET = Int96.from_parts(772398729, 0, 0)
_ONE_THIRD = Int96.from_parts(0x2AAAAAAA, 0xAB000000, 0)