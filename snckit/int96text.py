"""Text conversion for 96-bit integers: hex, binary and decimal."""

from __future__ import annotations

from .int96 import Int96

_HEX_DIGITS = "0123456789abcdefABCDEF"
_MAX_BINARY_LENGTH = 96
_MAX_HEX_LENGTH = 24
_MAX_DECIMAL_LENGTH = 29


def format_hex(value: int | Int96, leading_zeros: bool = True) -> str:
    """Format the raw 96 bits as lower-case hex, word by word.

    Without leading zeros, a zero word is left out entirely and a non-zero
    word is padded to eight digits only when a higher word was non-zero.
    """
    number = Int96(value)
    if leading_zeros:
        return f"{number.hi:08x}{number.mid:08x}{number.lo:08x}"

    parts = []
    if number.hi:
        parts.append(f"{number.hi:x}")
    if number.mid:
        parts.append(f"{number.mid:08x}" if number.hi else f"{number.mid:x}")
    if number.lo:
        padded = number.hi or number.mid
        parts.append(f"{number.lo:08x}" if padded else f"{number.lo:x}")
    return "".join(parts) or "0"


def format_binary(value: int | Int96, leading_zeros: bool = True) -> str:
    """Format the raw 96 bits as a string of ones and zeros."""
    number = Int96(value)
    if leading_zeros:
        return format(number.unsigned, "096b")
    return format(number.unsigned, "b")


def format_decimal(value: int | Int96) -> str:
    """Format the signed value in decimal."""
    number = int(Int96(value))
    if number < 0:
        return "-" + str(-number)
    return str(number)


def parse_binary(text: str) -> Int96:
    """Parse up to 96 binary digits; surrounding whitespace is ignored."""
    digits = text.strip()
    if len(digits) > _MAX_BINARY_LENGTH:
        raise ValueError("binary string is too long for conversion")
    result = Int96(0)
    for position, char in enumerate(reversed(digits)):
        if char == "1":
            result = result.set_bit(95 - position, True)
        elif char != "0":
            raise ValueError("binary string must contain only 1's and 0's")
    return result


def parse_hex(text: str) -> Int96:
    """Parse up to 24 hex digits; surrounding whitespace is ignored."""
    digits = text.strip()
    if len(digits) > _MAX_HEX_LENGTH:
        raise ValueError("hex string is too long for conversion")
    result = Int96(0)
    for char in digits:
        if char not in _HEX_DIGITS:
            raise ValueError("hex string must contain only hex digits")
        result = (result << 4) + int(char, 16)
    return result


def parse_decimal(text: str) -> Int96:
    """Parse an optionally negative decimal of up to 29 digits.

    Values beyond 96 bits wrap around, as the arithmetic does.
    """
    digits = text.strip()
    negative = digits.startswith("-")
    if negative:
        digits = digits[1:].lstrip()
    if len(digits) > _MAX_DECIMAL_LENGTH:
        raise ValueError("decimal string is too long for conversion")
    result = Int96(0)
    for char in digits:
        if not "0" <= char <= "9":
            raise ValueError("decimal string must contain only digits 0 to 9")
        result = result * 10 + (ord(char) - ord("0"))
    return result.negate() if negative else result