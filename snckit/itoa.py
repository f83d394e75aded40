"""Left-justified integer to decimal text conversion."""

from __future__ import annotations

from .int96 import Int96

_INT96_MIN = -(1 << 95)
_INT96_MAX = (1 << 95) - 1
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)


def _as_int(value: int | Int96) -> int:
    if isinstance(value, Int96):
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int or Int96, got {type(value).__name__}")
    return value


def itoa(value: int | Int96) -> str:
    """Return the decimal text of ``value``, left-justified.

    Negative values carry a leading ``-``; others have no prefix. Accepts
    any 64-bit signed or unsigned value and any signed 96-bit value.
    """
    number = _as_int(value)
    if not _INT96_MIN <= number <= max(_INT96_MAX, _UINT64_MAX):
        raise OverflowError(f"{number} does not fit in 96 bits")
    if number < 0:
        return "-" + str(-number)
    return str(number)


def itoa_padded(value: int) -> str:
    """Return the decimal text of ``value`` behind a two-character prefix.

    The prefix is two spaces for non-negative values and `` -`` for
    negative ones. Accepts any 64-bit signed or unsigned value.
    """
    number = _as_int(value)
    if not _INT64_MIN <= number <= _UINT64_MAX:
        raise OverflowError(f"{number} does not fit in 64 bits")
    if number < 0:
        return " -" + str(-number)
    return "  " + str(number)