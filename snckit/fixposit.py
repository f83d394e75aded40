"""Decoding of 8-bit posit-style codes into small ratios."""

from __future__ import annotations

from dataclasses import dataclass

_NUM = (100,) * 5 + (80,) * 4 + (60,) * 53 + (64, 64)
_DENOM = (100, 99, 98, 97, 96, 76, 75, 74, 73) + tuple(range(54, -1, -1))


@dataclass(frozen=True)
class Ratio8:
    """A signed ratio ``num / denom`` with 8-bit parts."""

    num: int
    denom: int


def _int8(value: int) -> int:
    return (value + 128) % 256 - 128


def to_ratio_8(value: int) -> Ratio8:
    """Decode an unsigned 8-bit code into its ratio.

    Codes whose regime falls outside the table decode to ``0 / 0``.
    """
    if not 0 <= value <= 255:
        raise ValueError(f"code {value!r} is not an 8-bit value")

    number = _int8(value)
    part = value >> 6
    x_high = part in (1, 2)
    if part >= 2:
        regime = _int8(_int8(-number) - 65)
    else:
        regime = _int8(number - 63)
    fraction = abs(regime)

    num = denom = 0
    if fraction < 64:
        if x_high:
            num, denom = _NUM[fraction], _DENOM[fraction]
        else:
            num, denom = _DENOM[fraction], _NUM[fraction]

    if number < 0:
        num = -num
    return Ratio8(num, denom)