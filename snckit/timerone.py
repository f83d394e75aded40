"""Prescaler and period selection for the 16-bit Timer1.

Each function works out which clock prescaler a timer has to use so that a
period in microseconds fits its counter. It returns the clock-select bits
and the counter top value (the PWM period). Three timer variants are
supported: AVR megas, the 8-bit Timer1 of the ATtiny85, and the FTM1 of
Teensy 3.x boards.
"""

from __future__ import annotations

from dataclasses import dataclass

_ULONG_MASK = 0xFFFFFFFF

AVR_RESOLUTION = 65536
ATTINY85_RESOLUTION = 256
TEENSY_RESOLUTION = 32768

# AVR TCCR1B clock-select bit positions.
_CS10 = 1 << 0
_CS11 = 1 << 1
_CS12 = 1 << 2

# ATtiny85 TCCR1 clock-select bit positions.
_T_CS10 = 1 << 0
_T_CS11 = 1 << 1
_T_CS12 = 1 << 2
_T_CS13 = 1 << 3

_AVR_STEPS = (
    (1, _CS10),
    (8, _CS11),
    (64, _CS11 | _CS10),
    (256, _CS12),
    (1024, _CS12 | _CS10),
)

_ATTINY85_STEPS = (
    (1, _T_CS10),
    (2, _T_CS11),
    (4, _T_CS11 | _T_CS10),
    (8, _T_CS12),
    (16, _T_CS12 | _T_CS10),
    (32, _T_CS12 | _T_CS11),
    (64, _T_CS12 | _T_CS11 | _T_CS10),
    (128, _T_CS13),
    (256, _T_CS13 | _T_CS10),
    (512, _T_CS13 | _T_CS11),
    (1024, _T_CS13 | _T_CS11 | _T_CS10),
    (2048, _T_CS13 | _T_CS12),
    (4096, _T_CS13 | _T_CS12 | _T_CS10),
    (8192, _T_CS13 | _T_CS12 | _T_CS11),
    (16384, _T_CS13 | _T_CS12 | _T_CS11 | _T_CS10),
)

_TEENSY_STEPS = tuple((1 << shift, shift) for shift in range(8))


@dataclass(frozen=True)
class TimerPeriod:
    """Clock-select bits and counter top value for one timer period."""

    clock_select_bits: int
    pwm_period: int


def _check_microseconds(microseconds: int) -> None:
    if microseconds < 0:
        raise ValueError("period in microseconds must be non-negative")


def _select(cycles: int, resolution: int, steps) -> TimerPeriod:
    for prescale, bits in steps:
        if cycles < resolution * prescale:
            return TimerPeriod(bits, cycles // prescale)
    # Longer than the largest prescaler can reach: clamp to the maximum.
    return TimerPeriod(steps[-1][1], resolution - 1)


def avr_period(microseconds: int, f_cpu: int = 16_000_000) -> TimerPeriod:
    """Select prescaler and period for Timer1 of an AVR mega.

    The counter runs in phase and frequency correct mode, so one period
    counts up and down; the cycle count wraps as a 32-bit unsigned value.
    """
    _check_microseconds(microseconds)
    cycles = (((f_cpu // 100_000) * microseconds) & _ULONG_MASK) // 20
    return _select(cycles, AVR_RESOLUTION, _AVR_STEPS)


def attiny85_period(microseconds: int, f_cpu: int) -> TimerPeriod:
    """Select prescaler and period for the 8-bit Timer1 of an ATtiny85."""
    _check_microseconds(microseconds)
    ratio = f_cpu // 1_000_000
    if not 0 <= ratio <= 0xFF:
        raise ValueError("clock frequency gives a cycles-per-microsecond above 255")
    cycles = (microseconds * ratio) & _ULONG_MASK
    return _select(cycles, ATTINY85_RESOLUTION, _ATTINY85_STEPS)


def teensy_period(microseconds: int, f_timer: int) -> TimerPeriod:
    """Select prescaler and period for FTM1 of a Teensy 3.x board.

    The clock-select bits are the prescaler's power of two; only 15 bits of
    the counter are used.
    """
    _check_microseconds(microseconds)
    cycles = ((f_timer // 2_000_000) * microseconds) & _ULONG_MASK
    return _select(cycles, TEENSY_RESOLUTION, _TEENSY_STEPS)


def pwm_duty(pwm_period: int, duty: int) -> int:
    """Return the compare value for ``duty`` out of 1024 of ``pwm_period``."""
    if pwm_period < 0 or duty < 0:
        raise ValueError("period and duty must be non-negative")
    return ((pwm_period * duty) & _ULONG_MASK) >> 10