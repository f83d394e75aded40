# snckit

Number-crunching building blocks for a slash-number calculator, in plain
Python with no dependencies:

- `snckit.int96`: `Int96`, an immutable two's-complement 96-bit integer.
  Arithmetic (`+`, `-`, `*`, `/`, unary `-`, `~`) wraps modulo 2**96; it
  also offers shifts, `&`, `|`, `^`, comparisons, `get_bit`/`set_bit`
  (bit 0 is the most significant), `is_zero`, `is_negative`,
  `is_positive`, `negate`, `modulus`, the fixed-point helpers `mul_div95`
  and `div_3`, and cube roots with `cbrt` (Newton refinement of an
  estimate) and `icbrt` (bitwise integer cube root). Build one from an
  `int` or from its words with `Int96.from_parts(hi, mid, lo)`.
- `snckit.int96text`: `format_hex`, `format_binary` and `format_decimal`,
  and the matching `parse_hex` (up to 24 digits), `parse_binary` (up to
  96 digits) and `parse_decimal` (up to 29 digits, optional `-`). Bad
  input raises `ValueError`.
- `snckit.itoa`: left-justified decimal text with `itoa` (64-bit or signed
  96-bit values, `-` prefix for negatives) and `itoa_padded` (64-bit
  values behind a two-character prefix, `"  "` or `" -"`). Out-of-range
  values raise `OverflowError`.
- `snckit.fixposit`: `to_ratio_8` decodes an 8-bit posit-style code into
  a `Ratio8(num, denom)`.
- `snckit.timerone`: `avr_period`, `attiny85_period` and `teensy_period`
  pick the Timer1 clock prescaler for a period in microseconds and return
  a `TimerPeriod(clock_select_bits, pwm_period)`; `pwm_duty` gives the
  compare value for a duty out of 1024.

## Install

    pip install .

## Examples

```python
from snckit.int96 import Int96
from snckit.int96text import format_decimal, format_hex, parse_hex
from snckit.itoa import itoa, itoa_padded

big = Int96(10**18) * Int96(7)
print(format_decimal(big))       # 7000000000000000000
print(format_hex(Int96(-1)))     # ffffffffffffffffffffffff
print(int(parse_hex("ff")))      # 255
print(itoa(-42))                 # -42
print(repr(itoa_padded(42)))     # '  42'
```

```python
from snckit.fixposit import to_ratio_8

print(to_ratio_8(63))            # Ratio8(num=100, denom=100)
print(to_ratio_8(64))            # Ratio8(num=100, denom=99)
```

```python
from snckit.timerone import avr_period, pwm_duty

period = avr_period(1000, 16_000_000)
print(period)                    # TimerPeriod(clock_select_bits=1, pwm_period=8000)
print(pwm_duty(period.pwm_period, 512))   # 4000
```

## What it does not do

snckit only computes. It talks to no hardware: it has no sensor drivers,
no bus access, no pin tables and does not program timer registers; the
Timer1 functions only work out the values you would write. It has no
command-line program.

## Tests

    pip install .[test]
    pytest