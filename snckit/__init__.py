"""96-bit integers, integer formatting, 8-bit posit ratios and Timer1 period maths for a slash-number calculator."""

__version__ = "0.1.0"