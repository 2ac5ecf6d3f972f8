"""Arbitrary-precision arithmetic context for the restart test.

Binomial coefficients for n=1000 reach ~1e299 while probability powers
drop below 1e-600. mpmath floats carry an unbounded exponent, so only the
mantissa width needs budgeting; 2000 decimal digits leaves ample headroom.
"""

from __future__ import annotations

import mpmath
from mpmath import mpf

DEFAULT_DIGITS = 2000


def working_precision(digits: int = DEFAULT_DIGITS):
    """Context manager that runs the enclosed block at *digits* decimal digits.

    The previous mpmath precision is restored on exit.
    """
    if digits < 1:
        raise ValueError(f"digits must be >= 1, got {digits}")
    return mpmath.workdps(digits)


def symbol_probability(h_i: float) -> mpf:
    """Worst-case symbol probability p = 2^-H_I at the current precision."""
    if h_i <= 0:
        raise ValueError(f"H_I must be > 0, got {h_i}")
    return mpf(2) ** (-mpf(h_i))


def format_mpf(x: mpf, digits: int = 12) -> str:
    return mpmath.nstr(x, digits)
