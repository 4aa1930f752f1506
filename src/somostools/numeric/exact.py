from __future__ import annotations

import math
from decimal import Decimal


def is_non_finite(x: float) -> bool:
    """Returns True iff x is NaN or +/-infinity."""
    # NaN is the only value unequal to itself
    return x != x or math.isinf(x)


def format_exact(x: float) -> str:
    """
    Render a double as the exact decimal expansion of its binary value.

    Finite values are printed in plain notation with every digit the
    64-bit representation carries, e.g. 1/3 -> "0.333333333333333314829616256247...".
    Integral values have no fractional part (2.0 -> "2").
    Non-finite values print as "Infinity", "-Infinity" or "NaN".
    """
    d = Decimal(float(x))
    if is_non_finite(x):
        return str(d)
    return format(d, "f")


def parse_exact(text: str) -> float:
    """
    Inverse of format_exact.

    Decimal -> float conversion is correctly rounded, so an exact expansion
    maps back to the identical double.
    """
    return float(Decimal(text))
