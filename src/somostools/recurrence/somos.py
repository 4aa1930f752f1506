"""Generalized Somos recurrence evaluated in IEEE-754 double precision.

The buffer is a fixed-length float64 array. Indices 0..s-1 hold the seed
value 1.0, index n >= s is written once by somos_step.

Division by zero and overflow follow IEEE rules (inf / NaN) instead of
raising, which is why the arithmetic runs on numpy float64 scalars.
"""
from __future__ import annotations

from typing import Tuple

import numpy as np

FractionPair = Tuple[float, float]

SEED_VALUE = 1.0


def new_buffer(s: int, length: int) -> np.ndarray:
    """
    Allocate a Somos-s buffer of the given length with seeds 0..s-1 set to 1.0.
    """
    if s < 1:
        raise ValueError("s must be >= 1.")
    if length <= s:
        raise ValueError(f"buffer length must exceed s (got length={length}, s={s}).")
    buf = np.zeros(length, dtype=np.float64)
    buf[:s] = SEED_VALUE
    return buf


def _check_index(s: int, n: int, buf: np.ndarray) -> None:
    # Negative indices would wrap around instead of failing.
    if s < 1:
        raise ValueError("s must be >= 1.")
    if n < s or n >= len(buf):
        raise ValueError(f"index n={n} out of range for s={s}, buffer length {len(buf)}.")


def somos_step(s: int, n: int, buf: np.ndarray) -> FractionPair:
    """
    Compute buf[n] with the Somos-s recurrence:

      buf[n] = sum_{i=1}^{floor(s/2)} buf[n-i] * buf[n-(s-i)]  /  buf[n-s]

    Returns the (dividend, divisor) pair that produced buf[n].
    For s = 1 the sum is empty and the dividend is 0.0.
    """
    _check_index(s, n, buf)
    with np.errstate(all="ignore"):
        dividend = np.float64(0.0)
        for i in range(1, s // 2 + 1):
            dividend += buf[n - i] * buf[n - (s - i)]
        divisor = buf[n - s]
        buf[n] = dividend / divisor
    return float(dividend), float(divisor)


def somos4_step(n: int, buf: np.ndarray) -> FractionPair:
    """
    Classic Somos-4: buf[n] = (buf[n-1]*buf[n-3] + buf[n-2]^2) / buf[n-4].

    Same arithmetic order as somos_step(4, n, buf); kept as a reference.
    """
    _check_index(4, n, buf)
    a1, a2, a3, a4 = buf[n - 1], buf[n - 2], buf[n - 3], buf[n - 4]
    with np.errstate(all="ignore"):
        dividend = a1 * a3 + a2 * a2
        buf[n] = dividend / a4
    return float(dividend), float(a4)
