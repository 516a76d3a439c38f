# smoothing.py - cubic smoothstep blend between two values
from __future__ import annotations


def interpolate(x: float, y: float, a: float) -> float:
    """Blend ``x`` and ``y`` with smoothstep weights for ``1-a`` and ``a``."""
    neg_a = 1.0 - a
    neg_a_sqr = neg_a * neg_a
    fac1 = 3.0 * neg_a_sqr - 2.0 * (neg_a_sqr * neg_a)
    a_sqr = a * a
    fac2 = 3.0 * a_sqr - 2.0 * (a_sqr * a)
    return x * fac1 + y * fac2
