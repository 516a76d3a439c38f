# lattice.py - integer lattice hash with 32-bit wraparound arithmetic
from __future__ import annotations
import math
import numpy as np

INT32_MIN = -2147483648
INT32_MAX = 2147483647

# 1 / 2**30, maps the 31-bit masked hash into (-1, 1]
HASH_NORM = 0.931322574615478515625e-9


def to_lattice(v: float) -> int:
    """Truncate a real coordinate toward zero onto the int32 lattice.

    Behaves like a saturating float -> int32 cast: out-of-range values clamp
    to the int32 limits and NaN maps to 0, so this never raises.
    """
    if math.isnan(v):
        return 0
    if v >= INT32_MAX:
        return INT32_MAX
    if v <= INT32_MIN:
        return INT32_MIN
    return int(v)


def _as_int32(v) -> np.ndarray:
    # int64 -> int32 cast wraps modulo 2**32
    return np.atleast_1d(np.asarray(v, dtype=np.int64)).astype(np.int32)


def lattice_noise(x, y):
    """Hash lattice point(s) ``(x, y)`` to pseudo-random value(s) in [-1, 1].

    ``x`` and ``y`` may be ints or integer arrays; they are broadcast against
    each other.  Every intermediate is an int32 and wraps on overflow.
    """
    scalar = np.ndim(x) == 0 and np.ndim(y) == 0
    xi, yi = _as_int32(x), _as_int32(y)
    with np.errstate(over="ignore"):
        n = xi + yi * np.int32(57)
        n = (n << np.int32(13)) ^ n
        t = (n * (n * n * np.int32(15731) + np.int32(789221)) + np.int32(1376312589)) & np.int32(0x7FFFFFFF)
    out = 1.0 - t.astype(np.float64) * HASH_NORM
    if scalar:
        return float(out[0])
    return out


def lattice_block(x_int: int, y_int: int) -> np.ndarray:
    """Hash the 4x4 block of lattice points from ``(x_int-1, y_int-1)`` to
    ``(x_int+2, y_int+2)``.  ``block[j, i]`` holds offset ``(i-1, j-1)``."""
    offsets = np.arange(-1, 3, dtype=np.int64)
    return lattice_noise((x_int + offsets)[None, :], (y_int + offsets)[:, None])
