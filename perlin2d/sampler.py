# sampler.py - smoothed value noise at a real coordinate
from __future__ import annotations
import numpy as np

from .lattice import lattice_block, to_lattice
from .smoothing import interpolate

DIAG_WEIGHT = 0.0625
EDGE_WEIGHT = 0.125
CENTER_WEIGHT = 0.25


def smoothed_corners(block: np.ndarray) -> np.ndarray:
    """Apply the 3x3 smoothing kernel to a 4x4 hash block.

    Returns a 2x2 array ``[[x0y0, x1y0], [x0y1, x1y1]]``: entry ``[cy, cx]`` is
    the kernel centred on block cell ``(cx+1, cy+1)``.  Sums are grouped as
    diagonals, then edges (left, right, up, down), then centre.
    """
    diag = block[0:2, 0:2] + block[0:2, 2:4] + block[2:4, 0:2] + block[2:4, 2:4]
    edge = block[1:3, 0:2] + block[1:3, 2:4] + block[0:2, 1:3] + block[2:4, 1:3]
    return DIAG_WEIGHT * diag + EDGE_WEIGHT * edge + CENTER_WEIGHT * block[1:3, 1:3]


def get_value(x: float, y: float) -> float:
    """Value noise at ``(x, y)``.

    The integer part truncates toward zero while the fraction is measured from
    ``floor``, so for ``-1 < x < 0`` the cell is that of ``x + 1``.  NaN and
    Inf coordinates yield NaN rather than raising.
    """
    x_int = to_lattice(x)
    y_int = to_lattice(y)
    with np.errstate(invalid="ignore"):
        x_frac = float(x - np.floor(x))
        y_frac = float(y - np.floor(y))

    corners = smoothed_corners(lattice_block(x_int, y_int))
    x0y0, x1y0 = float(corners[0, 0]), float(corners[0, 1])
    x0y1, x1y1 = float(corners[1, 0]), float(corners[1, 1])

    v1 = interpolate(x0y0, x1y0, x_frac)  # along x at y
    v2 = interpolate(x0y1, x1y1, x_frac)  # along x at y+1
    return interpolate(v1, v2, y_frac)
