# perlin2d/__init__.py
# Deterministic 2D fractal value noise for terrain and textures

from .lattice import lattice_noise, lattice_block, to_lattice
from .smoothing import interpolate
from .sampler import get_value, smoothed_corners
from .fractal import total
from .config import NoiseConfig
from .noise import create, sample

__all__ = [
    "lattice_noise", "lattice_block", "to_lattice",
    "interpolate",
    "get_value", "smoothed_corners",
    "total",
    "NoiseConfig",
    "create", "sample",
]
