# noise.py - public sampling API: scale, octave sum, amplitude and bias
from __future__ import annotations

import logging
from typing import Tuple

import numpy as np

from .config import NoiseConfig
from .fractal import total

logger = logging.getLogger(__name__)


def create(octaves: int, amplitude: float, frequency: float,
           persistence: float, lacunarity: float, scale: Tuple[float, float],
           bias: float, seed: int) -> NoiseConfig:
    """Build a :class:`NoiseConfig` from all eight parameters."""
    config = NoiseConfig(octaves, amplitude, frequency, persistence,
                         lacunarity, scale, bias, seed)
    logger.debug("created %r", config)
    return config


def sample(config: NoiseConfig, x: float, y: float) -> float:
    """Return ``bias + amplitude * total(x / sx, y / sy)`` for ``config``.

    Pure and deterministic.  A zero scale component gives Inf/NaN
    coordinates, which propagate to a NaN result instead of raising.
    """
    sx, sy = config.scale
    with np.errstate(divide="ignore", invalid="ignore"):
        t = total(np.float64(x) / sx, np.float64(y) / sy, config.octaves,
                  config.frequency, config.persistence, config.lacunarity,
                  config.seed)
        return float(config.bias + config.amplitude * t)
