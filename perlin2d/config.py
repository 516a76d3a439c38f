from __future__ import annotations

"""Noise configuration value object."""

from dataclasses import dataclass
from typing import Tuple
import logging

from . import defaults

logger = logging.getLogger(__name__)


@dataclass
class NoiseConfig:
    """Tunable parameters for 2D fractal value noise.

    Every field is public and may be reassigned between samples; no
    cross-field validation happens.  Sampling never mutates the config, so one
    instance can be read by several threads as long as nobody writes to it
    meanwhile.

    * ``octaves`` - number of summed layers; ``<= 0`` makes every sample ``bias``.
    * ``amplitude`` - multiplier applied to the summed octaves.
    * ``frequency`` - cycles per unit length of the first octave.
    * ``persistence`` - per-octave amplitude multiplier.
    * ``lacunarity`` - per-octave frequency multiplier.
    * ``scale`` - ``(sx, sy)`` divisors applied to input coordinates.  A zero
      component is allowed and produces NaN/Inf samples.
    * ``bias`` - constant added to every sample.
    * ``seed`` - offset added to both sampler axes before hashing.
    """

    octaves: int = defaults.OCTAVES
    amplitude: float = defaults.AMPLITUDE
    frequency: float = defaults.FREQUENCY
    persistence: float = defaults.PERSISTENCE
    lacunarity: float = defaults.LACUNARITY
    scale: Tuple[float, float] = defaults.SCALE
    bias: float = defaults.BIAS
    seed: int = defaults.SEED

    def __post_init__(self) -> None:
        self.octaves = int(self.octaves)
        self.seed = int(self.seed)
        self.amplitude = float(self.amplitude)
        self.frequency = float(self.frequency)
        self.persistence = float(self.persistence)
        self.lacunarity = float(self.lacunarity)
        self.bias = float(self.bias)

        scale = tuple(self.scale)
        if len(scale) != 2:
            raise ValueError(f"scale must be a (sx, sy) pair, got {self.scale!r}")
        self.scale = (float(scale[0]), float(scale[1]))
        if 0.0 in self.scale:
            logger.warning("scale %r has a zero component; samples will be NaN/Inf", self.scale)

    def get_noise(self, x: float, y: float) -> float:
        """Sample the noise field at ``(x, y)``."""
        from .noise import sample  # local import, noise imports this module
        return sample(self, x, y)
