"""
Default noise knobs.
A gently rolling terrain at a 100-unit zoom; safe to tweak without touching
the sampling code.
"""

from typing import Tuple

OCTAVES: int = 6             # layers of detail
AMPLITUDE: float = 10.0      # output multiplier
FREQUENCY: float = 0.5       # cycles per unit for the first octave
PERSISTENCE: float = 1.0     # amplitude multiplier per octave
LACUNARITY: float = 2.0      # frequency multiplier per octave
SCALE: Tuple[float, float] = (100.0, 100.0)  # input coords are divided by these
BIAS: float = 0.0            # added to every sample, e.g. to keep output positive
SEED: int = 101
