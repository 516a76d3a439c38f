# fractal.py - octave summation (fractal Brownian motion)
from __future__ import annotations

from .sampler import get_value


def total(x: float, y: float, octaves: int, frequency: float,
          persistence: float, lacunarity: float, seed: int) -> float:
    """Sum ``octaves`` layers of value noise at ``(x, y)``.

    Amplitude starts at 1 and is multiplied by ``persistence`` per octave;
    frequency starts at ``frequency`` and is multiplied by ``lacunarity``.
    The sampler receives ``(y, x)`` transposed, both offset by ``seed``.
    Non-positive ``octaves`` gives 0.
    """
    t = 0.0
    amp = 1.0
    freq = frequency
    offset = float(seed)
    for _ in range(octaves):
        t += get_value(y * freq + offset, x * freq + offset) * amp
        amp *= persistence
        freq *= lacunarity
    return t
