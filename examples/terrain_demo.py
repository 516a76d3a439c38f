#!/usr/bin/env python3
"""
Terrain Demonstration

Prints a small ASCII height map by sampling the noise field cell by cell,
then shows how changing the seed reshapes the terrain.
"""

import os
import sys
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from perlin2d import create, sample

RAMP = " .:-=+*#%@"


def render(cfg, width=64, height=24, step=4.0):
    """Return the height map as lines of ASCII shading."""
    rows = []
    values = [[sample(cfg, q * step, r * step) for q in range(width)] for r in range(height)]
    lo = min(min(row) for row in values)
    hi = max(max(row) for row in values)
    span = max(hi - lo, 1e-9)
    for row in values:
        rows.append("".join(RAMP[int((v - lo) / span * (len(RAMP) - 1))] for v in row))
    return rows, lo, hi


def demonstrate_terrain():
    cfg = create(octaves=4, amplitude=1.0, frequency=1.0, persistence=0.5,
                 lacunarity=2.0, scale=(40.0, 40.0), bias=0.0, seed=101)
    for seed in (101, 202):
        cfg.seed = seed
        rows, lo, hi = render(cfg)
        print(f"seed={seed} range=[{lo:.3f}, {hi:.3f}]")
        print("\n".join(rows))
        print()


if __name__ == "__main__":
    demonstrate_terrain()
