# terrain_engine/numerics/simplex.py
from __future__ import annotations
import numpy as np
from opensimplex import OpenSimplex


def simplex_noise_2d(x: float, y: float, generator: OpenSimplex) -> float:
    """OpenSimplex в точке, переведённый из [-1, 1] в [0, 1]."""
    val = (generator.noise2(x, y) + 1.0) * 0.5
    return min(max(val, 0.0), 1.0)


def simplex_octave_stack(
        norm_x: np.ndarray,
        norm_z: np.ndarray,
        offsets: np.ndarray,
        noise_scale: float,
        lacunarity: float,
        generator: OpenSimplex,
) -> np.ndarray:
    """То же, что perlin_octave_stack, но на OpenSimplex (noise2array по строкам)."""
    octaves = offsets.shape[0]
    out = np.empty((octaves, norm_x.shape[0], norm_z.shape[0]), dtype=np.float64)
    freq = 1.0
    for o in range(octaves):
        sx = norm_x / noise_scale * freq + offsets[o, 0]
        sz = norm_z / noise_scale * freq + offsets[o, 1]
        # noise2array возвращает (len(y), len(x)) -> транспонируем в [x, z]
        grid = generator.noise2array(sx, sz).T
        out[o] = np.clip((grid + 1.0) * 0.5, 0.0, 1.0)
        freq *= lacunarity
    return out
