# ==============================================================================
# Файл: terrain_engine/numerics/perlin.py
# Назначение: Классический градиентный шум Перлина (improved, таблица перестановок).
# Сид шума не зависит от сида террейна.
# ==============================================================================
from __future__ import annotations
import math
import random

import numpy as np
from numba import njit, prange


def make_permutation(noise_seed: int = 0) -> np.ndarray:
    """Таблица перестановок 0..255, перемешанная сидом и удвоенная до 512."""
    p = list(range(256))
    random.Random(int(noise_seed)).shuffle(p)
    return np.array(p + p, dtype=np.int64)


@njit(inline='always', cache=True)
def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(inline='always', cache=True)
def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@njit(inline='always', cache=True)
def _grad(h: int, x: float, y: float) -> float:
    # 4 диагональных градиента
    h = h & 3
    a = -x if (h & 1) != 0 else x
    b = -y if (h & 2) != 0 else y
    return a + b


@njit(cache=True)
def perlin_noise_2d(x: float, y: float, perm: np.ndarray) -> float:
    """
    Значение шума в точке (x, y), отображённое в [0, 1].

    Сырой результат градиентного шума лежит примерно в [-1, 1];
    переводим его в [0, 1] и обрезаем края.
    """
    xf0 = math.floor(x)
    yf0 = math.floor(y)
    xi = int(xf0) & 255
    yi = int(yf0) & 255
    xf = x - xf0
    yf = y - yf0
    u = _fade(xf)
    v = _fade(yf)

    aa = perm[perm[xi] + yi]
    ab = perm[perm[xi] + yi + 1]
    ba = perm[perm[xi + 1] + yi]
    bb = perm[perm[xi + 1] + yi + 1]

    x1 = _lerp(_grad(aa, xf, yf), _grad(ba, xf - 1.0, yf), u)
    x2 = _lerp(_grad(ab, xf, yf - 1.0), _grad(bb, xf - 1.0, yf - 1.0), u)
    n = _lerp(x1, x2, v)

    val = (n + 1.0) * 0.5
    if val < 0.0:
        return 0.0
    if val > 1.0:
        return 1.0
    return val


@njit(cache=True, parallel=True)
def perlin_octave_stack(
        norm_x: np.ndarray,
        norm_z: np.ndarray,
        offsets: np.ndarray,
        noise_scale: float,
        lacunarity: float,
        perm: np.ndarray,
) -> np.ndarray:
    """
    Шум [0..1] для каждой октавы и каждого узла сетки.

    Returns:
        Массив (octaves, len(norm_x), len(norm_z)).
    """
    octaves = offsets.shape[0]
    W = norm_x.shape[0]
    D = norm_z.shape[0]
    out = np.empty((octaves, W, D), dtype=np.float64)
    for i in prange(W):
        for j in range(D):
            freq = 1.0
            for o in range(octaves):
                sx = norm_x[i] / noise_scale * freq + offsets[o, 0]
                sz = norm_z[j] / noise_scale * freq + offsets[o, 1]
                out[o, i, j] = perlin_noise_2d(sx, sz, perm)
                freq *= lacunarity
    return out
