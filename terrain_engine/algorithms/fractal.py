# ==============================================================================
# Файл: terrain_engine/algorithms/fractal.py
# Назначение: Фрактальная сумма октав шума с ремапом через height_curve.
# ==============================================================================
from __future__ import annotations
from functools import lru_cache

import numpy as np
from opensimplex import OpenSimplex

from ..core.config import TerrainConfig, evaluate_curve
from ..core.constants import MIN_NOISE_SCALE, NOISE_BACKEND_SIMPLEX
from ..numerics.perlin import make_permutation, perlin_noise_2d, perlin_octave_stack
from ..numerics.simplex import simplex_noise_2d, simplex_octave_stack


@lru_cache(maxsize=8)
def _permutation(noise_seed: int) -> np.ndarray:
    perm = make_permutation(noise_seed)
    perm.setflags(write=False)
    return perm


@lru_cache(maxsize=8)
def _simplex(noise_seed: int) -> OpenSimplex:
    return OpenSimplex(seed=noise_seed)


def _check_offsets(offsets: np.ndarray, octave_count: int) -> None:
    """Смещений должно быть не меньше, чем октав; лишние строки игнорируются."""
    rows = np.shape(offsets)[0] if np.ndim(offsets) == 2 else -1
    if rows < octave_count or np.shape(offsets)[-1] != 2:
        raise ValueError(
            f"offsets must have shape (>= {octave_count}, 2), got {np.shape(offsets)}"
        )


def _safe_scale(noise_scale: float) -> float:
    # тихая защита от деления на ноль (санитайзер конфига сообщит отдельно)
    return max(float(noise_scale), MIN_NOISE_SCALE)


def noise01(x: float, y: float, config: TerrainConfig) -> float:
    """Примитив когерентного шума [0, 1] выбранного бэкенда."""
    if config.noise_backend == NOISE_BACKEND_SIMPLEX:
        return simplex_noise_2d(x, y, _simplex(config.noise_seed))
    return perlin_noise_2d(x, y, _permutation(config.noise_seed))


def _remap01(noise_value):
    # [0,1] -> [-1,1] -> [0,1] с обрезкой краёв
    bipolar = noise_value * 2.0 - 1.0
    return np.clip((bipolar + 1.0) * 0.5, 0.0, 1.0)


def sample(x: float, z: float, config: TerrainConfig, offsets: np.ndarray) -> float:
    """
    Фрактальный шум в узле (x, z), ещё без height_multiplier.

    Для октавы i координаты: norm / noise_scale * frequency + offsets[i].
    Вклад октавы: height_curve(noise) * amplitude; затем amplitude *= persistence,
    frequency *= lacunarity.
    """
    _check_offsets(offsets, config.octave_count)
    scale = _safe_scale(config.noise_scale)
    norm_x = x / config.width
    norm_z = z / config.depth

    total = 0.0
    amplitude = 1.0
    frequency = 1.0
    for i in range(config.octave_count):
        sx = norm_x / scale * frequency + offsets[i, 0]
        sz = norm_z / scale * frequency + offsets[i, 1]
        n = float(_remap01(noise01(sx, sz, config)))
        total += float(config.height_curve.evaluate(n)) * amplitude
        amplitude *= config.persistence
        frequency *= config.lacunarity
    return total


def octave_stack(config: TerrainConfig, offsets: np.ndarray) -> np.ndarray:
    """Шум [0..1] всех октав для всех узлов: (octaves, width+1, depth+1)."""
    _check_offsets(offsets, config.octave_count)
    scale = _safe_scale(config.noise_scale)
    norm_x = np.arange(config.width + 1, dtype=np.float64) / config.width
    norm_z = np.arange(config.depth + 1, dtype=np.float64) / config.depth
    offs = np.ascontiguousarray(offsets[: config.octave_count], dtype=np.float64)

    if config.noise_backend == NOISE_BACKEND_SIMPLEX:
        return simplex_octave_stack(norm_x, norm_z, offs, scale, float(config.lacunarity),
                                    _simplex(config.noise_seed))
    return perlin_octave_stack(norm_x, norm_z, offs, scale, float(config.lacunarity),
                               _permutation(config.noise_seed))


def sample_grid(config: TerrainConfig, offsets: np.ndarray) -> np.ndarray:
    """Векторная версия sample для всей сетки; порядок накопления тот же."""
    stack = octave_stack(config, offsets)
    total = np.zeros(stack.shape[1:], dtype=np.float64)
    amplitude = 1.0
    for i in range(stack.shape[0]):
        total += evaluate_curve(config.height_curve, _remap01(stack[i])) * amplitude
        amplitude *= config.persistence
    return total
