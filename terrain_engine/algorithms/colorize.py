# ==============================================================================
# Файл: terrain_engine/algorithms/colorize.py
# Назначение: Цвет вершины по высоте относительно уровня воды (лестница зон).
# ==============================================================================
from __future__ import annotations
from typing import Tuple

import numpy as np

from ..core.constants import (
    COLOR_DEEP_WATER,
    COLOR_SAND,
    COLOR_WATER,
    LAND_ZONES,
    SHORE_BAND,
)

RGBA = Tuple[float, float, float, float]


def inverse_lerp(a: float, b: float, v: float) -> float:
    """Положение v между a и b, обрезанное в [0, 1]. При a == b — 0."""
    if a == b:
        return 0.0
    return min(max((v - a) / (b - a), 0.0), 1.0)


def lerp(a: float, b: float, t: float) -> float:
    t = min(max(t, 0.0), 1.0)
    return a + (b - a) * t


def _blend(c0, c1, t: float) -> RGBA:
    t = min(max(t, 0.0), 1.0)
    return (
        c0[0] + (c1[0] - c0[0]) * t,
        c0[1] + (c1[1] - c0[1]) * t,
        c0[2] + (c1[2] - c0[2]) * t,
        1.0,
    )


def classify(vertex_height: float, min_height: float, max_height: float, water_level: float) -> RGBA:
    """
    Цвет одной вершины.

    1. ниже воды — water -> deep_water по глубине до min_height;
    2. полоса берега [water, water + SHORE_BAND) — water -> sand;
    3. иначе по нормализованной высоте: снег, горы, трава, песок.
    """
    n = inverse_lerp(min_height, max_height, vertex_height)
    actual = lerp(min_height, max_height, n)

    if actual < water_level:
        return _blend(COLOR_WATER, COLOR_DEEP_WATER, inverse_lerp(water_level, min_height, actual))
    if actual < water_level + SHORE_BAND:
        return _blend(COLOR_WATER, COLOR_SAND, inverse_lerp(water_level, water_level + SHORE_BAND, actual))

    for threshold, lo, hi, c_from, c_to in LAND_ZONES:
        if n > threshold:
            return _blend(c_from, c_to, inverse_lerp(lo, hi, n))
    return (*COLOR_SAND, 1.0)


def _inverse_lerp_v(a: float, b: float, v: np.ndarray) -> np.ndarray:
    if a == b:
        return np.zeros_like(v)
    return np.clip((v - a) / (b - a), 0.0, 1.0)


def _blend_v(c0, c1, t: np.ndarray) -> np.ndarray:
    c0 = np.asarray(c0, dtype=np.float64)
    c1 = np.asarray(c1, dtype=np.float64)
    return c0[None, :] + (c1 - c0)[None, :] * t[:, None]


def colorize(heights: np.ndarray, min_height: float, max_height: float, water_level: float) -> np.ndarray:
    """
    Векторная версия classify.

    Args:
        heights: высоты вершин в порядке вершин меша (любая форма, берётся ravel()).

    Returns:
        (N, 4) float32 RGBA.
    """
    h = np.asarray(heights, dtype=np.float64).ravel()
    n = _inverse_lerp_v(min_height, max_height, h)
    actual = min_height + (max_height - min_height) * n

    rgb = np.empty((h.shape[0], 3), dtype=np.float64)
    # маска ещё не раскрашенных вершин
    todo = np.ones(h.shape[0], dtype=bool)

    under = actual < water_level
    if np.any(under):
        t = _inverse_lerp_v(water_level, min_height, actual[under])
        rgb[under] = _blend_v(COLOR_WATER, COLOR_DEEP_WATER, t)
    todo &= ~under

    shore = todo & (actual < water_level + SHORE_BAND)
    if np.any(shore):
        t = _inverse_lerp_v(water_level, water_level + SHORE_BAND, actual[shore])
        rgb[shore] = _blend_v(COLOR_WATER, COLOR_SAND, t)
    todo &= ~shore

    for threshold, lo, hi, c_from, c_to in LAND_ZONES:
        zone = todo & (n > threshold)
        if np.any(zone):
            rgb[zone] = _blend_v(c_from, c_to, _inverse_lerp_v(lo, hi, n[zone]))
        todo &= ~zone

    rgb[todo] = COLOR_SAND

    out = np.ones((h.shape[0], 4), dtype=np.float32)
    out[:, :3] = rgb
    return out
