# terrain_engine/algorithms/falloff.py
from __future__ import annotations
import numpy as np

from ..core.config import CurveLike, evaluate_curve


def chebyshev_distance(width: int, depth: int) -> np.ndarray:
    """
    Нормированное расстояние Чебышёва от центра сетки: max(|dx|, |dz|).

    0 в центре, 1 на краях. Изолинии квадратные, а не круглые.
    Returns:
        Массив (width+1, depth+1), индексация [x, z].
    """
    hx = width / 2.0
    hz = depth / 2.0
    dx = np.abs(np.arange(width + 1, dtype=np.float64) - hx) / hx
    dz = np.abs(np.arange(depth + 1, dtype=np.float64) - hz) / hz
    return np.maximum(dx[:, None], dz[None, :])


def falloff_mask(
        width: int,
        depth: int,
        start: float,
        strength: float,
        curve: CurveLike,
) -> np.ndarray:
    """
    Множитель спада к краям карты [x, z].

    dist <= start -> ровно 1.0;
    иначе 1 - curve(t) * strength, где t = clamp01((dist - start) / (1 - start)).
    При start >= 1 спад выключен целиком.
    """
    dist = chebyshev_distance(width, depth)
    mask = np.ones_like(dist)
    if start >= 1.0:
        return mask
    active = dist > start
    if not np.any(active):
        return mask
    t = np.clip((dist[active] - start) / (1.0 - start), 0.0, 1.0)
    mask[active] = 1.0 - evaluate_curve(curve, t) * strength
    return mask


def falloff_factor(x: int, z: int, width: int, depth: int,
                   start: float, strength: float, curve: CurveLike) -> float:
    """Множитель спада в одном узле."""
    dx = abs(x - width / 2.0) / (width / 2.0)
    dz = abs(z - depth / 2.0) / (depth / 2.0)
    dist = max(dx, dz)
    if dist <= start or start >= 1.0:
        return 1.0
    t = min(max((dist - start) / (1.0 - start), 0.0), 1.0)
    return 1.0 - float(curve.evaluate(t)) * strength
