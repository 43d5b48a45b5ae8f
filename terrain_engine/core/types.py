# terrain_engine/core/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

import numpy as np


class RegenerationScope(Enum):
    """Что нужно пересчитать после изменения конфига."""
    NONE = "none"
    COLOR_ONLY = "color_only"
    FULL = "full"


def _freeze(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


@dataclass(frozen=True)
class HeightField:
    """Сетка высот [x, z] размера (width+1, depth+1) и её фактический min/max."""
    heights: np.ndarray
    min_height: float
    max_height: float
    offsets: np.ndarray = field(default_factory=lambda: np.zeros((0, 2)))

    @property
    def width(self) -> int:
        return self.heights.shape[0] - 1

    @property
    def depth(self) -> int:
        return self.heights.shape[1] - 1


@dataclass(frozen=True)
class TerrainMesh:
    """
    Меш для внешнего рендерера.

    vertices  (N, 3) float32 — строки по z, x меняется быстрее всего
    uvs       (N, 2) float32 — в [0, 1]^2
    triangles (6*w*d,) uint32 — плоский массив, тройки индексов
    colors    (N, 4) float32 — RGBA
    Нормали и тангенты считает рендерер.
    """
    vertices: np.ndarray
    uvs: np.ndarray
    triangles: np.ndarray
    colors: np.ndarray

    def __post_init__(self):
        for a in (self.vertices, self.uvs, self.triangles, self.colors):
            _freeze(a)

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0] // 3)

    def with_colors(self, colors: np.ndarray) -> "TerrainMesh":
        """Новый меш с той же геометрией (те же массивы) и новыми цветами."""
        return TerrainMesh(self.vertices, self.uvs, self.triangles, colors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "vertices": self.vertices.tolist(),
            "uvs": self.uvs.tolist(),
            "triangles": self.triangles.tolist(),
            "colors": self.colors.tolist(),
        }
