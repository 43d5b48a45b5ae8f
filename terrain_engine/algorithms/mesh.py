# terrain_engine/algorithms/mesh.py
from __future__ import annotations
from typing import Tuple

import numpy as np

from ..core.types import HeightField


def vertex_index(x: int, z: int, width: int) -> int:
    return z * (width + 1) + x


def build_vertices(height_field: HeightField) -> Tuple[np.ndarray, np.ndarray]:
    """
    Вершины (x, h[x, z], z) и UV (x/width, z/depth).

    Порядок: строки по z, внутри строки x растёт — индекс z*(width+1)+x.
    """
    w, d = height_field.width, height_field.depth
    zz, xx = np.mgrid[0:d + 1, 0:w + 1]

    # heights индексируется [x, z] -> транспонируем в [z, x]
    hh = np.asarray(height_field.heights).T

    vertices = np.stack([xx.ravel(), hh.ravel(), zz.ravel()], axis=1).astype(np.float32)
    uvs = np.stack([xx.ravel() / w, zz.ravel() / d], axis=1).astype(np.float32)
    return vertices, uvs


def build_triangles(width: int, depth: int) -> np.ndarray:
    """
    Индексы треугольников с фиксированным обходом.

    Для клетки (x, z): bl=(x,z), tl=(x,z+1), br=(x+1,z), tr=(x+1,z+1).
    A = (bl, tl, br), B = (br, tl, tr). Клетки идут по z, x быстрее.
    """
    z, x = np.mgrid[0:depth, 0:width]
    bl = (z * (width + 1) + x).ravel()
    tl = bl + width + 1
    br = bl + 1
    tr = bl + width + 2

    quads = np.stack([bl, tl, br, br, tl, tr], axis=1)
    return quads.ravel().astype(np.uint32)


def triangulate(height_field: HeightField) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Сетка высот -> (vertices, uvs, triangles)."""
    vertices, uvs = build_vertices(height_field)
    triangles = build_triangles(height_field.width, height_field.depth)
    return vertices, uvs, triangles
