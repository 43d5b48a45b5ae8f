# ==============================================================================
# Файл: terrain_engine/core/export/numpy_exporters.py
# Назначение: Сохранение/загрузка меша и сетки высот в NPZ.
# ==============================================================================
from __future__ import annotations
import logging
import os
from typing import Optional, Tuple

import numpy as np

from ..types import HeightField, TerrainMesh
from ._io import _atomic_replace, _ensure_path_exists

logger = logging.getLogger(__name__)


def write_mesh_npz(path: str, mesh: TerrainMesh, height_field: Optional[HeightField] = None) -> None:
    """Сохраняет меш (и, если передана, сетку высот) в один сжатый NPZ."""
    arrays = {
        "vertices": mesh.vertices,
        "uvs": mesh.uvs,
        "triangles": mesh.triangles,
        "colors": mesh.colors,
    }
    if height_field is not None:
        arrays["heights"] = height_field.heights
        arrays["height_range"] = np.array([height_field.min_height, height_field.max_height])
        arrays["offsets"] = height_field.offsets

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    # открываем файл сами, иначе savez допишет .npz к имени временного файла
    with open(tmp_path, "wb") as f:
        np.savez_compressed(f, **arrays)
    _atomic_replace(tmp_path, path)
    logger.info(f"Mesh saved to NPZ: {path}")


def read_mesh_npz(path: str) -> Tuple[TerrainMesh, Optional[HeightField]]:
    """Читает меш, записанный write_mesh_npz."""
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with np.load(path) as data:
        mesh = TerrainMesh(
            vertices=data["vertices"].copy(),
            uvs=data["uvs"].copy(),
            triangles=data["triangles"].copy(),
            colors=data["colors"].copy(),
        )
        height_field = None
        if "heights" in data.files:
            lo, hi = data["height_range"]
            height_field = HeightField(
                heights=data["heights"].copy(),
                min_height=float(lo),
                max_height=float(hi),
                offsets=data["offsets"].copy(),
            )
    return mesh, height_field
