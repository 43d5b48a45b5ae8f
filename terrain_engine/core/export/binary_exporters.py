# ==============================================================================
# Файл: terrain_engine/core/export/binary_exporters.py
# Назначение: Запись сетки высот в 16-битный RAW (heightmap.r16).
# ==============================================================================
from __future__ import annotations
import logging

import numpy as np

from ..types import HeightField
from ._io import _atomic_replace, _ensure_path_exists

logger = logging.getLogger(__name__)


def heightmap_to_u16(height_field: HeightField) -> np.ndarray:
    """
    Нормализует высоты в [0, 65535] по min/max сетки.

    Строки — z, столбцы — x (как в вершинах меша). Плоская сетка -> нули.
    """
    h = np.asarray(height_field.heights, dtype=np.float64).T
    span = height_field.max_height - height_field.min_height
    if span <= 0:
        return np.zeros(h.shape, dtype="<u2")
    normalized = np.clip((h - height_field.min_height) / span, 0.0, 1.0)
    return np.round(normalized * 65535.0).astype("<u2")


def write_heightmap_r16(path: str, height_field: HeightField) -> None:
    """Сохраняет карту высот в 16-битном беззнаковом формате (little-endian)."""
    final_array = heightmap_to_u16(height_field)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    with open(tmp_path, "wb") as f:
        f.write(final_array.tobytes())
    _atomic_replace(tmp_path, path)
    logger.info(f"16-bit heightmap saved: {path} ({final_array.shape[1]}x{final_array.shape[0]})")


def read_heightmap_r16(path: str, width: int, depth: int) -> np.ndarray:
    """Читает heightmap.r16 обратно в массив (depth+1, width+1) uint16."""
    return np.fromfile(path, dtype="<u2").reshape((depth + 1, width + 1))
