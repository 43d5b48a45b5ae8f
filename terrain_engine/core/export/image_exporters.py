# ==============================================================================
# Файл: terrain_engine/core/export/image_exporters.py
# Назначение: Превью (preview.png) — вид сверху по цветам вершин.
# ==============================================================================
from __future__ import annotations
import logging

import numpy as np
from PIL import Image

from ..types import TerrainMesh
from ._io import _atomic_replace, _ensure_path_exists

logger = logging.getLogger(__name__)


def colors_to_image(mesh: TerrainMesh, width: int, depth: int, upscale: int = 1) -> Image.Image:
    """Цвета вершин -> RGB картинка (width+1) x (depth+1), север сверху."""
    rgb = np.asarray(mesh.colors[:, :3]).reshape((depth + 1, width + 1, 3))
    pixels = np.round(np.clip(rgb, 0.0, 1.0) * 255.0).astype(np.uint8)
    img = Image.fromarray(pixels).transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    if upscale > 1:
        img = img.resize(((width + 1) * upscale, (depth + 1) * upscale), Image.Resampling.NEAREST)
    return img


def write_color_preview(path: str, mesh: TerrainMesh, width: int, depth: int, upscale: int = 2) -> None:
    """Рисует превью меша и сохраняет его в PNG."""
    img = colors_to_image(mesh, width, depth, upscale)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    _atomic_replace(tmp_path, path)
    logger.info(f"Preview image saved: {path}")
