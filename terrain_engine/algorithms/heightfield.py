# ==============================================================================
# Файл: terrain_engine/algorithms/heightfield.py
# Назначение: Сборка сетки высот: фрактальный шум * height_multiplier * спад к краям.
# ==============================================================================
from __future__ import annotations
import logging

import numpy as np

from ..core.config import TerrainConfig
from ..core.types import HeightField
from ..numerics.seeding import generate_offsets
from .falloff import falloff_mask
from .fractal import sample_grid

logger = logging.getLogger(__name__)


def build_height_field(config: TerrainConfig, offsets: np.ndarray | None = None) -> HeightField:
    """
    Строит сетку высот (width+1, depth+1) и её фактический min/max.

    Args:
        config: санитизированный конфиг.
        offsets: смещения октав; если не заданы — выводятся из config.seed.

    Returns:
        HeightField. min/max всегда посчитаны по только что построенной сетке.
    """
    if offsets is None:
        offsets = generate_offsets(config.seed, config.octave_count)

    raw = sample_grid(config, offsets)
    mask = falloff_mask(
        config.width, config.depth,
        config.fall_off_start, config.fall_off_strength,
        config.falloff_curve,
    )
    heights = raw * config.height_multiplier * mask

    if not np.isfinite(heights).all():
        # сюда не должны попадать после санитизации, но сетку не роняем
        logger.warning("Height field contains non-finite values, replacing with 0.")
        heights = np.nan_to_num(heights, nan=0.0, posinf=0.0, neginf=0.0)

    min_h = float(heights.min())
    max_h = float(heights.max())
    heights.setflags(write=False)
    offsets = np.array(offsets, dtype=np.float64)
    offsets.setflags(write=False)

    logger.debug(f"Height field {heights.shape}: min={min_h:.4f}, max={max_h:.4f}")
    return HeightField(heights=heights, min_height=min_h, max_height=max_h, offsets=offsets)
