# ==============================================================================
# Файл: terrain_engine/core/constants.py
# Назначение: Глобальные константы генератора (диапазоны параметров, палитра зон).
# ==============================================================================
from __future__ import annotations
from typing import Dict, Tuple

# =======================================================================
# ДИАПАЗОНЫ ПАРАМЕТРОВ
# =======================================================================

# Минимальный масштаб шума (защита от деления на ноль)
MIN_NOISE_SCALE = 0.001
MAX_GRID_SIZE = 500
MAX_OCTAVES = 16

# Диапазоны для панели настройки (слайдеры).
PARAMETER_RANGES: Dict[str, Tuple[float, float]] = {
    "width": (15, MAX_GRID_SIZE),
    "depth": (15, MAX_GRID_SIZE),
    "noise_scale": (MIN_NOISE_SCALE, 1.0),
    "octave_count": (1, MAX_OCTAVES),
    "lacunarity": (1.0, 4.0),
    "persistence": (0.0, 1.0),
    "height_multiplier": (0.0, 100.0),
    "water_level": (0.0, 6.0),
    "fall_off_start": (0.0, 1.0),
    "fall_off_strength": (0.0, 1.0),
}

# Ядро принимает и маленькие сетки (1x1 и больше), остальное совпадает с панелью.
CORE_LIMITS: Dict[str, Tuple[float, float]] = {
    **PARAMETER_RANGES,
    "width": (1, MAX_GRID_SIZE),
    "depth": (1, MAX_GRID_SIZE),
}

INT_FIELDS = ("width", "depth", "octave_count", "seed", "noise_seed")

NOISE_BACKEND_PERLIN = "perlin"
NOISE_BACKEND_SIMPLEX = "simplex"
NOISE_BACKENDS = (NOISE_BACKEND_PERLIN, NOISE_BACKEND_SIMPLEX)

# =======================================================================
# ПАЛИТРА ЗОН ВЫСОТ (RGB, 0..1)
# =======================================================================
RGB = Tuple[float, float, float]

COLOR_SNOW: RGB = (0.95, 0.95, 0.95)
COLOR_MOUNTAIN: RGB = (0.4, 0.25, 0.1)
COLOR_GRASS: RGB = (0.15, 0.8, 0.15)
COLOR_SAND: RGB = (0.85, 0.75, 0.55)
COLOR_WATER: RGB = (0.2, 0.4, 0.6)
COLOR_DEEP_WATER: RGB = (0.1, 0.2, 0.4)

# Полоса берега над уровнем воды (в единицах высоты)
SHORE_BAND = 2.0

# Лестница суши по нормализованной высоте:
# (порог срабатывания, начало смешивания, конец смешивания, цвет "от", цвет "к")
LAND_ZONES: Tuple[Tuple[float, float, float, RGB, RGB], ...] = (
    (0.7, 0.7, 0.85, COLOR_MOUNTAIN, COLOR_SNOW),
    (0.4, 0.4, 0.65, COLOR_GRASS, COLOR_MOUNTAIN),
    (0.1, 0.1, 0.35, COLOR_SAND, COLOR_GRASS),
)
