# ========================
# file: terrain_engine/core/config/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from .curves import Curve, LINEAR_CURVE

# Готовые кривые (можно ссылаться по имени из JSON)
CURVE_PRESETS: Dict[str, Curve] = {
    "linear": LINEAR_CURVE,
    # Прижимает низины, оставляя пики
    "lowlands": Curve(((0.0, 0.0), (0.3, 0.05), (0.5, 0.15), (0.75, 0.5), (1.0, 1.0))),
    # Приближение smoothstep
    "smooth": Curve(((0.0, 0.0), (0.25, 0.15625), (0.5, 0.5), (0.75, 0.84375), (1.0, 1.0))),
    # Широкое плато посередине
    "plateau": Curve(((0.0, 0.0), (0.35, 0.45), (0.65, 0.55), (1.0, 1.0))),
}

DEFAULT_CONFIG: Dict[str, Any] = {
    "width": 100,
    "depth": 100,
    "seed": 0,
    "noise_scale": 0.3,
    "octave_count": 4,
    "lacunarity": 2.0,
    "persistence": 0.5,
    "height_multiplier": 10.0,
    "water_level": 1.0,
    "fall_off_start": 0.6,
    "fall_off_strength": 1.0,
    "height_curve": "linear",
    "falloff_curve": "linear",
    "noise_seed": 0,
    "noise_backend": "perlin",
}
