# ========================
# file: terrain_engine/core/config/validators.py
# ========================
from __future__ import annotations
import dataclasses
import math
from typing import Any, Dict, List, Tuple

from ..constants import CORE_LIMITS, INT_FIELDS, NOISE_BACKENDS, NOISE_BACKEND_PERLIN
from .curves import LINEAR_CURVE, is_undefined_curve
from .model import ConfigAdjustment, TerrainConfig

_DEFAULTS = TerrainConfig()


def _coerce_number(name: str, value: Any, adj: List[ConfigAdjustment]) -> float | int:
    """Приводит значение к числу; мусор и NaN/Inf заменяются дефолтом."""
    default = getattr(_DEFAULTS, name)
    is_int = name in INT_FIELDS
    # целые берём как есть: float() теряет точность после 2**53 и падает на огромных
    if is_int and isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        num = float(value)
    except (TypeError, ValueError, OverflowError):
        adj.append(ConfigAdjustment(name, value, default, "not a number"))
        return default
    if not math.isfinite(num):
        adj.append(ConfigAdjustment(name, value, default, "not finite"))
        return default
    if is_int:
        as_int = int(num)
        if as_int != num or isinstance(value, bool):
            adj.append(ConfigAdjustment(name, value, as_int, "truncated to integer"))
        return as_int
    return num


def _clamp(name: str, value: float | int, adj: List[ConfigAdjustment]) -> float | int:
    lo, hi = CORE_LIMITS[name]
    if value < lo:
        clamped = type(value)(lo)
        adj.append(ConfigAdjustment(name, value, clamped, f"below minimum {lo}"))
        return clamped
    if value > hi:
        clamped = type(value)(hi)
        adj.append(ConfigAdjustment(name, value, clamped, f"above maximum {hi}"))
        return clamped
    return value


def sanitize_config(cfg: TerrainConfig) -> Tuple[TerrainConfig, List[ConfigAdjustment]]:
    """
    Приводит конфиг к допустимым значениям вместо того, чтобы падать.

    - числа обрезаются по CORE_LIMITS, NaN/Inf и мусор заменяются дефолтом;
    - целочисленные поля приводятся к int;
    - незаданная кривая заменяется линейной (0->0, 1->1);
    - неизвестный бэкенд шума заменяется на perlin.

    Returns:
        (исправленный конфиг, список подмен). Пустой список — конфиг уже валиден.
    """
    adj: List[ConfigAdjustment] = []
    changes: Dict[str, Any] = {}

    for name in TerrainConfig.field_names():
        value = getattr(cfg, name)
        if name in ("height_curve", "falloff_curve"):
            if is_undefined_curve(value):
                adj.append(ConfigAdjustment(name, value, LINEAR_CURVE, "curve has no control points"))
                changes[name] = LINEAR_CURVE
            continue
        if name == "noise_backend":
            backend = str(value).lower() if value is not None else ""
            if backend not in NOISE_BACKENDS:
                adj.append(ConfigAdjustment(name, value, NOISE_BACKEND_PERLIN, "unknown noise backend"))
                backend = NOISE_BACKEND_PERLIN
            if backend != value:
                changes[name] = backend
            continue

        num = _coerce_number(name, value, adj)
        if name in CORE_LIMITS:
            num = _clamp(name, num, adj)
        if num != value or type(num) is not type(value):
            changes[name] = num

    if changes:
        cfg = dataclasses.replace(cfg, **changes)
    return cfg, adj
