# ========================
# file: terrain_engine/core/config/__init__.py
# ========================
from .errors import ConfigNotFoundError, InvalidCurveError, TerrainConfigError, UnknownFieldError
from .curves import LINEAR_CURVE, Curve, CurveLike, evaluate_curve, is_undefined_curve
from .model import ConfigAdjustment, TerrainConfig
from .defaults import CURVE_PRESETS, DEFAULT_CONFIG
from .validators import sanitize_config
from .loader import build_config, deep_merge, load_config, resolve_curve

__all__ = [
    "TerrainConfigError",
    "UnknownFieldError",
    "ConfigNotFoundError",
    "InvalidCurveError",
    "Curve",
    "CurveLike",
    "LINEAR_CURVE",
    "evaluate_curve",
    "is_undefined_curve",
    "TerrainConfig",
    "ConfigAdjustment",
    "CURVE_PRESETS",
    "DEFAULT_CONFIG",
    "sanitize_config",
    "build_config",
    "deep_merge",
    "load_config",
    "resolve_curve",
]
