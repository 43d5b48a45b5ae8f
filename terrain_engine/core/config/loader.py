# ========================
# file: terrain_engine/core/config/loader.py
# ========================
from __future__ import annotations
import copy
import json
import os
from typing import Any, Dict, List, Mapping, Tuple, Union

from .curves import Curve
from .defaults import CURVE_PRESETS, DEFAULT_CONFIG
from .errors import ConfigNotFoundError, InvalidCurveError, UnknownFieldError
from .model import ConfigAdjustment, TerrainConfig
from .validators import sanitize_config

CURVE_FIELDS = ("height_curve", "falloff_curve")


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def resolve_curve(value: Any) -> Any:
    """Curve from a preset name, a list of [t, value] pairs, or a ready curve object."""
    if value is None or hasattr(value, "evaluate"):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in CURVE_PRESETS:
            raise InvalidCurveError(
                f"Unknown curve preset '{value}'. Known: {', '.join(sorted(CURVE_PRESETS))}"
            )
        return CURVE_PRESETS[key]
    if isinstance(value, (list, tuple)):
        return Curve.from_points(value)
    raise InvalidCurveError(f"Cannot build a curve from {type(value).__name__}")


def build_config(data: Mapping[str, Any]) -> Tuple[TerrainConfig, List[ConfigAdjustment]]:
    """Builds and sanitizes a TerrainConfig from a flat mapping of field values."""
    known = set(TerrainConfig.field_names())
    unknown = sorted(set(data) - known)
    if unknown:
        raise UnknownFieldError(f"Unknown config fields: {', '.join(unknown)}")

    kwargs = dict(data)
    for name in CURVE_FIELDS:
        if name in kwargs:
            kwargs[name] = resolve_curve(kwargs[name])
    return sanitize_config(TerrainConfig(**kwargs))


def load_config(
    source: Union[str, Mapping[str, Any], None] = None,
    overrides: Mapping[str, Any] | None = None,
) -> Tuple[TerrainConfig, List[ConfigAdjustment]]:
    """Load a config from a JSON path or dict, merge over defaults and apply overrides.

    Args:
        source: path to a JSON file, a raw dict, or None for pure defaults
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        (TerrainConfig, adjustments) — the sanitized immutable config and the
        list of substitutions made while sanitizing it
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, str):
        if not os.path.isfile(source):
            raise ConfigNotFoundError(f"Config file '{source}' not found")
        data = _load_json_file(source)
    elif isinstance(source, Mapping):
        data = dict(source)
    else:
        raise TypeError("source must be a str path, a dict or None")

    merged = deep_merge(DEFAULT_CONFIG, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    return build_config(merged)
