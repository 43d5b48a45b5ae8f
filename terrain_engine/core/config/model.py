from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Dict

from ..constants import NOISE_BACKEND_PERLIN
from .curves import LINEAR_CURVE, Curve, CurveLike


@dataclass(frozen=True)
class TerrainConfig:
    """Снимок параметров одной генерации. Изменение = новый снимок (dataclasses.replace)."""
    width: int = 100
    depth: int = 100
    seed: int = 0
    noise_scale: float = 0.3
    octave_count: int = 4
    lacunarity: float = 2.0
    persistence: float = 0.5
    height_multiplier: float = 10.0
    water_level: float = 1.0
    fall_off_start: float = 0.6
    fall_off_strength: float = 1.0
    height_curve: CurveLike = LINEAR_CURVE
    falloff_curve: CurveLike = LINEAR_CURVE

    # Сид таблицы перестановок шума (не зависит от seed террейна)
    noise_seed: int = 0
    noise_backend: str = NOISE_BACKEND_PERLIN

    @classmethod
    def field_names(cls) -> tuple:
        return tuple(f.name for f in fields(cls))

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {}
        for name in self.field_names():
            value = getattr(self, name)
            if isinstance(value, Curve):
                value = value.to_list()
            elif name in ("height_curve", "falloff_curve"):
                value = repr(value)
            out[name] = value
        return out


@dataclass(frozen=True)
class ConfigAdjustment:
    """Запись о подмене значения при санитизации конфига."""
    field: str
    requested: Any
    applied: Any
    reason: str

    def __str__(self) -> str:
        return f"{self.field}: {self.requested!r} -> {self.applied!r} ({self.reason})"
