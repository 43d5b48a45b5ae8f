# ==============================================================================
# Файл: terrain_engine/core/config/curves.py
# Назначение: Кривые ремапа [0,1] -> [0,1] (кусочно-линейные по контрольным точкам).
# ==============================================================================
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence, Tuple, runtime_checkable

import numpy as np

from .errors import InvalidCurveError


@runtime_checkable
class CurveLike(Protocol):
    """Всё, у чего есть evaluate: [0,1] -> [0,1]."""

    def evaluate(self, t: Any) -> Any: ...


@dataclass(frozen=True)
class Curve:
    """
    Кусочно-линейная кривая по контрольным точкам (t, value).

    Точки сортируются по t. За пределами крайних точек значение
    держится постоянным (как у np.interp).
    """
    keys: Tuple[Tuple[float, float], ...] = ((0.0, 0.0), (1.0, 1.0))

    def __post_init__(self):
        object.__setattr__(self, "keys", tuple(sorted((float(t), float(v)) for t, v in self.keys)))

    @classmethod
    def linear(cls) -> "Curve":
        return cls(((0.0, 0.0), (1.0, 1.0)))

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> "Curve":
        try:
            keys = tuple((float(p[0]), float(p[1])) for p in points)
        except (TypeError, ValueError, IndexError) as e:
            raise InvalidCurveError(f"Curve points must be [t, value] pairs: {e}") from e
        if not all(np.isfinite(k).all() for k in keys):
            raise InvalidCurveError("Curve points must be finite numbers")
        return cls(keys)

    @property
    def is_empty(self) -> bool:
        return len(self.keys) == 0

    def evaluate(self, t):
        if not self.keys:
            return t
        xs = [k[0] for k in self.keys]
        ys = [k[1] for k in self.keys]
        if np.ndim(t) == 0:
            return float(np.interp(float(t), xs, ys))
        return np.interp(t, xs, ys)

    def to_list(self) -> list:
        return [[t, v] for t, v in self.keys]


LINEAR_CURVE = Curve.linear()


def is_undefined_curve(curve: Any) -> bool:
    """Кривая не задана: None, пустая или без evaluate."""
    if curve is None:
        return True
    if isinstance(curve, Curve):
        return curve.is_empty
    return not callable(getattr(curve, "evaluate", None))


def evaluate_curve(curve: CurveLike, values: np.ndarray) -> np.ndarray:
    """Векторное вычисление кривой. Чужие объекты вызываются поэлементно."""
    if isinstance(curve, Curve):
        return np.asarray(curve.evaluate(values), dtype=np.float64)
    fn = np.vectorize(lambda v: float(curve.evaluate(float(v))), otypes=[np.float64])
    return fn(values)
