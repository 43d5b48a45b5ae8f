"""
Процедурный генератор террейна.

Сетка высот из фрактального шума, спад к краям, кривая ремапа,
триангуляция в меш и раскраска вершин по высоте относительно воды.
"""
from .core.config import Curve, TerrainConfig, load_config
from .core.types import HeightField, RegenerationScope, TerrainMesh
from .engine import TerrainEngine, classify_change

__all__ = [
    "Curve",
    "TerrainConfig",
    "load_config",
    "HeightField",
    "RegenerationScope",
    "TerrainMesh",
    "TerrainEngine",
    "classify_change",
]
