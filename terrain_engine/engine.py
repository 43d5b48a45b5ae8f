# ==============================================================================
# Файл: terrain_engine/engine.py
# Назначение: TerrainEngine — владеет конфигом и буферами меша, решает,
#             что пересчитывать после изменения параметров.
# ==============================================================================
from __future__ import annotations
import dataclasses
import logging
import random
import time
from dataclasses import dataclass
from typing import Any, List, Optional

import numpy as np

from .algorithms.colorize import colorize
from .algorithms.heightfield import build_height_field
from .algorithms.mesh import triangulate
from .core.config import (
    ConfigAdjustment,
    CurveLike,
    TerrainConfig,
    UnknownFieldError,
    sanitize_config,
)
from .core.types import HeightField, RegenerationScope, TerrainMesh
from .numerics.seeding import generate_offsets, reroll_seed

logger = logging.getLogger(__name__)

# Поля, меняющие геометрию (нужна полная перегенерация)
SHAPE_FIELDS = frozenset({
    "width", "depth", "octave_count", "noise_scale", "lacunarity",
    "fall_off_start", "fall_off_strength",
    # в этой реализации они тоже меняют высоты
    "seed", "persistence", "height_multiplier",
    "height_curve", "falloff_curve", "noise_seed", "noise_backend",
})

# Поля, влияющие только на цвет
COLOR_FIELDS = frozenset({"water_level"})


def classify_change(old: Optional[TerrainConfig], new: TerrainConfig) -> RegenerationScope:
    """Сравнивает два снимка конфига и возвращает объём пересчёта."""
    if old is None:
        return RegenerationScope.FULL
    changed = {
        name for name in TerrainConfig.field_names()
        if getattr(old, name) != getattr(new, name)
    }
    if changed & SHAPE_FIELDS:
        return RegenerationScope.FULL
    if changed & COLOR_FIELDS:
        return RegenerationScope.COLOR_ONLY
    return RegenerationScope.NONE


@dataclass(frozen=True)
class TerrainState:
    """Результат одной генерации. Заменяется целиком одной ссылкой."""
    config: TerrainConfig
    height_field: HeightField
    mesh: TerrainMesh


class TerrainEngine:
    """
    Оркестратор генерации террейна.

    generate() строит всё заново: смещения -> высоты -> треугольники -> цвета.
    Именованные сеттеры записывают новое значение и применяют политику:
    геометрия изменилась -> generate(), только цвет -> перекраска,
    ничего не изменилось -> ничего.
    """

    def __init__(self, config: TerrainConfig | None = None):
        self._config: TerrainConfig = TerrainConfig()
        self._state: TerrainState | None = None
        self.adjustments: List[ConfigAdjustment] = []
        self._set_config(config or TerrainConfig())

    # ------------------------------------------------------------------
    # Доступ к состоянию
    # ------------------------------------------------------------------
    @property
    def config(self) -> TerrainConfig:
        return self._config

    @property
    def applied_config(self) -> TerrainConfig | None:
        return self._state.config if self._state else None

    @property
    def mesh(self) -> TerrainMesh | None:
        return self._state.mesh if self._state else None

    @property
    def height_field(self) -> HeightField | None:
        return self._state.height_field if self._state else None

    # ------------------------------------------------------------------
    # Генерация
    # ------------------------------------------------------------------
    def generate(self) -> TerrainMesh:
        """Полная перегенерация по текущему конфигу."""
        cfg = self._config
        t0 = time.perf_counter()

        offsets = generate_offsets(cfg.seed, cfg.octave_count)
        height_field = build_height_field(cfg, offsets)
        vertices, uvs, triangles = triangulate(height_field)
        colors = self._colors_for(height_field, cfg.water_level)
        mesh = TerrainMesh(vertices=vertices, uvs=uvs, triangles=triangles, colors=colors)

        self._state = TerrainState(config=cfg, height_field=height_field, mesh=mesh)
        logger.info(
            f"Terrain generated: {cfg.width}x{cfg.depth}, {cfg.octave_count} octaves, "
            f"{mesh.vertex_count} vertices in {time.perf_counter() - t0:.3f} s"
        )
        return mesh

    def recolor(self) -> TerrainMesh:
        """Пересчёт только цветов по существующей сетке высот."""
        if self._state is None:
            return self.generate()
        cfg = self._config
        state = self._state
        colors = self._colors_for(state.height_field, cfg.water_level)
        mesh = state.mesh.with_colors(colors)
        self._state = TerrainState(config=cfg, height_field=state.height_field, mesh=mesh)
        logger.debug(f"Terrain recolored for water_level={cfg.water_level}")
        return mesh

    @staticmethod
    def _colors_for(height_field: HeightField, water_level: float) -> np.ndarray:
        # порядок вершин: z-строки, x быстрее -> транспонируем [x, z]
        heights = np.asarray(height_field.heights).T.ravel()
        return colorize(heights, height_field.min_height, height_field.max_height, water_level)

    def apply(self) -> TerrainMesh | None:
        """Применяет текущий конфиг согласно политике пересчёта."""
        scope = classify_change(self.applied_config, self._config)
        logger.debug(f"Regeneration scope: {scope.value}")
        if scope is RegenerationScope.FULL:
            return self.generate()
        if scope is RegenerationScope.COLOR_ONLY:
            return self.recolor()
        return self.mesh

    # ------------------------------------------------------------------
    # Изменение параметров
    # ------------------------------------------------------------------
    def _set_config(self, config: TerrainConfig) -> None:
        cfg, adjustments = sanitize_config(config)
        for a in adjustments:
            logger.warning(f"Config value substituted: {a}")
        self.adjustments = adjustments
        self._config = cfg

    def update(self, **changes: Any) -> TerrainMesh | None:
        """
        Пакетное изменение полей; политика применяется один раз на весь пакет.

        Raises:
            UnknownFieldError: если имя поля не существует.
        """
        unknown = sorted(set(changes) - set(TerrainConfig.field_names()))
        if unknown:
            raise UnknownFieldError(f"Unknown config fields: {', '.join(unknown)}")
        self._set_config(dataclasses.replace(self._config, **changes))
        return self.apply()

    def set_height_multiplier(self, value: float) -> TerrainMesh | None:
        return self.update(height_multiplier=value)

    def set_water_level(self, value: float) -> TerrainMesh | None:
        return self.update(water_level=value)

    def set_lacunarity(self, value: float) -> TerrainMesh | None:
        return self.update(lacunarity=value)

    def set_persistence(self, value: float) -> TerrainMesh | None:
        return self.update(persistence=value)

    def set_seed(self, value: int) -> TerrainMesh | None:
        return self.update(seed=value)

    def set_octave_count(self, value: int) -> TerrainMesh | None:
        return self.update(octave_count=value)

    def set_noise_scale(self, value: float) -> TerrainMesh | None:
        return self.update(noise_scale=value)

    def set_size(self, width: int, depth: int) -> TerrainMesh | None:
        return self.update(width=width, depth=depth)

    def set_fall_off(self, start: float, strength: float) -> TerrainMesh | None:
        return self.update(fall_off_start=start, fall_off_strength=strength)

    def set_height_curve(self, curve: CurveLike | None) -> TerrainMesh | None:
        return self.update(height_curve=curve)

    def set_falloff_curve(self, curve: CurveLike | None) -> TerrainMesh | None:
        return self.update(falloff_curve=curve)

    def reroll_seed(self, rng: random.Random | None = None) -> TerrainMesh | None:
        """Явная смена сида на случайный. Сама генерация сид никогда не меняет."""
        seed = reroll_seed(rng)
        logger.info(f"Seed re-rolled: {self._config.seed} -> {seed}")
        return self.set_seed(seed)
