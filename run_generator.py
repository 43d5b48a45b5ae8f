# run_generator.py
"""
Генерация террейна и выгрузка артефактов.
Запуск: python run_generator.py [seed] [config.json]
"""
from __future__ import annotations
import logging
import sys
from pathlib import Path

from terrain_engine import TerrainEngine, load_config
from terrain_engine.core.export import (
    write_color_preview,
    write_heightmap_r16,
    write_mesh_npz,
    write_mesh_obj,
)
from terrain_engine.setup_logging import setup_logging

ARTIFACTS_ROOT = Path(__file__).resolve().parent / "artifacts"

logger = logging.getLogger(__name__)


def run(seed: int | None = None, config_path: str | None = None) -> Path:
    overrides = {"seed": seed} if seed is not None else None
    config, adjustments = load_config(config_path, overrides)
    for a in adjustments:
        logger.warning(f"Config value substituted: {a}")

    engine = TerrainEngine(config)
    mesh = engine.generate()
    hf = engine.height_field

    out_dir = ARTIFACTS_ROOT / str(engine.config.seed)
    write_heightmap_r16(str(out_dir / "heightmap.r16"), hf)
    write_mesh_npz(str(out_dir / "mesh.npz"), mesh, hf)
    write_mesh_obj(str(out_dir / "mesh.obj"), mesh)
    write_color_preview(str(out_dir / "preview.png"), mesh, engine.config.width, engine.config.depth)

    logger.info(
        f"Done: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles, "
        f"height range [{hf.min_height:.3f} .. {hf.max_height:.3f}] -> {out_dir}"
    )
    return out_dir


def main():
    setup_logging()
    args = sys.argv[1:]
    seed = None
    config_path = None
    if args:
        try:
            seed = int(args[0])
        except ValueError:
            print(f"Invalid seed: {args[0]!r}. Usage: python run_generator.py [seed] [config.json]")
            sys.exit(2)
    if len(args) > 1:
        config_path = args[1]
    run(seed, config_path)


if __name__ == "__main__":
    main()
