# terrain_engine/core/export/obj_exporters.py
from __future__ import annotations
import logging

from ..types import TerrainMesh
from ._io import _atomic_replace, _ensure_path_exists

logger = logging.getLogger(__name__)


def write_mesh_obj(path: str, mesh: TerrainMesh, name: str = "terrain") -> None:
    """
    Wavefront OBJ: вершины с цветом (v x y z r g b), UV (vt), грани f v/vt.

    Индексы в OBJ начинаются с 1; обход треугольников сохраняется как есть.
    """
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    with open(tmp_path, "w", encoding="utf-8") as f:
        f.write(f"o {name}\n")
        for (x, y, z), (r, g, b, _a) in zip(mesh.vertices.tolist(), mesh.colors.tolist()):
            f.write(f"v {x:.6f} {y:.6f} {z:.6f} {r:.4f} {g:.4f} {b:.4f}\n")
        for u, v in mesh.uvs.tolist():
            f.write(f"vt {u:.6f} {v:.6f}\n")
        tris = mesh.triangles.reshape(-1, 3) + 1
        for a, b, c in tris.tolist():
            f.write(f"f {a}/{a} {b}/{b} {c}/{c}\n")
    _atomic_replace(tmp_path, path)
    logger.info(f"OBJ mesh saved: {path} ({mesh.vertex_count} vertices, {mesh.triangle_count} triangles)")
