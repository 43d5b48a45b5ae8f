# ==============================================================================
# Файл: tests/test_binary_exporters.py
# Назначение: Юнит-тесты для функций сохранения артефактов (r16, npz, obj, png).
# ==============================================================================
import os
import sys
import tempfile
import unittest
from pathlib import Path

import numpy as np
from PIL import Image

# Добавляем путь к проекту, чтобы можно было импортировать модули движка
sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine import TerrainConfig, TerrainEngine
from terrain_engine.core.export import (
    heightmap_to_u16,
    read_heightmap_r16,
    read_mesh_npz,
    write_color_preview,
    write_heightmap_r16,
    write_mesh_npz,
    write_mesh_obj,
)
from terrain_engine.core.types import HeightField


class TestBinaryExporters(unittest.TestCase):
    """Набор тестов для проверки корректности упаковки и сохранения данных."""

    @classmethod
    def setUpClass(cls):
        cls.config = TerrainConfig(width=12, depth=8, seed=3)
        cls.engine = TerrainEngine(cls.config)
        cls.mesh = cls.engine.generate()
        cls.hf = cls.engine.height_field

    def test_heightmap_to_u16(self):
        """Тестирует нормализацию высот в 16 бит."""
        print("\n[TEST] Running test_heightmap_to_u16...")
        heights = np.array([[0.0, 5.0], [10.0, 2.5]])
        hf = HeightField(heights=heights, min_height=0.0, max_height=10.0)
        u16 = heightmap_to_u16(hf)

        self.assertEqual(u16.dtype, np.dtype("<u2"))
        # строки — z, столбцы — x
        self.assertEqual(u16[0, 0], 0)
        self.assertEqual(u16[0, 1], 65535)
        self.assertEqual(u16[1, 0], round(0.5 * 65535))
        self.assertEqual(u16[1, 1], round(0.25 * 65535))
        print("[TEST] test_heightmap_to_u16: OK")

    def test_flat_heightmap_is_zero(self):
        hf = HeightField(heights=np.full((3, 3), 4.0), min_height=4.0, max_height=4.0)
        self.assertFalse(heightmap_to_u16(hf).any())

    def test_write_heightmap_r16(self):
        """Тестирует запись .r16: размер файла, порядок байт, экстремумы."""
        print("\n[TEST] Running test_write_heightmap_r16...")
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "sub", "heightmap.r16")
            write_heightmap_r16(path, self.hf)

            self.assertTrue(os.path.exists(path))
            self.assertFalse(os.path.exists(path + ".tmp"))
            self.assertEqual(os.path.getsize(path), 13 * 9 * 2)

            data = read_heightmap_r16(path, 12, 8)
            self.assertEqual(data.shape, (9, 13))
            self.assertEqual(int(data.min()), 0)
            self.assertEqual(int(data.max()), 65535)
            np.testing.assert_array_equal(data, heightmap_to_u16(self.hf))
        print("[TEST] test_write_heightmap_r16: OK")

    def test_mesh_npz_roundtrip(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "mesh.npz")
            write_mesh_npz(path, self.mesh, self.hf)
            mesh, hf = read_mesh_npz(path)

        np.testing.assert_array_equal(mesh.vertices, self.mesh.vertices)
        np.testing.assert_array_equal(mesh.triangles, self.mesh.triangles)
        np.testing.assert_array_equal(mesh.colors, self.mesh.colors)
        self.assertEqual(mesh.triangles.dtype, np.uint32)
        self.assertIsNotNone(hf)
        self.assertEqual(hf.min_height, self.hf.min_height)
        self.assertEqual(hf.max_height, self.hf.max_height)
        np.testing.assert_array_equal(hf.offsets, self.hf.offsets)

    def test_mesh_npz_without_heights(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "mesh.npz")
            write_mesh_npz(path, self.mesh)
            _mesh, hf = read_mesh_npz(path)
        self.assertIsNone(hf)

    def test_read_missing_npz(self):
        with self.assertRaises(FileNotFoundError):
            read_mesh_npz(os.path.join(tempfile.gettempdir(), "no_such_mesh.npz"))

    def test_write_mesh_obj(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "mesh.obj")
            write_mesh_obj(path, self.mesh)
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()

        v = [ln for ln in lines if ln.startswith("v ")]
        vt = [ln for ln in lines if ln.startswith("vt ")]
        faces = [ln for ln in lines if ln.startswith("f ")]
        self.assertEqual(len(v), 13 * 9)
        self.assertEqual(len(vt), 13 * 9)
        self.assertEqual(len(faces), 2 * 12 * 8)
        self.assertEqual(len(v[0].split()), 7)
        # первая клетка: bl=0, tl=13, br=1 -> индексы OBJ с единицы
        self.assertEqual(faces[0], "f 1/1 14/14 2/2")

    def test_write_color_preview(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "preview.png")
            write_color_preview(path, self.mesh, 12, 8, upscale=2)
            with Image.open(path) as img:
                self.assertEqual(img.size, (13 * 2, 9 * 2))
                self.assertEqual(img.mode, "RGB")


if __name__ == "__main__":
    unittest.main()
