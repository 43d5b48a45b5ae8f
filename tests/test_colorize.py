# ==============================================================================
# Файл: tests/test_colorize.py
# Назначение: Тесты раскраски вершин по зонам высот.
# ==============================================================================
import sys
import unittest
from pathlib import Path

import numpy as np

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.algorithms.colorize import classify, colorize, inverse_lerp, lerp
from terrain_engine.core.constants import (
    COLOR_DEEP_WATER,
    COLOR_GRASS,
    COLOR_SAND,
    COLOR_SNOW,
    COLOR_WATER,
)


class TestElevationColorizer(unittest.TestCase):

    def assertColor(self, actual, expected_rgb):
        self.assertEqual(len(actual), 4)
        for a, e in zip(actual[:3], expected_rgb):
            self.assertAlmostEqual(a, e, places=6)
        self.assertEqual(actual[3], 1.0)

    def test_helpers(self):
        self.assertEqual(inverse_lerp(0.0, 10.0, 5.0), 0.5)
        self.assertEqual(inverse_lerp(0.0, 10.0, 20.0), 1.0)
        self.assertEqual(inverse_lerp(3.0, 3.0, 7.0), 0.0)
        self.assertEqual(inverse_lerp(10.0, 0.0, 2.5), 0.75)
        self.assertEqual(lerp(2.0, 4.0, 0.5), 3.0)

    def test_underwater_blends_to_deep(self):
        self.assertColor(classify(0.5, 0.0, 10.0, 1.0), (0.15, 0.3, 0.5))
        self.assertColor(classify(0.0, 0.0, 10.0, 1.0), COLOR_DEEP_WATER)

    def test_shore_band(self):
        self.assertColor(classify(1.0, 0.0, 10.0, 1.0), COLOR_WATER)
        self.assertColor(classify(2.0, 0.0, 10.0, 1.0), (0.525, 0.575, 0.575))

    def test_land_ladder(self):
        self.assertColor(classify(9.0, 0.0, 10.0, 1.0), COLOR_SNOW)
        # n = 0.5 -> трава -> горы, t = 0.4
        self.assertColor(classify(5.0, 0.0, 10.0, 1.0), (0.25, 0.58, 0.13))
        # n = 0.35 -> полностью трава
        self.assertColor(classify(3.5, 0.0, 10.0, 0.0), COLOR_GRASS)
        # n = 0.05 -> песок
        self.assertColor(classify(5.0, 0.0, 100.0, 0.0), COLOR_SAND)

    def test_vectorized_matches_scalar(self):
        heights = np.linspace(-3.0, 14.0, 211)
        lo, hi, water = float(heights.min()), float(heights.max()), 2.5
        colors = colorize(heights, lo, hi, water)
        self.assertEqual(colors.shape, (211, 4))
        self.assertEqual(colors.dtype, np.float32)
        expected = np.array([classify(float(h), lo, hi, water) for h in heights])
        self.assertTrue(np.allclose(colors, expected, atol=1e-6))

    def test_flat_field(self):
        colors = colorize(np.full(9, 3.0), 3.0, 3.0, 1.0)
        self.assertTrue(np.allclose(colors[:, :3], COLOR_SAND))

    def test_all_underwater(self):
        heights = np.linspace(0.0, 1.5, 50)
        colors = colorize(heights, 0.0, 1.5, 6.0)
        water = np.array(COLOR_WATER)
        deep = np.array(COLOR_DEEP_WATER)
        t = (colors[:, 0] - water[0]) / (deep[0] - water[0])
        self.assertTrue(np.all((t >= -1e-6) & (t <= 1 + 1e-6)))
        self.assertTrue(np.allclose(colors[:, :3], water + t[:, None] * (deep - water), atol=1e-6))


if __name__ == "__main__":
    unittest.main()
