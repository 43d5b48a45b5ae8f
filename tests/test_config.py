# ==============================================================================
# Файл: tests/test_config.py
# Назначение: Тесты санитизации и загрузки конфигурации.
# ==============================================================================
import json
import math
import os
import sys
import tempfile
import unittest
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from terrain_engine.core.config import (
    CURVE_PRESETS,
    LINEAR_CURVE,
    ConfigNotFoundError,
    Curve,
    InvalidCurveError,
    TerrainConfig,
    UnknownFieldError,
    deep_merge,
    load_config,
    sanitize_config,
)


class TestSanitizeConfig(unittest.TestCase):

    def test_valid_config_untouched(self):
        cfg = TerrainConfig()
        fixed, adj = sanitize_config(cfg)
        self.assertEqual(adj, [])
        self.assertEqual(fixed, cfg)

    def test_degenerate_values_clamped(self):
        cfg = TerrainConfig(width=0, depth=-5, noise_scale=0.0, octave_count=0)
        fixed, adj = sanitize_config(cfg)
        self.assertEqual((fixed.width, fixed.depth), (1, 1))
        self.assertEqual(fixed.noise_scale, 0.001)
        self.assertEqual(fixed.octave_count, 1)
        self.assertEqual({a.field for a in adj}, {"width", "depth", "noise_scale", "octave_count"})

    def test_upper_bounds(self):
        cfg = TerrainConfig(width=900, octave_count=40, lacunarity=9.0, persistence=1.5,
                            height_multiplier=500.0, water_level=10.0,
                            fall_off_start=2.0, fall_off_strength=-1.0)
        fixed, adj = sanitize_config(cfg)
        self.assertEqual(fixed.width, 500)
        self.assertEqual(fixed.octave_count, 16)
        self.assertEqual(fixed.lacunarity, 4.0)
        self.assertEqual(fixed.persistence, 1.0)
        self.assertEqual(fixed.height_multiplier, 100.0)
        self.assertEqual(fixed.water_level, 6.0)
        self.assertEqual(fixed.fall_off_start, 1.0)
        self.assertEqual(fixed.fall_off_strength, 0.0)
        self.assertEqual(len(adj), 8)

    def test_non_finite_replaced_by_default(self):
        fixed, adj = sanitize_config(TerrainConfig(water_level=math.nan, lacunarity=math.inf))
        self.assertEqual(fixed.water_level, TerrainConfig().water_level)
        self.assertEqual(fixed.lacunarity, TerrainConfig().lacunarity)
        self.assertEqual(len(adj), 2)

    def test_integer_fields_coerced(self):
        fixed, adj = sanitize_config(TerrainConfig(width=20.7, seed=3.0))
        self.assertEqual(fixed.width, 20)
        self.assertIsInstance(fixed.width, int)
        self.assertEqual(fixed.seed, 3)
        self.assertIsInstance(fixed.seed, int)
        self.assertEqual([a.field for a in adj], ["width"])

    def test_undefined_curves_get_linear_default(self):
        fixed, adj = sanitize_config(TerrainConfig(height_curve=None, falloff_curve=Curve(())))
        self.assertIs(fixed.height_curve, LINEAR_CURVE)
        self.assertIs(fixed.falloff_curve, LINEAR_CURVE)
        self.assertEqual(len(adj), 2)

    def test_unknown_backend(self):
        fixed, adj = sanitize_config(TerrainConfig(noise_backend="worley"))
        self.assertEqual(fixed.noise_backend, "perlin")
        self.assertEqual(adj[0].field, "noise_backend")

    def test_any_seed_is_valid(self):
        fixed, adj = sanitize_config(TerrainConfig(seed=-987654321))
        self.assertEqual(fixed.seed, -987654321)
        self.assertEqual(adj, [])

    def test_huge_seed_kept_exactly(self):
        fixed, adj = sanitize_config(TerrainConfig(seed=10 ** 400))
        self.assertEqual(fixed.seed, 10 ** 400)
        self.assertEqual(adj, [])

    def test_seed_above_float_precision_not_rounded(self):
        fixed, adj = sanitize_config(TerrainConfig(seed=2 ** 53 + 1))
        self.assertEqual(fixed.seed, 2 ** 53 + 1)
        self.assertEqual(adj, [])
        other, _ = sanitize_config(TerrainConfig(seed=2 ** 53))
        self.assertNotEqual(fixed, other)

    def test_oversized_integers_clamped(self):
        fixed, adj = sanitize_config(TerrainConfig(width=10 ** 400, octave_count=10 ** 30))
        self.assertEqual(fixed.width, 500)
        self.assertEqual(fixed.octave_count, 16)
        self.assertEqual({a.field for a in adj}, {"width", "octave_count"})


class TestCurve(unittest.TestCase):

    def test_linear_and_points(self):
        self.assertAlmostEqual(LINEAR_CURVE.evaluate(0.3), 0.3)
        c = Curve.from_points([[1.0, 1.0], [0.0, 0.0], [0.5, 0.1]])
        self.assertEqual(c.keys[0], (0.0, 0.0))
        self.assertAlmostEqual(c.evaluate(0.25), 0.05)
        self.assertAlmostEqual(c.evaluate(0.75), 0.55)

    def test_bad_points(self):
        with self.assertRaises(InvalidCurveError):
            Curve.from_points([[0.0], [1.0, 1.0]])
        with self.assertRaises(InvalidCurveError):
            Curve.from_points([["a", 0.0]])


class TestLoadConfig(unittest.TestCase):

    def test_defaults(self):
        cfg, adj = load_config()
        self.assertEqual(cfg, TerrainConfig())
        self.assertEqual(adj, [])

    def test_dict_with_overrides_and_curve_names(self):
        cfg, _ = load_config({"width": 64, "height_curve": "lowlands"}, overrides={"seed": 42})
        self.assertEqual(cfg.width, 64)
        self.assertEqual(cfg.seed, 42)
        self.assertEqual(cfg.height_curve, CURVE_PRESETS["lowlands"])

    def test_curve_points_from_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "terrain.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"depth": 33, "falloff_curve": [[0, 0], [1, 0.5]], "octave_count": 0}, f)
            cfg, adj = load_config(path)
        self.assertEqual(cfg.depth, 33)
        self.assertEqual(cfg.falloff_curve, Curve(((0.0, 0.0), (1.0, 0.5))))
        self.assertEqual(cfg.octave_count, 1)
        self.assertEqual([a.field for a in adj], ["octave_count"])

    def test_errors(self):
        with self.assertRaises(UnknownFieldError):
            load_config({"widht": 10})
        with self.assertRaises(ConfigNotFoundError):
            load_config("/nonexistent/terrain.json")
        with self.assertRaises(InvalidCurveError):
            load_config({"height_curve": "spiky"})

    def test_deep_merge(self):
        base = {"a": 1, "b": {"c": 2, "d": [1, 2]}}
        merged = deep_merge(base, {"b": {"d": [3]}, "e": 5})
        self.assertEqual(merged, {"a": 1, "b": {"c": 2, "d": [3]}, "e": 5})
        self.assertEqual(base["b"]["d"], [1, 2])


if __name__ == "__main__":
    unittest.main()
