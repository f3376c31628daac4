import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from ppmkit_core.config import AppConfig, load_config, save_config


PATTERNS = ("black", "quadrants", "checkerboard")


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            cfg = load_config(Path(tmp) / "missing.json")
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.canvas.width, 64)
            self.assertEqual(cfg.canvas.pattern, "quadrants")
            self.assertEqual(cfg.logging.level, "INFO")

    def test_load_default_when_corrupt(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "nested" / "config.json"
            cfg = load_config(path)
            cfg.canvas.width = 320
            cfg.canvas.pattern = "checkerboard"
            cfg.logging.console = True
            save_config(cfg, path)
            reloaded = load_config(path, patterns=PATTERNS)
            self.assertEqual(reloaded.canvas.width, 320)
            self.assertEqual(reloaded.canvas.pattern, "checkerboard")
            self.assertTrue(reloaded.logging.console)

    def test_normalizes_out_of_range_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "canvas": {"width": 0, "height": 100000, "pattern": "plaid", "unknown": 1},
                "logging": {"level": "chatty", "keep_log_files": 0},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path, patterns=PATTERNS)
            self.assertEqual(cfg.canvas.width, 1)
            self.assertEqual(cfg.canvas.height, 4096)
            self.assertEqual(cfg.canvas.pattern, "quadrants")
            self.assertFalse(hasattr(cfg.canvas, "unknown"))
            self.assertEqual(cfg.logging.level, "INFO")
            self.assertEqual(cfg.logging.keep_log_files, 2)

    def test_wrongly_typed_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "config_version": "two",
                "canvas": {"width": "wide", "height": None, "pattern": ["checkerboard"]},
                "logging": {"keep_log_files": "many"},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path, patterns=PATTERNS)
            self.assertEqual(cfg.config_version, 1)
            self.assertEqual((cfg.canvas.width, cfg.canvas.height), (64, 64))
            self.assertEqual(cfg.canvas.pattern, "quadrants")
            self.assertEqual(cfg.logging.keep_log_files, 7)

    def test_numeric_strings_are_accepted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"canvas": {"width": "128"}}), encoding="utf-8")
            self.assertEqual(load_config(path).canvas.width, 128)

    def test_lowercase_level_accepted(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text(json.dumps({"logging": {"level": "debug"}}), encoding="utf-8")
            self.assertEqual(load_config(path).logging.level, "DEBUG")


if __name__ == "__main__":
    unittest.main()
