import json
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from imgui_image_core.config import AppConfig, load_config, save_config


class ConfigTests(unittest.TestCase):
    def test_load_default_when_missing(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "missing.json"
            cfg = load_config(path)
            self.assertIsInstance(cfg, AppConfig)
            self.assertEqual(cfg.widgets.legacy_label, "#image")
            self.assertEqual(cfg.logging.level, "INFO")
            self.assertFalse(cfg.logging.to_file)

    def test_save_and_reload(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            cfg = load_config(path)
            cfg.widgets.debug_checks = False
            cfg.logging.level = "DEBUG"
            save_config(cfg, path)
            reloaded = load_config(path)
            self.assertFalse(reloaded.widgets.debug_checks)
            self.assertEqual(reloaded.logging.level, "DEBUG")

    def test_normalizes_values(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {
                "widgets": {"legacy_label": "", "unknown": 1},
                "logging": {"level": "verbose", "keep_files": 0},
            }
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.widgets.legacy_label, "#image")
            self.assertFalse(hasattr(cfg.widgets, "unknown"))
            self.assertEqual(cfg.logging.level, "INFO")
            self.assertEqual(cfg.logging.keep_files, 2)

    def test_unreadable_file_falls_back(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            path.write_text("{not json", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())
            path.write_text("[1, 2]", encoding="utf-8")
            self.assertEqual(load_config(path), AppConfig())

    def test_bad_values_fall_back_to_defaults(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {"config_version": "v2", "logging": {"keep_files": "many", "level": "debug"}}
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.config_version, 1)
            self.assertEqual(cfg.logging.keep_files, 7)
            self.assertEqual(cfg.logging.level, "DEBUG")

    def test_non_dict_sections_ignored(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "config.json"
            raw = {"widgets": ["x"], "logging": "loud"}
            path.write_text(json.dumps(raw), encoding="utf-8")
            cfg = load_config(path)
            self.assertEqual(cfg.widgets, AppConfig().widgets)
            self.assertEqual(cfg.logging, AppConfig().logging)


if __name__ == "__main__":
    unittest.main()
