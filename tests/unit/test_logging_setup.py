import json
import logging
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from imgui_image_core import logging_setup
from imgui_image_core.logging_setup import JsonFormatter, configure_logging, get_logger


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self.logger = get_logger()
        self._saved = list(self.logger.handlers)
        self._level = self.logger.level
        self.logger.handlers.clear()

    def tearDown(self):
        self.logger.handlers[:] = self._saved
        self.logger.setLevel(self._level)

    def test_json_formatter_includes_event(self):
        record = logging.LogRecord("imgui_image.ui", logging.INFO, __file__, 1, "frame %d", (3,), None)
        record.event = "frame_started"
        payload = json.loads(JsonFormatter().format(record))
        self.assertEqual(payload["msg"], "frame 3")
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "imgui_image.ui")
        self.assertEqual(payload["event"], "frame_started")
        self.assertEqual(payload["module"], "test_logging_setup")
        self.assertIn("ts_utc", payload)

    def test_child_loggers(self):
        self.assertEqual(get_logger().name, "imgui_image")
        self.assertEqual(get_logger("image").name, "imgui_image.image")
        self.assertIs(get_logger("image").parent, get_logger())

    def test_console_handler_attached(self):
        logger = configure_logging(level="DEBUG", console=True, to_file=False)
        self.assertEqual(logger.level, logging.DEBUG)
        self.assertTrue(any(type(h) is logging.StreamHandler for h in logger.handlers))

    def test_console_disabled(self):
        logger = configure_logging(console=False, to_file=False)
        self.assertEqual([type(h) for h in logger.handlers], [logging.NullHandler])

    def test_file_handler_under_config_root(self):
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch.object(logging_setup, "config_root", return_value=Path(tmp)):
                logger = configure_logging(console=False, to_file=True)
                try:
                    files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
                    self.assertEqual(len(files), 1)
                    self.assertEqual(Path(files[0].baseFilename).parent, Path(tmp) / "logs")
                finally:
                    for h in files:
                        h.close()


if __name__ == "__main__":
    unittest.main()
