import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "widgets"))

from imgui_image import RecordingBackend, StyleVar


class RecordingBackendTests(unittest.TestCase):
    def test_click_queue_then_default(self):
        backend = RecordingBackend(clicks=[True, False], default_click=True)
        args = ("b", 1, (1.0, 1.0), (0.0, 0.0), (1.0, 1.0), (0.0, 0.0, 0.0, 0.0), (1.0, 1.0, 1.0, 1.0))
        results = [backend.image_button(*args) for _ in range(3)]
        self.assertEqual(results, [True, False, True])
        self.assertEqual([c.result for c in backend.calls], [True, False, True])

    def test_report_counts(self):
        backend = RecordingBackend()
        backend.push_id(1)
        backend.push_style_var(StyleVar.FRAME_PADDING, (1.0, 1.0))
        backend.image(1, (2.0, 2.0), (0.0, 0.0), (1.0, 1.0), (1.0, 1.0, 1.0, 1.0), (0.0, 0.0, 0.0, 0.0))
        backend.pop_style_var()
        backend.pop_id()
        report = backend.report()
        self.assertEqual(report.total_calls, 5)
        self.assertEqual(report.image_count, 1)
        self.assertEqual(report.command_counts["push_id"], 1)
        self.assertTrue(report.balanced)

    def test_report_flags_unbalanced(self):
        backend = RecordingBackend()
        backend.push_id("a")
        backend.pop_style_var(2)
        report = backend.report()
        self.assertIn("unbalanced_id_stack", report.errors)
        self.assertIn("style_stack_underflow", report.errors)
        self.assertFalse(report.balanced)


if __name__ == "__main__":
    unittest.main()
