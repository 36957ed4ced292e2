"""
Unit tests for the standalone HTML export.
"""
import re
import tempfile
import unittest
from pathlib import Path

from quadratic_app.constants import plot_constants as pc
from quadratic_app.core.export_serializer import (
    ExportError,
    build_export_config,
    build_export_html,
    extract_export_config,
    save_export_to_file,
    snapshot_from_config,
)
from quadratic_app.core.models import Coefficients, ExportSnapshot, Question
from quadratic_app.core.question_bank import DEFAULT_QUESTIONS


class TestExportSnapshot(unittest.TestCase):

    def test_capture_copies_values(self):
        questions = list(DEFAULT_QUESTIONS)
        snapshot = ExportSnapshot.capture(Coefficients(1, -2, 3), questions, 2)
        questions.clear()

        self.assertEqual(snapshot.coefficients, Coefficients(1.0, -2.0, 3.0))
        self.assertIsInstance(snapshot.coefficients.a, float)
        self.assertEqual(snapshot.questions, DEFAULT_QUESTIONS)
        self.assertEqual(snapshot.evaluation_point, 2.0)


class TestExportDocument(unittest.TestCase):

    def setUp(self):
        self.snapshot = ExportSnapshot.capture(
            Coefficients(-1.3, 4.7, -0.2), DEFAULT_QUESTIONS, evaluation_point=0.5
        )

    def test_round_trip_of_coefficients_and_questions(self):
        document = build_export_html(self.snapshot)
        restored = snapshot_from_config(extract_export_config(document))

        for name in ("a", "b", "c"):
            self.assertAlmostEqual(
                getattr(restored.coefficients, name),
                getattr(self.snapshot.coefficients, name),
                delta=1e-9,
            )
        self.assertEqual(restored.questions, self.snapshot.questions)
        self.assertEqual(restored.evaluation_point, 0.5)

    def test_document_is_self_contained(self):
        document = build_export_html(self.snapshot)

        self.assertTrue(document.startswith("<!DOCTYPE html>"))
        self.assertNotIn("http://", document)
        self.assertNotIn("https://", document)
        self.assertNotIn("src=", document)
        self.assertNotIn("<link", document)
        self.assertNotIn("__EXPORT_", document)

    def test_drawing_constants_are_embedded(self):
        config = extract_export_config(build_export_html(self.snapshot))

        self.assertEqual(config["canvas"], {"width": 800, "height": 360})
        self.assertEqual(config["viewport"]["sampleRadius"], pc.SAMPLE_RADIUS)
        self.assertEqual(config["viewport"]["xPadding"], pc.X_PADDING)
        self.assertEqual(config["viewport"]["yPadding"], pc.Y_PADDING)
        self.assertEqual(config["style"]["curve"]["color"], pc.CURVE_COLOR)
        self.assertEqual(config["style"]["marker"]["font"], "12px Inter, system-ui, sans-serif")
        self.assertEqual(config["labels"]["roots"], list(pc.ROOT_LABELS))
        self.assertEqual(config["sliders"]["a"], {"min": -5.0, "max": 5.0, "step": 0.1})

    def test_canvas_size_is_configurable(self):
        config = build_export_config(self.snapshot, canvas_width=600, canvas_height=300)
        self.assertEqual(config["canvas"], {"width": 600, "height": 300})

    def test_question_markdown_is_rendered(self):
        question = Question(
            id=1,
            prompt="Is **a** positive?",
            options=("yes", "no"),
            correct_option_index=0,
            explanation="*a* = 2",
        )
        config = build_export_config(ExportSnapshot.capture(Coefficients(2, 0, 0), [question]))
        entry = config["questions"][0]

        self.assertEqual(entry["promptHtml"], "Is <strong>a</strong> positive?")
        self.assertEqual(entry["explanationHtml"], "<em>a</em> = 2")
        self.assertEqual(entry["optionsHtml"], ["yes", "no"])

    def test_question_titles_are_numbered_by_position(self):
        questions = [
            Question(id=10, prompt="First", options=("yes", "no"), correct_option_index=0),
            Question(id=20, prompt="Second", options=("yes", "no"), correct_option_index=1),
        ]
        config = build_export_config(ExportSnapshot.capture(Coefficients(1, 0, 0), questions))

        self.assertEqual(
            [entry["titleHtml"] for entry in config["questions"]],
            ["<b>1.</b> First", "<b>2.</b> Second"],
        )
        self.assertEqual([entry["id"] for entry in config["questions"]], [10, 20])

    def test_page_script_uses_embedded_titles(self):
        document = build_export_html(self.snapshot)

        self.assertIn("title.innerHTML = q.titleHtml;", document)
        self.assertNotIn("qi + 1", document)

    def test_script_end_tag_in_text_is_escaped(self):
        question = Question(
            id=1,
            prompt="</script><script>alert(1)</script>",
            options=("yes", "no"),
            correct_option_index=0,
        )
        snapshot = ExportSnapshot.capture(Coefficients(1, 0, 0), [question])
        document = build_export_html(snapshot)

        self.assertEqual(len(re.findall(r"</script>", document)), 1)
        restored = snapshot_from_config(extract_export_config(document))
        self.assertEqual(restored.questions[0].prompt, question.prompt)

    def test_title_is_escaped(self):
        document = build_export_html(self.snapshot, title="A & B")
        self.assertIn("<title>A &amp; B</title>", document)

    def test_document_without_config_is_rejected(self):
        with self.assertRaises(ExportError):
            extract_export_config("<html><body></body></html>")

    def test_invalid_config_is_rejected(self):
        with self.assertRaises(ExportError):
            extract_export_config("<script>\nconst CONFIG = {oops;\n</script>")


class TestSaveExportToFile(unittest.TestCase):

    def test_writes_utf8_document(self):
        snapshot = ExportSnapshot.capture(Coefficients(2, -8, 6), DEFAULT_QUESTIONS)
        with tempfile.TemporaryDirectory() as tmp_dir:
            target = Path(tmp_dir) / "nested" / "pack.html"
            saved_path = save_export_to_file(target, snapshot)

            self.assertEqual(saved_path, target.resolve())
            document = saved_path.read_text(encoding="utf-8")

        config = extract_export_config(document)
        self.assertEqual(config["coefficients"], {"a": 2.0, "b": -8.0, "c": 6.0})
        self.assertEqual(len(config["questions"]), len(DEFAULT_QUESTIONS))

    def test_unwritable_target_raises_os_error(self):
        snapshot = ExportSnapshot.capture(Coefficients(1, 0, 0), DEFAULT_QUESTIONS)
        with tempfile.TemporaryDirectory() as tmp_dir:
            blocker = Path(tmp_dir) / "blocker"
            blocker.write_text("not a directory", encoding="utf-8")

            with self.assertRaises(OSError):
                save_export_to_file(blocker / "pack.html", snapshot)


if __name__ == "__main__":
    unittest.main()
