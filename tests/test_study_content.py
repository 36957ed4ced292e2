"""
Unit tests for the study text shown by the window and the HTML export.
"""
import html
import unittest

from quadratic_app.constants.ui_constants import FORM_CARDS, OVERVIEW_POINTS, OVERVIEW_TEXT
from quadratic_app.core.export_serializer import build_export_html
from quadratic_app.core.models import Coefficients, ExportSnapshot
from quadratic_app.core.question_bank import DEFAULT_QUESTIONS


class TestStudyContent(unittest.TestCase):

    def test_form_cards(self):
        self.assertEqual(
            [title for title, _points in FORM_CARDS],
            ["Standard Form", "Vertex Form", "Factored Form"],
        )
        for _title, points in FORM_CARDS:
            self.assertEqual(len(points), 4)
        self.assertEqual(FORM_CARDS[1][1][0], "y = a(x - h)^2 + k")

    def test_overview_points(self):
        self.assertEqual(len(OVERVIEW_POINTS), 4)
        self.assertTrue(OVERVIEW_POINTS[0].startswith("Opens up if a > 0"))
        self.assertIn("D = b^2 - 4ac", OVERVIEW_POINTS[3])

    def test_export_shows_the_same_overview(self):
        snapshot = ExportSnapshot.capture(Coefficients(1, 0, 0), DEFAULT_QUESTIONS)
        document = build_export_html(snapshot)

        self.assertIn(f"<p>{html.escape(OVERVIEW_TEXT)}</p>", document)
        for point in OVERVIEW_POINTS:
            self.assertIn(f"<li>{html.escape(point)}</li>", document)
        self.assertEqual(document.count("<li>"), len(OVERVIEW_POINTS))


if __name__ == "__main__":
    unittest.main()
