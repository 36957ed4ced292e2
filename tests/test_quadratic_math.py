"""
Unit tests for the quadratic math engine and its display formatting.
"""
import math
import unittest

from quadratic_app.core.models import Coefficients
from quadratic_app.core.plot_pipeline import recompute
from quadratic_app.core.quadratic_math import (
    NO_REAL_ROOTS_TEXT,
    derive_geometry,
    describe_function,
    discriminant,
    evaluate,
    format_fixed,
    format_number,
    opens_upward,
    parse_evaluation_point,
    real_roots,
    summarize_geometry,
    vertex,
)


class TestDerivedGeometry(unittest.TestCase):
    """Concrete parabolas with hand-computed geometry."""

    def test_unit_parabola(self):
        geometry = derive_geometry(Coefficients(1.0, 0.0, 0.0))

        self.assertEqual(geometry.discriminant, 0.0)
        self.assertEqual((geometry.vertex.x, geometry.vertex.y), (0.0, 0.0))
        self.assertEqual(geometry.roots, (0.0,))

    def test_two_distinct_roots(self):
        geometry = derive_geometry(Coefficients(2.0, -8.0, 6.0))

        self.assertEqual(geometry.discriminant, 16.0)
        self.assertEqual((geometry.vertex.x, geometry.vertex.y), (2.0, -2.0))
        self.assertEqual(geometry.roots, (1.0, 3.0))

    def test_double_root(self):
        geometry = derive_geometry(Coefficients(1.0, 6.0, 9.0))

        self.assertEqual(geometry.discriminant, 0.0)
        self.assertEqual((geometry.vertex.x, geometry.vertex.y), (-3.0, 0.0))
        self.assertEqual(geometry.roots, (-3.0,))

    def test_downward_parabola(self):
        coefficients = Coefficients(-1.0, 0.0, 0.0)
        geometry = derive_geometry(coefficients)

        self.assertEqual((geometry.vertex.x, geometry.vertex.y), (0.0, 0.0))
        self.assertEqual(geometry.roots, (0.0,))
        self.assertFalse(opens_upward(coefficients.a))

    def test_no_real_roots(self):
        self.assertEqual(discriminant(1.0, 0.0, 1.0), -4.0)
        self.assertEqual(real_roots(1.0, 0.0, 1.0), ())

    def test_roots_ascending_for_negative_a(self):
        # The formula pair comes out as (2, -2) here.
        self.assertEqual(real_roots(-1.0, 0.0, 4.0), (-2.0, 2.0))

    def test_roots_are_zeros_of_the_function(self):
        for a, b, c in [(1.0, -3.0, 2.0), (0.5, 1.5, -2.0), (-2.5, 4.0, 3.0), (3.0, 0.1, -7.2)]:
            for root in real_roots(a, b, c):
                self.assertAlmostEqual(evaluate(a, b, c, root), 0.0, places=9)

    def test_vertex_is_extremum(self):
        a, b, c = 2.0, -3.0, 1.0
        apex = vertex(a, b, c)
        for dx in (-1.0, -0.1, 0.1, 1.0):
            self.assertGreater(evaluate(a, b, c, apex.x + dx), apex.y)

    def test_zero_a_gives_non_finite_geometry(self):
        flat = derive_geometry(Coefficients(0.0, 0.0, 1.0))
        self.assertTrue(math.isnan(flat.vertex.x))

        line = derive_geometry(Coefficients(0.0, 2.0, 0.0))
        self.assertEqual(line.vertex.x, -math.inf)
        self.assertTrue(math.isnan(line.vertex.y))

    def test_evaluate_at_point(self):
        self.assertEqual(evaluate(2.0, -8.0, 6.0, 1.0), 0.0)
        self.assertEqual(evaluate(1.0, 2.0, 3.0, 2.0), 11.0)


class TestFormatting(unittest.TestCase):
    """Formatting that mirrors the JavaScript number output."""

    def test_format_fixed_rounds_half_away_from_zero(self):
        self.assertEqual(format_fixed(2.5, 0), "3")
        self.assertEqual(format_fixed(-2.5, 0), "-3")
        self.assertEqual(format_fixed(0.125, 2), "0.13")

    def test_format_fixed_uses_binary_value(self):
        # 1.005 is stored slightly below 1.005.
        self.assertEqual(format_fixed(1.005, 2), "1.00")

    def test_format_fixed_negative_zero(self):
        self.assertEqual(format_fixed(-0.0), "0.00")

    def test_format_fixed_non_finite(self):
        self.assertEqual(format_fixed(math.nan), "NaN")
        self.assertEqual(format_fixed(math.inf), "Infinity")
        self.assertEqual(format_fixed(-math.inf, 3), "-Infinity")

    def test_format_fixed_large_magnitude_uses_exponent_form(self):
        self.assertEqual(format_fixed(1e22, 3), "1e+22")
        self.assertEqual(format_fixed(1e26, 3), "1e+26")
        self.assertEqual(format_fixed(-1e22), "-1e+22")
        self.assertEqual(format_fixed(1e21, 2), "1e+21")
        self.assertEqual(format_fixed(1e20, 2), "100000000000000000000.00")

    def test_evaluation_readout_for_huge_input(self):
        x = parse_evaluation_point("1e13")
        frame = recompute(Coefficients(1.0, 0.0, 0.0), x, 600, 300)

        self.assertEqual(format_fixed(frame.evaluation_value, 3), "1e+26")
        self.assertEqual(format_number(frame.evaluation_point), "10000000000000")

    def test_format_number(self):
        self.assertEqual(format_number(1.0), "1")
        self.assertEqual(format_number(-0.0), "0")
        self.assertEqual(format_number(0.5), "0.5")
        self.assertEqual(format_number(-2.3), "-2.3")
        self.assertEqual(format_number(100.0), "100")

    def test_format_number_small_magnitudes(self):
        self.assertEqual(format_number(0.00001), "0.00001")
        self.assertEqual(format_number(1e-6), "0.000001")
        self.assertEqual(format_number(1e-7), "1e-7")
        self.assertEqual(format_number(1.5e-7), "1.5e-7")
        self.assertEqual(format_number(-2e-10), "-2e-10")

    def test_format_number_large_magnitudes(self):
        self.assertEqual(format_number(1e16), "10000000000000000")
        self.assertEqual(format_number(1.5e20), "150000000000000000000")
        self.assertEqual(format_number(1e21), "1e+21")
        self.assertEqual(format_number(2.5e22), "2.5e+22")

    def test_describe_function(self):
        self.assertEqual(describe_function(Coefficients(1.0, 0.0, -2.5)), "f(x) = 1x^2 + 0x + -2.5")

    def test_summary_strings(self):
        coefficients = Coefficients(2.0, -8.0, 6.0)
        summary = summarize_geometry(coefficients, derive_geometry(coefficients))

        self.assertEqual(summary.vertex, "(2.00, -2.00)")
        self.assertEqual(summary.axis, "x = 2.00")
        self.assertEqual(summary.opens, "Upward")
        self.assertEqual(summary.discriminant, "16.00")
        self.assertEqual(summary.roots, "1.00, 3.00")
        self.assertEqual(summary.y_intercept, "(0, 6.00)")

    def test_summary_without_real_roots(self):
        coefficients = Coefficients(-1.0, 0.0, -1.0)
        summary = summarize_geometry(coefficients, derive_geometry(coefficients))

        self.assertEqual(summary.roots, NO_REAL_ROOTS_TEXT)
        self.assertEqual(summary.opens, "Downward")


class TestParseEvaluationPoint(unittest.TestCase):

    def test_valid_numbers(self):
        self.assertEqual(parse_evaluation_point("2.5"), 2.5)
        self.assertEqual(parse_evaluation_point(" -3 "), -3.0)
        self.assertEqual(parse_evaluation_point("1e2"), 100.0)

    def test_malformed_input_uses_default(self):
        self.assertEqual(parse_evaluation_point(""), 0.0)
        self.assertEqual(parse_evaluation_point("abc"), 0.0)
        self.assertEqual(parse_evaluation_point("1,5", default=7.0), 7.0)

    def test_non_finite_input_uses_default(self):
        self.assertEqual(parse_evaluation_point("inf"), 0.0)
        self.assertEqual(parse_evaluation_point("nan"), 0.0)


if __name__ == "__main__":
    unittest.main()
