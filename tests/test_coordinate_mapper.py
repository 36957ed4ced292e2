"""
Unit tests for the math-to-pixel coordinate mapper.
"""
import math
import unittest

import numpy as np

from quadratic_app.constants.plot_constants import MAPPER_EPSILON
from quadratic_app.core.coordinate_mapper import CoordinateMapper
from quadratic_app.core.models import Viewport


class TestCoordinateMapper(unittest.TestCase):

    def setUp(self):
        self.mapper = CoordinateMapper(Viewport(-6.0, 6.0, -2.0, 27.0), 600, 300)

    def test_corners(self):
        self.assertEqual(self.mapper.screen_x(-6.0), 0.0)
        self.assertEqual(self.mapper.screen_x(6.0), 600.0)
        self.assertEqual(self.mapper.screen_y(-2.0), 300.0)
        self.assertEqual(self.mapper.screen_y(27.0), 0.0)

    def test_y_axis_is_flipped(self):
        self.assertLess(self.mapper.screen_y(10.0), self.mapper.screen_y(0.0))

    def test_origin(self):
        self.assertEqual(self.mapper.screen_x(0.0), 300.0)

    def test_inverse_round_trip(self):
        for x, y in [(-5.5, 0.0), (0.0, 13.3), (2.25, -1.0), (5.9, 26.0)]:
            self.assertAlmostEqual(self.mapper.math_x(self.mapper.screen_x(x)), x, places=9)
            self.assertAlmostEqual(self.mapper.math_y(self.mapper.screen_y(y)), y, places=9)

    def test_maps_arrays(self):
        pixels = self.mapper.screen_x(np.array([-6.0, 0.0, 6.0]))
        self.assertEqual(pixels.tolist(), [0.0, 300.0, 600.0])

    def test_zero_span_is_clamped(self):
        mapper = CoordinateMapper(Viewport(1.0, 1.0, 3.0, 3.0), 600, 300)

        self.assertEqual(mapper.screen_x(1.0), 0.0)
        self.assertGreater(mapper.screen_x(1.0 + 4 * MAPPER_EPSILON), 600.0)
        self.assertTrue(math.isfinite(mapper.screen_y(4.0)))

    def test_nan_span_is_clamped(self):
        mapper = CoordinateMapper(Viewport(math.nan, math.nan, 0.0, 1.0), 600, 300)

        self.assertTrue(math.isnan(mapper.screen_x(0.0)))
        self.assertEqual(mapper.screen_y(0.5), 150.0)


if __name__ == "__main__":
    unittest.main()
