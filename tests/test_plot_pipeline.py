"""
Unit tests for the recompute pipeline.
"""
import unittest

from quadratic_app.constants.plot_constants import LIVE_CANVAS_SIZE
from quadratic_app.core.models import Coefficients
from quadratic_app.core.plot_pipeline import recompute
from quadratic_app.core.plot_renderer import LayerKind


class TestRecompute(unittest.TestCase):

    def test_frame_contents(self):
        width, height = LIVE_CANVAS_SIZE
        frame = recompute(Coefficients(2.0, -8.0, 6.0), 1.0, width, height)

        self.assertEqual(frame.geometry.roots, (1.0, 3.0))
        self.assertEqual(frame.evaluation_point, 1.0)
        self.assertEqual(frame.evaluation_value, 0.0)
        self.assertEqual(frame.summary.vertex, "(2.00, -2.00)")
        self.assertEqual((frame.scene.width, frame.scene.height), (width, height))
        self.assertIs(frame.scene.viewport, frame.viewport)

    def test_each_call_builds_a_fresh_scene(self):
        first = recompute(Coefficients(1.0, 0.0, 0.0), 0.0, 600, 300)
        second = recompute(Coefficients(1.0, 2.0, 0.0), 0.0, 600, 300)

        self.assertNotEqual(
            first.scene.layer(LayerKind.CURVE).points,
            second.scene.layer(LayerKind.CURVE).points,
        )
        self.assertEqual(first.geometry.vertex.x, 0.0)
        self.assertEqual(second.geometry.vertex.x, -1.0)

    def test_scene_size_follows_requested_canvas(self):
        frame = recompute(Coefficients(1.0, 0.0, 0.0), 2.0, 800, 360)

        self.assertEqual(len(frame.scene.layer(LayerKind.CURVE).points), 801)
        self.assertEqual(frame.evaluation_value, 4.0)


if __name__ == "__main__":
    unittest.main()
