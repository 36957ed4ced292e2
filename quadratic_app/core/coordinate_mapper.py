"""Affine transform between viewport (math) space and canvas pixels."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from quadratic_app.constants.plot_constants import MAPPER_EPSILON
from quadratic_app.core.models import Viewport


def _clamped_span(span: float) -> float:
    # NaN compares False, so it is clamped as well.
    return span if span > MAPPER_EPSILON else MAPPER_EPSILON


@dataclass(slots=True)
class CoordinateMapper:
    """Maps math coordinates onto a ``width`` x ``height`` canvas with Y flipped."""

    viewport: Viewport
    width: int
    height: int
    _span_x: float = field(init=False, repr=False)
    _span_y: float = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._span_x = _clamped_span(self.viewport.max_x - self.viewport.min_x)
        self._span_y = _clamped_span(self.viewport.max_y - self.viewport.min_y)

    def screen_x(self, x):
        with np.errstate(invalid="ignore", over="ignore"):
            return ((x - self.viewport.min_x) / self._span_x) * self.width

    def screen_y(self, y):
        with np.errstate(invalid="ignore", over="ignore"):
            return self.height - ((y - self.viewport.min_y) / self._span_y) * self.height

    def math_x(self, pixel_x):
        return self.viewport.min_x + (pixel_x / self.width) * self._span_x

    def math_y(self, pixel_y):
        return self.viewport.min_y + ((self.height - pixel_y) / self.height) * self._span_y
