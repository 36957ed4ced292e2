"""View window selection for the parabola plot."""

from __future__ import annotations

import numpy as np

from quadratic_app.constants.plot_constants import SAMPLE_RADIUS, X_PADDING, Y_PADDING
from quadratic_app.core.models import Coefficients, DerivedGeometry, Viewport
from quadratic_app.core.quadratic_math import derive_geometry, evaluate


def sample_offsets() -> np.ndarray:
    return np.arange(-SAMPLE_RADIUS, SAMPLE_RADIUS + 1, dtype=np.float64)


def compute_viewport(
    coefficients: Coefficients, geometry: DerivedGeometry | None = None
) -> Viewport:
    """Pick a viewport around the vertex that also shows the y-intercept.

    The function is sampled at the eleven integer offsets -5..5 from the
    vertex. The X range is padded by 1 and the Y range, which also includes
    ``c``, by 2. ``np.min``/``np.max`` propagate NaN the same way
    ``Math.min``/``Math.max`` do in the export.
    """
    if geometry is None:
        geometry = derive_geometry(coefficients)
    a, b, c = coefficients.a, coefficients.b, coefficients.c
    xv = geometry.vertex.x

    with np.errstate(invalid="ignore", over="ignore"):
        sample_xs = sample_offsets() + xv
        sample_ys = evaluate(a, b, c, sample_xs)

        min_x = float(np.min(np.append(sample_xs, -SAMPLE_RADIUS + xv))) - X_PADDING
        max_x = float(np.max(np.append(sample_xs, SAMPLE_RADIUS + xv))) + X_PADDING
        min_y = float(np.min(np.append(sample_ys, c))) - Y_PADDING
        max_y = float(np.max(np.append(sample_ys, c))) + Y_PADDING

    return Viewport(min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
