"""Builds the layered plot scene for a quadratic.

The scene is a plain list of drawing primitives in painting order:
background, grid, axes, curve, annotated points. It carries no Qt types, so
the same scene can be painted onto a widget, saved as a PNG or inspected in
tests. There is no retained state: every parameter change builds a new scene.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from quadratic_app.constants.plot_constants import (
    AXIS_COLOR,
    AXIS_LINE_WIDTH,
    BACKGROUND_COLOR,
    CURVE_COLOR,
    CURVE_LINE_WIDTH,
    GRID_COLOR,
    GRID_LINE_LIMIT,
    GRID_LINE_WIDTH,
    INTERCEPT_COLOR,
    INTERCEPT_LABEL,
    LABEL_COLOR,
    LABEL_FONT_FAMILIES,
    LABEL_FONT_PIXEL_SIZE,
    LABEL_OFFSET,
    MARKER_RADIUS,
    ROOT_COLOR,
    ROOT_LABELS,
    VERTEX_COLOR,
    VERTEX_LABEL,
)
from quadratic_app.core.coordinate_mapper import CoordinateMapper
from quadratic_app.core.models import Coefficients, DerivedGeometry, Viewport
from quadratic_app.core.quadratic_math import derive_geometry, evaluate, y_intercept
from quadratic_app.core.view_window import compute_viewport

PixelPoint = tuple[float, float]


class LayerKind(Enum):
    BACKGROUND = "background"
    GRID = "grid"
    AXES = "axes"
    CURVE = "curve"
    POINTS = "points"


@dataclass(frozen=True, slots=True)
class BackgroundLayer:
    color: str
    kind: LayerKind = LayerKind.BACKGROUND


@dataclass(frozen=True, slots=True)
class LineLayer:
    """Independent straight segments stroked with one pen."""

    kind: LayerKind
    color: str
    line_width: float
    segments: tuple[tuple[PixelPoint, PixelPoint], ...]


@dataclass(frozen=True, slots=True)
class PolylineLayer:
    """One continuous path through ``points``."""

    color: str
    line_width: float
    points: tuple[PixelPoint, ...]
    kind: LayerKind = LayerKind.CURVE


@dataclass(frozen=True, slots=True)
class Marker:
    """Filled dot with a text label offset up and to the right."""

    x: float
    y: float
    color: str
    label: str
    label_x: float
    label_y: float


@dataclass(frozen=True, slots=True)
class MarkerLayer:
    markers: tuple[Marker, ...]
    radius: float
    label_color: str
    font_families: tuple[str, ...]
    font_pixel_size: int
    kind: LayerKind = LayerKind.POINTS


Layer = BackgroundLayer | LineLayer | PolylineLayer | MarkerLayer


@dataclass(frozen=True, slots=True)
class PlotScene:
    width: int
    height: int
    viewport: Viewport
    layers: tuple[Layer, ...]

    def layer(self, kind: LayerKind) -> Layer:
        for layer in self.layers:
            if layer.kind == kind:
                return layer
        raise KeyError(kind)


def grid_values(lower: float, upper: float) -> range:
    """Integers in ``[lower, upper]``; empty for non-finite or oversized ranges."""
    if not (math.isfinite(lower) and math.isfinite(upper)):
        return range(0)
    start, stop = math.ceil(lower), math.floor(upper)
    if stop - start + 1 > GRID_LINE_LIMIT:
        return range(0)
    return range(start, stop + 1)


def curve_sample_xs(viewport: Viewport, width: int) -> np.ndarray:
    """One sample per pixel column, ``i = 0..width`` inclusive."""
    columns = np.arange(width + 1, dtype=np.float64)
    with np.errstate(invalid="ignore", over="ignore"):
        return viewport.min_x + (columns / width) * (viewport.max_x - viewport.min_x)


def _grid_layer(mapper: CoordinateMapper, viewport: Viewport, width: int, height: int) -> LineLayer:
    segments: list[tuple[PixelPoint, PixelPoint]] = []
    for gx in grid_values(viewport.min_x, viewport.max_x):
        sx = mapper.screen_x(gx)
        segments.append(((sx, 0.0), (sx, float(height))))
    for gy in grid_values(viewport.min_y, viewport.max_y):
        sy = mapper.screen_y(gy)
        segments.append(((0.0, sy), (float(width), sy)))
    return LineLayer(LayerKind.GRID, GRID_COLOR, GRID_LINE_WIDTH, tuple(segments))


def _axes_layer(mapper: CoordinateMapper, width: int, height: int) -> LineLayer:
    # Drawn even when 0 lies outside the viewport; the line then falls off-canvas.
    y_axis_x = mapper.screen_x(0.0)
    x_axis_y = mapper.screen_y(0.0)
    segments = (
        ((y_axis_x, 0.0), (y_axis_x, float(height))),
        ((0.0, x_axis_y), (float(width), x_axis_y)),
    )
    return LineLayer(LayerKind.AXES, AXIS_COLOR, AXIS_LINE_WIDTH, segments)


def _curve_layer(
    coefficients: Coefficients, mapper: CoordinateMapper, viewport: Viewport, width: int
) -> PolylineLayer:
    xs = curve_sample_xs(viewport, width)
    with np.errstate(invalid="ignore", over="ignore"):
        ys = evaluate(coefficients.a, coefficients.b, coefficients.c, xs)
    pixel_xs = mapper.screen_x(xs)
    pixel_ys = mapper.screen_y(ys)
    points = tuple(zip(pixel_xs.tolist(), pixel_ys.tolist()))
    return PolylineLayer(CURVE_COLOR, CURVE_LINE_WIDTH, points)


def _marker(mapper: CoordinateMapper, x: float, y: float, color: str, label: str) -> Marker:
    sx = mapper.screen_x(x)
    sy = mapper.screen_y(y)
    offset_x, offset_y = LABEL_OFFSET
    return Marker(x=sx, y=sy, color=color, label=label, label_x=sx + offset_x, label_y=sy + offset_y)


def _points_layer(
    coefficients: Coefficients, geometry: DerivedGeometry, mapper: CoordinateMapper
) -> MarkerLayer:
    markers = [_marker(mapper, geometry.vertex.x, geometry.vertex.y, VERTEX_COLOR, VERTEX_LABEL)]
    for root, label in zip(geometry.roots, ROOT_LABELS):
        markers.append(_marker(mapper, root, 0.0, ROOT_COLOR, label))
    intercept = y_intercept(coefficients)
    markers.append(_marker(mapper, intercept.x, intercept.y, INTERCEPT_COLOR, INTERCEPT_LABEL))
    return MarkerLayer(
        markers=tuple(markers),
        radius=MARKER_RADIUS,
        label_color=LABEL_COLOR,
        font_families=LABEL_FONT_FAMILIES,
        font_pixel_size=LABEL_FONT_PIXEL_SIZE,
    )


def build_scene(
    coefficients: Coefficients,
    width: int,
    height: int,
    geometry: DerivedGeometry | None = None,
    viewport: Viewport | None = None,
) -> PlotScene:
    if geometry is None:
        geometry = derive_geometry(coefficients)
    if viewport is None:
        viewport = compute_viewport(coefficients, geometry)
    mapper = CoordinateMapper(viewport, width, height)

    layers: tuple[Layer, ...] = (
        BackgroundLayer(BACKGROUND_COLOR),
        _grid_layer(mapper, viewport, width, height),
        _axes_layer(mapper, width, height),
        _curve_layer(coefficients, mapper, viewport, width),
        _points_layer(coefficients, geometry, mapper),
    )
    return PlotScene(width=width, height=height, viewport=viewport, layers=layers)
