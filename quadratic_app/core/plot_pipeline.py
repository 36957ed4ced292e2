"""Recompute pipeline invoked by the UI after every parameter change.

Call :func:`recompute` whenever the coefficients or the evaluation point
change and repaint with the returned frame. The call is synchronous and its
cost is bounded by the canvas width.
"""

from __future__ import annotations

from dataclasses import dataclass

from quadratic_app.core.models import Coefficients, DerivedGeometry, GeometrySummary, Viewport
from quadratic_app.core.plot_renderer import PlotScene, build_scene
from quadratic_app.core.quadratic_math import derive_geometry, evaluate, summarize_geometry
from quadratic_app.core.view_window import compute_viewport


@dataclass(frozen=True, slots=True)
class PlotFrame:
    coefficients: Coefficients
    geometry: DerivedGeometry
    viewport: Viewport
    scene: PlotScene
    summary: GeometrySummary
    evaluation_point: float
    evaluation_value: float


def recompute(
    coefficients: Coefficients, evaluation_point: float, width: int, height: int
) -> PlotFrame:
    geometry = derive_geometry(coefficients)
    viewport = compute_viewport(coefficients, geometry)
    scene = build_scene(coefficients, width, height, geometry=geometry, viewport=viewport)
    return PlotFrame(
        coefficients=coefficients,
        geometry=geometry,
        viewport=viewport,
        scene=scene,
        summary=summarize_geometry(coefficients, geometry),
        evaluation_point=evaluation_point,
        evaluation_value=evaluate(
            coefficients.a, coefficients.b, coefficients.c, evaluation_point
        ),
    )
