"""Paints a :class:`PlotScene` with QPainter.

Drawing follows HTML canvas semantics so the desktop plot matches the
exported page: flat line caps, mitre joins, text drawn at its baseline, and
points with non-finite coordinates are skipped instead of drawn.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from PySide6.QtCore import QPointF, Qt
from PySide6.QtGui import QColor, QFont, QImage, QPaintDevice, QPainter, QPainterPath, QPen

from quadratic_app.core.plot_renderer import (
    BackgroundLayer,
    LineLayer,
    MarkerLayer,
    PlotScene,
    PolylineLayer,
)

logger = logging.getLogger(__name__)


def _finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


@contextmanager
def active_painter(device: QPaintDevice) -> Iterator[QPainter]:
    """Open a painter on ``device`` and always end it, even if painting fails."""
    painter = QPainter(device)
    try:
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        yield painter
    finally:
        painter.end()


def _stroke_pen(color: str, width: float) -> QPen:
    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.PenCapStyle.FlatCap)
    pen.setJoinStyle(Qt.PenJoinStyle.MiterJoin)
    return pen


def _paint_background(painter: QPainter, scene: PlotScene, layer: BackgroundLayer) -> None:
    painter.fillRect(0, 0, scene.width, scene.height, QColor(layer.color))


def _paint_lines(painter: QPainter, layer: LineLayer) -> None:
    painter.setPen(_stroke_pen(layer.color, layer.line_width))
    for (x0, y0), (x1, y1) in layer.segments:
        if _finite(x0, y0, x1, y1):
            painter.drawLine(QPointF(x0, y0), QPointF(x1, y1))


def _paint_polyline(painter: QPainter, layer: PolylineLayer) -> None:
    path = QPainterPath()
    started = False
    for x, y in layer.points:
        if not _finite(x, y):
            continue
        if started:
            path.lineTo(x, y)
        else:
            path.moveTo(x, y)
            started = True
    if not started:
        return
    painter.setPen(_stroke_pen(layer.color, layer.line_width))
    painter.setBrush(Qt.BrushStyle.NoBrush)
    painter.drawPath(path)


def _paint_markers(painter: QPainter, layer: MarkerLayer) -> None:
    font = QFont()
    font.setFamilies(list(layer.font_families))
    font.setPixelSize(layer.font_pixel_size)
    painter.setFont(font)
    for marker in layer.markers:
        if not _finite(marker.x, marker.y):
            continue
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(marker.color))
        painter.drawEllipse(QPointF(marker.x, marker.y), layer.radius, layer.radius)
        painter.setPen(QColor(layer.label_color))
        painter.drawText(QPointF(marker.label_x, marker.label_y), marker.label)


def paint_scene(painter: QPainter, scene: PlotScene) -> None:
    """Paint every layer of ``scene`` in order."""
    for layer in scene.layers:
        if isinstance(layer, BackgroundLayer):
            _paint_background(painter, scene, layer)
        elif isinstance(layer, LineLayer):
            _paint_lines(painter, layer)
        elif isinstance(layer, PolylineLayer):
            _paint_polyline(painter, layer)
        elif isinstance(layer, MarkerLayer):
            _paint_markers(painter, layer)


def render_scene_to_image(scene: PlotScene) -> QImage:
    image = QImage(scene.width, scene.height, QImage.Format.Format_ARGB32_Premultiplied)
    image.fill(Qt.GlobalColor.transparent)
    with active_painter(image) as painter:
        paint_scene(painter, scene)
    return image


def save_scene_as_png(scene: PlotScene, file_path: Path) -> Path:
    """Render ``scene`` off-screen and write it as a PNG file."""
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    image = render_scene_to_image(scene)
    if not image.save(str(file_path), "PNG"):
        raise OSError(f"Could not write PNG image to {file_path}")
    logger.info("Saved %dx%d plot to %s", scene.width, scene.height, file_path)
    return file_path
