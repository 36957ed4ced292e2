"""Fixed-size widget that paints the current plot scene."""

from __future__ import annotations

from PySide6.QtGui import QPaintEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from quadratic_app.constants.plot_constants import LIVE_CANVAS_SIZE
from quadratic_app.core.plot_renderer import PlotScene
from quadratic_app.ui.scene_painter import active_painter, paint_scene


class ParabolaCanvas(QWidget):
    """Raster canvas; holds the last scene and repaints it on demand."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._scene: PlotScene | None = None
        width, height = LIVE_CANVAS_SIZE
        self.setFixedSize(width, height)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    @property
    def canvas_width(self) -> int:
        return LIVE_CANVAS_SIZE[0]

    @property
    def canvas_height(self) -> int:
        return LIVE_CANVAS_SIZE[1]

    @property
    def scene(self) -> PlotScene | None:
        return self._scene

    def set_scene(self, scene: PlotScene) -> None:
        self._scene = scene
        self.update()

    def paintEvent(self, event: QPaintEvent) -> None:
        if self._scene is None:
            return
        with active_painter(self) as painter:
            paint_scene(painter, self._scene)
