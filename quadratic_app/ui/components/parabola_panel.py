"""Coefficient sliders, the live plot and the geometry readout cards."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from quadratic_app.constants.plot_constants import (
    DEFAULT_COEFFICIENTS,
    SLIDER_BOUNDS,
    SLIDER_SCALE,
)
from quadratic_app.core.models import Coefficients
from quadratic_app.core.plot_pipeline import PlotFrame
from quadratic_app.core.quadratic_math import format_fixed
from quadratic_app.styling.color_palette import ColorPalette, Theme
from quadratic_app.styling.styles import Styles
from quadratic_app.ui.components.parabola_canvas import ParabolaCanvas

_COEFFICIENT_NAMES = ("a", "b", "c")


def _to_ticks(value: float) -> int:
    return int(round(value * SLIDER_SCALE))


class ParabolaPanel(QWidget):
    """Sliders for a, b and c next to the canvas they drive."""

    def __init__(
        self,
        on_coefficients_changed: Callable[[Coefficients], None],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_coefficients_changed = on_coefficients_changed
        self._theme = theme
        self.sliders: dict[str, QSlider] = {}
        self.value_labels: dict[str, QLabel] = {}
        self.readout_labels: dict[str, QLabel] = {}

        self._build_ui()
        self.set_coefficients(Coefficients(*DEFAULT_COEFFICIENTS))

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        slider_row = QHBoxLayout()
        for name in _COEFFICIENT_NAMES:
            slider_row.addLayout(self._build_slider(name))
        layout.addLayout(slider_row)

        self.canvas = ParabolaCanvas(self)
        layout.addWidget(self.canvas, alignment=Qt.AlignmentFlag.AlignHCenter)

        card_row = QHBoxLayout()
        card_row.addWidget(
            self._build_card(
                ColorPalette.CARD_VERTEX_BG.get(self._theme),
                (("vertex", "Vertex"), ("axis", "Axis"), ("opens", "Opens")),
            )
        )
        card_row.addWidget(
            self._build_card(
                ColorPalette.CARD_ROOTS_BG.get(self._theme),
                (
                    ("discriminant", "Discriminant"),
                    ("roots", "Roots"),
                    ("y_intercept", "y-intercept"),
                ),
            )
        )
        layout.addLayout(card_row)

    def _build_slider(self, name: str) -> QVBoxLayout:
        low, high, _step = SLIDER_BOUNDS[name]
        column = QVBoxLayout()
        column.addWidget(QLabel(name, self))

        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setRange(_to_ticks(low), _to_ticks(high))
        slider.setSingleStep(1)
        slider.setPageStep(SLIDER_SCALE)
        slider.valueChanged.connect(lambda _ticks, key=name: self._handle_slider_moved(key))
        column.addWidget(slider)

        value_label = QLabel(self)
        column.addWidget(value_label)

        self.sliders[name] = slider
        self.value_labels[name] = value_label
        return column

    def _build_card(self, background: str, rows: tuple[tuple[str, str], ...]) -> QFrame:
        card = QFrame(self)
        card.setStyleSheet(Styles.get_card_style(background, self._theme))
        grid = QGridLayout()
        card.setLayout(grid)
        for row, (key, caption) in enumerate(rows):
            grid.addWidget(QLabel(f"<b>{caption}:</b>", card), row, 0)
            value_label = QLabel(card)
            value_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
            grid.addWidget(value_label, row, 1)
            self.readout_labels[key] = value_label
        return card

    def _slider_value(self, name: str) -> float:
        return self.sliders[name].value() / SLIDER_SCALE

    def _handle_slider_moved(self, name: str) -> None:
        self.value_labels[name].setText(format_fixed(self._slider_value(name), 1))
        self.on_coefficients_changed(self.coefficients())

    def coefficients(self) -> Coefficients:
        return Coefficients(*(self._slider_value(name) for name in _COEFFICIENT_NAMES))

    def set_coefficients(self, coefficients: Coefficients) -> None:
        """Move the sliders without firing the change callback per slider."""
        values = {"a": coefficients.a, "b": coefficients.b, "c": coefficients.c}
        for name, value in values.items():
            slider = self.sliders[name]
            slider.blockSignals(True)
            slider.setValue(_to_ticks(value))
            slider.blockSignals(False)
            self.value_labels[name].setText(format_fixed(self._slider_value(name), 1))

    def show_frame(self, frame: PlotFrame) -> None:
        self.canvas.set_scene(frame.scene)
        summary = frame.summary
        self.readout_labels["vertex"].setText(summary.vertex)
        self.readout_labels["axis"].setText(summary.axis)
        self.readout_labels["opens"].setText(summary.opens)
        self.readout_labels["discriminant"].setText(summary.discriminant)
        self.readout_labels["roots"].setText(summary.roots)
        self.readout_labels["y_intercept"].setText(summary.y_intercept)
