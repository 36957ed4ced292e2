"""Evaluation point input and the live f(x) readout."""

from __future__ import annotations

from typing import Callable

from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QLineEdit, QVBoxLayout, QWidget

from quadratic_app.constants.plot_constants import DEFAULT_EVALUATION_POINT
from quadratic_app.core.plot_pipeline import PlotFrame
from quadratic_app.core.quadratic_math import (
    describe_function,
    format_fixed,
    format_number,
    parse_evaluation_point,
)
from quadratic_app.styling.color_palette import ColorPalette, Theme
from quadratic_app.styling.styles import Styles


class EvaluatePanel(QWidget):
    def __init__(
        self,
        on_point_changed: Callable[[float], None],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.on_point_changed = on_point_changed
        self._theme = theme
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QHBoxLayout()
        self.setLayout(layout)

        layout.addWidget(QLabel("x", self))
        self.x_input = QLineEdit(format_number(DEFAULT_EVALUATION_POINT), self)
        self.x_input.setMaximumWidth(120)
        self.x_input.textChanged.connect(self._handle_text_changed)
        layout.addWidget(self.x_input)

        card = QFrame(self)
        card.setStyleSheet(
            Styles.get_card_style(ColorPalette.CARD_EVALUATE_BG.get(self._theme), self._theme)
        )
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)
        self.function_label = QLabel(card)
        self.function_label.setStyleSheet("font-size: 14px;")
        card_layout.addWidget(self.function_label)
        self.value_label = QLabel(card)
        self.value_label.setStyleSheet("font-size: 18px; font-weight: 600;")
        card_layout.addWidget(self.value_label)
        layout.addWidget(card, stretch=1)

    def _handle_text_changed(self, _text: str) -> None:
        self.on_point_changed(self.evaluation_point())

    def evaluation_point(self) -> float:
        return parse_evaluation_point(self.x_input.text())

    def set_evaluation_point(self, value: float) -> None:
        self.x_input.blockSignals(True)
        self.x_input.setText(format_number(value))
        self.x_input.blockSignals(False)

    def show_frame(self, frame: PlotFrame) -> None:
        self.function_label.setText(describe_function(frame.coefficients))
        self.value_label.setText(
            f"f({format_number(frame.evaluation_point)}) = "
            f"{format_fixed(frame.evaluation_value, 3)}"
        )
