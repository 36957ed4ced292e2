"""Qt main window hosting the plot, the evaluator and the practice quiz."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtWidgets import (
    QFileDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from quadratic_app.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quadratic_app.constants.plot_constants import DEFAULT_COEFFICIENTS, DEFAULT_EVALUATION_POINT
from quadratic_app.constants.ui_constants import (
    DEFAULT_EXPORT_FILENAME,
    DEFAULT_PNG_FILENAME,
    DISCRIMINANT_NOTES,
    EVALUATE_GROUP_TITLE,
    EXPORT_DIALOG_TITLE,
    EXPORT_FILE_FILTER,
    FORM_CARDS,
    HEADER_BUTTON_ABOUT,
    HEADER_BUTTON_DOWNLOAD,
    HEADER_BUTTON_HELP,
    HEADER_BUTTON_SAVE_PNG,
    OVERVIEW_POINTS,
    OVERVIEW_TEXT,
    PLOT_GROUP_TITLE,
    PNG_DIALOG_TITLE,
    PNG_FILE_FILTER,
    QUIZ_GROUP_TITLE,
    WINDOW_TITLE,
)
from quadratic_app.core.export_serializer import save_export_to_file
from quadratic_app.core.models import Coefficients, ExportSnapshot, Question
from quadratic_app.core.plot_pipeline import PlotFrame, recompute
from quadratic_app.styling.color_palette import Theme
from quadratic_app.styling.styles import Styles
from quadratic_app.ui.components.evaluate_panel import EvaluatePanel
from quadratic_app.ui.components.parabola_panel import ParabolaPanel
from quadratic_app.ui.components.quiz_panel import QuizPanel
from quadratic_app.ui.dialog_helpers import show_error, show_info
from quadratic_app.ui.scene_painter import save_scene_as_png

logger = logging.getLogger(__name__)


def _bullet_text(points: tuple[str, ...]) -> str:
    return "\n".join(f"• {point}" for point in points)


class StudyMainWindow(QMainWindow):
    """Single-page study pack: every control change re-runs :func:`recompute`."""

    def __init__(
        self,
        questions: tuple[Question, ...],
        coefficients: Coefficients | None = None,
        evaluation_point: float = DEFAULT_EVALUATION_POINT,
        theme: Theme = Theme.LIGHT,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self._theme = theme
        self._questions = questions
        self._frame: PlotFrame | None = None
        self._last_export_path: Path | None = None
        self._last_png_path: Path | None = None

        self._build_ui()
        self.parabola_panel.set_coefficients(coefficients or Coefficients(*DEFAULT_COEFFICIENTS))
        self.evaluate_panel.set_evaluation_point(evaluation_point)
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self._recompute()

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        scroll_area = QScrollArea(self)
        scroll_area.setWidgetResizable(True)
        body = QWidget(scroll_area)
        body_layout = QVBoxLayout()
        body.setLayout(body_layout)

        overview_label = QLabel(OVERVIEW_TEXT, body)
        overview_label.setWordWrap(True)
        body_layout.addWidget(overview_label)
        points_label = QLabel(_bullet_text(OVERVIEW_POINTS), body)
        points_label.setWordWrap(True)
        body_layout.addWidget(points_label)
        body_layout.addLayout(self._build_form_cards(body))
        notes_label = QLabel("\n".join(DISCRIMINANT_NOTES), body)
        body_layout.addWidget(notes_label)

        self.parabola_panel = ParabolaPanel(
            on_coefficients_changed=lambda _coefficients: self._recompute(),
            theme=self._theme,
            parent=body,
        )
        body_layout.addWidget(self._wrap_in_group(PLOT_GROUP_TITLE, self.parabola_panel, body))

        self.evaluate_panel = EvaluatePanel(
            on_point_changed=lambda _point: self._recompute(),
            theme=self._theme,
            parent=body,
        )
        body_layout.addWidget(self._wrap_in_group(EVALUATE_GROUP_TITLE, self.evaluate_panel, body))

        self.quiz_panel = QuizPanel(self._questions, theme=self._theme, parent=body)
        body_layout.addWidget(self._wrap_in_group(QUIZ_GROUP_TITLE, self.quiz_panel, body))
        body_layout.addStretch()

        scroll_area.setWidget(body)
        root_layout.addWidget(scroll_area, stretch=1)

    def _build_form_cards(self, parent: QWidget) -> QHBoxLayout:
        row = QHBoxLayout()
        for title, points in FORM_CARDS:
            card = QGroupBox(title, parent)
            card_layout = QVBoxLayout()
            card.setLayout(card_layout)
            points_label = QLabel(_bullet_text(points), card)
            points_label.setWordWrap(True)
            card_layout.addWidget(points_label)
            row.addWidget(card)
        return row

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        title_label = QLabel(WINDOW_TITLE, self)
        title_label.setStyleSheet(Styles.get_title_label_style(self._theme))
        header_row.addWidget(title_label)
        header_row.addStretch()

        self.download_button = QPushButton(HEADER_BUTTON_DOWNLOAD, self)
        self.download_button.setObjectName("primaryButton")
        self.download_button.clicked.connect(self._handle_download_html)
        header_row.addWidget(self.download_button)

        self.save_png_button = QPushButton(HEADER_BUTTON_SAVE_PNG, self)
        self.save_png_button.clicked.connect(self._handle_save_png)
        header_row.addWidget(self.save_png_button)

        self.about_button = QPushButton(HEADER_BUTTON_ABOUT, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        self.help_button = QPushButton(HEADER_BUTTON_HELP, self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        layout.addLayout(header_row)

    @staticmethod
    def _wrap_in_group(title: str, content: QWidget, parent: QWidget) -> QGroupBox:
        group = QGroupBox(title, parent)
        group_layout = QVBoxLayout()
        group_layout.addWidget(content)
        group.setLayout(group_layout)
        return group

    def _recompute(self) -> None:
        canvas = self.parabola_panel.canvas
        self._frame = recompute(
            self.parabola_panel.coefficients(),
            self.evaluate_panel.evaluation_point(),
            canvas.canvas_width,
            canvas.canvas_height,
        )
        self.parabola_panel.show_frame(self._frame)
        self.evaluate_panel.show_frame(self._frame)

    def _handle_download_html(self) -> None:
        if self._frame is None:
            return
        snapshot = ExportSnapshot.capture(
            self._frame.coefficients,
            self.quiz_panel.questions,
            self._frame.evaluation_point,
        )

        default_path = self._last_export_path or (Path.cwd() / DEFAULT_EXPORT_FILENAME)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            EXPORT_DIALOG_TITLE,
            str(default_path),
            EXPORT_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            saved_path = save_export_to_file(Path(file_path), snapshot)
        except (OSError, ValueError) as exc:
            logger.error("HTML export to %s failed: %s", file_path, exc)
            show_error(self, "Export failed", str(exc))
            return

        self._last_export_path = saved_path
        show_info(self, "Study pack saved", f"Standalone page written to {saved_path}.")

    def _handle_save_png(self) -> None:
        if self._frame is None:
            return

        default_path = self._last_png_path or (Path.cwd() / DEFAULT_PNG_FILENAME)
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            PNG_DIALOG_TITLE,
            str(default_path),
            PNG_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            saved_path = save_scene_as_png(self._frame.scene, Path(file_path))
        except OSError as exc:
            logger.error("PNG export to %s failed: %s", file_path, exc)
            show_error(self, "Save failed", str(exc))
            return

        self._last_png_path = saved_path

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)
