"""Multiple-choice practice quiz backed by :class:`QuizEngine`."""

from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QButtonGroup,
    QFrame,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QVBoxLayout,
    QWidget,
)

from quadratic_app.constants.ui_constants import QUIZ_CHECK_BUTTON, QUIZ_RESET_BUTTON
from quadratic_app.core.markdown_renderer import renderer
from quadratic_app.core.models import Question
from quadratic_app.core.quiz_engine import QuizEngine
from quadratic_app.styling.color_palette import Theme
from quadratic_app.styling.styles import Styles

logger = logging.getLogger(__name__)


def _rich_label(html_text: str, parent: QWidget) -> QLabel:
    label = QLabel(html_text, parent)
    label.setTextFormat(Qt.TextFormat.RichText)
    label.setWordWrap(True)
    return label


class _QuestionView:
    """Widgets belonging to one question group."""

    def __init__(self, number: int, question: Question, parent: QWidget) -> None:
        self.question = question
        self.group_box = QGroupBox(parent)
        self.button_group = QButtonGroup(self.group_box)
        self.option_rows: list[QFrame] = []

        layout = QVBoxLayout()
        self.group_box.setLayout(layout)

        prompt_html = renderer.render_numbered_prompt(number, question.prompt)
        layout.addWidget(_rich_label(prompt_html, self.group_box))

        for index, option in enumerate(question.options):
            row = QFrame(self.group_box)
            row.setObjectName("optionRow")
            row_layout = QHBoxLayout()
            row_layout.setContentsMargins(6, 4, 6, 4)
            row.setLayout(row_layout)

            radio = QRadioButton(row)
            self.button_group.addButton(radio, index)
            row_layout.addWidget(radio)
            row_layout.addWidget(_rich_label(renderer.render_inline(option), row), stretch=1)

            layout.addWidget(row)
            self.option_rows.append(row)

        self.explanation_label = _rich_label("", self.group_box)
        self.explanation_label.setVisible(False)
        layout.addWidget(self.explanation_label)

    def clear_selection(self) -> None:
        # An exclusive group refuses to uncheck its last checked button.
        self.button_group.setExclusive(False)
        for button in self.button_group.buttons():
            button.setChecked(False)
        self.button_group.setExclusive(True)


class QuizPanel(QWidget):
    """One group per question, with Check Answers / Reset and the score line."""

    def __init__(
        self,
        questions: tuple[Question, ...],
        theme: Theme = Theme.LIGHT,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.quiz_engine = QuizEngine(questions)
        self._theme = theme
        self._views: list[_QuestionView] = []

        self._build_ui()
        self._refresh_feedback()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        for number, question in enumerate(self.quiz_engine.questions, start=1):
            view = _QuestionView(number, question, self)
            view.button_group.idClicked.connect(
                lambda option_index, question_id=question.id: self._handle_option_selected(
                    question_id, option_index
                )
            )
            layout.addWidget(view.group_box)
            self._views.append(view)

        button_row = QHBoxLayout()
        self.check_button = QPushButton(QUIZ_CHECK_BUTTON, self)
        self.check_button.setObjectName("primaryButton")
        self.check_button.clicked.connect(self._handle_check)
        button_row.addWidget(self.check_button)

        self.reset_button = QPushButton(QUIZ_RESET_BUTTON, self)
        self.reset_button.clicked.connect(self._handle_reset)
        button_row.addWidget(self.reset_button)

        self.score_label = QLabel("", self)
        self.score_label.setStyleSheet("font-weight: 600;")
        button_row.addWidget(self.score_label)
        button_row.addStretch()
        layout.addLayout(button_row)

    @property
    def questions(self) -> tuple[Question, ...]:
        return self.quiz_engine.questions

    def _handle_option_selected(self, question_id: int, option_index: int) -> None:
        self.quiz_engine.select_option(question_id, option_index)
        if self.quiz_engine.is_submitted():
            self._refresh_feedback()

    def _handle_check(self) -> None:
        self.quiz_engine.check_answers()
        logger.info(
            "Quiz checked: %d / %d correct",
            self.quiz_engine.get_score(),
            self.quiz_engine.get_question_count(),
        )
        self._refresh_feedback()

    def _handle_reset(self) -> None:
        self.quiz_engine.reset()
        for view in self._views:
            view.clear_selection()
        self._refresh_feedback()

    def _refresh_feedback(self) -> None:
        for view in self._views:
            question_id = view.question.id
            for index, row in enumerate(view.option_rows):
                feedback = self.quiz_engine.get_option_feedback(question_id, index)
                row.setStyleSheet(Styles.get_option_row_style(feedback, self._theme))

            explanation = self.quiz_engine.get_explanation_feedback(question_id)
            if explanation is None:
                view.explanation_label.clear()
                view.explanation_label.setVisible(False)
                continue
            view.explanation_label.setText(renderer.render_inline(explanation.text))
            view.explanation_label.setStyleSheet(
                Styles.get_explanation_style(explanation.is_correct, self._theme)
            )
            view.explanation_label.setVisible(True)

        self.score_label.setText(self.quiz_engine.get_score_text())
