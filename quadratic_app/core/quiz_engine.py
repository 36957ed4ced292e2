"""Answer tracking, scoring and check/reset state for the practice quiz."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable

from quadratic_app.core.models import Question

CORRECT_PREFIX = "Correct! "
INCORRECT_PREFIX = "Not quite. "


class QuizState(Enum):
    UNANSWERED = auto()
    ANSWERED = auto()
    SUBMITTED = auto()


class OptionFeedback(Enum):
    """Colouring of an option row once answers have been checked."""

    NEUTRAL = auto()
    CORRECT = auto()
    INCORRECT = auto()


@dataclass(frozen=True, slots=True)
class ExplanationFeedback:
    is_correct: bool
    text: str


class QuizEngine:
    """Tracks the selected option per question over a fixed question bank."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._by_id: dict[int, Question] = {q.id: q for q in self._questions}
        if len(self._by_id) != len(self._questions):
            raise ValueError("Question ids must be unique.")
        self._answers: dict[int, int] = {}
        self._submitted: bool = False

    @property
    def questions(self) -> tuple[Question, ...]:
        return self._questions

    def get_question_count(self) -> int:
        return len(self._questions)

    def get_question(self, question_id: int) -> Question:
        try:
            return self._by_id[question_id]
        except KeyError:
            raise KeyError(f"Unknown question id {question_id}") from None

    def get_state(self) -> QuizState:
        if self._submitted:
            return QuizState.SUBMITTED
        if self._answers:
            return QuizState.ANSWERED
        return QuizState.UNANSWERED

    def is_submitted(self) -> bool:
        return self._submitted

    def select_option(self, question_id: int, option_index: int) -> None:
        """Record (or overwrite) the selected option for a question."""
        question = self.get_question(question_id)
        if not 0 <= option_index < len(question.options):
            raise IndexError(f"Option index {option_index} out of range")
        self._answers[question_id] = option_index

    def get_selected_option(self, question_id: int) -> int | None:
        return self._answers.get(question_id)

    def get_answers(self) -> dict[int, int]:
        return dict(self._answers)

    def check_answers(self) -> None:
        self._submitted = True

    def reset(self) -> None:
        self._answers = {}
        self._submitted = False

    def get_score(self) -> int:
        return sum(1 for q in self._questions if q.is_correct(self._answers.get(q.id)))

    def get_score_text(self) -> str:
        if not self._submitted:
            return ""
        return f"Score: {self.get_score()} / {len(self._questions)}"

    def get_option_feedback(self, question_id: int, option_index: int) -> OptionFeedback:
        question = self.get_question(question_id)
        if not self._submitted:
            return OptionFeedback.NEUTRAL
        if option_index == question.correct_option_index:
            return OptionFeedback.CORRECT
        if self._answers.get(question_id) == option_index:
            return OptionFeedback.INCORRECT
        return OptionFeedback.NEUTRAL

    def get_explanation_feedback(self, question_id: int) -> ExplanationFeedback | None:
        """Explanation shown for every question after checking, answered or not."""
        question = self.get_question(question_id)
        if not self._submitted:
            return None
        is_correct = question.is_correct(self._answers.get(question_id))
        prefix = CORRECT_PREFIX if is_correct else INCORRECT_PREFIX
        return ExplanationFeedback(is_correct=is_correct, text=prefix + question.explanation)
