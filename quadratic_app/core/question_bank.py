"""Built-in practice questions and bank validation."""

from __future__ import annotations

from typing import Iterable

from quadratic_app.core.models import Question

DEFAULT_QUESTIONS: tuple[Question, ...] = (
    Question(
        id=1,
        prompt="Which of the following is the standard form of a quadratic function?",
        options=("y = mx + b", "y = ax^2 + bx + c", "y = a(x - h)^2 + k", "y = a/x"),
        correct_option_index=1,
        explanation="Quadratic standard form is y = ax^2 + bx + c with a ≠ 0.",
    ),
    Question(
        id=2,
        prompt="If y = 2x^2 - 8x + 6, what are the coordinates of the vertex?",
        options=("(-2, 2)", "(2, -2)", "(4, 2)", "(2, 6)"),
        correct_option_index=1,
        explanation="x_v = -b/(2a) = 8/4 = 2. y_v = 2(2)^2 - 8(2) + 6 = 8 - 16 + 6 = -2.",
    ),
    Question(
        id=3,
        prompt="The graph of y = -x^2 opens:",
        options=("Upward", "Downward", "Sideways", "It is a line"),
        correct_option_index=1,
        explanation="a = -1 < 0, so the parabola opens downward.",
    ),
    Question(
        id=4,
        prompt="For y = x^2 + 6x + 9, how many real x-intercepts are there?",
        options=("0", "1", "2", "Infinitely many"),
        correct_option_index=1,
        explanation=(
            "Discriminant D = b^2 - 4ac = 36 - 36 = 0, so one real intercept (a repeated root)."
        ),
    ),
    Question(
        id=5,
        prompt="Which expression gives the axis of symmetry of y = ax^2 + bx + c?",
        options=("x = -c/b", "x = -b/(2a)", "x = a/(2b)", "x = 2a/b"),
        correct_option_index=1,
        explanation="The axis of symmetry is x = -b/(2a).",
    ),
    Question(
        id=6,
        prompt="If a > 0 in y = ax^2 + bx + c, the vertex represents:",
        options=("A maximum", "A minimum", "Neither", "It depends on b"),
        correct_option_index=1,
        explanation="For a > 0 the parabola opens up, so the vertex is the minimum point.",
    ),
)


def validate_question_bank(questions: Iterable[Question]) -> tuple[Question, ...]:
    """Return the bank as a tuple after checking it is non-empty with unique ids."""
    bank = tuple(questions)
    if not bank:
        raise ValueError("Question bank must contain at least one question.")
    seen: set[int] = set()
    for question in bank:
        if question.id in seen:
            raise ValueError(f"Duplicate question id {question.id}.")
        seen.add(question.id)
    return bank
