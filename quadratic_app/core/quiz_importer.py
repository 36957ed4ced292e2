"""Utilities for loading a question bank from a human-friendly text file.

File format (repeat blocks separated by blank lines or '---'):

    Q: Question text (supports markdown). Additional lines until the next
       marker are treated as part of the question.
    A: First option text
    B: Second option text
    ...                 (two to six options, A-F, in order)
    CORRECT: A|B|...
    EXPLANATION: Text shown after the answers are checked (optional).

Example:

    Q: For y = x^2 + 6x + 9, how many real x-intercepts are there?
    A: 0
    B: 1
    C: 2
    D: Infinitely many
    CORRECT: B
    EXPLANATION: D = 36 - 36 = 0, so there is one repeated root.

Question ids are assigned 1..n in file order so they stay stable for a given
file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from quadratic_app.core.models import Question
from quadratic_app.core.question_bank import validate_question_bank

logger = logging.getLogger(__name__)


class QuizImportError(Exception):
    """Raised when a question bank definition cannot be parsed."""


_OPTION_ORDER = ["A", "B", "C", "D", "E", "F"]
_MIN_OPTIONS = 2


def load_question_bank_from_file(file_path: Path) -> tuple[Question, ...]:
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise QuizImportError(f"{file_path} is not a UTF-8 text file ({exc.reason})") from exc
    questions = parse_question_bank(text)
    logger.info("Loaded %d questions from %s", len(questions), file_path)
    return questions


def parse_question_bank(text: str) -> tuple[Question, ...]:
    blocks = _split_blocks(text)
    if not blocks:
        raise QuizImportError("Question file did not contain any questions.")
    questions = [_parse_block(block, question_id) for question_id, block in enumerate(blocks, start=1)]
    try:
        return validate_question_bank(questions)
    except ValueError as exc:
        raise QuizImportError(str(exc)) from exc


def _split_blocks(text: str) -> list[str]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())
    return [block for block in blocks if block]


def _parse_block(block: str, question_id: int) -> Question:
    question_lines: list[str] = []
    explanation_lines: list[str] = []
    options: dict[str, str] = {}
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        if len(line) > 2 and line[0].upper() in _OPTION_ORDER and line[1] == ":":
            letter = line[0].upper()
            options[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section in _OPTION_ORDER:
            options[current_section] = options[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    prompt = "\n".join(question_lines).strip()
    if not prompt:
        raise QuizImportError("Question text missing (Q: ...)")

    letters = _OPTION_ORDER[: len(options)]
    if len(options) < _MIN_OPTIONS or sorted(options) != letters:
        raise QuizImportError(
            "Each question must define at least two options, lettered in order starting at A."
        )
    option_list = tuple(options[letter].strip() for letter in letters)
    if any(not opt for opt in option_list):
        raise QuizImportError("Option text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError("CORRECT is required for every question.")
    if correct_letter not in letters:
        raise QuizImportError(f"CORRECT must be one of {', '.join(letters)}.")

    return Question(
        id=question_id,
        prompt=prompt,
        options=option_list,
        correct_option_index=letters.index(correct_letter),
        explanation="\n".join(explanation_lines).strip(),
    )
