"""Application entry point for QuadQt."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from quadratic_app.constants.about import APP_NAME
from quadratic_app.constants.plot_constants import (
    DEFAULT_COEFFICIENTS,
    DEFAULT_EVALUATION_POINT,
    SLIDER_BOUNDS,
)
from quadratic_app.core.export_serializer import (
    ExportError,
    extract_export_config,
    save_export_to_file,
)
from quadratic_app.core.models import Coefficients, ExportSnapshot, Question
from quadratic_app.core.question_bank import DEFAULT_QUESTIONS
from quadratic_app.core.quiz_importer import QuizImportError, load_question_bank_from_file
from quadratic_app.styling.color_palette import Theme
from quadratic_app.ui.dialog_helpers import show_warning
from quadratic_app.ui.main_window import StudyMainWindow
from quadratic_app.utils.logging_config import configure_logging


def _coefficient(name: str):
    low, high, _step = SLIDER_BOUNDS[name]

    def parse(text: str) -> float:
        try:
            value = float(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"{text!r} is not a number") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(f"{name} must be between {low:g} and {high:g}")
        return value

    return parse


def build_argument_parser() -> argparse.ArgumentParser:
    default_a, default_b, default_c = DEFAULT_COEFFICIENTS
    parser = argparse.ArgumentParser(
        prog="quadqt",
        description="Interactive study pack for quadratic functions.",
    )
    parser.add_argument("--questions", type=Path, help="question bank file (Q:/A:/CORRECT: format)")
    parser.add_argument("--a", type=_coefficient("a"), default=default_a)
    parser.add_argument("--b", type=_coefficient("b"), default=default_b)
    parser.add_argument("--c", type=_coefficient("c"), default=default_c)
    parser.add_argument("--x", type=float, default=DEFAULT_EVALUATION_POINT, help="evaluation point")
    parser.add_argument("--theme", choices=("light", "dark"), default="light")
    parser.add_argument(
        "--export",
        type=Path,
        metavar="PATH",
        help="write the standalone HTML page to PATH and exit without opening a window",
    )
    return parser


def _load_questions(path: Path | None) -> tuple[Question, ...]:
    if path is None:
        return DEFAULT_QUESTIONS
    return load_question_bank_from_file(path)


def main(argv: list[str] | None = None) -> None:
    """Parse options, then either export headlessly or launch the Qt UI."""
    args = build_argument_parser().parse_args(argv)
    logger = configure_logging()
    coefficients = Coefficients(args.a, args.b, args.c)

    if args.export is not None:
        try:
            questions = _load_questions(args.questions)
            snapshot = ExportSnapshot.capture(coefficients, questions, args.x)
            saved_path = save_export_to_file(args.export, snapshot)
            config = extract_export_config(saved_path.read_text(encoding="utf-8"))
        except (OSError, QuizImportError, ExportError, ValueError) as exc:
            logger.error("Export failed: %s", exc)
            sys.exit(1)
        logger.info("Verified export with %d questions", len(config["questions"]))
        return

    logger.info("Starting %s…", APP_NAME)
    app = QApplication(sys.argv[:1])

    load_error: str | None = None
    try:
        questions = _load_questions(args.questions)
    except (OSError, QuizImportError, ValueError) as exc:
        logger.warning("Falling back to the built-in questions: %s", exc)
        load_error = str(exc)
        questions = DEFAULT_QUESTIONS

    window = StudyMainWindow(
        questions=questions,
        coefficients=coefficients,
        evaluation_point=args.x,
        theme=Theme.DARK if args.theme == "dark" else Theme.LIGHT,
    )
    window.show()
    if load_error is not None:
        show_warning(window, "Questions not loaded", load_error)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
