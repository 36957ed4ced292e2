"""Domain models for the quadratic study pack."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True, slots=True)
class Coefficients:
    """Coefficients of y = ax^2 + bx + c.

    ``a`` is expected to be non-zero but is not validated: a == 0 produces
    infinite or NaN geometry instead of an error.
    """

    a: float
    b: float
    c: float


@dataclass(frozen=True, slots=True)
class Point:
    """A point in math coordinates."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class DerivedGeometry:
    """Geometry derived from a set of coefficients."""

    discriminant: float
    vertex: Point
    roots: tuple[float, ...]  # 0, 1 or 2 values, smaller root first


@dataclass(frozen=True, slots=True)
class Viewport:
    """Rectangular math-coordinate region mapped onto the canvas."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def contains(self, x: float, y: float) -> bool:
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y


@dataclass(frozen=True, slots=True)
class GeometrySummary:
    """Display strings for the readout cards next to the plot."""

    vertex: str
    axis: str
    opens: str
    discriminant: str
    roots: str
    y_intercept: str


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with a single correct option."""

    id: int
    prompt: str
    options: tuple[str, ...]
    correct_option_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        if not self.prompt.strip():
            raise ValueError("Question prompt must not be empty.")
        if len(self.options) < 2:
            raise ValueError("Each question needs at least two options.")
        if any(not option.strip() for option in self.options):
            raise ValueError("Option text cannot be empty.")
        if not 0 <= self.correct_option_index < len(self.options):
            raise ValueError(
                f"Correct option index must be between 0 and {len(self.options) - 1}."
            )

    def is_correct(self, option_index: int | None) -> bool:
        return option_index == self.correct_option_index


@dataclass(frozen=True, slots=True)
class ExportSnapshot:
    """Value copy of everything the standalone export needs."""

    coefficients: Coefficients
    questions: tuple[Question, ...]
    evaluation_point: float = 1.0

    @classmethod
    def capture(
        cls,
        coefficients: Coefficients,
        questions: Iterable[Question],
        evaluation_point: float = 1.0,
    ) -> "ExportSnapshot":
        # Coefficients and Question are frozen, so copying the containers is enough.
        return cls(
            coefficients=Coefficients(
                float(coefficients.a), float(coefficients.b), float(coefficients.c)
            ),
            questions=tuple(questions),
            evaluation_point=float(evaluation_point),
        )
