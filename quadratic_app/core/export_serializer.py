"""Builds the standalone HTML copy of the study pack.

The exported page embeds a snapshot of the current coefficients and the
question bank, plus its own JavaScript implementation of the plot and quiz
(see :mod:`quadratic_app.core.export_page`). It has no external references
and works offline.
"""

from __future__ import annotations

import html
import json
import logging
import re
from datetime import date
from pathlib import Path
from typing import Any

from quadratic_app.constants import plot_constants as pc
from quadratic_app.constants.ui_constants import OVERVIEW_POINTS, OVERVIEW_TEXT
from quadratic_app.core.export_page import (
    CONFIG_MARKER,
    CONFIG_PREFIX,
    EXPORT_PAGE_HTML,
    FOOTER_MARKER,
    OVERVIEW_MARKER,
    TITLE_MARKER,
)
from quadratic_app.core.markdown_renderer import renderer
from quadratic_app.core.models import Coefficients, ExportSnapshot, Question
from quadratic_app.core.quadratic_math import NO_REAL_ROOTS_TEXT
from quadratic_app.core.quiz_engine import CORRECT_PREFIX, INCORRECT_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_TITLE = "Quadratic Functions • Grade 10"
_CONFIG_LINE = re.compile(r"^\s*" + re.escape(CONFIG_PREFIX) + r"(?P<config>.*);\s*$", re.MULTILINE)


class ExportError(Exception):
    """Raised when an exported document cannot be read back."""


def _question_config(number: int, question: Question) -> dict[str, Any]:
    return {
        "id": question.id,
        "titleHtml": renderer.render_numbered_prompt(number, question.prompt),
        "prompt": question.prompt,
        "promptHtml": renderer.render_inline(question.prompt),
        "options": list(question.options),
        "optionsHtml": [renderer.render_inline(option) for option in question.options],
        "correctOptionIndex": question.correct_option_index,
        "explanation": question.explanation,
        "explanationHtml": renderer.render_inline(question.explanation),
    }


def build_export_config(
    snapshot: ExportSnapshot,
    canvas_width: int = pc.EXPORT_CANVAS_SIZE[0],
    canvas_height: int = pc.EXPORT_CANVAS_SIZE[1],
) -> dict[str, Any]:
    """Return the data and drawing rules embedded in the exported page."""
    coefficients = snapshot.coefficients
    label_offset_x, label_offset_y = pc.LABEL_OFFSET
    return {
        "coefficients": {"a": coefficients.a, "b": coefficients.b, "c": coefficients.c},
        "evaluationPoint": snapshot.evaluation_point,
        "sliders": {
            name: {"min": low, "max": high, "step": step}
            for name, (low, high, step) in pc.SLIDER_BOUNDS.items()
        },
        "canvas": {"width": canvas_width, "height": canvas_height},
        "viewport": {
            "sampleRadius": pc.SAMPLE_RADIUS,
            "xPadding": pc.X_PADDING,
            "yPadding": pc.Y_PADDING,
        },
        "mapperEpsilon": pc.MAPPER_EPSILON,
        "gridLineLimit": pc.GRID_LINE_LIMIT,
        "style": {
            "background": pc.BACKGROUND_COLOR,
            "grid": {"color": pc.GRID_COLOR, "lineWidth": pc.GRID_LINE_WIDTH},
            "axes": {"color": pc.AXIS_COLOR, "lineWidth": pc.AXIS_LINE_WIDTH},
            "curve": {"color": pc.CURVE_COLOR, "lineWidth": pc.CURVE_LINE_WIDTH},
            "marker": {
                "radius": pc.MARKER_RADIUS,
                "labelOffsetX": label_offset_x,
                "labelOffsetY": label_offset_y,
                "labelColor": pc.LABEL_COLOR,
                "font": pc.label_font_css(),
            },
            "vertexColor": pc.VERTEX_COLOR,
            "rootColor": pc.ROOT_COLOR,
            "interceptColor": pc.INTERCEPT_COLOR,
        },
        "labels": {
            "vertex": pc.VERTEX_LABEL,
            "roots": list(pc.ROOT_LABELS),
            "intercept": pc.INTERCEPT_LABEL,
        },
        "text": {
            "noRealRoots": NO_REAL_ROOTS_TEXT,
            "correctPrefix": CORRECT_PREFIX,
            "incorrectPrefix": INCORRECT_PREFIX,
        },
        "questions": [
            _question_config(number, question)
            for number, question in enumerate(snapshot.questions, start=1)
        ],
    }


def _overview_html() -> str:
    items = "".join(f"<li>{html.escape(point)}</li>" for point in OVERVIEW_POINTS)
    return f"<p>{html.escape(OVERVIEW_TEXT)}</p>\n          <ul>{items}</ul>"


def _embed_json(data: dict[str, Any]) -> str:
    # Keep "</script>" inside strings from closing the script element.
    return json.dumps(data, ensure_ascii=True).replace("</", "<\\/")


def build_export_html(
    snapshot: ExportSnapshot,
    canvas_width: int = pc.EXPORT_CANVAS_SIZE[0],
    canvas_height: int = pc.EXPORT_CANVAS_SIZE[1],
    title: str = DEFAULT_EXPORT_TITLE,
) -> str:
    config = build_export_config(snapshot, canvas_width, canvas_height)
    footer = f"© {date.today().year} Quadratic Functions Study Pack"
    return (
        EXPORT_PAGE_HTML.replace(TITLE_MARKER, html.escape(title))
        .replace(FOOTER_MARKER, html.escape(footer))
        .replace(OVERVIEW_MARKER, _overview_html())
        .replace(CONFIG_MARKER, _embed_json(config))
    )


def save_export_to_file(
    file_path: Path,
    snapshot: ExportSnapshot,
    canvas_width: int = pc.EXPORT_CANVAS_SIZE[0],
    canvas_height: int = pc.EXPORT_CANVAS_SIZE[1],
) -> Path:
    """Write the standalone page to ``file_path`` and return the resolved path."""
    document = build_export_html(snapshot, canvas_width, canvas_height)
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(document, encoding="utf-8")
    logger.info(
        "Exported a=%s b=%s c=%s with %d questions to %s",
        snapshot.coefficients.a,
        snapshot.coefficients.b,
        snapshot.coefficients.c,
        len(snapshot.questions),
        file_path,
    )
    return file_path


def extract_export_config(document: str) -> dict[str, Any]:
    """Read the embedded configuration back out of an exported page."""
    match = _CONFIG_LINE.search(document)
    if match is None:
        raise ExportError("Document does not contain an embedded configuration.")
    try:
        return json.loads(match.group("config"))
    except json.JSONDecodeError as exc:
        raise ExportError(f"Embedded configuration is not valid JSON: {exc}") from exc


def snapshot_from_config(config: dict[str, Any]) -> ExportSnapshot:
    """Rebuild the snapshot that produced an embedded configuration."""
    coefficients = config["coefficients"]
    questions = tuple(
        Question(
            id=entry["id"],
            prompt=entry["prompt"],
            options=tuple(entry["options"]),
            correct_option_index=entry["correctOptionIndex"],
            explanation=entry["explanation"],
        )
        for entry in config["questions"]
    )
    return ExportSnapshot(
        coefficients=Coefficients(coefficients["a"], coefficients["b"], coefficients["c"]),
        questions=questions,
        evaluation_point=config["evaluationPoint"],
    )
