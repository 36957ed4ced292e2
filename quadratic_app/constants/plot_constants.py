"""Layout and drawing constants shared by the live plot and the HTML export.

Every numeric or visual rule of the plot lives here. The Qt renderer reads
these values directly and the exporter embeds them as JSON so the standalone
page draws with exactly the same numbers.
"""

from __future__ import annotations

# Coefficient sliders: (min, max, step)
SLIDER_BOUNDS: dict[str, tuple[float, float, float]] = {
    "a": (-5.0, 5.0, 0.1),
    "b": (-10.0, 10.0, 0.1),
    "c": (-10.0, 10.0, 0.1),
}
SLIDER_SCALE: int = 10  # slider ticks per unit (1 / step)

DEFAULT_COEFFICIENTS: tuple[float, float, float] = (1.0, 0.0, 0.0)
DEFAULT_EVALUATION_POINT: float = 1.0

# Canvas sizes in pixels
LIVE_CANVAS_SIZE: tuple[int, int] = (600, 300)
EXPORT_CANVAS_SIZE: tuple[int, int] = (800, 360)

# View window
SAMPLE_RADIUS: int = 5  # integer offsets -5..5 around the vertex
X_PADDING: float = 1.0
Y_PADDING: float = 2.0

# Coordinate mapper
MAPPER_EPSILON: float = 1e-9

# Grid layer is skipped for an axis that would need more lines than this.
GRID_LINE_LIMIT: int = 1000

# Colours and strokes
BACKGROUND_COLOR: str = "#ffffff"
GRID_COLOR: str = "#e5e7eb"
GRID_LINE_WIDTH: float = 1.0
AXIS_COLOR: str = "#9ca3af"
AXIS_LINE_WIDTH: float = 2.0
CURVE_COLOR: str = "#2563eb"
CURVE_LINE_WIDTH: float = 3.0

# Annotated points
MARKER_RADIUS: float = 4.0
LABEL_OFFSET: tuple[float, float] = (6.0, -6.0)
LABEL_COLOR: str = "#111827"
LABEL_FONT_FAMILIES: tuple[str, ...] = ("Inter", "system-ui", "sans-serif")
LABEL_FONT_PIXEL_SIZE: int = 12

VERTEX_COLOR: str = "#ef4444"
ROOT_COLOR: str = "#10b981"
INTERCEPT_COLOR: str = "#f59e0b"

VERTEX_LABEL: str = "Vertex"
ROOT_LABELS: tuple[str, str] = ("x₁", "x₂")
INTERCEPT_LABEL: str = "y-intercept"


def label_font_css() -> str:
    """Return the label font in canvas/CSS shorthand, e.g. ``12px Inter, ...``."""
    return f"{LABEL_FONT_PIXEL_SIZE}px " + ", ".join(LABEL_FONT_FAMILIES)
