"""Pure math for y = ax^2 + bx + c.

All arithmetic is written in the same operation order as the JavaScript
embedded in the HTML export so both produce identical doubles. Division by
zero (a == 0) is not rejected: numpy returns +/-inf or NaN, matching what the
browser does.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

import numpy as np

from quadratic_app.core.models import Coefficients, DerivedGeometry, GeometrySummary, Point

NO_REAL_ROOTS_TEXT = "None (complex)"


def _divide(numerator: float, denominator: float) -> float:
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(np.float64(numerator), np.float64(denominator)))


def discriminant(a: float, b: float, c: float) -> float:
    return b * b - 4 * a * c


def vertex(a: float, b: float, c: float) -> Point:
    xv = _divide(-b, 2 * a)
    yv = a * xv * xv + b * xv + c
    return Point(xv, yv)


def real_roots(a: float, b: float, c: float) -> tuple[float, ...]:
    """Return the real roots, smaller root first.

    The roots are ``(-b - sqrt(D)) / 2a`` and ``(-b + sqrt(D)) / 2a``; for
    a < 0 that pair comes out descending and is swapped. The plot assigns the
    x₁ / x₂ labels in the returned order.
    """
    d = discriminant(a, b, c)
    if d < 0:
        return ()
    if d == 0:
        return (_divide(-b, 2 * a),)
    sqrt_d = math.sqrt(d)
    first = _divide(-b - sqrt_d, 2 * a)
    second = _divide(-b + sqrt_d, 2 * a)
    if first > second:
        first, second = second, first
    return (first, second)


def evaluate(a: float, b: float, c: float, x):
    """Evaluate the quadratic at ``x`` (a float or a numpy array)."""
    return a * x * x + b * x + c


def opens_upward(a: float) -> bool:
    return a > 0


def y_intercept(coefficients: Coefficients) -> Point:
    return Point(0.0, coefficients.c)


def derive_geometry(coefficients: Coefficients) -> DerivedGeometry:
    a, b, c = coefficients.a, coefficients.b, coefficients.c
    return DerivedGeometry(
        discriminant=discriminant(a, b, c),
        vertex=vertex(a, b, c),
        roots=real_roots(a, b, c),
    )


def format_fixed(value: float, digits: int = 2) -> str:
    """Format like JavaScript's ``Number.prototype.toFixed``.

    Ties round away from zero, ``-0`` prints without a sign and non-finite
    values print as ``NaN`` / ``Infinity``. Magnitudes of 1e21 and above fall
    back to :func:`format_number`, as ``toFixed`` does.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if abs(value) >= 1e21:
        return format_number(value)
    if value == 0:
        value = 0.0
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP), "f")


def format_number(value: float) -> str:
    """Format like JavaScript's ``String(number)``.

    Uses the shortest round-trip digits, then picks plain or exponent notation
    with the same cut-offs as the browser (exponent form below 1e-6 and from
    1e21 up).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    parts = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(digit) for digit in parts.digits)
    k = len(digits)
    n = parts.exponent + k
    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return sign + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return sign + "0." + "0" * -n + digits
    exponent = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if exponent >= 0 else '-'}{abs(exponent)}"


def describe_function(coefficients: Coefficients) -> str:
    return (
        f"f(x) = {format_number(coefficients.a)}x^2 + {format_number(coefficients.b)}x"
        f" + {format_number(coefficients.c)}"
    )


def summarize_geometry(coefficients: Coefficients, geometry: DerivedGeometry) -> GeometrySummary:
    vertex_point = geometry.vertex
    if geometry.roots:
        roots_text = ", ".join(format_fixed(root) for root in geometry.roots)
    else:
        roots_text = NO_REAL_ROOTS_TEXT
    return GeometrySummary(
        vertex=f"({format_fixed(vertex_point.x)}, {format_fixed(vertex_point.y)})",
        axis=f"x = {format_fixed(vertex_point.x)}",
        opens="Upward" if opens_upward(coefficients.a) else "Downward",
        discriminant=format_fixed(geometry.discriminant),
        roots=roots_text,
        y_intercept=f"(0, {format_fixed(coefficients.c)})",
    )


def parse_evaluation_point(text: str, default: float = 0.0) -> float:
    """Parse the evaluation point field; malformed input falls back to ``default``."""
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        return default
    if not math.isfinite(value):
        return default
    return value
