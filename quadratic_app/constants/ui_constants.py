"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "Quadratic Functions • Grade 10"

HEADER_BUTTON_DOWNLOAD: str = "Download HTML"
HEADER_BUTTON_SAVE_PNG: str = "Save PNG"
HEADER_BUTTON_ABOUT: str = "About"
HEADER_BUTTON_HELP: str = "Help"

PLOT_GROUP_TITLE: str = "Interactive Parabola"
EVALUATE_GROUP_TITLE: str = "Evaluate f(x)"
QUIZ_GROUP_TITLE: str = "Multiple-Choice Practice"

QUIZ_CHECK_BUTTON: str = "Check Answers"
QUIZ_RESET_BUTTON: str = "Reset"

EXPORT_DIALOG_TITLE: str = "Save standalone HTML"
EXPORT_FILE_FILTER: str = "HTML files (*.html);;All files (*.*)"
DEFAULT_EXPORT_FILENAME: str = "quadratic-functions-grade10.html"

PNG_DIALOG_TITLE: str = "Save plot as PNG"
PNG_FILE_FILTER: str = "PNG images (*.png);;All files (*.*)"
DEFAULT_PNG_FILENAME: str = "parabola.png"

OVERVIEW_TEXT: str = (
    "A quadratic function is any function that can be written in the form "
    "y = ax^2 + bx + c where a, b, and c are real numbers and a ≠ 0. "
    "Its graph is a U-shaped curve called a parabola."
)

DISCRIMINANT_NOTES: tuple[str, ...] = (
    "D > 0: Two distinct real roots.",
    "D = 0: One real root (double root).",
    "D < 0: No real roots (two complex roots).",
)

OVERVIEW_POINTS: tuple[str, ...] = (
    "Opens up if a > 0; opens down if a < 0.",
    "The axis of symmetry is x = -b/(2a).",
    "The vertex is (h, k). In standard form, h = -b/(2a) and k is the function value at h.",
    "Intercepts: y-intercept at (0, c); x-intercepts depend on the discriminant D = b^2 - 4ac.",
)

# (card title, bullet points)
FORM_CARDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Standard Form",
        ("y = ax^2 + bx + c", "Axis x = -b/(2a)", "Vertex at x = -b/(2a)", "y-intercept at c"),
    ),
    (
        "Vertex Form",
        ("y = a(x - h)^2 + k", "Vertex (h, k)", "Complete the square to convert", "h = -b/(2a), k = f(h)"),
    ),
    (
        "Factored Form",
        ("y = a(x - r1)(x - r2)", "x-intercepts r1 and r2", "Use when roots are easy", "Area models help factor"),
    ),
)
