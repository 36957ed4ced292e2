"""Static metadata describing QuadQt."""

APP_NAME = "QuadQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuadQt is a classroom study pack for quadratic functions built with Qt. "
    "Move the coefficient sliders to explore the parabola, evaluate f(x), "
    "take the practice quiz, and download a standalone HTML copy that works offline."
)

HELP_TEXT = (
    "Use the a, b and c sliders to change y = ax^2 + bx + c. The plot marks the vertex, "
    "the real roots (x₁ before x₂) and the y-intercept.\n\n"
    "Type any number into the x field to evaluate f(x).\n\n"
    "Answer the practice questions, then press Check Answers to see your score and the "
    "explanations. Reset clears your answers.\n\n"
    "Download HTML saves a single file with the current parabola and the quiz. "
    "A custom question bank can be loaded with --questions using this format:\n\n"
    "Q: The graph of y = -x^2 opens:\n"
    "A: Upward\nB: Downward\nC: Sideways\nD: It is a line\n"
    "CORRECT: B\n"
    "EXPLANATION: a = -1 < 0, so the parabola opens downward."
)
