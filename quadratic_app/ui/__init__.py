"""Qt UI components for the study pack."""

from .dialog_helpers import show_error, show_info, show_warning
from .main_window import StudyMainWindow

__all__ = [
    "StudyMainWindow",
    "show_error",
    "show_info",
    "show_warning",
]
