"""Centralized Qt stylesheets for the application."""

from quadratic_app.core.quiz_engine import OptionFeedback

from .color_palette import ColorPalette, Theme


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Inter', 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton#primaryButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                padding: 4px;
            }}
            QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 10px;
                margin-top: 8px;
                padding-top: 12px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_title_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 20pt; font-weight: bold; color: {ColorPalette.TITLE.get(theme)};"

    @staticmethod
    def get_card_style(background: str, theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {background}; border-radius: 6px; padding: 8px;"
            f" color: {ColorPalette.TEXT_PRIMARY.get(theme)};"
        )

    @staticmethod
    def get_option_row_style(feedback: OptionFeedback, theme: Theme = Theme.LIGHT) -> str:
        if feedback == OptionFeedback.CORRECT:
            background = ColorPalette.FEEDBACK_CORRECT_BG.get(theme)
            border = ColorPalette.FEEDBACK_CORRECT_BORDER.get(theme)
        elif feedback == OptionFeedback.INCORRECT:
            background = ColorPalette.FEEDBACK_INCORRECT_BG.get(theme)
            border = ColorPalette.FEEDBACK_INCORRECT_BORDER.get(theme)
        else:
            background = ColorPalette.BACKGROUND_PRIMARY.get(theme)
            border = ColorPalette.BORDER_PRIMARY.get(theme)
        return (
            f"QFrame#optionRow {{ background-color: {background}; border: 1px solid {border};"
            " border-radius: 6px; }"
        )

    @staticmethod
    def get_explanation_style(is_correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = (
            ColorPalette.FEEDBACK_CORRECT_TEXT if is_correct else ColorPalette.FEEDBACK_INCORRECT_TEXT
        )
        return f"color: {color.get(theme)}; font-size: 13px;"
