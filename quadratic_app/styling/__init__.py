"""Styling module for the QuadQt application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
