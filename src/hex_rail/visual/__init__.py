"""Visual constants for Hex Rail."""

from .theme import CANVAS_BACKGROUND, CLASS_STYLES, css_color, style_for, stylesheet

__all__ = ["CANVAS_BACKGROUND", "CLASS_STYLES", "css_color", "style_for", "stylesheet"]
