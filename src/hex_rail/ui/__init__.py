"""Presentation layer for Hex Rail."""

from .coords import canvas_to_window, to_top_left_y, window_to_canvas

__all__ = ["canvas_to_window", "to_top_left_y", "window_to_canvas"]
