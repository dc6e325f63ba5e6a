"""Conversions between window pixels and canvas-centred coordinates."""

from __future__ import annotations

from hex_rail.config import CANVAS_ORIGIN_X_PX, CANVAS_ORIGIN_Y_PX, SCREEN_HEIGHT


def to_top_left_y(y: float, screen_height: float = SCREEN_HEIGHT) -> float:
    return screen_height - y


def window_to_canvas(x: float, y: float, screen_height: float = SCREEN_HEIGHT) -> tuple[float, float]:
    """Arcade (bottom-left origin) pointer position to canvas-centred coordinates."""

    return x - CANVAS_ORIGIN_X_PX, to_top_left_y(y, screen_height) - CANVAS_ORIGIN_Y_PX


def canvas_to_window(origin, point, screen_height: float = SCREEN_HEIGHT) -> tuple[float, float]:
    """Cell-local ``point`` inside a group at ``origin`` to arcade window coordinates."""

    x = CANVAS_ORIGIN_X_PX + origin[0] + point[0]
    y = CANVAS_ORIGIN_Y_PX + origin[1] + point[1]
    return x, to_top_left_y(y, screen_height)
