"""Arcade window that drives the rail editor and draws its scene."""

from __future__ import annotations

import logging

import arcade
from arcade.types import Color

from hex_rail.config import ARC_SAMPLE_SEGMENTS, FPS, SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE
from hex_rail.editor import RailEditor
from hex_rail.scene import Circle, Line, Path, Polygon
from hex_rail.svg import write_svg
from hex_rail.ui.coords import canvas_to_window, window_to_canvas
from hex_rail.visual import CANVAS_BACKGROUND, style_for

logger = logging.getLogger(__name__)

SVG_EXPORT_PATH = "hex_rail.svg"


def _visible(color) -> bool:
    return color[3] > 0


def _draw_polygon(origin, primitive):
    fill, stroke, width = style_for(primitive.css_class)
    points = [canvas_to_window(origin, point) for point in primitive.points]
    if _visible(fill):
        arcade.draw_polygon_filled(points, Color(*fill))
    if _visible(stroke) and width > 0:
        arcade.draw_polygon_outline(points, Color(*stroke), width)


def _draw_line(origin, primitive):
    _, stroke, width = style_for(primitive.css_class)
    x1, y1 = canvas_to_window(origin, primitive.start)
    x2, y2 = canvas_to_window(origin, primitive.end)
    arcade.draw_line(x1, y1, x2, y2, Color(*stroke), width)


def _draw_path(origin, primitive):
    _, stroke, width = style_for(primitive.css_class)
    for arc in primitive.arcs:
        points = [canvas_to_window(origin, point) for point in arc.sample(ARC_SAMPLE_SEGMENTS)]
        arcade.draw_line_strip(points, Color(*stroke), width)


def _draw_circle(origin, primitive):
    fill, stroke, width = style_for(primitive.css_class)
    cx, cy = canvas_to_window(origin, primitive.center)
    # Rail classes have no fill; dots are drawn solid in the stroke colour.
    arcade.draw_circle_filled(cx, cy, primitive.radius, Color(*(fill if _visible(fill) else stroke)))


_DRAWERS = {
    Polygon: _draw_polygon,
    Line: _draw_line,
    Path: _draw_path,
    Circle: _draw_circle,
}


def draw_scene(scene):
    for origin, primitive in scene.iter_primitives():
        _DRAWERS[type(primitive)](origin, primitive)


class RailEditorWindow(arcade.Window):
    def __init__(self, editor: RailEditor | None = None):
        super().__init__(SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, update_rate=1 / FPS)
        self.background_color = Color(*CANVAS_BACKGROUND)
        self.editor = editor if editor is not None else RailEditor()
        self._scene = self.editor.render()

    def _refresh(self):
        self._scene = self.editor.render()

    def on_draw(self):
        self.clear()
        draw_scene(self._scene)

    def on_mouse_motion(self, x, y, dx, dy):
        previous = self.editor.highlight
        if self.editor.on_pointer_move(*window_to_canvas(x, y)) != previous:
            self._refresh()

    def on_mouse_leave(self, x, y):
        if self.editor.highlight is not None:
            self.editor.on_pointer_leave()
            self._refresh()

    def on_mouse_press(self, x, y, button, modifiers):
        if button != arcade.MOUSE_BUTTON_LEFT:
            return
        if self.editor.on_click(*window_to_canvas(x, y)):
            self._refresh()

    def on_key_press(self, symbol, modifiers):
        if symbol == arcade.key.S:
            write_svg(self._scene, SVG_EXPORT_PATH)
        elif symbol == arcade.key.ESCAPE:
            logger.info("Closing editor with %d rail connections", self.editor.grid.count_connections())
            self.close()


__all__ = ["RailEditorWindow", "draw_scene"]
