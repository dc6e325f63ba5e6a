"""Colour palette and per-class styles used by Hex Rail."""

from typing import Final

from hex_rail.scene import (
    CLASS_HEX_BACKGROUND,
    CLASS_HEX_EDGE,
    CLASS_HEX_EDGE_HIGHLIGHT,
    CLASS_HEX_FOREGROUND,
    CLASS_RAILS,
    CLASS_RAILS_GHOST,
)

RGBA = tuple[int, int, int, int]

COLOR_CHARCOAL: Final[RGBA] = (45, 45, 45, 255)
COLOR_SLATE_GRAY: Final[RGBA] = (96, 108, 118, 255)
COLOR_FOG_GRAY: Final[RGBA] = (200, 200, 200, 255)
COLOR_AMBER: Final[RGBA] = (255, 191, 0, 160)
COLOR_TRANSPARENT: Final[RGBA] = (0, 0, 0, 0)
COLOR_RAIL: Final[RGBA] = (58, 40, 28, 255)
COLOR_RAIL_GHOST: Final[RGBA] = (58, 40, 28, 96)

CANVAS_BACKGROUND: Final[RGBA] = COLOR_CHARCOAL

# fill, stroke, stroke width per CSS class.
CLASS_STYLES: Final[dict[str, tuple[RGBA, RGBA, float]]] = {
    CLASS_HEX_BACKGROUND: (COLOR_SLATE_GRAY, COLOR_TRANSPARENT, 0.0),
    CLASS_HEX_EDGE: (COLOR_TRANSPARENT, COLOR_TRANSPARENT, 0.0),
    CLASS_HEX_EDGE_HIGHLIGHT: (COLOR_AMBER, COLOR_TRANSPARENT, 0.0),
    CLASS_HEX_FOREGROUND: (COLOR_TRANSPARENT, COLOR_CHARCOAL, 2.0),
    CLASS_RAILS: (COLOR_TRANSPARENT, COLOR_RAIL, 3.0),
    CLASS_RAILS_GHOST: (COLOR_TRANSPARENT, COLOR_RAIL_GHOST, 3.0),
}


def style_for(css_class: str) -> tuple[RGBA, RGBA, float]:
    return CLASS_STYLES.get(css_class, (COLOR_TRANSPARENT, COLOR_FOG_GRAY, 1.0))


def css_color(color: RGBA) -> str:
    r, g, b, a = color
    if a == 255:
        return f"#{r:02X}{g:02X}{b:02X}"
    if a == 0:
        return "none"
    return f"rgba({r},{g},{b},{a / 255:.2f})"


def stylesheet() -> str:
    """CSS rules matching CLASS_STYLES for standalone SVG output."""

    rules = []
    for css_class, (fill, stroke, width) in CLASS_STYLES.items():
        selector = "." + ".".join(css_class.split())
        rules.append(
            f"{selector} {{ fill: {css_color(fill)}; stroke: {css_color(stroke)}; stroke-width: {width:g}; }}"
        )
    return "\n".join(rules)
