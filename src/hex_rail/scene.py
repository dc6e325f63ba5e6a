"""Renderer-neutral drawable primitives produced by the rail renderer."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Iterator, Union

Point = tuple[float, float]

CLASS_HEX_BACKGROUND = "hex-background"
CLASS_HEX_FOREGROUND = "hex-foreground"
CLASS_HEX_EDGE = "hex-edge"
CLASS_HEX_EDGE_HIGHLIGHT = "hex-edge highlight"
CLASS_RAILS = "rails"
CLASS_RAILS_GHOST = "rails ghost"


def format_number(value: float) -> str:
    """Compact decimal text for SVG attributes."""

    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


@dataclass(frozen=True)
class Polygon:
    points: tuple[Point, ...]
    css_class: str

    @property
    def points_attr(self) -> str:
        return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in self.points)


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    css_class: str


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    css_class: str


@dataclass(frozen=True)
class Arc:
    """Circular arc in SVG endpoint form (x-axis rotation fixed at 0)."""

    start: Point
    end: Point
    radius: float
    large_arc: bool = False
    sweep: bool = False

    def center(self) -> Point:
        (x1, y1), (x2, y2) = self.start, self.end
        half_dx = (x1 - x2) / 2
        half_dy = (y1 - y2) / 2
        chord_sq = half_dx * half_dx + half_dy * half_dy
        mid_x = (x1 + x2) / 2
        mid_y = (y1 + y2) / 2
        if chord_sq == 0:
            return mid_x, mid_y

        radius_sq = max(self.radius * self.radius, chord_sq)
        coef = math.sqrt(max(0.0, (radius_sq - chord_sq) / chord_sq))
        sign = -1.0 if self.large_arc == self.sweep else 1.0
        return mid_x + sign * coef * half_dy, mid_y - sign * coef * half_dx

    def sample(self, segments: int = 16) -> list[Point]:
        """Polyline approximation running from ``start`` to ``end``."""

        if segments < 1:
            raise ValueError("segments must be at least 1")
        cx, cy = self.center()
        (x1, y1), (x2, y2) = self.start, self.end
        radius = math.hypot(x1 - cx, y1 - cy)
        if radius == 0:
            return [self.start, self.end]

        theta1 = math.atan2(y1 - cy, x1 - cx)
        delta = math.atan2(y2 - cy, x2 - cx) - theta1
        if not self.sweep and delta > 0:
            delta -= 2 * math.pi
        elif self.sweep and delta < 0:
            delta += 2 * math.pi

        points = [self.start]
        for step in range(1, segments):
            angle = theta1 + delta * step / segments
            points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
        points.append(self.end)
        return points

    def path_data(self) -> str:
        (x1, y1), (x2, y2) = self.start, self.end
        radius = format_number(self.radius)
        return (
            f"M{format_number(x1)},{format_number(y1)} "
            f"A{radius},{radius} 0 {int(self.large_arc)} {int(self.sweep)} "
            f"{format_number(x2)},{format_number(y2)}"
        )


@dataclass(frozen=True)
class Path:
    arcs: tuple[Arc, ...]
    css_class: str

    @property
    def d(self) -> str:
        return " ".join(arc.path_data() for arc in self.arcs)


Primitive = Union[Polygon, Line, Circle, Path]


@dataclass(frozen=True)
class CellGroup:
    """Primitives of one cell, in cell-local coordinates around ``origin``."""

    q: int
    r: int
    origin: Point
    children: tuple[Primitive, ...]

    def rails(self) -> list[Primitive]:
        return [child for child in self.children if child.css_class.split()[0] == CLASS_RAILS]


@dataclass(frozen=True)
class Scene:
    cells: tuple[CellGroup, ...]
    width: int
    height: int

    def cell(self, q: int, r: int) -> CellGroup | None:
        for group in self.cells:
            if (group.q, group.r) == (q, r):
                return group
        return None

    def iter_primitives(self) -> Iterator[tuple[Point, Primitive]]:
        for group in self.cells:
            for child in group.children:
                yield group.origin, child

    def count_by_class(self) -> Counter:
        return Counter(child.css_class for _, child in self.iter_primitives())


__all__ = [
    "Arc",
    "CellGroup",
    "Circle",
    "Line",
    "Path",
    "Point",
    "Polygon",
    "Primitive",
    "Scene",
    "format_number",
    "CLASS_HEX_BACKGROUND",
    "CLASS_HEX_FOREGROUND",
    "CLASS_HEX_EDGE",
    "CLASS_HEX_EDGE_HIGHLIGHT",
    "CLASS_RAILS",
    "CLASS_RAILS_GHOST",
]
