"""Editor state, pointer events and the reducer that applies them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace

from hex_rail.config import RAIL_GRID_STANDARD, RAIL_RENDER_STANDARD
from hex_rail.grid import RailGrid
from hex_rail.hit_test import HexEdge, edge_from_coord
from hex_rail.render import render

logger = logging.getLogger(__name__)

# Track from the original demo board: two branches joined through (0, 0),
# (0, 1) and (1, 1), with open ends at (0, -1) and (0, 2).
REFERENCE_TRACK: tuple[tuple[int, int, int], ...] = (
    (0, 1, 1),
    (0, 0, 2),
    (2, -1, 0),
    (2, 0, 1),
    (1, 1, 0),
    (1, 1, 2),
    (0, 0, 1),
    (0, 2, 1),
    (0, 2, 2),
)


@dataclass(frozen=True)
class PointerMove:
    x: float
    y: float


@dataclass(frozen=True)
class PointerLeave:
    pass


@dataclass(frozen=True)
class Click:
    x: float
    y: float


@dataclass(frozen=True)
class EditorModel:
    """Grid plus hover state. Treated as immutable: reduce() copies the grid."""

    grid: RailGrid = field(hash=False)
    highlight: HexEdge | None = None

    @classmethod
    def empty(cls, spec=RAIL_GRID_STANDARD) -> EditorModel:
        return cls(grid=RailGrid.from_spec(spec))


def _touches_grid(grid: RailGrid, edge: HexEdge) -> bool:
    return grid.in_bounds(edge.cell) or grid.in_bounds(edge.mirrored().cell)


def reduce(model: EditorModel, event) -> EditorModel:
    """Return the model after ``event``; ``model`` itself is never mutated.

    A click that misses every edge, or lands on an edge owned by an
    off-grid cell, returns ``model`` unchanged (the same object). A pointer
    over an edge with neither side inside the grid clears the highlight.
    """

    if isinstance(event, PointerMove):
        highlight = edge_from_coord(event.x, event.y)
        if highlight is not None and not _touches_grid(model.grid, highlight):
            highlight = None
        if highlight == model.highlight:
            return model
        return replace(model, highlight=highlight)

    if isinstance(event, PointerLeave):
        if model.highlight is None:
            return model
        return replace(model, highlight=None)

    if isinstance(event, Click):
        target = edge_from_coord(event.x, event.y)
        if target is None:
            return model
        if model.grid.edge_mut(target.cell, target.direction) is None:
            return model
        grid = model.grid.copy()
        grid.toggle(target.cell, target.direction)
        return replace(model, grid=grid)

    raise TypeError(f"Unsupported editor event: {event!r}")


class RailEditor:
    """Single owner of the editor model, driven by the UI event layer."""

    def __init__(self, model=None, render_spec=RAIL_RENDER_STANDARD):
        self.model = model if model is not None else EditorModel.empty()
        self.render_spec = render_spec

    @property
    def grid(self):
        return self.model.grid

    @property
    def highlight(self):
        return self.model.highlight

    def apply(self, event) -> bool:
        """Reduce ``event`` into the model; True when something changed."""

        previous = self.model
        self.model = reduce(previous, event)
        return self.model is not previous

    def on_pointer_move(self, x, y):
        self.apply(PointerMove(x, y))
        return self.model.highlight

    def on_pointer_leave(self):
        self.apply(PointerLeave())
        return self.model.highlight

    def on_click(self, x, y):
        changed = self.apply(Click(x, y))
        if changed:
            logger.info("Rail connections: %d", self.model.grid.count_connections())
        return changed

    def load_track(self, edges):
        """Switch on every ``(q, r, direction)`` edge that is currently off."""

        grid = self.model.grid.copy()
        for q, r, direction in edges:
            edge = grid.edge_mut((q, r), direction)
            if edge is None:
                logger.warning("Track edge outside grid skipped: %s", (q, r, direction))
                continue
            edge.rail_connection = True
        self.model = replace(self.model, grid=grid)

    def render(self):
        return render(self.model.grid, self.model.highlight, self.render_spec)


__all__ = [
    "Click",
    "EditorModel",
    "PointerLeave",
    "PointerMove",
    "REFERENCE_TRACK",
    "RailEditor",
    "reduce",
]
