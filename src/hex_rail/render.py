"""Turn grid connectivity into rail drawing primitives."""

from __future__ import annotations

import logging

from hex_rail.config import (
    CANVAS_HEIGHT_PX,
    CANVAS_WIDTH_PX,
    DOT_STYLE_CIRCLE,
    DOT_STYLE_STUB,
    RAIL_RENDER_STANDARD,
    RailRenderSpec,
)
from hex_rail.geometry import DIRECTION_COUNT, PLANAR_DIRECTIONS, check_direction, hex_to_pixel, lane_normal
from hex_rail.scene import (
    CLASS_HEX_BACKGROUND,
    CLASS_HEX_EDGE,
    CLASS_HEX_EDGE_HIGHLIGHT,
    CLASS_HEX_FOREGROUND,
    CLASS_RAILS,
    CLASS_RAILS_GHOST,
    Arc,
    CellGroup,
    Circle,
    Line,
    Path,
    Polygon,
    Scene,
)

logger = logging.getLogger(__name__)

REAL = 1
PREVIEW = 2

HEX_OUTLINE: tuple[tuple[float, float], ...] = (
    (-15, -26),
    (15, -26),
    (30, 0),
    (15, 26),
    (-15, 26),
    (-30, 0),
)

# Trapezoid hover targets hugging each side, indexed by direction.
EDGE_POLYGONS: tuple[tuple[tuple[float, float], ...], ...] = (
    ((-18, 0), (-30, 0), (-15, -26), (-9, -15.6)),
    ((-9, -15.6), (-15, -26), (15, -26), (9, -15.6)),
    ((9, -15.6), (15, -26), (30, 0), (18, 0)),
    ((18, 0), (30, 0), (15, 26), (9, 15.6)),
    ((9, 15.6), (15, 26), (-15, 26), (-9, 15.6)),
    ((-9, 15.6), (-15, 26), (-30, 0), (-18, 0)),
)


def rail_class(ghost):
    return CLASS_RAILS_GHOST if ghost else CLASS_RAILS


def preview_direction_for(q, r, highlight):
    """Direction of the hovered edge as seen from cell ``(q, r)``, if any."""

    if highlight is None:
        return None
    if highlight.cell == (q, r):
        return highlight.direction
    mirrored = highlight.mirrored()
    if mirrored.cell == (q, r):
        return mirrored.direction
    return None


def connection_mask(connections, preview_direction=None):
    """Per-direction bit set: ``REAL`` for stored rails, ``PREVIEW`` for hover."""

    if len(connections) != DIRECTION_COUNT:
        raise ValueError(f"expected {DIRECTION_COUNT} connections, got {len(connections)}")
    mask = [REAL if connected else 0 for connected in connections]
    if preview_direction is not None:
        mask[check_direction(preview_direction)] |= PREVIEW
    return mask


def _at(mask, direction):
    return mask[direction % DIRECTION_COUNT]


def dot_directions(mask):
    """``(direction, ghost)`` pairs for rails that dead-end in this cell.

    A connection only continues through the three sides facing away from
    it; the two sides next to it are too sharp a turn.
    """

    dots = []
    for direction in range(DIRECTION_COUNT):
        if (
            mask[direction] != 0
            and _at(mask, direction + 2) == 0
            and _at(mask, direction + 3) == 0
            and _at(mask, direction + 4) == 0
        ):
            dots.append((direction, mask[direction] & REAL == 0))
    return dots


def straight_directions(mask):
    straights = []
    for direction in range(DIRECTION_COUNT // 2):
        opposite = mask[direction + 3]
        if mask[direction] != 0 and opposite != 0:
            straights.append((direction, (mask[direction] & opposite) & REAL == 0))
    return straights


def bend_directions(mask):
    """``(direction, ghost)`` pairs for arcs joining the two sides around ``direction``."""

    bends = []
    for direction in range(DIRECTION_COUNT):
        before = _at(mask, direction + 5)
        after = _at(mask, direction + 1)
        if before != 0 and after != 0:
            bends.append((direction, (before & after) & REAL == 0))
    return bends


def _dual_lane(direction, length, ghost, spec):
    dx, dy = PLANAR_DIRECTIONS[check_direction(direction)]
    nx, ny = lane_normal(direction)
    start_x = spec.edge_midpoint_radius_px * dx
    start_y = spec.edge_midpoint_radius_px * dy
    end_x = (spec.edge_midpoint_radius_px - length) * dx
    end_y = (spec.edge_midpoint_radius_px - length) * dy
    dist = spec.lane_offset_px
    css_class = rail_class(ghost)
    return (
        Line(
            (start_x - dist * nx, start_y - dist * ny),
            (end_x - dist * nx, end_y - dist * ny),
            css_class,
        ),
        Line(
            (start_x + dist * nx, start_y + dist * ny),
            (end_x + dist * nx, end_y + dist * ny),
            css_class,
        ),
    )


def stub(direction, ghost, spec=RAIL_RENDER_STANDARD):
    return _dual_lane(direction, spec.stub_length_px, ghost, spec)


def straight(direction, ghost, spec=RAIL_RENDER_STANDARD):
    return _dual_lane(direction, spec.straight_length_px, ghost, spec)


def dot_circle(direction, ghost, spec=RAIL_RENDER_STANDARD):
    dx, dy = PLANAR_DIRECTIONS[check_direction(direction)]
    center = (spec.dot_distance_px * dx, spec.dot_distance_px * dy)
    return (Circle(center, spec.dot_radius_px, rail_class(ghost)),)


def bend(direction, ghost, spec=RAIL_RENDER_STANDARD):
    check_direction(direction)
    before = (direction + 5) % DIRECTION_COUNT
    after = (direction + 1) % DIRECTION_COUNT
    radius = spec.edge_midpoint_radius_px
    dist = spec.lane_offset_px

    x1 = radius * PLANAR_DIRECTIONS[before][0]
    y1 = radius * PLANAR_DIRECTIONS[before][1]
    x2 = radius * PLANAR_DIRECTIONS[after][0]
    y2 = radius * PLANAR_DIRECTIONS[after][1]
    nx1, ny1 = lane_normal(before)
    nx2, ny2 = lane_normal(after)

    outer = Arc(
        (x1 - dist * nx1, y1 - dist * ny1),
        (x2 + dist * nx2, y2 + dist * ny2),
        spec.bend_radius_px + dist,
    )
    inner = Arc(
        (x1 + dist * nx1, y1 + dist * ny1),
        (x2 - dist * nx2, y2 - dist * ny2),
        spec.bend_radius_px - dist,
    )
    return (Path((outer, inner), rail_class(ghost)),)


def _dot_builder(spec):
    if spec.dot_style == DOT_STYLE_STUB:
        return stub
    if spec.dot_style == DOT_STYLE_CIRCLE:
        return dot_circle
    raise ValueError(f"Unknown dot style: {spec.dot_style!r}")


def rail_primitives(mask, spec=RAIL_RENDER_STANDARD):
    """Dots, then straights, then bends for one cell's connection mask."""

    dot = _dot_builder(spec)
    primitives = []
    for direction, ghost in dot_directions(mask):
        primitives.extend(dot(direction, ghost, spec))
    for direction, ghost in straight_directions(mask):
        primitives.extend(straight(direction, ghost, spec))
    for direction, ghost in bend_directions(mask):
        primitives.extend(bend(direction, ghost, spec))
    return primitives


def render_cell(grid, q, r, highlight=None, spec: RailRenderSpec = RAIL_RENDER_STANDARD) -> CellGroup:
    preview = preview_direction_for(q, r, highlight)
    mask = connection_mask(grid.connections((q, r)), preview)

    children = [Polygon(HEX_OUTLINE, CLASS_HEX_BACKGROUND)]
    for direction, points in enumerate(EDGE_POLYGONS):
        css_class = CLASS_HEX_EDGE_HIGHLIGHT if direction == preview else CLASS_HEX_EDGE
        children.append(Polygon(points, css_class))
    children.append(Polygon(HEX_OUTLINE, CLASS_HEX_FOREGROUND))
    children.extend(rail_primitives(mask, spec))

    return CellGroup(q=q, r=r, origin=hex_to_pixel(q, r), children=tuple(children))


def render(grid, highlight=None, spec: RailRenderSpec = RAIL_RENDER_STANDARD) -> Scene:
    """Build the full scene for the playable diamond of ``grid``."""

    cells = tuple(render_cell(grid, q, r, highlight, spec) for q, r in grid.playable_coords())
    logger.debug("Rendered %d cells, highlight=%s", len(cells), highlight)
    return Scene(cells=cells, width=CANVAS_WIDTH_PX, height=CANVAS_HEIGHT_PX)


__all__ = [
    "EDGE_POLYGONS",
    "HEX_OUTLINE",
    "PREVIEW",
    "REAL",
    "bend",
    "bend_directions",
    "connection_mask",
    "dot_circle",
    "dot_directions",
    "preview_direction_for",
    "rail_primitives",
    "render",
    "render_cell",
    "straight",
    "straight_directions",
    "stub",
]
