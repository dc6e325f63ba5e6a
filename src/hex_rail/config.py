"""Rail editor constants and board/render presets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Hex geometry (flat-top, pixel units).
HEX_SIZE_PX: Final[float] = 30.0
CELL_STEP_X_PX: Final[int] = 45
CELL_STEP_Y_PX: Final[int] = 52
CELL_SHEAR_Y_PX: Final[int] = 26
EDGE_MIDPOINT_RADIUS_PX: Final[float] = 26.0

# Hit-testing.
EDGE_PROXIMITY_THRESHOLD: Final[float] = 0.6

# Rails.
RAIL_LANE_OFFSET_PX: Final[float] = 10.0
RAIL_STUB_LENGTH_PX: Final[float] = 10.0
RAIL_STRAIGHT_LENGTH_PX: Final[float] = 52.0
RAIL_BEND_RADIUS_PX: Final[float] = 45.0
RAIL_DOT_RADIUS_PX: Final[float] = 4.0
RAIL_DOT_DISTANCE_PX: Final[float] = 16.0

DOT_STYLE_STUB: Final[str] = "stub"
DOT_STYLE_CIRCLE: Final[str] = "circle"

# Board.
GRID_WIDTH: Final[int] = 7
GRID_HEIGHT: Final[int] = 7

# Canvas / window.
CANVAS_WIDTH_PX: Final[int] = 1000
CANVAS_HEIGHT_PX: Final[int] = 1000
CANVAS_ORIGIN_X_PX: Final[int] = CANVAS_WIDTH_PX // 2
CANVAS_ORIGIN_Y_PX: Final[int] = CANVAS_HEIGHT_PX // 2
SCREEN_WIDTH: Final[int] = CANVAS_WIDTH_PX
SCREEN_HEIGHT: Final[int] = CANVAS_HEIGHT_PX
WINDOW_TITLE: Final[str] = "Hex Rail"
FPS: Final[int] = 60
ARC_SAMPLE_SEGMENTS: Final[int] = 16

LOG_LEVEL_ENV_VAR: Final[str] = "HEX_RAIL_LOG_LEVEL"
LOG_LEVEL_DEFAULT: Final[str] = "INFO"


@dataclass(frozen=True)
class RailGridSpec:
    """Size of the backing rhombus of cells."""

    width: int
    height: int


@dataclass(frozen=True)
class RailRenderSpec:
    """Radii and lengths used to lay out rail primitives inside a cell."""

    edge_midpoint_radius_px: float
    lane_offset_px: float
    stub_length_px: float
    straight_length_px: float
    bend_radius_px: float
    dot_radius_px: float
    dot_distance_px: float
    dot_style: str


RAIL_GRID_STANDARD: Final[RailGridSpec] = RailGridSpec(
    width=GRID_WIDTH,
    height=GRID_HEIGHT,
)

RAIL_RENDER_STANDARD: Final[RailRenderSpec] = RailRenderSpec(
    edge_midpoint_radius_px=EDGE_MIDPOINT_RADIUS_PX,
    lane_offset_px=RAIL_LANE_OFFSET_PX,
    stub_length_px=RAIL_STUB_LENGTH_PX,
    straight_length_px=RAIL_STRAIGHT_LENGTH_PX,
    bend_radius_px=RAIL_BEND_RADIUS_PX,
    dot_radius_px=RAIL_DOT_RADIUS_PX,
    dot_distance_px=RAIL_DOT_DISTANCE_PX,
    dot_style=DOT_STYLE_STUB,
)

__all__ = [
    "RailGridSpec",
    "RailRenderSpec",
    "RAIL_GRID_STANDARD",
    "RAIL_RENDER_STANDARD",
]
