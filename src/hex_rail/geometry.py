"""Axial hex geometry for the flat-top rail board."""

from __future__ import annotations

import math

from hex_rail.config import CELL_SHEAR_Y_PX, CELL_STEP_X_PX, CELL_STEP_Y_PX, HEX_SIZE_PX

Coord = tuple[int, int]
Point = tuple[float, float]

DIRECTION_COUNT = 6

# Index 0 points west-by-northwest, indices increase clockwise.
AXIAL_DIRECTIONS: tuple[Coord, ...] = ((-1, 0), (0, -1), (1, -1), (1, 0), (0, 1), (-1, 1))

# Unit vectors from a cell centre towards the midpoint of each edge, in the
# same order as AXIAL_DIRECTIONS (y grows downwards).
PLANAR_DIRECTIONS: tuple[Point, ...] = (
    (-0.8660254037844386, -0.5),
    (0.0, -1.0),
    (0.8660254037844384, -0.5),
    (0.8660254037844387, 0.5),
    (0.0, 1.0),
    (-0.8660254037844387, 0.5),
)

_SQRT3_OVER_3 = math.sqrt(3) / 3


def check_direction(direction: int) -> int:
    """Return ``direction`` unchanged, rejecting indices outside 0..5."""

    if not 0 <= direction < DIRECTION_COUNT:
        raise ValueError(f"direction must be in 0..5, got {direction!r}")
    return direction


def opposite_direction(direction: int) -> int:
    return (check_direction(direction) + 3) % DIRECTION_COUNT


def neighbor(q: int, r: int, direction: int) -> Coord:
    dq, dr = AXIAL_DIRECTIONS[check_direction(direction)]
    return q + dq, r + dr


def axial_to_cube(q, r):
    return q, -q - r, r


def cube_to_axial(x, y, z):
    return x, z


def _round_half_away(value: float) -> int:
    # Compare the fraction directly; abs(value) + 0.5 can round up in floating point.
    whole = math.floor(abs(value))
    rounded = whole + (abs(value) - whole >= 0.5)
    return int(math.copysign(rounded, value))


def cube_round(x: float, y: float, z: float) -> tuple[int, int, int]:
    """Snap fractional cube coordinates to the nearest cell.

    The component with the largest rounding error is recomputed from the
    other two so that ``x + y + z == 0`` holds. Ties between the x error and
    another error fall through to the y/z branches.
    """

    rx = _round_half_away(x)
    ry = _round_half_away(y)
    rz = _round_half_away(z)

    x_diff = abs(rx - x)
    y_diff = abs(ry - y)
    z_diff = abs(rz - z)

    if x_diff > y_diff and x_diff > z_diff:
        rx = -ry - rz
    elif y_diff > z_diff:
        ry = -rx - rz
    else:
        rz = -rx - ry

    return rx, ry, rz


def hex_round(q: float, r: float) -> Coord:
    return cube_to_axial(*cube_round(*axial_to_cube(q, r)))


def pixel_to_fractional_hex(x: float, y: float, size: float = HEX_SIZE_PX) -> Point:
    q = (2.0 / 3.0 * x) / size
    r = (-1.0 / 3.0 * x + _SQRT3_OVER_3 * y) / size
    return q, r


def pixel_to_hex(x: float, y: float, size: float = HEX_SIZE_PX) -> Coord:
    """Map a canvas-centred pixel position to the axial cell containing it."""

    return hex_round(*pixel_to_fractional_hex(x, y, size))


def hex_to_pixel(q: int, r: int) -> tuple[int, int]:
    """Pixel centre of a cell relative to the canvas centre."""

    return q * CELL_STEP_X_PX, q * CELL_SHEAR_Y_PX + r * CELL_STEP_Y_PX


def edge_midpoint(direction: int, radius: float) -> Point:
    dx, dy = PLANAR_DIRECTIONS[check_direction(direction)]
    return radius * dx, radius * dy


def lane_normal(direction: int) -> Point:
    """Unit vector perpendicular to ``direction``, used to split dual rails."""

    dx, dy = PLANAR_DIRECTIONS[check_direction(direction)]
    return -dy, dx


def playable_coords(radius: int) -> list[Coord]:
    """Cells within hex distance ``radius`` of the origin, q-major order."""

    coords: list[Coord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -radius - q)
        r_max = min(radius, radius - q)
        for r in range(r_min, r_max + 1):
            coords.append((q, r))
    return coords


def hex_distance(a: Coord, b: Coord) -> int:
    ax, ay, az = axial_to_cube(*a)
    bx, by, bz = axial_to_cube(*b)
    return max(abs(ax - bx), abs(ay - by), abs(az - bz))


__all__ = [
    "AXIAL_DIRECTIONS",
    "PLANAR_DIRECTIONS",
    "DIRECTION_COUNT",
    "check_direction",
    "opposite_direction",
    "neighbor",
    "axial_to_cube",
    "cube_to_axial",
    "cube_round",
    "hex_round",
    "pixel_to_fractional_hex",
    "pixel_to_hex",
    "hex_to_pixel",
    "edge_midpoint",
    "lane_normal",
    "playable_coords",
    "hex_distance",
]
