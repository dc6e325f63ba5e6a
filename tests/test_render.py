import itertools
import math
from dataclasses import replace

import pytest

from hex_rail.config import DOT_STYLE_CIRCLE, RAIL_RENDER_STANDARD
from hex_rail.grid import RailGrid
from hex_rail.hit_test import HexEdge
from hex_rail.render import (
    bend,
    bend_directions,
    connection_mask,
    dot_directions,
    preview_direction_for,
    render,
    render_cell,
    straight,
    straight_directions,
    stub,
)
from hex_rail.scene import CLASS_HEX_EDGE_HIGHLIGHT, CLASS_RAILS, CLASS_RAILS_GHOST, Circle, Line, Path, Polygon


def _mask(*directions, preview=None):
    connections = [direction in directions for direction in range(6)]
    return connection_mask(connections, preview)


def test_connection_mask_marks_preview_bit():
    assert connection_mask([True, False, False, False, False, False], 3) == [1, 0, 0, 2, 0, 0]
    assert connection_mask([False, True, False, False, False, False], 1) == [0, 3, 0, 0, 0, 0]


def test_connection_mask_requires_six_entries():
    with pytest.raises(ValueError):
        connection_mask([True, False])


def test_single_connection_is_a_dot():
    for direction in range(6):
        mask = _mask(direction)
        assert dot_directions(mask) == [(direction, False)]
        assert straight_directions(mask) == []
        assert bend_directions(mask) == []


def test_preview_only_dot_is_ghost():
    assert dot_directions(_mask(preview=5)) == [(5, True)]


def test_opposite_connections_form_straight():
    mask = _mask(1, 4)
    assert straight_directions(mask) == [(1, False)]
    assert dot_directions(mask) == []
    assert bend_directions(mask) == []


def test_straight_with_preview_end_is_ghost():
    assert straight_directions(_mask(1, preview=4)) == [(1, True)]
    # Hovering an edge that is already connected keeps the rail solid.
    assert straight_directions(_mask(1, 4, preview=4)) == [(1, False)]


def test_connections_two_apart_form_bend():
    mask = _mask(2, 4)
    assert bend_directions(mask) == [(3, False)]
    assert dot_directions(mask) == []
    assert straight_directions(mask) == []
    assert bend_directions(_mask(5, preview=1)) == [(0, True)]


def test_adjacent_connections_are_two_dots():
    mask = _mask(1, 2)
    assert dot_directions(mask) == [(1, False), (2, False)]
    assert bend_directions(mask) == []
    assert straight_directions(mask) == []


def test_dot_excludes_straight_and_bend_through_same_side():
    for bits in itertools.product((False, True), repeat=6):
        mask = connection_mask(bits)
        straights = {d for d, _ in straight_directions(mask)}
        straight_sides = straights | {d + 3 for d in straights}
        bend_sides = set()
        for d, _ in bend_directions(mask):
            bend_sides.update({(d + 5) % 6, (d + 1) % 6})
        for d, _ in dot_directions(mask):
            assert d not in straight_sides
            assert d not in bend_sides


def test_stub_is_two_parallel_lanes():
    first, second = stub(1, False)
    assert first == Line((-10.0, -26.0), (-10.0, -16.0), CLASS_RAILS)
    assert second == Line((10.0, -26.0), (10.0, -16.0), CLASS_RAILS)


def test_straight_spans_the_cell():
    first, second = straight(1, True)
    assert first.start == (-10.0, -26.0)
    assert first.end == (-10.0, 26.0)
    assert second.css_class == CLASS_RAILS_GHOST


def test_bend_arcs_are_centred_on_the_next_cell():
    (path,) = bend(3, False)
    assert isinstance(path, Path)
    outer, inner = path.arcs
    assert outer.radius == 55.0
    assert inner.radius == 35.0
    for arc in (outer, inner):
        cx, cy = arc.center()
        assert cx == pytest.approx(45.0, abs=0.5)
        assert cy == pytest.approx(26.0, abs=0.5)
        assert math.hypot(arc.start[0] - cx, arc.start[1] - cy) == pytest.approx(arc.radius)
    assert path.d.startswith("M")
    assert path.d.count(" A") == 2
    assert " 0 0 0 " in path.d


def test_builders_reject_bad_direction():
    with pytest.raises(ValueError):
        stub(6, False)
    with pytest.raises(ValueError):
        bend(-1, False)


def test_preview_direction_for_both_sides_of_highlight():
    highlight = HexEdge(0, 0, 1)
    assert preview_direction_for(0, 0, highlight) == 1
    assert preview_direction_for(0, -1, highlight) == 4
    assert preview_direction_for(1, 0, highlight) is None
    assert preview_direction_for(0, 0, None) is None


def test_render_cell_layers_and_highlight():
    grid = RailGrid()
    group = render_cell(grid, 0, -1, HexEdge(0, 0, 1))
    polygons = [child for child in group.children if isinstance(child, Polygon)]
    assert len(polygons) == 8
    assert polygons[0].css_class == "hex-background"
    assert polygons[-1].css_class == "hex-foreground"
    assert polygons[1 + 4].css_class == CLASS_HEX_EDGE_HIGHLIGHT
    assert [child for child in group.children if child.css_class == CLASS_HEX_EDGE_HIGHLIGHT] == [polygons[5]]
    # The hovered edge previews as a ghost stub on this side.
    assert {child.css_class for child in group.rails()} == {CLASS_RAILS_GHOST}
    assert group.origin == (0, -52)


def test_render_scene_covers_diamond():
    scene = render(RailGrid())
    assert len(scene.cells) == 37
    assert scene.count_by_class()["hex-edge"] == 37 * 6
    assert all(not group.rails() for group in scene.cells)


def test_circle_dot_style():
    grid = RailGrid()
    grid.toggle((0, 0), 0)
    spec = replace(RAIL_RENDER_STANDARD, dot_style=DOT_STYLE_CIRCLE)
    rails = render_cell(grid, 0, 0, spec=spec).rails()
    assert len(rails) == 1
    assert isinstance(rails[0], Circle)
    assert rails[0].css_class == CLASS_RAILS


def test_unknown_dot_style_raises():
    spec = replace(RAIL_RENDER_STANDARD, dot_style="square")
    with pytest.raises(ValueError):
        render_cell(RailGrid(), 0, 0, spec=spec)


def test_junction_after_two_toggles_has_no_dot():
    grid = RailGrid()
    grid.toggle((0, 1), 1)
    grid.toggle((0, 0), 2)
    mask = connection_mask(grid.connections((0, 0)))
    assert dot_directions(mask) == []
    assert bend_directions(mask) == [(3, False)]
