import pytest

from hex_rail.config import RailGridSpec
from hex_rail.geometry import neighbor
from hex_rail.grid import RailGrid


def _patterned_grid():
    grid = RailGrid()
    for cell in grid.get_all_cells():
        if (cell.q * 3 + cell.r) % 2 == 0:
            grid.toggle((cell.q, cell.r), (cell.q + cell.r) % 6)
    return grid


def test_new_grid_is_cleared():
    grid = RailGrid()
    assert len(grid.get_all_cells()) == 49
    assert grid.count_connections() == 0
    assert grid.connections((0, 0)) == (False,) * 6


def test_grid_bounds_follow_size():
    grid = RailGrid.from_spec(RailGridSpec(width=5, height=3))
    assert (grid.q_min, grid.q_max, grid.r_min, grid.r_max) == (-2, 2, -1, 1)
    assert grid.in_bounds((2, 1))
    assert not grid.in_bounds((-2, -2))
    assert grid.get_cell((3, 0)) is None


def test_grid_rejects_empty_size():
    with pytest.raises(ValueError):
        RailGrid(0, 7)
    with pytest.raises(ValueError):
        RailGrid(7, 0)


def test_shared_edges_read_the_same_from_both_sides():
    grid = _patterned_grid()
    assert grid.count_connections() > 0
    for cell in grid.get_all_cells():
        coord = (cell.q, cell.r)
        edges = grid.get_edges(coord)
        for direction in (3, 4, 5):
            other = neighbor(cell.q, cell.r, direction)
            if grid.in_bounds(other):
                expected = grid.get_edges(other)[direction - 3].rail_connection
            else:
                expected = False
            assert edges[direction].rail_connection == expected


def test_high_directions_resolve_to_neighbour_storage():
    grid = RailGrid()
    for direction in (3, 4, 5):
        owner = neighbor(0, 0, direction)
        assert grid.edge_mut((0, 0), direction) is grid.edge_mut(owner, direction - 3)
        assert grid.edge_mut((0, 0), direction) is grid.get_cell(owner).edges[direction - 3]


def test_double_toggle_restores_connectivity():
    grid = _patterned_grid()
    before = grid.copy()
    for direction in range(6):
        assert grid.toggle((1, -1), direction)
        assert grid.toggle((1, -1), direction)
    assert grid == before


def test_toggle_through_neighbour_side():
    grid = RailGrid()
    assert grid.toggle((0, 0), 4)
    assert grid.get_cell((0, 1)).edges[1].rail_connection
    assert grid.connections((0, 0))[4]
    assert grid.connections((0, 1))[1]


def test_toggle_off_grid_is_rejected():
    grid = RailGrid()
    assert grid.edge_mut((3, 0), 3) is None
    assert not grid.toggle((3, 0), 3)
    assert not grid.toggle((5, 5), 0)
    assert grid.count_connections() == 0


def test_boundary_cell_reads_missing_neighbour_as_disconnected():
    grid = RailGrid()
    assert grid.get_edge((3, 0), 3) is None
    assert not grid.get_edges((3, 0))[3].rail_connection


def test_off_grid_cell_still_sees_in_grid_neighbour_edges():
    grid = RailGrid()
    # (4, 0) lies beyond q_max; its side 5 is stored by (3, 1) as edge 2.
    assert grid.toggle((4, 0), 5)
    assert grid.get_cell((3, 1)).edges[2].rail_connection
    assert grid.connections((4, 0)) == (False, False, False, False, False, True)


def test_invalid_direction_raises():
    grid = RailGrid()
    with pytest.raises(ValueError):
        grid.toggle((0, 0), 6)
    with pytest.raises(ValueError):
        grid.edge_mut((0, 0), -1)


def test_copy_is_independent():
    grid = RailGrid()
    clone = grid.copy()
    clone.toggle((0, 0), 1)
    assert grid.count_connections() == 0
    assert clone.count_connections() == 1
    assert grid != clone


def test_connected_edges_and_clear():
    grid = RailGrid()
    grid.toggle((0, 0), 3)
    grid.toggle((0, 0), 0)
    assert sorted(grid.connected_edges()) == [(0, 0, 0), (1, 0, 0)]
    grid.clear()
    assert list(grid.connected_edges()) == []


def test_playable_coords_is_diamond():
    coords = RailGrid().playable_coords()
    assert len(coords) == 37
    assert (3, -3) in coords
    assert (3, 3) not in coords
