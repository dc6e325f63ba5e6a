import copy
import logging
from dataclasses import dataclass, field

from hex_rail.config import RAIL_GRID_STANDARD
from hex_rail.geometry import AXIAL_DIRECTIONS, DIRECTION_COUNT, check_direction, neighbor

logger = logging.getLogger(__name__)

OWNED_EDGE_COUNT = 3


@dataclass
class Edge:
    rail_connection: bool = False


@dataclass
class RailCell:
    """A cell and the three edges it owns (directions 0, 1 and 2)."""

    q: int
    r: int
    edges: list[Edge] = field(default_factory=lambda: [Edge() for _ in range(OWNED_EDGE_COUNT)])


class RailGrid:
    """Bounded rhombus of cells with shared, canonically stored edges.

    Edges 3, 4 and 5 of a cell are stored by the neighbour in that
    direction as its edges 0, 1 and 2, so every physical edge exists once.
    """

    def __init__(self, width=RAIL_GRID_STANDARD.width, height=RAIL_GRID_STANDARD.height):
        if width < 1:
            raise ValueError("Grid needs at least 1 column.")
        if height < 1:
            raise ValueError("Grid needs at least 1 row.")

        self.width = width
        self.height = height
        self.q_min = -(width // 2)
        self.q_max = self.q_min + width - 1
        self.r_min = -(height // 2)
        self.r_max = self.r_min + height - 1
        self.cells = [
            [RailCell(q, r) for r in range(self.r_min, self.r_max + 1)]
            for q in range(self.q_min, self.q_max + 1)
        ]

    @classmethod
    def from_spec(cls, spec):
        return cls(spec.width, spec.height)

    @property
    def radius(self):
        return min(self.width, self.height) // 2

    def in_bounds(self, coord):
        q, r = coord
        return self.q_min <= q <= self.q_max and self.r_min <= r <= self.r_max

    def get_cell(self, coord):
        if not self.in_bounds(coord):
            return None
        q, r = coord
        return self.cells[q - self.q_min][r - self.r_min]

    def get_all_cells(self):
        return [cell for col in self.cells for cell in col]

    def playable_coords(self):
        """Diamond of cells shown to the user, in q-major order."""

        radius = self.radius
        return [
            (cell.q, cell.r)
            for cell in self.get_all_cells()
            if -radius <= cell.q + cell.r <= radius
        ]

    def get_edge(self, coord, direction):
        """Read one side of a cell; ``None`` when the owning cell is off-grid."""

        check_direction(direction)
        if direction < OWNED_EDGE_COUNT:
            cell = self.get_cell(coord)
            return None if cell is None else cell.edges[direction]
        neighbor_cell = self.get_cell(neighbor(coord[0], coord[1], direction))
        if neighbor_cell is None:
            return None
        return neighbor_cell.edges[direction - OWNED_EDGE_COUNT]

    def get_edges(self, coord):
        edges = []
        for direction in range(DIRECTION_COUNT):
            edge = self.get_edge(coord, direction)
            edges.append(Edge() if edge is None else Edge(edge.rail_connection))
        return edges

    def connections(self, coord):
        return tuple(edge.rail_connection for edge in self.get_edges(coord))

    def edge_mut(self, coord, direction):
        """Resolve a cell side to the canonical stored ``Edge``.

        Directions 3..5 recurse once into the neighbour in that direction.
        Returns ``None`` when the owning cell lies outside the grid.
        """

        check_direction(direction)
        q, r = coord
        if direction < OWNED_EDGE_COUNT:
            cell = self.get_cell((q, r))
            return None if cell is None else cell.edges[direction]
        dq, dr = AXIAL_DIRECTIONS[direction]
        return self.edge_mut((q + dq, r + dr), direction - OWNED_EDGE_COUNT)

    def toggle(self, coord, direction):
        edge = self.edge_mut(coord, direction)
        if edge is None:
            logger.debug("Ignored toggle outside grid: cell=%s direction=%s", coord, direction)
            return False
        edge.rail_connection = not edge.rail_connection
        logger.debug(
            "Toggled edge: cell=%s direction=%s connected=%s",
            coord,
            direction,
            edge.rail_connection,
        )
        return True

    def connected_edges(self):
        """Yield ``(q, r, owned_index)`` for every connected canonical edge."""

        for cell in self.get_all_cells():
            for index, edge in enumerate(cell.edges):
                if edge.rail_connection:
                    yield cell.q, cell.r, index

    def count_connections(self):
        return sum(1 for _ in self.connected_edges())

    def clear(self):
        for cell in self.get_all_cells():
            for edge in cell.edges:
                edge.rail_connection = False

    def copy(self):
        return copy.deepcopy(self)

    def __eq__(self, other):
        if not isinstance(other, RailGrid):
            return NotImplemented
        return (
            (self.width, self.height) == (other.width, other.height)
            and set(self.connected_edges()) == set(other.connected_edges())
        )

    def __repr__(self):
        return f"RailGrid(width={self.width}, height={self.height}, connections={self.count_connections()})"


__all__ = ["Edge", "RailCell", "RailGrid", "OWNED_EDGE_COUNT"]
