"""Hex-grid rail track editor."""

from .editor import Click, EditorModel, PointerLeave, PointerMove, RailEditor, reduce
from .grid import Edge, RailCell, RailGrid
from .hit_test import HexEdge, edge_from_coord
from .render import render

__version__ = "0.1.0"

__all__ = [
    "Click",
    "Edge",
    "EditorModel",
    "HexEdge",
    "PointerLeave",
    "PointerMove",
    "RailCell",
    "RailEditor",
    "RailGrid",
    "__version__",
    "edge_from_coord",
    "reduce",
    "render",
]
