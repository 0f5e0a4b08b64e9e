"""Core domain layer — pure board logic with zero external dependencies.

Quick start::

    from junqi.core import Coordinate, build_board

    board = build_board()
    for coord in board.neighbors_of(Coordinate(2, 3)):
        print(coord, board.cell_at(coord).cell_type.name)
"""

from junqi.core.board import BoardGraph, CellNotFoundError
from junqi.core.cell import BoardTopologyError, Cell
from junqi.core.classifier import CAMP_COORDINATES, HQ_COORDINATES, classify
from junqi.core.enums import CellType, GameResult, Side
from junqi.core.topology import BoardTopologyBuilder, build_board
from junqi.core.types import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    MOUNTAIN_ROWS,
    Coordinate,
    all_coordinates,
    is_valid_coordinate,
    local_row,
    parse_coordinate,
)

__all__ = [
    # Enums
    "CellType",
    "GameResult",
    "Side",
    # Types / helpers
    "BOARD_COLUMNS",
    "BOARD_ROWS",
    "MOUNTAIN_ROWS",
    "Coordinate",
    "all_coordinates",
    "is_valid_coordinate",
    "local_row",
    "parse_coordinate",
    # Classification
    "CAMP_COORDINATES",
    "HQ_COORDINATES",
    "classify",
    # Graph
    "BoardGraph",
    "BoardTopologyBuilder",
    "BoardTopologyError",
    "Cell",
    "CellNotFoundError",
    "build_board",
]
