"""BoardTopologyBuilder - creates the 60 cells and wires their adjacency.

Connection rules:

* Orthogonal neighbors are always linked, except across the mountain range
  (rows 5 and 6) in columns 1 and 3.
* Diagonal neighbors are linked only when at least one of them is a camp.

Railroad movement is not encoded as extra edges; the rule checker derives it
from the cell types along orthogonal lines.
"""

from __future__ import annotations

import logging

from junqi.core.board import BoardGraph
from junqi.core.cell import BoardTopologyError, Cell
from junqi.core.classifier import classify
from junqi.core.enums import CellType
from junqi.core.types import (
    BOARD_COLUMNS,
    BOARD_ROWS,
    DIAGONAL_STEPS,
    MOUNTAIN_ROWS,
    ORTHOGONAL_STEPS,
    Coordinate,
    all_coordinates,
)

_LOGGER = logging.getLogger(__name__)

# Columns with no road through the mountain range.
_BLOCKED_MOUNTAIN_COLUMNS = (1, 3)

__all__ = ["BoardTopologyBuilder", "BoardTopologyError", "build_board"]


def _crosses_mountain(a: Coordinate, b: Coordinate) -> bool:
    return {a.row, b.row} == set(MOUNTAIN_ROWS)


def _is_mountain_blocked(a: Coordinate, b: Coordinate) -> bool:
    return _crosses_mountain(a, b) and a.col in _BLOCKED_MOUNTAIN_COLUMNS


class BoardTopologyBuilder:
    """Builds a fresh :class:`BoardGraph` for one game session."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: dict[Coordinate, Cell] = {}

    def build(self) -> BoardGraph:
        """Instantiate every cell, connect them, verify, and return the graph."""
        self._cells = {}
        self._instantiate()
        self._connect()
        self._verify()

        board = BoardGraph(self._cells.values())
        self._cells = {}
        if not board.is_connected():
            raise BoardTopologyError("Board graph is not connected")
        _LOGGER.debug("Board built: %d cells, %d edges", len(board), len(board.edges()))
        return board

    # -- Phase 1 ------------------------------------------------------------

    def _instantiate(self) -> None:
        for coord in all_coordinates():
            self._cells[coord] = Cell(coord, classify(coord.col, coord.row))

    # -- Phase 2 ------------------------------------------------------------

    def _connect(self) -> None:
        for coord, current in self._cells.items():
            for dc, dr in ORTHOGONAL_STEPS:
                neighbor = self._cells.get(coord.offset(dc, dr))
                if neighbor is None:
                    continue
                if not _is_mountain_blocked(coord, neighbor.coordinate):
                    current.link(neighbor)

            for dc, dr in DIAGONAL_STEPS:
                neighbor = self._cells.get(coord.offset(dc, dr))
                if neighbor is None:
                    continue
                if current.is_camp or neighbor.is_camp:
                    current.link(neighbor)

    # -- Verification -------------------------------------------------------

    def _verify(self) -> None:
        cells = self._cells
        expected_count = BOARD_COLUMNS * BOARD_ROWS
        if len(cells) != expected_count:
            raise BoardTopologyError(f"Expected {expected_count} cells, got {len(cells)}")

        for coord, cell in cells.items():
            if cell.coordinate != coord:
                raise BoardTopologyError(f"Cell {cell!r} indexed under {coord}")
            if coord in cell.neighbor_coordinates:
                raise BoardTopologyError(f"Self-loop at {coord}")
            for n in cell.neighbors:
                if not n.is_neighbor(cell):
                    raise BoardTopologyError(f"One-way edge {coord} -> {n.coordinate}")
                diagonal = n.col != cell.col and n.row != cell.row
                if diagonal and CellType.CAMP not in (cell.cell_type, n.cell_type):
                    raise BoardTopologyError(
                        f"Diagonal edge {coord} - {n.coordinate} has no camp endpoint"
                    )

        upper, lower = MOUNTAIN_ROWS
        for col in range(BOARD_COLUMNS):
            a = cells[Coordinate(col, upper)]
            b = cells[Coordinate(col, lower)]
            expected = col not in _BLOCKED_MOUNTAIN_COLUMNS
            if a.is_neighbor(b) != expected:
                state = "missing" if expected else "unexpected"
                raise BoardTopologyError(f"Mountain pass {state} in column {col}")


def build_board() -> BoardGraph:
    """Build the standard Luzhanqi board graph."""
    return BoardTopologyBuilder().build()
