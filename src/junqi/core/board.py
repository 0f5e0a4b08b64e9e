"""BoardGraph - read-only adjacency graph over the 60 board points."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from junqi.core.cell import Cell
from junqi.core.enums import CellType
from junqi.core.types import BOARD_COLUMNS, BOARD_ROWS, MOUNTAIN_ROWS, Coordinate

_TYPE_SYMBOLS = {
    CellType.NORMAL: ".",
    CellType.RAILROAD: "R",
    CellType.CAMP: "C",
    CellType.HQ: "H",
}


class CellNotFoundError(LookupError):
    """No cell exists at the requested coordinate."""

    def __init__(self, coordinate: object) -> None:
        super().__init__(f"No cell at {coordinate!r}")
        self.coordinate = coordinate


class BoardGraph:
    """Immutable snapshot of the board: coordinate -> cell, cell -> neighbors.

    Built once per game by :class:`~junqi.core.topology.BoardTopologyBuilder`
    and shared read-only by the rule checker, the AI and the renderer.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: Iterable[Cell]) -> None:
        self._cells: dict[Coordinate, Cell] = {}
        for cell in cells:
            cell.seal()
            self._cells[cell.coordinate] = cell

    # -- Element access -----------------------------------------------------

    def cell_at(self, coordinate: Coordinate) -> Cell:
        """Cell at *coordinate*; raises :class:`CellNotFoundError` off-board."""
        try:
            return self._cells[coordinate]
        except (KeyError, TypeError):
            raise CellNotFoundError(coordinate) from None

    __getitem__ = cell_at

    def neighbors_of(self, coordinate: Coordinate) -> frozenset[Coordinate]:
        """Coordinates adjacent to *coordinate*."""
        return self.cell_at(coordinate).neighbor_coordinates

    def __contains__(self, coordinate: object) -> bool:
        try:
            return coordinate in self._cells
        except TypeError:
            return False

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    # -- Query helpers ------------------------------------------------------

    def cells(self) -> list[Cell]:
        return list(self._cells.values())

    def coordinates_of_type(self, cell_type: CellType) -> list[Coordinate]:
        """Coordinates whose cell is of *cell_type*, row-major."""
        return [c for c, cell in self._cells.items() if cell.cell_type == cell_type]

    def are_adjacent(self, a: Coordinate, b: Coordinate) -> bool:
        return b in self.neighbors_of(a)

    def edges(self) -> tuple[tuple[Coordinate, Coordinate], ...]:
        """Every undirected edge once, as ``(a, b)`` with ``a < b``."""
        pairs = {
            (a, b)
            for a, cell in self._cells.items()
            for b in cell.neighbor_coordinates
            if a < b
        }
        return tuple(sorted(pairs))

    def is_connected(self) -> bool:
        """Whether every cell is reachable from every other."""
        if not self._cells:
            return True
        start = next(iter(self._cells))
        seen = {start}
        queue = deque([start])
        while queue:
            for n in self._cells[queue.popleft()].neighbor_coordinates:
                if n not in seen:
                    seen.add(n)
                    queue.append(n)
        return len(seen) == len(self._cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardGraph):
            return NotImplemented
        if self._cells.keys() != other._cells.keys():
            return False
        if any(
            cell.cell_type != other._cells[c].cell_type for c, cell in self._cells.items()
        ):
            return False
        return set(self.edges()) == set(other.edges())

    def __repr__(self) -> str:
        upper, lower = MOUNTAIN_ROWS
        rows: list[str] = []
        for row in range(BOARD_ROWS):
            symbols = []
            for col in range(BOARD_COLUMNS):
                cell = self._cells.get(Coordinate(col, row))
                symbols.append(_TYPE_SYMBOLS[cell.cell_type] if cell else " ")
            rows.append(f"{row:>2} {' '.join(symbols)}")
            if row == upper:
                # "|" marks a pass through the mountain range, "^" a blocked column.
                passes = []
                for col in range(BOARD_COLUMNS):
                    a, b = Coordinate(col, upper), Coordinate(col, lower)
                    open_ = a in self and b in self and self.are_adjacent(a, b)
                    passes.append("|" if open_ else "^")
                rows.append(f"   {' '.join(passes)}")
        rows.append(f"   {' '.join(str(c) for c in range(BOARD_COLUMNS))}")
        return "\n".join(rows)
