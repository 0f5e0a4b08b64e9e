"""Cell - a single board point and its adjacency links."""

from __future__ import annotations

from junqi.core.enums import CellType, Side
from junqi.core.types import Coordinate


class BoardTopologyError(RuntimeError):
    """The board graph violates a structural invariant."""


class Cell:
    """A board point: coordinate, functional type and neighbor links.

    Neighbors are non-owning references; the :class:`BoardGraph` owns every
    cell. Links are symmetric and idempotent and can only be added before
    the owning graph seals the cell.
    """

    __slots__ = ("_coordinate", "_cell_type", "_neighbors", "_sealed")

    def __init__(self, coordinate: Coordinate, cell_type: CellType) -> None:
        self._coordinate = coordinate
        self._cell_type = cell_type
        self._neighbors: dict[Coordinate, Cell] = {}
        self._sealed = False

    # -- Properties ---------------------------------------------------------

    @property
    def coordinate(self) -> Coordinate:
        return self._coordinate

    @property
    def cell_type(self) -> CellType:
        return self._cell_type

    @property
    def col(self) -> int:
        return self._coordinate.col

    @property
    def row(self) -> int:
        return self._coordinate.row

    @property
    def side(self) -> Side:
        """Side whose home half contains this point."""
        return Side.of_row(self._coordinate.row)

    @property
    def neighbors(self) -> tuple[Cell, ...]:
        return tuple(self._neighbors.values())

    @property
    def neighbor_coordinates(self) -> frozenset[Coordinate]:
        return frozenset(self._neighbors)

    @property
    def is_camp(self) -> bool:
        return self._cell_type == CellType.CAMP

    @property
    def is_hq(self) -> bool:
        return self._cell_type == CellType.HQ

    @property
    def is_railroad(self) -> bool:
        return self._cell_type == CellType.RAILROAD

    def is_neighbor(self, other: Cell) -> bool:
        return self._neighbors.get(other.coordinate) is other

    # -- Construction -------------------------------------------------------

    def link(self, other: Cell) -> bool:
        """Connect *self* and *other* in both directions.

        Returns True when a new edge was recorded. Linking a cell to itself
        or repeating an existing link is a no-op.
        """
        if other.coordinate == self._coordinate:
            return False
        if self._sealed or other._sealed:
            raise BoardTopologyError(
                f"Cannot link {self._coordinate} and {other.coordinate}: board is sealed"
            )
        if other.coordinate in self._neighbors:
            return False
        self._neighbors[other.coordinate] = other
        other._neighbors[self._coordinate] = self
        return True

    def seal(self) -> None:
        """Freeze the neighbor set."""
        self._sealed = True

    def __repr__(self) -> str:
        return f"Cell({self._coordinate}, {self._cell_type.name})"
