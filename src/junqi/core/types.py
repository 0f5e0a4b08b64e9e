"""Coordinate type and grid helpers.

Board layout (5 columns x 12 rows)::

    row 0   BLUE back row (headquarters)
    ...
    row 5   BLUE front railroad
    ~~~~~   mountain range
    row 6   RED front railroad
    ...
    row 11  RED back row (headquarters)

The two halves mirror each other about the mountain range.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

BOARD_COLUMNS = 5
BOARD_ROWS = 12
MOUNTAIN_ROWS = (5, 6)


class Coordinate(NamedTuple):
    """Immutable ``(col, row)`` grid position."""

    col: int
    row: int

    def offset(self, dc: int, dr: int) -> Coordinate:
        """Coordinate shifted by ``(dc, dr)``; may fall outside the board."""
        return Coordinate(self.col + dc, self.row + dr)

    @property
    def local_row(self) -> int:
        return local_row(self.row)

    def __str__(self) -> str:
        return f"{self.col},{self.row}"


# (dc, dr) unit offsets: up, down, left, right.
ORTHOGONAL_STEPS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
DIAGONAL_STEPS: tuple[tuple[int, int], ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def is_valid_coordinate(col: int, row: int) -> bool:
    """Whether ``(col, row)`` lies on the 5x12 board."""
    return 0 <= col < BOARD_COLUMNS and 0 <= row < BOARD_ROWS


def local_row(row: int) -> int:
    """Fold *row* onto one half-board (0 = back row, 5 = front row)."""
    return BOARD_ROWS - 1 - row if row >= BOARD_ROWS // 2 else row


def all_coordinates() -> Iterator[Coordinate]:
    """Every board coordinate, row-major."""
    for row in range(BOARD_ROWS):
        for col in range(BOARD_COLUMNS):
            yield Coordinate(col, row)


def parse_coordinate(text: str) -> Coordinate:
    """Parse ``"col,row"``, e.g. ``"2,3"`` → ``Coordinate(2, 3)``."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"Invalid coordinate: {text!r}")
    try:
        col, row = int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError(f"Invalid coordinate: {text!r}") from None
    if not is_valid_coordinate(col, row):
        raise ValueError(f"Coordinate out of range: {text!r}")
    return Coordinate(col, row)
