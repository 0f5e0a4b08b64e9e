"""Core enumerations for the Luzhanqi board domain."""

from __future__ import annotations

from enum import IntEnum


class CellType(IntEnum):
    """Functional type of a board point."""

    NORMAL = 0
    RAILROAD = 1
    CAMP = 2
    HQ = 3


class Side(IntEnum):
    """Board half / player color.

    Rows 0–5 belong to BLUE, rows 6–11 to RED.
    """

    RED = 0
    BLUE = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @classmethod
    def of_row(cls, row: int) -> Side:
        """Side whose home half contains *row*."""
        return cls.RED if row >= 6 else cls.BLUE

    def __str__(self) -> str:
        return self.name.lower()


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    RED_WINS = 1
    BLUE_WINS = 2

    @classmethod
    def win_for(cls, side: Side) -> GameResult:
        return cls.RED_WINS if side == Side.RED else cls.BLUE_WINS
