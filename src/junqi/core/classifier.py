"""Point-type classification for the 5x12 board."""

from __future__ import annotations

from junqi.core.enums import CellType
from junqi.core.types import Coordinate, all_coordinates, local_row


def classify(col: int, row: int) -> CellType:
    """Functional type of the point at ``(col, row)``.

    Works on the half-board row so both sides share one layout. Camps are
    tested before HQs and both before railroads: camp and HQ points would
    otherwise also match the railroad/normal rules.

    Callers must pass an on-board coordinate; no range check is done here.
    """
    lr = local_row(row)

    if (
        (lr == 2 and col in (1, 3))
        or (lr == 3 and col == 2)
        or (lr == 4 and col in (1, 3))
    ):
        return CellType.CAMP

    if lr == 0 and col in (1, 3):
        return CellType.HQ

    # Back railroad, front railroad and both side lines.
    if lr in (1, 5) or col in (0, 4):
        return CellType.RAILROAD

    return CellType.NORMAL


def _coordinates_of(cell_type: CellType) -> frozenset[Coordinate]:
    return frozenset(c for c in all_coordinates() if classify(c.col, c.row) == cell_type)


CAMP_COORDINATES: frozenset[Coordinate] = _coordinates_of(CellType.CAMP)
HQ_COORDINATES: frozenset[Coordinate] = _coordinates_of(CellType.HQ)
