"""Application entry point: headless board inspection."""

from __future__ import annotations

import logging
import sys

from junqi.core.enums import CellType
from junqi.core.topology import build_board

_LOGGER = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Build the board and log its layout and adjacency summary."""
    verbose = "-v" in (sys.argv[1:] if argv is None else argv)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    board = build_board()
    _LOGGER.info("Board layout:\n%r", board)
    for cell_type in CellType:
        count = len(board.coordinates_of_type(cell_type))
        _LOGGER.info("%-8s %d cells", cell_type.name, count)
    _LOGGER.info("%d edges, connected=%s", len(board.edges()), board.is_connected())
    return 0


if __name__ == "__main__":
    sys.exit(main())
