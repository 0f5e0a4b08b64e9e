"""Concrete AI collaborator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from junqi.core.enums import Side
from junqi.game.interfaces import IAIPlayer

if TYPE_CHECKING:
    from junqi.core.board import BoardGraph


class AIPlayer(IAIPlayer):
    """An AI participant that delegates computation to a callback.

    Move selection is decoupled — ``AIPlayer`` only stores a *bridge*
    callable invoked on ``request_move``. In the Qt application this
    callable dispatches work to a worker thread whose result is routed
    back through :class:`~junqi.ui.qt_bridge.GameBridge`.

    Args:
        side: Side the AI plays.
        name: Display name.
        on_request_move: ``(BoardGraph, Side) -> None`` — called when the
            controller enters the enemy turn.
    """

    __slots__ = ("_side", "_name", "_on_request_move")

    def __init__(
        self,
        side: Side = Side.BLUE,
        name: str = "AI",
        on_request_move: Callable[[BoardGraph, Side], None] | None = None,
    ) -> None:
        self._side = side
        self._name = name
        self._on_request_move = on_request_move

    @property
    def side(self) -> Side:
        return self._side

    @property
    def name(self) -> str:
        return self._name

    def request_move(self, board: BoardGraph, side: Side) -> None:
        if self._on_request_move is not None:
            self._on_request_move(board, side)
