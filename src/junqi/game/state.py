"""Game state — phase, side assignment, in-flight move and history."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from junqi.core.enums import GameResult, Side
from junqi.game.interfaces import GameOptions, GamePhase

if TYPE_CHECKING:
    from junqi.core.board import BoardGraph


@dataclass
class MoveRecord:
    """A single entry in the move history.

    ``move`` and ``outcome`` are opaque tokens from the board input and
    are stored as received.
    """

    side: Side
    move: object
    outcome: object = None


@dataclass
class GameState:
    """Mutable session data owned by the TurnPhaseController.

    This is a pure data/logic class — no transitions, no notifications.
    """

    phase: GamePhase = field(default=GamePhase.START_MENU, init=False)
    board: BoardGraph | None = field(default=None, init=False)
    options: GameOptions = field(default_factory=GameOptions, init=False)
    side_to_move: Side = field(default=Side.RED, init=False)
    pending_move: object = field(default=None, init=False)
    moving_side: Side | None = field(default=None, init=False)
    suspended_phase: GamePhase | None = field(default=None, init=False)
    result: GameResult = field(default=GameResult.IN_PROGRESS, init=False)
    input_enabled: bool = field(default=False, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def reset(self, board: BoardGraph, options: GameOptions) -> None:
        """Start a fresh session on *board*; the player's side moves first."""
        self.board = board
        self.options = options
        self.side_to_move = options.player_side
        self.pending_move = None
        self.moving_side = None
        self.suspended_phase = None
        self.result = GameResult.IN_PROGRESS
        self.input_enabled = False
        self.move_history.clear()

    # ── Move lifecycle ───────────────────────────────────────────────────

    def begin_move(self, move: object) -> None:
        self.pending_move = move
        self.moving_side = self.side_to_move

    def finish_move(self, outcome: object = None) -> MoveRecord:
        """Close the in-flight move and append it to the history."""
        side = self.moving_side if self.moving_side is not None else self.side_to_move
        record = MoveRecord(side=side, move=self.pending_move, outcome=outcome)
        self.move_history.append(record)
        self.pending_move = None
        self.moving_side = None
        return record

    def pass_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def declare_winner(self, side: Side) -> None:
        self.result = GameResult.win_for(side)

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    @property
    def is_paused(self) -> bool:
        return self.phase == GamePhase.PAUSED

    @property
    def has_move_in_flight(self) -> bool:
        return self.moving_side is not None

    @property
    def ply_count(self) -> int:
        """Number of completed moves."""
        return len(self.move_history)

    @property
    def is_enemy_to_move(self) -> bool:
        return self.options.single_player and self.side_to_move == self.options.enemy_side
