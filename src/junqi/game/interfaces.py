"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the TurnPhaseController depends on these
ABCs, not on concrete UI / rule-checker / AI implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum, auto
from typing import TYPE_CHECKING

from junqi.core.enums import GameResult, Side

if TYPE_CHECKING:
    from junqi.core.board import BoardGraph


# ── Phase FSM states and triggers ────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game session."""

    START_MENU = auto()
    SETUP = auto()
    PLAYER_TURN = auto()
    ENEMY_TURN = auto()  # AI is computing
    MOVE_EXECUTION = auto()
    GAME_OVER = auto()
    PAUSED = auto()

    @property
    def is_terminal(self) -> bool:
        return self == GamePhase.GAME_OVER

    @property
    def can_pause(self) -> bool:
        return self not in (GamePhase.GAME_OVER, GamePhase.PAUSED)


class GameTrigger(IntEnum):
    """External events that drive phase transitions."""

    NEW_GAME = auto()
    SETUP_COMPLETE = auto()
    MOVE_SELECTED = auto()
    AI_MOVE_RESOLVED = auto()
    MOVE_FINISHED = auto()
    PAUSE = auto()
    RESUME = auto()


# ── Game options ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Immutable per-game configuration.

    Args:
        single_player: Play against the AI collaborator. When unset both
            sides are driven from the board input (hot-seat).
        player_side: Side controlled by the local player.
        auto_complete_setup: Leave SETUP as soon as the board is built
            instead of waiting for :meth:`complete_setup`.
    """

    single_player: bool = True
    player_side: Side = Side.RED
    auto_complete_setup: bool = True

    @property
    def enemy_side(self) -> Side:
        return self.player_side.opposite

    @classmethod
    def vs_ai(cls, player_side: Side = Side.RED) -> GameOptions:
        return cls(single_player=True, player_side=player_side)

    @classmethod
    def hot_seat(cls) -> GameOptions:
        return cls(single_player=False)


# ── Collaborator interfaces ─────────────────────────────────────────────────


class IUIManager(ABC):
    """One-way notifications to the user interface."""

    @abstractmethod
    def show_menu(self) -> None: ...

    @abstractmethod
    def update_turn_indicator(self, message: str) -> None: ...

    @abstractmethod
    def show_game_over_screen(self, result: GameResult) -> None: ...


class IRuleChecker(ABC):
    """Owns move legality and win detection."""

    @abstractmethod
    def check_win_condition(self) -> bool:
        """Whether the move just applied ended the game."""


class IAIPlayer(ABC):
    """Interface for the computer opponent."""

    @property
    @abstractmethod
    def side(self) -> Side: ...

    @property
    @abstractmethod
    def name(self) -> str: ...

    @abstractmethod
    def request_move(self, board: BoardGraph, side: Side) -> None:
        """Begin move selection for *side*.

        The answer arrives later through
        ``TurnPhaseController.submit_ai_move``.
        """
