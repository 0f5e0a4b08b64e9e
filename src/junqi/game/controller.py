"""TurnPhaseController — the phase state machine of a game session.

Coordinates: board construction, UI notifications, the rule checker and the
AI collaborator. Emits events via simple callbacks so the UI / tests can
subscribe.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field

from junqi.core.board import BoardGraph
from junqi.core.enums import GameResult
from junqi.core.topology import build_board
from junqi.game.interfaces import (
    GameOptions,
    GamePhase,
    GameTrigger,
    IAIPlayer,
    IRuleChecker,
    IUIManager,
)
from junqi.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)

PLAYER_TURN_MESSAGE = "Player Turn"
ENEMY_TURN_MESSAGE = "AI is Thinking..."

_NON_TERMINAL = frozenset(p for p in GamePhase if p.can_pause)

# Trigger -> phases in which it is accepted.
_ALLOWED_SOURCES: dict[GameTrigger, frozenset[GamePhase]] = {
    GameTrigger.NEW_GAME: frozenset({GamePhase.START_MENU, GamePhase.GAME_OVER}),
    GameTrigger.SETUP_COMPLETE: frozenset({GamePhase.SETUP}),
    GameTrigger.MOVE_SELECTED: frozenset({GamePhase.PLAYER_TURN}),
    GameTrigger.AI_MOVE_RESOLVED: frozenset({GamePhase.ENEMY_TURN}),
    GameTrigger.MOVE_FINISHED: frozenset({GamePhase.MOVE_EXECUTION}),
    GameTrigger.PAUSE: _NON_TERMINAL,
    GameTrigger.RESUME: frozenset({GamePhase.PAUSED}),
}

# Completions of in-flight work that are held back while paused.
_DEFERRED_WHILE_PAUSED = frozenset(
    {
        GameTrigger.SETUP_COMPLETE,
        GameTrigger.AI_MOVE_RESOLVED,
        GameTrigger.MOVE_FINISHED,
    }
)


class ConfigurationError(RuntimeError):
    """A required collaborator was not supplied."""


# ── Event definitions ────────────────────────────────────────────────────────

PhaseCallback = Callable[[GamePhase], None]
BoardCallback = Callable[[BoardGraph], None]
MoveCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[GameResult], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_board_built: list[BoardCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class TurnPhaseController:
    """Sequences a game through setup, turns, move execution and game over.

    Collaborators are injected at construction. Missing ones put the
    controller in a configuration-error state: it is reported once and every
    trigger is refused until :meth:`configure` supplies them.

    Triggers are processed one at a time. A trigger raised while a
    transition's entry action is running (for example a collaborator that
    answers synchronously) is queued and handled afterwards. Every trigger
    method returns True if the trigger was accepted (or queued) and False
    if it was ignored. A queued trigger is validated later, so True from a
    nested call is not a promise that it will take effect.
    """

    __slots__ = (
        "_ui",
        "_rule_checker",
        "_ai",
        "_options",
        "_board_factory",
        "_state",
        "_queue",
        "_deferred",
        "_dispatching",
        "_config_error",
        "events",
    )

    def __init__(
        self,
        ui: IUIManager | None,
        rule_checker: IRuleChecker | None,
        ai: IAIPlayer | None = None,
        *,
        options: GameOptions | None = None,
        board_factory: Callable[[], BoardGraph] = build_board,
    ) -> None:
        self._ui = ui
        self._rule_checker = rule_checker
        self._ai = ai
        self._options = options or GameOptions()
        self._board_factory = board_factory
        self._state = GameState()
        self._queue: deque[tuple[GameTrigger, object]] = deque()
        self._deferred: list[tuple[GameTrigger, object]] = []
        self._dispatching = False
        self._config_error: ConfigurationError | None = None
        self.events = GameEvents()
        self._validate_collaborators()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def board(self) -> BoardGraph | None:
        return self._state.board

    @property
    def options(self) -> GameOptions:
        return self._options

    @property
    def is_input_enabled(self) -> bool:
        return self._state.input_enabled

    @property
    def configuration_error(self) -> ConfigurationError | None:
        return self._config_error

    @property
    def is_configured(self) -> bool:
        return self._config_error is None

    # ── Configuration ────────────────────────────────────────────────────

    def configure(
        self,
        *,
        ui: IUIManager | None = None,
        rule_checker: IRuleChecker | None = None,
        ai: IAIPlayer | None = None,
    ) -> bool:
        """Supply missing collaborators. Returns True once fully configured."""
        if ui is not None:
            self._ui = ui
        if rule_checker is not None:
            self._rule_checker = rule_checker
        if ai is not None:
            self._ai = ai
        self._validate_collaborators()
        return self.is_configured

    def _validate_collaborators(self) -> None:
        required = (("ui manager", self._ui), ("rule checker", self._rule_checker))
        missing = [name for name, obj in required if obj is None]
        if not missing:
            self._config_error = None
            return
        error = ConfigurationError(
            f"Missing required collaborators: {', '.join(missing)}"
        )
        if self._config_error is None or str(self._config_error) != str(error):
            _LOGGER.error("%s", error)
        self._config_error = error

    # ── External triggers ────────────────────────────────────────────────

    def start(self) -> bool:
        """Run the START_MENU entry action (show the menu)."""
        if self._config_error is not None:
            return False
        if self._state.phase != GamePhase.START_MENU:
            _LOGGER.warning("start() ignored in phase %s", self._state.phase.name)
            return False
        self._ui.show_menu()
        return True

    def new_game(self, options: GameOptions | None = None) -> bool:
        return self.handle(GameTrigger.NEW_GAME, options)

    def complete_setup(self) -> bool:
        return self.handle(GameTrigger.SETUP_COMPLETE)

    def select_move(self, move: object) -> bool:
        """The player picked a move the rule checker accepted."""
        return self.handle(GameTrigger.MOVE_SELECTED, move)

    def submit_ai_move(self, move: object) -> bool:
        """The AI collaborator resolved its move."""
        return self.handle(GameTrigger.AI_MOVE_RESOLVED, move)

    def finish_move_execution(self, outcome: object = None) -> bool:
        """The board finished applying (and animating) the pending move."""
        return self.handle(GameTrigger.MOVE_FINISHED, outcome)

    def pause(self) -> bool:
        return self.handle(GameTrigger.PAUSE)

    def resume(self) -> bool:
        return self.handle(GameTrigger.RESUME)

    def handle(self, trigger: GameTrigger, payload: object = None) -> bool:
        """Feed *trigger* into the state machine.

        Called from inside another transition (an entry action, a listener or
        a synchronous collaborator) the trigger is only queued and True is
        returned before it is checked. A queued trigger that turns out to be
        invalid is logged and dropped; its caller is not told.
        """
        if self._config_error is not None:
            _LOGGER.debug("Trigger %s refused: controller not configured", trigger.name)
            return False

        self._queue.append((trigger, payload))
        if self._dispatching:
            return True

        self._dispatching = True
        accepted: bool | None = None
        try:
            while self._queue:
                ok = self._process(*self._queue.popleft())
                if accepted is None:
                    accepted = ok
        finally:
            self._dispatching = False
            self._queue.clear()
        return bool(accepted)

    # ── Transition handling ──────────────────────────────────────────────

    def _process(self, trigger: GameTrigger, payload: object) -> bool:
        state = self._state
        allowed = _ALLOWED_SOURCES[trigger]

        if (
            state.phase == GamePhase.PAUSED
            and trigger in _DEFERRED_WHILE_PAUSED
            and state.suspended_phase in allowed
        ):
            _LOGGER.debug("Deferring %s until resume", trigger.name)
            self._deferred.append((trigger, payload))
            return True

        if state.phase not in allowed:
            _LOGGER.warning("Ignoring %s in phase %s", trigger.name, state.phase.name)
            return False

        if trigger == GameTrigger.NEW_GAME:
            return self._on_new_game(payload)
        if trigger == GameTrigger.SETUP_COMPLETE:
            self._enter_turn()
        elif trigger in (GameTrigger.MOVE_SELECTED, GameTrigger.AI_MOVE_RESOLVED):
            self._on_move_started(payload)
        elif trigger == GameTrigger.MOVE_FINISHED:
            self._on_move_finished(payload)
        elif trigger == GameTrigger.PAUSE:
            self._on_pause()
        elif trigger == GameTrigger.RESUME:
            self._on_resume()
        return True

    def _on_new_game(self, payload: object) -> bool:
        options = payload if isinstance(payload, GameOptions) else self._options
        if options.single_player and self._ai is None:
            error = ConfigurationError("Single-player game requires an AI player")
            _LOGGER.error("%s", error)
            return False
        if options.single_player and self._ai.side != options.enemy_side:
            error = ConfigurationError(
                f"AI player plays {self._ai.side}, game needs {options.enemy_side}"
            )
            _LOGGER.error("%s", error)
            return False

        self._deferred.clear()
        self._set_phase(GamePhase.SETUP)
        board = self._board_factory()
        self._state.reset(board, options)
        for cb in self.events.on_board_built:
            cb(board)

        if options.auto_complete_setup:
            self._queue.append((GameTrigger.SETUP_COMPLETE, None))
        return True

    def _on_move_started(self, move: object) -> None:
        self._state.begin_move(move)
        self._state.input_enabled = False
        self._set_phase(GamePhase.MOVE_EXECUTION)

    def _on_move_finished(self, outcome: object) -> None:
        state = self._state
        record = state.finish_move(outcome)
        for cb in self.events.on_move:
            cb(record)

        if self._rule_checker.check_win_condition():
            state.declare_winner(record.side)
            self._enter_game_over()
            return

        state.pass_turn()
        self._enter_turn()

    def _on_pause(self) -> None:
        state = self._state
        state.suspended_phase = state.phase
        state.input_enabled = False
        self._set_phase(GamePhase.PAUSED)

    def _on_resume(self) -> None:
        state = self._state
        phase = state.suspended_phase or GamePhase.START_MENU
        state.suspended_phase = None
        state.input_enabled = phase == GamePhase.PLAYER_TURN
        self._set_phase(phase)

        self._queue.extend(self._deferred)
        self._deferred.clear()

    # ── Entry actions ────────────────────────────────────────────────────

    def _enter_turn(self) -> None:
        state = self._state
        if state.is_enemy_to_move:
            state.input_enabled = False
            self._set_phase(GamePhase.ENEMY_TURN)
            self._ui.update_turn_indicator(ENEMY_TURN_MESSAGE)
            self._ai.request_move(state.board, state.side_to_move)
        else:
            state.input_enabled = True
            self._set_phase(GamePhase.PLAYER_TURN)
            self._ui.update_turn_indicator(self._player_turn_message())

    def _enter_game_over(self) -> None:
        state = self._state
        state.input_enabled = False
        self._set_phase(GamePhase.GAME_OVER)
        self._ui.show_game_over_screen(state.result)
        for cb in self.events.on_game_over:
            cb(state.result)

    def _player_turn_message(self) -> str:
        if self._state.options.single_player:
            return PLAYER_TURN_MESSAGE
        return f"{self._state.side_to_move.name.capitalize()} Turn"

    def _set_phase(self, phase: GamePhase) -> None:
        previous = self._state.phase
        self._state.phase = phase
        _LOGGER.info("Game phase changed: %s -> %s", previous.name, phase.name)
        for cb in self.events.on_phase_changed:
            cb(phase)
