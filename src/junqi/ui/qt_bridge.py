"""Qt bridge between widgets / worker threads and the TurnPhaseController.

Signals emitted from a worker thread reach ``GameBridge`` slots through
queued connections, so every trigger still lands on the controller's thread
one at a time.
"""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from junqi.core.enums import GameResult, Side
from junqi.game.controller import TurnPhaseController
from junqi.game.interfaces import IUIManager
from junqi.game.player import AIPlayer


class UISignals(QObject):
    """Signal carrier for :class:`QtUIManager`."""

    menu_requested = pyqtSignal()
    turn_indicator_changed = pyqtSignal(str)
    game_over_shown = pyqtSignal(object)


class QtUIManager(IUIManager):
    """UI manager that re-emits each notification as a Qt signal."""

    __slots__ = ("signals",)

    def __init__(self, parent: QObject | None = None) -> None:
        self.signals = UISignals(parent)

    def show_menu(self) -> None:
        self.signals.menu_requested.emit()

    def update_turn_indicator(self, message: str) -> None:
        self.signals.turn_indicator_changed.emit(message)

    def show_game_over_screen(self, result: GameResult) -> None:
        self.signals.game_over_shown.emit(result)


class GameBridge(QObject):
    """Forwards board/AI signals into the controller and its events out."""

    phase_changed = pyqtSignal(object)
    board_built = pyqtSignal(object)
    move_recorded = pyqtSignal(object)
    game_over = pyqtSignal(object)
    ai_move_requested = pyqtSignal(object, object)  # board, side

    def __init__(
        self, controller: TurnPhaseController, parent: QObject | None = None
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        events = controller.events
        events.on_phase_changed.append(self.phase_changed.emit)
        events.on_board_built.append(self.board_built.emit)
        events.on_move.append(self.move_recorded.emit)
        events.on_game_over.append(self.game_over.emit)

    @property
    def controller(self) -> TurnPhaseController:
        return self._controller

    def create_ai_player(self, side: Side = Side.BLUE, name: str = "AI") -> AIPlayer:
        """AI collaborator whose move requests leave through ``ai_move_requested``."""
        return AIPlayer(side, name, on_request_move=self.ai_move_requested.emit)

    @pyqtSlot()
    def request_new_game(self) -> None:
        self._controller.new_game()

    @pyqtSlot()
    def request_pause(self) -> None:
        self._controller.pause()

    @pyqtSlot()
    def request_resume(self) -> None:
        self._controller.resume()

    @pyqtSlot(object)
    def on_move_selected(self, move: object) -> None:
        self._controller.select_move(move)

    @pyqtSlot(object)
    def on_ai_move_ready(self, move: object) -> None:
        self._controller.submit_ai_move(move)

    @pyqtSlot(object)
    def on_move_finished(self, outcome: object) -> None:
        self._controller.finish_move_execution(outcome)
