"""Tests for the Qt UI manager and game bridge."""

from __future__ import annotations

import logging

import pytest
from PyQt6.QtTest import QSignalSpy

from junqi.core.enums import GameResult, Side
from junqi.game.controller import (
    ENEMY_TURN_MESSAGE,
    PLAYER_TURN_MESSAGE,
    TurnPhaseController,
)
from junqi.game.interfaces import GameOptions, GamePhase, IRuleChecker
from junqi.ui.logging_ui import LoggingUIManager
from junqi.ui.qt_bridge import GameBridge, QtUIManager


class _RuleChecker(IRuleChecker):
    def __init__(self) -> None:
        self.win = False

    def check_win_condition(self) -> bool:
        return self.win


@pytest.fixture
def wired(
    qapp: object,
) -> tuple[TurnPhaseController, GameBridge, QtUIManager, _RuleChecker]:
    ui = QtUIManager()
    rules = _RuleChecker()
    ctrl = TurnPhaseController(ui, rules)
    bridge = GameBridge(ctrl)
    ctrl.configure(ai=bridge.create_ai_player(Side.BLUE))
    return ctrl, bridge, ui, rules


class TestQtUIManager:
    def test_signals(self, qapp: object) -> None:
        ui = QtUIManager()
        menu = QSignalSpy(ui.signals.menu_requested)
        turn = QSignalSpy(ui.signals.turn_indicator_changed)
        over = QSignalSpy(ui.signals.game_over_shown)

        ui.show_menu()
        ui.update_turn_indicator("Player Turn")
        ui.show_game_over_screen(GameResult.BLUE_WINS)

        assert len(menu) == 1
        assert turn[0][0] == "Player Turn"
        assert over[0][0] == GameResult.BLUE_WINS


class TestGameBridge:
    def test_new_game_emits_phases_and_board(self, wired) -> None:
        ctrl, bridge, ui, _ = wired
        phases = QSignalSpy(bridge.phase_changed)
        boards = QSignalSpy(bridge.board_built)
        turn = QSignalSpy(ui.signals.turn_indicator_changed)

        bridge.request_new_game()

        emitted = [phases[i][0] for i in range(len(phases))]
        assert emitted == [GamePhase.SETUP, GamePhase.PLAYER_TURN]
        assert len(boards) == 1
        assert boards[0][0] == ctrl.board
        assert turn[0][0] == PLAYER_TURN_MESSAGE

    def test_full_turn_round_trip(self, wired) -> None:
        ctrl, bridge, ui, _ = wired
        ai_requests = QSignalSpy(bridge.ai_move_requested)
        moves = QSignalSpy(bridge.move_recorded)
        turn = QSignalSpy(ui.signals.turn_indicator_changed)

        bridge.request_new_game()
        bridge.on_move_selected("red-move")
        bridge.on_move_finished("ok")

        assert ctrl.phase == GamePhase.ENEMY_TURN
        assert len(ai_requests) == 1
        assert ai_requests[0][1] == Side.BLUE
        assert turn[len(turn) - 1][0] == ENEMY_TURN_MESSAGE

        bridge.on_ai_move_ready("blue-move")
        bridge.on_move_finished("ok")
        assert ctrl.phase == GamePhase.PLAYER_TURN
        assert [moves[i][0].move for i in range(len(moves))] == ["red-move", "blue-move"]

    def test_game_over_signal(self, wired) -> None:
        _, bridge, ui, rules = wired
        over = QSignalSpy(bridge.game_over)
        screen = QSignalSpy(ui.signals.game_over_shown)
        bridge.request_new_game()
        rules.win = True
        bridge.on_move_selected("m")
        bridge.on_move_finished(None)
        assert over[0][0] == GameResult.RED_WINS
        assert screen[0][0] == GameResult.RED_WINS

    def test_pause_resume_slots(self, wired) -> None:
        ctrl, bridge, _, _ = wired
        bridge.request_new_game()
        bridge.request_pause()
        assert ctrl.phase == GamePhase.PAUSED
        bridge.request_resume()
        assert ctrl.phase == GamePhase.PLAYER_TURN
        assert bridge.controller is ctrl


class TestLoggingUIManager:
    def test_records_and_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        ui = LoggingUIManager()
        with caplog.at_level(logging.INFO, logger="junqi.ui.logging_ui"):
            ui.show_menu()
            ui.update_turn_indicator("Red Turn")
            ui.show_game_over_screen(GameResult.RED_WINS)
        assert ui.menu_shown
        assert ui.turn_indicator == "Red Turn"
        assert ui.last_result == GameResult.RED_WINS
        assert "Turn indicator updated - Red Turn" in caplog.text
        assert "RED_WINS" in caplog.text

    def test_drives_a_hot_seat_game(self) -> None:
        ui = LoggingUIManager()
        ctrl = TurnPhaseController(ui, _RuleChecker(), options=GameOptions.hot_seat())
        ctrl.start()
        ctrl.new_game()
        ctrl.select_move("m")
        ctrl.finish_move_execution()
        assert ui.menu_shown
        assert ui.turn_indicator == "Blue Turn"
