"""Headless UI manager that reports notifications through ``logging``."""

from __future__ import annotations

import logging

from junqi.core.enums import GameResult
from junqi.game.interfaces import IUIManager

_LOGGER = logging.getLogger(__name__)


class LoggingUIManager(IUIManager):
    """Writes every UI notification to the log and remembers the last ones."""

    __slots__ = ("turn_indicator", "last_result", "menu_shown")

    def __init__(self) -> None:
        self.turn_indicator = ""
        self.last_result: GameResult | None = None
        self.menu_shown = False

    def show_menu(self) -> None:
        self.menu_shown = True
        _LOGGER.info("UI: Showing start menu")

    def update_turn_indicator(self, message: str) -> None:
        self.turn_indicator = message
        _LOGGER.info("UI: Turn indicator updated - %s", message)

    def show_game_over_screen(self, result: GameResult) -> None:
        self.last_result = result
        _LOGGER.info("UI: Showing game over screen (%s)", result.name)
