"""Game management layer — phase controller, AI player, session state.

Quick start::

    from junqi.game import GameOptions, TurnPhaseController

    ctrl = TurnPhaseController(ui=my_ui, rule_checker=my_rules, ai=my_ai)
    ctrl.start()
    ctrl.new_game(GameOptions.vs_ai())
"""

from junqi.game.controller import (
    ConfigurationError,
    GameEvents,
    TurnPhaseController,
)
from junqi.game.interfaces import (
    GameOptions,
    GamePhase,
    GameTrigger,
    IAIPlayer,
    IRuleChecker,
    IUIManager,
)
from junqi.game.player import AIPlayer
from junqi.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GameOptions",
    "GamePhase",
    "GameTrigger",
    "IAIPlayer",
    "IRuleChecker",
    "IUIManager",
    # Concrete
    "AIPlayer",
    "ConfigurationError",
    "GameEvents",
    "GameState",
    "MoveRecord",
    "TurnPhaseController",
]
