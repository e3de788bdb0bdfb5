"""
War rules and immutable state for the cardwar engine.
"""

from cardwar.war.constants import (
    ControlMode,
    GameMode,
    Slot,
    card_strength,
)
from cardwar.war.state import GameStage, GameState, PlayerState, RoundResult
from cardwar.war.transitions import StateTransitionEngine

__all__ = [
    "ControlMode",
    "GameMode",
    "Slot",
    "card_strength",
    "GameStage",
    "GameState",
    "PlayerState",
    "RoundResult",
    "StateTransitionEngine",
]
