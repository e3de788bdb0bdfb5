"""
Immutable state models for the War card game.

This module provides dataclasses for representing the state of a War card game
in an immutable manner. These classes are designed to be used with pure
transition functions that create new state instances rather than modifying
existing ones.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from enum import Enum, auto
import uuid
import time

from cardwar.common.card import Card
from cardwar.war.constants import ControlMode, GameMode, Slot


class GameStage(Enum):
    """Phases of the game controller."""

    SELECTING_MODE = auto()
    IN_PROGRESS = auto()
    CONCLUDED = auto()


@dataclass(frozen=True)
class RoundResult:
    """
    Outcome of a single resolved round.

    Attributes:
        round_number: Number of the round that was resolved
        first_card: Card played from the first slot
        second_card: Card played from the second slot
        first_strength: Strength of the first card
        second_strength: Strength of the second card
        winner: Slot that scored, or None for a tie
    """

    round_number: int
    first_card: Card
    second_card: Card
    first_strength: int
    second_strength: int
    winner: Optional[Slot] = None

    @property
    def is_tie(self) -> bool:
        return self.winner is None


@dataclass(frozen=True)
class PlayerState:
    """
    Immutable representation of a player's state in War.

    Attributes:
        name: Display name of the player
        control_mode: Whether the player is automated or driven by a human
        deck: Remaining cards, front first
        score: Rounds won so far
        current_card: Card revealed this round, cleared once the round resolves
    """

    name: str = "Player"
    control_mode: ControlMode = ControlMode.AUTOMATED
    deck: Tuple[Card, ...] = ()
    score: int = 0
    current_card: Optional[Card] = None

    @property
    def is_manual(self) -> bool:
        return self.control_mode is ControlMode.MANUAL

    @property
    def cards_remaining(self) -> int:
        return len(self.deck)


@dataclass(frozen=True)
class GameState:
    """
    Immutable representation of one War game session.

    Attributes:
        id: Unique identifier for this session
        mode: How the two slots are controlled
        players: Exactly two players, ordered first then second
        round: Number of the round being played, starting at 1
        finished: Whether the game has concluded; never reset
        winner: Winning slot once finished, None for a draw or while playing
        timestamp: Time when this state was created
    """

    mode: GameMode
    players: Tuple[PlayerState, PlayerState]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    round: int = 1
    finished: bool = False
    winner: Optional[Slot] = None
    timestamp: float = field(default_factory=lambda: time.time())

    def player(self, slot: Slot) -> PlayerState:
        return self.players[slot.value]

    @property
    def first(self) -> PlayerState:
        return self.players[0]

    @property
    def second(self) -> PlayerState:
        return self.players[1]

    @property
    def both_revealed(self) -> bool:
        return all(p.current_card is not None for p in self.players)

    @property
    def any_deck_empty(self) -> bool:
        return any(not p.deck for p in self.players)

    def to_adapter_format(self) -> Dict[str, Any]:
        """
        Convert the game state to a format suitable for platform adapters.

        Returns:
            Dictionary in adapter-friendly format
        """
        return {
            "title": self.mode.label,
            "round": self.round,
            "finished": self.finished,
            "winner": self.player(self.winner).name if self.winner else None,
            "players": [
                {
                    "slot": slot.name.lower(),
                    "name": player.name,
                    "score": player.score,
                    "card": str(player.current_card) if player.current_card else None,
                    "cards_remaining": player.cards_remaining,
                    "can_play": player.is_manual and not self.finished,
                }
                for slot, player in zip(Slot, self.players)
            ],
        }
