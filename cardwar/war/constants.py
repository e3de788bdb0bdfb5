"""War-specific constants and value mappings."""

from enum import Enum

from cardwar.common.card import Card, Rank

# War-specific card strengths (Ace is highest)
WAR_VALUES = {
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
    Rank.ACE: 14,  # Ace is highest in War
}

# Seconds between automated rounds in computer vs computer games
DEFAULT_ROUND_INTERVAL = 1.6


class GameMode(Enum):
    """The three ways a game can be controlled."""

    AUTO_AUTO = "auto-auto"
    HUMAN_AUTO = "human-auto"
    HUMAN_HUMAN = "human-human"

    @property
    def label(self) -> str:
        return MODE_LABELS[self]

    @classmethod
    def parse(cls, mode) -> "GameMode":
        """Accept a GameMode, its value ("human-auto") or its name ("HUMAN_AUTO")."""
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            for candidate in cls:
                if mode in (candidate.value, candidate.name, candidate.name.lower()):
                    return candidate
        raise ValueError(f"Unknown game mode: {mode!r}")


class ControlMode(Enum):
    """Who chooses when a slot plays its card."""

    AUTOMATED = "automated"
    MANUAL = "manual"


class Slot(Enum):
    """Fixed seats at the table; FIRST is the top seat."""

    FIRST = 0
    SECOND = 1

    @property
    def opponent(self) -> "Slot":
        return Slot.SECOND if self is Slot.FIRST else Slot.FIRST

    @classmethod
    def parse(cls, slot) -> "Slot":
        """Accept a Slot, its index (0/1) or its name ("first", "top", ...)."""
        if isinstance(slot, cls):
            return slot
        if isinstance(slot, int) and not isinstance(slot, bool):
            return cls(slot)
        if isinstance(slot, str):
            key = slot.strip().lower()
            if key in ("first", "top", "north", "1"):
                return cls.FIRST
            if key in ("second", "bottom", "south", "2"):
                return cls.SECOND
        raise ValueError(f"Unknown slot: {slot!r}")


MODE_LABELS = {
    GameMode.AUTO_AUTO: "Computer vs Computer",
    GameMode.HUMAN_AUTO: "Human vs Computer",
    GameMode.HUMAN_HUMAN: "Human vs Human",
}

# (name, control mode) for the first and second slot of each mode
MODE_SEATS = {
    GameMode.AUTO_AUTO: (
        ("Computer North", ControlMode.AUTOMATED),
        ("Computer South", ControlMode.AUTOMATED),
    ),
    GameMode.HUMAN_AUTO: (
        ("Computer North", ControlMode.AUTOMATED),
        ("You", ControlMode.MANUAL),
    ),
    GameMode.HUMAN_HUMAN: (
        ("Player North", ControlMode.MANUAL),
        ("Player South", ControlMode.MANUAL),
    ),
}


def get_war_value(rank: Rank) -> int:
    """Get the war value for a given rank."""
    return WAR_VALUES.get(rank, rank.rank_value)


def card_strength(card: Card) -> int:
    """Strength used to compare cards in a round; suits never matter."""
    return get_war_value(card.rank)
