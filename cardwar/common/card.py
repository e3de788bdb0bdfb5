"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Spades, Hearts, Diamonds, and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck, numbered
from Ace (1) through King (13).

- `Card`: An immutable playing card made of a rank value and a suit. Cards know
how to label themselves for narration ("A♠", "10♥").

This module is part of the `cardwar` package.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "♠"
    HEARTS = "♥"
    DIAMONDS = "♦"
    CLUBS = "♣"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, valued by their nominal position.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def rank_value(self) -> int:
        """The nominal value of the rank (1..13)."""
        return self.value

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card.

    >>> card = Card(1, Suit.SPADES)
    >>> print(card)
    A♠
    >>> card.rank
    <Rank.ACE: 1>
    """

    value: int
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit!r}")
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Invalid card value: {self.value!r}")
        if not 1 <= self.value <= 13:
            raise ValueError(f"Card value must be between 1 and 13, got {self.value}")

    @property
    def rank(self) -> Rank:
        """The `Rank` matching this card's value."""
        return Rank(self.value)

    @property
    def label(self) -> str:
        """
        Short label used in narration.

        >>> Card(12, Suit.HEARTS).label
        'Q♥'
        """
        return f"{self.rank.rank_str}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.value}, Suit.{self.suit.name})"

    def __str__(self) -> str:
        return self.label
