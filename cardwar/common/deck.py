"""
This module contains the Deck class, which represents a deck of cards, and the
helpers used to prepare the two halves of a War game.

>>> first, second = partition(build_shuffled_deck())
>>> len(first), len(second)
(26, 26)
"""

import random
from typing import List, Optional, Sequence, Tuple, Union

from cardwar.common.card import Card, Rank, Suit


class Deck:
    """
    A class representing a deck of cards, front first.
    """

    # Precompute the default deck, ordered by value then suit
    _default_deck = [
        Card(rank.rank_value, suit)
        for rank in Rank
        for suit in [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]
    ]

    def __init__(
        self,
        cards: Union[List[Card], None] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the 52-card default deck is used.
        :param rng: Random source used by `shuffle`. Defaults to the
                    process-wide `random` module.
        >>> len(Deck().cards)
        52
        """
        if cards is None:
            self.cards: List[Card] = self._default_deck.copy()
        else:
            self.cards = list(cards)
        self.rng = rng or random

    def shuffle(self):
        """
        Shuffle the cards in place with a Fisher-Yates pass.

        Walks from the last index down to 1, swapping each position with a
        uniformly chosen index in ``[0, i]``.
        >>> deck = Deck()
        >>> set(deck.shuffle().cards) == set(Deck().cards)
        True
        """
        cards = self.cards
        for i in range(len(cards) - 1, 0, -1):
            j = self.rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]
        return self


def build_shuffled_deck(rng: Optional[random.Random] = None) -> List[Card]:
    """
    Build a fresh 52-card deck in a uniformly random order.

    :param rng: Optional random source; the process-wide one is used otherwise.
    :return: A list of 52 unique cards.
    """
    return Deck(rng=rng).shuffle().cards


def partition(deck: Sequence[Card]) -> Tuple[List[Card], List[Card]]:
    """
    Split a deck at its midpoint, keeping the relative order of each half.

    >>> first, second = partition(Deck().cards)
    >>> [str(card) for card in second[:2]]
    ['7♦', '7♣']
    """
    midpoint = len(deck) // 2
    return list(deck[:midpoint]), list(deck[midpoint:])
