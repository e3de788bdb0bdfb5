import random
from collections import Counter
from unittest.mock import MagicMock

import pytest

from cardwar.common.card import Card, Suit
from cardwar.common.deck import Deck, build_shuffled_deck, partition


def test_deck_initialization():
    deck = Deck()
    assert isinstance(deck.cards, list)
    assert len(deck.cards) == 52


def test_deck_initialization_with_custom_cards():
    cards = [Card(2, Suit.HEARTS), Card(1, Suit.DIAMONDS), Card(11, Suit.CLUBS)]
    deck = Deck(cards)
    assert deck.cards == cards
    assert deck.cards is not cards


def test_deck_shuffle_keeps_the_same_cards():
    deck = Deck(rng=random.Random(3))
    original_order = deck.cards.copy()
    deck.shuffle()
    assert deck.cards != original_order
    assert Counter(deck.cards) == Counter(original_order)


def test_shuffle_walks_from_the_back_with_inclusive_bounds():
    rng = MagicMock()
    rng.randint.return_value = 0
    a, b, c = Card(1, Suit.SPADES), Card(2, Suit.SPADES), Card(3, Suit.SPADES)
    deck = Deck([a, b, c], rng=rng)

    deck.shuffle()

    # i=2 swaps with 0, then i=1 swaps with 0
    assert deck.cards == [b, c, a]
    assert [call.args for call in rng.randint.call_args_list] == [(0, 2), (0, 1)]


def test_shuffle_with_identity_choices_keeps_order():
    rng = MagicMock()
    rng.randint.side_effect = lambda low, high: high
    deck = Deck(rng=rng)
    original_order = deck.cards.copy()
    deck.shuffle()
    assert deck.cards == original_order


def test_seeded_shuffles_are_reproducible():
    assert build_shuffled_deck(random.Random(42)) == build_shuffled_deck(
        random.Random(42)
    )


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_shuffled_deck_has_52_unique_cards(seed):
    deck = build_shuffled_deck(random.Random(seed))
    assert len(deck) == 52
    assert len(set(deck)) == 52
    assert {card.value for card in deck} == set(range(1, 14))
    assert {card.suit for card in deck} == set(Suit)


def test_build_shuffled_deck_uses_global_random_by_default(mocker):
    randint = mocker.patch("random.randint", side_effect=lambda low, high: high)
    deck = build_shuffled_deck()
    assert randint.call_count == 51
    assert deck == Deck().cards


def test_partition_splits_at_midpoint():
    deck = build_shuffled_deck(random.Random(9))
    first, second = partition(deck)
    assert len(first) == len(second) == 26
    assert first + second == deck


def test_partition_does_not_alias_input():
    deck = Deck().cards
    first, _ = partition(deck)
    first.pop()
    assert len(deck) == 52
