"""
Tests for the War constants: card strength, modes and slots.
"""

import pytest

from cardwar.common.card import Card, Rank, Suit
from cardwar.war.constants import (
    MODE_SEATS,
    ControlMode,
    GameMode,
    Slot,
    card_strength,
    get_war_value,
)


def test_ace_is_strongest():
    assert card_strength(Card(1, Suit.SPADES)) == 14
    assert get_war_value(Rank.ACE) == 14


def test_strength_ordering():
    strengths = [card_strength(Card(value, Suit.HEARTS)) for value in [1] + list(range(13, 1, -1))]
    assert strengths == sorted(strengths, reverse=True)
    assert len(set(strengths)) == 13


@pytest.mark.parametrize("value", range(2, 14))
def test_non_aces_keep_their_value(value):
    assert card_strength(Card(value, Suit.CLUBS)) == value


def test_suit_does_not_matter():
    assert {card_strength(Card(12, suit)) for suit in Suit} == {12}


@pytest.mark.parametrize(
    "text, expected",
    [
        ("auto-auto", GameMode.AUTO_AUTO),
        ("human-auto", GameMode.HUMAN_AUTO),
        ("HUMAN_HUMAN", GameMode.HUMAN_HUMAN),
        (GameMode.HUMAN_AUTO, GameMode.HUMAN_AUTO),
    ],
)
def test_parse_mode(text, expected):
    assert GameMode.parse(text) is expected


def test_parse_unknown_mode():
    with pytest.raises(ValueError):
        GameMode.parse("cvc")


def test_mode_labels():
    assert GameMode.AUTO_AUTO.label == "Computer vs Computer"
    assert GameMode.HUMAN_AUTO.label == "Human vs Computer"
    assert GameMode.HUMAN_HUMAN.label == "Human vs Human"


def test_mode_seats():
    assert [control for _, control in MODE_SEATS[GameMode.AUTO_AUTO]] == [
        ControlMode.AUTOMATED,
        ControlMode.AUTOMATED,
    ]
    assert MODE_SEATS[GameMode.HUMAN_AUTO][1] == ("You", ControlMode.MANUAL)
    assert [control for _, control in MODE_SEATS[GameMode.HUMAN_HUMAN]] == [
        ControlMode.MANUAL,
        ControlMode.MANUAL,
    ]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("first", Slot.FIRST),
        ("top", Slot.FIRST),
        ("1", Slot.FIRST),
        (0, Slot.FIRST),
        ("Second", Slot.SECOND),
        ("bottom", Slot.SECOND),
        (1, Slot.SECOND),
    ],
)
def test_parse_slot(text, expected):
    assert Slot.parse(text) is expected


@pytest.mark.parametrize("text", ["third", 2, None])
def test_parse_unknown_slot(text):
    with pytest.raises(ValueError):
        Slot.parse(text)


def test_slot_opponent():
    assert Slot.FIRST.opponent is Slot.SECOND
    assert Slot.SECOND.opponent is Slot.FIRST
