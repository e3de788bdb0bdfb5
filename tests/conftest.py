"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures shared by the whole test suite.
"""

import pytest

from cardwar.common.card import Card, Suit
from cardwar.events import EventBus

SUIT_SYMBOLS = {suit.value: suit for suit in Suit}
VALUE_NAMES = {"A": 1, "J": 11, "Q": 12, "K": 13}


def cards(*labels):
    """Build cards from labels such as "A♠", "10♥" or "K♣"."""
    result = []
    for label in labels:
        value_text, symbol = label[:-1], label[-1]
        value = VALUE_NAMES.get(value_text) or int(value_text)
        result.append(Card(value, SUIT_SYMBOLS[symbol]))
    return result


# Reset event bus before each test
@pytest.fixture(scope="function", autouse=True)
def reset_event_bus():
    """Reset the event bus singleton before each test."""
    EventBus._instance = None
    yield
    EventBus._instance = None


@pytest.fixture
def make_cards():
    """Factory turning card labels into Card objects."""
    return cards


@pytest.fixture
def recorded_events():
    """Record every event emitted on the bus as (event_type, data) tuples."""
    events = []
    EventBus.get_instance().on_any(events.append)
    return events
