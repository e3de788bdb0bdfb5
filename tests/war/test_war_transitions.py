"""
Tests for the pure War state transitions.
"""

import pytest

from cardwar.war.constants import ControlMode, GameMode, Slot
from cardwar.war.state import GameState, PlayerState
from cardwar.war.transitions import StateTransitionEngine


@pytest.fixture
def new_state(make_cards):
    """Build a fresh game from two lists of card labels."""

    def _build(first, second, mode=GameMode.AUTO_AUTO):
        return StateTransitionEngine.new_game(
            mode,
            StateTransitionEngine.create_player(
                "North", ControlMode.AUTOMATED, make_cards(*first)
            ),
            StateTransitionEngine.create_player(
                "South", ControlMode.AUTOMATED, make_cards(*second)
            ),
        )

    return _build


def events_of(recorded_events, name):
    return [data for event_type, data in recorded_events if event_type == name]


def test_create_player(make_cards):
    player = StateTransitionEngine.create_player(
        "You", ControlMode.MANUAL, make_cards("A♠", "2♥")
    )
    assert player == PlayerState(
        name="You",
        control_mode=ControlMode.MANUAL,
        deck=tuple(make_cards("A♠", "2♥")),
        score=0,
        current_card=None,
    )
    assert player.is_manual


def test_new_game_starts_at_round_one(new_state, recorded_events):
    state = new_state(["A♠"], ["K♣"])
    assert isinstance(state, GameState)
    assert state.round == 1
    assert not state.finished
    assert state.winner is None
    assert events_of(recorded_events, "GAME_CREATED")[0]["game_id"] == state.id


def test_draw_card_takes_the_front_card(new_state, make_cards, recorded_events):
    state = new_state(["A♠", "2♥"], ["K♣"])
    new_state_, card = StateTransitionEngine.draw_card(state, Slot.FIRST)

    assert card == make_cards("A♠")[0]
    assert new_state_.first.current_card == card
    assert new_state_.first.deck == tuple(make_cards("2♥"))
    # The original state is untouched
    assert state.first.current_card is None
    assert len(state.first.deck) == 2

    revealed = events_of(recorded_events, "CARD_REVEALED")
    assert revealed[-1]["slot"] == "first"
    assert revealed[-1]["card"] == "A♠"


def test_draw_from_empty_deck_signals_exhaustion(new_state, recorded_events):
    state = new_state([], ["K♣"])
    new_state_, card = StateTransitionEngine.draw_card(state, Slot.FIRST)
    assert card is None
    assert new_state_ is state
    assert events_of(recorded_events, "CARD_REVEALED") == []


def test_resolve_round_requires_both_cards(new_state):
    state = new_state(["A♠"], ["K♣"])
    state, _ = StateTransitionEngine.draw_card(state, Slot.FIRST)
    resolved, result = StateTransitionEngine.resolve_round(state)
    assert result is None
    assert resolved is state


@pytest.mark.parametrize(
    "first, second, winner, scores",
    [
        ("A♠", "K♣", Slot.FIRST, (1, 0)),
        ("K♣", "A♠", Slot.SECOND, (0, 1)),
        ("2♥", "2♦", None, (0, 0)),
        ("A♥", "A♣", None, (0, 0)),
        ("10♠", "9♠", Slot.FIRST, (1, 0)),
    ],
)
def test_resolve_round(new_state, recorded_events, first, second, winner, scores):
    state = new_state([first, "3♠"], [second, "4♠"])
    state, _ = StateTransitionEngine.draw_card(state, Slot.FIRST)
    state, _ = StateTransitionEngine.draw_card(state, Slot.SECOND)

    state, result = StateTransitionEngine.resolve_round(state)

    assert result.winner is winner
    assert result.is_tie is (winner is None)
    assert (state.first.score, state.second.score) == scores
    assert state.first.current_card is None
    assert state.second.current_card is None
    assert state.round == 2

    ended = events_of(recorded_events, "ROUND_ENDED")[-1]
    assert (ended["top_score"], ended["bottom_score"]) == scores
    assert ended["round_number"] == 2
    assert ended["winner_slot"] == (winner.name.lower() if winner else None)


def test_resolution_depends_only_on_the_cards(make_cards):
    a, k = make_cards("A♦", "K♥")
    outcomes = {StateTransitionEngine.compare(a, k) for _ in range(5)}
    assert outcomes == {Slot.FIRST}


def test_conclude_game_picks_higher_score(new_state):
    state = new_state(["A♠"], ["K♣"])
    state, _ = StateTransitionEngine.draw_card(state, Slot.FIRST)
    state, _ = StateTransitionEngine.draw_card(state, Slot.SECOND)
    state, _ = StateTransitionEngine.resolve_round(state)

    final = StateTransitionEngine.conclude_game(state)
    assert final.finished
    assert final.winner is Slot.FIRST


def test_conclude_game_with_equal_scores_is_a_draw(new_state):
    final = StateTransitionEngine.conclude_game(new_state(["2♠"], ["3♠"]))
    assert final.finished
    assert final.winner is None


def test_conclude_game_is_idempotent(new_state, recorded_events):
    state = new_state(["2♠"], ["3♠"])
    final = StateTransitionEngine.conclude_game(state)
    again = StateTransitionEngine.conclude_game(final)
    assert again is final
    assert len(events_of(recorded_events, "GAME_ENDED")) == 1


def test_adapter_format(new_state):
    state = new_state(["A♠", "2♥"], ["K♣", "2♦"], mode=GameMode.AUTO_AUTO)
    state, _ = StateTransitionEngine.draw_card(state, Slot.FIRST)
    view = state.to_adapter_format()
    assert view["title"] == "Computer vs Computer"
    assert view["round"] == 1
    assert view["players"][0]["card"] == "A♠"
    assert view["players"][0]["cards_remaining"] == 1
    assert view["players"][1]["card"] is None
    assert view["players"][1]["can_play"] is False
