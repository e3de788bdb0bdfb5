"""
State transition functions for the War card game.

This module provides pure functions for transitioning between game states,
without modifying the original state objects. Every transition that changes
something observable emits an event on the global EventBus.
"""

from typing import Optional, Sequence, Tuple
from dataclasses import replace

from cardwar.common.card import Card
from cardwar.events import EventBus, EngineEventType
from cardwar.war.constants import ControlMode, GameMode, Slot, card_strength
from cardwar.war.state import GameState, PlayerState, RoundResult


class StateTransitionEngine:
    """
    Pure functions for state transitions in War.

    This class contains static methods that implement game state transitions.
    Each method takes a state and returns a new state, without modifying the
    original.
    """

    @staticmethod
    def create_player(
        name: str, control_mode: ControlMode, deck: Sequence[Card]
    ) -> PlayerState:
        """
        Create a player holding a deck, with no score and no card in play.

        Args:
            name: Display name of the player
            control_mode: Automated or manual control
            deck: Cards the player will play, front first

        Returns:
            New player state
        """
        return PlayerState(name=name, control_mode=control_mode, deck=tuple(deck))

    @staticmethod
    def new_game(
        mode: GameMode,
        first: PlayerState,
        second: PlayerState,
    ) -> GameState:
        """
        Create a fresh session for two seated players.

        Args:
            mode: Game mode being played
            first: Player in the first (top) slot
            second: Player in the second (bottom) slot

        Returns:
            New game state at round 1
        """
        state = GameState(mode=mode, players=(first, second))

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.GAME_CREATED,
            {
                "game_id": state.id,
                "mode": mode.value,
                "players": [first.name, second.name],
                "timestamp": state.timestamp,
            },
        )

        return state

    @staticmethod
    def draw_card(state: GameState, slot: Slot) -> Tuple[GameState, Optional[Card]]:
        """
        Take the front card of a player's deck and put it in play.

        Args:
            state: Current game state
            slot: Slot of the player drawing

        Returns:
            Tuple of (new game state, drawn card). The card is None and the
            state is returned unchanged when the deck is exhausted.
        """
        player = state.player(slot)
        if not player.deck:
            return state, None

        card = player.deck[0]
        new_player = replace(player, deck=player.deck[1:], current_card=card)

        new_players = list(state.players)
        new_players[slot.value] = new_player
        new_state = replace(state, players=tuple(new_players))

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.CARD_REVEALED,
            {
                "game_id": state.id,
                "slot": slot.name.lower(),
                "player_name": new_player.name,
                "card": str(card),
                "round_number": state.round,
                "cards_remaining": new_player.cards_remaining,
            },
        )

        return new_state, card

    @staticmethod
    def compare(first_card: Card, second_card: Card) -> Optional[Slot]:
        """
        Decide which card wins a round.

        Returns:
            The winning slot, or None when both cards are equally strong
        """
        first_value = card_strength(first_card)
        second_value = card_strength(second_card)
        if first_value > second_value:
            return Slot.FIRST
        if second_value > first_value:
            return Slot.SECOND
        return None

    @staticmethod
    def resolve_round(state: GameState) -> Tuple[GameState, Optional[RoundResult]]:
        """
        Score the round once both players have a card in play.

        The stronger card earns its owner one point; a tie awards nothing.
        Both cards are cleared and the round counter advances.

        Args:
            state: Current game state

        Returns:
            Tuple of (new game state, round result). Without two cards in play
            the original state and None are returned.
        """
        if not state.both_revealed:
            return state, None

        first, second = state.players
        winner = StateTransitionEngine.compare(first.current_card, second.current_card)
        result = RoundResult(
            round_number=state.round,
            first_card=first.current_card,
            second_card=second.current_card,
            first_strength=card_strength(first.current_card),
            second_strength=card_strength(second.current_card),
            winner=winner,
        )

        new_players = []
        for slot, player in zip(Slot, state.players):
            score = player.score + 1 if slot is winner else player.score
            new_players.append(replace(player, score=score, current_card=None))

        new_state = replace(state, players=tuple(new_players), round=state.round + 1)

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.ROUND_ENDED,
            {
                "game_id": state.id,
                "round_number": new_state.round,
                "resolved_round": result.round_number,
                "winner_slot": winner.name.lower() if winner else None,
                "winner_name": new_state.player(winner).name if winner else None,
                "top_score": new_players[0].score,
                "bottom_score": new_players[1].score,
                "first_card": str(result.first_card),
                "second_card": str(result.second_card),
                "timestamp": new_state.timestamp,
            },
        )

        return new_state, result

    @staticmethod
    def conclude_game(state: GameState) -> GameState:
        """
        Finish the game and settle the winner by accumulated score.

        Concluding an already finished game returns it unchanged and emits
        nothing.

        Args:
            state: Current game state

        Returns:
            New game state marked as finished
        """
        if state.finished:
            return state

        first, second = state.players
        if first.score > second.score:
            winner = Slot.FIRST
        elif second.score > first.score:
            winner = Slot.SECOND
        else:
            winner = None

        new_state = replace(state, finished=True, winner=winner)

        event_bus = EventBus.get_instance()
        event_bus.emit(
            EngineEventType.GAME_ENDED,
            {
                "game_id": state.id,
                "winner_slot": winner.name.lower() if winner else None,
                "winner_name": new_state.player(winner).name if winner else None,
                "top_score": first.score,
                "bottom_score": second.score,
                "rounds_played": state.round - 1,
                "timestamp": new_state.timestamp,
            },
        )

        return new_state
