"""
Dummy adapter for the cardwar engine, used for testing and simulation.

This module provides a non-interactive adapter that records everything the
engine sends it, for automated tests and simulations where nothing is shown.
"""

from typing import List, Dict, Any, Union
from enum import Enum

from cardwar.adapters.base import PlatformAdapter


class DummyAdapter(PlatformAdapter):
    """
    Dummy adapter for testing and simulation.

    This adapter doesn't interact with any real platform. It keeps the events
    and rendered states it receives so they can be inspected afterwards.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the dummy adapter.

        Args:
            verbose: Whether to print events to stdout (useful for debugging)
        """
        self.verbose = verbose

        # Track events for later inspection
        self.events = []

        # Track rendered states for testing
        self.rendered_states = []

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Store the game state for later inspection.

        Args:
            state: The current game state
        """
        self.rendered_states.append(state)

        if self.verbose:
            print(f"\n=== Round {state.get('round')} ===")
            for player in state.get("players", []):
                print(
                    f"{player.get('name')}: {player.get('score')} "
                    f"({player.get('cards_remaining')} cards left)"
                )

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Store the event for later inspection.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type

        self.events.append((event_type_str, data))

        if self.verbose:
            print(f"Event: {event_type_str}")
            for key, value in data.items():
                print(f"  {key}: {value}")

    def get_events_by_type(self, event_type: Union[str, Enum]) -> List[Dict[str, Any]]:
        """
        Get all events of a specific type.

        Args:
            event_type: The type of events to retrieve

        Returns:
            A list of event data dictionaries
        """
        event_type_str = event_type.name if isinstance(event_type, Enum) else event_type
        return [data for typ, data in self.events if typ == event_type_str]

    @property
    def log_messages(self) -> List[str]:
        """Narration lines received so far, in order."""
        return [data["message"] for data in self.get_events_by_type("LOG_MESSAGE")]

    def clear(self) -> None:
        """Clear all stored events and states."""
        self.events.clear()
        self.rendered_states.clear()
