"""
Base adapter interface for the cardwar engine.

This module defines the interface that platform-specific adapters must implement
to present the game the engine is running.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Union
from enum import Enum


class PlatformAdapter(ABC):
    """
    Base interface for platform-specific adapters.

    Adapters are the presentation collaborators of the engine: they render
    the adapter-friendly state snapshot and react to game events (cards
    revealed, rounds resolved, narration, game end). They only read what the
    engine hands them and never mutate the session.
    """

    @abstractmethod
    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the current game state to the platform.

        Args:
            state: Snapshot produced by ``GameState.to_adapter_format``
        """
        pass

    @abstractmethod
    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Notify the platform of a game event.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        pass

    # The following methods have default implementations but can be overridden

    async def initialize(self) -> None:
        """
        Initialize the adapter.

        This method is called when the adapter is first connected to the engine.
        """
        pass

    async def shutdown(self) -> None:
        """
        Shutdown the adapter.

        This method is called when the engine is shutting down.
        """
        pass
