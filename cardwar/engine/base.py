"""
Base engine class for the cardwar package.

This module provides the abstract base class for game engines. It defines the
common interface engines expose to the API layer.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional

from cardwar.adapters import PlatformAdapter
from cardwar.events import EventBus


class CardwarEngine(ABC):
    """
    Abstract base class for game engines.

    Holds the platform adapter, the configuration and the event bus, and
    defines the lifecycle every engine follows.
    """

    def __init__(self, adapter: PlatformAdapter, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the engine.

        Args:
            adapter: Platform adapter to use for rendering
            config: Configuration options for the game
        """
        self.adapter = adapter
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.state = None

    @abstractmethod
    async def initialize(self) -> None:
        """
        Initialize the engine and prepare for a game.
        """
        await self.adapter.initialize()

    @abstractmethod
    async def shutdown(self) -> None:
        """
        Shut down the engine and clean up resources.
        """
        await self.adapter.shutdown()

    @abstractmethod
    async def render_state(self) -> None:
        """
        Render the current game state.
        """
        pass
