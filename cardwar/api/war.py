"""
War card game API module for cardwar.

This module provides a high-level, platform-agnostic API for working with the
War engine, supporting both synchronous and asynchronous operation.
"""

import asyncio
from typing import Dict, Any, Optional, Sequence, Tuple

from cardwar.adapters import PlatformAdapter
from cardwar.api.base import CardwarGame
from cardwar.common.card import Card
from cardwar.engine.war import WarEngine
from cardwar.events import EngineEventType
from cardwar.war.constants import DEFAULT_ROUND_INTERVAL, GameMode
from cardwar.war.state import GameStage, GameState


class WarGame(CardwarGame):
    """
    High-level, platform-agnostic API for War card games.

    Example:
        ```python
        # Async usage
        game = WarGame()
        await game.initialize()
        await game.select_mode("human-auto")
        await game.human_reveal("second")
        await game.return_to_menu()
        await game.shutdown()

        # Sync usage
        game = WarGame(config={"round_interval": 0}, use_async=False)
        game.initialize_sync()
        final_state = game.play_to_completion_sync()
        game.shutdown_sync()
        ```
    """

    def __init__(
        self,
        adapter: Optional[PlatformAdapter] = None,
        config: Optional[Dict[str, Any]] = None,
        use_async: bool = True,
    ):
        """
        Initialize a new War card game.

        Args:
            adapter: Platform adapter to use for presentation.
                    If None, a CLI adapter will be used.
            config: Configuration options for the game
            use_async: Whether to use async mode
        """
        super().__init__(adapter, config, use_async)

        # Apply default War configuration
        default_config = {
            "round_interval": DEFAULT_ROUND_INTERVAL,
            "player_names": {},
            "seed": None,
        }

        if config:
            default_config.update(config)

        self.config = default_config

        # Engine will be initialized in initialize()
        self.engine: Optional[WarEngine] = None

        # Set when the live game concludes
        self._game_over = asyncio.Event()

    async def initialize(self) -> None:
        """
        Initialize the War game and prepare for play.

        This method creates and initializes the engine, and sets up event
        handlers for game flow control.
        """
        self.engine = WarEngine(self.adapter, self.config)
        await self.engine.initialize()

        self.on(EngineEventType.GAME_ENDED, self._on_game_ended)

    async def shutdown(self) -> None:
        """
        Shut down the War game and clean up resources.
        """
        self.remove_event_handlers()
        await self.engine.shutdown()

    async def get_state(self) -> Optional[GameState]:
        """
        Get the current game state, or None when no game is live.
        """
        return self.engine.state

    @property
    def phase(self) -> GameStage:
        return self.engine.phase

    async def select_mode(
        self,
        mode,
        decks: Optional[Tuple[Sequence[Card], Sequence[Card]]] = None,
    ) -> str:
        """
        Start a new game in the given mode.

        Args:
            mode: A GameMode or its value ("auto-auto", "human-auto", "human-human")
            decks: Optional pair of decks to use instead of a shuffled deal

        Returns:
            ID of the new game
        """
        self._game_over.clear()
        state = await self.engine.select_mode(mode, decks)
        return state.id

    async def human_reveal(self, slot) -> bool:
        """
        Reveal the next card for a human-controlled slot.

        Returns:
            True if the action was accepted, False if it was ignored
        """
        return await self.engine.human_reveal(slot)

    async def return_to_menu(self) -> None:
        """
        Abandon the current game and go back to mode selection.
        """
        await self.engine.return_to_menu()
        self._game_over.clear()

    async def wait_for_conclusion(self, timeout: Optional[float] = None) -> GameState:
        """
        Wait until the live game concludes.

        Args:
            timeout: Optional timeout in seconds

        Returns:
            The final game state

        Raises:
            asyncio.TimeoutError: If the timeout is reached
        """
        if timeout is None:
            await self._game_over.wait()
        else:
            await asyncio.wait_for(self._game_over.wait(), timeout)
        return self.engine.state

    async def play_to_completion(
        self,
        decks: Optional[Tuple[Sequence[Card], Sequence[Card]]] = None,
        timeout: Optional[float] = None,
    ) -> GameState:
        """
        Play a whole computer vs computer game and return its final state.

        Args:
            decks: Optional pair of decks to use instead of a shuffled deal
            timeout: Optional timeout in seconds

        Returns:
            The concluded game state
        """
        await self.select_mode(GameMode.AUTO_AUTO, decks)
        return await self.wait_for_conclusion(timeout)

    # Synchronous API wrappers

    def get_state_sync(self) -> Optional[GameState]:
        """
        Synchronous wrapper for get_state method.
        """
        return self._run_async(self.get_state())

    def select_mode_sync(self, mode, decks=None) -> str:
        """
        Synchronous wrapper for select_mode method.
        """
        return self._run_async(self.select_mode(mode, decks))

    def human_reveal_sync(self, slot) -> bool:
        """
        Synchronous wrapper for human_reveal method.
        """
        return self._run_async(self.human_reveal(slot))

    def return_to_menu_sync(self) -> None:
        """
        Synchronous wrapper for return_to_menu method.
        """
        return self._run_async(self.return_to_menu())

    def play_to_completion_sync(self, decks=None, timeout=None) -> GameState:
        """
        Synchronous wrapper for play_to_completion method.
        """
        return self._run_async(self.play_to_completion(decks, timeout))

    # Event handlers for flow control

    def _on_game_ended(self, data: Dict[str, Any]) -> None:
        """
        Release waiters when the live game ends.
        """
        state = self.engine.state
        if state is not None and data.get("game_id") == state.id:
            self._game_over.set()
