"""
Base API module for cardwar.

``CardwarGame`` is the shared shell of the high-level game APIs: it owns the
adapter and configuration, exposes the event bus through ``on``/``once``, and
lets plain scripts drive the async API through ``*_sync`` wrappers.
"""

import asyncio
import threading
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Union

from cardwar.adapters import PlatformAdapter, CLIAdapter
from cardwar.events import EventBus, EngineEventType, EventPriority


class CardwarGame(ABC):
    """
    Abstract base class for the platform-agnostic game APIs.

    Attributes:
        adapter: Platform adapter used for presentation
        engine: Engine created by the concrete game in ``initialize``
        config: Game configuration options
        event_bus: Shared event bus
        event_handlers: Unsubscribe functions of the handlers registered here
    """

    def __init__(
        self,
        adapter: Optional[PlatformAdapter] = None,
        config: Optional[Dict[str, Any]] = None,
        use_async: bool = True,
    ):
        """
        Args:
            adapter: Platform adapter to use. Defaults to a console adapter.
            config: Configuration options for the game
            use_async: Whether the caller drives the game from async code
        """
        self.adapter = adapter or CLIAdapter()
        self.config = config or {}
        self.event_bus = EventBus.get_instance()
        self.event_handlers: Dict[Any, list] = {}
        self.engine = None
        self._is_async_mode = use_async

        # Private loop shared by every *_sync call
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_lock = threading.Lock()

    @abstractmethod
    async def initialize(self) -> None:
        """Create the engine and get ready to play."""

    @abstractmethod
    async def shutdown(self) -> None:
        """Discard any live game and release the adapter."""

    def on(
        self,
        event_type: Union[str, EngineEventType],
        handler: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Listen to an engine event. The handler is removed on shutdown.

        Args:
            event_type: EngineEventType member or its name, in any case
            handler: Called with the event data
            priority: Order relative to other handlers of the same event

        Returns:
            Function that removes the handler
        """
        return self._track(event_type, self.event_bus.on, handler, priority)

    def once(
        self,
        event_type: Union[str, EngineEventType],
        handler: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """Listen to the next occurrence of an engine event only."""
        return self._track(event_type, self.event_bus.once, handler, priority)

    def remove_event_handlers(self) -> None:
        """Unsubscribe every handler registered through this game."""
        for unsubscribers in self.event_handlers.values():
            for unsubscribe in unsubscribers:
                unsubscribe()
        self.event_handlers.clear()

    def _track(self, event_type, subscribe, handler, priority) -> Callable:
        if isinstance(event_type, str):
            event_type = EngineEventType.__members__.get(event_type.upper(), event_type)
        unsubscribe = subscribe(event_type, handler, priority)
        self.event_handlers.setdefault(event_type, []).append(unsubscribe)
        return unsubscribe

    # Synchronous API wrappers

    def initialize_sync(self) -> None:
        return self._run_async(self.initialize())

    def shutdown_sync(self) -> None:
        return self._run_async(self.shutdown())

    def _run_async(self, coro):
        """
        Run a coroutine to completion on the private loop.

        The loop is kept between calls so a running round timer survives from
        one synchronous call to the next.

        Raises:
            RuntimeError: If called while an event loop is already running
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            pass
        else:
            coro.close()
            raise RuntimeError(
                "Synchronous methods cannot run inside an event loop; "
                "await the async version instead."
            )

        with self._loop_lock:
            if self._loop is None or self._loop.is_closed():
                self._loop = asyncio.new_event_loop()
                asyncio.set_event_loop(self._loop)
            return self._loop.run_until_complete(coro)
