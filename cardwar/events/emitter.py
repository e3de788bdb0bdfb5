"""
Event system for the cardwar engine.

Game transitions publish what happens at the table (cards revealed, rounds
resolved, narration, game end) on a shared bus. The engine forwards those
events to its platform adapter, and API users can listen to them directly.
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

logger = logging.getLogger("cardwar.events")


class EventPriority(Enum):
    """Order in which handlers of the same event run, highest first."""

    LOW = 0
    NORMAL = 1
    HIGH = 2
    CRITICAL = 3


def _event_name(event_type: Union[str, Enum]) -> str:
    return event_type.name if isinstance(event_type, Enum) else event_type


class EventEmitter:
    """
    Publish/subscribe hub keyed by event name.

    Handlers registered with ``on`` receive the event data; handlers registered
    with ``on_any`` receive an ``(event_name, data)`` pair for every event.
    A handler that raises is logged and skipped.
    """

    def __init__(self):
        # event name (None for catch-all handlers) -> [(priority, callback)]
        self._handlers: Dict[Optional[str], List[tuple]] = {}

    def _subscribe(
        self, key: Optional[str], callback: Callable, priority: EventPriority
    ) -> Callable:
        handlers = self._handlers.setdefault(key, [])
        position = len(handlers)
        for index, (existing, _) in enumerate(handlers):
            if existing < priority.value:
                position = index
                break
        entry = (priority.value, callback)
        handlers.insert(position, entry)

        def unsubscribe():
            if entry in handlers:
                handlers.remove(entry)

        return unsubscribe

    def on(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """
        Call ``callback(data)`` whenever ``event_type`` is emitted.

        Returns:
            A function that removes the subscription
        """
        return self._subscribe(_event_name(event_type), callback, priority)

    def once(
        self,
        event_type: Union[str, Enum],
        callback: Callable,
        priority: EventPriority = EventPriority.NORMAL,
    ) -> Callable:
        """Like ``on``, but the handler is removed after its first call."""

        def handle_once(data):
            unsubscribe()
            callback(data)

        unsubscribe = self.on(event_type, handle_once, priority)
        return unsubscribe

    def on_any(
        self, callback: Callable, priority: EventPriority = EventPriority.NORMAL
    ) -> Callable:
        """Call ``callback((event_name, data))`` for every emitted event."""
        return self._subscribe(None, callback, priority)

    def emit(self, event_type: Union[str, Enum], data: Dict[str, Any]) -> None:
        """
        Deliver an event to its handlers, then to the catch-all handlers.

        Args:
            event_type: Event name or EngineEventType member
            data: Payload passed to the handlers
        """
        name = _event_name(event_type)
        calls = [(callback, data) for _, callback in self._handlers.get(name, [])]
        calls += [(callback, (name, data)) for _, callback in self._handlers.get(None, [])]

        for callback, payload in calls:
            try:
                callback(payload)
            except Exception as e:
                logger.error(f"Error in event handler for {name}: {e}", exc_info=True)


class EventBus:
    """Holder of the process-wide EventEmitter."""

    _instance = None

    @classmethod
    def get_instance(cls) -> EventEmitter:
        if cls._instance is None:
            cls._instance = EventEmitter()
        return cls._instance


class EngineEventType(Enum):
    """Events published by the cardwar engine."""

    # Engine lifecycle
    ENGINE_INIT = "engine_init"
    ENGINE_SHUTDOWN = "engine_shutdown"

    # Game lifecycle
    GAME_CREATED = "game_created"
    GAME_STARTED = "game_started"
    GAME_ENDED = "game_ended"
    GAME_ABANDONED = "game_abandoned"
    ROUND_ENDED = "round_ended"

    # Table events
    CARD_REVEALED = "card_revealed"
    PLAYER_ACTION = "player_action"

    # Narration
    LOG_MESSAGE = "log_message"
