"""
Command-line interface adapter for the cardwar engine.

This module provides an adapter for console-based play: narration is printed
with a timestamp, the scoreboard is shown whenever a new round starts, and the
narration can be mirrored to a transcript file.
"""

import time
from typing import Dict, Any, Optional, Tuple, Union
from enum import Enum

from cardwar.adapters.base import PlatformAdapter
from cardwar.common.io_interface import (
    ConsoleIOInterface,
    IOInterface,
    LoggingIOInterface,
)


class CLIAdapter(PlatformAdapter):
    """
    Command-line interface adapter for the cardwar engine.

    This adapter uses the standard console for output, providing a simple
    text-based view of the table.
    """

    def __init__(
        self,
        io_interface: Optional[IOInterface] = None,
        transcript: Optional[LoggingIOInterface] = None,
        show_timestamps: bool = True,
    ):
        """
        Initialize the CLI adapter.

        Args:
            io_interface: Optional IOInterface to use for I/O. If None, a
                          console IOInterface is used.
            transcript: Optional IO interface that receives a copy of every
                        narration line
            show_timestamps: Whether to prefix narration with the wall clock time
        """
        self.io_interface = io_interface or ConsoleIOInterface()
        self.transcript = transcript
        self.show_timestamps = show_timestamps
        self._last_shown: Optional[Tuple[Any, bool]] = None

    async def render_game_state(self, state: Dict[str, Any]) -> None:
        """
        Render the scoreboard when the round number changes or the game ends.

        Args:
            state: The current game state
        """
        round_number = state.get("round")
        shown = (round_number, bool(state.get("finished")))
        if shown == self._last_shown:
            return
        self._last_shown = shown

        players = state.get("players", [])
        scores = " | ".join(f"{p.get('name')}: {p.get('score')}" for p in players)
        if state.get("finished"):
            self.io_interface.output(f"=== {state.get('title')} - final: {scores} ===")
        else:
            self.io_interface.output(f"=== Round {round_number} - {scores} ===")

    async def notify_game_event(
        self, event_type: Union[str, Enum], data: Dict[str, Any]
    ) -> None:
        """
        Print narration lines and mirror them to the transcript.

        Args:
            event_type: The type of event that occurred
            data: Data associated with the event
        """
        if isinstance(event_type, Enum):
            event_type = event_type.name

        # The next game starts with a fresh scoreboard
        if event_type == "GAME_ABANDONED":
            self._last_shown = None

        message = self._format_event_message(event_type, data)
        if message is None:
            return

        self.io_interface.output(message)
        if self.transcript is not None:
            await self.transcript.output_async(message)

    def _format_event_message(
        self, event_type: str, data: Dict[str, Any]
    ) -> Optional[str]:
        """
        Format an event message based on the event type.

        Returns:
            Formatted message string or None if no message needed
        """
        if event_type == "LOG_MESSAGE":
            message = data.get("message", "")
            if self.show_timestamps:
                stamp = time.strftime(
                    "%H:%M:%S", time.localtime(data.get("timestamp", time.time()))
                )
                return f"[{stamp}] {message}"
            return message

        if event_type == "GAME_ABANDONED":
            return "Returned to the menu."

        return None
