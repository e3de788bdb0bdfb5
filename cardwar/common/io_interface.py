"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod

import aiofiles


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for text input/output used by the console
    adapter and the command line.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    async def output_async(self, message: str) -> None:
        """Async version of output; runs the synchronous one by default."""
        self.output(message)

    async def input_async(self, prompt: str) -> str:
        """Read input without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self.input, prompt)


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""


class TestIOInterface(IOInterface):
    """
    A test IO interface for testing purposes. Collects output messages and
    replays queued input responses.
    """

    __test__ = False

    def __init__(self, input_responses=None):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = list(input_responses or [])

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more input responses queued")

    async def input_async(self, prompt: str) -> str:
        return self.input(prompt)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Output is appended to the file; input is not supported and returns an
    empty string after recording the prompt.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    async def output_async(self, message: str) -> None:
        """Append a message to the log file without blocking the loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
