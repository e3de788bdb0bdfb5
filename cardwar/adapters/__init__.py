"""
Platform adapters for the cardwar engine.

This package provides adapters that translate between the core game engine
and the platforms presenting it (console, tests, simulations).
"""

from cardwar.adapters.base import PlatformAdapter
from cardwar.adapters.cli import CLIAdapter
from cardwar.adapters.dummy import DummyAdapter

__all__ = ["PlatformAdapter", "CLIAdapter", "DummyAdapter"]
