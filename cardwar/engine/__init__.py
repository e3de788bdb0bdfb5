"""
Core engine for the cardwar package.

This package provides the game controller that powers War, implementing the
game flow in a platform-agnostic way.
"""

from cardwar.engine.base import CardwarEngine
from cardwar.engine.war import WarEngine

__all__ = ["CardwarEngine", "WarEngine"]
