"""
API module for cardwar.

This module provides high-level, platform-agnostic APIs for working with the
cardwar engine, supporting both synchronous and asynchronous operation.
"""

from cardwar.api.base import CardwarGame
from cardwar.api.war import WarGame

__all__ = ["CardwarGame", "WarGame"]
