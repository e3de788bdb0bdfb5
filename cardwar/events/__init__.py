"""
Event system for the cardwar engine.

This package provides the event bus that serves as the foundation for the
event-driven architecture.
"""

from cardwar.events.emitter import (
    EventEmitter,
    EventBus,
    EventPriority,
    EngineEventType,
)

__all__ = ["EventEmitter", "EventBus", "EventPriority", "EngineEventType"]
