"""Real-time notification delivery adapters."""

from .broker import InProcessNotificationBroker

__all__ = ["InProcessNotificationBroker"]
