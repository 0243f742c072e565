"""Core domain modules: the notification hub and the prototype registry."""

from .hub import NotificationHub
from .registry import PrototypeRegistry

__all__ = ["NotificationHub", "PrototypeRegistry"]
