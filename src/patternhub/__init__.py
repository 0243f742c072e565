"""patternhub package initialization."""
from __future__ import annotations

__version__ = "0.1.0"

from .config.settings import PatternHubConfig, load_config_from_env
from .core.hub import (
    DeliveryFailure,
    DeliveryReport,
    NotificationError,
    NotificationHub,
    SubscriptionToken,
)
from .core.registry import CloneError, PrototypeRegistry
from .logging import configure_logging
from .shared import get_default_registry, reset_default_registry

__all__ = [
    "CloneError",
    "DeliveryFailure",
    "DeliveryReport",
    "NotificationError",
    "NotificationHub",
    "PatternHubConfig",
    "PrototypeRegistry",
    "SubscriptionToken",
    "configure_logging",
    "get_default_registry",
    "load_config_from_env",
    "reset_default_registry",
]
