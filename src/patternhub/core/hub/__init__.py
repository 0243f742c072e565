"""Subject/observer notification hub."""

from .base import Observer
from .events import DeliveryFailure, DeliveryReport, NotificationError, SubscriptionToken
from .hub import NotificationHub
from .policies import (
    POLICIES,
    always_notify,
    notify_on_change,
    notify_when_previous_is_zero,
    resolve_policy,
)

__all__ = [
    "DeliveryFailure",
    "DeliveryReport",
    "NotificationError",
    "NotificationHub",
    "Observer",
    "POLICIES",
    "SubscriptionToken",
    "always_notify",
    "notify_on_change",
    "notify_when_previous_is_zero",
    "resolve_policy",
]
