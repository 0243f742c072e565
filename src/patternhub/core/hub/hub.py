"""Thread-safe subject that fans state changes out to its subscribers."""
from __future__ import annotations

import itertools
import logging
import threading
from typing import Any, Callable, Generic, List, NamedTuple, Optional, TypeVar

from ...config.settings import HubConfig
from .base import Observer
from .events import DeliveryFailure, DeliveryReport, SubscriptionToken
from .policies import ShouldNotify, always_notify, resolve_policy
from .state import HubCounters

logger = logging.getLogger(__name__)

V = TypeVar("V")


class _Subscription(NamedTuple):
    token: SubscriptionToken
    handle: Any
    callback: Callable[..., Any]
    push: bool


def _callback_for(handle: Any) -> Callable[..., Any]:
    if isinstance(handle, type):
        raise TypeError(f"Subscriber {handle!r} is a class; subscribe an instance or a function")
    if isinstance(handle, Observer) and callable(handle.update):
        return handle.update
    if callable(handle):
        return handle
    raise TypeError(f"Subscriber {handle!r} is neither callable nor exposes update()")


class NotificationHub(Generic[V]):
    """Owns an observable value and notifies subscribers when it is set.

    Subscribers are pulled by default: they are invoked with no arguments
    and read the value back through ``get_state()``. Subscribing with
    ``push=True`` passes the new value instead.

    Each ``set_state`` delivers to the subscriptions present when it took
    its snapshot, in subscription order. Callbacks run without the hub lock
    held, so membership changes made meanwhile apply from the next round.
    """

    def __init__(
        self,
        initial_state: Optional[V] = None,
        should_notify: Optional[ShouldNotify] = None,
        *,
        raise_on_failure: bool = False,
    ) -> None:
        self._state = initial_state
        self._should_notify = should_notify or always_notify
        self._raise_on_failure = raise_on_failure
        self._subscriptions: List[_Subscription] = []
        self._ids = itertools.count(1)
        self._lock = threading.Lock()
        self.counters = HubCounters()

    @classmethod
    def from_config(cls, config: HubConfig, initial_state: Optional[V] = None) -> "NotificationHub[V]":
        return cls(
            initial_state,
            resolve_policy(config.notify_policy),
            raise_on_failure=config.raise_on_failure,
        )

    def subscribe(self, handle: Any, *, push: bool = False) -> SubscriptionToken:
        """Add ``handle`` to the end of the delivery order.

        Objects with a callable ``update()`` are notified through it, even
        when they are callable themselves. Classes are rejected.
        """
        callback = _callback_for(handle)
        with self._lock:
            token = SubscriptionToken(next(self._ids))
            self._subscriptions.append(_Subscription(token, handle, callback, push))
        logger.debug("Subscribed %r as subscription %s", handle, token.id)
        return token

    def unsubscribe(self, token: SubscriptionToken) -> bool:
        with self._lock:
            remaining = [sub for sub in self._subscriptions if sub.token != token]
            removed = len(remaining) != len(self._subscriptions)
            self._subscriptions = remaining
        if removed:
            logger.debug("Unsubscribed subscription %s", token.id)
        return removed

    def get_state(self) -> Optional[V]:
        with self._lock:
            return self._state

    def set_state(self, value: V) -> DeliveryReport:
        with self._lock:
            previous = self._state
            notify = self._should_notify(previous, value)
            self._state = value
            snapshot = list(self._subscriptions) if notify else []

        report = DeliveryReport(notified=notify)
        if not notify:
            self.counters.record_suppressed()
            logger.debug("Notification suppressed for %r -> %r", previous, value)
            return report

        for sub in snapshot:
            report.attempted += 1
            try:
                if sub.push:
                    sub.callback(value)
                else:
                    sub.callback()
            except Exception as exc:
                logger.warning(
                    "Subscriber %r failed during notification: %s",
                    sub.handle,
                    exc,
                    exc_info=True,
                    extra={"subscription_id": sub.token.id},
                )
                report.failures.append(DeliveryFailure(sub.token, sub.handle, exc))

        self.counters.record_round(report.delivered, len(report.failures))
        if self._raise_on_failure:
            report.raise_for_failures()
        return report

    def subscription_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def __len__(self) -> int:
        return self.subscription_count()

    def stats(self) -> dict[str, int]:
        return self.counters.as_dict()
