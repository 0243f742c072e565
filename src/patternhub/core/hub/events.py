"""Records produced by subscriptions and notification rounds."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class SubscriptionToken:
    """Identifies one subscription; equal handles still get distinct tokens."""

    id: int


@dataclass(frozen=True)
class DeliveryFailure:
    token: SubscriptionToken
    handle: Any
    error: BaseException


class NotificationError(Exception):
    """Raised after a round in which one or more subscribers failed."""

    def __init__(self, failures: List[DeliveryFailure]) -> None:
        self.failures = list(failures)
        detail = "; ".join(f"subscription {f.token.id}: {f.error!r}" for f in self.failures)
        super().__init__(f"{len(self.failures)} subscriber(s) failed: {detail}")


@dataclass
class DeliveryReport:
    """Outcome of a single ``set_state`` call."""

    notified: bool = False
    attempted: int = 0
    failures: List[DeliveryFailure] = field(default_factory=list)

    @property
    def delivered(self) -> int:
        return self.attempted - len(self.failures)

    @property
    def ok(self) -> bool:
        return not self.failures

    def raise_for_failures(self) -> None:
        if self.failures:
            raise NotificationError(self.failures)
