"""Delivery statistics for a notification hub."""
from __future__ import annotations

from dataclasses import dataclass, field
from threading import Lock
from typing import Dict


@dataclass
class HubCounters:
    rounds: int = 0
    suppressed: int = 0
    deliveries: int = 0
    failures: int = 0
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)

    def record_round(self, delivered: int, failed: int) -> None:
        with self.lock:
            self.rounds += 1
            self.deliveries += delivered
            self.failures += failed

    def record_suppressed(self) -> None:
        with self.lock:
            self.suppressed += 1

    def as_dict(self) -> Dict[str, int]:
        with self.lock:
            return {
                "rounds": self.rounds,
                "suppressed": self.suppressed,
                "deliveries": self.deliveries,
                "failures": self.failures,
            }
