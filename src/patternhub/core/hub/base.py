"""Capability protocol for hub subscribers."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Observer(Protocol):
    def update(self) -> None:
        ...
