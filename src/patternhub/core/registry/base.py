"""Capability protocol for registry templates."""
from __future__ import annotations

from typing import Protocol, TypeVar, runtime_checkable

P = TypeVar("P", bound="Prototype")


@runtime_checkable
class Prototype(Protocol):
    def clone(self: P) -> P:
        ...


class CloneError(TypeError):
    """A template's clone() aliased or diverged from the template."""
