"""Keyed store of templates that hands out independent clones."""
from __future__ import annotations

import logging
import threading
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

from ...config.settings import RegistryConfig, verify_clones_default
from .base import CloneError, Prototype
from .prototypes import Circle, Rectangle

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Prototype)


class PrototypeRegistry(Generic[T]):
    """Register templates by key and receive a fresh copy on every lookup.

    Lookups never return the stored template itself. With
    ``verify_clones`` enabled every clone is also checked to be a distinct
    object of the same type that compares equal to its template. When not
    given, it follows ``PATTERNHUB_VERIFY_CLONES``.
    """

    def __init__(self, *, verify_clones: Optional[bool] = None) -> None:
        self._templates: Dict[str, T] = {}
        self._lock = threading.Lock()
        self.verify_clones = verify_clones_default() if verify_clones is None else verify_clones

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "PrototypeRegistry[T]":
        return cls(verify_clones=config.verify_clones)

    def register(self, key: str, template: T) -> None:
        if not callable(getattr(template, "clone", None)):
            raise TypeError(f"Template {template!r} registered under {key!r} has no clone() method")
        with self._lock:
            replaced = key in self._templates
            self._templates[key] = template
        logger.debug("%s template %r", "Replaced" if replaced else "Registered", key)

    def get(self, key: str) -> Tuple[Optional[T], bool]:
        with self._lock:
            template = self._templates.get(key)
        if template is None:
            logger.debug("No template registered under %r", key)
            return None, False

        # Templates are never mutated here, so cloning can happen unlocked.
        clone = template.clone()
        if self.verify_clones:
            _check_clone(key, template, clone)
        return clone, True

    def remove(self, key: str) -> bool:
        with self._lock:
            removed = self._templates.pop(key, None) is not None
        if removed:
            logger.debug("Removed template %r", key)
        return removed

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._templates

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._templates)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._templates)


def _check_clone(key: str, template: Prototype, clone: object) -> None:
    if clone is template:
        raise CloneError(f"clone() of {key!r} returned the template itself")
    if type(clone) is not type(template):
        raise CloneError(
            f"clone() of {key!r} returned {type(clone).__name__}, expected {type(template).__name__}"
        )
    if type(template).__eq__ is not object.__eq__ and clone != template:
        raise CloneError(f"clone() of {key!r} is not equal to its template")


def default_shape_registry() -> PrototypeRegistry:
    registry: PrototypeRegistry = PrototypeRegistry()
    registry.register("Large Circle", Circle(10))
    registry.register("Small Rectangle", Rectangle(5, 10))
    return registry
