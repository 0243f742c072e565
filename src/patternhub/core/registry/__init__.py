"""Prototype registry and sample templates."""

from .base import CloneError, Prototype
from .prototypes import Circle, DeepCopyPrototype, Rectangle
from .registry import PrototypeRegistry, default_shape_registry

__all__ = [
    "Circle",
    "CloneError",
    "DeepCopyPrototype",
    "Prototype",
    "PrototypeRegistry",
    "Rectangle",
    "default_shape_registry",
]
