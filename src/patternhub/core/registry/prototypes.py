"""Concrete templates usable with ``PrototypeRegistry``."""
from __future__ import annotations

import copy
from dataclasses import dataclass


class DeepCopyPrototype:
    """Mixin for templates with nested mutable state; clones share nothing."""

    def clone(self):
        return copy.deepcopy(self)


@dataclass
class Circle:
    radius: int

    def clone(self) -> "Circle":
        return Circle(self.radius)

    def __str__(self) -> str:
        return f"Circle with radius: {self.radius}"


@dataclass
class Rectangle:
    width: int
    height: int

    def clone(self) -> "Rectangle":
        return Rectangle(self.width, self.height)

    def __str__(self) -> str:
        return f"Rectangle with width: {self.width} and height: {self.height}"
