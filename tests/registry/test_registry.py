"""Behavioral tests for PrototypeRegistry lookups and clone independence."""

import threading

import pytest

from patternhub.config.settings import RegistryConfig
from patternhub.core.registry import (
    Circle,
    CloneError,
    PrototypeRegistry,
    Rectangle,
    default_shape_registry,
)


def test_clones_are_independent_of_template_and_each_other(shapes):
    """Mutating one clone leaves the other clone and the template at radius 10."""
    first, found_first = shapes.get("Large Circle")
    second, found_second = shapes.get("Large Circle")
    assert found_first and found_second

    assert first == second
    assert first is not second

    first.radius = 15

    assert second.radius == 10
    template, _ = shapes.get("Large Circle")
    assert template.radius == 10


def test_get_unknown_key_reports_not_found():
    """Missing keys return the found flag instead of a default clone."""
    calls = []

    class Tracking:
        def clone(self):
            calls.append("clone")
            return Tracking()

    registry = PrototypeRegistry()
    registry.register("known", Tracking())

    value, found = registry.get("missing")
    assert value is None
    assert found is False
    assert calls == []


def test_register_same_key_overwrites(shapes):
    """Re-registering a key replaces the template; last write wins."""
    shapes.register("Large Circle", Circle(20))
    clone, found = shapes.get("Large Circle")
    assert found
    assert clone.radius == 20
    assert len(shapes) == 2


def test_remove_and_has(shapes):
    """Remove reports whether a key existed and never raises."""
    assert shapes.has("Small Rectangle")
    assert "Small Rectangle" in shapes
    assert shapes.remove("Small Rectangle") is True
    assert shapes.remove("Small Rectangle") is False
    assert not shapes.has("Small Rectangle")
    assert shapes.get("Small Rectangle") == (None, False)
    assert shapes.keys() == ["Large Circle"]


def test_register_rejects_templates_without_clone():
    """A template must expose a callable clone()."""
    registry = PrototypeRegistry()
    with pytest.raises(TypeError):
        registry.register("plain", object())


def test_verify_clones_detects_aliasing_clone():
    """An identity-returning clone is flagged when verification is on."""

    class Aliasing:
        def clone(self):
            return self

    registry = PrototypeRegistry(verify_clones=True)
    registry.register("alias", Aliasing())
    with pytest.raises(CloneError, match="template itself"):
        registry.get("alias")

    lenient = PrototypeRegistry()
    lenient.register("alias", Aliasing())
    value, found = lenient.get("alias")
    assert found and value is not None


def test_verify_clones_detects_diverging_clone():
    """A clone that does not equal its template is flagged."""

    class Drifting(Rectangle):
        def clone(self):
            return Drifting(self.width + 1, self.height)

    registry = PrototypeRegistry(verify_clones=True)
    registry.register("drift", Drifting(1, 1))
    with pytest.raises(CloneError, match="not equal"):
        registry.get("drift")


def test_from_config_enables_verification():
    """Registry configuration toggles clone verification."""
    registry = PrototypeRegistry.from_config(RegistryConfig(verify_clones=True))
    assert registry.verify_clones is True


def test_default_shape_registry_contents():
    """The stock registry carries the two shapes from the walkthrough."""
    registry = default_shape_registry()
    circle, _ = registry.get("Large Circle")
    rectangle, _ = registry.get("Small Rectangle")
    assert str(circle) == "Circle with radius: 10"
    assert str(rectangle) == "Rectangle with width: 5 and height: 10"


def test_concurrent_register_and_get():
    """Lookups from many threads always see a complete template."""
    registry = PrototypeRegistry()
    registry.register("shape", Circle(1))
    errors = []

    def writer():
        for radius in range(200):
            registry.register("shape", Circle(radius))

    def reader():
        for _ in range(200):
            clone, found = registry.get("shape")
            if not found or not isinstance(clone, Circle):
                errors.append(clone)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert errors == []
    assert registry.get("shape")[0] == Circle(199)


def test_plain_constructor_follows_environment(monkeypatch):
    """Without an explicit flag the registry reads the verification variable."""
    assert PrototypeRegistry().verify_clones is False

    monkeypatch.setenv("PATTERNHUB_VERIFY_CLONES", "true")
    assert PrototypeRegistry().verify_clones is True
    assert PrototypeRegistry(verify_clones=False).verify_clones is False
