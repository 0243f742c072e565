"""Shared pytest fixtures used across the test suite."""

import sys
from pathlib import Path

import pytest


ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from patternhub.core.hub import NotificationHub
from patternhub.core.registry import Circle, PrototypeRegistry, Rectangle
from patternhub.shared import reset_default_registry


class Recorder:
    """Observer test double that logs the hub state it pulls on update."""

    def __init__(self, name, hub, log):
        self.name = name
        self.hub = hub
        self.log = log

    def update(self):
        self.log.append((self.name, self.hub.get_state()))


@pytest.fixture
def hub():
    """A hub starting at zero with the default always-notify policy."""
    return NotificationHub(0)


@pytest.fixture
def make_recorder():
    def _make(name, hub, log):
        return Recorder(name, hub, log)

    return _make


@pytest.fixture
def shapes():
    """A registry holding the two shapes from the clone walkthrough."""
    registry = PrototypeRegistry(verify_clones=True)
    registry.register("Large Circle", Circle(10))
    registry.register("Small Rectangle", Rectangle(5, 10))
    return registry


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep environment-driven settings and the shared registry out of other tests."""
    for name in ("PATTERNHUB_CONFIG", "PATTERNHUB_LOG_LEVEL", "PATTERNHUB_VERIFY_CLONES"):
        monkeypatch.delenv(name, raising=False)
    reset_default_registry()
    yield
    reset_default_registry()
