"""Process-wide default registry with explicit init-once and teardown."""
from __future__ import annotations

import threading
from typing import Optional

from .config.settings import load_config_from_env
from .core.registry.registry import PrototypeRegistry

_lock = threading.Lock()
_registry: Optional[PrototypeRegistry] = None


def get_default_registry() -> PrototypeRegistry:
    global _registry
    if _registry is None:
        with _lock:
            if _registry is None:
                _registry = PrototypeRegistry.from_config(load_config_from_env().registry)
    return _registry


def reset_default_registry() -> None:
    global _registry
    with _lock:
        _registry = None
