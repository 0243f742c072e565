"""Predicates deciding whether a state change starts a notification round."""
from __future__ import annotations

from typing import Any, Callable, Dict

ShouldNotify = Callable[[Any, Any], bool]


def always_notify(old: Any, new: Any) -> bool:
    return True


def notify_when_previous_is_zero(old: Any, new: Any) -> bool:
    """Fire only on the transition away from the zero sentinel.

    Once the state holds a non-zero value, later changes stay silent until
    something sets it back to zero.
    """
    return old is None or old == 0


def notify_on_change(old: Any, new: Any) -> bool:
    return old != new


POLICIES: Dict[str, ShouldNotify] = {
    "always": always_notify,
    "previous_is_zero": notify_when_previous_is_zero,
    "on_change": notify_on_change,
}


def resolve_policy(name: str) -> ShouldNotify:
    try:
        return POLICIES[name]
    except KeyError:
        raise ValueError(f"Unknown notify policy {name!r}; expected one of {sorted(POLICIES)}") from None
