"""Runtime settings for hubs and registries.

This module provides:
1. Static configuration from YAML files (startup)
2. Environment helpers for logging and clone verification
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_LOG_LEVEL: str = "INFO"
CONFIG_ENV_VAR: str = "PATTERNHUB_CONFIG"

_TRUTHY = {"1", "true", "yes", "on"}


def log_level() -> str:
    return os.environ.get("PATTERNHUB_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def verify_clones_default() -> bool:
    return os.environ.get("PATTERNHUB_VERIFY_CLONES", "").strip().lower() in _TRUTHY


class HubConfig(BaseModel):
    """Notification hub behaviour."""

    notify_policy: str = Field(
        "always",
        description="Name of the ShouldNotify predicate (always, previous_is_zero, on_change)",
    )
    raise_on_failure: bool = Field(
        False,
        description="Raise NotificationError after a round in which any subscriber failed",
    )

    @field_validator("notify_policy")
    @classmethod
    def validate_notify_policy(cls, v: str) -> str:
        """Reject policy names the hub cannot resolve."""
        from ..core.hub.policies import POLICIES

        if v not in POLICIES:
            raise ValueError(f"notify_policy must be one of {sorted(POLICIES)}, got {v!r}")
        return v


class RegistryConfig(BaseModel):
    """Prototype registry behaviour."""

    verify_clones: bool = Field(
        default_factory=verify_clones_default,
        description="Check that every clone is equal to, but not the same object as, its template",
    )


class PatternHubConfig(BaseModel):
    """Top-level configuration."""

    hub: HubConfig = Field(default_factory=HubConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)

    @classmethod
    def load(cls, path: str | Path) -> "PatternHubConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Loaded PatternHubConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If YAML is empty or not a mapping
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not data or not isinstance(data, dict):
            raise ValueError(f"Empty or invalid YAML in {config_path}")

        return cls(**data)

    def save(self, path: str | Path) -> None:
        """Save configuration to YAML file."""
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump()


def load_config_from_env(env_var: str = CONFIG_ENV_VAR) -> PatternHubConfig:
    """Load configuration from the YAML path named by ``env_var``.

    Falls back to defaults when the variable is unset.
    """
    config_path = os.getenv(env_var)
    if not config_path:
        return PatternHubConfig()
    return PatternHubConfig.load(config_path)
