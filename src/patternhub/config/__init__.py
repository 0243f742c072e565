"""Configuration models and environment helpers."""

from .settings import (
    HubConfig,
    PatternHubConfig,
    RegistryConfig,
    load_config_from_env,
)

__all__ = [
    "HubConfig",
    "PatternHubConfig",
    "RegistryConfig",
    "load_config_from_env",
]
