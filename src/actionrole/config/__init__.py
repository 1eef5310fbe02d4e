"""Configuration management using pydantic-settings."""

from .settings import (
    DEFAULT_RESERVED_ACTIONS,
    DEFAULT_ROLE_PREFIXES,
    ActionRoleSettings,
    LoggingSettings,
    ResolverSettings,
    clear_settings_cache,
    configure_logging,
    get_settings,
)

__all__ = [
    "DEFAULT_RESERVED_ACTIONS",
    "DEFAULT_ROLE_PREFIXES",
    "ActionRoleSettings",
    "LoggingSettings",
    "ResolverSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
]
