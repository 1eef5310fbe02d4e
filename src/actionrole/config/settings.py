"""Environment-based configuration using pydantic-settings.

Example:
    >>> from actionrole.config import get_settings
    >>> settings = get_settings()
    >>> settings.resolver.role_prefixes
    ['actionrole.roles.']
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # ACTIONROLE_RESOLVER_ROLE_PREFIXES='["myroles.", "actionrole.roles."]'
    # ACTIONROLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROLE_PREFIXES: tuple[str, ...] = ("actionrole.roles.",)
DEFAULT_RESERVED_ACTIONS: tuple[str, ...] = ("begin", "auto", "end")


class ResolverSettings(BaseSettings):
    """Role name resolution configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIONROLE_RESOLVER_",
        extra="ignore",
    )

    role_prefixes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ROLE_PREFIXES),
        description="Fallback prefixes searched after the application's own role namespace",
    )
    app_role_namespace: str = Field(
        default="action_role",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Module under the application package that holds its roles",
    )

    @field_validator("role_prefixes")
    @classmethod
    def _dotted(cls, v: list[str]) -> list[str]:
        """Prefixes are joined to names verbatim, so each must end with a dot."""
        return [p if p.endswith(".") else f"{p}." for p in v]


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIONROLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ActionRoleSettings(BaseSettings):
    """Root settings.

    Example environment variables:
        ACTIONROLE_DEBUG=true
        ACTIONROLE_LOG_LEVEL=DEBUG
        ACTIONROLE_RESOLVER_APP_ROLE_NAMESPACE=roles
    """

    model_config = SettingsConfigDict(
        env_prefix="ACTIONROLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")
    reserved_actions: frozenset[str] = Field(
        default_factory=lambda: frozenset(DEFAULT_RESERVED_ACTIONS),
        description="Lifecycle actions that never get roles applied",
    )

    resolver: ResolverSettings = Field(default_factory=ResolverSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> ActionRoleSettings:
    """Get the global settings instance (cached)."""
    return ActionRoleSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()


_handler: logging.Handler | None = None


def configure_logging(settings: ActionRoleSettings | None = None) -> logging.Logger:
    """Apply logging settings to the ``actionrole`` logger tree.

    Attaches a single stream handler no matter how often it is called.
    """
    global _handler
    settings = settings or get_settings()
    log = logging.getLogger("actionrole")
    log.setLevel("DEBUG" if settings.debug else settings.logging.level)
    if _handler is None:
        _handler = logging.StreamHandler()
        log.addHandler(_handler)
    _handler.setFormatter(logging.Formatter(settings.logging.format))
    return log
