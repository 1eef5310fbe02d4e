"""Standardized error handling for role resolution and dispatch.

Provides error codes and structured errors. Resolution and load failures
are raised while the application is being set up, never per request.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Self

from pydantic import BaseModel


class ErrorCode(StrEnum):
    """Standard error codes for role and dispatch failures."""
    ROLE_NOT_FOUND = "ROLE_NOT_FOUND"
    ROLE_INVALID = "ROLE_INVALID"
    ACTION_NOT_FOUND = "ACTION_NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    TIMEOUT = "TIMEOUT"
    INVALID_CONFIG = "INVALID_CONFIG"


class RoleError(BaseModel):
    """Structured error describing what failed and which names were tried."""

    model_config = {"frozen": True}

    subject: str
    message: str
    code: ErrorCode = ErrorCode.ROLE_NOT_FOUND
    candidates: tuple[str, ...] = ()

    @classmethod
    def create(
        cls,
        subject: str,
        message: str,
        code: ErrorCode = ErrorCode.ROLE_NOT_FOUND,
        *,
        candidates: tuple[str, ...] | list[str] = (),
    ) -> Self:
        """Factory method for construction."""
        return cls(subject=subject, message=message, code=code, candidates=tuple(candidates))

    def render(self) -> str:
        parts = [f"{self.message} [{self.code}]"]
        if self.candidates:
            parts.append(f" (tried: {', '.join(self.candidates)})")
        return "".join(parts)

    __str__ = render


class ActionRoleException(Exception):
    """Exception wrapping a RoleError for raising."""

    __slots__ = ("error",)

    default_code: ErrorCode = ErrorCode.ROLE_NOT_FOUND

    def __init__(self, error: RoleError) -> None:
        self.error = error
        super().__init__(error.render())

    @classmethod
    def create(
        cls,
        subject: str,
        message: str,
        code: ErrorCode | None = None,
        *,
        candidates: tuple[str, ...] | list[str] = (),
    ) -> Self:
        return cls(RoleError.create(subject, message, code or cls.default_code, candidates=candidates))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    @property
    def subject(self) -> str:
        return self.error.subject

    @property
    def candidates(self) -> tuple[str, ...]:
        return self.error.candidates


class RoleResolutionError(ActionRoleException):
    """A role name did not resolve to any loadable candidate."""


class RoleLoadError(ActionRoleException):
    """A resolved role identifier could not be loaded or is not a role."""


class ActionNotFoundError(ActionRoleException):
    default_code = ErrorCode.ACTION_NOT_FOUND


class MethodNotAllowedError(ActionRoleException):
    default_code = ErrorCode.METHOD_NOT_ALLOWED


class ActionTimeoutError(ActionRoleException):
    default_code = ErrorCode.TIMEOUT
