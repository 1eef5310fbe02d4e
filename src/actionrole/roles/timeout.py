"""Timeout role for action execution."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from pydantic import PositiveFloat

from ..core.context import Context
from ..core.role import ActionRole, Next
from ..errors import ActionTimeoutError

if TYPE_CHECKING:
    from ..core.action import Action


class Timeout(ActionRole):
    """Enforce an execution timeout.

    Wraps the rest of the chain in asyncio.wait_for. Raises
    ActionTimeoutError with TIMEOUT code if exceeded.

    Example:
        >>> class Reports(Controller):
        ...     config = {"action_args": {"build": {"timeout_seconds": 120.0}}}
        ...
        ...     @action(does="Timeout")
        ...     async def build(self, ctx): ...
    """

    timeout_seconds: PositiveFloat = 30.0

    async def around(self, next: Next, action: Action, controller: object, ctx: Context, *args: object) -> object:
        ctx["timeout_configured"] = self.timeout_seconds
        try:
            return await asyncio.wait_for(next(action, controller, ctx, *args), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            raise ActionTimeoutError.create(
                action.reverse, f"Action '{action.reverse}' timed out after {self.timeout_seconds}s",
            ) from None
