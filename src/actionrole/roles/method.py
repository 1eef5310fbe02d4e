"""Request method restriction role."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import field_validator

from ..core.context import Context
from ..core.role import ActionRole, Next
from ..errors import MethodNotAllowedError

if TYPE_CHECKING:
    from ..core.action import Action


class RequireMethod(ActionRole):
    """Only run the action for the allowed request methods."""

    allowed_methods: frozenset[str] = frozenset({"GET"})

    @field_validator("allowed_methods", mode="before")
    @classmethod
    def _upper(cls, v: object) -> object:
        if isinstance(v, str):
            v = [v]
        return frozenset(m.upper() for m in v) if isinstance(v, (list, tuple, set, frozenset)) else v

    async def around(self, next: Next, action: Action, controller: object, ctx: Context, *args: object) -> object:
        if ctx.method not in self.allowed_methods:
            raise MethodNotAllowedError.create(
                action.reverse,
                f"{ctx.method} not allowed for '{action.reverse}' (allowed: {', '.join(sorted(self.allowed_methods))})",
            )
        return await next(action, controller, ctx, *args)
