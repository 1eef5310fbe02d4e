"""Action roles and around-chain composition.

Roles follow continuation-passing style: each role receives a `next`
function, the action, the controller, the request context and any extra
arguments. It may inspect or change things before delegating and look at
the result afterwards.
"""

from __future__ import annotations

from collections.abc import Awaitable, Sequence
from typing import TYPE_CHECKING, Any, Callable

from pydantic import BaseModel, ConfigDict

from .context import Context

if TYPE_CHECKING:
    from .action import Action

# Continuation: (action, controller, ctx, *args) -> result
Next = Callable[..., Awaitable[Any]]


class ActionRole(BaseModel):
    """Base class for composable action behaviors.

    Subclasses override `around`. Fields declared on a role are filled from
    the action args; args the role does not declare are ignored, so one
    args mapping can configure every role applied to an action.

    Every subclass registers itself under ``<module>.<QualName>`` in the
    global role registry when it is defined.

    Example:
        >>> class Boo(ActionRole):
        ...     boo: str = "wrong"
        ...
        ...     async def around(self, next, action, controller, ctx, *args):
        ...         ctx["action_boo"] = self.boo
        ...         return await next(action, controller, ctx, *args)
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        from ..registry import get_role_registry

        get_role_registry().register(cls, replace=True)

    @classmethod
    def role_name(cls) -> str:
        return f"{cls.__module__}.{cls.__qualname__}"

    async def around(
        self,
        next: Next,
        action: Action,
        controller: object,
        ctx: Context,
        *args: object,
    ) -> object:
        """Wrap the next layer. The default just delegates."""
        return await next(action, controller, ctx, *args)


def compose_roles(roles: Sequence[ActionRole], base: Next) -> Next:
    """Compose role instances around a base executor.

    Roles are layered in list order, so the last role is the outermost
    layer and sees the call first.

    Args:
        roles: Ordered role instances (last = outermost)
        base: Innermost executor

    Returns:
        Composed async function: (action, controller, ctx, *args) -> result
    """
    chain: Next = base
    for role in roles:
        def make_wrapper(r: ActionRole, nxt: Next) -> Next:
            async def wrapped(action: Action, controller: object, ctx: Context, *args: object) -> object:
                return await r.around(nxt, action, controller, ctx, *args)
            return wrapped
        chain = make_wrapper(role, chain)
    return chain
