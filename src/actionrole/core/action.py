"""Actions: the per-path units of request handling.

An Action wraps one controller method. Its class attribute `roles` lists
the role classes layered around the method; the base class has none, and
the composer synthesizes subclasses that carry a non-empty tuple.
"""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable, ClassVar

from .context import Context
from .role import ActionRole, Next, compose_roles


class Action:
    """A named unit of request-handling logic belonging to a controller.

    Attributes:
        name: Method name on the controller (e.g. "foo")
        namespace: Controller namespace (e.g. "bar")
        reverse: Dispatch path, "namespace/name"
        attributes: Declared attributes (does, path, extras)
        args: Constructor args, also used to build role instances
        role_instances: One instance per role in `roles`, same order
    """

    __slots__ = ("name", "code", "namespace", "reverse", "attributes", "args", "role_instances", "_is_async", "_chain")

    roles: ClassVar[tuple[type[ActionRole], ...]] = ()

    def __init__(
        self,
        name: str,
        code: Callable[..., Any],
        *,
        namespace: str = "",
        path: str | None = None,
        attributes: Mapping[str, object] | None = None,
        args: Mapping[str, object] | None = None,
    ) -> None:
        self.name = name
        self.code = code
        self.namespace = namespace
        self.reverse = path if path is not None else "/".join(p for p in (namespace, name) if p)
        self.attributes = MappingProxyType(dict(attributes or {}))
        self.args = MappingProxyType(dict(args or {}))
        self._is_async = inspect.iscoroutinefunction(code)

        self.role_instances = tuple(role.model_validate(dict(self.args)) for role in type(self).roles)
        self._chain: Next = compose_roles(self.role_instances, type(self).run)

    def __repr__(self) -> str:
        roles = ", ".join(r.__name__ for r in type(self).roles)
        return f"<{type(self).__name__} {self.reverse!r}{f' roles=[{roles}]' if roles else ''}>"

    @classmethod
    def does(cls, role: type[ActionRole]) -> bool:
        """Whether `role` is applied to this action type."""
        return any(issubclass(r, role) for r in cls.roles)

    async def run(self, controller: object, ctx: Context, *args: object) -> object:
        """Run the wrapped controller method. Innermost layer of the chain."""
        if self._is_async:
            result = await self.code(controller, ctx, *args)
        else:
            result = self.code(controller, ctx, *args)
        ctx.state = result
        return result

    async def execute(self, controller: object, ctx: Context, *args: object) -> object:
        """Execute the action through its role chain."""
        return await self._chain(self, controller, ctx, *args)
