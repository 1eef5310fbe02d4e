"""Roles found through an extra fallback prefix, ``testapp.fallback_roles.``."""

from __future__ import annotations

from actionrole import ActionRole

from .action_role import mark


class Moo(ActionRole):
    """Shadowed by testapp.action_role.Moo in a bare-name search."""

    async def around(self, next, action, controller, ctx, *args):
        mark(ctx, "FallbackMoo")
        return await next(action, controller, ctx, *args)


class Zoo(ActionRole):
    async def around(self, next, action, controller, ctx, *args):
        mark(ctx, "Zoo")
        ctx["zoo"] = "zoo"
        return await next(action, controller, ctx, *args)
