"""Toy application used by the test-suite.

The top-level role ``Moo`` (no package) is an alias in the role registry,
so ``+Moo`` has something to resolve to.
"""

from __future__ import annotations

from actionrole import ActionRole, get_role_registry

from .action_role import mark


class GlobalMoo(ActionRole):
    async def around(self, next, action, controller, ctx, *args):
        mark(ctx, "GlobalMoo")
        ctx["global_moo"] = True
        return await next(action, controller, ctx, *args)


get_role_registry().register(GlobalMoo, name="Moo")
