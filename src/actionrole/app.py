"""Minimal in-process application host.

Registers controllers, builds the dispatch table and runs a request
through the begin → auto → action → end lifecycle. Setup is where all role
resolution happens, so a misconfigured role fails here and never at
request time.

Example:
    >>> app = Application("testapp", [Bar])
    >>> app.setup()
    >>> ctx = await app.handle("bar/foo")
    >>> ctx.stash["moo"]
    'moo'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .config import ActionRoleSettings, configure_logging, get_settings
from .controller import Controller
from .core.action import Action
from .core.context import Context
from .errors import ActionNotFoundError

logger = logging.getLogger("actionrole.app")


class Application:
    """An application: a namespace plus its controllers.

    Args:
        name: Dotted package name; roles live under "<name>.action_role"
        controllers: Controller classes to register
        settings: Settings override (defaults to get_settings())
    """

    __slots__ = ("name", "settings", "_controller_classes", "_controllers", "_routes", "_hooks", "_is_setup")

    def __init__(
        self,
        name: str,
        controllers: Iterable[type[Controller]] = (),
        settings: ActionRoleSettings | None = None,
    ) -> None:
        self.name = name
        self.settings = settings or get_settings()
        self._controller_classes = list(controllers)
        self._controllers: list[Controller] = []
        self._routes: dict[str, tuple[Controller, Action]] = {}
        self._hooks: dict[Controller, dict[str, Action]] = {}
        self._is_setup = False

    @property
    def is_setup(self) -> bool:
        return self._is_setup

    @property
    def controllers(self) -> list[Controller]:
        return list(self._controllers)

    def setup(self) -> None:
        """Instantiate controllers and register every action.

        Raises:
            RoleResolutionError, RoleLoadError: a role did not resolve or load
            ValueError: two actions claim the same path
        """
        if self.is_setup:
            return
        configure_logging(self.settings)
        controllers = [cls(self) for cls in self._controller_classes]
        routes: dict[str, tuple[Controller, Action]] = {}
        hooks: dict[Controller, dict[str, Action]] = {}
        for controller in controllers:
            own = hooks.setdefault(controller, {})
            for act in controller.actions():
                if controller.is_reserved(act.name):
                    own[act.name] = act
                    continue
                if act.reverse in routes:
                    raise ValueError(f"Path '{act.reverse}' already registered by {routes[act.reverse][1]!r}")
                routes[act.reverse] = (controller, act)
        self._controllers, self._routes, self._hooks = controllers, routes, hooks
        self._is_setup = True
        logger.info(f"Application '{self.name}' set up: {len(controllers)} controllers, {len(routes)} actions")

    def action_for(self, path: str) -> Action | None:
        route = self._routes.get(path.strip("/"))
        return route[1] if route else None

    def paths(self) -> list[str]:
        return sorted(self._routes)

    async def handle(self, path: str, *args: object, method: str = "GET", **stash: object) -> Context:
        """Dispatch one request and return its context.

        `auto` returning False skips the action but `end` still runs.

        Raises:
            ActionNotFoundError: no action registered at `path`
        """
        self.setup()
        route = self._routes.get(path.strip("/"))
        if route is None:
            raise ActionNotFoundError.create(path, f"No action at '{path}'")

        controller, act = route
        hooks = self._hooks[controller]
        ctx = Context(path=act.reverse, method=method.upper(), args=args, stash=dict(stash))

        if (begin := hooks.get("begin")) is not None:
            await begin.execute(controller, ctx)
        auto = hooks.get("auto")
        if auto is None or await auto.execute(controller, ctx) is not False:
            result = await act.execute(controller, ctx, *args)
            if ctx.response is None:
                ctx.response = result
        if (end := hooks.get("end")) is not None:
            await end.execute(controller, ctx)
        return ctx
