"""actionrole - Apply composable roles to controller actions.

Roles are around-style wrappers attached to single actions (``does``) or to
every action of a controller (``action_roles``). Short role names are
expanded through a prefix search and each distinct combination of action
type and roles is synthesized once.

Quick Start:
    >>> from actionrole import ActionRole, Application, Controller, action
    >>>
    >>> # testapp/action_role.py
    >>> class Moo(ActionRole):
    ...     async def around(self, next, action, controller, ctx, *args):
    ...         ctx["moo"] = "moo"
    ...         return await next(action, controller, ctx, *args)
    >>>
    >>> # testapp/controllers.py
    >>> class Bar(Controller):
    ...     config = {"action_roles": ["~Kooh"]}
    ...
    ...     @action(does="Moo")
    ...     def foo(self, ctx):
    ...         return ctx["moo"]
    >>>
    >>> app = Application("testapp", [Bar])
    >>> app.setup()                       # resolution errors surface here
    >>> ctx = await app.handle("bar/foo")

Name markers:
    +Name   fully qualified, used as-is
    ~Name   <app>.action_role.Name only
    Name    <app>.action_role.Name, then each configured prefix
            (default: actionrole.roles.)
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core
from .core import Action, ActionRole, Context, Next, compose_roles

# Errors
from .errors import (
    ActionNotFoundError,
    ActionRoleException,
    ActionTimeoutError,
    ErrorCode,
    MethodNotAllowedError,
    RoleError,
    RoleLoadError,
    RoleResolutionError,
)

# Configuration
from .config import ActionRoleSettings, clear_settings_cache, configure_logging, get_settings

# Registry & resolution
from .registry import (
    RoleRegistry,
    get_role_registry,
    is_loadable,
    load_role,
    reset_role_registry,
    set_role_registry,
)
from .resolver import RoleResolver

# Composition
from .composer import RoleComposer, get_composer, reset_composer

# Controllers & application
from .controller import ActionSpec, Controller, action
from .app import Application

__all__ = [
    "__version__",
    # Core
    "Action",
    "ActionRole",
    "Context",
    "Next",
    "compose_roles",
    # Errors
    "ActionNotFoundError",
    "ActionRoleException",
    "ActionTimeoutError",
    "ErrorCode",
    "MethodNotAllowedError",
    "RoleError",
    "RoleLoadError",
    "RoleResolutionError",
    # Configuration
    "ActionRoleSettings",
    "clear_settings_cache",
    "configure_logging",
    "get_settings",
    # Registry & resolution
    "RoleRegistry",
    "get_role_registry",
    "is_loadable",
    "load_role",
    "reset_role_registry",
    "set_role_registry",
    "RoleResolver",
    # Composition
    "RoleComposer",
    "get_composer",
    "reset_composer",
    # Controllers & application
    "ActionSpec",
    "Controller",
    "action",
    "Application",
]
