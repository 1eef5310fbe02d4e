"""Controllers and the @action declaration decorator.

Example:
    >>> class Bar(Controller):
    ...     config = {"action_roles": ["~Kooh"]}
    ...
    ...     @action(does="Moo")
    ...     def foo(self, ctx):
    ...         return ctx["moo"]
    ...
    ...     @action(does=["~Moo", "Logging"])
    ...     async def bar(self, ctx):
    ...         ...

Roles may also be attached without touching the method, and given args:

    >>> class Baz(Controller):
    ...     config = {
    ...         "action_roles": ["Foo"],
    ...         "action": {"some_action": {"does": ["~Bar"]}},
    ...         "action_args": {"some_action": {"custom_arg": "arg1"}},
    ...     }
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, ClassVar, TypeVar

from .composer import get_composer
from .core.action import Action
from .core.role import ActionRole
from .errors import ErrorCode, RoleLoadError
from .registry import load_role
from .resolver import RoleResolver

if TYPE_CHECKING:
    from .app import Application

logger = logging.getLogger("actionrole.controller")

F = TypeVar("F", bound=Callable[..., Any])

ACTION_ATTR = "__actionrole_spec__"


@dataclass(frozen=True, slots=True)
class ActionSpec:
    """Declaration of one action: its method and attributes."""

    name: str
    code: Callable[..., Any]
    attributes: Mapping[str, object] = field(default_factory=dict)

    @property
    def does(self) -> tuple[str, ...]:
        return _as_names(self.attributes.get("does"))


def _as_names(value: object) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, Sequence):
        return tuple(value)
    raise TypeError(f"'does' must be a role name or a sequence of names, got {type(value).__name__}")


def action(
    func: F | None = None,
    *,
    does: str | Sequence[str] = (),
    path: str | None = None,
    action_class: type[Action] | None = None,
    **attributes: object,
) -> F | Callable[[F], F]:
    """Mark a controller method as an action.

    Args:
        does: Role name(s) applied to this action only
        path: Dispatch path override (default "namespace/name")
        action_class: Base action type for this action
        **attributes: Extra attributes stored on the action

    Example:
        >>> @action(does=["Moo", "+myapp.roles.Audit"])
        ... def foo(self, ctx): ...
        >>> @action
        ... def bar(self, ctx): ...
    """
    attrs: dict[str, object] = dict(attributes, does=_as_names(does))
    if path is not None:
        attrs["path"] = path
    if action_class is not None:
        attrs["action_class"] = action_class

    def decorator(fn: F) -> F:
        setattr(fn, ACTION_ATTR, attrs)
        return fn

    return decorator(func) if func is not None else decorator


def _default_namespace(cls: type) -> str:
    name = re.sub(r"Controller$", "", cls.__name__) or cls.__name__
    return name.lower()


class Controller:
    """Base class for controllers whose actions can have roles applied.

    Class attributes:
        config: Controller configuration (merged along the MRO)
        action_role_prefix: Fallback role prefixes, None for the configured default
        action_class: Base action type for every action

    Instantiating a controller resolves and loads its `action_roles` so a
    misconfigured controller fails at application setup.
    """

    config: ClassVar[Mapping[str, Any]] = {}
    action_role_prefix: ClassVar[Sequence[str] | None] = None
    action_class: ClassVar[type[Action]] = Action

    def __init__(self, app: Application) -> None:
        self.app = app
        self._config = self.merged_config()
        self.namespace: str = self._config.get("namespace", _default_namespace(type(self)))
        self.resolver = RoleResolver(app.name, self.action_role_prefix, settings=app.settings.resolver)
        self.action_roles: tuple[type[ActionRole], ...] = tuple(
            load_role(r) for r in self.resolver.expand(_as_names(self._config.get("action_roles")))
        )

    @classmethod
    def merged_config(cls) -> dict[str, Any]:
        merged: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            merged.update(vars(klass).get("config", {}))
        return merged

    @classmethod
    def action_specs(cls) -> list[ActionSpec]:
        """Collect declared actions, base classes first, overrides replacing."""
        found: dict[str, ActionSpec] = {}
        for klass in reversed(cls.__mro__):
            for name, member in vars(klass).items():
                if (attrs := getattr(member, ACTION_ATTR, None)) is not None:
                    found[name] = ActionSpec(name, member, attrs)
        return list(found.values())

    # ─────────────────────────────────────────────────────────────────
    # Action creation
    # ─────────────────────────────────────────────────────────────────

    def action_attributes(self, spec: ActionSpec) -> dict[str, object]:
        """Decorator attributes with the `action` config for this action merged in."""
        attrs = dict(spec.attributes)
        override = dict(self._config.get("action", {}).get(spec.name, {}))
        does = (*spec.does, *_as_names(override.pop("does", None)))
        attrs.update(override)
        attrs["does"] = does
        return attrs

    def gather_action_roles(self, attributes: Mapping[str, object]) -> list[type[ActionRole]]:
        """Controller-level roles followed by the action's own expanded roles."""
        return [
            *self.action_roles,
            *(load_role(r) for r in self.resolver.expand(_as_names(attributes.get("does")))),
        ]

    def is_reserved(self, name: str) -> bool:
        return name in self.app.settings.reserved_actions

    def create_action(self, spec: ActionSpec) -> Action:
        attrs = self.action_attributes(spec)
        base = attrs.get("action_class", self.action_class)
        if not (isinstance(base, type) and issubclass(base, Action)):
            raise RoleLoadError.create(
                spec.name, f"action_class for '{spec.name}' must be an Action subclass", ErrorCode.INVALID_CONFIG,
            )
        if self.is_reserved(spec.name):
            cls = base
        else:
            cls = get_composer().compose(base, self.gather_action_roles(attrs))
        path = attrs.get("path")
        created = cls(
            spec.name,
            spec.code,
            namespace=self.namespace,
            path=str(path).strip("/") if path is not None else None,
            attributes=attrs,
            args=self._config.get("action_args", {}).get(spec.name, {}),
        )
        logger.debug(f"Created {created!r}")
        return created

    def actions(self) -> list[Action]:
        return [self.create_action(spec) for spec in self.action_specs()]
