"""Central registry mapping qualified role names to role classes.

The registry provides:
- Automatic registration of every ActionRole subclass
- Aliases for roles that should answer to a different name
- Loading by dotted identifier, importing the module on a registry miss
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Iterator

from .core.role import ActionRole
from .errors import ErrorCode, RoleLoadError

logger = logging.getLogger("actionrole.registry")


class RoleRegistry:
    """Process-wide mapping of fully qualified role names to role classes.

    Example:
        >>> registry = RoleRegistry()
        >>> registry.register(Moo)
        >>> registry.get("testapp.action_role.Moo")
        <class 'testapp.action_role.Moo'>
        >>> registry.register(Moo, name="Moo")  # alias
    """

    __slots__ = ("_roles",)

    def __init__(self) -> None:
        self._roles: dict[str, type[ActionRole]] = {}

    def register(self, role: type[ActionRole], name: str | None = None, *, replace: bool = False) -> None:
        """Register a role class under its qualified name or an alias."""
        name = name or role.role_name()
        if not replace and (existing := self._roles.get(name)) is not None and existing is not role:
            raise ValueError(f"Role '{name}' already registered to {existing.role_name()}. Use unregister() first.")
        self._roles[name] = role

    def unregister(self, name: str) -> bool:
        """Remove a role by name. Returns True if found."""
        return self._roles.pop(name, None) is not None

    def get(self, name: str) -> type[ActionRole] | None:
        return self._roles.get(name)

    def __getitem__(self, name: str) -> type[ActionRole]:
        return self._roles[name]

    def __contains__(self, name: str) -> bool:
        return name in self._roles

    def __len__(self) -> int:
        return len(self._roles)

    def __iter__(self) -> Iterator[str]:
        return iter(self._roles)

    def clear(self) -> None:
        self._roles.clear()


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────


def _missing(exc: ModuleNotFoundError, module: str) -> bool:
    """True when the import failed because `module` (or a parent) does not exist.

    A ModuleNotFoundError for some other module means the target exists but
    is broken, which must not be mistaken for "not there".
    """
    return exc.name is not None and (module == exc.name or module.startswith(f"{exc.name}."))


def _find(identifier: str) -> object | None:
    if (role := get_role_registry().get(identifier)) is not None:
        return role
    module_name, _, attr = identifier.rpartition(".")
    if not module_name or not attr:
        return None
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        if _missing(e, module_name):
            return None
        raise
    logger.debug(f"Imported {module_name} looking up role '{identifier}'")
    return getattr(module, attr, None)


def ensure_role(found: object, identifier: str) -> type[ActionRole]:
    """Return `found` if it is a concrete ActionRole subclass.

    Raises:
        RoleLoadError: ROLE_INVALID otherwise.
    """
    if not (isinstance(found, type) and issubclass(found, ActionRole)) or found is ActionRole:
        raise RoleLoadError.create(
            identifier, f"'{identifier}' is not an action role", ErrorCode.ROLE_INVALID, candidates=[identifier],
        )
    return found


def load_role(identifier: str) -> type[ActionRole]:
    """Load the role class named by a fully qualified identifier.

    Raises:
        RoleLoadError: ROLE_NOT_FOUND if nothing is there,
            ROLE_INVALID if the object is not an ActionRole subclass.
    """
    found = _find(identifier)
    if found is None:
        raise RoleLoadError.create(identifier, f"Cannot load action role '{identifier}'", candidates=[identifier])
    return ensure_role(found, identifier)


def is_loadable(identifier: str) -> bool:
    """Whether `identifier` names a loadable role."""
    try:
        load_role(identifier)
    except RoleLoadError:
        return False
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Global Registry
# ─────────────────────────────────────────────────────────────────────────────

_registry: RoleRegistry | None = None


def get_role_registry() -> RoleRegistry:
    """Get the global role registry instance."""
    global _registry
    if _registry is None:
        _registry = RoleRegistry()
    return _registry


def set_role_registry(registry: RoleRegistry) -> None:
    """Replace the global registry."""
    global _registry
    _registry = registry


def reset_role_registry() -> None:
    """Reset the global registry (useful for testing).

    Roles defined in already imported modules stay loadable through import.
    """
    global _registry
    if _registry is not None:
        _registry.clear()
    _registry = None
