"""Role name expansion.

Short role names carry an optional marker:

- ``+Name``: already fully qualified, used as-is
- ``~Name``: the application's own role namespace, ``<app>.action_role.Name``
- ``Name``: searched under the application's namespace first, then under
  each configured fallback prefix (default ``actionrole.roles.``)

Any other leading character is not a marker and the name is searched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .config import ResolverSettings, get_settings
from .errors import RoleResolutionError
from .registry import is_loadable

logger = logging.getLogger("actionrole.resolver")

QUALIFIED = "+"
APP_RELATIVE = "~"


class RoleResolver:
    """Expand short role names to fully qualified, loadable identifiers.

    Args:
        app_namespace: Dotted package name of the application (e.g. "testapp")
        prefixes: Fallback prefixes searched after the application prefix.
            Defaults to the configured `resolver.role_prefixes`.
        app_role_namespace: Module under the application holding its roles.
            Defaults to the configured `resolver.app_role_namespace`.
        settings: Resolver settings supplying both defaults (defaults to
            get_settings().resolver)

    Example:
        >>> resolver = RoleResolver("testapp")
        >>> resolver.search_path
        ('testapp.action_role.', 'actionrole.roles.')
        >>> resolver.expand(["Moo", "~Kooh", "+Moo"])
        ['testapp.action_role.Moo', 'testapp.action_role.Kooh', 'Moo']
    """

    __slots__ = ("app_namespace", "app_prefix", "prefixes")

    def __init__(
        self,
        app_namespace: str,
        prefixes: Sequence[str] | None = None,
        *,
        app_role_namespace: str | None = None,
        settings: ResolverSettings | None = None,
    ) -> None:
        settings = settings or get_settings().resolver
        self.app_namespace = app_namespace
        self.app_prefix = f"{app_namespace}.{app_role_namespace or settings.app_role_namespace}."
        self.prefixes: tuple[str, ...] = tuple(settings.role_prefixes if prefixes is None else prefixes)

    @property
    def search_path(self) -> tuple[str, ...]:
        return (self.app_prefix, *self.prefixes)

    def candidates(self, name: str) -> list[str]:
        return [f"{prefix}{name}" for prefix in self.search_path]

    def expand(self, names: Iterable[str]) -> list[str]:
        """Expand every name, preserving order and duplicates."""
        return [self.expand_one(name) for name in names]

    def expand_one(self, name: str) -> str:
        if name.startswith(QUALIFIED):
            return name[1:]
        if name.startswith(APP_RELATIVE):
            identifier = f"{self.app_prefix}{name[1:]}"
            if not is_loadable(identifier):
                raise RoleResolutionError.create(
                    name, f"Action role '{name}' not found in {self.app_prefix[:-1]}", candidates=[identifier],
                )
            return identifier
        return self._search(name)

    def _search(self, name: str) -> str:
        candidates = self.candidates(name)
        loaded = next((c for c in candidates if is_loadable(c)), None)
        if loaded is None:
            raise RoleResolutionError.create(name, f"Action role '{name}' not found", candidates=candidates)

        # Longest prefix wins when a shorter prefix is also a textual prefix
        # of the loaded name and the longer one's candidate loads too.
        for prefix in sorted(self.search_path, key=len, reverse=True):
            if loaded.startswith(prefix) and is_loadable(identifier := f"{prefix}{name}"):
                logger.debug(f"Resolved role '{name}' -> {identifier}")
                return identifier
        return loaded
