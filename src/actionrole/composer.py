"""Composed action type synthesis.

Given a base action type and an ordered list of roles, produce a subclass
that carries those roles. Each distinct (base, roles) pair is synthesized
once per process and reused for every later request.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

from .core.action import Action
from .core.role import ActionRole
from .registry import ensure_role, load_role

logger = logging.getLogger("actionrole.composer")

RoleRef = str | type[ActionRole]


class RoleComposer:
    """Synthesize and cache composed action types.

    Roles given as identifiers are loaded first and classes are checked to
    be ActionRole subclasses, so a missing or invalid role aborts
    composition with RoleLoadError before any type is created.

    Example:
        >>> composer = RoleComposer()
        >>> composed = composer.compose(Action, ["testapp.action_role.Moo"])
        >>> composed.roles
        (<class 'testapp.action_role.Moo'>,)
        >>> composer.compose(Action, ["testapp.action_role.Moo"]) is composed
        True
        >>> composer.compose(Action, []) is Action
        True
    """

    __slots__ = ("_cache", "_lock")

    def __init__(self) -> None:
        self._cache: dict[tuple[type[Action], tuple[type[ActionRole], ...]], type[Action]] = {}
        self._lock = threading.Lock()

    def compose(self, base: type[Action], roles: Sequence[RoleRef]) -> type[Action]:
        if not roles:
            return base
        loaded = tuple(
            ensure_role(r, f"{r.__module__}.{r.__qualname__}") if isinstance(r, type) else load_role(r)
            for r in roles
        )
        key = (base, loaded)
        if (cached := self._cache.get(key)) is not None:
            return cached
        with self._lock:
            if (cached := self._cache.get(key)) is None:
                cached = self._cache[key] = self._synthesize(base, loaded)
        return cached

    @staticmethod
    def _synthesize(base: type[Action], roles: tuple[type[ActionRole], ...]) -> type[Action]:
        name = f"{base.__name__}__with__{'_'.join(r.__name__ for r in roles)}"
        logger.debug(f"Synthesizing {name} from {base.__qualname__} + {[r.role_name() for r in roles]}")
        return type(name, (base,), {
            "roles": (*base.roles, *roles),
            "__module__": base.__module__,
            "__qualname__": name,
        })

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()


# ─────────────────────────────────────────────────────────────────────────────
# Global Composer
# ─────────────────────────────────────────────────────────────────────────────

_composer: RoleComposer | None = None


def get_composer() -> RoleComposer:
    """Get the global composer instance."""
    global _composer
    if _composer is None:
        _composer = RoleComposer()
    return _composer


def reset_composer() -> None:
    """Drop every cached composed type (useful for testing)."""
    global _composer
    if _composer is not None:
        _composer.clear()
    _composer = None
