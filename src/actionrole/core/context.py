"""Request-scoped context passed to actions and through the role chain."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class Context:
    """Execution context for one request.

    Carries request-scoped state between roles and the action body:
    - path/method/args of the request
    - the stash, a free-form mapping roles and actions share
    - the response body and the last action's return value (state)

    Example:
        >>> ctx = Context(path="bar/foo")
        >>> ctx["user"] = "alice"
        >>> ctx.get("user")
        'alice'
    """

    path: str = ""
    method: str = "GET"
    args: tuple[object, ...] = ()
    stash: dict[str, object] = field(default_factory=dict)
    response: object = None
    state: object = None

    def __getitem__(self, key: str) -> object:
        return self.stash[key]

    def __setitem__(self, key: str, value: object) -> None:
        self.stash[key] = value

    def __contains__(self, key: str) -> bool:
        return key in self.stash

    def get(self, key: str, default: object = None) -> object:
        return self.stash.get(key, default)

    def update(self, **values: object) -> None:
        self.stash.update(values)
