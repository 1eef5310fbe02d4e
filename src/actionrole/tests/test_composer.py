"""Tests for composed action synthesis and the around chain."""

from __future__ import annotations

import threading

import pytest

from actionrole import (
    Action,
    ActionRole,
    Context,
    ErrorCode,
    RoleComposer,
    RoleLoadError,
    compose_roles,
    get_composer,
)

from testapp.action_role import Boo, Kooh, Moo, Shout


def _code(controller, ctx):
    ctx["body"] = True
    return "body"


# ─────────────────────────────────────────────────────────────────────────────
# Composer
# ─────────────────────────────────────────────────────────────────────────────


def test_empty_role_list_returns_base() -> None:
    assert RoleComposer().compose(Action, []) is Action
    assert len(get_composer()) == 0


def test_composed_type_is_a_subclass_with_roles() -> None:
    composed = RoleComposer().compose(Action, [Kooh, "testapp.action_role.Moo"])
    assert issubclass(composed, Action)
    assert composed is not Action
    assert composed.roles == (Kooh, Moo)
    assert composed.does(Moo)
    assert not composed.does(Boo)
    assert composed.__name__ == "Action__with__Kooh_Moo"


def test_same_pair_is_cached() -> None:
    composer = RoleComposer()
    first = composer.compose(Action, [Moo, Kooh])
    assert composer.compose(Action, ["testapp.action_role.Moo", "testapp.action_role.Kooh"]) is first
    assert len(composer) == 1
    assert composer.compose(Action, [Kooh, Moo]) is not first
    assert len(composer) == 2


def test_distinct_bases_are_cached_separately() -> None:
    class Special(Action):
        pass

    composer = RoleComposer()
    assert composer.compose(Special, [Moo]) is not composer.compose(Action, [Moo])
    assert issubclass(composer.compose(Special, [Moo]), Special)


def test_composing_a_composed_type_stacks_roles() -> None:
    composer = RoleComposer()
    inner = composer.compose(Action, [Moo])
    assert composer.compose(inner, [Kooh]).roles == (Moo, Kooh)


def test_unloadable_role_aborts() -> None:
    composer = RoleComposer()
    with pytest.raises(RoleLoadError):
        composer.compose(Action, [Moo, "testapp.action_role.Missing"])
    assert len(composer) == 0


@pytest.mark.parametrize("bad", [int, ActionRole])
def test_non_role_class_aborts(bad: type) -> None:
    composer = RoleComposer()
    with pytest.raises(RoleLoadError) as exc_info:
        composer.compose(Action, [Moo, bad])
    assert exc_info.value.code == ErrorCode.ROLE_INVALID
    assert exc_info.value.subject == f"{bad.__module__}.{bad.__qualname__}"
    assert len(composer) == 0


def test_concurrent_compose_synthesizes_once() -> None:
    composer = RoleComposer()
    barrier = threading.Barrier(8)
    results: list[type[Action]] = []

    def worker() -> None:
        barrier.wait()
        results.append(composer.compose(Action, [Moo, Boo]))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len({id(r) for r in results}) == 1
    assert len(composer) == 1


def test_clear() -> None:
    composer = RoleComposer()
    first = composer.compose(Action, [Moo])
    composer.clear()
    assert composer.compose(Action, [Moo]) is not first


# ─────────────────────────────────────────────────────────────────────────────
# Execution
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_last_role_is_outermost() -> None:
    cls = RoleComposer().compose(Action, [Kooh, Moo])
    act = cls("foo", _code, namespace="bar")
    ctx = Context()
    assert await act.execute(object(), ctx) == "body"
    assert ctx["trail"] == ["Moo", "Kooh"]
    assert ctx.state == "body"
    assert ctx["body"] is True


@pytest.mark.asyncio
async def test_role_sees_result() -> None:
    cls = RoleComposer().compose(Action, [Moo, Shout])
    act = cls("foo", _code)
    assert await act.execute(None, Context()) == "BODY"


@pytest.mark.asyncio
async def test_role_args_come_from_action_args() -> None:
    cls = RoleComposer().compose(Action, [Boo])
    ctx = Context()
    act = cls("foo", _code, args={"boo": "right", "unrelated": 1})
    await act.execute(None, ctx)
    assert ctx["action_boo"] == "right"
    assert act.role_instances == (Boo(boo="right"),)

    ctx = Context()
    await cls("foo", _code).execute(None, ctx)
    assert ctx["action_boo"] == "wrong"


@pytest.mark.asyncio
async def test_base_action_runs_without_chain() -> None:
    async def code(controller, ctx, n):
        return n * 2

    act = Action("double", code, namespace="math")
    assert act.reverse == "math/double"
    assert act.role_instances == ()
    assert await act.execute(None, Context(), 21) == 42


@pytest.mark.asyncio
async def test_compose_roles_directly() -> None:
    async def base(action, controller, ctx, *args):
        return list(args)

    chain = compose_roles([Kooh(), Moo()], base)
    ctx = Context()
    assert await chain(None, None, ctx, 1, 2) == [1, 2]
    assert ctx["trail"] == ["Moo", "Kooh"]
