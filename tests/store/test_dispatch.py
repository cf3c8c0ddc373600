"""Tests for commit/action dispatch."""

import asyncio
import threading

import pytest

from st8 import (
    RESERVED_WORDS,
    DontTouchMyReservedwords,
    NoSuchActionError,
    NoSuchMutationError,
    StoreSettings,
    create_store,
    delay,
)
from st8.store import StoreRoot, action, bind_commit, commit, run_action_sync


def set_x(data, value):
    data["x"] = value
    return value * 2


def push(data, value):
    data["a"].append(value)


def generic(data, item):
    data[item["name"]] = item["value"]


@pytest.fixture
def root():
    return StoreRoot.build(
        data={"x": 1, "a": ["b"]},
        mutations={"set_x": set_x, "push": push},
        actions={},
    )


def test_commit_mutates_and_returns(root):
    assert commit(root, "set_x", 5) == 10
    assert root.data["x"] == 5


def test_commit_default_value(root):
    received = []
    root = StoreRoot.build(
        data=root.data,
        mutations={"record": lambda data, value: received.append(value)},
        actions={},
    )
    commit(root, "record")
    assert received == [None]


def test_commit_unknown_name(root):
    with pytest.raises(NoSuchMutationError, match="nope is not a registered mutation.") as exc_info:
        commit(root, "nope")
    assert exc_info.value.name == "nope"


@pytest.mark.parametrize("word", sorted(RESERVED_WORDS))
def test_commit_reserved_key_smuggled(generic_store, word):
    with pytest.raises(DontTouchMyReservedwords, match=word) as exc_info:
        generic_store.commit("generic", {"name": word, "value": "xyz"})
    assert exc_info.value.key == word


@pytest.mark.asyncio
@pytest.mark.parametrize("word", sorted(RESERVED_WORDS))
async def test_action_commit_reserved_key_fails_on_await(word):
    async def smuggle(commit_, value):
        await delay(0.001)
        commit_("generic", {"name": value, "value": "xyz"})

    store = create_store(
        {"mutations": {"generic": generic}, "actions": {"smuggle": smuggle}},
        settings=StoreSettings(),
    )
    pending = store.action("smuggle", word)
    with pytest.raises(DontTouchMyReservedwords, match=word):
        await pending


def test_mutation_error_propagates(settings):
    def boom(data, value):
        raise ValueError("boom")

    store = create_store({"mutations": {"boom": boom}}, settings=settings)
    with pytest.raises(ValueError, match="boom"):
        store.commit("boom")


def test_generic_mutation(generic_store):
    generic_store.commit("generic", {"name": "a", "value": "yz"})
    generic_store.commit("generic", {"name": "x", "value": "bc"})
    assert generic_store.a == "yz"
    assert generic_store.x == "bc"


def test_list_mutation(settings):
    store = create_store(
        {"data": {"a": ["b", "c"]}, "mutations": {"push": push}},
        settings=settings,
    )
    for item in "def":
        store.commit("push", item)
    assert store.a == ["b", "c", "d", "e", "f"]


def test_bound_commit_is_commit(root):
    bound = bind_commit(root)
    assert bound("set_x", 3) == 6
    assert root.data["x"] == 3


def test_action_unknown_name(root):
    with pytest.raises(NoSuchActionError, match="nope is not a registered action.") as exc_info:
        action(root, "nope")
    assert exc_info.value.name == "nope"


def test_action_handle_unknown_name(store):
    with pytest.raises(NoSuchActionError, match="blargh"):
        store.action("blargh")
    with pytest.raises(NoSuchMutationError, match="blargh"):
        store.commit("blargh")


def test_sync_action_returns_verbatim(settings):
    def bump(commit_, value):
        commit_("set_x", value)
        return "done"

    store = create_store(
        {"data": {"x": 1}, "mutations": {"set_x": set_x}, "actions": {"bump": bump}},
        settings=settings,
    )
    assert store.action("bump", 4) == "done"
    assert store.x == 4


def test_async_action_is_not_awaited_by_dispatcher(settings):
    async def go(commit_, value):
        commit_("set_x", value)

    store = create_store(
        {"data": {"x": 1}, "mutations": {"set_x": set_x}, "actions": {"go": go}},
        settings=settings,
    )
    pending = store.action("go", 9)
    assert asyncio.iscoroutine(pending)
    assert store.x == 1
    pending.close()


@pytest.mark.asyncio
async def test_async_action_commits(settings):
    async def go(commit_, value):
        await delay(0.001)
        return commit_("set_x", value)

    store = create_store(
        {"data": {"x": None}, "mutations": {"set_x": set_x}, "actions": {"go": go}},
        settings=settings,
    )
    assert await store.action("go", "ab") == "abab"
    assert store.x == "ab"


@pytest.mark.asyncio
async def test_overlapping_actions(settings):
    """Suspended actions interleave; the store does no locking."""
    seen = []

    async def record(commit_, value):
        await delay(value)
        commit_("push", value)
        seen.append(value)

    store = create_store(
        {"data": {"a": []}, "mutations": {"push": push}, "actions": {"record": record}},
        settings=settings,
    )
    await asyncio.gather(store.action("record", 0.02), store.action("record", 0.001))
    assert seen == [0.001, 0.02]
    assert store.a == [0.001, 0.02]


def test_run_action_sync_commits_on_calling_thread(settings):
    threads = []

    def set_x_recording(data, value):
        threads.append(threading.current_thread())
        data["x"] = value

    async def go(commit_, value):
        await delay(0.001)
        commit_("set_x", value)
        return "ok"

    store = create_store(
        {"data": {"x": None}, "mutations": {"set_x": set_x_recording}, "actions": {"go": go}},
        settings=settings,
    )
    assert store.run_action_sync("go", "tigerbalm") == "ok"
    assert store.x == "tigerbalm"
    assert threads == [threading.current_thread()]


@pytest.mark.asyncio
async def test_run_action_sync_rejects_running_loop(settings):
    calls = []

    async def go(commit_, value):
        calls.append(value)

    store = create_store({"data": {"x": 1}, "actions": {"go": go}}, settings=settings)
    with pytest.raises(RuntimeError, match="running event loop"):
        store.run_action_sync("go", 1)
    assert calls == []

    await store.action("go", 2)
    assert calls == [2]


def test_run_action_sync_plain_result(root):
    root = StoreRoot.build(
        data=root.data,
        mutations=dict(root.mutations),
        actions={"plain": lambda commit_, value: commit_("set_x", value)},
    )
    assert run_action_sync(root, "plain", 2) == 4


def test_run_action_sync_propagates_errors():
    async def fail(commit_, value):
        commit_("nope")

    store = create_store(
        {"data": {"x": 1}, "actions": {"fail": fail}},
        settings=StoreSettings(),
    )
    with pytest.raises(NoSuchMutationError, match="nope"):
        store.run_action_sync("fail")
