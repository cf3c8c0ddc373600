"""Dispatcher: commit mutations and run actions against a root record.

All functions take the root record explicitly; nothing here holds state.

Usage:
    root = StoreRoot.build(data={"a": 1}, mutations={"set_a": set_a}, actions={})
    commit(root, "set_a", 5)              # -> whatever set_a returns
    await action(root, "load", "id-1")    # async actions return a coroutine
    run_action_sync(root, "load", "id-1") # from sync code, no running loop
"""

from __future__ import annotations

import asyncio
import functools
import inspect
import logging
from collections.abc import Awaitable
from typing import Any

from st8.core.errors import NoSuchActionError, NoSuchMutationError
from st8.core.types import Commit
from st8.core.validation import check_reserved
from st8.store.models import StoreRoot

_logger = logging.getLogger(__name__)


def commit(root: StoreRoot, name: str, value: Any = None) -> Any:
    """Run a registered mutation against the live data dict.

    Args:
        root: Root record of the store.
        name: Mutation name.
        value: Payload passed as the mutation's second argument.

    Returns:
        Whatever the mutation returns.

    Raises:
        NoSuchMutationError: If no mutation is registered under `name`.
        DontTouchMyReservedwords: If the mutation left a reserved key in data.
            The key is not rolled back.
    """
    mutation = root.mutations.get(name)
    if mutation is None:
        raise NoSuchMutationError(name)

    _logger.debug("commit %s", name)
    result = mutation(root.data, value)
    check_reserved(root.data)
    return result


def bind_commit(root: StoreRoot) -> Commit:
    """Commit capability for one store, as handed to actions."""
    return functools.partial(commit, root)


def action(root: StoreRoot, name: str, value: Any = None) -> Any:
    """Run a registered action with the store's commit capability.

    The result is returned verbatim. For an async action this is the
    un-awaited coroutine; awaiting it is the caller's job.

    Gotcha: a coroutine does not start until it is awaited. An async action
    whose result is dropped runs nothing, commits nothing, and Python warns
    that the coroutine was never awaited.

    Raises:
        NoSuchActionError: If no action is registered under `name`.
    """
    fn = root.actions.get(name)
    if fn is None:
        raise NoSuchActionError(name)

    _logger.debug("action %s", name)
    return fn(bind_commit(root), value)


async def _await(awaitable: Awaitable[Any]) -> Any:
    return await awaitable


def run_action_sync(root: StoreRoot, name: str, value: Any = None) -> Any:
    """Run an action from synchronous code and return its final result.

    An awaitable result is driven to completion with `asyncio.run` on the
    calling thread, so every commit it makes happens on that thread.
    Anything else is returned as-is.

    Raises:
        RuntimeError: If called while an event loop is running in this thread.
            Await `action(...)` there instead.
        NoSuchActionError: If no action is registered under `name`.
    """
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        pass
    else:
        raise RuntimeError(
            f"run_action_sync('{name}') called from a running event loop; await action() instead"
        )

    result = action(root, name, value)
    if inspect.isawaitable(result):
        coro = result if asyncio.iscoroutine(result) else _await(result)
        return asyncio.run(coro)
    return result
