"""Small stateless helpers shared by the store and by user actions.

Usage:
    data = resolve(lambda: {"x": 1})   # -> {"x": 1}
    data = resolve(None)               # -> {}
    if has_props(data): ...

    async def go(commit, value):
        await delay(0.001)
        commit("set_x", value)
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from typing import Any


def value_or_function(value: Any, override: bool = False) -> Any:
    """Return `value()` for a callable, or `value` itself.

    Args:
        value: A plain value or a zero-argument callable producing one.
        override: If True, return a callable as-is without calling it.

    Returns:
        The produced or passed-through value.
    """
    if callable(value) and not override:
        return value()
    return value


def resolve(value: Any) -> Any:
    """Resolve a seed input: `None` becomes a fresh empty dict, producers are called."""
    if value is None:
        return {}
    return value_or_function(value)


def has_props(obj: Any) -> bool:
    """True if obj is a mapping with at least one key."""
    return isinstance(obj, Mapping) and len(obj) >= 1


async def delay(seconds: float) -> None:
    """Suspend the calling coroutine for `seconds`."""
    await asyncio.sleep(seconds)
