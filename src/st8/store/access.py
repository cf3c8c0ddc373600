"""Guarded store handle with ergonomic magic methods.

Usage:
    store = create_store({"data": {"a": 1}, "mutations": {"set_a": set_a}})

    # Explicit access
    store.get("a")
    store.commit("set_a", 5)
    await store.action("load", "id-1")

    # Dict/attribute style, both routed through get()
    store["a"], store.a

    # Presence check, not subject to the falsy-read rule
    if "a" in store: ...

    # Writes are silently ignored
    store.a = 99
    store["a"] = 99
    del store.a

Gotcha: data keys that collide with handle methods (`get`, `has`, `commit`,
`action`, `run_action_sync`) are only reachable through `get()` or `store[key]`.
Keys starting with an underscore are likewise not attributes: `store._x` raises
AttributeError, `store["_x"]` reads the key.
"""

from __future__ import annotations

import copy
from typing import Any

from st8.config import StoreSettings
from st8.core.errors import NoDirectAccessForYou
from st8.store import dispatch
from st8.store.models import StoreRoot


def _truthy(value: Any) -> bool:
    # Reads never fail: a value whose truth test raises (numpy arrays,
    # DataFrames) counts as truthy.
    try:
        return bool(value)
    except Exception:
        return True


class Store:
    """Handle through which all reads and dispatches on one store are routed.

    The root record is held privately. Reads come from its data dict, writes
    are absorbed, and the only way to change state is `commit` (directly or
    from inside an action).

    Args:
        root: Root record to guard.
        settings: Read behaviour (falsy-as-absent, copy-on-read).
    """

    __slots__ = ("__root", "__falsy_reads_absent", "__copy_reads")

    def __init__(self, root: StoreRoot, settings: StoreSettings) -> None:
        object.__setattr__(self, "_Store__root", root)
        object.__setattr__(self, "_Store__falsy_reads_absent", settings.falsy_reads_absent)
        object.__setattr__(self, "_Store__copy_reads", settings.copy_reads)

    def _trap(self, key: str) -> None:
        if key == "data":
            raise NoDirectAccessForYou()

    def get(self, key: str) -> Any:
        """Read a value from the store.

        `"commit"` and `"action"` return the bound dispatch methods.

        Args:
            key: Data key.

        Returns:
            The stored value, or None if absent (or falsy, unless
            `falsy_reads_absent` is disabled).

        Raises:
            NoDirectAccessForYou: If key is "data".
        """
        self._trap(key)
        if key == "commit":
            return self.commit
        if key == "action":
            return self.action

        data = self.__root.data
        if key not in data:
            return None
        value = data[key]
        if value is None or (self.__falsy_reads_absent and not _truthy(value)):
            return None
        if self.__copy_reads:
            return copy.deepcopy(value)
        return value

    def has(self, key: str) -> bool:
        """Check if a data key is present, regardless of its value."""
        self._trap(key)
        return key in self.__root.data

    def commit(self, name: str, value: Any = None) -> Any:
        """Run a mutation. See `st8.store.dispatch.commit`."""
        return dispatch.commit(self.__root, name, value)

    def action(self, name: str, value: Any = None) -> Any:
        """Run an action, returning its result (or coroutine) verbatim."""
        return dispatch.action(self.__root, name, value)

    def run_action_sync(self, name: str, value: Any = None) -> Any:
        """Run an action from sync code, blocking until it completes."""
        return dispatch.run_action_sync(self.__root, name, value)

    def __getattr__(self, name: str) -> Any:
        """store.key -> get("key"). Only reached when normal lookup misses."""
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __getitem__(self, key: str) -> Any:
        """store[key] -> get(key)."""
        return self.get(key)

    def __contains__(self, key: str) -> bool:
        """key in store -> has(key)."""
        return self.has(key)

    def __setattr__(self, name: str, value: Any) -> None:
        pass

    def __delattr__(self, name: str) -> None:
        pass

    def __setitem__(self, key: str, value: Any) -> None:
        pass

    def __delitem__(self, key: str) -> None:
        pass

    def __repr__(self) -> str:
        mutations = sorted(self.__root.mutations)
        actions = sorted(self.__root.actions)
        return f"Store(mutations={mutations}, actions={actions})"
