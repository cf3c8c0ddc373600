"""st8: a guarded state container with mutations and actions.

Usage:
    from st8 import create_store

    def set_x(data, value):
        data["x"] = value

    async def go(commit, value):
        await delay(0.001)
        commit("set_x", value)

    store = create_store({
        "data": {"x": None},
        "mutations": {"set_x": set_x},
        "actions": {"go": go},
    })

    store.x = "ignored"        # writes are no-ops
    store.commit("set_x", 1)   # the only way to change state
    await store.action("go", "tigerbalm")
    assert store.x == "tigerbalm"

Configuration:
    Stores created without `settings=` share `st8.config.default_settings()`,
    read once per process from ST8_* environment variables and `.env`.
    ST8_FALSY_READS_ABSENT=false there changes read semantics for every such
    store; pass `settings=StoreSettings(...)` to pin them.
"""

__version__ = "0.1.0"

# Configuration
from st8.config import StoreSettings

# Core primitives
from st8.core import (
    RESERVED_WORDS,
    DisallowedTypeError,
    DontTouchMyReservedwords,
    NoDirectAccessForYou,
    NoPointError,
    NoSuchActionError,
    NoSuchMutationError,
    SeedRequiredError,
    StoreError,
    ValidationError,
    delay,
    has_props,
    resolve,
    value_or_function,
)

# Store
from st8.store import Seed, Store, create_store

__all__ = [
    # Version
    "__version__",
    # Store
    "create_store",
    "Store",
    "Seed",
    "StoreSettings",
    "RESERVED_WORDS",
    # Errors
    "StoreError",
    "SeedRequiredError",
    "NoPointError",
    "ValidationError",
    "DisallowedTypeError",
    "DontTouchMyReservedwords",
    "NoDirectAccessForYou",
    "NoSuchMutationError",
    "NoSuchActionError",
    # Utils
    "value_or_function",
    "resolve",
    "has_props",
    "delay",
]
