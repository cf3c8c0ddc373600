"""Store handle, root record and dispatcher.

Architecture Note:
    store/ is the stateful layer. Unlike core/ (stateless helpers), it owns
    the root record of each store and routes every read and write through
    the guarded handle.
"""

from st8.store.access import Store
from st8.store.dispatch import action, bind_commit, commit, run_action_sync
from st8.store.factory import create_store
from st8.store.models import Seed, StoreRoot

__all__ = [
    "Store",
    "StoreRoot",
    "Seed",
    "create_store",
    "commit",
    "action",
    "bind_commit",
    "run_action_sync",
]
