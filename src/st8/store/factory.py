"""Store factory.

Usage:
    store = create_store({
        "data": {"x": None},
        "mutations": {"set_x": set_x},
        "actions": lambda: {"go": go},
    })

    # Or with a typed seed and explicit settings
    store = create_store(Seed(data={"x": 1}), settings=StoreSettings(copy_reads=True))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from st8.config import StoreSettings, default_settings
from st8.core.errors import NoPointError, SeedRequiredError
from st8.core.utils import has_props
from st8.core.validation import normalize
from st8.store.access import Store
from st8.store.models import Seed, StoreRoot

_logger = logging.getLogger(__name__)

SEED_GROUPS = ("data", "mutations", "actions")


def _seed_groups(seed: Any) -> dict[str, Any]:
    if isinstance(seed, Seed):
        return {group: getattr(seed, group) for group in SEED_GROUPS}
    if isinstance(seed, Mapping):
        return {group: seed.get(group) for group in SEED_GROUPS}
    raise SeedRequiredError()


def create_store(seed: Seed | Mapping[str, Any], *, settings: StoreSettings | None = None) -> Store:
    """Create a guarded store from a seed.

    Either returns a fully valid handle or raises before returning anything.

    Args:
        seed: Mapping or Seed with optional `data`, `mutations`, `actions`,
            each a mapping or a zero-argument producer of one.
        settings: Read behaviour; `default_settings()` if omitted.

    Returns:
        The guarded Store handle.

    Raises:
        SeedRequiredError: If seed is not a Mapping or Seed.
        NoPointError: If the store would have no data keys and no mutations.
        ValidationError: If a group does not resolve to a mapping.
        DisallowedTypeError: If a mutation or action is not callable.
        DontTouchMyReservedwords: If any group uses a reserved key.
    """
    groups = _seed_groups(seed)
    data = normalize(groups["data"], "data")
    mutations = normalize(groups["mutations"], "mutations")
    actions = normalize(groups["actions"], "actions")

    if not has_props(data) and not has_props(mutations):
        raise NoPointError()

    root = StoreRoot.build(data=data, mutations=mutations, actions=actions)
    _logger.debug(
        "created store: %d data keys, %d mutations, %d actions",
        len(data),
        len(mutations),
        len(actions),
    )
    return Store(root, settings if settings is not None else default_settings())
