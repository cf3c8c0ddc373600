"""Store models: seed and root record."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from st8.core.types import Action, Mutation, Seedable


@dataclass(frozen=True)
class Seed:
    """Typed seed for `create_store`.

    A plain mapping with the same keys is accepted too.
    """

    data: Seedable[dict[str, Any]] = None
    mutations: Seedable[dict[str, Mutation]] = None
    actions: Seedable[dict[str, Action]] = None


@dataclass(frozen=True, slots=True)
class StoreRoot:
    """Root record of one store. Slots are fixed; only `data` contents change."""

    data: dict[str, Any]
    mutations: MappingProxyType[str, Mutation]
    actions: MappingProxyType[str, Action]

    @classmethod
    def build(
        cls,
        data: dict[str, Any],
        mutations: dict[str, Mutation],
        actions: dict[str, Action],
    ) -> StoreRoot:
        """Assemble a root record, sealing mutations and actions read-only."""
        return cls(
            data=data,
            mutations=MappingProxyType(mutations),
            actions=MappingProxyType(actions),
        )
