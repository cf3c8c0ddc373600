"""Seed normalization and reserved-word validation.

Each seed group (`data`, `mutations`, `actions`) goes through `normalize`:

    resolve -> must be a Mapping -> no reserved keys -> (callables only) -> dict copy

`check_reserved` is shared with the dispatcher, which re-runs it on the data
dict after every mutation.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from st8.core.errors import DisallowedTypeError, DontTouchMyReservedwords, ValidationError
from st8.core.utils import resolve

RESERVED_WORDS: frozenset[str] = frozenset({"data", "action", "commit"})

# Groups whose values must be callable
CALLABLE_GROUPS: frozenset[str] = frozenset({"mutations", "actions"})


def check_reserved(keys: Iterable[Any]) -> None:
    """Raise DontTouchMyReservedwords for the first reserved key.

    Args:
        keys: Keys to scan (a mapping iterates its keys).

    Raises:
        DontTouchMyReservedwords: If any key is a reserved word.
    """
    for key in keys:
        if key in RESERVED_WORDS:
            raise DontTouchMyReservedwords(key)


def validate(obj: Any, group: str) -> Mapping[str, Any]:
    """Validate a resolved seed group.

    Args:
        obj: The resolved group value.
        group: Group name, used for the callable rule and error messages.

    Returns:
        The same object, now known to be a valid mapping.

    Raises:
        ValidationError: If obj is not a mapping.
        DontTouchMyReservedwords: If obj has a reserved key.
        DisallowedTypeError: If a mutations/actions value is not callable.
    """
    if not isinstance(obj, Mapping):
        raise ValidationError(group)

    check_reserved(obj)

    if group in CALLABLE_GROUPS:
        for value in obj.values():
            if not callable(value):
                raise DisallowedTypeError(group, type(value).__name__)
    return obj


def normalize(raw: Any, group: str) -> dict[str, Any]:
    """Turn a raw seed input into a fresh, validated dict.

    Args:
        raw: A mapping, a zero-argument producer of one, or None.
        group: Group name ("data", "mutations" or "actions").

    Returns:
        Shallow copy of the validated mapping; never the caller's object.
    """
    return dict(validate(resolve(raw), group))
