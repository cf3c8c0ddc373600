"""Core type definitions for st8."""

from collections.abc import Callable
from typing import Any, TypeAlias, TypeVar

T = TypeVar("T")

Seedable: TypeAlias = T | Callable[[], T] | None
"""Type alias for a seed input: a value, a zero-argument producer of it, or nothing.

Every group of a seed (`data`, `mutations`, `actions`) accepts this shape and is
resolved with `st8.core.utils.resolve` before validation.
"""

Mutation: TypeAlias = Callable[[dict[str, Any], Any], Any]
"""Synchronous function receiving the live data dict and a payload."""

Commit: TypeAlias = Callable[..., Any]
"""Commit capability handed to actions: `commit(name, value=None)`."""

Action: TypeAlias = Callable[[Commit, Any], Any]
"""Function (sync or async) receiving the commit capability and a payload."""

