"""Error taxonomy.

Every violation is raised synchronously at the point it happens and is never
caught inside the package. The class name carries the error kind; the message
carries the detail.
"""

from __future__ import annotations


class StoreError(Exception):
    """Base exception for all st8 errors."""


class SeedRequiredError(StoreError):
    """Construction called without a seed mapping."""

    def __init__(self, message: str = "Must supply a mapping to `create_store()`") -> None:
        super().__init__(message)


class NoPointError(StoreError):
    """Seed has neither data keys nor mutations."""

    def __init__(self, message: str = "Must have at least 1 data or mutation prop") -> None:
        super().__init__(message)


class ValidationError(StoreError):
    """A seed group does not resolve to a mapping."""

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"{group} doesn't resolve to an object")


class DisallowedTypeError(StoreError):
    """A mutations/actions entry is not callable."""

    def __init__(self, group: str, type_name: str) -> None:
        self.group = group
        self.type_name = type_name
        super().__init__(f"{group} can't accept {type_name}")


class DontTouchMyReservedwords(StoreError):
    """A reserved word was used as a key, at construction or by a mutation."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(key)


class NoDirectAccessForYou(StoreError):
    """The raw data mapping was requested through the handle."""

    def __init__(self, message: str = "you must use a mutation.") -> None:
        super().__init__(message)


class NoSuchMutationError(StoreError):
    """Commit against an unregistered mutation name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not a registered mutation.")


class NoSuchActionError(StoreError):
    """Dispatch against an unregistered action name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} is not a registered action.")
