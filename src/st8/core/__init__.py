"""Core functionalities: stateless helpers, validation and the error taxonomy.

Architecture Note:
    core/ contains pure, stateless functions with no runtime state of their own.
    For the stateful store handle and its dispatcher, see store/.
"""

from st8.core.errors import (
    DisallowedTypeError,
    DontTouchMyReservedwords,
    NoDirectAccessForYou,
    NoPointError,
    NoSuchActionError,
    NoSuchMutationError,
    SeedRequiredError,
    StoreError,
    ValidationError,
)
from st8.core.types import Action, Commit, Mutation, Seedable
from st8.core.utils import delay, has_props, resolve, value_or_function
from st8.core.validation import RESERVED_WORDS, check_reserved, normalize, validate

__all__ = [
    # Types
    "Seedable",
    "Mutation",
    "Action",
    "Commit",
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
    # Validation
    "RESERVED_WORDS",
    "check_reserved",
    "validate",
    "normalize",
]
