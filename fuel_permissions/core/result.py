"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Authorization
denials and storage failures are ordinary outcomes for callers of the
permissions engine, so they travel as data.

Usage:
    result = engine.is_authorized("alice", "model-42", Action.WRITE)
    match result:
        case Success(value=allowed):
            ...
        case Failure(error=error):
            raise HTTPException(403, error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
