"""Result types for railway-oriented programming.

Every engine, guard, codec and store operation returns a Result instead of
raising. Callers pattern-match on the outcome:

    result = await engine.sign_in(command)
    match result:
        case Success(value=tokens):
            ...
        case Failure(error=error):
            # error.code is an ErrorCode, error.message is human-readable
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation outcome.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation outcome.

    Attributes:
        error: The error describing what went wrong.
    """

    error: E


Result = Success[T] | Failure[E]
