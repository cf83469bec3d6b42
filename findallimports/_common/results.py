"""Result shapes returned by every findallimports entry point.

A traversal never raises across the public boundary. It returns exactly one
of two shapes, at every level of the recursion:

- ``Success``: the visited set, plus the accumulator for callback variants
- ``Failure``: a non-empty tuple of ``TraversalError``
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence, Set, Tuple


logger = logging.getLogger(__name__)


class ErrorKind(Enum):
    """Closed set of reasons a traversal can fail."""
    INVALID_INPUT = "invalid_input"
    DEPTH_EXCEEDED = "depth_exceeded"
    FILE_NOT_FOUND = "file_not_found"
    PARSE_FAILURE = "parse_failure"
    VALIDATION_SCHEMA_FAILURE = "validation_schema_failure"
    CALLBACK_FAILURE = "callback_failure"


@dataclass(frozen=True)
class TraversalError:
    """One human-readable error with its kind."""
    message: str
    kind: ErrorKind

    def __str__(self) -> str:
        return self.message


class FindAllImportsError(Exception):
    """Raised by ``raise_for_errors()`` when a traversal failed."""

    def __init__(self, errors: Sequence[TraversalError]):
        self.errors = tuple(errors)
        super().__init__("\n".join(error.message for error in self.errors))

    @property
    def kind(self) -> ErrorKind:
        """Kind of the first (and usually only) error."""
        return self.errors[0].kind


@dataclass(frozen=True, eq=False)
class Success:
    """Successful traversal.

    ``visited`` and ``accumulator`` are the very objects the traversal
    worked on, never copies.
    """

    visited: Set[str]
    accumulator: Optional[Any] = None

    success = True

    def raise_for_errors(self) -> "Success":
        return self

    def __repr__(self) -> str:
        return f"Success(visited={len(self.visited)} files)"


@dataclass(frozen=True)
class Failure:
    """Failed traversal carrying at least one error."""

    errors: Tuple[TraversalError, ...]

    success = False

    def __post_init__(self):
        if not self.errors:
            raise ValueError("Failure requires at least one error")

    @property
    def kind(self) -> ErrorKind:
        return self.errors[0].kind

    def raise_for_errors(self) -> "Success":
        """Turn this failure into a ``FindAllImportsError``."""
        raise FindAllImportsError(self.errors)


def make_success(visited: Set[str], accumulator: Optional[Any] = None) -> Success:
    """Build a success result around the shared visited set."""
    return Success(visited=visited, accumulator=accumulator)


def make_failure(message: str, kind: ErrorKind) -> Failure:
    """Build a failure result with a single error.

    Args:
        message: What went wrong, without the ``ERROR.`` prefix
        kind: Category of the failure

    Returns:
        Failure holding one TraversalError
    """
    logger.debug("Traversal failure (%s): %s", kind.value, message)
    return Failure(errors=(TraversalError(message=f"ERROR. {message}", kind=kind),))


def is_supposed_to_be(param_name: str, param_kind: str) -> str:
    """Standard wording for type errors on inputs."""
    return f"{param_name} is supposed to be {param_kind}."
