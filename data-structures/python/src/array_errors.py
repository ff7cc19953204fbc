"""Error taxonomy for the dynamic array.

Every fallible array operation fails with exactly one of three exception
kinds. The classes also derive from the matching built-in error so code
written against ordinary sequences keeps working.

For callers that prefer values over exceptions, ``attempt`` runs one
operation and folds the outcome into a ``Result`` tagged with an
``ErrorKind``.
"""

from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

T = TypeVar('T')


class ArrayListError(Exception):
    """Base class for all dynamic array failures."""

    kind: 'ErrorKind'


class EmptyListError(ArrayListError, IndexError):
    """The operation needs at least one element and the array is empty."""


class OutOfBoundsError(ArrayListError, IndexError):
    """An index falls outside the range valid for the operation."""


class AllocationError(ArrayListError, MemoryError):
    """The backing buffer could not be allocated."""


class ErrorKind(Enum):
    SUCCESS = "success"
    EMPTY_LIST = "empty_list"
    OUT_OF_BOUNDS = "out_of_bounds"
    ALLOCATION = "allocation"


EmptyListError.kind = ErrorKind.EMPTY_LIST
OutOfBoundsError.kind = ErrorKind.OUT_OF_BOUNDS
AllocationError.kind = ErrorKind.ALLOCATION


class Result(Generic[T]):
    """Outcome of a single array operation: a value or an error kind."""

    __slots__ = ("kind", "value", "error")

    def __init__(self, kind: ErrorKind, value: Optional[T] = None,
                 error: Optional[ArrayListError] = None) -> None:
        self.kind = kind
        self.value = value
        self.error = error

    @classmethod
    def ok(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(ErrorKind.SUCCESS, value)

    @classmethod
    def err(cls, error: ArrayListError) -> 'Result[T]':
        return cls(error.kind, error=error)

    @property
    def is_ok(self) -> bool:
        return self.kind is ErrorKind.SUCCESS

    def unwrap(self) -> Optional[T]:
        """Return the value, or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Result):
            return NotImplemented
        return self.kind is other.kind and self.value == other.value

    def __repr__(self) -> str:
        if self.is_ok:
            return f"Result.ok({self.value!r})"
        return f"Result.err({self.kind.name})"


def attempt(operation: Callable[..., T], *args: Any) -> 'Result[T]':
    """Call ``operation(*args)`` and capture array errors as a ``Result``.

    Exceptions that are not ``ArrayListError`` propagate unchanged.
    """
    try:
        return Result.ok(operation(*args))
    except ArrayListError as exc:
        return Result.err(exc)
