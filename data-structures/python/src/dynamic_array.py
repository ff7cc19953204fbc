"""
Dynamic Array -- Generic resizable array over a contiguous NumPy buffer.

The array owns one ndarray of ``capacity`` slots and tracks how many of them
hold live elements (``length``). Appends are amortized O(1): when the buffer is
full it is reallocated to 1.5x its size and the live prefix is copied over.
Positional inserts and removals shift the tail of the buffer by one slot with a
single bulk move, so they cost O(length - index).

Any Python value can be stored with the default ``object`` dtype. Passing a
concrete NumPy dtype gives an unboxed, typed buffer instead.
"""

import logging
import operator
from typing import Generic, Optional, TypeVar

import numpy as np

from array_errors import (
    AllocationError,
    ArrayListError,
    EmptyListError,
    ErrorKind,
    OutOfBoundsError,
    Result,
    attempt,
)

__all__ = [
    "DynamicArray",
    "INITIAL_CAPACITY",
    "GROWTH_FACTOR",
    "grow_target",
    "ArrayListError",
    "EmptyListError",
    "OutOfBoundsError",
    "AllocationError",
    "ErrorKind",
    "Result",
    "attempt",
]

logger = logging.getLogger(__name__)

T = TypeVar('T')

INITIAL_CAPACITY = 10
GROWTH_FACTOR = 1.5


def grow_target(capacity: int) -> int:
    """Capacity to request when a buffer of ``capacity`` slots is full.

    Always strictly larger than ``capacity``: ``floor(1 * 1.5)`` is 1, so small
    capacities fall back to ``capacity + 1``.
    """
    return max(int(capacity * GROWTH_FACTOR), capacity + 1)


def _allocate(capacity: int, dtype) -> np.ndarray:
    try:
        return np.empty(capacity, dtype=dtype)
    except (MemoryError, ValueError) as exc:
        logger.warning("Failed to allocate %d slots of %s: %s", capacity, dtype, exc)
        raise AllocationError(
            f"DynamicArray: cannot allocate {capacity} slots"
        ) from exc


class DynamicArray(Generic[T]):
    """Resizable array with explicit length/capacity bookkeeping.

    Invariants:
        0 <= length <= capacity
        capacity >= INITIAL_CAPACITY
    Failed operations leave length, capacity and contents untouched.

    The array has a single owner and no internal locking. ``destroy`` ends its
    life; using it afterwards is undefined.
    """

    def __init__(self, dtype: np.dtype = object) -> None:
        """
        Args:
            dtype: Element dtype of the backing buffer. ``object`` stores
                arbitrary Python values; a NumPy dtype stores them unboxed.

        Raises:
            AllocationError: if the initial buffer cannot be allocated
        """
        self._data: np.ndarray = _allocate(INITIAL_CAPACITY, dtype)
        self._length = 0
        self._capacity = INITIAL_CAPACITY

    @classmethod
    def create(cls, dtype: np.dtype = object) -> 'DynamicArray[T]':
        return cls(dtype)

    def destroy(self) -> None:
        """Release the buffer. The array must not be used afterwards."""
        self._data = None
        self._length = 0
        self._capacity = 0

    def __enter__(self) -> 'DynamicArray[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    # -- inspection ---------------------------------------------------------

    def len(self) -> int:
        return self._length

    def is_empty(self) -> bool:
        return self._length == 0

    def capacity(self) -> int:
        return self._capacity

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    # -- access -------------------------------------------------------------

    def _check_index(self, index: int, name: str) -> int:
        if self._length == 0:
            raise EmptyListError(f"DynamicArray.{name}: array is empty")
        index = operator.index(index)
        if index < 0 or index >= self._length:
            raise OutOfBoundsError(
                f"DynamicArray.{name}: index {index} out of range for length {self._length}"
            )
        return index

    def get(self, index: int) -> T:
        index = self._check_index(index, "get")
        return self._data[index]

    def get_first(self) -> T:
        if self._length == 0:
            raise EmptyListError("DynamicArray.get_first: array is empty")
        return self._data[0]

    def get_last(self) -> T:
        if self._length == 0:
            raise EmptyListError("DynamicArray.get_last: array is empty")
        return self._data[self._length - 1]

    def set(self, index: int, new_value: T) -> T:
        """Replace the element at ``index`` and return the previous one."""
        index = self._check_index(index, "set")
        old = self._data[index]
        self._data[index] = self._coerce(new_value)
        return old

    def data(self) -> Optional[np.ndarray]:
        """View of the live elements, or None when empty.

        The view aliases the internal buffer. It is invalidated by any later
        add, remove, grow, reserve or shrink_to_fit.
        """
        if self._length == 0:
            return None
        return self._data[:self._length]

    # -- growth -------------------------------------------------------------

    def _reallocate(self, new_capacity: int) -> None:
        new_data = _allocate(new_capacity, self._data.dtype)
        new_data[:self._length] = self._data[:self._length]
        logger.debug(
            "DynamicArray reallocated %d -> %d slots (length=%d)",
            self._capacity, new_capacity, self._length,
        )
        self._data = new_data
        self._capacity = new_capacity

    def grow(self, new_capacity: int) -> None:
        """Reallocate the buffer to exactly ``new_capacity`` slots.

        Elements keep their indices. On AllocationError the old buffer stays in
        place unchanged.

        Raises:
            ValueError: if ``new_capacity`` would drop live elements or go below
                INITIAL_CAPACITY
            AllocationError: if the new buffer cannot be allocated
        """
        new_capacity = operator.index(new_capacity)
        if new_capacity < self._length or new_capacity < INITIAL_CAPACITY:
            raise ValueError(
                f"DynamicArray.grow: capacity {new_capacity} below "
                f"max(length={self._length}, {INITIAL_CAPACITY})"
            )
        self._reallocate(new_capacity)

    def reserve(self, min_capacity: int) -> None:
        if min_capacity <= self._capacity:
            return
        self.grow(min_capacity)

    def shrink_to_fit(self) -> None:
        """Release unused slots, keeping at least INITIAL_CAPACITY."""
        target = max(self._length, INITIAL_CAPACITY)
        if target < self._capacity:
            self._reallocate(target)

    # -- insertion ----------------------------------------------------------

    def _coerce(self, element):
        if self._data.dtype == object:
            return element
        # Typed buffers reject bad values here, before anything has moved.
        return np.asarray(element, dtype=self._data.dtype)[()]

    def add(self, index: int, element: T) -> None:
        """Insert ``element`` before position ``index``.

        ``index == len()`` appends. Raises OutOfBoundsError for
        ``index > len()`` and AllocationError if a needed growth fails.
        """
        index = operator.index(index)
        if index < 0 or index > self._length:
            raise OutOfBoundsError(
                f"DynamicArray.add: index {index} out of range for length {self._length}"
            )
        value = self._coerce(element)
        if self._length == self._capacity:
            self._reallocate(grow_target(self._capacity))
        if index < self._length:
            self._data[index + 1:self._length + 1] = self._data[index:self._length]
        self._data[index] = value
        self._length += 1

    def add_first(self, element: T) -> None:
        self.add(0, element)

    def add_last(self, element: T) -> None:
        self.add(self._length, element)

    # -- removal ------------------------------------------------------------

    def remove(self, index: int) -> T:
        index = self._check_index(index, "remove")
        removed = self._data[index]
        last = self._length - 1
        if index < last:
            self._data[index:last] = self._data[index + 1:self._length]
        if self._data.dtype == object:
            self._data[last] = None
        self._length = last
        return removed

    def remove_first(self) -> T:
        return self.remove(0)

    def remove_last(self) -> T:
        if self._length == 0:
            raise EmptyListError("DynamicArray.remove_last: array is empty")
        return self.remove(self._length - 1)

    def clear(self) -> None:
        """Drop every element. Capacity is kept."""
        if self._data.dtype == object:
            self._data[:self._length] = None
        self._length = 0

    def copy(self) -> 'DynamicArray[T]':
        clone: DynamicArray[T] = DynamicArray(self._data.dtype)
        clone._data = _allocate(self._capacity, self._data.dtype)
        clone._data[:self._length] = self._data[:self._length]
        clone._length = self._length
        clone._capacity = self._capacity
        return clone

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        items = self._data[:self._length].tolist()
        return f"DynamicArray({items!r}, capacity={self._capacity})"
