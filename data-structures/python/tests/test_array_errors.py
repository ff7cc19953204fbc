import sys
import os
import unittest
from unittest.mock import patch

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import dynamic_array
from dynamic_array import DynamicArray
from array_errors import (
    ArrayListError,
    AllocationError,
    EmptyListError,
    ErrorKind,
    OutOfBoundsError,
    Result,
    attempt,
)


class TestErrorTaxonomy(unittest.TestCase):
    def test_kinds(self):
        self.assertIs(EmptyListError.kind, ErrorKind.EMPTY_LIST)
        self.assertIs(OutOfBoundsError.kind, ErrorKind.OUT_OF_BOUNDS)
        self.assertIs(AllocationError.kind, ErrorKind.ALLOCATION)

    def test_hierarchy(self):
        for cls in (EmptyListError, OutOfBoundsError, AllocationError):
            self.assertTrue(issubclass(cls, ArrayListError))
        self.assertTrue(issubclass(EmptyListError, IndexError))
        self.assertTrue(issubclass(OutOfBoundsError, IndexError))
        self.assertTrue(issubclass(AllocationError, MemoryError))

    def test_allocation_error_chains_cause(self):
        with patch.object(dynamic_array.np, "empty", side_effect=MemoryError("oom")):
            with self.assertRaises(AllocationError) as ctx:
                DynamicArray()
        self.assertIsInstance(ctx.exception.__cause__, MemoryError)


class TestAttempt(unittest.TestCase):
    def test_success_carries_value(self):
        arr = DynamicArray()
        arr.add_last(7)
        result = attempt(arr.get, 0)
        self.assertTrue(result.is_ok)
        self.assertIs(result.kind, ErrorKind.SUCCESS)
        self.assertEqual(result.unwrap(), 7)

    def test_success_without_value(self):
        arr = DynamicArray()
        result = attempt(arr.add_last, 1)
        self.assertEqual(result, Result.ok())
        self.assertEqual(arr.len(), 1)

    def test_empty_list(self):
        arr = DynamicArray()
        for op in (arr.get_first, arr.get_last, arr.remove_first, arr.remove_last):
            self.assertIs(attempt(op).kind, ErrorKind.EMPTY_LIST)
        self.assertIs(attempt(arr.get, 0).kind, ErrorKind.EMPTY_LIST)

    def test_out_of_bounds(self):
        arr = DynamicArray()
        arr.add_last(1)
        self.assertIs(attempt(arr.get, 1).kind, ErrorKind.OUT_OF_BOUNDS)
        self.assertIs(attempt(arr.add, 2, "x").kind, ErrorKind.OUT_OF_BOUNDS)
        self.assertIs(attempt(arr.set, 5, "x").kind, ErrorKind.OUT_OF_BOUNDS)

    def test_allocation(self):
        arr = DynamicArray()
        result = attempt(arr.grow, 2 ** 62)
        self.assertIs(result.kind, ErrorKind.ALLOCATION)
        self.assertFalse(result.is_ok)
        self.assertEqual(arr.capacity(), 10)

    def test_unwrap_reraises(self):
        result = attempt(DynamicArray().remove, 0)
        with self.assertRaises(EmptyListError):
            result.unwrap()

    def test_other_exceptions_propagate(self):
        arr = DynamicArray()
        with self.assertRaises(ValueError):
            attempt(arr.grow, 3)

    def test_repr(self):
        self.assertEqual(repr(Result.ok(3)), "Result.ok(3)")
        arr = DynamicArray()
        self.assertEqual(repr(attempt(arr.get_last)), "Result.err(EMPTY_LIST)")


if __name__ == "__main__":
    unittest.main()
