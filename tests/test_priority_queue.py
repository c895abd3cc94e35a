#!/usr/bin/env python3
"""
Unit tests for the indexed min-priority-queue.
"""

import random
import unittest
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from mazepath.graph.common import EmptyQueueError
from mazepath.graph.priority_queue import MinPQueue


class TestMinPQueueBasics(unittest.TestCase):
    """Test cases for single operations."""

    def setUp(self):
        self.queue = MinPQueue(check_invariants=True)

    def test_new_queue_is_empty(self):
        self.assertTrue(self.queue.is_empty())
        self.assertEqual(self.queue.size(), 0)
        self.assertEqual(len(self.queue), 0)

    def test_empty_queue_operations_raise(self):
        with self.assertRaises(EmptyQueueError):
            self.queue.peek()
        with self.assertRaises(EmptyQueueError):
            self.queue.min_priority()
        with self.assertRaises(EmptyQueueError):
            self.queue.remove()

    def test_empty_queue_error_is_an_index_error(self):
        with self.assertRaises(IndexError):
            self.queue.remove()

    def test_add_single_element(self):
        self.queue.add_or_update("a", 3.5)
        self.assertFalse(self.queue.is_empty())
        self.assertEqual(self.queue.size(), 1)
        self.assertEqual(self.queue.peek(), "a")
        self.assertEqual(self.queue.min_priority(), 3.5)
        self.assertIn("a", self.queue)

    def test_peek_does_not_remove(self):
        self.queue.add_or_update("a", 1)
        self.queue.add_or_update("b", 2)
        self.assertEqual(self.queue.peek(), "a")
        self.assertEqual(self.queue.peek(), "a")
        self.assertEqual(self.queue.size(), 2)

    def test_remove_returns_minimum(self):
        for key, priority in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
            self.queue.add_or_update(key, priority)
        self.assertEqual(self.queue.remove(), "a")
        self.assertEqual(self.queue.remove(), "b")
        self.assertEqual(self.queue.remove(), "c")
        self.assertEqual(self.queue.remove(), "d")
        self.assertTrue(self.queue.is_empty())
        self.assertNotIn("a", self.queue)

    def test_update_decreases_priority(self):
        for key, priority in [("a", 1), ("b", 5), ("c", 7)]:
            self.queue.add_or_update(key, priority)
        self.queue.add_or_update("c", 0)
        self.assertEqual(self.queue.size(), 3)
        self.assertEqual(self.queue.peek(), "c")
        self.assertEqual(self.queue.min_priority(), 0)

    def test_update_increases_priority(self):
        for key, priority in [("a", 1), ("b", 5), ("c", 7)]:
            self.queue.add_or_update(key, priority)
        self.queue.add_or_update("a", 10)
        self.assertEqual(self.queue.priority_of("a"), 10)
        self.assertEqual(self.queue.remove(), "b")
        self.assertEqual(self.queue.remove(), "c")
        self.assertEqual(self.queue.remove(), "a")

    def test_update_with_same_priority_keeps_size(self):
        self.queue.add_or_update("a", 1)
        self.queue.add_or_update("a", 1)
        self.assertEqual(self.queue.size(), 1)

    def test_infinite_priority_allowed(self):
        self.queue.add_or_update("far", float("inf"))
        self.queue.add_or_update("near", 1e9)
        self.assertEqual(self.queue.remove(), "near")
        self.assertEqual(self.queue.min_priority(), float("inf"))

    def test_nan_priority_rejected(self):
        with self.assertRaises(ValueError):
            self.queue.add_or_update("a", float("nan"))
        self.assertTrue(self.queue.is_empty())

    def test_priority_of_missing_key_raises(self):
        with self.assertRaises(KeyError):
            self.queue.priority_of("missing")

    def test_ties_are_all_returned(self):
        for key in "abcde":
            self.queue.add_or_update(key, 2.0)
        removed = {self.queue.remove() for _ in range(5)}
        self.assertEqual(removed, set("abcde"))


class TestMinPQueueInvariantChecking(unittest.TestCase):
    """The invariant checker must notice a corrupted heap."""

    def test_corrupted_heap_order_detected(self):
        queue = MinPQueue(check_invariants=True)
        for key, priority in [("a", 1), ("b", 2), ("c", 3)]:
            queue.add_or_update(key, priority)
        queue._heap[0], queue._heap[2] = queue._heap[2], queue._heap[0]
        with self.assertRaises(AssertionError):
            queue._assert_invariants()

    def test_corrupted_index_detected(self):
        queue = MinPQueue(check_invariants=True)
        for key, priority in [("a", 1), ("b", 2)]:
            queue.add_or_update(key, priority)
        queue._index["a"] = 1
        with self.assertRaises(AssertionError):
            queue._assert_invariants()


class TestMinPQueueRandomized(unittest.TestCase):
    """Property tests over random operation sequences."""

    def test_random_operations_preserve_invariants(self):
        rng = random.Random(2110)
        for trial in range(50):
            queue = MinPQueue(check_invariants=True)
            expected = {}
            for _ in range(200):
                if expected and rng.random() < 0.3:
                    key = queue.remove()
                    self.assertEqual(expected[key], min(expected.values()))
                    del expected[key]
                else:
                    key = rng.randrange(30)
                    priority = rng.uniform(-100, 100)
                    queue.add_or_update(key, priority)
                    expected[key] = priority
                # check_invariants raises inside the queue if anything breaks
                self.assertEqual(queue.size(), len(expected))
                if expected:
                    self.assertEqual(queue.min_priority(), min(expected.values()))

    def test_removal_order_is_non_decreasing(self):
        rng = random.Random(7)
        queue = MinPQueue(check_invariants=True)
        for key in range(300):
            queue.add_or_update(key, rng.randint(0, 50))
        for key in rng.sample(range(300), 100):
            queue.add_or_update(key, rng.randint(0, 50))

        priorities = []
        while not queue.is_empty():
            priorities.append(queue.min_priority())
            queue.remove()
        self.assertEqual(len(priorities), 300)
        self.assertEqual(priorities, sorted(priorities))


if __name__ == '__main__':
    unittest.main()
