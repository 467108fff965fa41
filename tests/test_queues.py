"""
Unit tests for the Queue class.
"""

import unittest

from cuber.queues import Queue
from cuber.twist import Twist


class TestQueue(unittest.TestCase):
    """Test cases for Queue."""

    def setUp(self):
        self.queue = Queue()
        self.queue.add(1, 2, 3)

    def test_do_and_undo(self):
        """Test items move between future and history."""
        self.assertEqual(self.queue.do(), 1)
        self.assertEqual(self.queue.do(), 2)
        self.assertEqual(self.queue.history, [1, 2])
        self.assertEqual(self.queue.undo(), 2)
        self.assertEqual(self.queue.future, [2, 3])
        self.assertEqual(self.queue.redo(), 2)
        self.assertEqual(len(self.queue), 1)

    def test_exhausted(self):
        """Test an empty queue returns None."""
        for _ in range(3):
            self.queue.do()
        self.assertIsNone(self.queue.do())
        self.assertEqual(self.queue.future, [])

    def test_looping(self):
        """Test a looping queue replays its history."""
        self.queue.is_looping = True
        for _ in range(3):
            self.queue.do()
        self.assertIsNone(self.queue.do())
        self.assertEqual(self.queue.future, [1, 2, 3])
        self.assertEqual(self.queue.history, [])
        self.assertEqual(self.queue.do(), 1)

    def test_empty(self):
        self.queue.empty()
        self.assertEqual(len(self.queue), 0)

    def test_validator(self):
        """Test a validator shapes what is appended."""
        queue = Queue(Twist.validate)
        added = queue.add("RU", "Q")
        self.assertEqual([t.command for t in added], ["R", "U"])
        self.assertEqual(queue.future, added)


if __name__ == '__main__':
    unittest.main()
