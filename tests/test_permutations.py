"""
Unit tests for the slot permutation tables.
"""

import unittest
import numpy as np

from cuber.cubelet import decompose_address
from cuber.exceptions import PermutationError
from cuber.permutations import SLOTS, TABLES, apply_permutation, get_table

COMMANDS = "XLMRYUEDZFSB"


def compose(*commands):
    slots = np.arange(SLOTS)
    for command in commands:
        slots = slots[TABLES[command]]
    return slots


class TestPermutations(unittest.TestCase):
    """Test cases for the 24 twist permutations."""

    def test_all_commands_present(self):
        """Test there is a table for each case of each letter."""
        self.assertEqual(len(TABLES), 24)
        for letter in COMMANDS:
            self.assertIn(letter, TABLES)
            self.assertIn(letter.lower(), TABLES)

    def test_bijections(self):
        """Test every table is a permutation of the 27 slots."""
        for command, table in TABLES.items():
            self.assertTrue(np.array_equal(np.sort(table), np.arange(SLOTS)), command)

    def test_inverse_law(self):
        """Test each command undoes its opposite case on arbitrary labels."""
        labels = np.random.default_rng(7).permutation(100)[:SLOTS]
        for letter in COMMANDS:
            upper, lower = TABLES[letter], TABLES[letter.lower()]
            self.assertTrue(np.array_equal(labels[upper][lower], labels), letter)
            self.assertTrue(np.array_equal(labels[lower][upper], labels), letter)

    def test_order_four(self):
        """Test four quarter turns are the identity."""
        for command in TABLES:
            self.assertTrue(np.array_equal(compose(*command * 4), np.arange(SLOTS)), command)

    def test_whole_cube_is_three_layers(self):
        """Test whole-cube turns compose from their three layers."""
        self.assertTrue(np.array_equal(compose("X"), compose("R", "m", "l")))
        self.assertTrue(np.array_equal(compose("x"), compose("r", "M", "L")))
        self.assertTrue(np.array_equal(compose("Y"), compose("U", "e", "d")))
        self.assertTrue(np.array_equal(compose("y"), compose("u", "E", "D")))
        self.assertTrue(np.array_equal(compose("Z"), compose("F", "S", "b")))
        self.assertTrue(np.array_equal(compose("z"), compose("f", "s", "B")))

    def test_layers_stay_in_their_slice(self):
        """Test layer turns only move slots of their own slice."""
        layers = {
            "R": (0, 1), "M": (0, 0), "L": (0, -1),
            "U": (1, 1), "E": (1, 0), "D": (1, -1),
            "F": (2, 1), "S": (2, 0), "B": (2, -1),
        }
        for letter, (axis, value) in layers.items():
            for command in (letter, letter.lower()):
                table = TABLES[command]
                for slot in range(SLOTS):
                    inside = decompose_address(slot)[axis] == value
                    if not inside:
                        self.assertEqual(table[slot], slot, command)
                    else:
                        self.assertEqual(decompose_address(int(table[slot]))[axis], value, command)

    def test_apply_permutation(self):
        """Test applying a table to a list of objects."""
        items = [object() for _ in range(SLOTS)]
        turned = apply_permutation(items, "R")
        self.assertIsNot(turned, items)
        self.assertIs(turned[20], items[2])
        self.assertEqual(apply_permutation(items, "R", 4), items)
        self.assertEqual(apply_permutation(items, "U", 0), items)

    def test_apply_permutation_errors(self):
        """Test bad input raises PermutationError."""
        with self.assertRaises(PermutationError):
            apply_permutation([object()] * 26, "R")
        with self.assertRaises(PermutationError):
            apply_permutation([object() for _ in range(SLOTS)], "Q")
        shared = object()
        with self.assertRaises(PermutationError):
            apply_permutation([shared] * SLOTS, "R")

    def test_get_table_copies(self):
        """Test get_table hands out a copy."""
        table = get_table("R")
        table[0] = 26
        self.assertEqual(TABLES["R"][0], 0)
        with self.assertRaises(PermutationError):
            get_table("Q")


if __name__ == '__main__':
    unittest.main()
