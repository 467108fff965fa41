"""
Unit tests for the color registry.
"""

import dataclasses
import unittest

from cuber.colors import COLORLESS, COLORS, WHITE, YELLOW, get_color_by_initial, get_color_by_name


class TestColors(unittest.TestCase):
    """Test cases for the color registry."""

    def test_lookups(self):
        """Test lookups by initial and name."""
        self.assertIs(get_color_by_initial("w"), WHITE)
        self.assertIs(get_color_by_name("Yellow"), YELLOW)
        self.assertIs(get_color_by_initial("X"), COLORLESS)
        self.assertIsNone(get_color_by_name("purple"))

    def test_six_distinct_initials(self):
        """Test that sticker colors have unique initials."""
        self.assertEqual(len({color.initial for color in COLORS}), 6)
        self.assertNotIn(COLORLESS, COLORS)

    def test_colors_are_immutable(self):
        """Test that a Color cannot be changed."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            WHITE.hex = "#000"


if __name__ == '__main__':
    unittest.main()
