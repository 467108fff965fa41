"""
Unit tests for directions.
"""

import dataclasses
import unittest

from cuber.directions import (
    BACK, DIRECTIONS, DOWN, FRONT, LEFT, RIGHT, UP,
    get_direction_by_id, get_direction_by_initial, get_direction_by_name, get_id_by_name,
)


class TestDirections(unittest.TestCase):
    """Test cases for the orientation algebra."""

    def test_opposites(self):
        """Test that opposites pair up."""
        self.assertIs(FRONT.get_opposite(), BACK)
        for direction in DIRECTIONS:
            self.assertIs(direction.opposite.opposite, direction)

    def test_neighbors_exclude_self_and_opposite(self):
        """Test every neighbor cycle holds the four side directions."""
        for direction in DIRECTIONS:
            self.assertEqual(len(set(direction.neighbors)), 4)
            self.assertNotIn(direction, direction.neighbors)
            self.assertNotIn(direction.opposite, direction.neighbors)

    def test_default_orientation(self):
        """Test lookups with the default up reference."""
        self.assertIs(FRONT.get_up(), UP)
        self.assertIs(FRONT.get_clockwise(), RIGHT)
        self.assertIs(FRONT.get_anticlockwise(), LEFT)

    def test_rotation_from_reference(self):
        """Test lookups with an explicit up reference."""
        self.assertIs(RIGHT.get_clockwise(FRONT), UP)
        self.assertIs(FRONT.get_right(DOWN), LEFT)
        self.assertIs(FRONT.get_down(UP), DOWN)
        self.assertIs(UP.get_clockwise(FRONT, 2), BACK)

    def test_undefined_orientation(self):
        """Test that self or opposite as up reference yields None."""
        self.assertIsNone(RIGHT.get_up(RIGHT))
        self.assertIsNone(RIGHT.get_up(LEFT))

    def test_registry_lookups(self):
        """Test lookups by id, name and initial."""
        self.assertIs(get_direction_by_id(3), DOWN)
        self.assertIs(get_direction_by_name("Down"), DOWN)
        self.assertIs(get_direction_by_initial("b"), BACK)
        self.assertEqual(get_id_by_name("left"), 4)
        self.assertIsNone(get_direction_by_name("sideways"))

    def test_directions_are_immutable(self):
        """Test that a Direction cannot be changed."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            FRONT.name = "back"


if __name__ == '__main__':
    unittest.main()
