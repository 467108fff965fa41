"""
Facing directions and the orientation algebra between them.

The six Directions spiral around a cube: front, up, right, down, left,
back. Each one knows its four neighbors in clockwise order starting from
the neighbor it considers "up", and its opposite:

                     ---------
                    |    0    |
                    |  getUp  |
           --------- --------- ---------
          |    3    |         |    1    |
          | getLeft |  this   | getRight|
           --------- --------- ---------
                    |    2    |
                    | getDown |
                     ---------

    FRONT.get_opposite() is BACK
    FRONT.get_up() is UP
    FRONT.get_right(DOWN) is LEFT
    FRONT.get_clockwise() is RIGHT
    RIGHT.get_clockwise(FRONT) is UP

A direction cannot use itself or its opposite as the up reference:

    RIGHT.get_up(RIGHT) is None
    RIGHT.get_up(LEFT) is None
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


# Neighbor ids in [up, right, down, left] order, then the opposite id.
_RELATIONSHIPS: Dict[int, Tuple[Tuple[int, int, int, int], int]] = {
    0: ((1, 2, 3, 4), 5),  # front
    1: ((5, 2, 0, 4), 3),  # up
    2: ((1, 5, 3, 0), 4),  # right
    3: ((0, 2, 5, 4), 1),  # down
    4: ((1, 0, 3, 5), 2),  # left
    5: ((1, 4, 3, 2), 0),  # back
}

NAMES = ("front", "up", "right", "down", "left", "back")


@dataclass(frozen=True, eq=False)
class Direction:
    """
    One of the six facing directions.

    Instances are singletons created once at import time; compare them with
    ``is``. Relationships live in a module-level table so nothing about a
    Direction can change after construction.

    Attributes:
        id (int): 0 through 5 in front/up/right/down/left/back order
        name (str): Lowercase direction name
    """
    id: int
    name: str

    @property
    def initial(self) -> str:
        return self.name[0].upper()

    @property
    def neighbors(self) -> Tuple["Direction", ...]:
        return tuple(DIRECTIONS[i] for i in _RELATIONSHIPS[self.id][0])

    @property
    def opposite(self) -> "Direction":
        return DIRECTIONS[_RELATIONSHIPS[self.id][1]]

    def get_opposite(self) -> "Direction":
        return self.opposite

    def get_rotation(self, vector: int, from_: Optional["Direction"] = None,
                     steps: Optional[int] = None) -> Optional["Direction"]:
        """
        Rotate around this direction starting from an adjacent one.

        Looking at this face with ``from_`` designated as up, return the
        neighbor reached after ``steps`` quarter turns in the sense given by
        ``vector`` (+1 clockwise, -1 anticlockwise).

        Args:
            vector (int): +1 or -1
            from_ (Direction, optional): Starting neighbor, defaults to the first neighbor
            steps (int, optional): Quarter turns, defaults to 1

        Returns:
            Direction or None: None when ``from_`` is this direction or its opposite
        """
        neighbors = self.neighbors
        if from_ is None:
            from_ = neighbors[0]
        if from_ is self or from_ is self.opposite:
            return None
        steps = 1 if steps is None else steps % 4
        index = neighbors.index(from_)
        return neighbors[(index + steps * vector) % 4]

    def get_clockwise(self, from_: Optional["Direction"] = None, steps: Optional[int] = None):
        return self.get_rotation(1, from_, steps)

    def get_anticlockwise(self, from_: Optional["Direction"] = None, steps: Optional[int] = None):
        return self.get_rotation(-1, from_, steps)

    def get_direction(self, direction: "Direction", up: Optional["Direction"] = None):
        """What appears in ``direction``'s compass slot when ``up`` is up."""
        return self.get_rotation(1, up, direction.id - 1)

    def get_up(self, up: Optional["Direction"] = None):
        return self.get_direction(UP, up)

    def get_right(self, up: Optional["Direction"] = None):
        return self.get_direction(RIGHT, up)

    def get_down(self, up: Optional["Direction"] = None):
        return self.get_direction(DOWN, up)

    def get_left(self, up: Optional["Direction"] = None):
        return self.get_direction(LEFT, up)

    def __repr__(self) -> str:
        return f"Direction({self.name})"

    def __str__(self) -> str:
        return self.name


FRONT = Direction(0, "front")
UP = Direction(1, "up")
RIGHT = Direction(2, "right")
DOWN = Direction(3, "down")
LEFT = Direction(4, "left")
BACK = Direction(5, "back")

DIRECTIONS = (FRONT, UP, RIGHT, DOWN, LEFT, BACK)


def get_name_by_id(id: int) -> str:
    return NAMES[id]


def get_id_by_name(name: str) -> int:
    return NAMES.index(name.lower())


def get_direction_by_id(id: int) -> Direction:
    return DIRECTIONS[id]


def get_direction_by_name(name: str) -> Optional[Direction]:
    name = name.lower()
    for direction in DIRECTIONS:
        if direction.name == name:
            return direction
    return None


def get_direction_by_initial(initial: str) -> Optional[Direction]:
    initial = initial.upper()
    for direction in DIRECTIONS:
        if direction.initial == initial:
            return direction
    return None
