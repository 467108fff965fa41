"""
Twists: parsed rotation commands.

    X  whole cube, right face sense      Y  whole cube, up face sense
    L  left face                         U  up face
    M  middle slice, left face sense     E  equator slice, down face sense
    R  right face                        D  down face
    Z  whole cube, front face sense
    F  front face
    S  standing slice, front face sense
    B  back face

UPPERCASE turns clockwise as seen from the named face, lowercase turns
anticlockwise. A signed integer after a letter gives the degrees; without
one the twist runs to the next peg.
"""

import re
import time
from numbers import Number
from typing import List, Optional

import structlog

from .directions import Direction
from .exceptions import InvalidTwistError

logger = structlog.get_logger(__name__)

GROUPS = {
    "X": "Cube on X",
    "L": "Left face",
    "M": "Middle slice",
    "R": "Right face",
    "Y": "Cube on Y",
    "U": "Up face",
    "E": "Equator slice",
    "D": "Down face",
    "Z": "Cube on Z",
    "F": "Front face",
    "S": "Standing slice",
    "B": "Back face",
}

TOKEN_PATTERN = re.compile(r"-?\d+|[XLMRYUEDZFSB]", re.IGNORECASE)


def _is_number(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class Twist:
    """
    A validated twist command.

    Args:
        command (str): One of the twelve notation letters, either case
        degrees (float, optional): Magnitude; negative values flip the sense

    Raises:
        InvalidTwistError: If command is not a notation letter
    """

    __slots__ = ("_command", "_group", "_degrees", "_vector", "_wise", "_created")

    def __init__(self, command: str, degrees: Optional[float] = None):
        if not isinstance(command, str) or len(command) != 1 or command.upper() not in GROUPS:
            raise InvalidTwistError(command)
        if degrees is not None and degrees < 0:
            command = command.swapcase()
            degrees = abs(degrees)

        self._command = command
        self._group = GROUPS[command.upper()]
        self._degrees = degrees
        if command.isupper():
            self._vector, self._wise = 1, "clockwise"
        else:
            self._vector, self._wise = -1, "anticlockwise"
        self._created = time.time()

    @property
    def command(self) -> str:
        return self._command

    @property
    def group(self) -> str:
        """What the twist turns, in English."""
        return self._group

    @property
    def degrees(self) -> Optional[float]:
        """Relative degrees; None means run to the next peg."""
        return self._degrees

    @property
    def vector(self) -> int:
        return self._vector

    @property
    def wise(self) -> str:
        return self._wise

    @property
    def created(self) -> float:
        return self._created

    def get_inverse(self) -> "Twist":
        return Twist(self._command.swapcase(), self._degrees)

    @classmethod
    def validate(cls, *elements) -> List["Twist"]:
        """
        Normalize mixed twist input into a flat list of Twists.

        Accepts Twists, Directions, single letters, notation strings such as
        'Udr10Lf-30b', lists and numbers in any mix. A number directly after
        a single letter is that letter's degrees. Anything unrecognized is
        dropped.

        Example:
            >>> [t.command for t in Twist.validate("UD")]
            ['U', 'D']
            >>> twist, = Twist.validate("R", -45)
            >>> twist.command, twist.degrees
            ('r', 45)
        """
        elements = list(elements)
        i = 0
        while i < len(elements):
            element = elements[i]
            look_ahead = elements[i + 1] if i + 1 < len(elements) else None

            if isinstance(element, Twist):
                i += 1
            elif isinstance(element, str) and len(element) == 1:
                degrees = look_ahead if _is_number(look_ahead) else None
                try:
                    elements[i] = cls(element, degrees)
                    i += 1
                except InvalidTwistError:
                    logger.debug("Dropped unrecognized twist", token=element)
                    del elements[i]
            elif isinstance(element, str) and len(element) > 1:
                tokens = [int(token) if token.lstrip("-").isdigit() else token
                          for token in TOKEN_PATTERN.findall(element)]
                elements[i:i + 1] = tokens
            elif isinstance(element, Direction):
                elements[i] = element.initial
            elif isinstance(element, (list, tuple)):
                elements[i:i + 1] = list(element)
            else:
                if not _is_number(element):
                    logger.debug("Dropped unrecognized twist", token=repr(element))
                del elements[i]
        return elements

    def __eq__(self, other) -> bool:
        if not isinstance(other, Twist):
            return NotImplemented
        return self._command == other._command and self._degrees == other._degrees

    def __hash__(self) -> int:
        return hash((self._command, self._degrees))

    def __str__(self) -> str:
        if self._degrees is None:
            return self._command
        return f"{self._command}{self._degrees:g}"

    def __repr__(self) -> str:
        return f"Twist({self._command!r}, {self._degrees!r})"
