"""
Groups: unordered collections of Cubelets.

A Group has no idea where its Cubelets are or how they are oriented, so it
cannot rotate. It answers aggregate questions instead: is anything in here
tweening, which members carry a color, how far is the group from its next
peg.
"""

import math
from typing import Iterator, List, Optional, Union

import numpy as np
import structlog

from .directions import Direction

logger = structlog.get_logger(__name__)


class Group:
    """
    A selection of Cubelets.

    Args:
        *cubelets: Cubelets, Groups or lists of either; nested input is flattened
    """

    def __init__(self, *cubelets):
        self.cubelets: List = []
        self.add(*cubelets)

    def add(self, *cubelets) -> "Group":
        for cubelet in cubelets:
            if isinstance(cubelet, Group):
                cubelet = cubelet.cubelets
            if isinstance(cubelet, (list, tuple)):
                self.add(*cubelet)
            else:
                self.cubelets.append(cubelet)
        return self

    def remove(self, *cubelets) -> "Group":
        for cubelet in cubelets:
            if isinstance(cubelet, Group):
                cubelet = cubelet.cubelets
            if isinstance(cubelet, (list, tuple)):
                self.remove(*cubelet)
            else:
                self.cubelets = [c for c in self.cubelets if c is not cubelet]
        return self

    def __len__(self) -> int:
        return len(self.cubelets)

    def __iter__(self) -> Iterator:
        return iter(self.cubelets)

    def __contains__(self, cubelet) -> bool:
        return any(c is cubelet for c in self.cubelets)

    # Flag counters. Callers treat any nonzero count as busy.

    def is_flagged(self, prop: str) -> int:
        return sum(1 for cubelet in self.cubelets if getattr(cubelet, prop))

    def is_tweening(self) -> int:
        return self.is_flagged("is_tweening")

    def is_engaged_x(self) -> int:
        return self.is_flagged("is_engaged_x")

    def is_engaged_y(self) -> int:
        return self.is_flagged("is_engaged_y")

    def is_engaged_z(self) -> int:
        return self.is_flagged("is_engaged_z")

    def is_engaged(self, axis: Optional[str] = None) -> int:
        """Engagement count on one axis, or summed over all three."""
        if axis is not None:
            return self.is_flagged(f"is_engaged_{axis.lower()}")
        return self.is_engaged_x() + self.is_engaged_y() + self.is_engaged_z()

    # Searches

    def has_property(self, prop: str, value) -> "Group":
        return Group([cubelet for cubelet in self.cubelets if getattr(cubelet, prop) == value])

    def has_id(self, id: int):
        found = self.has_property("id", id).cubelets
        return found[0] if found else None

    def has_address(self, address: int):
        found = self.has_property("address", address).cubelets
        return found[0] if found else None

    def has_type(self, type: str) -> "Group":
        return self.has_property("type", type)

    def has_color(self, color) -> "Group":
        return Group([cubelet for cubelet in self.cubelets if cubelet.has_color(color) is not None])

    def has_colors(self, *colors) -> "Group":
        return Group([cubelet for cubelet in self.cubelets if cubelet.has_colors(*colors)])

    # Partial rotation support

    def get_average_rotation(self, axis: str) -> float:
        if not self.cubelets:
            return 0.0
        return float(np.mean([getattr(cubelet, axis.lower()) for cubelet in self.cubelets]))

    def get_average_rotation_x(self) -> float:
        return self.get_average_rotation("x")

    def get_average_rotation_y(self) -> float:
        return self.get_average_rotation("y")

    def get_average_rotation_z(self) -> float:
        return self.get_average_rotation("z")

    def get_distance_to_peg(self, axis: str) -> float:
        """
        Degrees from the group's average rotation to the next peg.

        The case of ``axis`` carries the intended sense: uppercase heads
        clockwise, lowercase anticlockwise. A group already resting on a peg
        is always a full quarter turn away, never zero.

        Args:
            axis (str): 'X', 'x', 'Y', 'y', 'Z' or 'z'

        Returns:
            float: Absolute distance; the caller applies the sense
        """
        current = self.get_average_rotation(axis)
        distance = math.floor((current + 90) / 90) * 90 - current
        if not axis.isupper():
            distance -= 90
            if distance == 0:
                distance -= 90
        logger.debug("Distance to peg", axis=axis, current=current, distance=distance, target=current + distance)
        return abs(distance)

    def is_solved(self, face: Optional[Union[str, Direction]] = None) -> bool:
        """
        True when every member shows the same color on ``face``.

        Args:
            face (str or Direction): Face to compare
        """
        if face is None:
            logger.warning("A face (str or Direction) must be given to Group.is_solved()")
            return False
        if isinstance(face, Direction):
            face = face.name
        return len({getattr(cubelet, face).color.name for cubelet in self.cubelets}) == 1

    # Visual switches, chainable

    def _each(self, method: str, *args) -> "Group":
        for cubelet in self.cubelets:
            getattr(cubelet, method)(*args)
        return self

    def show(self):
        return self._each("show")

    def hide(self):
        return self._each("hide")

    def show_plastics(self):
        return self._each("show_plastics")

    def hide_plastics(self):
        return self._each("hide_plastics")

    def show_extroverts(self):
        return self._each("show_extroverts")

    def hide_extroverts(self):
        return self._each("hide_extroverts")

    def show_introverts(self):
        return self._each("show_introverts")

    def hide_introverts(self):
        return self._each("hide_introverts")

    def show_stickers(self):
        return self._each("show_stickers")

    def hide_stickers(self):
        return self._each("hide_stickers")

    def show_wireframes(self):
        return self._each("show_wireframes")

    def hide_wireframes(self):
        return self._each("hide_wireframes")

    def show_ids(self):
        return self._each("show_ids")

    def hide_ids(self):
        return self._each("hide_ids")

    def show_texts(self):
        return self._each("show_texts")

    def hide_texts(self):
        return self._each("hide_texts")

    def get_opacity(self) -> float:
        if not self.cubelets:
            return 0.0
        return float(np.mean([cubelet.get_opacity() for cubelet in self.cubelets]))

    def set_opacity(self, opacity: float = 1, on_complete=None):
        return self._each("set_opacity", opacity, on_complete)

    def get_radius(self) -> float:
        if not self.cubelets:
            return 0.0
        return float(np.mean([cubelet.get_radius() for cubelet in self.cubelets]))

    def set_radius(self, radius: float = 0, on_complete=None):
        return self._each("set_radius", radius, on_complete)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({[cubelet.id for cubelet in self.cubelets]})"
