"""
Cubelets: the 27 sub-units of a cube.

Faces are listed in a clockwise spiral from front to back:

                  back
                   5
              -----------
            /    up     /|
           /     1     / |
           -----------  right
          |           |  2
    left  |   front   |  .
     4    |     0     | /
          |           |/
           -----------
               down
                3

Each Cubelet keeps the id it was created with and an address that changes
as it travels around the cube. The address decomposes into x, y and z
components in -1..+1 with (0, 0, 0) at the core.
"""

import math
from dataclasses import dataclass
from functools import partial
from typing import Callable, List, Optional, Sequence

import structlog

from .animation import InstantAnimator
from .colors import COLORLESS, GREEN, ORANGE, WHITE, Color
from .directions import DIRECTIONS, NAMES, Direction

logger = structlog.get_logger(__name__)

TYPES = ("core", "center", "edge", "corner")

REMAP_THRESHOLD = 0.001

# New face order after one quarter turn, indexed by axis and sense.
# faces[i] becomes old_faces[cycle[i]].
FACE_CYCLES = {
    "x": {+1: (3, 0, 2, 5, 4, 1), -1: (1, 5, 2, 0, 4, 3)},
    "y": {+1: (2, 1, 5, 3, 0, 4), -1: (4, 1, 0, 3, 5, 2)},
    "z": {+1: (0, 4, 1, 2, 3, 5), -1: (0, 2, 3, 4, 1, 5)},
}

_DEFAULT_ANIMATOR = InstantAnimator()


@dataclass(frozen=True)
class Face:
    """
    One labelled surface of a Cubelet.

    Attributes:
        id (int): Index the face had at creation
        color (Color): Sticker color, COLORLESS when introverted
        normal (Direction): Direction the face pointed to at creation
    """
    id: int
    color: Color
    normal: Direction

    @property
    def is_extroverted(self) -> bool:
        return self.color is not COLORLESS


def decompose_address(address: int):
    """Split a slot index 0-26 into (x, y, z) components in -1..+1."""
    x = address % 3 - 1
    y = -(address % 9 // 3 - 1)
    z = -(address // 9 - 1)
    return x, y, z


def compose_address(x: int, y: int, z: int) -> int:
    """Inverse of ``decompose_address``."""
    return (x + 1) + (1 - y) * 3 + (1 - z) * 9


def count_crossings(previous: float, current: float) -> int:
    """
    Signed number of pegs reached moving from the peg ``previous`` to ``current``.

    A peg counts once the angle reaches it; leaving ``previous`` itself does
    not count, so two 45 degree steps cross exactly one peg on the second.
    """
    if current > previous:
        return math.floor(current / 90) - math.floor(previous / 90)
    if current < previous:
        return math.ceil(current / 90) - math.ceil(previous / 90)
    return 0


class Cubelet:
    """
    A single sub-unit of the cube.

    Args:
        cube (Cube, optional): Owning cube; supplies the animator
        id (int): Creation index, also the initial address
        colors (sequence, optional): Six colors in face order, None for introverted
        animator (Animator, optional): Overrides the cube's animator
    """

    def __init__(self, cube=None, id: int = 0, colors: Optional[Sequence[Optional[Color]]] = None,
                 animator=None):
        self.cube = cube
        self.id = id
        self._animator = animator
        self.set_address(id)

        if colors is None:
            colors = (WHITE, ORANGE, None, None, GREEN, None)
        self.faces: List[Face] = [
            Face(i, colors[i] if i < len(colors) and colors[i] is not None else COLORLESS, DIRECTIONS[i])
            for i in range(6)
        ]
        self.type = TYPES[sum(1 for face in self.faces if face.is_extroverted)]

        # Engagement outlives tweening: a partial rotation leaves the
        # Cubelet at rest but still engaged on that axis.
        self.is_tweening = False
        self.is_engaged_x = False
        self.is_engaged_y = False
        self.is_engaged_z = False

        self.x = self.x_previous = 0
        self.y = self.y_previous = 0
        self.z = self.z_previous = 0

        self.opacity = 1
        self.radius = 0
        self.show()
        self.show_plastics()
        self.show_extroverts()
        self.show_introverts()
        self.show_stickers()
        self.hide_ids()
        self.hide_texts()
        self.hide_wireframes()

    @property
    def animator(self):
        if self._animator is not None:
            return self._animator
        if self.cube is not None:
            return self.cube.animator
        return _DEFAULT_ANIMATOR

    # Face accessors

    @property
    def front(self) -> Face:
        return self.faces[0]

    @property
    def up(self) -> Face:
        return self.faces[1]

    @property
    def right(self) -> Face:
        return self.faces[2]

    @property
    def down(self) -> Face:
        return self.faces[3]

    @property
    def left(self) -> Face:
        return self.faces[4]

    @property
    def back(self) -> Face:
        return self.faces[5]

    @property
    def colors(self) -> str:
        """Color initials in face order, e.g. 'WOXXGX'."""
        return "".join(face.color.initial for face in self.faces)

    def set_address(self, address: int):
        """
        Move this Cubelet to a new slot.

        The x, y and z components are always derived from the address and
        never set on their own.
        """
        self.address = address
        self.address_x, self.address_y, self.address_z = decompose_address(address)

    def has_color(self, color: Color) -> Optional[str]:
        """
        Return the name of the face showing ``color``, or None.
        """
        for i, face in enumerate(self.faces):
            if face.color is color:
                return NAMES[i]
        return None

    def has_colors(self, *colors: Color) -> bool:
        return all(self.has_color(color) is not None for color in colors)

    def rotate(self, rotation: str, degrees: float, on_complete: Optional[Callable[[int], None]] = None):
        """
        Rotate this Cubelet about an axis.

        Uppercase axis letters rotate clockwise, lowercase anticlockwise.
        The accumulated angle is recorded immediately; the face list is only
        reordered once the animator reports completion, and only for each
        full quarter turn crossed since the last peg.

        Args:
            rotation (str): 'X', 'x', 'Y', 'y', 'Z' or 'z'
            degrees (float): Magnitude of the rotation
            on_complete (callable, optional): Called with the number of quarter
                turns applied once the rotation completes

        Raises:
            ValueError: If rotation is not an axis letter
        """
        axis = rotation.lower()
        if axis not in ("x", "y", "z"):
            raise ValueError(f"Invalid axis '{rotation}'. Must be 'x', 'y', or 'z'")

        self.is_tweening = True
        setattr(self, f"is_engaged_{axis}", True)
        target = degrees if rotation.isupper() else -degrees
        setattr(self, axis, getattr(self, axis) + target)

        self.animator.apply_rotation(self, rotation, degrees, partial(self._complete_rotation, on_complete))

    def _complete_rotation(self, on_complete: Optional[Callable[[int], None]] = None):
        remaps = 0
        for axis in ("x", "y", "z"):
            current = getattr(self, axis)
            # Float drift within the threshold counts as resting on the peg.
            peg = round(current / 90) * 90
            if abs(current - peg) < REMAP_THRESHOLD:
                current = peg
            previous = getattr(self, f"{axis}_previous")
            crossings = count_crossings(previous, current)
            if crossings:
                cycle = FACE_CYCLES[axis][1 if crossings > 0 else -1]
                for _ in range(abs(crossings)):
                    self.faces = [self.faces[i] for i in cycle]
                # Previous always rests on the last peg reached.
                setattr(self, f"{axis}_previous", previous + crossings * 90)
                remaps += abs(crossings)

            residual = current % 90
            if min(residual, 90 - residual) < REMAP_THRESHOLD:
                setattr(self, axis, 0)
                setattr(self, f"{axis}_previous", 0)
                setattr(self, f"is_engaged_{axis}", False)

        if remaps:
            logger.debug("Cubelet remapped", id=self.id, remaps=remaps, x=self.x, y=self.y, z=self.z)
        self.is_tweening = False
        if on_complete is not None:
            on_complete(remaps)

    def inspect(self, face: Optional[str] = None):
        """
        Describe this Cubelet.

        Args:
            face (str, optional): A face name; only that face's color is returned

        Returns:
            Color or str: The face color, or a multi-line summary
        """
        if face is not None:
            return getattr(self, str(face)).color
        lines = [
            f"ID         {self.id:02d}",
            f"Type       {self.type.upper()}",
            f"Address    {self.address:02d}",
            f"Address X  {self.address_x:+d}",
            f"Address Y  {self.address_y:+d}",
            f"Address Z  {self.address_z:+d}",
            f"Engaged X  {self.is_engaged_x}",
            f"Engaged Y  {self.is_engaged_y}",
            f"Engaged Z  {self.is_engaged_z}",
            f"Tweening   {self.is_tweening}",
        ]
        for i, name in enumerate(NAMES):
            lines.append(f"{i}  {name.capitalize():<9}  {self.faces[i].color.name.upper()}")
        return "\n".join(lines)

    # Visual switches

    def _set_visibility(self, feature: str, visible: bool):
        setattr(self, "showing" if feature == "cubelet" else f"showing_{feature}", visible)
        self.animator.apply_visibility(self, feature, visible)
        return self

    def show(self):
        return self._set_visibility("cubelet", True)

    def hide(self):
        return self._set_visibility("cubelet", False)

    def show_plastics(self):
        return self._set_visibility("plastics", True)

    def hide_plastics(self):
        return self._set_visibility("plastics", False)

    def show_extroverts(self):
        return self._set_visibility("extroverts", True)

    def hide_extroverts(self):
        return self._set_visibility("extroverts", False)

    def show_introverts(self):
        return self._set_visibility("introverts", True)

    def hide_introverts(self):
        return self._set_visibility("introverts", False)

    def show_stickers(self):
        return self._set_visibility("stickers", True)

    def hide_stickers(self):
        return self._set_visibility("stickers", False)

    def show_wireframes(self):
        return self._set_visibility("wireframes", True)

    def hide_wireframes(self):
        return self._set_visibility("wireframes", False)

    def show_ids(self):
        return self._set_visibility("ids", True)

    def hide_ids(self):
        return self._set_visibility("ids", False)

    def show_texts(self):
        return self._set_visibility("texts", True)

    def hide_texts(self):
        return self._set_visibility("texts", False)

    def get_opacity(self) -> float:
        return self.opacity

    def set_opacity(self, opacity: float = 1, on_complete: Optional[Callable[[], None]] = None):
        if opacity == self.opacity:
            return

        def done():
            self.opacity = opacity
            if on_complete is not None:
                on_complete()

        self.animator.apply_opacity(self, opacity, done)

    def get_radius(self) -> float:
        return self.radius

    def set_radius(self, radius: float = 0, on_complete: Optional[Callable[[], None]] = None):
        """Push this Cubelet away from the core. Ignored while tweening."""
        if self.is_tweening or radius == self.radius:
            return

        def done():
            self.radius = radius
            if on_complete is not None:
                on_complete()

        self.animator.apply_radius(self, radius, done)

    def __repr__(self) -> str:
        return f"Cubelet(id={self.id}, address={self.address}, type={self.type}, colors={self.colors})"
