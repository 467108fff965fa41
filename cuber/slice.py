"""
Slices: 3x3 layers of the cube.

Cubelets in a Slice are addressed by compass position:

     north_west | north  | north_east
          0     |   1    |     2
     -----------+--------+-----------
        west    | origin |    east
          3     |   4    |     5
     -----------+--------+-----------
     south_west | south  | south_east
          6     |   7    |     8

Every face of the cube is a Slice, but the middle, equator and standing
Slices cut through the core and are not faces. A Slice decides which it is
by looking at its origin Cubelet: a single visible sticker makes it a face.
"""

from typing import Optional

from .directions import NAMES
from .group import Group

COMPASS = (
    "north_west", "north", "north_east",
    "west", "origin", "east",
    "south_west", "south", "south_east",
)


class Slice(Group):
    """
    Nine Cubelets in fixed compass slots.

    Args:
        *cubelets: Exactly nine Cubelets in compass order
        name (str, optional): Label such as 'front' or 'equator'
    """

    def __init__(self, *cubelets, name: Optional[str] = None):
        super().__init__(*cubelets)
        if len(self.cubelets) != 9:
            raise ValueError(f"A Slice needs 9 Cubelets, got {len(self.cubelets)}")
        self.name = name
        self.map()

    def map(self):
        """Rebuild every derived view from the nine compass slots."""
        for position, cubelet in zip(COMPASS, self.cubelets):
            setattr(self, position, cubelet)

        # Face or plain slice, decided fresh on every map.
        self.face = None
        self.color = None
        visible = [i for i, face in enumerate(self.origin.faces) if face.is_extroverted]
        if len(visible) == 1:
            self.face = NAMES[visible[0]]
            self.color = self.origin.faces[visible[0]].color

        # Strips
        self.up = Group(self.north_west, self.north, self.north_east)
        self.equator = Group(self.west, self.origin, self.east)
        self.down = Group(self.south_west, self.south, self.south_east)
        self.left = Group(self.north_west, self.west, self.south_west)
        self.middle = Group(self.north, self.origin, self.south)
        self.right = Group(self.north_east, self.east, self.south_east)

        # A face has exactly one center; slices through the core have several.
        self.center = self.corners = self.cross = self.ex = self.centers = None
        centers = self.has_type("center")
        if len(centers) == 1:
            self.center = centers
            self.corners = Group(self.has_type("corner"))
            self.cross = Group(self.center, self.has_type("edge"))
            self.ex = Group(self.center, self.has_type("corner"))
        else:
            self.centers = Group(centers)
        self.edges = Group(self.has_type("edge"))

        self.ring = Group(
            self.north_west, self.north, self.north_east,
            self.west, self.east,
            self.south_west, self.south, self.south_east,
        )
        self.dexter = Group(self.north_west, self.origin, self.south_east)
        self.sinister = Group(self.north_east, self.origin, self.south_west)

    @property
    def is_face(self) -> bool:
        return self.face is not None

    def get_location(self, cubelet) -> Optional[str]:
        """Compass position of ``cubelet`` within this Slice, or None."""
        for position, member in zip(COMPASS, self.cubelets):
            if member is cubelet:
                return position
        return None

    def inspect(self, side=None) -> str:
        """
        Render the Slice as a 3x3 grid of color initials.

        Args:
            side (str or Direction, optional): Face of each Cubelet to read;
                defaults to this Slice's face, or 'front'
        """
        if side is None:
            side = self.face or "front"
        side = getattr(side, "name", side)
        rows = []
        for row in range(3):
            members = self.cubelets[row * 3:row * 3 + 3]
            rows.append(" ".join(getattr(cubelet, side).color.initial for cubelet in members))
        return "\n".join(rows)

    def get_grid(self, side=None):
        """Same as ``inspect`` but as a list of rows of initials."""
        return [row.split(" ") for row in self.inspect(side).split("\n")]
