"""
Sticker colors.

Colors are immutable values shared by reference across every Cubelet.
COLORLESS marks the introverted faces that sit inside the cube.
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True, eq=False)
class Color:
    """
    A sticker color.

    Attributes:
        name (str): Lowercase color name
        initial (str): Single uppercase letter used in compact dumps
        hex (str): Display value
    """
    name: str
    initial: str
    hex: str

    def __repr__(self) -> str:
        return f"Color({self.name})"

    def __str__(self) -> str:
        return self.name


WHITE = Color("white", "W", "#FFF")
ORANGE = Color("orange", "O", "#F60")
BLUE = Color("blue", "B", "#00D")
RED = Color("red", "R", "#F00")
GREEN = Color("green", "G", "#0A0")
YELLOW = Color("yellow", "Y", "#FE0")
COLORLESS = Color("NA", "X", "#DDD")

COLORS = (WHITE, ORANGE, BLUE, RED, GREEN, YELLOW)

_BY_INITIAL: Dict[str, Color] = {color.initial: color for color in COLORS + (COLORLESS,)}
_BY_NAME: Dict[str, Color] = {color.name.lower(): color for color in COLORS + (COLORLESS,)}


def get_color_by_initial(initial: str) -> Optional[Color]:
    """Look up a color by its letter, case-insensitively."""
    return _BY_INITIAL.get(initial.upper())


def get_color_by_name(name: str) -> Optional[Color]:
    """Look up a color by its name, case-insensitively."""
    return _BY_NAME.get(name.lower())
