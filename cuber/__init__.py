"""
Cuber
A combinatorial model of the 3x3x3 twisty cube.
"""

__version__ = "0.1.0"
__author__ = "Domingos97"

from .animation import Animator, CompletionBarrier, DeferredAnimator, InstantAnimator
from .colors import COLORLESS, COLORS, Color
from .cube import ALL_SLICES, EVERYTHING, PRESERVE_LOGO, SHUFFLE_METHODS, Cube
from .cubelet import Cubelet
from .directions import BACK, DIRECTIONS, DOWN, FRONT, LEFT, RIGHT, UP, Direction
from .exceptions import CuberError, InvalidTwistError, PermutationError
from .group import Group
from .queues import Queue
from .scheduler import Step, TaskScheduler
from .slice import Slice
from .solver import HistorySolver, Solver
from .twist import Twist

__all__ = [
    "Animator",
    "CompletionBarrier",
    "DeferredAnimator",
    "InstantAnimator",
    "Color",
    "COLORS",
    "COLORLESS",
    "Cube",
    "PRESERVE_LOGO",
    "ALL_SLICES",
    "EVERYTHING",
    "SHUFFLE_METHODS",
    "Cubelet",
    "Direction",
    "DIRECTIONS",
    "FRONT",
    "UP",
    "RIGHT",
    "DOWN",
    "LEFT",
    "BACK",
    "CuberError",
    "InvalidTwistError",
    "PermutationError",
    "Group",
    "Queue",
    "Step",
    "TaskScheduler",
    "Slice",
    "Solver",
    "HistorySolver",
    "Twist",
]
