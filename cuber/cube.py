"""
The Cube: 27 Cubelets in slots, the Slices built over them, and the twist
dispatcher that keeps slot occupancy correct.

Slots are numbered front to back, top to bottom, left to right, looking at
the front face:

      Front slice      Standing slice      Back slice
     0    1    2        9   10   11       18   19   20
     3    4    5       12   13   14       21   22   23
     6    7    8       15   16   17       24   25   26

The ``cubelets`` list is the single source of truth: its index is a
Cubelet's address. Every Slice and Group is a view rebuilt by ``map``.
"""

import random
from functools import partial
from typing import Dict, List, Optional

import structlog

from .animation import CompletionBarrier, InstantAnimator
from .colors import BLUE, GREEN, ORANGE, RED, WHITE, YELLOW
from .cubelet import REMAP_THRESHOLD, Cubelet, decompose_address
from .directions import NAMES
from .group import Group
from .permutations import apply_permutation
from .queues import Queue
from .scheduler import TaskScheduler
from .slice import Slice
from .twist import Twist

logger = structlog.get_logger(__name__)

PRESERVE_LOGO = "RrLlUuDdSsBb"
ALL_SLICES = "RrMmLlUuEeDdFfSsBb"
EVERYTHING = "XxRrMmLlYyUuEeDdZzFfSsBb"

SHUFFLE_METHODS = {
    "PRESERVE_LOGO": PRESERVE_LOGO,
    "ALL_SLICES": ALL_SLICES,
    "EVERYTHING": EVERYTHING,
}

# Slot indices of each Slice in compass order.
SLICES = {
    "left": (24, 21, 18, 15, 12, 9, 6, 3, 0),
    "middle": (25, 22, 19, 16, 13, 10, 7, 4, 1),
    "right": (2, 11, 20, 5, 14, 23, 8, 17, 26),
    "up": (18, 19, 20, 9, 10, 11, 0, 1, 2),
    "equator": (21, 22, 23, 12, 13, 14, 3, 4, 5),
    "down": (8, 17, 26, 7, 16, 25, 6, 15, 24),
    "front": (0, 1, 2, 3, 4, 5, 6, 7, 8),
    "standing": (9, 10, 11, 12, 13, 14, 15, 16, 17),
    "back": (26, 23, 20, 25, 22, 19, 24, 21, 18),
}

# Command -> (Slice to turn or None for the whole cube, Cubelet rotation).
# M follows L, E follows D and S follows F.
TARGETS = {
    "X": (None, "X"), "x": (None, "x"),
    "R": ("right", "X"), "r": ("right", "x"),
    "M": ("middle", "x"), "m": ("middle", "X"),
    "L": ("left", "x"), "l": ("left", "X"),
    "Y": (None, "Y"), "y": (None, "y"),
    "U": ("up", "Y"), "u": ("up", "y"),
    "E": ("equator", "y"), "e": ("equator", "Y"),
    "D": ("down", "y"), "d": ("down", "Y"),
    "Z": (None, "Z"), "z": (None, "z"),
    "F": ("front", "Z"), "f": ("front", "z"),
    "S": ("standing", "Z"), "s": ("standing", "z"),
    "B": ("back", "z"), "b": ("back", "Z"),
}


def standard_colors(address: int):
    """Sticker colors, in face order, of the Cubelet that starts at ``address``."""
    x, y, z = decompose_address(address)
    return (
        WHITE if z == 1 else None,
        ORANGE if y == 1 else None,
        BLUE if x == 1 else None,
        RED if y == -1 else None,
        GREEN if x == -1 else None,
        YELLOW if z == -1 else None,
    )


class Cube(Group):
    """
    A 3x3x3 twisty cube.

    Args:
        animator (Animator, optional): Visual collaborator, InstantAnimator by default
        solver (Solver, optional): Consulted on idle ticks while solving
        shuffle_method (str): Alphabet shuffle draws from
        rng (random.Random, optional): Source of shuffle randomness
    """

    def __init__(self, animator=None, solver=None, shuffle_method: str = PRESERVE_LOGO,
                 rng: Optional[random.Random] = None):
        # Cubelets look the animator up through their cube, so it goes first.
        self.animator = animator or InstantAnimator()
        self.solver = solver
        self.shuffle_method = shuffle_method
        self.rng = rng or random.Random()

        super().__init__([Cubelet(self, i, standard_colors(i)) for i in range(27)])

        self.twist_queue = Queue(Twist.validate)
        self.tasks = TaskScheduler()

        self.is_ready = True
        self.is_shuffling = False
        self.is_rotating = False
        self.is_solving = False
        self.showing_face_labels = False

        self.map()

    def map(self):
        """Resync every address from its slot and rebuild the Slices and Groups."""
        for address, cubelet in enumerate(self.cubelets):
            cubelet.set_address(address)

        for name, slots in SLICES.items():
            setattr(self, name, Slice([self.cubelets[i] for i in slots], name=name))
        self.faces: List[Slice] = [getattr(self, name) for name in NAMES]

        self.core = self.has_type("core")
        self.centers = self.has_type("center")
        self.edges = self.has_type("edge")
        self.corners = self.has_type("corner")
        self.crosses = Group(self.centers, self.edges)

    def twist(self, twist) -> bool:
        """
        Dispatch one twist.

        The affected Cubelets rotate through the animator. Once every one
        of them reports back, the matching slot permutation is applied once
        per quarter turn crossed and the cube is remapped.

        Args:
            twist (Twist or str): A Twist or single-twist notation such as 'R' or 'r45'

        Returns:
            bool: False when the twist was rejected
        """
        if not isinstance(twist, Twist):
            twists = Twist.validate(twist)
            if len(twists) != 1:
                logger.warning("Unrecognized twist", twist=repr(twist))
                return False
            twist = twists[0]

        if self.is_tweening():
            logger.warning("Twist rejected, cube is tweening", command=twist.command)
            return False

        slice_name, rotation = TARGETS[twist.command]
        group = self if slice_name is None else getattr(self, slice_name)
        axis = rotation.lower()
        for other in "xyz":
            if other != axis and self.is_engaged(other):
                logger.warning("Twist rejected, cube is engaged on another axis",
                               command=twist.command, engaged=other)
                return False

        # Members must share one angle on the axis or they would cross pegs unevenly.
        angles = [getattr(cubelet, axis) for cubelet in group]
        if max(angles) - min(angles) > REMAP_THRESHOLD:
            logger.warning("Twist rejected, members are not aligned on its axis",
                           command=twist.command, axis=axis)
            return False

        degrees = twist.degrees
        if degrees is None:
            degrees = group.get_distance_to_peg(rotation)

        members = list(group)
        self.is_rotating = True
        logger.info("Twist dispatched", command=twist.command, group=twist.group,
                    wise=twist.wise, degrees=degrees)
        barrier = CompletionBarrier(len(members), partial(self._on_twist_complete, twist))
        for cubelet in members:
            cubelet.rotate(rotation, degrees, barrier.signal)
        return True

    def _on_twist_complete(self, twist: Twist, remaps: List[int]):
        quarter_turns = max(remaps) if remaps else 0
        if len(set(remaps)) > 1:
            logger.warning("Cubelets disagree on quarter turns", command=twist.command,
                           counts=sorted(set(remaps)))
        if quarter_turns:
            self.cubelets = apply_permutation(self.cubelets, twist.command, quarter_turns)
        self.map()
        self.is_rotating = False
        logger.info("Twist completed", command=twist.command, quarter_turns=quarter_turns)

    def is_solved(self, face=None) -> bool:
        """True when every face Slice shows a single color, or just ``face`` if given."""
        if face is not None:
            name = getattr(face, "name", face)
            return getattr(self, name).is_solved(name)
        return all(getattr(self, name).is_solved(name) for name in NAMES)

    def shuffle(self, count: Optional[int] = None) -> List[Twist]:
        """
        Queue ``count`` random twists drawn from the shuffle alphabet.

        Without a count the cube keeps shuffling on every idle tick until
        ``is_shuffling`` is cleared.
        """
        if count is None:
            self.is_shuffling = True
            return []
        letters = [self.rng.choice(self.shuffle_method) for _ in range(count)]
        return self.twist_queue.add(*letters)

    def solve(self):
        if self.solver is None:
            logger.warning("No solver attached, cannot solve")
            return
        self.is_shuffling = False
        self.solver.reset()
        self.is_solving = True

    def tick(self):
        """
        Advance the cube by one idle step.

        Nothing happens while any Cubelet is tweening. Otherwise a queued
        twist takes priority, then shuffling, then solving, then scheduled
        tasks.
        """
        if not (self.is_ready and not self.is_tweening() and self.twist_queue.is_ready):
            return
        if self.twist_queue.future:
            twist = self.twist_queue.do()
            if not self.twist(twist):
                # Only executed twists belong in the history.
                self.twist_queue.history.pop()
        elif self.is_shuffling:
            self.twist_queue.add(self.rng.choice(self.shuffle_method))
        elif self.is_solving and self.solver is not None:
            self.is_solving = bool(self.solver.consider(self))
        else:
            self.tasks.tick()

    @property
    def is_idle(self) -> bool:
        return (not self.is_tweening() and not self.twist_queue.future
                and not self.is_shuffling and not self.is_solving and self.tasks.is_idle)

    def inspect(self) -> Dict[str, List[List[str]]]:
        """Color initials of each face as a 3x3 grid, keyed by face name."""
        return {name: getattr(self, name).get_grid(name) for name in NAMES}

    def show_face_labels(self):
        self.showing_face_labels = True
        self.animator.apply_visibility(self, "face_labels", True)
        return self

    def hide_face_labels(self):
        self.showing_face_labels = False
        self.animator.apply_visibility(self, "face_labels", False)
        return self

    def __repr__(self) -> str:
        return f"Cube(solved={self.is_solved()}, queued={len(self.twist_queue)})"
