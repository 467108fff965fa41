"""
Solver contract and a solver that unwinds the twist history.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

import structlog

from .twist import Twist

logger = structlog.get_logger(__name__)


class Solver(ABC):
    """
    Decides the next move while the cube is solving.

    ``consider`` is called once per idle tick while ``cube.is_solving`` is
    set. It may queue twists on ``cube.twist_queue`` and returns whether
    solving should continue on the next tick.
    """

    @abstractmethod
    def consider(self, cube) -> bool:
        """Queue the next move for ``cube``; return False to stop solving."""

    def reset(self):
        pass


class HistorySolver(Solver):
    """
    Solves by playing the executed twists back as inverses, newest first.

    The plan is taken from ``cube.twist_queue.history`` the first time the
    solver is consulted. The history is cleared so the unwinding twists do
    not become part of a later plan. One inverse is queued per call.
    """

    def __init__(self):
        self.plan: Optional[List[Twist]] = None

    def reset(self):
        self.plan = None

    def consider(self, cube) -> bool:
        if self.plan is None:
            self.plan = [twist.get_inverse() for twist in reversed(cube.twist_queue.history)]
            cube.twist_queue.history = []
            logger.info("Solver started", moves=len(self.plan))

        if not self.plan or (cube.is_solved() and not cube.is_engaged()):
            return self._finish(cube)

        cube.twist_queue.add(self.plan.pop(0))
        return True

    def _finish(self, cube) -> bool:
        logger.info("Solver finished", solved=cube.is_solved(), remaining=len(self.plan or []))
        self.plan = None
        # Unwinding twists are bookkeeping, not moves to replay.
        cube.twist_queue.history = []
        return False
