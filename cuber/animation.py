"""
Visual collaborator contract.

The core never animates anything itself. Cubelets hand every continuous
change (rotation, opacity, radius, visibility) to an Animator and wait for
its completion callback before touching the logical model.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional

import structlog

logger = structlog.get_logger(__name__)


class Animator(ABC):
    """
    Base class for visual collaborators.

    Only ``apply_rotation`` is required. The presentation hooks default to
    bookkeeping-only behavior so a headless model needs nothing else.
    """

    @abstractmethod
    def apply_rotation(self, cubelet, axis: str, degrees: float, on_complete: Callable[[], None]):
        """
        Animate ``cubelet`` about ``axis`` by ``degrees``.

        ``on_complete`` must be called exactly once, after the transition
        finishes.
        """

    def apply_visibility(self, cubelet, feature: str, visible: bool):
        pass

    def apply_opacity(self, cubelet, opacity: float, on_complete: Callable[[], None]):
        on_complete()

    def apply_radius(self, cubelet, radius: float, on_complete: Callable[[], None]):
        on_complete()


class InstantAnimator(Animator):
    """Completes every transition immediately. Useful for headless use and tests."""

    def apply_rotation(self, cubelet, axis, degrees, on_complete):
        on_complete()


class DeferredAnimator(Animator):
    """
    Holds transitions until the clock says they are done.

    Rotation durations scale with the angle: a quarter turn takes
    ``twist_duration`` seconds and nothing is quicker than ``min_duration``.

    Args:
        twist_duration (float): Seconds for a 90 degree turn
        min_duration (float): Lower bound for any rotation
        clock (callable): Returns the current time in seconds
    """

    def __init__(self, twist_duration: float = 1.0, min_duration: float = 0.25,
                 clock: Callable[[], float] = time.monotonic):
        self.twist_duration = twist_duration
        self.min_duration = min_duration
        self.clock = clock
        self.pending: List[List[Any]] = []

    def get_duration(self, degrees: float) -> float:
        return max(abs(degrees) / 90 * self.twist_duration, self.min_duration)

    def apply_rotation(self, cubelet, axis, degrees, on_complete):
        self.pending.append([self.clock() + self.get_duration(degrees), on_complete])

    def advance(self, now: Optional[float] = None) -> int:
        """
        Fire every pending completion that is due.

        Returns:
            int: Number of completions fired
        """
        if now is None:
            now = self.clock()
        due = [entry for entry in self.pending if entry[0] <= now]
        self.pending = [entry for entry in self.pending if entry[0] > now]
        for _, on_complete in due:
            on_complete()
        return len(due)

    def flush(self) -> int:
        """Fire every pending completion regardless of the clock."""
        fired = 0
        while self.pending:
            pending, self.pending = self.pending, []
            for _, on_complete in pending:
                on_complete()
                fired += 1
        return fired

    @property
    def is_busy(self) -> bool:
        return bool(self.pending)


class CompletionBarrier:
    """
    Fires ``callback`` once, after ``count`` members have signalled.

    Each member passes a value to ``signal``; the callback receives the list
    of collected values in arrival order.
    """

    def __init__(self, count: int, callback: Callable[[List[Any]], None]):
        self.count = count
        self.callback = callback
        self.values: List[Any] = []
        self.fired = False
        if count == 0:
            self._fire()

    def signal(self, value: Any = None):
        if self.fired:
            logger.warning("Completion barrier signalled after firing", count=self.count)
            return
        self.values.append(value)
        if len(self.values) >= self.count:
            self._fire()

    def _fire(self):
        self.fired = True
        self.callback(list(self.values))
