"""
Step scheduler for orchestration that sits outside the twist model.

Each Step runs an action and declares its own completion condition: a
minimum duration, a predicate, or both. The scheduler starts the next Step
only once the current one is complete, so sequencing never depends on
flags flipped by ad-hoc timers.
"""

import time
from typing import Callable, Optional

import structlog

from .queues import Queue

logger = structlog.get_logger(__name__)


class Step:
    """
    A unit of scheduled work.

    Args:
        action (callable, optional): Run when the step starts
        duration (float): Seconds the step occupies at minimum
        until (callable, optional): Predicate that must hold before the step completes
        name (str, optional): Label for logs
    """

    def __init__(self, action: Optional[Callable[[], None]] = None, duration: float = 0.0,
                 until: Optional[Callable[[], bool]] = None, name: Optional[str] = None):
        self.action = action
        self.duration = duration
        self.until = until
        self.name = name or getattr(action, "__name__", "step")

    def is_complete(self, started_at: float, now: float) -> bool:
        if now - started_at < self.duration:
            return False
        return self.until is None or bool(self.until())

    def __repr__(self) -> str:
        return f"Step({self.name!r}, duration={self.duration})"


def _as_steps(*items):
    steps = []
    for item in items:
        if isinstance(item, Step):
            steps.append(item)
        elif callable(item):
            steps.append(Step(item))
        elif isinstance(item, (list, tuple)):
            steps.extend(_as_steps(*item))
    return steps


class TaskScheduler:
    """
    Runs Steps one at a time.

    Args:
        clock (callable): Returns the current time in seconds
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.queue = Queue(_as_steps)
        self.current: Optional[Step] = None
        self.started_at = 0.0

    def add(self, *steps):
        """Queue Steps; bare callables become zero-duration Steps."""
        return self.queue.add(*steps)

    @property
    def is_looping(self) -> bool:
        return self.queue.is_looping

    @is_looping.setter
    def is_looping(self, value: bool):
        self.queue.is_looping = value

    @property
    def is_ready(self) -> bool:
        return self.current is None or self.current.is_complete(self.started_at, self.clock())

    @property
    def is_idle(self) -> bool:
        return self.is_ready and not self.queue.future

    def tick(self) -> bool:
        """
        Start the next Step if the current one is complete.

        Returns:
            bool: True when a Step was started
        """
        if not self.is_ready:
            return False
        self.current = None
        step = self.queue.do()
        if step is None:
            return False
        self.current = step
        self.started_at = self.clock()
        logger.debug("Starting step", step=step.name)
        if step.action is not None:
            step.action()
        return True

    def stop(self):
        """Drop pending Steps and stop looping."""
        self.queue.is_looping = False
        self.queue.empty()
        self.current = None
