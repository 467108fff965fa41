"""
Cube Service
Hosts one Cube, drives its tick loop and exposes notation-level operations
"""

import asyncio
from typing import Any, Dict, List, Optional

from cuber import Cube, DeferredAnimator, HistorySolver, Twist
from app.core.config import settings
from app.utils.logging import get_logger, log_twist

logger = get_logger(__name__)


class CubeService:
    """
    Owns the hosted Cube.

    Twists animate on a DeferredAnimator so a client sees the cube move over
    time; ``settle`` runs everything queued to completion at once.
    """

    def __init__(
        self,
        twist_duration: float = settings.twist_duration,
        min_twist_duration: float = settings.min_twist_duration,
        shuffle_alphabet: str = settings.shuffle_alphabet,
        max_settle_ticks: int = settings.max_settle_ticks,
        tick_interval: float = settings.tick_interval
    ):
        self.twist_duration = twist_duration
        self.min_twist_duration = min_twist_duration
        self.shuffle_alphabet = shuffle_alphabet
        self.max_settle_ticks = max_settle_ticks
        self.tick_interval = tick_interval
        self._task: Optional[asyncio.Task] = None
        self.reset()

    def reset(self) -> Cube:
        """Replace the hosted cube with a fresh solved one"""
        self.animator = DeferredAnimator(self.twist_duration, self.min_twist_duration)
        self.cube = Cube(
            animator=self.animator,
            solver=HistorySolver(),
            shuffle_method=self.shuffle_alphabet
        )
        logger.info("Cube reset", shuffle_method=self.shuffle_alphabet)
        return self.cube

    def tick(self):
        """Fire due animations, then give the cube one idle step"""
        self.animator.advance()
        self.cube.tick()

    def settle(self) -> bool:
        """
        Complete every queued twist, shuffle and solve step now.

        Returns False if the cube was still busy after ``max_settle_ticks``.
        """
        for _ in range(self.max_settle_ticks):
            self.animator.flush()
            if self.cube.is_idle:
                return True
            self.cube.tick()
        logger.warning("Cube did not settle", max_ticks=self.max_settle_ticks)
        return False

    def add_twists(self, notation: str, settle: bool = False) -> List[Twist]:
        twists = self.cube.twist_queue.add(*Twist.validate(notation))
        log_twist(logger, "twist", notation, accepted=len(twists))
        if settle:
            self.settle()
        return twists

    def shuffle(self, count: int, settle: bool = False) -> List[Twist]:
        twists = self.cube.shuffle(count)
        log_twist(logger, "shuffle", "".join(str(t) for t in twists), count=count)
        if settle:
            self.settle()
        return twists

    def solve(self, settle: bool = False):
        self.cube.solve()
        log_twist(logger, "solve", "", history=len(self.cube.twist_queue.history))
        if settle:
            self.settle()

    def get_state(self) -> Dict[str, Any]:
        cube = self.cube
        return {
            "is_solved": cube.is_solved(),
            "is_ready": cube.is_ready,
            "is_shuffling": cube.is_shuffling,
            "is_rotating": cube.is_rotating,
            "is_solving": cube.is_solving,
            "is_tweening": bool(cube.is_tweening()),
            "queued": [str(t) for t in cube.twist_queue.future],
            "history": [str(t) for t in cube.twist_queue.history],
            "faces": cube.inspect(),
            "cubelets": [cubelet.id for cubelet in cube.cubelets],
        }

    # Background driver

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _run(self):
        while True:
            try:
                self.tick()
            except Exception as e:
                logger.error("Cube tick failed", error=str(e), exc_info=e)
                raise
            await asyncio.sleep(self.tick_interval)

    def start(self):
        """Start the tick loop on the running event loop"""
        if self._task is None or self._task.done():
            self._task = asyncio.get_running_loop().create_task(self._run())
            logger.info("Cube driver started", tick_interval=self.tick_interval)

    async def stop(self):
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None
            logger.info("Cube driver stopped")


# Global service instance
cube_service = CubeService()


def get_cube_service() -> CubeService:
    """Dependency provider for the hosted cube service"""
    return cube_service
