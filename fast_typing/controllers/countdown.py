"""
Cancellable periodic ticker driving the round countdown.
"""
import asyncio
from typing import Any, Callable, Optional

from common import utils
from common.constants import TICK_INTERVAL_SECONDS

logger = utils.setup_logger("Countdown")


def _create_task(coro_fn, *args):
    return asyncio.get_running_loop().create_task(coro_fn(*args))


class Countdown:
    """
    Owns a single scheduled tick loop.

    Every start() or cancel() bumps a generation counter; a loop whose generation
    is no longer current stops without calling back, even if its sleep already
    completed when the cancellation happened.
    """

    def __init__(
        self,
        runner: Optional[Callable[..., Any]] = None,
        interval: float = TICK_INTERVAL_SECONDS
    ):
        # runner(coro_fn, *args) schedules the coroutine and returns a handle with cancel()
        self._runner = runner or _create_task
        self.interval = interval
        self._generation = 0
        self._handle = None

    @property
    def active(self) -> bool:
        return self._handle is not None

    @property
    def generation(self) -> int:
        return self._generation

    def start(self, on_tick: Callable[[], None]):
        self.cancel()
        self._generation += 1
        self._handle = self._runner(self._run, self._generation, on_tick)

    def cancel(self):
        self._generation += 1
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.cancel()

    def is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _run(self, generation: int, on_tick: Callable[[], None]):
        try:
            while self.is_current(generation):
                await asyncio.sleep(self.interval)
                if not self.is_current(generation):
                    logger.debug(f"Stale tick ignored (generation {generation})")
                    return
                try:
                    on_tick()
                except Exception as e:
                    logger.exception(f"Tick callback failed: {e}")
        finally:
            # Loop ended without cancel(), e.g. its task was cancelled directly
            if self.is_current(generation):
                self._handle = None
