"""Fixed-interval logic ticks on top of a free-running frame loop."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

from .constants import FRAME_RATE, TICK_INTERVAL

logger = logging.getLogger(__name__)


class Ticker:
    """Gate that lets one logic tick through per `interval` seconds.

    The baseline moves to the timestamp of the frame that ticked, so late
    frames push the next tick back instead of being caught up.
    """

    def __init__(self, interval: float = TICK_INTERVAL):
        self.interval = interval
        self.last_tick: Optional[float] = None

    def ready(self, now: float) -> bool:
        if self.last_tick is not None and now - self.last_tick < self.interval:
            return False
        self.last_tick = now
        return True

    def reset(self) -> None:
        self.last_tick = None


class TickScheduler:
    """Calls `on_frame(now)` once per frame until stopped or cancelled."""

    def __init__(
        self,
        on_frame: Callable[[float], Awaitable[None]],
        frame_interval: float = 1 / FRAME_RATE,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.on_frame = on_frame
        self.frame_interval = frame_interval
        self.clock = clock
        self._task: Optional[asyncio.Task] = None
        self._stopping = False

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        self._stopping = False
        if self.running:
            return
        self._task = asyncio.create_task(self._run())

    def stop(self) -> None:
        self._stopping = True

    def cancel(self) -> None:
        self._stopping = True
        if self.running:
            self._task.cancel()

    async def join(self) -> None:
        if self._task is not None:
            await asyncio.wait([self._task])

    async def _run(self) -> None:
        while not self._stopping:
            try:
                await self.on_frame(self.clock())
            except Exception:
                logger.exception("Frame callback failed, stopping loop")
                return
            if self._stopping:
                break
            await asyncio.sleep(self.frame_interval)
