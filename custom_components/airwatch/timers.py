"""
RepeatingTimer — a named, restartable asyncio polling timer.

This is a pure asyncio primitive with no HA or network dependencies.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable

_LOGGER = logging.getLogger(__name__)


class RepeatingTimer:
    """
    Runs an async callback immediately on start() and then every `interval`
    seconds until stop().

    Ticks are fixed-rate but never overlap: a callback that outlasts the
    interval delays the next tick instead of running concurrently with it.
    stop() cancels the task, including a callback that is still awaiting.
    """

    def __init__(
        self,
        name: str,
        interval: float,
        callback: Callable[[], Awaitable[None]],
    ) -> None:
        self.name = name
        self.interval = interval
        self._callback = callback
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start ticking.  Calling start() on a running timer does nothing."""
        if self.running:
            return
        _LOGGER.debug("Starting timer %s (every %ss)", self.name, self.interval)
        self._task = asyncio.ensure_future(self._run())

    def stop(self) -> asyncio.Task | None:
        """Cancel the timer task and return it so callers may await its end."""
        task = self._task
        self._task = None
        if task is not None and not task.done():
            _LOGGER.debug("Stopping timer %s", self.name)
            task.cancel()
        return task

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        while True:
            started = loop.time()
            try:
                await self._callback()
            except Exception as exc:  # noqa: BLE001
                _LOGGER.warning("Timer %s tick failed: %s", self.name, exc)
            elapsed = loop.time() - started
            await asyncio.sleep(max(0.0, self.interval - elapsed))
