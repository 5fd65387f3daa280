"""Single-slot trailing debounce on top of asyncio tasks."""

import asyncio
from collections.abc import Awaitable, Callable


class Debouncer:
    """Runs the most recently scheduled callback once `delay` seconds pass quietly.

    At most one task is outstanding: scheduling a new callback cancels the
    previous one, whether it is still sleeping or already running.
    """

    def __init__(self, delay: float):
        self.delay = delay
        self._task: asyncio.Task | None = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    def schedule(self, callback: Callable[[], Awaitable[None]]) -> asyncio.Task:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(self._fire(callback))
        return self._task

    def cancel(self) -> None:
        if self.pending:
            self._task.cancel()
        self._task = None

    async def wait(self) -> None:
        """Wait for the outstanding callback, if any, to finish or be cancelled."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def _fire(self, callback: Callable[[], Awaitable[None]]) -> None:
        await asyncio.sleep(self.delay)
        await callback()
