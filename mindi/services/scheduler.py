"""Cancellable deferred actions on the running event loop."""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

Action = Callable[[], Awaitable[None] | None]


class ActionScheduler:
    """Runs callbacks after a delay, with the ability to cancel them all.

    Each scheduled action is an asyncio task that sleeps, then runs its
    callback to completion. Callbacks never interleave with each other
    because they only run on the event loop thread.
    """

    def __init__(self) -> None:
        """Initialize with no pending actions."""
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of actions still waiting or running."""
        return sum(1 for task in self._tasks if not task.done())

    def schedule(self, delay: float, action: Action, *, name: str = "action") -> asyncio.Task[None]:
        """Run action after delay seconds.

        Must be called from inside a running event loop.
        """
        task = asyncio.get_running_loop().create_task(self._run(delay, action, name), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel_all(self) -> int:
        """Cancel every pending action. Returns how many were cancelled."""
        cancelled = 0
        for task in list(self._tasks):
            if not task.done() and task is not asyncio.current_task():
                task.cancel()
                cancelled += 1
        if cancelled:
            logger.debug("Cancelled %d pending action(s)", cancelled)
        return cancelled

    async def wait_idle(self) -> None:
        """Wait until no action is pending, including ones scheduled meanwhile."""
        current = asyncio.current_task()
        while True:
            tasks = [task for task in self._tasks if task is not current and not task.done()]
            if not tasks:
                return
            await asyncio.gather(*tasks, return_exceptions=True)

    async def _run(self, delay: float, action: Action, name: str) -> None:
        await asyncio.sleep(delay)
        try:
            result = action()
            if inspect.isawaitable(result):
                await result
        except asyncio.CancelledError:
            raise
        except Exception:
            logger.exception("Scheduled action %s failed", name)
