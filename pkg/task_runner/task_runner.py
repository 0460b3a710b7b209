import asyncio
from typing import Awaitable, Callable, Optional, Set

from loguru import logger

from .constant import *
from .type import TaskRunnerClosedError


class TaskRunner:
    """Fire-and-forget runner for detached asyncio tasks.

    Callers never await what they submit. The runner keeps a strong
    reference to each task only until it finishes, so the event loop does
    not drop it; task failures are logged and go nowhere else.

    Shutdown cancels whatever is still in flight. Pass ``drain_timeout`` to
    wait for in-flight tasks first.
    """

    def __init__(
        self,
        name: str = DEFAULT_NAME,
        on_change: Optional[Callable[[int], None]] = None,
    ):
        """Initialize task runner.

        Args:
            name: Name used in task names and log lines
            on_change: Called with the in-flight count whenever it changes
        """
        self.name = name
        self._on_change = on_change
        self._tasks: Set[asyncio.Task] = set()
        self._closed = False

    def submit(self, coro: Awaitable[None], name: Optional[str] = None) -> asyncio.Task:
        """Schedule a coroutine on the running loop and return immediately.

        The task inherits the caller's contextvars (trace ids included).

        Raises:
            TaskRunnerClosedError: If the runner has been shut down
        """
        if self._closed:
            if asyncio.iscoroutine(coro):
                coro.close()
            raise TaskRunnerClosedError(ERROR_RUNNER_CLOSED.format(name=self.name))

        task = asyncio.ensure_future(coro)
        if name:
            task.set_name(f"{self.name}-{name}")
        self._tasks.add(task)
        task.add_done_callback(self._on_done)
        self._notify()
        return task

    def _on_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        self._notify()

        if task.cancelled():
            return

        exc = task.exception()
        if exc is not None:
            logger.opt(exception=exc).error(
                f"Background task {task.get_name()} failed: {exc}"
            )

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(len(self._tasks))

    @property
    def pending(self) -> int:
        """Number of tasks still in flight."""
        return len(self._tasks)

    def is_closed(self) -> bool:
        return self._closed

    async def shutdown(self, drain_timeout: Optional[float] = None) -> int:
        """Stop accepting work and cancel what is still running.

        Args:
            drain_timeout: Seconds to wait for in-flight tasks before
                cancelling them. None cancels immediately.

        Returns:
            Number of tasks that were cancelled
        """
        if drain_timeout is not None and drain_timeout < 0:
            raise ValueError(ERROR_DRAIN_TIMEOUT_NEGATIVE.format(value=drain_timeout))

        self._closed = True

        if drain_timeout and self._tasks:
            logger.info(
                f"Task runner '{self.name}': draining {len(self._tasks)} task(s) "
                f"for up to {drain_timeout}s"
            )
            await asyncio.wait(set(self._tasks), timeout=drain_timeout)

        abandoned = [task for task in self._tasks if not task.done()]
        for task in abandoned:
            task.cancel()

        if abandoned:
            logger.warning(
                f"Task runner '{self.name}': cancelled {len(abandoned)} in-flight task(s)"
            )
            await asyncio.gather(*abandoned, return_exceptions=True)

        return len(abandoned)


__all__ = [
    "TaskRunner",
    "TaskRunnerClosedError",
]
