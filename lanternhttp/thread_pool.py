"""A fixed-size pool of worker threads running queued tasks."""

from __future__ import annotations

import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable

__all__ = ["PoolStoppedError", "ThreadPool"]


class PoolStoppedError(RuntimeError):
    """Raised when a task is submitted to a pool that has been shut down."""


class ThreadPool:
    """Runs submitted callables on a fixed set of threads.

    Shutting down lets the workers finish every task already queued.
    """

    def __init__(self, threads: int) -> None:
        if threads < 1:
            raise ValueError("a thread pool needs at least one thread")
        self._tasks: deque[tuple[Future, Callable[..., Any], tuple, dict]] = deque()
        self._condition = threading.Condition()
        self._stopped = False
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(threads)
        ]
        for worker in self._workers:
            worker.start()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue fn(*args, **kwargs) and return a future for its result."""
        future: Future = Future()
        with self._condition:
            if self._stopped:
                raise PoolStoppedError("submit on stopped ThreadPool")
            self._tasks.append((future, fn, args, kwargs))
            self._condition.notify()
        return future

    def shutdown(self) -> None:
        """Stop accepting tasks, run those queued, and wait for the workers."""
        with self._condition:
            self._stopped = True
            self._condition.notify_all()
        current = threading.current_thread()
        for worker in self._workers:
            if worker is not current:
                worker.join()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopped or self._tasks)
                if not self._tasks:
                    return
                future, fn, args, kwargs = self._tasks.popleft()
            if not future.set_running_or_notify_cancel():
                continue
            try:
                result = fn(*args, **kwargs)
            except Exception as exc:
                future.set_exception(exc)
            else:
                future.set_result(result)