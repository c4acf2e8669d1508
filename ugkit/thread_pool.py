"""Fixed-size pool of worker threads fed from a bounded task queue."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from .thread_safe_queue import ThreadSafeQueue

_log = logging.getLogger(__name__)

_STOP = object()


class ThreadPool:
    """Runs submitted callables on a set of worker threads."""

    DEFAULT_THREAD_CNT = 4
    DEFAULT_TASK_CNT = 1024

    def __init__(self) -> None:
        self._threads: list[threading.Thread] = []
        self._queue: ThreadSafeQueue[object] = ThreadSafeQueue(self.DEFAULT_TASK_CNT)
        self._running = False
        self._state_lock = threading.Lock()

    def start(self, thread_cnt: int = DEFAULT_THREAD_CNT) -> None:
        """Start ``thread_cnt`` workers; does nothing if already running."""
        with self._state_lock:
            if self._running:
                return
            self._running = True
            self._threads = [
                threading.Thread(target=self._process, name=f"pool-worker-{n}", daemon=True)
                for n in range(thread_cnt)
            ]
            for thread in self._threads:
                thread.start()

    def stop(self) -> None:
        """Let queued tasks finish, then stop and join every worker."""
        with self._state_lock:
            if not self._running:
                return
            self._running = False
            threads, self._threads = self._threads, []
        for _ in threads:
            self._queue.push(_STOP, block=True)
        for thread in threads:
            thread.join()

    def add_task(self, task: Callable[[], object]) -> None:
        """Queue a callable, waiting while the queue is full."""
        self._queue.push(task, block=True)

    def set_pool_task_cnt(self, task_cnt: int = DEFAULT_TASK_CNT) -> None:
        """Change how many tasks may wait in the queue."""
        self._queue.resize(task_cnt)

    def _process(self) -> None:
        while True:
            task = self._queue.pop(block=True)
            if task is _STOP:
                return
            try:
                task()  # type: ignore[operator]
            except Exception:
                _log.exception("task raised an exception")