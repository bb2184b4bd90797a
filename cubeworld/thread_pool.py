"""A fixed-size pool of worker threads that run queued jobs."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable


class ThreadPool:
    """Runs callables on a fixed set of worker threads.

    On shutdown the workers finish every queued job before exiting.
    """

    def __init__(self, num_threads: int) -> None:
        self._cond = threading.Condition()
        self._jobs: deque[Callable[[], object]] = deque()
        self._halt = False
        self._threads = [
            threading.Thread(target=self._wait_for_work, daemon=True)
            for _ in range(num_threads)
        ]
        for thread in self._threads:
            thread.start()

    def _wait_for_work(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._halt or self._jobs)
                if not self._jobs:
                    return
                job = self._jobs.popleft()
            job()

    def add_job(self, job: Callable[[], object]) -> None:
        """Queue a job and wake one waiting worker."""
        with self._cond:
            if self._halt:
                raise RuntimeError("cannot add jobs to a pool that is shut down")
            self._jobs.append(job)
            self._cond.notify()

    def shutdown(self) -> None:
        """Let the workers drain the queue, then join them."""
        with self._cond:
            self._halt = True
            self._cond.notify_all()
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: object) -> None:
        self.shutdown()