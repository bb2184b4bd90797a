"""Basic elapsed-time timers."""

from __future__ import annotations

import sys
import time
from typing import TextIO


class Timer:
    """A stopwatch measuring elapsed seconds since it was started."""

    def __init__(self, start: bool = False) -> None:
        self._started = False
        self._start_time = 0.0
        if start:
            self.start()

    def start(self) -> None:
        """Start (or restart) the timer."""
        self._start_time = time.monotonic()
        self._started = True

    def restart(self) -> None:
        """Restart the timer (same as start)."""
        self.start()

    def stop(self) -> None:
        """Stop the timer."""
        self._started = False

    def elapsed_seconds(self) -> float:
        """Seconds since the timer started, or 0 if it is not running."""
        if not self._started:
            return 0.0
        return time.monotonic() - self._start_time

    def is_started(self) -> bool:
        """Whether the timer is running."""
        return self._started


class AutoTimer(Timer):
    """A timer that starts on creation and reports the elapsed time on exit."""

    def __init__(self, stream: TextIO | None = None) -> None:
        super().__init__(True)
        self._stream = stream

    def __enter__(self) -> AutoTimer:
        return self

    def __exit__(self, *args: object) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"Elapsed time: {self.elapsed_seconds():g}s", file=stream)