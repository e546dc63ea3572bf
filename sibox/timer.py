"""High-resolution stopwatch."""

from __future__ import annotations

import time
from typing import Callable


class Stopwatch:
    """Measures time from a start point to an end point, or to now if not ended.

    ``clock`` returns integer ticks; ``frequency`` is ticks per second.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = 1_000_000_000,
    ) -> None:
        if frequency <= 0:
            raise ValueError("frequency must be positive")
        self._clock = clock
        self.frequency = frequency
        self._begin = 0
        self._end: int | None = None
        self.restart()

    def restart(self) -> None:
        self._end = None
        self._begin = self._clock()

    def end(self) -> None:
        """Freeze the elapsed time at the current moment."""
        self._end = self._clock()

    def elapsed_ticks(self) -> int:
        end = self._clock() if self._end is None else self._end
        return end - self._begin

    def elapsed_milliseconds(self) -> float:
        return self.elapsed_ticks() * 1000 / self.frequency

    def elapsed_seconds(self) -> float:
        return self.elapsed_ticks() / self.frequency

    def elapsed_microseconds(self) -> int:
        return self.elapsed_ticks() * 1_000_000 // self.frequency