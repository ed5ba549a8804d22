from __future__ import annotations


class FallTimer:
    """Fixed-cadence fall tick driven by elapsed milliseconds.

    The owner starts it when play becomes live and stops it otherwise. A
    stopped timer ignores elapsed time; starting it begins a fresh interval.
    """

    def __init__(self, interval_ms: int = 1000) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.interval_ms = int(interval_ms)
        self.running = False
        self._elapsed = 0

    def start(self) -> None:
        if not self.running:
            self.running = True
            self._elapsed = 0

    def stop(self) -> None:
        self.running = False
        self._elapsed = 0

    def advance(self, elapsed_ms: int) -> int:
        """Accumulate time and return how many ticks fell due."""
        if not self.running or elapsed_ms <= 0:
            return 0
        self._elapsed += int(elapsed_ms)
        ticks, self._elapsed = divmod(self._elapsed, self.interval_ms)
        return ticks
