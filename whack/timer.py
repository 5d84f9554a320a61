"""One-shot countdown driven by explicit frame deltas."""

from __future__ import annotations


class Timer:
    """
    Counts elapsed seconds up to a fixed duration.

    The timer never reads a clock: time only moves when ``tick`` is called,
    which keeps the round deterministic under a fixed sequence of deltas.
    """

    def __init__(self, duration: float) -> None:
        self.duration = duration
        self.elapsed = 0.0
        self._just_finished = False

    @property
    def finished(self) -> bool:
        return self.elapsed >= self.duration

    @property
    def remaining(self) -> float:
        return max(0.0, self.duration - self.elapsed)

    def just_finished(self) -> bool:
        """True only on the tick that reached the duration."""
        return self._just_finished

    def tick(self, delta: float) -> Timer:
        was_finished = self.finished
        self.elapsed = min(self.duration, self.elapsed + delta)
        self._just_finished = self.finished and not was_finished
        return self
