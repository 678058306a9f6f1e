"""Animation clock driven by the host frame tick."""

from __future__ import annotations

from ..config.settings import SPEED


class AnimationClock:
    """
    Monotonic elapsed-time accumulator.

    The host advances it once per frame; animators only read ``time``. Each
    tick adds the frame delta scaled by the speed in effect at that tick, so
    changing the speed never moves time backwards.
    """

    def __init__(self, speed: float = SPEED):
        """
        Initialize the clock.

        Args:
            speed: Global speed multiplier (<= 1 = slow motion)
        """
        self._elapsed = 0.0
        self._time = 0.0
        self._speed = speed
        self.paused = False

    @property
    def elapsed(self) -> float:
        """Unscaled seconds since start."""
        return self._elapsed

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float):
        self._speed = max(0.0, value)

    @property
    def time(self) -> float:
        """Scaled time the animators consume."""
        return self._time

    def tick(self, delta_time: float) -> float:
        """
        Advance the clock.

        Negative deltas are ignored so time never runs backwards.

        Args:
            delta_time: Seconds since the last frame

        Returns:
            Scaled time after the tick
        """
        if not self.paused and delta_time > 0.0:
            self._elapsed += delta_time
            self._time += delta_time * self._speed
        return self._time

    def reset(self):
        self._elapsed = 0.0
        self._time = 0.0
