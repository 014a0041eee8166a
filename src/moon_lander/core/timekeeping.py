"""Utilities for keeping fixed physics timesteps."""
from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass
class FrameTimer:
    """High resolution timer based on :func:`time.perf_counter`."""

    last_time: float = field(default_factory=time.perf_counter)

    def tick(self) -> float:
        now = time.perf_counter()
        dt = now - self.last_time
        self.last_time = now
        return dt


@dataclass
class FixedStepAccumulator:
    """Accumulates real time and pays it out as whole fixed-size ticks."""

    step: float
    max_substeps: int
    value: float = 0.0

    def __post_init__(self) -> None:
        if self.step <= 0.0:
            raise ValueError("Accumulator step must be positive")
        if self.max_substeps < 1:
            raise ValueError("max_substeps must be at least 1")

    def accrue(self, delta: float) -> None:
        if delta > 0.0:
            self.value += delta

    def clear(self) -> None:
        self.value = 0.0

    def consume(self) -> int:
        """Return the number of ticks due, keeping the sub-tick remainder."""

        # tolerate float error when the backlog is a whole number of steps
        steps_due = int((self.value + 1e-9) // self.step)
        if steps_due <= 0:
            return 0
        if steps_due > self.max_substeps:
            # too far behind; drop the backlog instead of spiralling
            self.value = 0.0
            return self.max_substeps
        self.value = max(0.0, self.value - steps_due * self.step)
        return steps_due


__all__ = ["FixedStepAccumulator", "FrameTimer"]
