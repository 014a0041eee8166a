"""Data models for the lander simulation state."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

import numpy as np


class Phase(str, Enum):
    """Coarse lifecycle state of a session."""

    FLYING = "flying"
    LANDED = "landed"
    CRASHED = "crashed"


@dataclass
class Craft:
    """Mutable kinematic and resource state for the player's craft."""

    position: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    velocity: np.ndarray = field(
        default_factory=lambda: np.zeros(2, dtype=float)
    )
    angle: float = 0.0
    fuel: float = 100.0
    width: float = 20.0
    height: float = 30.0

    @property
    def x(self) -> float:
        return float(self.position[0])

    @x.setter
    def x(self, value: float) -> None:
        self.position[0] = value

    @property
    def y(self) -> float:
        return float(self.position[1])

    @y.setter
    def y(self, value: float) -> None:
        self.position[1] = value

    @property
    def vx(self) -> float:
        return float(self.velocity[0])

    @vx.setter
    def vx(self, value: float) -> None:
        self.velocity[0] = value

    @property
    def vy(self) -> float:
        return float(self.velocity[1])

    @vy.setter
    def vy(self, value: float) -> None:
        self.velocity[1] = value

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def speed(self) -> float:
        return float(np.hypot(self.velocity[0], self.velocity[1]))

    def copy(self) -> "Craft":
        return replace(self, position=self.position.copy(), velocity=self.velocity.copy())


@dataclass
class Flag:
    """Flag raised next to the craft after a safe landing."""

    visible: bool = False
    height: float = 0.0
    max_height: float = 40.0

    def raise_step(self, rate: float) -> None:
        if self.height < self.max_height:
            self.height = min(self.max_height, self.height + rate)

    def copy(self) -> "Flag":
        return replace(self)


@dataclass(frozen=True)
class Notice:
    """Outcome message surfaced to the player."""

    kind: str
    title: str
    subtitle: str


SUCCESS_NOTICE = Notice(kind="success", title="SUCCESS!", subtitle="Eagle has landed!")
FAILURE_NOTICE = Notice(kind="failure", title="CRASHED!", subtitle="Mission Failed")


@dataclass(frozen=True)
class InputSnapshot:
    """Immutable view of the controls as sampled at the start of a tick."""

    thrust: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    restart: bool = False


@dataclass
class InputState:
    """Control flags written by the input collaborator between ticks."""

    CONTROLS = ("thrust", "rotate_left", "rotate_right", "restart")

    thrust: bool = False
    rotate_left: bool = False
    rotate_right: bool = False
    restart: bool = False

    def set(self, control: str, pressed: bool) -> None:
        if control not in self.CONTROLS:
            raise ValueError(f"Unknown control: {control!r}")
        setattr(self, control, bool(pressed))

    def press(self, control: str) -> None:
        self.set(control, True)

    def release(self, control: str) -> None:
        self.set(control, False)

    def snapshot(self) -> InputSnapshot:
        return InputSnapshot(
            thrust=self.thrust,
            rotate_left=self.rotate_left,
            rotate_right=self.rotate_right,
            restart=self.restart,
        )


__all__ = [
    "FAILURE_NOTICE",
    "SUCCESS_NOTICE",
    "Craft",
    "Flag",
    "InputSnapshot",
    "InputState",
    "Notice",
    "Phase",
]
