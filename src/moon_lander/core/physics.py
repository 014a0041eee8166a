"""Per-tick integration of the craft under gravity and player thrust."""
from __future__ import annotations

from dataclasses import dataclass, field

from .config import PHYSICS_CFG, PhysicsCfg
from .model import Craft, InputSnapshot


@dataclass(frozen=True)
class Emitter:
    """Where a thrust particle batch should appear and which way it flies."""

    x: float
    y: float
    dx: float
    dy: float


@dataclass
class ThrustReport:
    """Side effects of one integration step."""

    started: bool = False
    emitters: list[Emitter] = field(default_factory=list)


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* between *lo* and *hi*."""

    return max(lo, min(hi, value))


def burn(craft: Craft, cfg: PhysicsCfg = PHYSICS_CFG) -> None:
    craft.fuel = clamp(craft.fuel - cfg.burn_rate * cfg.dt, 0.0, cfg.fuel_capacity)


def wrap_horizontal(craft: Craft, width: float) -> None:
    """Teleport the craft to the opposite edge when it leaves ``[0, width]``."""

    if craft.x < 0.0:
        craft.x = width
    elif craft.x > width:
        craft.x = 0.0


def integrate(
    craft: Craft,
    inputs: InputSnapshot,
    width: float,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> ThrustReport:
    """Advance ``craft`` by one fixed tick.

    Velocities are stored in pixels per tick, so accelerations are scaled by
    ``dt`` while positions take the full velocity each tick.
    """

    dt = cfg.dt
    report = ThrustReport()

    craft.vy += cfg.gravity * dt

    if inputs.thrust and craft.fuel > 0.0:
        craft.vy -= cfg.thrust * dt
        burn(craft, cfg)
        report.started = True
        report.emitters.append(Emitter(craft.x, craft.bottom, 0.0, 1.0))

    # Left wins when both rotation keys are held.
    if inputs.rotate_left and craft.fuel > 0.0:
        craft.vx -= cfg.side_thrust * dt
        burn(craft, cfg)
        craft.angle = -cfg.tilt_angle
        report.started = True
        report.emitters.append(
            Emitter(craft.x + craft.width / 2.0, craft.y + craft.height / 2.0, 1.0, 0.0)
        )
    elif inputs.rotate_right and craft.fuel > 0.0:
        craft.vx += cfg.side_thrust * dt
        burn(craft, cfg)
        craft.angle = cfg.tilt_angle
        report.started = True
        report.emitters.append(
            Emitter(craft.x - craft.width / 2.0, craft.y + craft.height / 2.0, -1.0, 0.0)
        )
    else:
        craft.angle *= cfg.angle_damping

    craft.position += craft.velocity
    wrap_horizontal(craft, width)
    return report


__all__ = [
    "PHYSICS_CFG",
    "Emitter",
    "PhysicsCfg",
    "ThrustReport",
    "burn",
    "clamp",
    "integrate",
    "wrap_horizontal",
]
