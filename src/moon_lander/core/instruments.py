"""Instrument readouts derived from the craft state."""
from __future__ import annotations

import math
from dataclasses import dataclass

from .config import PHYSICS_CFG, PhysicsCfg
from .model import Craft


@dataclass(frozen=True)
class Telemetry:
    altitude: int
    vertical_speed: float
    horizontal_speed: float
    fuel: int


def round_half_up(value: float, digits: int = 0) -> float:
    scale = 10.0**digits
    return math.floor(value * scale + 0.5) / scale


def compute_telemetry(craft: Craft, viewport_height: float, cfg: PhysicsCfg = PHYSICS_CFG) -> Telemetry:
    altitude = int(round_half_up(viewport_height - craft.y - cfg.altitude_offset))
    return Telemetry(
        altitude=max(0, altitude),
        vertical_speed=round_half_up(craft.vy, 1),
        horizontal_speed=round_half_up(craft.vx, 1),
        fuel=max(0, int(round_half_up(craft.fuel))),
    )


__all__ = ["Telemetry", "compute_telemetry", "round_half_up"]
