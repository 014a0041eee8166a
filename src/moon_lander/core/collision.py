"""Ground contact detection and landing classification."""
from __future__ import annotations

from dataclasses import dataclass

from .model import Craft
from .terrain import Terrain


@dataclass(frozen=True)
class LandingLimits:
    """Thresholds a touchdown must stay under to count as a landing."""

    speed_limit: float
    angle_limit: float


@dataclass(frozen=True)
class Touchdown:
    """Result of the craft reaching the ground on this tick."""

    safe: bool
    speed: float
    angle: float
    ground_y: float
    segment: int
    in_safe_zone: bool

    @property
    def reason(self) -> str:
        if self.safe:
            return "landed"
        if not self.in_safe_zone:
            return "outside_safe_zone"
        return "too_fast_or_tilted"


def is_safe_touchdown(speed: float, angle: float, in_safe_zone: bool, limits: LandingLimits) -> bool:
    return speed < limits.speed_limit and abs(angle) < limits.angle_limit and in_safe_zone


def evaluate_touchdown(craft: Craft, terrain: Terrain, limits: LandingLimits) -> Touchdown | None:
    """Return a :class:`Touchdown` if the craft's bottom edge has met the ground.

    ``None`` means no contact this tick, including when the craft is outside
    every terrain segment.
    """

    segment = terrain.segment_index(craft.x)
    if segment is None:
        return None
    ground_y = terrain.ground_height_at(craft.x)
    if ground_y is None or craft.bottom < ground_y:
        return None

    speed = craft.speed
    in_zone = terrain.in_safe_zone(craft.x)
    return Touchdown(
        safe=is_safe_touchdown(speed, craft.angle, in_zone, limits),
        speed=speed,
        angle=craft.angle,
        ground_y=ground_y,
        segment=segment,
        in_safe_zone=in_zone,
    )


__all__ = ["LandingLimits", "Touchdown", "evaluate_touchdown", "is_safe_touchdown"]
