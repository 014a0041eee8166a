"""Landing profiles: a terrain policy paired with its touchdown limits."""
from __future__ import annotations

from dataclasses import dataclass

from moon_lander.core.collision import LandingLimits
from moon_lander.core.terrain import POLICIES, TerrainPolicy


@dataclass(frozen=True)
class LandingProfile:
    key: str
    name: str
    policy: TerrainPolicy
    limits: LandingLimits
    description: str


PROFILE_DEFINITIONS: tuple[LandingProfile, ...] = (
    LandingProfile(
        key="padded",
        name="Landing Pads",
        policy=POLICIES["padded"],
        limits=LandingLimits(speed_limit=6.0, angle_limit=0.5),
        description="Rolling ground with two flattened pads; touch down on a pad.",
    ),
    LandingProfile(
        key="organic",
        name="Crater Field",
        policy=POLICIES["organic"],
        limits=LandingLimits(speed_limit=3.0, angle_limit=0.2),
        description="Cratered ground without pads; find a level stretch and land softly.",
    ),
)

PROFILES: dict[str, LandingProfile] = {profile.key: profile for profile in PROFILE_DEFINITIONS}
PROFILE_DISPLAY_ORDER: list[str] = [profile.key for profile in PROFILE_DEFINITIONS]
DEFAULT_PROFILE_KEY = PROFILE_DISPLAY_ORDER[0]
DEFAULT_PROFILE = PROFILES[DEFAULT_PROFILE_KEY]


def get_profile(key: str) -> LandingProfile:
    try:
        return PROFILES[key]
    except KeyError:
        raise ValueError(
            f"Unknown landing profile {key!r}; choose from {', '.join(PROFILE_DISPLAY_ORDER)}"
        ) from None


__all__ = [
    "DEFAULT_PROFILE",
    "DEFAULT_PROFILE_KEY",
    "PROFILE_DEFINITIONS",
    "PROFILE_DISPLAY_ORDER",
    "PROFILES",
    "LandingProfile",
    "get_profile",
]
