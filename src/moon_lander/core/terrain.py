"""Procedural terrain and safe-zone policies for the lander."""
from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from opensimplex import OpenSimplex

from .config import TERRAIN_CFG, TerrainCfg


@dataclass(frozen=True)
class Pad:
    """Inclusive range of sample indices flattened to a single height."""

    start: int
    end: int


@dataclass(frozen=True, eq=False)
class Terrain:
    """Immutable piecewise-linear ground profile.

    ``xs`` is strictly increasing and spans ``[0, width]``; y grows downward.
    A new value is built on every regeneration so readers holding the old
    profile are never affected.
    """

    xs: np.ndarray
    ys: np.ndarray
    pads: tuple[Pad, ...]
    policy: "TerrainPolicy"
    width: float
    height: float
    cfg: TerrainCfg = TERRAIN_CFG

    def __len__(self) -> int:
        return int(self.xs.size)

    def points(self) -> list[tuple[float, float]]:
        return [(float(x), float(y)) for x, y in zip(self.xs, self.ys)]

    def segment_index(self, x: float) -> int | None:
        """Index ``i`` of the first segment with ``xs[i] <= x <= xs[i + 1]``."""

        if x < self.xs[0] or x > self.xs[-1]:
            return None
        j = int(np.searchsorted(self.xs, x, side="left"))
        return max(0, j - 1)

    def ground_height_at(self, x: float) -> float | None:
        i = self.segment_index(x)
        if i is None:
            return None
        x0, x1 = self.xs[i], self.xs[i + 1]
        y0, y1 = self.ys[i], self.ys[i + 1]
        ratio = (x - x0) / (x1 - x0)
        return float(y0 + (y1 - y0) * ratio)

    def pad_span(self, pad: Pad) -> tuple[float, float, float]:
        """Return ``(x_start, x_end, y)`` for a landing pad."""

        return float(self.xs[pad.start]), float(self.xs[pad.end]), float(self.ys[pad.start])

    def in_safe_zone(self, x: float) -> bool:
        return self.policy.in_safe_zone(self, x)


class TerrainPolicy:
    """Strategy that shapes the ground and decides where landing is allowed."""

    key = ""

    def shape(
        self,
        width: float,
        height: float,
        cfg: TerrainCfg,
        rng: np.random.Generator,
    ) -> tuple[np.ndarray, tuple[Pad, ...]]:
        raise NotImplementedError

    def in_safe_zone(self, terrain: Terrain, x: float) -> bool:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class PaddedPolicy(TerrainPolicy):
    """Sinusoidal ground with sparse bumps and explicit flat landing pads."""

    key = "padded"

    def shape(self, width, height, cfg, rng):
        top, floor = band_limits(height, cfg)
        idx = np.arange(cfg.sample_count)
        ys = height - cfg.base_offset + np.sin(idx * cfg.wave_frequency) * cfg.amplitude

        bumps = [
            i
            for i in range(cfg.sample_count)
            if i % cfg.bump_every == 0 and cfg.bump_edge_skip < i < cfg.segments - cfg.bump_edge_skip
        ]
        if bumps:
            ys[bumps] += rng.uniform(-cfg.bump_height, cfg.bump_height, size=len(bumps))
        np.clip(ys, top, floor, out=ys)

        pads = tuple(
            Pad(start=int(math.floor(cfg.segments * lo)), end=int(math.floor(cfg.segments * hi)))
            for lo, hi in cfg.pad_fractions
        )
        for pad in pads:
            level = (ys[pad.start] + ys[pad.end]) / 2.0
            ys[pad.start : pad.end + 1] = level
        return ys, pads

    def in_safe_zone(self, terrain, x):
        for pad in terrain.pads:
            x_start, x_end, _ = terrain.pad_span(pad)
            if x_start <= x <= x_end:
                return True
        return False


class OrganicPolicy(TerrainPolicy):
    """Random-walk ground with flat stretches and craters, no explicit pads.

    Landing is allowed wherever the samples around the craft are level
    enough, judged by the height spread of a small window.
    """

    key = "organic"

    def shape(self, width, height, cfg, rng):
        top, floor = band_limits(height, cfg)
        walk = organic_walk(cfg.sample_count, top, floor, cfg, rng)
        ys = walk.ys
        for crater in walk.craters:
            carve_crater(ys, crater)
        np.clip(ys, top, floor, out=ys)
        smooth_steps(ys, cfg.max_step_delta)
        return ys, ()

    def in_safe_zone(self, terrain, x):
        i = terrain.segment_index(x)
        if i is None:
            return False
        half = terrain.cfg.flatness_half_window
        lo = max(0, i - half)
        hi = min(len(terrain) - 1, i + 1 + half)
        window = terrain.ys[lo : hi + 1]
        return float(np.ptp(window)) < terrain.cfg.flatness_tolerance


@dataclass(frozen=True)
class Crater:
    """Raised-cosine depression centred on a sample index."""

    center: int
    radius: int
    depth: float


@dataclass
class OrganicWalk:
    """Raw heights of the organic walk before craters are carved.

    ``flat[i]`` is true when sample ``i`` was laid down inside a flat stretch.
    """

    ys: np.ndarray
    flat: np.ndarray
    craters: list[Crater]


def organic_walk(
    n: int,
    top: float,
    floor: float,
    cfg: TerrainCfg = TERRAIN_CFG,
    rng: np.random.Generator | None = None,
) -> OrganicWalk:
    """Walk ``n`` samples left to right inside ``[top, floor]``.

    Crater centres are only planned outside the first and last
    ``crater_edge_fraction`` of the samples, and planning one ends any flat
    stretch in progress.
    """

    rng = rng if rng is not None else np.random.default_rng()
    ys = np.empty(n, dtype=float)
    flat = np.zeros(n, dtype=bool)
    craters: list[Crater] = []
    span = floor - top
    y = rng.uniform(top + 0.25 * span, floor - 0.25 * span)
    drift = OpenSimplex(seed=int(rng.integers(0, 2**31 - 1)))
    slope = 0.0
    flat_left = 0
    edge = max(1, int(round(n * cfg.crater_edge_fraction)))

    for i in range(n):
        if edge <= i < n - edge and rng.random() < cfg.crater_chance:
            radius = int(rng.integers(cfg.crater_radius[0], cfg.crater_radius[1] + 1))
            craters.append(Crater(i, radius, float(rng.uniform(*cfg.crater_depth))))
            flat_left = 0

        if flat_left > 0:
            y += rng.uniform(-cfg.flat_jitter, cfg.flat_jitter)
            flat_left -= 1
            flat[i] = True
        else:
            # low-frequency noise keeps the slope wandering smoothly
            target = cfg.max_slope * drift.noise2(i * cfg.slope_frequency, 0.0)
            slope = float(np.clip(target, slope - cfg.slope_step, slope + cfg.slope_step))
            y += slope + rng.uniform(-cfg.jitter, cfg.jitter)
            if rng.random() < cfg.flat_chance:
                flat_left = int(rng.integers(cfg.flat_run[0], cfg.flat_run[1] + 1))
                slope = 0.0

        if y < top or y > floor:
            y = min(max(y, top), floor)
            slope = -0.5 * slope
        ys[i] = y

    return OrganicWalk(ys=ys, flat=flat, craters=craters)


def carve_crater(ys: np.ndarray, crater: Crater) -> None:
    """Push samples down by a raised cosine, ``depth`` at the centre, zero at the rim."""

    for k in range(-crater.radius, crater.radius + 1):
        j = crater.center + k
        if 0 <= j < ys.size:
            ys[j] += crater.depth * 0.5 * (1.0 + math.cos(math.pi * k / crater.radius))


def band_limits(height: float, cfg: TerrainCfg = TERRAIN_CFG) -> tuple[float, float]:
    """Return the ``(top, floor)`` y-band that every sample must lie in."""

    top = height * cfg.band_top_factor
    floor = height - cfg.floor_margin
    if floor <= top:
        raise ValueError(f"Viewport height {height} leaves no room for terrain")
    return top, floor


def smooth_steps(ys: np.ndarray, max_delta: float) -> None:
    """Clamp every adjacent height difference to ``max_delta`` in place."""

    for i in range(1, ys.size):
        delta = ys[i] - ys[i - 1]
        if delta > max_delta:
            ys[i] = ys[i - 1] + max_delta
        elif delta < -max_delta:
            ys[i] = ys[i - 1] - max_delta


PADDED = PaddedPolicy()
ORGANIC = OrganicPolicy()
POLICIES: dict[str, TerrainPolicy] = {PADDED.key: PADDED, ORGANIC.key: ORGANIC}


def generate_terrain(
    width: float,
    height: float,
    policy: TerrainPolicy = PADDED,
    cfg: TerrainCfg = TERRAIN_CFG,
    rng: np.random.Generator | None = None,
) -> Terrain:
    """Build a fresh terrain profile for a ``width`` x ``height`` viewport."""

    if width <= 0:
        raise ValueError(f"Viewport width must be positive, got {width}")
    if cfg.segments < 2:
        raise ValueError("Terrain needs at least two segments")
    rng = rng if rng is not None else np.random.default_rng()

    xs = np.linspace(0.0, float(width), cfg.sample_count)
    ys, pads = policy.shape(float(width), float(height), cfg, rng)
    xs.setflags(write=False)
    ys.setflags(write=False)
    return Terrain(
        xs=xs,
        ys=ys,
        pads=pads,
        policy=policy,
        width=float(width),
        height=float(height),
        cfg=cfg,
    )


__all__ = [
    "ORGANIC",
    "PADDED",
    "POLICIES",
    "Crater",
    "OrganicPolicy",
    "OrganicWalk",
    "Pad",
    "PaddedPolicy",
    "Terrain",
    "TerrainPolicy",
    "band_limits",
    "carve_crater",
    "generate_terrain",
    "organic_walk",
    "smooth_steps",
]
