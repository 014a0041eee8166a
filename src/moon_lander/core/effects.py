"""Decorative particles driven by the simulation clock."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .config import EFFECTS_CFG, EffectsCfg


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: int
    max_life: int
    hue: float
    lightness: float

    @property
    def alpha(self) -> float:
        if self.max_life <= 0:
            return 0.0
        return max(0.0, min(1.0, self.life / self.max_life))


class ParticleTracker:
    """Owns every live particle.

    The set is unbounded: long sessions with continuous thrust grow it until
    particles age out, which the renderer is expected to absorb.
    """

    def __init__(self, cfg: EffectsCfg = EFFECTS_CFG, rng: np.random.Generator | None = None) -> None:
        self._cfg = cfg
        self._rng = rng if rng is not None else np.random.default_rng()
        self._particles: list[Particle] = []

    @property
    def particles(self) -> tuple[Particle, ...]:
        return tuple(self._particles)

    def __len__(self) -> int:
        return len(self._particles)

    def add(self, particle: Particle) -> None:
        self._particles.append(particle)

    def emit_thrust(self, x: float, y: float, dx: float, dy: float) -> None:
        cfg = self._cfg
        rng = self._rng
        lo, hi = cfg.thrust_speed
        for _ in range(cfg.thrust_count):
            self._particles.append(
                Particle(
                    x=x + (rng.random() - 0.5) * cfg.thrust_spread,
                    y=y + (rng.random() - 0.5) * cfg.thrust_spread,
                    vx=dx * rng.uniform(lo, hi) + (rng.random() - 0.5) * cfg.thrust_drift,
                    vy=dy * rng.uniform(lo, hi) + (rng.random() - 0.5) * cfg.thrust_drift,
                    life=cfg.thrust_life,
                    max_life=cfg.thrust_life,
                    hue=float(rng.uniform(*cfg.thrust_hue)),
                    lightness=float(rng.uniform(*cfg.lightness)),
                )
            )

    def emit_explosion(self, x: float, y: float) -> None:
        cfg = self._cfg
        rng = self._rng
        for _ in range(cfg.explosion_count):
            self._particles.append(
                Particle(
                    x=x,
                    y=y,
                    vx=(rng.random() - 0.5) * cfg.explosion_speed,
                    vy=(rng.random() - 0.5) * cfg.explosion_speed,
                    life=cfg.explosion_life,
                    max_life=cfg.explosion_life,
                    hue=float(rng.uniform(*cfg.explosion_hue)),
                    lightness=float(rng.uniform(*cfg.lightness)),
                )
            )

    def advance(self) -> None:
        survivors: list[Particle] = []
        for p in self._particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1
            if p.life > 0:
                survivors.append(p)
        self._particles = survivors

    def clear(self) -> None:
        self._particles = []


__all__ = ["Particle", "ParticleTracker"]
