"""Session orchestration: one fixed tick of integrate, evaluate, advance."""
from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from moon_lander.data.profiles import DEFAULT_PROFILE, LandingProfile

from .collision import Touchdown, evaluate_touchdown
from .config import EFFECTS_CFG, PHYSICS_CFG, TERRAIN_CFG, EffectsCfg, PhysicsCfg, TerrainCfg
from .effects import Particle, ParticleTracker
from .instruments import Telemetry, compute_telemetry
from .logging_utils import RunLogger
from .model import FAILURE_NOTICE, SUCCESS_NOTICE, Craft, Flag, InputSnapshot, InputState, Notice, Phase
from .physics import integrate
from .terrain import Terrain, generate_terrain


@dataclass(frozen=True)
class SimSnapshot:
    """Read-only copy of everything the renderer draws."""

    terrain: Terrain
    craft: Craft
    phase: Phase
    flag: Flag
    particles: tuple[Particle, ...]
    notice: Notice | None
    tick: int
    session: int


class Simulation:
    """Owns the terrain, craft, phase, flag and particles of one session.

    Everything outside this class (input, viewport, rendering) talks to it
    through :meth:`tick`, :meth:`resize`, :meth:`restart`,
    :meth:`snapshot` and :meth:`telemetry`.
    """

    def __init__(
        self,
        width: float,
        height: float,
        profile: LandingProfile = DEFAULT_PROFILE,
        *,
        physics_cfg: PhysicsCfg = PHYSICS_CFG,
        terrain_cfg: TerrainCfg = TERRAIN_CFG,
        effects_cfg: EffectsCfg = EFFECTS_CFG,
        rng: np.random.Generator | None = None,
        logger: RunLogger | None = None,
    ) -> None:
        _check_viewport(width, height)
        self.profile = profile
        self.physics_cfg = physics_cfg
        self.terrain_cfg = terrain_cfg
        self.effects_cfg = effects_cfg
        self.logger = logger
        self.width = float(width)
        self.height = float(height)
        self.tick_count = 0
        self.session = 0
        self._rng = rng if rng is not None else np.random.default_rng()
        self._restart_held = False
        self._build_session()
        self._log_state()

    # ------------------------------------------------------------------
    # session construction
    # ------------------------------------------------------------------
    def _spawn_craft(self) -> Craft:
        cfg = self.physics_cfg
        return Craft(
            position=np.array([self.width / 2.0, cfg.spawn_y], dtype=float),
            velocity=np.zeros(2, dtype=float),
            angle=0.0,
            fuel=cfg.fuel_capacity,
            width=cfg.craft_width,
            height=cfg.craft_height,
        )

    def _generate_terrain(self, width: float, height: float) -> Terrain:
        return generate_terrain(width, height, self.profile.policy, self.terrain_cfg, self._rng)

    def _build_session(self) -> None:
        # build everything first so a failure cannot leave a half-reset session
        terrain = self._generate_terrain(self.width, self.height)
        craft = self._spawn_craft()
        flag = Flag(max_height=self.physics_cfg.flag_max_height)
        particles = ParticleTracker(self.effects_cfg, self._rng)

        self.terrain = terrain
        self.craft = craft
        self.flag = flag
        self.particles = particles
        self.phase = Phase.FLYING
        self.notice: Notice | None = None
        self.started = False

    # ------------------------------------------------------------------
    # commands
    # ------------------------------------------------------------------
    def restart(self) -> None:
        previous = self.phase
        self._build_session()
        self.session += 1
        self._log_event("restart", {"previous_phase": previous.value})
        self._log_state()

    def resize(self, width: float, height: float) -> None:
        _check_viewport(width, height)
        terrain = self._generate_terrain(float(width), float(height))
        self.width = float(width)
        self.height = float(height)
        self.terrain = terrain
        if not self.started:
            self.craft.x = self.width / 2.0
        self._log_event("resize", {"width": self.width, "height": self.height, "started": self.started})

    def tick(self, inputs: InputState | InputSnapshot) -> None:
        snap = inputs.snapshot() if isinstance(inputs, InputState) else inputs

        restart_edge = snap.restart and not self._restart_held
        self._restart_held = snap.restart
        if restart_edge and self.phase is not Phase.FLYING:
            self.restart()
            return

        self.tick_count += 1
        phase_before = self.phase

        if self.phase is Phase.FLYING:
            report = integrate(self.craft, snap, self.width, self.physics_cfg)
            if report.started:
                self.started = True
            for emitter in report.emitters:
                self.particles.emit_thrust(emitter.x, emitter.y, emitter.dx, emitter.dy)

            touchdown = evaluate_touchdown(self.craft, self.terrain, self.profile.limits)
            if touchdown is not None:
                self._resolve(touchdown)
        elif self.phase is Phase.LANDED:
            self.flag.raise_step(self.physics_cfg.flag_rise_rate)

        self.particles.advance()

        if self.phase is not phase_before or self.tick_count % self.physics_cfg.log_every_ticks == 0:
            self._log_state()

    def _resolve(self, touchdown: Touchdown) -> None:
        craft = self.craft
        details = {
            "reason": touchdown.reason,
            "angle": touchdown.angle,
            "in_safe_zone": touchdown.in_safe_zone,
            "ground_y": touchdown.ground_y,
            "fuel": craft.fuel,
        }
        if touchdown.safe:
            self.phase = Phase.LANDED
            craft.velocity[:] = 0.0
            self.flag.visible = True
            self.notice = SUCCESS_NOTICE
            self._log_event("landed", details, speed=touchdown.speed)
        else:
            self.phase = Phase.CRASHED
            self.particles.emit_explosion(craft.x, craft.y)
            self.notice = FAILURE_NOTICE
            self._log_event("crashed", details, speed=touchdown.speed)

    # ------------------------------------------------------------------
    # read side
    # ------------------------------------------------------------------
    def telemetry(self) -> Telemetry:
        return compute_telemetry(self.craft, self.height, self.physics_cfg)

    def snapshot(self) -> SimSnapshot:
        return SimSnapshot(
            terrain=self.terrain,
            craft=self.craft.copy(),
            phase=self.phase,
            flag=self.flag.copy(),
            particles=tuple(
                Particle(p.x, p.y, p.vx, p.vy, p.life, p.max_life, p.hue, p.lightness)
                for p in self.particles.particles
            ),
            notice=self.notice,
            tick=self.tick_count,
            session=self.session,
        )

    # ------------------------------------------------------------------
    # logging
    # ------------------------------------------------------------------
    def _log_state(self) -> None:
        if self.logger is None:
            return
        c = self.craft
        self.logger.log_ts([self.tick_count, c.x, c.y, c.vx, c.vy, c.angle, c.fuel, self.phase.value])

    def _log_event(self, event_type: str, details: dict, *, speed: float | None = None) -> None:
        if self.logger is None:
            return
        c = self.craft
        self.logger.log_event(
            self.tick_count,
            event_type,
            c.x,
            c.y,
            c.speed if speed is None else speed,
            details,
        )


def _check_viewport(width: float, height: float) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Viewport must be positive, got {width}x{height}")


__all__ = ["SimSnapshot", "Simulation"]
