"""Configuration dataclasses for the lander simulation."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsCfg:
    gravity: float = 1.62
    thrust: float = 3.5
    side_thrust: float = 2.0
    burn_rate: float = 0.5
    fuel_capacity: float = 100.0
    tick_rate: float = 60.0
    max_substeps: int = 5
    tilt_angle: float = 0.1
    angle_damping: float = 0.9
    craft_width: float = 20.0
    craft_height: float = 30.0
    spawn_y: float = 50.0
    flag_max_height: float = 40.0
    flag_rise_rate: float = 0.5
    altitude_offset: float = 100.0
    log_every_ticks: int = 20

    @property
    def dt(self) -> float:
        return 1.0 / self.tick_rate


@dataclass(frozen=True)
class TerrainCfg:
    segments: int = 80
    band_top_factor: float = 0.7
    floor_margin: float = 60.0
    # padded policy
    base_offset: float = 90.0
    amplitude: float = 30.0
    wave_frequency: float = 0.1
    bump_every: int = 15
    bump_edge_skip: int = 10
    bump_height: float = 20.0
    pad_fractions: tuple[tuple[float, float], ...] = ((0.3, 0.35), (0.7, 0.75))
    # organic policy
    slope_step: float = 1.2
    slope_frequency: float = 0.08
    max_slope: float = 5.0
    jitter: float = 3.0
    flat_jitter: float = 0.4
    flat_chance: float = 0.08
    flat_run: tuple[int, int] = (8, 20)
    crater_chance: float = 0.04
    crater_depth: tuple[float, float] = (20.0, 60.0)
    crater_radius: tuple[int, int] = (2, 5)
    crater_edge_fraction: float = 0.08
    max_step_delta: float = 25.0
    flatness_half_window: int = 2
    flatness_tolerance: float = 6.0

    @property
    def sample_count(self) -> int:
        return self.segments + 1


@dataclass(frozen=True)
class EffectsCfg:
    thrust_count: int = 3
    thrust_life: int = 30
    thrust_spread: float = 10.0
    thrust_speed: tuple[float, float] = (2.0, 4.0)
    thrust_drift: float = 0.5
    thrust_hue: tuple[float, float] = (30.0, 60.0)
    explosion_count: int = 20
    explosion_life: int = 60
    explosion_speed: float = 10.0
    explosion_hue: tuple[float, float] = (0.0, 60.0)
    lightness: tuple[float, float] = (0.5, 1.0)


@dataclass(frozen=True)
class RenderCfg:
    width: int = 1000
    height: int = 700
    min_window_size: tuple[int, int] = (320, 320)
    target_fps: int = 60
    background_color: tuple[int, int, int] = (0, 0, 0)
    star_density: float = 1.0 / 5000.0
    max_stars: int = 200
    star_band_factor: float = 0.7
    earth_color: tuple[int, int, int] = (74, 144, 226)
    earth_land_color: tuple[int, int, int] = (45, 90, 45)
    earth_radius: int = 30
    earth_position_factor: tuple[float, float] = (0.1, 0.1)
    terrain_fill_color: tuple[int, int, int] = (51, 51, 51)
    terrain_line_color: tuple[int, int, int] = (102, 102, 102)
    pad_color: tuple[int, int, int] = (0, 255, 0)
    pad_line_width: int = 3
    descent_stage_color: tuple[int, int, int] = (212, 175, 55)
    descent_outline_color: tuple[int, int, int] = (184, 134, 11)
    ascent_stage_color: tuple[int, int, int] = (192, 192, 192)
    window_color: tuple[int, int, int] = (135, 206, 235)
    leg_color: tuple[int, int, int] = (102, 102, 102)
    nozzle_color: tuple[int, int, int] = (68, 68, 68)
    flag_pole_color: tuple[int, int, int] = (136, 136, 136)
    flag_offset_x: int = 15
    flag_size: tuple[int, int] = (20, 12)
    particle_size: int = 2
    hud_text_color: tuple[int, int, int] = (234, 241, 255)
    hud_background_color: tuple[int, int, int, int] = (12, 18, 30, int(255 * 0.55))
    hud_font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    hud_font_size: int = 18
    banner_font_size: int = 40
    success_color: tuple[int, int, int] = (0, 255, 0)
    failure_color: tuple[int, int, int] = (255, 0, 0)
    hint_color: tuple[int, int, int] = (180, 198, 228)


PHYSICS_CFG = PhysicsCfg()
TERRAIN_CFG = TerrainCfg()
EFFECTS_CFG = EffectsCfg()
RENDER_CFG = RenderCfg()


__all__ = [
    "EFFECTS_CFG",
    "PHYSICS_CFG",
    "RENDER_CFG",
    "TERRAIN_CFG",
    "EffectsCfg",
    "PhysicsCfg",
    "RenderCfg",
    "TerrainCfg",
]
