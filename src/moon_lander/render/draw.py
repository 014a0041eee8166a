from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterable, Sequence, TYPE_CHECKING

import pygame

from .assets import hsl_color

if TYPE_CHECKING:  # pragma: no cover
    from moon_lander.core.config import RenderCfg
    from moon_lander.core.effects import Particle
    from moon_lander.core.model import Craft, Flag
    from moon_lander.core.terrain import Terrain


Point = tuple[float, float]


@dataclass
class Star:
    x: float
    y: float
    brightness: float
    twinkle_speed: float
    twinkle_phase: float


def generate_starfield(
    size: tuple[int, int],
    *,
    render_cfg: RenderCfg,
    rng: random.Random | None = None,
) -> list[Star]:
    rng = rng or random.Random()
    width, height = size
    count = min(render_cfg.max_stars, int(width * height * render_cfg.star_density))
    return [
        Star(
            x=rng.uniform(0, width),
            y=rng.uniform(0, height * render_cfg.star_band_factor),
            brightness=rng.random(),
            twinkle_speed=0.02 + rng.random() * 0.03,
            twinkle_phase=rng.uniform(0, math.tau),
        )
        for _ in range(count)
    ]


def draw_starfield(surface: pygame.Surface, stars: Iterable[Star], *, rng: random.Random | None = None) -> None:
    """Draw twinkling stars; advances each star's twinkle phase."""

    rng = rng or random
    for star in stars:
        star.twinkle_phase += star.twinkle_speed
        brightness = star.brightness * (math.sin(star.twinkle_phase) * 0.3 + 0.7)
        level = int(255 * max(0.0, min(1.0, brightness)))
        x, y = int(star.x), int(star.y)
        surface.fill((level, level, level), (x, y, 1, 1))
        if brightness > 0.8 and rng.random() < 0.01:
            surface.fill((255, 255, 136), (x - 1, y, 3, 1))
            surface.fill((255, 255, 136), (x, y - 1, 1, 3))


def draw_earth(surface: pygame.Surface, *, render_cfg: RenderCfg) -> None:
    width, height = surface.get_size()
    fx, fy = render_cfg.earth_position_factor
    cx, cy = int(width * fx), int(height * fy)
    pygame.draw.circle(surface, render_cfg.earth_color, (cx, cy), render_cfg.earth_radius)
    pygame.draw.circle(surface, render_cfg.earth_land_color, (cx - 8, cy - 5), 8)
    pygame.draw.circle(surface, render_cfg.earth_land_color, (cx + 6, cy + 3), 6)


def draw_terrain(surface: pygame.Surface, terrain: Terrain, *, render_cfg: RenderCfg) -> None:
    points = terrain.points()
    if len(points) < 2:
        return
    height = surface.get_height()
    polygon = [(0.0, float(height)), *points, (terrain.width, float(height))]
    pygame.draw.polygon(surface, render_cfg.terrain_fill_color, polygon)
    pygame.draw.lines(surface, render_cfg.terrain_line_color, True, polygon, 1)

    for pad in terrain.pads:
        x_start, x_end, y = terrain.pad_span(pad)
        pygame.draw.line(
            surface,
            render_cfg.pad_color,
            (x_start, y),
            (x_end, y),
            render_cfg.pad_line_width,
        )


def draw_particles(surface: pygame.Surface, particles: Sequence[Particle], *, render_cfg: RenderCfg) -> None:
    if not particles:
        return
    layer = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    size = render_cfg.particle_size
    half = size / 2.0
    for p in particles:
        color = hsl_color(p.hue, p.lightness, p.alpha)
        layer.fill(color, (int(p.x - half), int(p.y - half), size, size))
    surface.blit(layer, (0, 0))


def _place(points: Iterable[Point], origin: Point, angle: float) -> list[Point]:
    """Rotate craft-local points by ``angle`` and move them to ``origin``."""

    cos_a, sin_a = math.cos(angle), math.sin(angle)
    ox, oy = origin
    return [(ox + x * cos_a - y * sin_a, oy + x * sin_a + y * cos_a) for x, y in points]


def _rect(x: float, y: float, w: float, h: float) -> list[Point]:
    return [(x, y), (x + w, y), (x + w, y + h), (x, y + h)]


def draw_craft(surface: pygame.Surface, craft: Craft, *, render_cfg: RenderCfg) -> None:
    w, h = craft.width, craft.height
    origin = (craft.x, craft.y)
    angle = craft.angle

    def poly(color, points, width: int = 0) -> None:
        pygame.draw.polygon(surface, color, _place(points, origin, angle), width)

    def line(color, start: Point, end: Point, width: int) -> None:
        a, b = _place((start, end), origin, angle)
        pygame.draw.line(surface, color, a, b, width)

    descent = [(-w / 2, h * 0.4), (-w / 3, h * 0.8), (w / 3, h * 0.8), (w / 2, h * 0.4), (w / 3, 0), (-w / 3, 0)]
    poly(render_cfg.descent_stage_color, descent)
    poly(render_cfg.descent_outline_color, descent, 1)

    ascent = [(-w / 3, 0), (-w / 4, -h * 0.3), (w / 4, -h * 0.3), (w / 3, 0)]
    poly(render_cfg.ascent_stage_color, ascent)

    poly(render_cfg.window_color, _rect(-w / 6, -h * 0.2, w / 8, h / 8))
    poly(render_cfg.window_color, _rect(w / 12, -h * 0.2, w / 8, h / 8))

    reach = w * 0.8
    for side in (-1, 1):
        line(render_cfg.leg_color, (side * w / 3, h * 0.6), (side * reach, h + 8), 3)
        poly(render_cfg.nozzle_color, _rect(side * reach - 4, h + 8, 8, 3))
        line(render_cfg.leg_color, (side * w / 4, h * 0.7), (side * reach * 0.7, h + 6), 3)
        poly(render_cfg.nozzle_color, _rect(side * reach * 0.7 - 3, h + 6, 6, 2))
        poly(render_cfg.leg_color, _rect(side * w / 2 - 2, h * 0.3, 4, 3))

    poly(render_cfg.nozzle_color, [(-4, h * 0.8), (-6, h + 8), (6, h + 8), (4, h * 0.8)])
    line(render_cfg.flag_pole_color, (0, -h * 0.3), (0, -h * 0.5), 1)


def draw_flag(surface: pygame.Surface, craft: Craft, flag: Flag, *, render_cfg: RenderCfg) -> None:
    if not flag.visible:
        return
    base_y = craft.y + craft.height
    pole_x = craft.x + render_cfg.flag_offset_x
    top_y = base_y - flag.height
    pygame.draw.line(surface, render_cfg.flag_pole_color, (pole_x, base_y), (pole_x, top_y), 2)

    # cloth only once the pole is tall enough to carry it
    if flag.height <= 10:
        return
    fw, fh = render_cfg.flag_size
    fx, fy = int(pole_x), int(top_y)
    surface.fill((255, 0, 0), (fx, fy, fw, fh))
    for i in range(2, 7, 2):
        surface.fill((255, 255, 255), (fx, fy + i * 2, fw, 2))
    surface.fill((0, 0, 255), (fx, fy, int(fw * 0.4), int(fh * 0.5)))
    for row in range(3):
        for col in range(3):
            surface.fill((255, 255, 255), (fx + 2 + col * 2, fy + 1 + row * 2, 1, 1))
