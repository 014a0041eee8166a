from __future__ import annotations

import random

import pygame

from moon_lander.core.config import RENDER_CFG, RenderCfg
from moon_lander.core.instruments import Telemetry
from moon_lander.core.model import Phase
from moon_lander.core.simulation import SimSnapshot

from .assets import load_font
from .draw import (
    draw_craft,
    draw_earth,
    draw_flag,
    draw_particles,
    draw_starfield,
    draw_terrain,
    generate_starfield,
)
from .ui import draw_hud, draw_notice


class SceneRenderer:
    """Draws a :class:`SimSnapshot` onto a surface.

    Holds only presentation state (fonts, starfield); it never writes back
    into the simulation.
    """

    def __init__(
        self,
        size: tuple[int, int],
        *,
        render_cfg: RenderCfg = RENDER_CFG,
        rng: random.Random | None = None,
    ) -> None:
        self.render_cfg = render_cfg
        self._rng = rng or random.Random()
        self.font = load_font(render_cfg.hud_font_names, render_cfg.hud_font_size)
        self.title_font = load_font(render_cfg.hud_font_names, render_cfg.banner_font_size, bold=True)
        self.stars = generate_starfield(size, render_cfg=render_cfg, rng=self._rng)
        self.session: int | None = None

    def resize(self, size: tuple[int, int]) -> None:
        self.stars = generate_starfield(size, render_cfg=self.render_cfg, rng=self._rng)

    def draw(self, surface: pygame.Surface, snapshot: SimSnapshot, telemetry: Telemetry) -> None:
        cfg = self.render_cfg
        if snapshot.session != self.session:
            # a restart gets a fresh sky
            if self.session is not None:
                self.resize(surface.get_size())
            self.session = snapshot.session
        surface.fill(cfg.background_color)
        draw_starfield(surface, self.stars, rng=self._rng)
        draw_earth(surface, render_cfg=cfg)
        draw_terrain(surface, snapshot.terrain, render_cfg=cfg)
        draw_particles(surface, snapshot.particles, render_cfg=cfg)
        if snapshot.phase is not Phase.CRASHED:
            draw_craft(surface, snapshot.craft, render_cfg=cfg)
        if snapshot.phase is Phase.LANDED:
            draw_flag(surface, snapshot.craft, snapshot.flag, render_cfg=cfg)
        draw_hud(surface, self.font, telemetry, render_cfg=cfg)
        draw_notice(surface, self.title_font, self.font, snapshot.notice, render_cfg=cfg)
