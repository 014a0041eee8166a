"""Rendering helpers for the lander."""

from .assets import (
    get_text_surface,
    hsl_color,
    load_font,
)
from .draw import (
    Star,
    draw_craft,
    draw_earth,
    draw_flag,
    draw_particles,
    draw_starfield,
    draw_terrain,
    generate_starfield,
)
from .scene import SceneRenderer
from .ui import (
    build_text_panel,
    draw_hud,
    draw_notice,
    telemetry_lines,
)

__all__ = [
    "SceneRenderer",
    "Star",
    "build_text_panel",
    "draw_craft",
    "draw_earth",
    "draw_flag",
    "draw_hud",
    "draw_notice",
    "draw_particles",
    "draw_starfield",
    "draw_terrain",
    "generate_starfield",
    "get_text_surface",
    "hsl_color",
    "load_font",
    "telemetry_lines",
]
