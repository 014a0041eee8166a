from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import pygame

from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from moon_lander.core.config import RenderCfg
    from moon_lander.core.instruments import Telemetry
    from moon_lander.core.model import Notice


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (14, 14),
    alpha: int | None = None,
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=12,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        if alpha is not None and alpha < 255:
            text_surf = text_surf.copy()
            text_surf.set_alpha(alpha)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    if alpha is not None and alpha < 255:
        panel_surface.set_alpha(alpha)
    return panel_surface


def telemetry_lines(telemetry: Telemetry) -> list[str]:
    return [
        f"ALTITUDE  {telemetry.altitude:>6d}",
        f"V-SPEED   {telemetry.vertical_speed:>6.1f}",
        f"H-SPEED   {telemetry.horizontal_speed:>6.1f}",
        f"FUEL      {telemetry.fuel:>6d}",
    ]


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    telemetry: Telemetry,
    *,
    render_cfg: RenderCfg,
) -> None:
    lines = [(text, render_cfg.hud_text_color) for text in telemetry_lines(telemetry)]
    panel = build_text_panel(font, lines, background_color=render_cfg.hud_background_color)
    rect = panel.get_rect(topright=(surface.get_width() - 16, 16))
    surface.blit(panel, rect)


def draw_notice(
    surface: pygame.Surface,
    title_font: pygame.font.Font,
    font: pygame.font.Font,
    notice: Notice | None,
    *,
    render_cfg: RenderCfg,
) -> None:
    if notice is None:
        return
    color = render_cfg.success_color if notice.kind == "success" else render_cfg.failure_color
    cx, cy = surface.get_width() // 2, surface.get_height() // 3
    title = get_text_surface(title_font, notice.title, color)
    surface.blit(title, title.get_rect(midbottom=(cx, cy)))
    subtitle = get_text_surface(font, notice.subtitle, color)
    surface.blit(subtitle, subtitle.get_rect(midtop=(cx, cy + 6)))
    hint = get_text_surface(font, "Press R to restart", render_cfg.hint_color)
    surface.blit(hint, hint.get_rect(midtop=(cx, cy + 12 + subtitle.get_height())))
