"""State readout overlay."""
from __future__ import annotations

import pygame

from wobble import Blob

from ui.constants import TEXT_COLOR


def draw_hud(surface: pygame.Surface, font: pygame.font.Font, blob: Blob) -> None:
    lines = [
        f"shape   {blob.state.name.lower()}  t={blob.current_time_fraction:.2f}",
        f"energy  {blob.energy_state.name.lower()}  d={blob.theta_delta:.4f}",
        "space: expand/collapse   esc: quit",
    ]
    y = surface.get_height() - 18 * len(lines) - 8
    for line in lines:
        surface.blit(font.render(line, True, TEXT_COLOR), (10, y))
        y += 18
