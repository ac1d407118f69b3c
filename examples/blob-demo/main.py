"""Blob Demo - the wobble blob in a resizable pygame window.

Controls:
  Space   Toggle expansion / collapse
  Move    Pointer motion energizes the blob
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from wobble import ShapeState
from wobble_host import BlobContext, FrameLoop, PygameCanvas

from ui.constants import BG_COLOR, FPS, SCREEN_H, SCREEN_W
from ui.hud import draw_hud

logger = logging.getLogger("blob-demo")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(name)s %(message)s")

    pygame.init()
    flags = pygame.RESIZABLE
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H), flags)
    pygame.display.set_caption("Blob Demo - wobble")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    # The blob draws onto its own alpha layer, composited over the background.
    layer = PygameCanvas(pygame.Surface((SCREEN_W, SCREEN_H), pygame.SRCALPHA))
    context = BlobContext(layer, seed=42)
    loop = FrameLoop(fps=FPS)
    context.install(loop)
    logger.info("blob ready, seed=%d", context.blob.seed)

    running = True
    while running:
        clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    if context.blob.state in (ShapeState.EXPANDED, ShapeState.EXPANDING):
                        context.blob.cue_collapse()
                    else:
                        context.blob.cue_expansion()

            elif event.type == pygame.VIDEORESIZE:
                context.on_resize(event.w, event.h)

            elif event.type == pygame.MOUSEMOTION:
                context.on_pointer(*event.pos)

        # --- Frame ---
        loop.step()

        # --- Render ---
        screen = pygame.display.get_surface()
        screen.fill(BG_COLOR)
        screen.blit(layer.target, (0, 0))
        draw_hud(screen, font, context.blob)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
