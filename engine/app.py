from __future__ import annotations

import logging

import pygame

from engine.settings import AppCfg
from engine.scene import Scene, SceneManager

logger = logging.getLogger(__name__)


class ReaderApp:
    """
    Window shell for the reader. Owns display init, the frame clock and
    resize; everything else is delegated to the active scene.
    """

    def __init__(self, cfg: AppCfg):
        self.cfg = cfg
        pygame.init()
        pygame.display.set_caption(cfg.window.title)

        self._flags = pygame.RESIZABLE | pygame.DOUBLEBUF
        self.screen = pygame.display.set_mode(
            (int(cfg.window.width), int(cfg.window.height)),
            flags=self._flags,
        )

        self.clock = pygame.time.Clock()
        self.running = True
        self.scenes = SceneManager(self.screen)

    def open(self, scene: Scene) -> None:
        self.scenes.push(scene)

    # ------------------------------------------------------------------ #
    # Main loop
    # ------------------------------------------------------------------ #
    def run(self) -> None:
        while self.running and not self.scenes.request_quit:
            dt = self.clock.tick(self.cfg.fps) / 1000.0

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    self.running = False
                    break

                # Recreate the display first so the scene measures the new size
                if e.type == pygame.VIDEORESIZE:
                    self._resize_to(e.w, e.h)
                    self.scenes.handle_event(e)
                    continue

                if self.scenes.handle_event(e):
                    continue

                if e.type == pygame.KEYDOWN:
                    if (e.key == pygame.K_q) and (pygame.key.get_mods() & pygame.KMOD_CTRL):
                        self.running = False
                        continue

            self.scenes.update(dt)
            self.scenes.draw()
            pygame.display.flip()

        while self.scenes.pop() is not None:
            pass
        pygame.quit()

    def _resize_to(self, w: int, h: int) -> None:
        w = max(1, int(w))
        h = max(1, int(h))
        logger.debug("window resized to %dx%d", w, h)
        self.screen = pygame.display.set_mode((w, h), flags=self._flags)
        self.scenes.screen = self.screen
