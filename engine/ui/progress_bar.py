from __future__ import annotations

import pygame
from engine.ui.style import ProgressBarStyle

class ProgressBar:
    """
    Stateless drawer for the reading-progress indicator pinned to the top
    edge of the window.
    """
    @staticmethod
    def fill_width(total_w: int, percent: int) -> int:
        percent = max(0, min(100, int(percent)))
        return (max(0, int(total_w)) * percent) // 100

    @staticmethod
    def draw(surface: pygame.Surface, percent: int, style: ProgressBarStyle) -> None:
        w = surface.get_width()
        h = style.height
        if h <= 0 or w <= 0:
            return

        if style.show_track:
            track = pygame.Surface((w, h), pygame.SRCALPHA)
            track.fill(style.track_rgba)
            surface.blit(track, (0, 0))

        fill_w = ProgressBar.fill_width(w, percent)
        if fill_w > 0:
            pygame.draw.rect(surface, style.fill_rgb, pygame.Rect(0, 0, fill_w, h))
