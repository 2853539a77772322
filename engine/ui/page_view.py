from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import pygame

from engine.host import CONTENT_ID, HEADER_ID, INDICATOR_ID, VIEWPORT_ID, EventTarget
from engine.scroll_model import ScrollModel
from engine.ui.fonts import FontCache
from engine.ui.progress_bar import ProgressBar
from engine.ui.style import Theme
from engine.ui.text_layout import TextLayout

logger = logging.getLogger(__name__)


class PageView(EventTarget):
    """
    One scrolling document in the window: the site header band followed by
    the post (title, meta line, body). Implements the PageHost capabilities
    against the live layout so the progress tracker can measure it.

    Layout is rebuilt on resize(); scrolling only moves the offset.
    """

    def __init__(
        self,
        size: Tuple[int, int],
        theme: Theme,
        fonts: FontCache,
        *,
        site_title: str,
        title: str,
        body: str,
        meta: str = "",
        bg_rgb: Tuple[int, int, int] = (14, 15, 18),
    ) -> None:
        super().__init__()
        self.theme = theme
        self.fonts = fonts
        self.site_title = site_title
        self.title = title
        self.meta = meta
        self.body = body
        self.bg_rgb = bg_rgb

        self.indicator_percent = 0
        self.scroller = ScrollModel()

        self._w, self._h = 1, 1
        self._header_surf: Optional[pygame.Surface] = None
        self._post_lines: List[Tuple[pygame.Surface, int]] = []   # (surface, y within post)
        self._post_h = 0
        self._relayout(size)

    # --- PageHost -----------------------------------------------------------
    def get_scroll_offset(self) -> float:
        return self.scroller.offset

    def get_element_size(self, element_id: str) -> Optional[float]:
        if element_id == CONTENT_ID:
            return float(self._post_h)
        if element_id == HEADER_ID:
            return float(self.theme.header.height) if self.theme.header.height > 0 else None
        if element_id == VIEWPORT_ID:
            return float(self._h)
        if element_id == INDICATOR_ID:
            return float(self.theme.progress_bar.height)
        return None

    def set_indicator_width(self, percent: int) -> None:
        self.indicator_percent = int(percent)

    # --- page side ----------------------------------------------------------
    def scroll_by(self, dy: float) -> None:
        self.scroller.scroll(dy)
        self.dispatch("scroll")

    def page(self, direction: int, frac: float) -> None:
        self.scroller.page(direction, frac)
        self.dispatch("scroll")

    def to_top(self) -> None:
        self.scroller.to_top()
        self.dispatch("scroll")

    def to_bottom(self) -> None:
        self.scroller.to_bottom()
        self.dispatch("scroll")

    def resize(self, size: Tuple[int, int]) -> None:
        self._relayout(size)
        self.dispatch("resize")

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(self.bg_rgb)
        y0 = -int(self.scroller.offset)

        if self._header_surf is not None:
            surface.blit(self._header_surf, (0, y0))
        post_top = y0 + max(0, self.theme.header.height)

        left = self._column_left()
        for srf, y in self._post_lines:
            sy = post_top + y
            if sy + srf.get_height() < 0:
                continue
            if sy > self._h:
                break
            surface.blit(srf, (left, sy))

        ProgressBar.draw(surface, self.indicator_percent, self.theme.progress_bar)

    # --- layout -------------------------------------------------------------
    def _column_w(self) -> int:
        _, r, _, l = self.theme.padding
        return max(1, min(self.theme.max_text_w, self._w - (l + r)))

    def _column_left(self) -> int:
        _, r, _, l = self.theme.padding
        free = self._w - (l + r) - self._column_w()
        return l + max(0, free // 2)

    def _relayout(self, size: Tuple[int, int]) -> None:
        self._w, self._h = max(1, int(size[0])), max(1, int(size[1]))
        self._header_surf = self._build_header()
        self._post_lines, self._post_h = self._build_post()
        header_h = max(0, self.theme.header.height)
        self.scroller.resize(header_h + self._post_h, self._h)
        logger.debug("page layout: %dx%d header=%d post=%d", self._w, self._h, header_h, self._post_h)

    def _build_header(self) -> Optional[pygame.Surface]:
        hs = self.theme.header
        if hs.height <= 0:
            return None
        surf = pygame.Surface((self._w, hs.height))
        surf.fill(hs.bg_rgb)
        font = self.fonts.get(self.theme.font_path, hs.font_size, bold=True)
        title = font.render(self.site_title, True, hs.title_rgb)
        surf.blit(title, (self._column_left(), (hs.height - title.get_height()) // 2))
        if hs.rule_rgb is not None:
            pygame.draw.line(surf, hs.rule_rgb, (0, hs.height - 1), (self._w, hs.height - 1))
        return surf

    def _build_post(self) -> Tuple[List[Tuple[pygame.Surface, int]], int]:
        th = self.theme
        t, _, b, _ = th.padding
        wrap_w = self._column_w()

        title_font = self.fonts.get(th.font_path, int(th.font_size * 1.5), bold=True)
        body_font = self.fonts.get(th.font_path, th.font_size)

        blocks = [
            (TextLayout(title_font, th.line_spacing), self.title, th.text_rgb),
            (TextLayout(body_font, th.line_spacing), self.meta, th.muted_rgb),
            (TextLayout(body_font, th.line_spacing), self.body, th.text_rgb),
        ]

        lines: List[Tuple[pygame.Surface, int]] = []
        y = t
        for layout, text, color in blocks:
            if not text:
                continue
            surfs, _ = layout.layout(text, wrap_w, color)
            for srf in surfs:
                lines.append((srf, y))
                y += srf.get_height() + layout.line_spacing
            y += body_font.get_linesize()   # gap between blocks
        return lines, y + b
