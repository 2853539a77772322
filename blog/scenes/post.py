# blog/scenes/post.py
from __future__ import annotations
from typing import Optional
import pygame

from engine.scene import Scene, SceneManager
from engine.settings import AppCfg, DEFAULTS_PATH, load_defaults, build_theme_from_defaults
from engine.progress import ScrollProgressTracker
from engine.ui.fonts import FontCache
from engine.ui.style import Theme
from engine.ui.page_view import PageView

from blog.posts import Post


class PostScene(Scene):
    """
    Reading scene for one post.
    - Lays the site header and post out as a single scrolling page
    - Attaches the progress tracker on enter (first render happens right away)
    - Maps wheel/keys to scrolling; the page dispatches scroll/resize events
    """

    def __init__(self, mgr: SceneManager, cfg: AppCfg, post: Post, config_path: Optional[str] = None):
        self.mgr = mgr
        self.cfg = cfg
        self.post = post

        defaults = load_defaults(config_path or DEFAULTS_PATH)
        self.theme: Theme = build_theme_from_defaults(defaults)
        self.fonts = FontCache()

        self.page = PageView(
            mgr.screen.get_size(),
            self.theme,
            self.fonts,
            site_title=cfg.site.title,
            title=post.title,
            meta=post.meta_line,
            body=post.body,
            bg_rgb=cfg.window.bg_rgb,
        )
        self.tracker = ScrollProgressTracker(self.page)

    # --- Lifecycle ----------------------------------------------------------
    def on_enter(self, prev: Optional[Scene]) -> None:
        self.tracker.attach()

    def on_exit(self, nxt: Optional[Scene]) -> None:
        self.fonts.clear()

    # --- Loop ---------------------------------------------------------------
    def handle_event(self, e: pygame.event.Event) -> bool:
        if e.type == pygame.KEYDOWN:
            if e.key == pygame.K_ESCAPE:
                self.mgr.request_quit = True
                return True
            return self._handle_scroll_key(e.key)

        if e.type == pygame.MOUSEWHEEL:
            self.page.scroll_by(-e.y * self.cfg.input.scroll_wheel_pixels)
            return True

        if e.type == pygame.VIDEORESIZE:
            # App already recreated the window
            self.page.resize(self.mgr.screen.get_size())
            return True

        return False

    def update(self, dt: float) -> None:
        pass

    def draw(self, surface: pygame.Surface) -> None:
        self.page.draw(surface)

    # --- helpers ------------------------------------------------------------
    def _handle_scroll_key(self, key: int) -> bool:
        frac = self.cfg.input.page_scroll_frac
        step = self.cfg.input.arrow_scroll_pixels
        if key in (pygame.K_PAGEDOWN, pygame.K_SPACE):
            self.page.page(+1, frac)
            return True
        if key == pygame.K_PAGEUP:
            self.page.page(-1, frac)
            return True
        if key == pygame.K_DOWN:
            self.page.scroll_by(step)
            return True
        if key == pygame.K_UP:
            self.page.scroll_by(-step)
            return True
        if key == pygame.K_HOME:
            self.page.to_top()
            return True
        if key == pygame.K_END:
            self.page.to_bottom()
            return True
        return False
