from __future__ import annotations
from typing import Optional, Protocol, List
import pygame


class Scene(Protocol):
    """Lightweight scene protocol with no inheritance burden."""
    def on_enter(self, prev: Optional["Scene"]) -> None: ...
    def on_exit(self,  nxt: Optional["Scene"]) -> None: ...

    def update(self, dt: float) -> None: ...
    def draw(self, surface: pygame.Surface) -> None: ...
    def handle_event(self, e: pygame.event.Event) -> bool: ...


class SceneManager:
    """
    Stack of scenes; only the top one gets events and updates, the whole
    stack is drawn bottom->top.
    """
    def __init__(self, screen: pygame.Surface) -> None:
        self._stack: List[Scene] = []
        self.screen = screen
        self.request_quit = False

    # ----- stack ops --------------------------------------------------------
    def push(self, scene: Scene) -> None:
        prev = self._stack[-1] if self._stack else None
        self._stack.append(scene)
        scene.on_enter(prev)

    def pop(self) -> Optional[Scene]:
        if not self._stack:
            return None
        top = self._stack.pop()
        top.on_exit(self._stack[-1] if self._stack else None)
        return top

    # ----- loop -------------------------------------------------------------
    def active(self) -> Optional[Scene]:
        return self._stack[-1] if self._stack else None

    def handle_event(self, e: pygame.event.Event) -> bool:
        top = self.active()
        if top:
            return bool(top.handle_event(e))
        return False

    def update(self, dt: float) -> None:
        top = self.active()
        if top:
            top.update(dt)

    def draw(self) -> None:
        for s in self._stack:
            s.draw(self.screen)
