from dataclasses import dataclass

@dataclass
class ScrollModel:
    """ Document scroll offset; content_h includes the site header. """
    content_h: int = 0
    viewport_h: int = 0
    offset: float = 0.0

    def max(self) -> float: return max(0.0, float(self.content_h - self.viewport_h))
    def clamp(self): self.offset = max(0.0, min(self.max(), self.offset))
    def scroll(self, dy: float): self.offset += dy; self.clamp()
    def page(self, direction: int, frac: float): self.scroll(direction * self.viewport_h * max(0.0, frac))
    def to_top(self): self.offset = 0.0
    def to_bottom(self): self.offset = self.max()
    def resize(self, content_h: int, viewport_h: int):
        self.content_h, self.viewport_h = int(content_h), int(viewport_h)
        self.clamp()
