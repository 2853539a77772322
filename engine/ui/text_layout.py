from __future__ import annotations
from typing import Callable, List, Tuple
import pygame

Measure = Callable[[str], int]


def wrap_text(text: str, wrap_w: int, measure: Measure) -> List[str]:
    """
    Soft-wrap on spaces, with a hard-wrap fallback for very long words.
    Explicit newlines are kept; blank lines stay as "" entries.
    `measure` returns the pixel width of a string.
    """
    if not text:
        return []
    if wrap_w <= 0:
        return text.splitlines()

    out: List[str] = []
    for raw in text.splitlines():
        if not raw.strip():
            out.append("")
            continue
        cur = ""
        for w in raw.split(" "):
            cand = w if not cur else f"{cur} {w}"
            if measure(cand) <= wrap_w:
                cur = cand
                continue
            if cur:
                out.append(cur)
            if measure(w) <= wrap_w:
                cur = w
            else:
                chunks = _hard_wrap_long_word(w, wrap_w, measure)
                out.extend(chunks[:-1])
                cur = chunks[-1] if chunks else ""
        out.append(cur)
    return out


def _hard_wrap_long_word(word: str, wrap_w: int, measure: Measure) -> List[str]:
    parts: List[str] = []
    i, n = 0, len(word)
    while i < n:
        lo, hi = 1, n - i
        best = 1
        while lo <= hi:
            mid = (lo + hi) // 2
            if measure(word[i:i + mid]) <= wrap_w:
                best = mid
                lo = mid + 1
            else:
                hi = mid - 1
        parts.append(word[i:i + best])
        i += best
    return parts


class TextLayout:
    """ Wraps and renders post text with one font; knows the line spacing. """

    def __init__(self, font: pygame.font.Font, line_spacing: int = 0):
        self.font = font
        self.line_spacing = max(0, int(line_spacing))

    def wrap(self, text: str, wrap_w: int) -> List[str]:
        return wrap_text(text, wrap_w, lambda s: self.font.size(s)[0])

    def render_lines(self, lines: List[str], color: Tuple[int, int, int]) -> Tuple[List[pygame.Surface], int]:
        """ Render wrapped lines; returns the surfaces and their stacked height. """
        surfs = [self.font.render(line, True, color) for line in lines]
        if not surfs:
            return [], 0
        total_h = sum(s.get_height() for s in surfs) + (len(surfs) - 1) * self.line_spacing
        return surfs, total_h

    def layout(self, text: str, wrap_w: int, color: Tuple[int, int, int]) -> Tuple[List[pygame.Surface], int]:
        return self.render_lines(self.wrap(text or "", wrap_w), color)
