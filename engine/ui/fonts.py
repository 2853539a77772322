from __future__ import annotations
from dataclasses import dataclass
from collections import OrderedDict
from typing import Optional
import pygame

@dataclass(frozen=True)
class FontKey:
    path: Optional[str]
    size: int
    bold: bool = False

class FontCache:
    """
    Tiny LRU cache of pygame fonts. The header title and the post body ask
    for different sizes of the same face, and a resize re-measures every line.
    """

    def __init__(self, max_entries: int = 16) -> None:
        self._cache: "OrderedDict[FontKey, pygame.font.Font]" = OrderedDict()
        self._max = max(1, int(max_entries))

    def get(self, path: Optional[str], size: int, *, bold: bool = False) -> pygame.font.Font:
        k = FontKey(path, int(size), bool(bold))
        f = self._cache.get(k)
        if f is not None:
            self._cache.move_to_end(k)
            return f

        if not pygame.font.get_init():
            pygame.font.init()
        f = pygame.font.Font(k.path, k.size)
        if k.bold:
            f.set_bold(True)

        self._cache[k] = f
        while len(self._cache) > self._max:
            self._cache.popitem(last=False)
        return f

    def clear(self) -> None:
        self._cache.clear()
