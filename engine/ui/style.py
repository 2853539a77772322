from dataclasses import dataclass, field
from typing import Optional

@dataclass
class ProgressBarStyle:
    height: int = 4
    fill_rgb: tuple[int, int, int] = (242, 101, 34)
    track_rgba: tuple[int, int, int, int] = (255, 255, 255, 24)
    show_track: bool = True

@dataclass
class HeaderStyle:
    height: int = 72
    bg_rgb: tuple[int, int, int] = (24, 26, 31)
    title_rgb: tuple[int, int, int] = (250, 250, 250)
    font_size: int = 28
    rule_rgb: Optional[tuple[int, int, int]] = (60, 64, 72)   # line under the header; None = off

@dataclass
class Theme:
    font_path: str | None = None
    font_size: int = 20
    text_rgb: tuple[int, int, int] = (225, 225, 225)
    muted_rgb: tuple[int, int, int] = (150, 154, 162)   # post date / tags line
    padding: tuple[int, int, int, int] = (24, 48, 48, 48)  # t, r, b, l around the post body
    line_spacing: int = 6
    max_text_w: int = 760                               # readable column width cap
    progress_bar: ProgressBarStyle = field(default_factory=ProgressBarStyle)
    header: HeaderStyle = field(default_factory=HeaderStyle)
