from __future__ import annotations
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml

from engine.ui.style import Theme

logger = logging.getLogger(__name__)

DEFAULTS_PATH = "blog/config/defaults.yaml"

@dataclass
class WindowCfg:
    width: int = 960
    height: int = 720
    title: str = "blog"
    bg_rgb: tuple[int, int, int] = (14, 15, 18)

@dataclass
class InputCfg:
    scroll_wheel_pixels: int = 40
    arrow_scroll_pixels: int = 24
    page_scroll_frac: float = 0.9

@dataclass
class SiteCfg:
    title: str = "blog"
    posts_dir: str = "blog/_posts"
    map_path: str = "blog/map.yaml"

@dataclass
class AppCfg:
    fps: int = 60
    window: WindowCfg = field(default_factory=WindowCfg)
    input: InputCfg = field(default_factory=InputCfg)
    site: SiteCfg = field(default_factory=SiteCfg)


def _get(d: dict, path: str, default: Any):
    cur = d
    for part in path.split("."):
        if not isinstance(cur, dict) or part not in cur:
            return default
        cur = cur[part]
    return cur

def load_defaults(path: str = DEFAULTS_PATH) -> Dict[str, Any]:
    """ Raw mapping from the YAML config; empty when the file is missing. """
    p = Path(path)
    if not p.exists():
        logger.warning("Config '%s' not found, using built-in defaults", path)
        return {}
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping")
    return data

def load_settings(path: str = DEFAULTS_PATH) -> AppCfg:
    data = load_defaults(path)
    return AppCfg(
        fps=int(_get(data, "fps", 60)),
        window=WindowCfg(
            width=int(_get(data, "window.width", 960)),
            height=int(_get(data, "window.height", 720)),
            title=str(_get(data, "window.title", "blog")),
            bg_rgb=tuple(_get(data, "window.bg_rgb", (14, 15, 18))),
        ),
        input=InputCfg(
            scroll_wheel_pixels=int(_get(data, "input.scroll_wheel_pixels", 40)),
            arrow_scroll_pixels=int(_get(data, "input.arrow_scroll_pixels", 24)),
            page_scroll_frac=float(_get(data, "input.page_scroll_frac", 0.9)),
        ),
        site=SiteCfg(
            title=str(_get(data, "site.title", "blog")),
            posts_dir=str(_get(data, "site.posts_dir", "blog/_posts")),
            map_path=str(_get(data, "site.map_path", "blog/map.yaml")),
        ),
    )

def build_theme_from_defaults(defaults: Dict[str, Any]) -> Theme:
    tdata = defaults.get("theme", {}) or {}
    th = Theme()

    # core
    th.font_path    = tdata.get("font_path", th.font_path)
    th.font_size    = int(tdata.get("font_size", th.font_size))
    th.text_rgb     = tuple(tdata.get("text_rgb", th.text_rgb))
    th.muted_rgb    = tuple(tdata.get("muted_rgb", th.muted_rgb))
    th.padding      = tuple(tdata.get("padding", th.padding))
    th.line_spacing = int(tdata.get("line_spacing", th.line_spacing))
    th.max_text_w   = int(tdata.get("max_text_w", th.max_text_w))

    # progress bar
    pb = tdata.get("progress_bar", {}) or {}
    th.progress_bar.height     = int(pb.get("height", th.progress_bar.height))
    th.progress_bar.fill_rgb   = tuple(pb.get("fill_rgb", th.progress_bar.fill_rgb))
    th.progress_bar.track_rgba = tuple(pb.get("track_rgba", th.progress_bar.track_rgba))
    th.progress_bar.show_track = bool(pb.get("show_track", th.progress_bar.show_track))

    # site header
    hd = tdata.get("header", {}) or {}
    th.header.height    = int(hd.get("height", th.header.height))
    th.header.bg_rgb    = tuple(hd.get("bg_rgb", th.header.bg_rgb))
    th.header.title_rgb = tuple(hd.get("title_rgb", th.header.title_rgb))
    th.header.font_size = int(hd.get("font_size", th.header.font_size))
    if "rule_rgb" in hd:
        rule = hd.get("rule_rgb")
        th.header.rule_rgb = tuple(rule) if rule is not None else None

    return th
