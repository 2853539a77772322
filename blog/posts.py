from __future__ import annotations
import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from blog.tags import expand_tags

_FENCE = "---"


@dataclass
class Post:
    path: str
    title: str
    body: str
    date: Optional[dt.date] = None
    tags: List[str] = field(default_factory=list)

    @property
    def meta_line(self) -> str:
        """ "2014-03-02 · ruby, databases" style line shown under the title. """
        parts = []
        if self.date:
            parts.append(self.date.isoformat())
        if self.tags:
            parts.append(", ".join(self.tags))
        return " · ".join(parts)


def _split_front_matter(path: str, text: str) -> Tuple[dict, str]:
    """
    Returns (front_matter, body). Front matter is optional and must be the
    first thing in the file, fenced by '---' lines.
    """
    lines = text.splitlines()
    if not lines or lines[0].strip() != _FENCE:
        return {}, text

    for i in range(1, len(lines)):
        if lines[i].strip() == _FENCE:
            raw = "\n".join(lines[1:i])
            body = "\n".join(lines[i + 1:])
            break
    else:
        raise ValueError(f"{path}: unterminated front matter")

    meta = yaml.safe_load(raw) or {}
    if not isinstance(meta, dict):
        raise ValueError(f"{path}: front matter must be a mapping")
    return meta, body


def _normalize_tags(path: str, raw: Any) -> List[str]:
    if raw is None:
        return []
    if isinstance(raw, str):
        return [t for t in raw.split() if t]
    if isinstance(raw, list):
        return [str(t) for t in raw]
    raise ValueError(f"{path}: 'tags' must be a string or a list")


def _normalize_date(path: str, raw: Any) -> Optional[dt.date]:
    if raw is None or raw == "":
        return None
    # yaml.safe_load already turns 2014-03-02 into a date (datetime for timestamps)
    if isinstance(raw, dt.datetime):
        return raw.date()
    if isinstance(raw, dt.date):
        return raw
    try:
        return dt.date.fromisoformat(str(raw).strip()[:10])
    except ValueError:
        raise ValueError(f"{path}: bad date {raw!r}") from None


def load_post(path: str, *, expand: bool = True) -> Post:
    """
    Loads a post file:
        ---
        title: <str>
        date: YYYY-MM-DD
        tags: [a, b] | "a b"
        ---
        body text...
    Title falls back to the file name. `{% tag %}` markers in the body are
    expanded when `expand` is set.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()

    meta, body = _split_front_matter(path, text)
    title = str(meta.get("title") or Path(path).stem.replace("-", " ").strip())
    body = body.strip("\n")
    if expand:
        body = expand_tags(body)

    return Post(
        path=str(path),
        title=title,
        body=body,
        date=_normalize_date(path, meta.get("date")),
        tags=_normalize_tags(path, meta.get("tags")),
    )


def list_posts(directory: str, *, expand: bool = True) -> List[Post]:
    """ Posts in a directory (*.md, *.txt), oldest first; undated posts sort last. """
    root = Path(directory)
    files = sorted(p for p in root.iterdir() if p.is_file() and p.suffix in (".md", ".txt"))
    posts = [load_post(str(p), expand=expand) for p in files]
    posts.sort(key=lambda p: (p.date is None, p.date or dt.date.min, Path(p.path).name))
    return posts
