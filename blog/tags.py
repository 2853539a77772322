from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Dict, Type

import yaml

logger = logging.getLogger(__name__)

_TAG_RE = re.compile(r"\{%\s*([A-Za-z_][\w-]*)\s*%\}")


class UnknownTagError(KeyError):
    pass


class Tag:
    """ A named snippet producer; subclasses override render(). """
    name = ""

    def render(self, *args) -> str:
        raise NotImplementedError


class MapTag(Tag):
    """
    Inlines the site map: loads a YAML file and emits it as JSON text, ready
    to be dropped into a page script.
    """
    name = "map"
    default_path = "map.yaml"

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path or self.default_path)

    def render(self, *args) -> str:
        with self.path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return json.dumps(data)


_registry: Dict[str, Tag] = {}


def register_tag(name: str, tag: Tag | Type[Tag]) -> None:
    """ Register a tag instance (or a class, instantiated with no arguments). """
    if isinstance(tag, type):
        tag = tag()
    prev = _registry.get(name)
    if prev is not None:
        if type(prev) is type(tag):
            logger.debug("Tag '%s' reconfigured", name)
        else:
            logger.warning("Tag '%s' replaced by %s", name, type(tag).__name__)
    _registry[name] = tag


def get_tag(name: str) -> Tag:
    try:
        return _registry[name]
    except KeyError:
        raise UnknownTagError(name) from None


def render_tag(name: str, *args) -> str:
    return get_tag(name).render(*args)


def expand_tags(text: str) -> str:
    """
    Replace every `{% name %}` marker of a registered tag with its output.
    Other markers ({% endhighlight %}, {% raw %}, ...) are left as written.
    """
    def _sub(m: re.Match) -> str:
        name = m.group(1)
        if name not in _registry:
            return m.group(0)
        return render_tag(name)
    return _TAG_RE.sub(_sub, text or "")


register_tag(MapTag.name, MapTag)
