from __future__ import annotations
from typing import Callable, Dict, List, Optional, Protocol

# Element ids of the page the tracker measures and writes to
CONTENT_ID = "post"
HEADER_ID = "site-header"
VIEWPORT_ID = "window"
INDICATOR_ID = "progress-indicator"

TRACKED_EVENTS = ("resize", "scroll")

Listener = Callable[..., object]


def format_width(percent: int) -> str:
    """ CSS width style for the indicator, e.g. 50 -> "50%". """
    return f"{int(percent)}%"


class PageHost(Protocol):
    """What the progress tracker needs from a page; no pygame import here."""
    def get_scroll_offset(self) -> float: ...
    def get_element_size(self, element_id: str) -> Optional[float]: ...
    def set_indicator_width(self, percent: int) -> None: ...
    def add_event_listener(self, event: str, handler: Listener) -> None: ...


class EventTarget:
    """ resize/scroll listeners, run synchronously in registration order. """
    def __init__(self) -> None:
        self._listeners: Dict[str, List[Listener]] = {e: [] for e in TRACKED_EVENTS}

    def add_event_listener(self, event: str, handler: Listener) -> None:
        self._check_event(event)
        self._listeners[event].append(handler)

    def listener_count(self, event: str) -> int:
        self._check_event(event)
        return len(self._listeners[event])

    def dispatch(self, event: str) -> None:
        self._check_event(event)
        for handler in list(self._listeners[event]):
            handler(event)

    def _check_event(self, event: str) -> None:
        if event not in self._listeners:
            raise ValueError(f"unsupported page event: {event!r}")


class StaticPage(EventTarget):
    """
    Headless page: element heights, a scroll offset and the indicator's width
    style as a browser would hold it ("50%").
    """
    def __init__(
        self,
        *,
        content_height: float = 0.0,
        viewport_height: float = 0.0,
        header_height: Optional[float] = None,
        offset_top: float = 0.0,
    ) -> None:
        super().__init__()
        self._sizes: Dict[str, float] = {
            CONTENT_ID: float(content_height),
            VIEWPORT_ID: float(viewport_height),
        }
        if header_height is not None:
            self._sizes[HEADER_ID] = float(header_height)
        self.offset_top = float(offset_top)
        self.indicator_width: Optional[str] = None

    # --- PageHost -----------------------------------------------------------
    def get_scroll_offset(self) -> float:
        return self.offset_top

    def get_element_size(self, element_id: str) -> Optional[float]:
        return self._sizes.get(element_id)

    def set_indicator_width(self, percent: int) -> None:
        self.indicator_width = format_width(percent)

    # --- page side ----------------------------------------------------------
    def set_element_size(self, element_id: str, height: Optional[float]) -> None:
        if height is None:
            self._sizes.pop(element_id, None)
        else:
            self._sizes[element_id] = float(height)

    def scroll_to(self, offset_top: float) -> None:
        self.offset_top = float(offset_top)
        self.dispatch("scroll")

    def resize(self, viewport_height: float) -> None:
        self._sizes[VIEWPORT_ID] = float(viewport_height)
        self.dispatch("resize")
