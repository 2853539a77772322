from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from engine.host import (
    CONTENT_ID,
    HEADER_ID,
    VIEWPORT_ID,
    PageHost,
    TRACKED_EVENTS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ViewportMetrics:
    content_height: float = 0.0
    viewport_height: float = 0.0
    header_height: float = 0.0

    @classmethod
    def measure(cls, host: PageHost) -> "ViewportMetrics":
        """ Fresh snapshot of the page sizes. A missing header counts as 0. """
        return cls(
            content_height=_size(host.get_element_size(CONTENT_ID)),
            viewport_height=_size(host.get_element_size(VIEWPORT_ID)),
            header_height=_size(host.get_element_size(HEADER_ID)),
        )


@dataclass(frozen=True)
class ScrollPosition:
    offset_top: float = 0.0

    @classmethod
    def measure(cls, host: PageHost) -> "ScrollPosition":
        return cls(offset_top=max(0.0, float(host.get_scroll_offset() or 0.0)))


def _size(value: Optional[float]) -> float:
    if value is None:
        return 0.0
    return max(0.0, float(value))


def compute_scrollable_range(content_height: float, viewport_height: float, header_height: float = 0.0) -> float:
    """ Pixels the reader can scroll through; zero or negative when the page fits on screen. """
    return float(header_height) + float(content_height) - float(viewport_height)


def compute_progress(offset_top: float, scrollable_range: float) -> float:
    """
    Fraction of the scrollable range already passed, clamped to [0, 1].
    A range <= 0 (nothing to scroll) always yields 0.0.
    """
    if not scrollable_range > 0:
        return 0.0
    fraction = float(offset_top) / float(scrollable_range)
    if math.isnan(fraction):
        return 0.0
    return max(0.0, min(1.0, fraction))


def to_percent(fraction: float) -> int:
    # Half-up rounding, so 0.125 -> 13 rather than banker's 12
    return int(math.floor(fraction * 100 + 0.5))


class ScrollProgressTracker:
    """
    Reflects how far the reader has scrolled through the post as the width of
    the progress indicator.

    Holds only the host handle; metrics and scroll position are re-measured on
    every event and never cached between calls.
    """

    def __init__(self, host: PageHost) -> None:
        self.host = host
        self._attached = False

    # --- public API ---------------------------------------------------------
    def attach(self) -> int:
        """
        Render once for the current scroll state, then follow resize/scroll
        events for the lifetime of the page. Returns the first percentage.
        """
        percent = self.on_viewport_change()
        if not self._attached:
            for event in TRACKED_EVENTS:
                self.host.add_event_listener(event, self.on_viewport_change)
            self._attached = True
        return percent

    def render(self, fraction: float) -> int:
        percent = to_percent(fraction)
        self.host.set_indicator_width(percent)
        return percent

    def on_viewport_change(self, *_event) -> int:
        metrics = ViewportMetrics.measure(self.host)
        position = ScrollPosition.measure(self.host)
        scroll_range = compute_scrollable_range(
            metrics.content_height, metrics.viewport_height, metrics.header_height
        )
        fraction = compute_progress(position.offset_top, scroll_range)
        percent = self.render(fraction)
        logger.debug(
            "progress: offset=%.1f range=%.1f -> %d%%",
            position.offset_top, scroll_range, percent,
        )
        return percent
