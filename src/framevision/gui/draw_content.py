"""
Overlay rectangle registry.

Searches publish what they recognised here, keyed by the recognition name;
an overlay window (not part of this package) renders the current snapshot.
Last write wins per name. All methods are thread-safe.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ..vision.geometry import Rect

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RectDrawable:
    """A rectangle in capture-area coordinates plus how to draw it."""

    rect: "Rect"
    style: Optional[Any] = None
    name: Optional[str] = None


class DrawContent:
    """Thread-safe name -> RectDrawable map."""

    def __init__(self):
        self.lock = threading.Lock()
        self._rects: Dict[str, RectDrawable] = {}

    def put_rect(self, name: str, rect: "Rect", style=None) -> None:
        with self.lock:
            self._rects[name] = RectDrawable(rect, style, name)
        logger.debug("overlay: put %s at %s", name, rect)

    def remove_rect(self, name: str) -> None:
        with self.lock:
            removed = self._rects.pop(name, None)
        if removed is not None:
            logger.debug("overlay: removed %s", name)

    def get(self, name: str) -> Optional[RectDrawable]:
        with self.lock:
            return self._rects.get(name)

    def snapshot(self) -> Dict[str, RectDrawable]:
        """Copy of the current rectangles for a renderer to draw."""
        with self.lock:
            return dict(self._rects)

    def clear(self) -> None:
        with self.lock:
            self._rects.clear()


_instance: Optional[DrawContent] = None
_instance_lock = threading.Lock()


def draw_content() -> DrawContent:
    """Return the process-wide overlay registry."""
    global _instance
    if _instance is None:
        with _instance_lock:
            if _instance is None:
                _instance = DrawContent()
    return _instance
