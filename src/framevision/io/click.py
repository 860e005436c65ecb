"""Click projection: issue input at a region's absolute desktop centre."""
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..vision.region import ScreenRegion

logger = logging.getLogger(__name__)

Clicker = Callable[[int, int], None]

_default_clicker: Optional[Clicker] = None


def set_default_clicker(clicker: Optional[Clicker]) -> None:
    """Replace the clicker used when click_center() gets none (None resets)."""
    global _default_clicker
    _default_clicker = clicker


def _get_default_clicker() -> Clicker:
    global _default_clicker
    if _default_clicker is None:
        from .controls import InputController

        _default_clicker = InputController().click_at
    return _default_clicker


def click_center(region: ScreenRegion, clicker: Optional[Clicker] = None) -> None:
    """Click the centre of `region` in desktop coordinates.

    Desktop-level regions are clicked at their own centre; deeper regions are
    projected to the desktop first.
    """
    if region.is_at_desktop_level():
        rect = region.to_rect()
    else:
        rect = region.project_to_desktop()
    x, y = rect.center
    logger.debug("click: %r -> desktop %s centre (%d,%d)", region, rect, x, y)
    (clicker or _get_default_clicker())(x, y)


__all__ = ["Clicker", "click_center", "set_default_clicker"]
