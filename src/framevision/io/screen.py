"""
Root frames of the region tree.

desktop_region() sizes the depth-0 frame to the virtual screen reported by
mss; capture_area_region() hangs a caller-supplied screenshot under it at
depth 1. Nothing here grabs pixels.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from ..config.vision import CAPTURE_AREA_NAME, DESKTOP_NAME
from ..vision.geometry import Rect
from ..vision.region import ImageLike, ScreenRegion
from .win import get_window_region

logger = logging.getLogger(__name__)


def virtual_screen_bounds() -> Rect:
    """Bounds of all monitors combined (mss monitor 0)."""
    import mss

    with mss.mss() as sct:
        return Rect.from_region(sct.monitors[0])


def desktop_region(bounds: Optional[Rect] = None) -> ScreenRegion:
    """Depth-0 frame. Desktop coordinates are absolute, so X/Y stay 0."""
    if bounds is None:
        bounds = virtual_screen_bounds()
    return ScreenRegion(0, 0, bounds.width, bounds.height, coordinate_name=DESKTOP_NAME)


def capture_area_region(
    bounds: Union[Rect, Mapping[str, int]],
    image: ImageLike,
    desktop: ScreenRegion,
) -> ScreenRegion:
    """Depth-1 frame holding a screenshot taken at `bounds` on the desktop."""
    rect = bounds if isinstance(bounds, Rect) else Rect.from_region(bounds)
    region = ScreenRegion.from_image(image, rect.x, rect.y, owner=desktop, coordinate_name=CAPTURE_AREA_NAME)
    if (region.width, region.height) != (rect.width, rect.height) and not rect.is_empty():
        logger.warning(
            "screen: capture image is %dx%d but bounds are %dx%d",
            region.width, region.height, rect.width, rect.height,
        )
    return region


def window_bounds(executable: str) -> Optional[Rect]:
    """Foreground window bounds for `executable`, if it is in front."""
    region = get_window_region(executable)
    return Rect.from_region(region) if region else None
