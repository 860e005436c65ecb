"""
Search engine: run recognition objects against a region's image.

Responsibility:
- Validate the host region and the recognition object.
- Restrict the search to the region of interest and translate the matcher's
  location back into the host's own coordinate space.
- Return a child region of the host for a match, or an empty region when
  nothing is found. No-match is data, not an error.
- Keep the named overlay rectangle in sync with the latest outcome.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from ..core.errors import (
    InvalidArgumentError,
    InvalidRecognitionError,
    MissingImageError,
    UnsupportedRecognitionTypeError,
)
from ..gui.draw_content import DrawContent, draw_content
from .geometry import Rect
from .matcher import match_template
from .recognition import RecognitionObject, RecognitionType
from .region import ScreenRegion

if TYPE_CHECKING:
    from ..io.click import Clicker

logger = logging.getLogger(__name__)

Action = Callable[[ScreenRegion], None]


def _check_bounds(mat, rect: Rect, what: str) -> None:
    h, w = mat.shape[:2]
    if rect.width <= 0 or rect.height <= 0:
        raise InvalidArgumentError(f"{what} {rect} must have a positive size")
    if rect.x < 0 or rect.y < 0 or not Rect(0, 0, w, h).contains(rect):
        raise InvalidArgumentError(f"{what} {rect} is outside the {w}x{h} image")


def find(
    host: ScreenRegion,
    ro: RecognitionObject,
    action: Optional[Action] = None,
    draw: Optional[DrawContent] = None,
) -> ScreenRegion:
    """Find `ro` inside `host` and return the match as a child of `host`.

    The result's X/Y are in host coordinates and its image is the template.
    An empty ScreenRegion means no match; `action` is called only on a match.
    """
    if host is None:
        raise InvalidArgumentError("host region must not be None")
    if not host.has_image():
        raise MissingImageError("region has no image content to search")
    if ro is None:
        raise InvalidRecognitionError("recognition object must not be None")

    if ro.recognition_type is RecognitionType.TEMPLATE_MATCH:
        return _find_template(host, ro, action, draw if draw is not None else draw_content())
    raise UnsupportedRecognitionTypeError(f"unsupported recognition type: {ro.recognition_type}")


def _find_template(
    host: ScreenRegion,
    ro: RecognitionObject,
    action: Optional[Action],
    draw: DrawContent,
) -> ScreenRegion:
    template = ro.template_image_grey_mat
    if template is None:
        raise InvalidRecognitionError("recognition object has no template image")

    roi = ro.region_of_interest
    search = host.src_grey_mat
    # An empty region of interest means the whole image, with no offset.
    ox, oy = 0, 0
    if not roi.is_empty():
        _check_bounds(search, roi, "region of interest")
        search = search[roi.y:roi.bottom, roi.x:roi.right]
        ox, oy = roi.x, roi.y

    p = match_template(search, template, ro.template_match_mode, ro.mask_mat, ro.threshold)
    # A location on the top or left edge is treated as no match.
    if p is not None and p[0] > 0 and p[1] > 0:
        result = ScreenRegion.from_image(template, p[0] + ox, p[1] + oy, owner=host)
        logger.debug("search: %s found at %s in %r", ro.name or "template", result.to_rect(), host)
        if ro.wants_overlay:
            draw.put_rect(ro.name, result.project_to_capture_area(), ro.draw_on_window_pen)
        if action is not None:
            action(result)
        return result

    logger.debug("search: %s not found in %r (roi=%s)", ro.name or "template", host, roi)
    if ro.wants_overlay:
        draw.remove_rect(ro.name)
    return ScreenRegion()


def find_and_click_center(
    host: ScreenRegion,
    ro: RecognitionObject,
    clicker: Optional[Clicker] = None,
    draw: Optional[DrawContent] = None,
) -> ScreenRegion:
    """find(), then click the centre of the match when there is one."""
    from ..io.click import click_center

    result = find(host, ro, draw=draw)
    if not result.is_empty():
        click_center(result, clicker)
    return result


def crop(host: ScreenRegion, rect: Rect) -> ScreenRegion:
    """Cut `rect` out of the host's matrix as a child region positioned at `rect`."""
    if host is None:
        raise InvalidArgumentError("host region must not be None")
    mat = host.src_mat
    _check_bounds(mat, rect, "crop rectangle")
    sub = np.ascontiguousarray(mat[rect.y:rect.bottom, rect.x:rect.right])
    return ScreenRegion.from_image(sub, rect.x, rect.y, owner=host)


__all__ = ["find", "find_and_click_center", "crop"]
