"""
Screen regions: rectangles anchored in nested coordinate frames.

The usual hierarchy is

    desktop (depth 0) -> capture area (1) -> part of the window (2) -> match (3)

Every region stores X/Y relative to its immediate owner only. Absolute
positions are computed on demand by walking the owner chain
(project_to / project_to_desktop); they are never stored.

The owner link is a weak reference. A region reads its owner but never keeps
it alive, so whoever builds the tree must hold on to the ancestors for as long
as projections are needed. A collected owner ends the chain.
"""
from __future__ import annotations

import logging
import warnings
import weakref
from typing import TYPE_CHECKING, Callable, Optional, Union

import numpy as np
from PIL import Image

from ..config.vision import CAPTURE_AREA_DEPTH, DESKTOP_DEPTH
from ..core.errors import CoordinateFrameNotFoundError, MissingImageError
from .geometry import Rect
from .image_cache import ImageCache

if TYPE_CHECKING:
    from ..gui.draw_content import DrawContent
    from ..io.click import Clicker
    from .recognition import RecognitionObject

logger = logging.getLogger(__name__)

ImageLike = Union[np.ndarray, Image.Image, ImageCache]


class ScreenRegion:
    """A rectangle in a named coordinate space, optionally carrying an image."""

    def __init__(
        self,
        x: int = 0,
        y: int = 0,
        width: int = 0,
        height: int = 0,
        owner: Optional["ScreenRegion"] = None,
        coordinate_name: Optional[str] = None,
    ) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)
        self.coordinate_name = coordinate_name
        self._owner_ref = weakref.ref(owner) if owner is not None else None
        self.depth = owner.depth + 1 if owner is not None else 0
        self._image: Optional[ImageCache] = None

    @classmethod
    def from_image(
        cls,
        image: ImageLike,
        x: int = 0,
        y: int = 0,
        owner: Optional["ScreenRegion"] = None,
        coordinate_name: Optional[str] = None,
    ) -> "ScreenRegion":
        """Wrap an image; width and height are taken from it."""
        region = cls(x, y, 0, 0, owner, coordinate_name)
        region.attach_image(image)
        return region

    def attach_image(self, image: ImageLike) -> None:
        cache = ImageCache.wrap(image)
        self._image = cache
        self.width = cache.width
        self.height = cache.height

    # --------------------------- ownership ---------------------------
    @property
    def owner(self) -> Optional["ScreenRegion"]:
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    # --------------------------- image content ---------------------------
    @property
    def image(self) -> Optional[ImageCache]:
        return self._image

    def has_image(self) -> bool:
        return self._image is not None

    def _require_image(self) -> ImageCache:
        if self._image is None:
            raise MissingImageError("region has no image content")
        return self._image

    @property
    def src_bitmap(self) -> Image.Image:
        return self._require_image().bitmap

    @property
    def src_mat(self) -> np.ndarray:
        return self._require_image().mat

    @property
    def src_grey_mat(self) -> np.ndarray:
        return self._require_image().grey

    # --------------------------- geometry ---------------------------
    def to_rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    def project_to(self, depth: int) -> Rect:
        """Express this region's rectangle in the frame at `depth`.

        Offsets of every owner strictly below the target frame are added up.
        Raises CoordinateFrameNotFoundError when the chain ends first.
        """
        if depth == self.depth:
            return self.to_rect()
        new_x, new_y = self.x, self.y
        father = self.owner
        while True:
            if father is None:
                raise CoordinateFrameNotFoundError(
                    f"coordinate frame at depth {depth} not found from depth {self.depth}"
                )
            if father.depth == depth:
                break
            new_x += father.x
            new_y += father.y
            father = father.owner
        return Rect(new_x, new_y, self.width, self.height)

    def project_to_desktop(self) -> Rect:
        return self.project_to(DESKTOP_DEPTH)

    def project_to_capture_area(self) -> Rect:
        return self.project_to(CAPTURE_AREA_DEPTH)

    def is_at_desktop_level(self) -> bool:
        return self.depth == DESKTOP_DEPTH

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    # --------------------------- operations ---------------------------
    def find(
        self,
        ro: "RecognitionObject",
        action: Optional[Callable[["ScreenRegion"], None]] = None,
        draw: Optional["DrawContent"] = None,
    ) -> "ScreenRegion":
        """Search for `ro` inside this region's image. See vision.search.find."""
        from .search import find

        return find(self, ro, action, draw=draw)

    def find_and_click_center(
        self,
        ro: "RecognitionObject",
        clicker: Optional["Clicker"] = None,
        draw: Optional["DrawContent"] = None,
    ) -> "ScreenRegion":
        from .search import find_and_click_center

        return find_and_click_center(self, ro, clicker=clicker, draw=draw)

    def crop(self, rect: Rect) -> "ScreenRegion":
        from .search import crop

        return crop(self, rect)

    def click_center(self, clicker: Optional["Clicker"] = None) -> None:
        from ..io.click import click_center

        click_center(self, clicker)

    def find_image(self, template: np.ndarray) -> "ScreenRegion":
        """Deprecated point-based search; use find() with a RecognitionObject."""
        warnings.warn(
            "ScreenRegion.find_image is deprecated; use find() with a RecognitionObject instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        from .matcher import find_single_target

        if not self.has_image():
            raise MissingImageError("region has no image content to search")
        p = find_single_target(self.src_grey_mat, template)
        if p is None or p[0] <= 0 or p[1] <= 0:
            return ScreenRegion()
        th, tw = template.shape[:2]
        return ScreenRegion.from_image(template, p[0] - tw // 2, p[1] - th // 2, owner=self)

    def __repr__(self) -> str:
        name = f" {self.coordinate_name}" if self.coordinate_name else ""
        return (
            f"<ScreenRegion{name} depth={self.depth} "
            f"x={self.x} y={self.y} w={self.width} h={self.height}>"
        )


__all__ = ["ScreenRegion"]
