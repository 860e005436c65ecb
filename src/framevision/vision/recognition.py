"""Recognition objects: immutable descriptions of what to look for."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple, Union

import cv2
import numpy as np
from PIL import Image

from ..config.vision import (
    DEFAULT_MASK_COLOR,
    DEFAULT_MATCH_MODE,
    DEFAULT_PEN_COLOR,
    DEFAULT_PEN_THICKNESS,
    DEFAULT_THRESHOLD,
)
from ..core.errors import InvalidArgumentError, InvalidRecognitionError
from .geometry import EMPTY_RECT, Rect
from .matcher import TemplateMatchMode
from .preprocess import bitmap_to_mat, create_color_mask, to_greyscale


class RecognitionType(Enum):
    TEMPLATE_MATCH = "template_match"
    # Declared for callers; the search engine rejects them.
    COLOR_MATCH = "color_match"
    OCR = "ocr"


@dataclass(frozen=True)
class DrawStyle:
    """Overlay pen: BGR colour and line thickness."""

    color: Tuple[int, int, int] = DEFAULT_PEN_COLOR
    thickness: int = DEFAULT_PEN_THICKNESS


@dataclass(frozen=True, eq=False)
class RecognitionObject:
    """What to find, where to look and how to show it.

    region_of_interest restricts the search to a sub-rectangle of the host
    image; the empty rectangle means the whole image.
    """

    name: Optional[str] = None
    recognition_type: RecognitionType = RecognitionType.TEMPLATE_MATCH
    region_of_interest: Rect = EMPTY_RECT
    template_image_mat: Optional[np.ndarray] = None
    template_image_grey_mat: Optional[np.ndarray] = None
    mask_mat: Optional[np.ndarray] = None
    threshold: float = DEFAULT_THRESHOLD
    template_match_mode: TemplateMatchMode = TemplateMatchMode[DEFAULT_MATCH_MODE]
    draw_on_window: bool = False
    draw_on_window_pen: DrawStyle = field(default_factory=DrawStyle)

    @classmethod
    def template(
        cls,
        image: Union[str, Path, np.ndarray, Image.Image],
        name: Optional[str] = None,
        region_of_interest: Rect = EMPTY_RECT,
        threshold: float = DEFAULT_THRESHOLD,
        template_match_mode: Union[TemplateMatchMode, str] = DEFAULT_MATCH_MODE,
        use_mask: bool = False,
        mask_color: Tuple[int, int, int] = DEFAULT_MASK_COLOR,
        draw_on_window: bool = False,
        draw_on_window_pen: Optional[DrawStyle] = None,
    ) -> "RecognitionObject":
        """Build a template-match object, deriving greyscale and mask forms.

        `image` may be a file path (read with cv2.imread), a BGR matrix or a
        Pillow image. With `use_mask`, pixels equal to `mask_color` are left
        out of the match.
        """
        mat = _load_template(image)
        mask = create_color_mask(mat, mask_color) if use_mask else None
        return cls(
            name=name,
            recognition_type=RecognitionType.TEMPLATE_MATCH,
            region_of_interest=region_of_interest,
            template_image_mat=mat,
            template_image_grey_mat=to_greyscale(mat),
            mask_mat=mask,
            threshold=float(threshold),
            template_match_mode=TemplateMatchMode.parse(template_match_mode),
            draw_on_window=draw_on_window,
            draw_on_window_pen=draw_on_window_pen or DrawStyle(),
        )

    def with_region(self, rect: Rect) -> "RecognitionObject":
        return dataclasses.replace(self, region_of_interest=rect)

    @property
    def wants_overlay(self) -> bool:
        return bool(self.draw_on_window and self.name)

    @property
    def template_size(self) -> Tuple[int, int]:
        """(width, height) of the greyscale template."""
        grey = self.template_image_grey_mat
        if grey is None:
            raise InvalidRecognitionError("recognition object has no template image")
        return int(grey.shape[1]), int(grey.shape[0])


def _load_template(image) -> np.ndarray:
    if isinstance(image, np.ndarray):
        return image
    if isinstance(image, Image.Image):
        return bitmap_to_mat(image)
    if isinstance(image, (str, Path)):
        mat = cv2.imread(str(image), cv2.IMREAD_COLOR)
        if mat is None:
            raise FileNotFoundError(f"Template image not found: {image}")
        return mat
    raise InvalidArgumentError(f"unsupported template type: {type(image).__name__}")


__all__ = ["RecognitionType", "DrawStyle", "RecognitionObject", "TemplateMatchMode"]
