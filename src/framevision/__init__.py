"""framevision: find things on screen and click them in the right place.

Regions form a tree rooted at the desktop; searches return child regions
that can be projected back to desktop coordinates for input.
"""
from .vision import (
    EMPTY_RECT,
    Rect,
    ImageCache,
    RecognitionObject,
    RecognitionType,
    ScreenRegion,
    TemplateMatchMode,
    crop,
    find,
    find_and_click_center,
)

__version__ = "0.1.0"

__all__ = [
    "EMPTY_RECT",
    "Rect",
    "ImageCache",
    "RecognitionObject",
    "RecognitionType",
    "ScreenRegion",
    "TemplateMatchMode",
    "crop",
    "find",
    "find_and_click_center",
]
