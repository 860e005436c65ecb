"""Vision package: regions, image forms and template search.

Submodules:
- geometry: integer rectangles
- preprocess: stateless image conversions
- image_cache: lazily derived image forms
- matcher: OpenCV template matching adapter
- recognition: recognition objects
- region: nested coordinate frames
- search: find / crop / find-and-click
"""
from .geometry import EMPTY_RECT, Rect
from .image_cache import ImageCache
from .matcher import TemplateMatchMode, find_single_target, match_template
from .recognition import DrawStyle, RecognitionObject, RecognitionType
from .region import ScreenRegion
from .search import crop, find, find_and_click_center

__all__ = [
    "EMPTY_RECT",
    "Rect",
    "ImageCache",
    "TemplateMatchMode",
    "find_single_target",
    "match_template",
    "DrawStyle",
    "RecognitionObject",
    "RecognitionType",
    "ScreenRegion",
    "crop",
    "find",
    "find_and_click_center",
]
