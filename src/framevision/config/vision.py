"""
Vision configuration knobs centralization.

Default thresholds, match modes, colours and environment toggles live here.
Recognition objects and the command line import from this module instead of
hardcoding values.
"""
from __future__ import annotations

from typing import Tuple
import os

# Thresholds
DEFAULT_THRESHOLD: float = 0.8
LEGACY_THRESHOLD: float = 0.8

# Name of a TemplateMatchMode member
DEFAULT_MATCH_MODE: str = "CCOEFF_NORMED"

# Colours are BGR
DEFAULT_MASK_COLOR: Tuple[int, int, int] = (0, 255, 0)
DEFAULT_PEN_COLOR: Tuple[int, int, int] = (0, 0, 255)
DEFAULT_PEN_THICKNESS: int = 2

# Coordinate frame names by depth
DESKTOP_NAME: str = "Desktop"
CAPTURE_AREA_NAME: str = "CaptureArea"
DESKTOP_DEPTH: int = 0
CAPTURE_AREA_DEPTH: int = 1

# Environment flags
PERF_ENABLED: bool = os.environ.get("FV_VISION_PERF", "0") == "1"

__all__ = [
    "DEFAULT_THRESHOLD",
    "LEGACY_THRESHOLD",
    "DEFAULT_MATCH_MODE",
    "DEFAULT_MASK_COLOR",
    "DEFAULT_PEN_COLOR",
    "DEFAULT_PEN_THICKNESS",
    "DESKTOP_NAME",
    "CAPTURE_AREA_NAME",
    "DESKTOP_DEPTH",
    "CAPTURE_AREA_DEPTH",
    "PERF_ENABLED",
]
