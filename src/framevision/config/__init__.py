"""Config subpackage.

- vision: central knobs for match thresholds, modes, colours and toggles
"""
from .vision import (
    DEFAULT_THRESHOLD,
    LEGACY_THRESHOLD,
    DEFAULT_MATCH_MODE,
    DEFAULT_MASK_COLOR,
    DEFAULT_PEN_COLOR,
    DEFAULT_PEN_THICKNESS,
    DESKTOP_NAME,
    CAPTURE_AREA_NAME,
    DESKTOP_DEPTH,
    CAPTURE_AREA_DEPTH,
    PERF_ENABLED,
)

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
