"""Core subpackage.

- config: INI-backed ConfigManager
- logging_setup: session log files and console logging
- errors: exception taxonomy
- dispatcher / worker: routine registry and its execution thread
"""
from .errors import (
    FrameVisionError,
    InvalidArgumentError,
    InvalidRecognitionError,
    MissingImageError,
    CoordinateFrameNotFoundError,
    UnsupportedRecognitionTypeError,
    UnknownRoutineError,
)

__all__ = [
    "FrameVisionError",
    "InvalidArgumentError",
    "InvalidRecognitionError",
    "MissingImageError",
    "CoordinateFrameNotFoundError",
    "UnsupportedRecognitionTypeError",
    "UnknownRoutineError",
]
