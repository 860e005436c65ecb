"""Custom exceptions for framevision.

All of these are fatal to the calling operation. "No match" is never an
error: searches return an empty region instead.
"""


class FrameVisionError(Exception):
    """Base framevision error."""


class InvalidArgumentError(FrameVisionError, ValueError):
    """A required object is absent or an argument is out of range."""


class InvalidRecognitionError(InvalidArgumentError):
    """Recognition object is absent or lacks its template."""


class MissingImageError(FrameVisionError):
    """An operation needing image data ran on a region or cache without any."""


class CoordinateFrameNotFoundError(FrameVisionError):
    """Walking the owner chain never reached the requested depth."""


class UnsupportedRecognitionTypeError(FrameVisionError):
    """The recognition type has no search implementation."""


class UnknownRoutineError(FrameVisionError, KeyError):
    """No routine is registered under the requested name."""
