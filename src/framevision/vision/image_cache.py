"""
Lazily reconciled views of one logical image.

An ImageCache is built from a Pillow image, a numpy matrix, or both. The
missing form and the greyscale matrix are derived on first access and then
reused for the lifetime of the cache. Derived forms are never recomputed:
callers within one search rely on getting the same object back.

Threading: the first derivation of each slot runs under a per-instance lock,
so two threads racing on an empty slot still derive it once. Reads of an
already populated slot take no lock.
"""
from __future__ import annotations

import logging
import threading
from typing import Optional

import numpy as np
from PIL import Image

from ..core.errors import InvalidArgumentError, MissingImageError
from .preprocess import bitmap_to_mat, mat_to_bitmap, to_greyscale

logger = logging.getLogger(__name__)


class ImageCache:
    """Holds up to three equivalent representations of a single image."""

    def __init__(self, bitmap: Optional[Image.Image] = None, mat: Optional[np.ndarray] = None) -> None:
        if bitmap is None and mat is None:
            raise MissingImageError("no source image: a bitmap or a matrix is required")
        self._bitmap = bitmap
        self._mat = mat
        self._grey: Optional[np.ndarray] = None
        self._lock = threading.RLock()

    @classmethod
    def wrap(cls, image) -> "ImageCache":
        """Build a cache from whichever form `image` already is."""
        if isinstance(image, ImageCache):
            return image
        if isinstance(image, np.ndarray):
            return cls(mat=image)
        if isinstance(image, Image.Image):
            return cls(bitmap=image)
        raise InvalidArgumentError(f"unsupported image type: {type(image).__name__}")

    @property
    def bitmap(self) -> Image.Image:
        bitmap = self._bitmap
        if bitmap is not None:
            return bitmap
        with self._lock:
            if self._bitmap is None:
                if self._mat is None:
                    raise MissingImageError("no source image to derive a bitmap from")
                self._bitmap = mat_to_bitmap(self._mat)
                logger.debug("image_cache: derived bitmap %s", self._bitmap.size)
            return self._bitmap

    @property
    def mat(self) -> np.ndarray:
        mat = self._mat
        if mat is not None:
            return mat
        with self._lock:
            if self._mat is None:
                if self._bitmap is None:
                    raise MissingImageError("no source image to derive a matrix from")
                self._mat = bitmap_to_mat(self._bitmap)
                logger.debug("image_cache: derived matrix %s", self._mat.shape)
            return self._mat

    @property
    def grey(self) -> np.ndarray:
        grey = self._grey
        if grey is not None:
            return grey
        with self._lock:
            if self._grey is None:
                self._grey = to_greyscale(self.mat)
            return self._grey

    def has_bitmap(self) -> bool:
        return self._bitmap is not None

    def has_mat(self) -> bool:
        return self._mat is not None

    def has_grey(self) -> bool:
        return self._grey is not None

    @property
    def width(self) -> int:
        if self._mat is not None:
            return int(self._mat.shape[1])
        return int(self.bitmap.size[0])

    @property
    def height(self) -> int:
        if self._mat is not None:
            return int(self._mat.shape[0])
        return int(self.bitmap.size[1])
