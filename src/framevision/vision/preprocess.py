"""
Pure image conversion utilities.

Stateless helpers translating between the three image forms a region can
hold: a Pillow image (pixel buffer), an OpenCV-ordered numpy matrix and a
single-channel greyscale matrix. Nothing here caches; ImageCache does that.

Logging: functions here avoid logging for performance; callers log at DEBUG.
"""
from __future__ import annotations

from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from ..core.errors import InvalidArgumentError


def to_greyscale(mat: np.ndarray) -> np.ndarray:
    """Reduce a BGR/BGRA matrix to one channel.

    A 2-D matrix is already single-channel and is returned unchanged.
    """
    if mat.ndim == 2:
        return mat
    channels = mat.shape[2]
    if channels == 1:
        return mat[:, :, 0]
    if channels == 4:
        return cv2.cvtColor(mat, cv2.COLOR_BGRA2GRAY)
    if channels == 3:
        return cv2.cvtColor(mat, cv2.COLOR_BGR2GRAY)
    raise InvalidArgumentError(f"unsupported channel count: {channels}")


def bitmap_to_mat(image: Image.Image) -> np.ndarray:
    """Pillow image -> OpenCV channel order (BGR, BGRA or 2-D)."""
    if image.mode not in ("RGB", "RGBA", "L"):
        image = image.convert("RGB")
    arr = np.asarray(image, dtype=np.uint8)
    if image.mode == "L":
        return np.ascontiguousarray(arr)
    if image.mode == "RGBA":
        return cv2.cvtColor(arr, cv2.COLOR_RGBA2BGRA)
    return cv2.cvtColor(arr, cv2.COLOR_RGB2BGR)


def mat_to_bitmap(mat: np.ndarray) -> Image.Image:
    """OpenCV-ordered matrix -> Pillow image."""
    if mat.ndim == 2:
        return Image.fromarray(np.ascontiguousarray(mat))
    channels = mat.shape[2]
    if channels == 4:
        return Image.fromarray(cv2.cvtColor(mat, cv2.COLOR_BGRA2RGBA))
    if channels == 3:
        return Image.fromarray(cv2.cvtColor(mat, cv2.COLOR_BGR2RGB))
    raise InvalidArgumentError(f"unsupported channel count: {channels}")


def create_color_mask(tpl: np.ndarray, color: Tuple[int, int, int]) -> np.ndarray:
    """Binary mask keeping every template pixel that differs from `color`.

    Templates paint ignorable background in a solid key colour (green by
    default); those pixels get 0, everything else 255.
    color: BGR
    returns uint8 mask in {0,255}
    """
    if tpl.ndim != 3 or tpl.shape[2] < 3:
        raise InvalidArgumentError("a colour mask needs a BGR template")
    key = np.array(color, dtype=np.uint8).reshape(1, 1, 3)
    same = np.all(tpl[:, :, :3] == key, axis=2)
    mask = np.full(same.shape, 255, dtype=np.uint8)
    mask[same] = 0
    return mask

