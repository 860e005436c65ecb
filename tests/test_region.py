import gc

import numpy as np
import pytest
from PIL import Image

from framevision.core.errors import CoordinateFrameNotFoundError, MissingImageError
from framevision.vision.geometry import Rect
from framevision.vision.region import ScreenRegion


@pytest.fixture
def chain():
    desktop = ScreenRegion(0, 0, 1920, 1080, coordinate_name="Desktop")
    capture = ScreenRegion(10, 10, 800, 600, owner=desktop, coordinate_name="CaptureArea")
    part = ScreenRegion(5, 5, 20, 20, owner=capture, coordinate_name="Part")
    return desktop, capture, part


def test_depth_follows_owner(chain):
    desktop, capture, part = chain
    assert desktop.depth == 0
    assert capture.depth == 1
    assert part.depth == 2
    assert part.owner is capture
    assert desktop.owner is None


def test_projection_through_three_levels(chain):
    _, _, part = chain
    assert part.project_to_desktop() == Rect(15, 15, 20, 20)
    assert part.project_to_capture_area() == Rect(5, 5, 20, 20)


def test_projection_to_own_depth_is_identity(chain):
    desktop, capture, part = chain
    assert part.project_to(part.depth) == part.to_rect()
    assert capture.project_to(1) == Rect(10, 10, 800, 600)
    assert desktop.project_to_desktop() == Rect(0, 0, 1920, 1080)


def test_projection_below_own_depth_fails(chain):
    _, _, part = chain
    with pytest.raises(CoordinateFrameNotFoundError):
        part.project_to(3)


def test_projection_without_root_fails():
    orphan_owner = ScreenRegion(3, 3, 50, 50)
    child = ScreenRegion(1, 2, 5, 5, owner=orphan_owner)
    with pytest.raises(CoordinateFrameNotFoundError):
        child.project_to(-1)


def test_owner_link_does_not_keep_owner_alive():
    capture = ScreenRegion(10, 10, 100, 100, owner=ScreenRegion(0, 0, 1920, 1080))
    gc.collect()
    assert capture.depth == 1
    assert capture.owner is None
    with pytest.raises(CoordinateFrameNotFoundError):
        capture.project_to_desktop()


def test_desktop_level_and_empty():
    assert ScreenRegion(1, 1, 10, 10).is_at_desktop_level()
    assert ScreenRegion().is_empty()
    assert ScreenRegion(0, 0, 0, 5).is_empty()
    assert ScreenRegion(0, 0, 5, 0).is_empty()
    assert not ScreenRegion(0, 0, 5, 5).is_empty()


def test_from_image_infers_size():
    desktop = ScreenRegion(0, 0, 1920, 1080)
    mat = np.zeros((30, 40, 3), dtype=np.uint8)
    region = ScreenRegion.from_image(mat, 7, 8, owner=desktop)
    assert (region.x, region.y, region.width, region.height) == (7, 8, 40, 30)
    assert region.depth == 1
    assert region.has_image()
    assert region.src_mat is mat


def test_from_bitmap_infers_size():
    region = ScreenRegion.from_image(Image.new("RGB", (12, 9)))
    assert (region.width, region.height) == (12, 9)
    assert region.src_mat.shape == (9, 12, 3)


def test_image_accessors_require_image():
    region = ScreenRegion(0, 0, 10, 10)
    assert not region.has_image()
    assert region.image is None
    with pytest.raises(MissingImageError):
        region.src_mat
    with pytest.raises(MissingImageError):
        region.src_grey_mat
    with pytest.raises(MissingImageError):
        region.src_bitmap
