import cv2
import numpy as np
import pytest

from framevision.vision.matcher import TemplateMatchMode, find_single_target, match_template

from conftest import TPL_H, TPL_W, TPL_X, TPL_Y


@pytest.fixture
def grey(scene):
    return cv2.cvtColor(scene, cv2.COLOR_BGR2GRAY)


@pytest.fixture
def tpl_grey(grey):
    return grey[TPL_Y:TPL_Y + TPL_H, TPL_X:TPL_X + TPL_W].copy()


@pytest.mark.parametrize("mode", [
    TemplateMatchMode.CCOEFF_NORMED,
    TemplateMatchMode.CCORR_NORMED,
    TemplateMatchMode.SQDIFF_NORMED,
])
def test_exact_match_found(grey, tpl_grey, mode):
    threshold = 0.9 if mode is TemplateMatchMode.CCORR_NORMED else 0.99
    assert match_template(grey, tpl_grey, mode, None, threshold) == (TPL_X, TPL_Y)


def test_unreachable_threshold_gives_none(grey, tpl_grey):
    assert match_template(grey, tpl_grey, TemplateMatchMode.CCOEFF_NORMED, None, 1.5) is None


def test_raw_sqdiff_threshold_is_a_distance(grey, tpl_grey):
    assert match_template(grey, tpl_grey, TemplateMatchMode.SQDIFF, None, 1000.0) == (TPL_X, TPL_Y)


def test_template_larger_than_search_area(grey):
    big = np.zeros((grey.shape[0] + 1, 10), dtype=np.uint8)
    assert match_template(grey, big) is None


def test_masked_match(grey, tpl_grey):
    mask = np.full(tpl_grey.shape, 255, dtype=np.uint8)
    mask[:4, :4] = 0
    loc = match_template(grey, tpl_grey, TemplateMatchMode.SQDIFF_NORMED, mask, 0.99)
    assert loc == (TPL_X, TPL_Y)


def test_mode_parse():
    assert TemplateMatchMode.parse("ccoeff_normed") is TemplateMatchMode.CCOEFF_NORMED
    assert TemplateMatchMode.parse(cv2.TM_SQDIFF) is TemplateMatchMode.SQDIFF
    assert TemplateMatchMode.parse(TemplateMatchMode.CCORR) is TemplateMatchMode.CCORR
    with pytest.raises(KeyError):
        TemplateMatchMode.parse("nearest")


def test_legacy_single_target_returns_centre(grey, template):
    centre = find_single_target(grey, template)
    assert centre == (TPL_X + TPL_W // 2, TPL_Y + TPL_H // 2)
