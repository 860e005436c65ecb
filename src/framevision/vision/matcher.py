"""
Template matching adapter around OpenCV.

Pure functions taking numpy arrays and returning the best match location or
None. Threshold and tie-break policy live here; the search engine never
second-guesses the result.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple
import logging
import time

import cv2
import numpy as np

from ..config.vision import LEGACY_THRESHOLD, PERF_ENABLED

logger = logging.getLogger(__name__)


class TemplateMatchMode(Enum):
    SQDIFF = cv2.TM_SQDIFF
    SQDIFF_NORMED = cv2.TM_SQDIFF_NORMED
    CCORR = cv2.TM_CCORR
    CCORR_NORMED = cv2.TM_CCORR_NORMED
    CCOEFF = cv2.TM_CCOEFF
    CCOEFF_NORMED = cv2.TM_CCOEFF_NORMED

    @property
    def lower_is_better(self) -> bool:
        return self in (TemplateMatchMode.SQDIFF, TemplateMatchMode.SQDIFF_NORMED)

    @classmethod
    def parse(cls, value) -> "TemplateMatchMode":
        """Accept a member, a member name ("ccoeff_normed") or a cv2 constant."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls[value.strip().upper()]
        return cls(int(value))


def _score_location(res: np.ndarray, mode: TemplateMatchMode) -> Tuple[float, Tuple[int, int]]:
    """Return (raw score, loc) of the best finite entry in a result map."""
    if not np.all(np.isfinite(res)):
        # Masked correlation yields inf/nan on flat windows; never pick those.
        worst = np.finfo(np.float32).max
        bad = worst if mode.lower_is_better else -worst
        res = np.where(np.isfinite(res), res, bad).astype(np.float32)
    min_val, max_val, min_loc, max_loc = cv2.minMaxLoc(res)
    if mode.lower_is_better:
        return float(min_val), (int(min_loc[0]), int(min_loc[1]))
    return float(max_val), (int(max_loc[0]), int(max_loc[1]))


def _accepts(score: float, mode: TemplateMatchMode, threshold: float) -> bool:
    if mode is TemplateMatchMode.SQDIFF_NORMED:
        return 1.0 - score >= threshold
    if mode is TemplateMatchMode.SQDIFF:
        return score <= threshold
    return score >= threshold


def match_template(
    search: np.ndarray,
    template: np.ndarray,
    mode: TemplateMatchMode = TemplateMatchMode.CCOEFF_NORMED,
    mask: Optional[np.ndarray] = None,
    threshold: float = 0.8,
) -> Optional[Tuple[int, int]]:
    """Return the top-left (x, y) of the best match in `search`, or None.

    The location is relative to `search`. A template larger than the search
    area can never match and yields None.
    """
    sh, sw = search.shape[:2]
    th, tw = template.shape[:2]
    if th > sh or tw > sw or th == 0 or tw == 0:
        logger.debug("matcher: template %dx%d does not fit search area %dx%d", tw, th, sw, sh)
        return None

    t0 = time.perf_counter()
    if mask is not None:
        res = cv2.matchTemplate(search, template, mode.value, mask=mask)
    else:
        res = cv2.matchTemplate(search, template, mode.value)
    score, loc = _score_location(res, mode)
    t1 = time.perf_counter()

    ok = _accepts(score, mode, threshold)
    if PERF_ENABLED or logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "matcher: mode=%s score=%.4f threshold=%.3f loc=%s ok=%s %.1fms",
            mode.name, score, threshold, str(loc), ok, (t1 - t0) * 1000.0,
        )
    return loc if ok else None


def find_single_target(
    search_grey: np.ndarray,
    template: np.ndarray,
    threshold: float = LEGACY_THRESHOLD,
) -> Optional[Tuple[int, int]]:
    """Legacy entry point: return the match *centre* in `search_grey`, or None.

    Colour templates are reduced to greyscale first.
    """
    if template.ndim == 3:
        code = cv2.COLOR_BGRA2GRAY if template.shape[2] == 4 else cv2.COLOR_BGR2GRAY
        template = cv2.cvtColor(template, code)
    loc = match_template(search_grey, template, TemplateMatchMode.CCOEFF_NORMED, None, threshold)
    if loc is None:
        return None
    th, tw = template.shape[:2]
    return loc[0] + tw // 2, loc[1] + th // 2
