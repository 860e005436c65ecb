"""Command line entry point.

`framevision find SCREENSHOT TEMPLATE` hangs the screenshot under a desktop
frame as the capture area, searches it for the template and prints the match
in desktop coordinates. Exit code 1 means no match.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import cv2

from .config.vision import DEFAULT_THRESHOLD
from .core.config import ConfigManager
from .core.errors import FrameVisionError
from .core.logging_setup import get_artifacts_dir, setup_logging
from .io.controls import InputController
from .io.screen import capture_area_region, desktop_region, window_bounds
from .vision.geometry import EMPTY_RECT, Rect
from .vision.matcher import TemplateMatchMode
from .vision.recognition import RecognitionObject

logger = logging.getLogger(__name__)


def _parse_point(text: str) -> Rect:
    parts = [int(p.strip()) for p in text.split(",")]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    return Rect(parts[0], parts[1], 0, 0)


def _parse_rect(text: str) -> Rect:
    try:
        return Rect.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="framevision", description="Locate templates on screenshots")
    ap.add_argument("--config", help="Path to config.ini (default: per-user config)")
    ap.add_argument("--log-level", help="Override DEFAULT.log_level")
    sub = ap.add_subparsers(dest="command", required=True)

    fp = sub.add_parser("find", help="Find a template in a screenshot")
    fp.add_argument("screenshot", help="Screenshot of the capture area")
    fp.add_argument("template", help="Template image to look for")
    fp.add_argument("--offset", type=_parse_point, default=None,
                    help="Desktop position X,Y of the screenshot (default: capture window or 0,0)")
    fp.add_argument("--roi", type=_parse_rect, default=EMPTY_RECT, help="Region of interest X,Y,W,H")
    fp.add_argument("--threshold", type=float, default=None, help="Match threshold")
    fp.add_argument("--mode", choices=[m.name for m in TemplateMatchMode], default=None, help="Match mode")
    fp.add_argument("--mask", action="store_true", help="Ignore green (key colour) template pixels")
    fp.add_argument("--name", default="template", help="Name used in logs and the overlay")
    fp.add_argument("--click", action="store_true", help="Click the centre of the match")
    return ap


def run_find(args: argparse.Namespace, config: ConfigManager) -> int:
    screenshot = cv2.imread(args.screenshot, cv2.IMREAD_COLOR)
    if screenshot is None:
        logger.error("Screenshot not found: %s", args.screenshot)
        return 2

    h, w = screenshot.shape[:2]
    offset = args.offset
    if offset is None:
        offset = window_bounds(config.get("capture_executable", "")) or Rect(0, 0, w, h)
    bounds = Rect(offset.x, offset.y, w, h)
    desktop = desktop_region(Rect(0, 0, max(bounds.right, w), max(bounds.bottom, h)))
    capture = capture_area_region(bounds, screenshot, desktop)

    threshold = args.threshold if args.threshold is not None else config.get_float("match_threshold", DEFAULT_THRESHOLD)
    mode = args.mode or config.get("template_match_mode")
    ro = RecognitionObject.template(
        args.template,
        name=args.name,
        region_of_interest=args.roi,
        threshold=threshold,
        template_match_mode=mode,
        use_mask=args.mask,
        draw_on_window=config.get_bool("draw_on_window", False),
    )

    if args.click:
        result = capture.find_and_click_center(ro, clicker=InputController.from_config(config).click_at)
    else:
        result = capture.find(ro)

    if result.is_empty():
        logger.info("find: %s not found", args.name)
        if logger.isEnabledFor(logging.DEBUG):
            out = get_artifacts_dir(config) / f"nomatch_{args.name}.png"
            cv2.imwrite(str(out), screenshot)
            logger.debug("find: saved screenshot to %s", out)
        print("no match")
        return 1

    rect = result.project_to_desktop()
    logger.info("find: %s at %s (desktop)", args.name, rect)
    print(rect)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = ConfigManager(args.config)
    setup_logging(config, args.log_level)
    try:
        return run_find(args, config)
    except (FrameVisionError, FileNotFoundError, KeyError) as e:
        logger.error("%s: %s", args.command, e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
