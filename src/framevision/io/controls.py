"""Control System Module
Issues mouse input at absolute desktop coordinates.

pydirectinput is Windows-only and is imported on first use so the rest of
the package (and its tests) import on any platform.
"""

import logging
import os
import sys
import time

try:  # Windows-specific cursor fallback
    import ctypes  # type: ignore
    _user32 = ctypes.windll.user32 if sys.platform == "win32" else None
except Exception:  # pragma: no cover - platform dependent
    _user32 = None

logger = logging.getLogger(__name__)


def _load_pydirectinput():
    import pydirectinput as _pdi
    # Immediate actions and no edge failsafe
    _pdi.FAILSAFE = False
    _pdi.PAUSE = 0.0
    return _pdi


class InputController:
    """Mouse automation used by click projection."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = bool(dry_run)
        self._pdi = None
        try:
            # Default to a short smooth move; override via FV_MOUSE_MOVE_DURATION
            self._move_duration = float(os.getenv("FV_MOUSE_MOVE_DURATION", "0.08") or 0.08)  # seconds
        except ValueError:
            self._move_duration = 0.08

    @classmethod
    def from_config(cls, config_manager) -> "InputController":
        return cls(dry_run=config_manager.get_bool("dry_run", False))

    @property
    def pdi(self):
        if self._pdi is None:
            self._pdi = _load_pydirectinput()
        return self._pdi

    @staticmethod
    def _set_cursor_win32(x: int, y: int) -> bool:
        if _user32 is None:
            return False
        try:
            _user32.SetCursorPos(int(x), int(y))
            return True
        except Exception:
            return False

    def move_mouse(self, x: int, y: int) -> None:
        xi, yi = int(x), int(y)
        if self.dry_run:
            logger.info("mouse: dry run, not moving to (%d,%d)", xi, yi)
            return
        try:
            if self._move_duration > 0.0:
                self.pdi.moveTo(xi, yi, duration=self._move_duration)
            else:
                self.pdi.moveTo(xi, yi)
            logger.debug("mouse: moved to (%d,%d)", xi, yi)
        except Exception as e:
            logger.exception("mouse: moveTo failed: %s", e)
            # Best-effort fallback
            if self._set_cursor_win32(xi, yi):
                logger.info("mouse: fallback SetCursorPos to (%d,%d)", xi, yi)

    def click(self, button: str = "left") -> None:
        if self.dry_run:
            logger.info("mouse: dry run, not clicking %s", button)
            return
        try:
            self.pdi.click(button=button)
        except Exception as e:
            logger.exception("mouse: click failed: %s", e)

    def click_at(self, x: int, y: int) -> None:
        """Move to absolute desktop (x, y) and left-click there."""
        logger.info("mouse: click at (%d,%d)", int(x), int(y))
        self.move_mouse(x, y)
        if not self.dry_run:
            time.sleep(0.002)
        self.click("left")
