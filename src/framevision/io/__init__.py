"""IO subpackage for platform-specific integrations.

- win: Windows helpers for foreground window bounds
- controls: mouse input automation
- click: click projection onto desktop coordinates
- screen: desktop and capture-area root frames
"""
from .win import (
    get_foreground_executable_name_lower,
    get_foreground_window_region,
    get_window_region,
)
from .controls import InputController
from .click import click_center, set_default_clicker
from .screen import capture_area_region, desktop_region, window_bounds

__all__ = [
    "InputController",
    "click_center",
    "set_default_clicker",
    "capture_area_region",
    "desktop_region",
    "window_bounds",
    "get_foreground_executable_name_lower",
    "get_foreground_window_region",
    "get_window_region",
]
