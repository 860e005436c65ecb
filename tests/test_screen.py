import numpy as np

from framevision.io import screen
from framevision.io.screen import capture_area_region, desktop_region
from framevision.vision.geometry import Rect


def test_desktop_and_capture_area():
    desktop = desktop_region(Rect(0, 0, 2560, 1440))
    assert desktop.depth == 0
    assert desktop.coordinate_name == "Desktop"
    assert (desktop.width, desktop.height) == (2560, 1440)

    img = np.zeros((300, 400, 3), dtype=np.uint8)
    capture = capture_area_region({"left": 50, "top": 60, "width": 400, "height": 300}, img, desktop)
    assert capture.depth == 1
    assert capture.coordinate_name == "CaptureArea"
    assert capture.to_rect() == Rect(50, 60, 400, 300)
    assert capture.project_to_desktop() == Rect(50, 60, 400, 300)


def test_desktop_defaults_to_virtual_screen(monkeypatch):
    monkeypatch.setattr(screen, "virtual_screen_bounds", lambda: Rect(-1920, 0, 3840, 1080))
    desktop = desktop_region()
    assert desktop.to_rect() == Rect(0, 0, 3840, 1080)


def test_window_bounds_off_windows_is_none(monkeypatch):
    monkeypatch.setattr(screen, "get_window_region", lambda exe: None)
    assert screen.window_bounds("game.exe") is None
    monkeypatch.setattr(screen, "get_window_region", lambda exe: {"left": 1, "top": 2, "width": 3, "height": 4})
    assert screen.window_bounds("game.exe") == Rect(1, 2, 3, 4)
