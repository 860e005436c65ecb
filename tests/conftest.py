"""Pytest configuration.

Ensures src/ is on sys.path so tests can import `framevision` without an
install, and provides synthetic images plus fakes for input and overlay.
"""

import logging
import sys
from pathlib import Path

import numpy as np
import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from framevision.gui.draw_content import DrawContent  # noqa: E402

# Template position inside the scene
TPL_X, TPL_Y, TPL_W, TPL_H = 30, 40, 20, 16


@pytest.fixture
def scene() -> np.ndarray:
    """160x120 BGR noise; every window of it is distinct."""
    rng = np.random.default_rng(1234)
    return rng.integers(0, 256, size=(120, 160, 3), dtype=np.uint8)


@pytest.fixture
def template(scene) -> np.ndarray:
    return scene[TPL_Y:TPL_Y + TPL_H, TPL_X:TPL_X + TPL_W].copy()


@pytest.fixture
def draw() -> DrawContent:
    return DrawContent()


class FakeClicker:
    def __init__(self):
        self.clicks = []

    def __call__(self, x, y):
        self.clicks.append((x, y))


@pytest.fixture
def clicker() -> FakeClicker:
    return FakeClicker()


@pytest.fixture
def restore_logging(monkeypatch):
    """Undo setup_logging's changes to the root logger and environment."""
    monkeypatch.setenv("FV_LOG_SESSION_DIR", "")
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers[:]:
        root.removeHandler(h)
        h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)
