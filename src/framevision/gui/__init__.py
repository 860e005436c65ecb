"""GUI boundary.

- draw_content: registry of recognised rectangles for an overlay to render
"""
from .draw_content import DrawContent, RectDrawable, draw_content

__all__ = ["DrawContent", "RectDrawable", "draw_content"]
