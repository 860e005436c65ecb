"""Integer rectangles shared by regions, searches and the overlay."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Tuple


@dataclass(frozen=True)
class Rect:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def center(self) -> Tuple[int, int]:
        return self.x + self.width // 2, self.y + self.height // 2

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, other: "Rect") -> bool:
        """True when `other` lies fully inside this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def offset(self, dx: int, dy: int) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def to_region(self) -> Dict[str, int]:
        """Return the {left, top, width, height} dict used by mss."""
        return {"left": self.x, "top": self.y, "width": self.width, "height": self.height}

    @classmethod
    def from_region(cls, region: Mapping[str, int]) -> "Rect":
        return cls(
            int(region.get("left", 0)),
            int(region.get("top", 0)),
            int(region.get("width", 0)),
            int(region.get("height", 0)),
        )

    @classmethod
    def parse(cls, text: str) -> "Rect":
        """Parse "x,y,w,h" (the format used for ROIs in config and CLI)."""
        parts = [int(p.strip()) for p in str(text).split(",")]
        if len(parts) != 4:
            raise ValueError(f"expected x,y,w,h but got {text!r}")
        return cls(*parts)

    def __str__(self) -> str:
        return f"{self.x},{self.y},{self.width},{self.height}"


EMPTY_RECT = Rect()

__all__ = ["Rect", "EMPTY_RECT"]
