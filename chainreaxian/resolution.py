"""Screen geometry shared by the game systems."""

from __future__ import annotations

from dataclasses import dataclass

PIXEL_RATIO = 1.2


@dataclass(frozen=True)
class Resolution:
    """Screen size in pixels and the scale of sprite pixels on screen."""

    width: float
    height: float
    pixel_ratio: float = PIXEL_RATIO

    @classmethod
    def from_window(cls, width: float, height: float) -> Resolution:
        """Build the resolution for a window of the given size."""
        return cls(width=float(width), height=float(height), pixel_ratio=PIXEL_RATIO)

    @property
    def screen_dimensions(self) -> tuple[float, float]:
        return (self.width, self.height)

    @property
    def half_width(self) -> float:
        return self.width * 0.5

    @property
    def half_height(self) -> float:
        return self.height * 0.5