"""The tiled star-field background."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .resolution import Resolution

WIDTH = 64.0
HEIGHT = 64.0
ZINDEX = -10.0
STAR_FIELD_IMAGE = "images/star_field_atlas.png"


@dataclass(frozen=True)
class Tile:
    """One background tile; ``rotation`` is in radians about the z axis."""

    x: float
    y: float
    z: float
    rotation: float
    scale: float
    image: str = STAR_FIELD_IMAGE


def star_field_tiles(resolution: Resolution) -> list[Tile]:
    """Lay out background tiles covering the screen, rotated in quarter turns."""
    num_x_tiles = math.floor(resolution.width / WIDTH) + 1
    num_y_tiles = math.floor(resolution.height / HEIGHT) + 1
    # The vertical range deliberately ends at the horizontal tile count.
    return [
        Tile(
            x=x * WIDTH,
            y=y * HEIGHT,
            z=ZINDEX,
            rotation=math.radians(math.fmod(float(x + y), 4.0) * 90.0),
            scale=resolution.pixel_ratio,
        )
        for x in range(-num_x_tiles, num_x_tiles)
        for y in range(-num_y_tiles, num_x_tiles)
    ]