"""Short-lived fires left where aliens die, which burn neighbouring aliens."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .aliens import Alien
from .events import AlienKilled, EventBus
from .resolution import PIXEL_RATIO, Resolution

FIRE_RADIUS = 10.0
FIRE_LIFESPAN = 2.0
FIRE_Z = 5.0
MAX_FIRES = 20
FIRE_IMAGE = "images/fire.png"


@dataclass
class Fire:
    """A fire that burns for ``time_remaining`` seconds."""

    x: float
    y: float
    z: float = FIRE_Z
    time_remaining: float = FIRE_LIFESPAN
    scale: float = PIXEL_RATIO

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


class FireField:
    """All burning fires, started by alien deaths."""

    def __init__(self, resolution: Resolution, events: EventBus) -> None:
        self.resolution = resolution
        self.events = events
        self.num_fires = 0
        self.items: list[Fire] = []
        self._killed = events.reader(AlienKilled)

    def __iter__(self) -> Iterator[Fire]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def spawn(self) -> None:
        """Start a fire where each alien died, up to the fire limit."""
        for event in self._killed.read():
            if self.num_fires < MAX_FIRES:
                x, y = event.location
                self.items.append(Fire(x=x, y=y, scale=self.resolution.pixel_ratio))
                self.num_fires += 1

    def advance(self, dt: float) -> None:
        """Burn down every fire and put out those whose time has run out."""
        kept = []
        for fire in self.items:
            fire.time_remaining -= dt
            if fire.time_remaining < 0.0:
                self.num_fires -= 1
            else:
                kept.append(fire)
        self.items = kept

    def burn(self, aliens: Iterable[Alien]) -> None:
        """Kill every living alien within reach of a fire."""
        for alien in aliens:
            if alien.marked_dead:
                continue
            alien_pos = alien.location
            for fire in self.items:
                if math.dist(alien_pos, fire.location) < FIRE_RADIUS:
                    alien.dead = True
                    self.events.send(
                        AlienKilled(alien_type=alien.alien_type, location=alien_pos)
                    )