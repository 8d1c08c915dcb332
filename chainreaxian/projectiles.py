"""Projectiles fired by the player and their collisions with aliens."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .aliens import Alien
from .events import AlienKilled, EventBus
from .resolution import PIXEL_RATIO, Resolution

BULLET_RADIUS = 16.0
PROJECTILE_IMAGE = "images/chain.png"


@dataclass
class Projectile:
    """A projectile travelling upwards at ``speed`` pixels per second."""

    x: float
    y: float
    z: float
    speed: float
    scale: float = PIXEL_RATIO

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


class PlayerProjectiles:
    """All projectiles in flight from the player's guns."""

    def __init__(self, resolution: Resolution, events: EventBus) -> None:
        self.resolution = resolution
        self.events = events
        self.items: list[Projectile] = []

    def __iter__(self) -> Iterator[Projectile]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __iadd__(self, projectiles: Iterable[Projectile]) -> PlayerProjectiles:
        self.items.extend(projectiles)
        return self

    def advance(self, dt: float) -> None:
        """Move every projectile up and drop those past the top of the screen."""
        top = self.resolution.half_height
        kept = []
        for projectile in self.items:
            projectile.y += projectile.speed * dt
            if projectile.y <= top:
                kept.append(projectile)
        self.items = kept

    def hit_aliens(self, aliens: Iterable[Alien]) -> None:
        """Kill every living alien a projectile touches and remove the projectiles that hit.

        Removal happens after all checks, so one projectile may still strike
        several aliens during the same frame.
        """
        spent: set[int] = set()
        for alien in aliens:
            if alien.marked_dead:
                continue
            alien_pos = alien.location
            for projectile in self.items:
                if math.dist(alien_pos, projectile.location) < BULLET_RADIUS:
                    alien.dead = True
                    spent.add(id(projectile))
                    self.events.send(
                        AlienKilled(alien_type=alien.alien_type, location=alien_pos)
                    )
        if spent:
            self.items = [p for p in self.items if id(p) not in spent]