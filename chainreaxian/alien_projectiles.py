"""Projectiles fired by the aliens and their collisions with the player."""

from __future__ import annotations

import math
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .aliens import Alien
from .events import AlienShoot, EventBus, PlayerKilled
from .player import Player
from .resolution import PIXEL_RATIO, Resolution

SHOOT_COOLDOWN = 1.2
BULLET_SPEED = 240.0
BULLET_RADIUS = 10.0
PROJECTILE_IMAGE = "images/chain.png"


@dataclass
class AlienProjectile:
    """A projectile travelling downwards at ``speed`` pixels per second."""

    x: float
    y: float
    z: float
    speed: float = BULLET_SPEED
    scale: float = PIXEL_RATIO

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


class AlienGunner:
    """Lets a random living alien fire on a cooldown and moves the shots."""

    def __init__(
        self,
        resolution: Resolution,
        events: EventBus,
        rng: random.Random | None = None,
    ) -> None:
        self.resolution = resolution
        self.events = events
        self.rng = rng if rng is not None else random.Random()
        self.shoot_timer = 0.0
        self.items: list[AlienProjectile] = []

    def __iter__(self) -> Iterator[AlienProjectile]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def fire(self, dt: float, aliens: Iterable[Alien]) -> AlienProjectile | None:
        """Count down the cooldown and, once it has run out, shoot from a random alien."""
        self.shoot_timer -= dt
        if self.shoot_timer > 0.0:
            return None
        living = [alien for alien in aliens if not alien.marked_dead]
        if not living:
            return None
        shooter = self.rng.choice(living)
        self.events.send(AlienShoot())
        self.shoot_timer = SHOOT_COOLDOWN
        projectile = AlienProjectile(
            x=shooter.x,
            y=shooter.y,
            z=shooter.z,
            speed=BULLET_SPEED,
            scale=self.resolution.pixel_ratio,
        )
        self.items.append(projectile)
        return projectile

    def advance(self, dt: float) -> None:
        """Move every projectile down and drop those below the screen."""
        bottom = -self.resolution.half_height
        kept = []
        for projectile in self.items:
            projectile.y -= projectile.speed * dt
            if projectile.y >= bottom:
                kept.append(projectile)
        self.items = kept

    def hit_player(self, player: Player) -> None:
        """Kill the player for every projectile that touches it, removing those projectiles."""
        kept = []
        for projectile in self.items:
            if math.dist(player.location, projectile.location) < BULLET_RADIUS:
                player.dead = True
                self.events.send(PlayerKilled())
            else:
                kept.append(projectile)
        self.items = kept