"""Power-up capsules dropped by dying aliens."""

from __future__ import annotations

import math
import random
from collections.abc import Iterator
from dataclasses import dataclass

from .events import AlienKilled, CapsuleCollision, CapsuleReleased, EventBus
from .player import Player
from .resolution import PIXEL_RATIO, Resolution

CAPSULE_PCT = 4.0
CAPSULE_RADIUS = 24.0
CAPSULE_SPEED = 120.0
CAPSULE_Z = 5.0
MAX_CAPSULES = 1
CAPSULE_IMAGE = "images/orange_capsule.png"


@dataclass
class Capsule:
    """A capsule falling at ``speed`` pixels per second."""

    x: float
    y: float
    z: float = CAPSULE_Z
    speed: float = CAPSULE_SPEED
    scale: float = PIXEL_RATIO

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


class CapsuleDropper:
    """Drops capsules where aliens die and lets the player catch them."""

    def __init__(
        self,
        resolution: Resolution,
        events: EventBus,
        rng: random.Random | None = None,
    ) -> None:
        self.resolution = resolution
        self.events = events
        self.rng = rng if rng is not None else random.Random()
        self.num_capsules = 0
        self.items: list[Capsule] = []
        self._killed = events.reader(AlienKilled)

    def __iter__(self) -> Iterator[Capsule]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def spawn(self) -> None:
        """Maybe drop a capsule for each alien killed, while below the limit."""
        for event in self._killed.read():
            if self.num_capsules >= MAX_CAPSULES:
                return
            if self.rng.random() * 100.0 < CAPSULE_PCT:
                self.num_capsules += 1
                self.events.send(CapsuleReleased())
                x, y = event.location
                self.items.append(
                    Capsule(x=x, y=y, scale=self.resolution.pixel_ratio)
                )

    def advance(self, dt: float) -> None:
        """Move capsules down and drop those that leave the screen."""
        limit = self.resolution.half_height
        kept = []
        for capsule in self.items:
            capsule.y -= capsule.speed * dt
            if abs(capsule.y) > limit:
                self.num_capsules -= 1
            else:
                kept.append(capsule)
        self.items = kept

    def collect(self, player: Player) -> None:
        """Hand every capsule the player touches to the player."""
        kept = []
        for capsule in self.items:
            if math.dist(player.location, capsule.location) < CAPSULE_RADIUS:
                self.events.send(CapsuleCollision())
                self.num_capsules -= 1
            else:
                kept.append(capsule)
        self.items = kept