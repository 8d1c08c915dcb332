"""The player's ship: movement, shooting, power-ups and death."""

from __future__ import annotations

from dataclasses import dataclass

from .events import CapsuleCollision, EventBus, LevelCompleted, PlayerKilled, PlayerShoot
from .level_indicator import ScoreManager
from .projectiles import Projectile
from .resolution import Resolution

SPEED = 200.0
BULLET_SPEED = 400.0
SHOOT_COOLDOWN = 0.9
MAX_SIDE_BULLETS = 6
PRIMARY_GUN_HEIGHT = 25.0
BULLET_HEIGHT = 12.0
GUN_WIDTH = 20.0
PLAYER_IMAGE = "images/player.png"


@dataclass(frozen=True)
class Controls:
    """Input state for one frame."""

    left: bool = False
    right: bool = False
    fire: bool = False

    @property
    def horizontal(self) -> float:
        return (1.0 if self.right else 0.0) - (1.0 if self.left else 0.0)


@dataclass
class Player:
    """The player's ship and its guns."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    scale: float = 1.0
    shoot_timer: float = 0.0
    dead: bool = False
    main_gun_projectiles: int = 1
    side_gun_projectiles: int = 0

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


def main_gun_volley(x: float, y: float, z: float, count: int) -> list[Projectile]:
    """A column of ``count`` projectiles from the central gun."""
    top = y + PRIMARY_GUN_HEIGHT
    return [
        Projectile(x=x, y=top - i * BULLET_HEIGHT, z=z, speed=BULLET_SPEED)
        for i in range(count)
    ]


def side_gun_volley(x: float, y: float, z: float, count: int) -> list[Projectile]:
    """Two columns of ``count`` projectiles from the side guns, left then right per row."""
    top = y + PRIMARY_GUN_HEIGHT
    return [
        Projectile(x=x + offset, y=top - i * BULLET_HEIGHT, z=z, speed=BULLET_SPEED)
        for i in range(count)
        for offset in (-GUN_WIDTH, GUN_WIDTH)
    ]


class PlayerController:
    """Drives the player from input and game events."""

    def __init__(self, resolution: Resolution, events: EventBus) -> None:
        self.resolution = resolution
        self.events = events
        self.player = Player(
            x=0.0,
            y=-resolution.half_height + resolution.pixel_ratio * 25.0,
            z=0.0,
            scale=resolution.pixel_ratio,
        )
        self._capsules = events.reader(CapsuleCollision)
        self._killed = events.reader(PlayerKilled)

    def update(self, dt: float, controls: Controls) -> list[Projectile]:
        """Move the ship, and return the projectiles fired this frame."""
        player = self.player
        half_width = self.resolution.half_width
        player.x += controls.horizontal * dt * SPEED
        player.x = min(max(player.x, -half_width), half_width)

        player.shoot_timer -= dt
        if not (controls.fire and player.shoot_timer <= 0.0):
            return []

        self.events.send(PlayerShoot())
        player.shoot_timer = SHOOT_COOLDOWN
        scale = self.resolution.pixel_ratio
        volley = main_gun_volley(
            player.x, player.y, player.z, player.main_gun_projectiles
        ) + side_gun_volley(player.x, player.y, player.z, player.side_gun_projectiles)
        for projectile in volley:
            projectile.scale = scale
        return volley

    def handle_capsules(self) -> None:
        """Upgrade the guns for each collected capsule."""
        player = self.player
        for _ in self._capsules.read():
            if player.side_gun_projectiles < MAX_SIDE_BULLETS:
                if player.main_gun_projectiles > player.side_gun_projectiles:
                    player.side_gun_projectiles += 1
                else:
                    player.main_gun_projectiles += 1
            self.events.send(LevelCompleted())

    def handle_killed(self, score: ScoreManager) -> None:
        """Reset the guns and the level for each player death."""
        player = self.player
        for _ in self._killed.read():
            score.curr_level = 0
            player.main_gun_projectiles = 1
            player.side_gun_projectiles = 0
            self.events.send(LevelCompleted())