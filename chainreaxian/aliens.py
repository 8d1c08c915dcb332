"""The alien formation: layout, marching, shifting down and resetting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .events import EventBus, LevelCompleted, PlayerKilled, SpeedChanged
from .resolution import Resolution

ALIEN_ROWS = 5
ALIEN_COLS = 20

DEFAULT_MASK: tuple[tuple[int, ...], ...] = (
    (1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0),
    (1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0),
    (1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0, 1, 0),
    (0, 0, 0, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 2, 0, 0, 0, 0, 0),
    (0, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 3, 0, 0, 0, 0, 0, 0, 0),
)

HORIZ_SPACING = 22.0
VERT_SPACING = 50.0
INITIAL_ALIEN_SPEED = 35.0
ALIEN_SPEED_INCREMENT = 12.0
ALIEN_SHIFT_AMOUNT = 16.0
ZINDEX = 15.0
VERT_OFFSET = 70.0
SPEED_THRESHOLDS = (30, 20, 10, 3)
LEVEL_COMPLETE_COOLDOWN = 1.0


class AlienType(Enum):
    WORKER = "worker"
    SOLDIER = "soldier"
    QUEEN = "queen"
    EMPTY = "empty"

    @classmethod
    def from_mask(cls, value: int) -> AlienType:
        """Map a layout mask value to an alien type."""
        return {1: cls.WORKER, 2: cls.SOLDIER, 3: cls.QUEEN}.get(value, cls.EMPTY)

    @property
    def image(self) -> str | None:
        """Asset path of the sprite for this type, or None for an empty slot."""
        if self is AlienType.EMPTY:
            return None
        return f"images/alien_{self.value}.png"


@dataclass
class Alien:
    """One alien. ``dead`` is set when hit; ``marked_dead`` once the fleet has retired it."""

    original_position: tuple[float, float, float]
    appearance: AlienType = AlienType.WORKER
    alien_type: AlienType = AlienType.WORKER
    scale: float = 1.0
    dead: bool = False
    marked_dead: bool = False
    visible: bool = True
    x: float = field(init=False)
    y: float = field(init=False)
    z: float = field(init=False)

    def __post_init__(self) -> None:
        self.x, self.y, self.z = self.original_position

    @property
    def position(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    @property
    def location(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class AlienManager:
    """Shared state that drives the whole formation."""

    direction: float = 1.0
    shift_aliens_down: bool = False
    dist_from_boundary: float = 0.0
    reset: bool = False
    speed: float = INITIAL_ALIEN_SPEED
    prev_alien_count: int = 99
    reset_cooldown: float = 0.0


def spawn_wave(resolution: Resolution) -> list[Alien]:
    """Lay out a fresh wave of aliens following ``DEFAULT_MASK``."""
    half_width = ALIEN_COLS * HORIZ_SPACING * 0.5
    aliens = []
    for row, values in enumerate(DEFAULT_MASK):
        for col, value in enumerate(values):
            appearance = AlienType.from_mask(value)
            if appearance is AlienType.EMPTY:
                continue
            position = (
                col * HORIZ_SPACING - half_width,
                row * VERT_SPACING + VERT_OFFSET,
                ZINDEX,
            )
            aliens.append(
                Alien(
                    original_position=position,
                    appearance=appearance,
                    alien_type=AlienType.WORKER,
                    scale=resolution.pixel_ratio,
                )
            )
    return aliens


class AlienFleet:
    """Moves the formation, detects its end states and resets it."""

    def __init__(
        self,
        resolution: Resolution,
        events: EventBus,
        aliens: list[Alien] | None = None,
    ) -> None:
        self.resolution = resolution
        self.events = events
        self.aliens = list(aliens) if aliens is not None else spawn_wave(resolution)
        self.manager = AlienManager()
        self._player_killed = events.reader(PlayerKilled)

    @property
    def margin(self) -> float:
        """Distance from the centre an alien may travel before the fleet turns."""
        return self.resolution.half_width - self.resolution.pixel_ratio * 25.0

    def living(self) -> list[Alien]:
        """Aliens not yet retired by the fleet."""
        return [alien for alien in self.aliens if not alien.marked_dead]

    def update(self, dt: float) -> None:
        """March the living aliens and check for boundary, loss and win."""
        manager = self.manager
        margin = self.margin
        bottom = -self.resolution.half_height + 70.0
        alien_count = 0
        manager.reset_cooldown -= dt

        for alien in self.living():
            alien.x += dt * manager.direction * manager.speed
            if abs(alien.x) > margin:
                manager.shift_aliens_down = True
                manager.dist_from_boundary = margin * manager.direction - alien.x

            if alien.dead:
                alien.marked_dead = True
                alien.visible = False
            else:
                alien.visible = True

            if alien.y < bottom:
                manager.reset = True
                self.events.send(PlayerKilled())

            alien_count += 1

        if alien_count == 0:
            manager.reset = True
            if manager.reset_cooldown < 0.0:
                manager.reset_cooldown = LEVEL_COMPLETE_COOLDOWN
                self.events.send(LevelCompleted())

        if any(
            alien_count < threshold <= manager.prev_alien_count
            for threshold in SPEED_THRESHOLDS
        ):
            manager.speed += ALIEN_SPEED_INCREMENT
            self.events.send(SpeedChanged(speed=manager.speed))

        manager.prev_alien_count = alien_count

    def manage(self) -> None:
        """Apply a pending turn-and-descend or a pending reset."""
        manager = self.manager
        if manager.shift_aliens_down:
            manager.shift_aliens_down = False
            manager.direction *= -1.0
            for alien in self.aliens:
                alien.x += manager.dist_from_boundary
                alien.y -= ALIEN_SHIFT_AMOUNT

        if manager.reset:
            manager.reset = False
            manager.direction = 1.0
            for alien in self.aliens:
                alien.x, alien.y, alien.z = alien.original_position
                if alien.dead:
                    alien.dead = False
                    alien.marked_dead = False

    def handle_player_killed(self) -> None:
        """Reset the wave and its speed for every player death."""
        for _ in self._player_killed.read():
            self.manager.reset = True
            self.manager.speed = INITIAL_ALIEN_SPEED
            self.events.send(SpeedChanged(speed=self.manager.speed))