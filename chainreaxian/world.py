"""The whole game world, advanced one frame at a time."""

from __future__ import annotations

import random

from .alien_projectiles import AlienGunner
from .aliens import AlienFleet
from .audio import AudioDirector, Sound
from .capsules import CapsuleDropper
from .events import EventBus
from .fire import FireField
from .level_indicator import LevelIndicator
from .player import Controls, Player, PlayerController
from .projectiles import PlayerProjectiles
from .resolution import Resolution
from .star_field import star_field_tiles

DEFAULT_WINDOW_SIZE = 612


class Game:
    """All game systems wired to one event bus."""

    def __init__(
        self,
        resolution: Resolution | None = None,
        rng: random.Random | None = None,
        music_enabled: bool = True,
    ) -> None:
        self.resolution = resolution or Resolution.from_window(
            DEFAULT_WINDOW_SIZE, DEFAULT_WINDOW_SIZE
        )
        self.rng = rng if rng is not None else random.Random()
        self.events = EventBus()
        self.stars = star_field_tiles(self.resolution)
        self.fleet = AlienFleet(self.resolution, self.events)
        self.gunner = AlienGunner(self.resolution, self.events, self.rng)
        self.player_controller = PlayerController(self.resolution, self.events)
        self.projectiles = PlayerProjectiles(self.resolution, self.events)
        self.capsules = CapsuleDropper(self.resolution, self.events, self.rng)
        self.fires = FireField(self.resolution, self.events)
        self.level = LevelIndicator(self.events)
        self.audio = AudioDirector(self.events, music_enabled=music_enabled)

    @property
    def player(self) -> Player:
        return self.player_controller.player

    def step(self, dt: float, controls: Controls) -> list[Sound]:
        """Advance the world by ``dt`` seconds and return the sounds to play."""
        controller = self.player_controller
        self.projectiles += controller.update(dt, controls)
        controller.handle_capsules()
        controller.handle_killed(self.level.score)

        self.fleet.update(dt)
        self.fleet.manage()
        self.fleet.handle_player_killed()

        self.gunner.fire(dt, self.fleet.aliens)
        self.gunner.advance(dt)
        self.gunner.hit_player(self.player)

        self.projectiles.advance(dt)
        self.projectiles.hit_aliens(self.fleet.aliens)

        self.capsules.spawn()
        self.capsules.advance(dt)
        self.capsules.collect(self.player)

        self.fires.spawn()
        self.fires.advance(dt)
        self.fires.burn(self.fleet.aliens)

        self.level.update(dt)
        sounds = self.audio.update(dt)
        self.events.update()
        return sounds