"""Sound effects and music tempo driven by game events."""

from __future__ import annotations

from enum import Enum

from .aliens import ALIEN_SPEED_INCREMENT, INITIAL_ALIEN_SPEED
from .events import (
    AlienKilled,
    AlienShoot,
    CapsuleCollision,
    CapsuleReleased,
    EventBus,
    PlayerKilled,
    PlayerShoot,
    SpeedChanged,
)

ALIEN_KILLED_COOLDOWN = 0.3
CAPSULE_COLLISION_COOLDOWN = 0.8
CAPSULE_RELEASE_COOLDOWN = 0.8
SPEED_FACTOR = 0.02
MAX_SPEED = 2.0
MUSIC_PATH = "sounds/background-music.mid"
MUSIC_VOLUME = 3.5


class Sound(Enum):
    """One-shot sound effects, valued by their asset path."""

    ALIEN_KILLED = "sounds/alienKilled.ogg"
    ALIEN_SHOOT = "sounds/alienShoot.ogg"
    CAPSULE_COLLISION = "sounds/capsuleCollision.ogg"
    CAPSULE_RELEASE = "sounds/capsuleRelease.ogg"
    PLAYER_KILLED = "sounds/playerKilled.ogg"
    PLAYER_SHOOT = "sounds/playerShoot.ogg"

    @property
    def path(self) -> str:
        return self.value


def music_speed_for(speed: float) -> float | None:
    """Playback rate of the music for an alien speed, or None if it would be too fast."""
    increments = (speed - INITIAL_ALIEN_SPEED) / ALIEN_SPEED_INCREMENT
    new_speed = 1.0 + increments * SPEED_FACTOR
    return new_speed if new_speed < MAX_SPEED else None


class AudioDirector:
    """Decides which sounds play each frame and how fast the music runs."""

    def __init__(self, events: EventBus, music_enabled: bool = True) -> None:
        self.events = events
        self.music_enabled = music_enabled
        self.music_speed = 1.0
        self.alien_killed_timer = 0.0
        self.capsule_collision_timer = 0.0
        self.capsule_release_timer = 0.0
        self._alien_killed = events.reader(AlienKilled)
        self._alien_shoot = events.reader(AlienShoot)
        self._capsule_collision = events.reader(CapsuleCollision)
        self._capsule_released = events.reader(CapsuleReleased)
        self._player_killed = events.reader(PlayerKilled)
        self._player_shoot = events.reader(PlayerShoot)
        self._speed_changed = events.reader(SpeedChanged)

    def update(self, dt: float) -> list[Sound]:
        """Return the sounds to start this frame, then run down the cooldowns."""
        played: list[Sound] = []

        if self.alien_killed_timer <= 0.0:
            for _ in self._alien_killed.read():
                played.append(Sound.ALIEN_KILLED)
                self.alien_killed_timer = ALIEN_KILLED_COOLDOWN

        played.extend(Sound.ALIEN_SHOOT for _ in self._alien_shoot.read())

        if self.capsule_collision_timer <= 0.0:
            for _ in self._capsule_collision.read():
                played.append(Sound.CAPSULE_COLLISION)
                self.capsule_collision_timer = CAPSULE_COLLISION_COOLDOWN

        # Releases are gated by the collision cooldown.
        if self.capsule_collision_timer <= 0.0:
            for _ in self._capsule_released.read():
                played.append(Sound.CAPSULE_RELEASE)
                self.capsule_release_timer = CAPSULE_RELEASE_COOLDOWN

        played.extend(Sound.PLAYER_KILLED for _ in self._player_killed.read())
        played.extend(Sound.PLAYER_SHOOT for _ in self._player_shoot.read())

        self._apply_speed_changes()

        self.alien_killed_timer -= dt
        self.capsule_collision_timer -= dt
        self.capsule_release_timer -= dt
        return played

    def _apply_speed_changes(self) -> None:
        if not self.music_enabled:
            return
        for event in self._speed_changed.read():
            new_speed = music_speed_for(event.speed)
            if new_speed is not None:
                self.music_speed = new_speed