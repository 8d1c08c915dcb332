"""Game events and a double-buffered event bus shared by the game systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from .aliens import AlienType

E = TypeVar("E")


@dataclass(frozen=True)
class SpeedChanged:
    """The alien fleet's horizontal speed changed."""

    speed: float


@dataclass(frozen=True)
class PlayerKilled:
    """The player was hit, or the aliens reached the bottom of the screen."""


@dataclass(frozen=True)
class AlienShoot:
    """An alien fired a projectile."""


@dataclass(frozen=True)
class PlayerShoot:
    """The player fired a volley."""


@dataclass(frozen=True)
class CapsuleReleased:
    """A power-up capsule was dropped."""


@dataclass(frozen=True)
class CapsuleCollision:
    """The player picked up a capsule."""


@dataclass(frozen=True)
class AlienKilled:
    """An alien died at the given location."""

    alien_type: AlienType
    location: tuple[float, float]


@dataclass(frozen=True)
class LevelCompleted:
    """A level ended and the level banner should be shown."""


class EventReader(Generic[E]):
    """Reads events of one kind from a bus, each event at most once."""

    def __init__(self, bus: EventBus, kind: type[E]) -> None:
        self._bus = bus
        self._kind = kind
        self._cursor = 0

    @property
    def kind(self) -> type[E]:
        return self._kind

    def read(self) -> list[E]:
        """Return the events of this reader's kind not yet seen by it."""
        events = [
            event
            for seq, event in self._bus._buffered()
            if seq >= self._cursor and isinstance(event, self._kind)
        ]
        self._cursor = self._bus._next_seq
        return events


class EventBus:
    """Holds sent events for two update cycles so every reader gets a chance to see them."""

    def __init__(self) -> None:
        self._events: list[tuple[int, object]] = []
        self._next_seq = 0
        self._last_mark = 0

    def send(self, event: object) -> None:
        """Queue an event for readers."""
        self._events.append((self._next_seq, event))
        self._next_seq += 1

    def reader(self, kind: type[E]) -> EventReader[E]:
        """Create a reader for events of ``kind``."""
        return EventReader(self, kind)

    def update(self) -> None:
        """Drop events sent before the previous update."""
        self._events = [item for item in self._events if item[0] >= self._last_mark]
        self._last_mark = self._next_seq

    def _buffered(self) -> list[tuple[int, object]]:
        return self._events

    def __len__(self) -> int:
        return len(self._events)