"""Level counter and the transient banner shown when a level ends."""

from __future__ import annotations

from dataclasses import dataclass, field

from .events import EventBus, LevelCompleted

TIME_REMAINING = 1.7
HEADER_TEXT = (0.988, 0.984, 0.800)
HEADER_FONT_SIZE = 40.0


@dataclass
class ScoreManager:
    """Current level and the highest level reached."""

    curr_level: int = 1
    max_level: int = 1


@dataclass
class LevelText:
    """A banner that disappears once its time runs out."""

    text: str
    time_remaining: float = TIME_REMAINING
    font_size: float = HEADER_FONT_SIZE
    color: tuple[float, float, float] = HEADER_TEXT


@dataclass
class LevelIndicator:
    """Advances the level on every completed level and shows a banner for it."""

    events: EventBus
    score: ScoreManager = field(default_factory=ScoreManager)
    texts: list[LevelText] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._completed = self.events.reader(LevelCompleted)

    def update(self, dt: float) -> None:
        """Age the visible banners, then handle newly completed levels."""
        for text in self.texts:
            text.time_remaining -= dt
        self.texts = [text for text in self.texts if text.time_remaining >= 0.0]

        score = self.score
        for _ in self._completed.read():
            score.curr_level += 1
            score.max_level = max(score.max_level, score.curr_level)
            self.texts.append(
                LevelText(text=f"Level {score.curr_level} (Max: {score.max_level})")
            )