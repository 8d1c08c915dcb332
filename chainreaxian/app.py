"""The game window: input, drawing and sound."""

from __future__ import annotations

import argparse
import os
from collections.abc import Iterator
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .alien_projectiles import PROJECTILE_IMAGE as ALIEN_PROJECTILE_IMAGE  # noqa: E402
from .audio import MUSIC_PATH, MUSIC_VOLUME, Sound  # noqa: E402
from .capsules import CAPSULE_IMAGE  # noqa: E402
from .fire import FIRE_IMAGE  # noqa: E402
from .level_indicator import HEADER_FONT_SIZE, HEADER_TEXT  # noqa: E402
from .player import PLAYER_IMAGE, Controls  # noqa: E402
from .projectiles import PROJECTILE_IMAGE  # noqa: E402
from .resolution import Resolution  # noqa: E402
from .world import DEFAULT_WINDOW_SIZE, Game  # noqa: E402

TITLE = "Chain Reaxian"
FPS = 60
ROW_GAP = 20
DEFAULT_ASSETS = "assets"
_MISSING_COLOUR = (255, 0, 255)

_Sprite = tuple[str, float, float, float, float, float]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="chainreaxian", description="Play Chain Reaxian.")
    parser.add_argument(
        "--size", type=int, default=DEFAULT_WINDOW_SIZE, help="window width and height in pixels"
    )
    parser.add_argument(
        "--assets", type=Path, default=Path(DEFAULT_ASSETS), help="directory holding the game assets"
    )
    args = parser.parse_args(argv)
    if args.size <= 0:
        parser.error("--size must be positive")
    return args


class _Images:
    """Loads sprites once and caches their scaled and rotated forms."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._raw: dict[str, pygame.Surface] = {}
        self._transformed: dict[tuple[str, float, float], pygame.Surface] = {}

    def _load(self, path: str) -> pygame.Surface:
        if path not in self._raw:
            try:
                self._raw[path] = pygame.image.load(str(self._root / path)).convert_alpha()
            except (pygame.error, FileNotFoundError):
                surface = pygame.Surface((8, 8))
                surface.fill(_MISSING_COLOUR)
                self._raw[path] = surface
        return self._raw[path]

    def get(self, path: str, scale: float, rotation: float) -> pygame.Surface:
        key = (path, scale, rotation)
        if key not in self._transformed:
            surface = self._load(path)
            width, height = surface.get_size()
            size = (max(1, round(width * scale)), max(1, round(height * scale)))
            surface = pygame.transform.scale(surface, size)
            degrees = round(rotation * 180.0 / 3.141592653589793)
            if degrees % 360:
                surface = pygame.transform.rotate(surface, degrees)
            self._transformed[key] = surface
        return self._transformed[key]


class _Mixer:
    """Plays sound effects and the looping music, if an audio device is available."""

    def __init__(self, root: Path) -> None:
        self._root = root
        self._sounds: dict[Sound, pygame.mixer.Sound | None] = {}
        try:
            pygame.mixer.init()
            self.available = True
        except pygame.error:
            self.available = False

    def start_music(self) -> bool:
        if not self.available:
            return False
        try:
            pygame.mixer.music.load(str(self._root / MUSIC_PATH))
        except pygame.error:
            return False
        pygame.mixer.music.set_volume(min(MUSIC_VOLUME, 1.0))
        pygame.mixer.music.play(loops=-1)
        return True

    def play(self, sound: Sound) -> None:
        if not self.available:
            return
        if sound not in self._sounds:
            try:
                self._sounds[sound] = pygame.mixer.Sound(str(self._root / sound.path))
            except (pygame.error, FileNotFoundError):
                self._sounds[sound] = None
        effect = self._sounds[sound]
        if effect is not None:
            effect.play()


def _sprites(game: Game) -> Iterator[_Sprite]:
    for tile in game.stars:
        yield (tile.image, tile.x, tile.y, tile.z, tile.scale, tile.rotation)
    player = game.player
    yield (PLAYER_IMAGE, player.x, player.y, player.z, player.scale, 0.0)
    for p in game.projectiles:
        yield (PROJECTILE_IMAGE, p.x, p.y, p.z, p.scale, 0.0)
    for p in game.gunner:
        yield (ALIEN_PROJECTILE_IMAGE, p.x, p.y, p.z, p.scale, 0.0)
    for c in game.capsules:
        yield (CAPSULE_IMAGE, c.x, c.y, c.z, c.scale, 0.0)
    for f in game.fires:
        yield (FIRE_IMAGE, f.x, f.y, f.z, f.scale, 0.0)
    for alien in game.fleet.aliens:
        image = alien.appearance.image
        if image is not None and alien.visible and not alien.marked_dead:
            yield (image, alien.x, alien.y, alien.z, alien.scale, 0.0)


def _draw(screen: pygame.Surface, game: Game, images: _Images, font: pygame.font.Font) -> None:
    screen.fill((0, 0, 0))
    half_w = game.resolution.half_width
    half_h = game.resolution.half_height
    for image, x, y, _z, scale, rotation in sorted(_sprites(game), key=lambda s: s[3]):
        surface = images.get(image, scale, rotation)
        screen.blit(surface, surface.get_rect(center=(half_w + x, half_h - y)))

    colour = tuple(round(c * 255) for c in HEADER_TEXT)
    rendered = [font.render(text.text, True, colour) for text in game.level.texts]
    if rendered:
        total = sum(s.get_height() for s in rendered) + ROW_GAP * (len(rendered) - 1)
        top = half_h - total / 2
        for surface in rendered:
            screen.blit(surface, surface.get_rect(midtop=(half_w, top)))
            top += surface.get_height() + ROW_GAP


def run(size: int, assets_dir: Path | str) -> None:
    """Open the game window and play until it is closed."""
    root = Path(assets_dir)
    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.init()
    try:
        screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        images = _Images(root)
        mixer = _Mixer(root)
        font = pygame.font.Font(None, int(HEADER_FONT_SIZE))
        game = Game(Resolution.from_window(size, size), music_enabled=mixer.start_music())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            keys = pygame.key.get_pressed()
            controls = Controls(
                left=bool(keys[pygame.K_a]),
                right=bool(keys[pygame.K_d]),
                fire=bool(keys[pygame.K_SPACE]),
            )
            dt = clock.tick(FPS) / 1000.0
            for sound in game.step(dt, controls):
                mixer.play(sound)
            _draw(screen, game, images, font)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Start the game from the command line."""
    args = parse_args(argv)
    run(args.size, args.assets)
    return 0