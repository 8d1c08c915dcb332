# chainreaxian

A small arcade shooter. A wave of aliens marches across the screen and drops
lower each time it reaches an edge. When you shoot an alien, it leaves a fire
behind. The fire burns any alien that walks into it and then leaves a fire of
its own. One good shot can set off a chain reaction.

## Installing

```
pip install .
```

This also installs pygame.

## Playing

```
chainreaxian
```

Options:

- `--size N` sets the width and height of the square window in pixels. The
  default is 612, and N must be positive.
- `--assets DIR` sets the directory to load images and sounds from. The
  default is `assets` in the current directory.

Controls:

- `A` moves left.
- `D` moves right.
- `Space` fires. Shots have a cooldown of 0.9 seconds.

Close the window to quit.

## Rules

- Aliens shoot chains at you. If a chain hits you, the wave goes back to its
  starting positions at its starting speed, and your guns are reset. The level
  count also starts over, so the banner shows "Level 1".
- If the aliens reach the bottom of the screen, the same thing happens.
- A destroyed alien leaves a fire that burns for two seconds. At most 20 fires
  can burn at once.
- The wave speeds up each time the number of aliens left drops below 30, 20,
  10 and 3.
- A destroyed alien sometimes drops an orange capsule (a 4% chance). Only one
  capsule is on screen at a time. Catching it moves you up a level and adds a
  barrel to your guns, alternating between the centre gun and the pair of side
  guns. Upgrades stop once the side guns have 6 barrels each.
- Clear the whole wave to reach the next level. The banner shows your current
  level and the highest level you have reached.

## Assets

The package does not ship any images, sounds or music. The game looks for
these paths inside the assets directory:

- Images: `images/player.png`, `images/alien_worker.png`,
  `images/alien_soldier.png`, `images/alien_queen.png`, `images/chain.png`,
  `images/orange_capsule.png`, `images/fire.png` and
  `images/star_field_atlas.png`.
- Sounds: `sounds/alienKilled.ogg`, `sounds/alienShoot.ogg`,
  `sounds/capsuleCollision.ogg`, `sounds/capsuleRelease.ogg`,
  `sounds/playerKilled.ogg` and `sounds/playerShoot.ogg`.
- Music: `sounds/background-music.mid`, which plays on a loop.

If an image is missing, a small magenta square is drawn in its place. If a
sound is missing, or there is no audio device, the game plays without it.

## What the game window does not do

The simulation speeds up the music along with the wave. It records the new
playback rate in `AudioDirector.music_speed`. The window does not apply that
rate: the music keeps playing at normal speed. The music volume is also capped
at pygame's maximum.

## Using it as a library

The game logic does not depend on drawing anything, so you can drive it from
tests or scripts without opening a window.

`chainreaxian.world.Game(resolution=None, rng=None, music_enabled=True)` holds
the whole simulation:

- `resolution` is a `chainreaxian.resolution.Resolution`, for example
  `Resolution.from_window(612, 612)`. If you leave it out, a 612 by 612 window
  is used.
- `rng` is a `random.Random` that decides which alien shoots and when capsules
  drop. Pass a seeded one to get repeatable games.

`Game.step(dt, controls)` moves the game forward by `dt` seconds. `controls` is
a `chainreaxian.player.Controls(left=False, right=False, fire=False)`. The call
returns the `chainreaxian.audio.Sound` values to play for that frame.

To read the state of the game:

- `game.player` is the player's ship.
- `game.fleet.aliens` is the list of aliens.
- `game.projectiles` holds your shots in flight.
- `game.gunner` holds the aliens' shots in flight.
- `game.capsules` holds the falling capsules.
- `game.fires` holds the burning fires.
- `game.level.score` holds `curr_level` and `max_level`.
- `game.level.texts` holds the banners currently shown.
- `game.stars` is the list of background tiles.

## Running the tests

```
pip install .[test]
pytest
```