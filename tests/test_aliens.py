import pytest

from chainreaxian.aliens import (
    ALIEN_SHIFT_AMOUNT,
    ALIEN_SPEED_INCREMENT,
    DEFAULT_MASK,
    INITIAL_ALIEN_SPEED,
    ZINDEX,
    Alien,
    AlienFleet,
    AlienManager,
    AlienType,
    spawn_wave,
)
from chainreaxian.events import EventBus, LevelCompleted, PlayerKilled, SpeedChanged
from chainreaxian.resolution import Resolution


@pytest.fixture
def resolution():
    return Resolution.from_window(612, 612)


def make_fleet(resolution, positions):
    bus = EventBus()
    aliens = [Alien(original_position=(x, y, ZINDEX)) for x, y in positions]
    return AlienFleet(resolution, bus, aliens), bus


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, AlienType.WORKER),
        (2, AlienType.SOLDIER),
        (3, AlienType.QUEEN),
        (0, AlienType.EMPTY),
        (7, AlienType.EMPTY),
    ],
)
def test_from_mask(value, expected):
    assert AlienType.from_mask(value) is expected


@pytest.mark.parametrize(
    "value, image",
    [
        (1, "images/alien_worker.png"),
        (2, "images/alien_soldier.png"),
        (3, "images/alien_queen.png"),
        (0, None),
    ],
)
def test_type_images(value, image):
    assert AlienType.from_mask(value).image == image


def test_manager_defaults():
    manager = AlienManager()
    assert manager.speed == INITIAL_ALIEN_SPEED
    assert manager.direction == 1.0
    assert manager.prev_alien_count == 99


def test_spawn_wave_follows_mask(resolution):
    aliens = spawn_wave(resolution)
    occupied = sum(1 for row in DEFAULT_MASK for value in row if value)
    assert len(aliens) == occupied
    assert len({alien.position for alien in aliens}) == len(aliens)
    assert all(alien.z == ZINDEX for alien in aliens)
    assert all(alien.scale == resolution.pixel_ratio for alien in aliens)
    appearances = {alien.appearance for alien in aliens}
    assert appearances == {AlienType.WORKER, AlienType.SOLDIER, AlienType.QUEEN}


def test_spawn_wave_is_centred(resolution):
    aliens = spawn_wave(resolution)
    xs = [alien.x for alien in aliens]
    assert min(xs) < 0 < max(xs)
    assert all(alien.position == alien.original_position for alien in aliens)


def test_fleet_defaults_to_spawned_wave(resolution):
    fleet = AlienFleet(resolution, EventBus())
    assert len(fleet.aliens) == len(spawn_wave(resolution))
    assert fleet.living() == fleet.aliens


def test_update_moves_aliens_right(resolution):
    fleet, _ = make_fleet(resolution, [(0.0, 200.0), (20.0, 200.0)])
    fleet.update(0.5)
    assert fleet.aliens[0].x == pytest.approx(0.5 * INITIAL_ALIEN_SPEED)
    assert fleet.aliens[1].x - fleet.aliens[0].x == pytest.approx(20.0)


def test_crossing_margin_turns_and_descends(resolution):
    fleet, _ = make_fleet(resolution, [(0.0, 200.0)])
    fleet.aliens[0].x = fleet.margin - 1.0
    fleet.update(1.0)
    assert fleet.manager.shift_aliens_down
    fleet.manage()
    alien = fleet.aliens[0]
    assert alien.x == pytest.approx(fleet.margin)
    assert alien.y == pytest.approx(200.0 - ALIEN_SHIFT_AMOUNT)
    assert fleet.manager.direction == -1.0
    assert not fleet.manager.shift_aliens_down


def test_dead_alien_is_retired_and_hidden(resolution):
    fleet, _ = make_fleet(resolution, [(0.0, 200.0), (40.0, 200.0)])
    fleet.aliens[0].dead = True
    fleet.update(0.1)
    assert fleet.aliens[0].marked_dead
    assert not fleet.aliens[0].visible
    assert fleet.living() == [fleet.aliens[1]]


def test_all_dead_completes_level_once(resolution):
    fleet, bus = make_fleet(resolution, [(0.0, 200.0)])
    levels = bus.reader(LevelCompleted)
    fleet.aliens[0].dead = True
    fleet.update(0.1)
    fleet.update(0.1)
    assert len(levels.read()) == 1
    fleet.update(0.1)
    assert levels.read() == []
    assert fleet.manager.reset


def test_reset_revives_and_restores(resolution):
    fleet, _ = make_fleet(resolution, [(0.0, 200.0)])
    alien = fleet.aliens[0]
    alien.dead = True
    fleet.update(0.1)
    fleet.update(0.1)
    fleet.manage()
    assert not alien.dead
    assert not alien.marked_dead
    assert alien.position == alien.original_position
    assert fleet.manager.direction == 1.0


def test_reaching_bottom_kills_player(resolution):
    fleet, bus = make_fleet(resolution, [(0.0, -resolution.half_height)])
    killed = bus.reader(PlayerKilled)
    fleet.update(0.01)
    assert len(killed.read()) == 1
    assert fleet.manager.reset


def test_speed_rises_when_count_drops_below_threshold(resolution):
    fleet, bus = make_fleet(resolution, [(i * 5.0 - 100.0, 200.0) for i in range(30)])
    speeds = bus.reader(SpeedChanged)
    fleet.update(0.01)
    assert fleet.manager.speed == INITIAL_ALIEN_SPEED
    fleet.aliens[0].dead = True
    fleet.update(0.01)
    assert fleet.manager.speed == INITIAL_ALIEN_SPEED
    fleet.update(0.01)
    assert fleet.manager.speed == INITIAL_ALIEN_SPEED + ALIEN_SPEED_INCREMENT
    assert speeds.read() == [SpeedChanged(fleet.manager.speed)]
    assert fleet.manager.prev_alien_count == len(fleet.living())


def test_player_killed_resets_speed(resolution):
    fleet, bus = make_fleet(resolution, [(0.0, 200.0)])
    speeds = bus.reader(SpeedChanged)
    fleet.manager.speed = INITIAL_ALIEN_SPEED + 3 * ALIEN_SPEED_INCREMENT
    bus.send(PlayerKilled())
    fleet.handle_player_killed()
    assert fleet.manager.speed == INITIAL_ALIEN_SPEED
    assert fleet.manager.reset
    assert speeds.read() == [SpeedChanged(INITIAL_ALIEN_SPEED)]
    fleet.handle_player_killed()
    assert speeds.read() == []