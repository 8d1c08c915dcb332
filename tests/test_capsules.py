import pytest

from chainreaxian.aliens import AlienType
from chainreaxian.capsules import (
    CAPSULE_SPEED,
    CAPSULE_Z,
    MAX_CAPSULES,
    Capsule,
    CapsuleDropper,
)
from chainreaxian.events import AlienKilled, CapsuleCollision, CapsuleReleased, EventBus
from chainreaxian.player import Player
from chainreaxian.resolution import Resolution


class FixedRoll:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def bus():
    return EventBus()


def make_dropper(bus, roll):
    return CapsuleDropper(Resolution.from_window(600, 600), bus, rng=FixedRoll(roll))


def killed(x, y):
    return AlienKilled(alien_type=AlienType.WORKER, location=(x, y))


def test_low_roll_drops_capsule_at_kill_location(bus):
    dropper = make_dropper(bus, 0.0)
    bus.send(killed(30.0, 40.0))
    dropper.spawn()
    assert len(dropper) == 1
    capsule = dropper.items[0]
    assert capsule.location == (30.0, 40.0)
    assert capsule.z == CAPSULE_Z
    assert capsule.speed == CAPSULE_SPEED
    assert dropper.num_capsules == 1
    assert len(bus.reader(CapsuleReleased).read()) == 1


def test_high_roll_drops_nothing(bus):
    dropper = make_dropper(bus, 0.5)
    bus.send(killed(30.0, 40.0))
    dropper.spawn()
    assert len(dropper) == 0
    assert dropper.num_capsules == 0
    assert bus.reader(CapsuleReleased).read() == []


def test_capsule_limit(bus):
    dropper = make_dropper(bus, 0.0)
    for i in range(3):
        bus.send(killed(float(i), 0.0))
    dropper.spawn()
    assert len(dropper) == MAX_CAPSULES
    assert dropper.num_capsules == MAX_CAPSULES


def test_events_read_once(bus):
    dropper = make_dropper(bus, 0.0)
    bus.send(killed(0.0, 0.0))
    dropper.spawn()
    dropper.items.clear()
    dropper.num_capsules = 0
    dropper.spawn()
    assert len(dropper) == 0


def test_advance_falls_and_leaves_screen(bus):
    dropper = make_dropper(bus, 0.0)
    dropper.items = [Capsule(x=0.0, y=100.0)]
    dropper.num_capsules = 1
    dropper.advance(0.5)
    assert dropper.items[0].y == pytest.approx(100.0 - CAPSULE_SPEED * 0.5)
    dropper.advance(10.0)
    assert len(dropper) == 0
    assert dropper.num_capsules == 0


def test_collect_by_player(bus):
    dropper = make_dropper(bus, 0.0)
    dropper.items = [Capsule(x=10.0, y=-200.0), Capsule(x=200.0, y=200.0)]
    dropper.num_capsules = 2
    dropper.collect(Player(x=10.0, y=-200.0))
    assert len(dropper) == 1
    assert dropper.items[0].location == (200.0, 200.0)
    assert dropper.num_capsules == 1
    assert len(bus.reader(CapsuleCollision).read()) == 1


def test_collect_miss(bus):
    dropper = make_dropper(bus, 0.0)
    dropper.items = [Capsule(x=100.0, y=0.0)]
    dropper.num_capsules = 1
    dropper.collect(Player(x=0.0, y=0.0))
    assert len(dropper) == 1
    assert bus.reader(CapsuleCollision).read() == []