import math

import pytest

from arcadekit.display import RecordingDisplay
from arcadekit.missile import (
    COLOR_PLAYER_MISSILE,
    EXPLOSION_MAX_RADIUS,
    EXPLOSION_RADIUS_CHANGE_PER_TICK,
    Missile,
    MissileState,
    MissileType,
)


@pytest.fixture
def display():
    return RecordingDisplay(320, 240)


def run_until(missile, predicate, limit=2000):
    for _ in range(limit):
        if predicate(missile):
            return
        missile.tick()
    raise AssertionError("condition never reached")


def test_new_missile_is_idle(display):
    m = Missile(display, MissileType.ENEMY)
    assert m.is_idle()
    assert not m.is_moving()
    assert not m.is_exploding()
    m.tick()
    assert m.state is MissileState.IDLE


@pytest.mark.parametrize(
    "x_dest, origin_fraction",
    [(0, (1, 4)), (150, (1, 2)), (319, (3, 4))],
)
def test_player_launch_uses_nearest_firing_location(display, x_dest, origin_fraction):
    m = Missile(display, MissileType.PLAYER)
    m.launch_player(x_dest, 50)
    num, den = origin_fraction
    assert m.x_origin == display.width * num // den
    assert m.y_origin == display.height
    assert m.type is MissileType.PLAYER


def test_launched_missile_moves_and_draws_line(display):
    m = Missile(display, MissileType.PLAYER)
    m.launch_player(display.width // 2, 100)
    m.tick()
    assert m.is_moving()
    lines = display.calls_named("draw_line")
    assert len(lines) == 1
    assert lines[0][-1] == COLOR_PLAYER_MISSILE
    assert lines[0][:2] == (m.x_origin, m.y_origin)


def test_flight_approaches_destination(display):
    m = Missile(display, MissileType.ENEMY)
    m.launch_plane(10, 10)
    m.tick()
    previous = math.inf
    while m.is_moving():
        x, y = m.position()
        dist = math.hypot(m.x_dest - x, m.y_dest - y)
        assert dist <= previous
        previous = dist
        m.tick()
    assert m.is_impacted()


def test_full_lifecycle_returns_to_idle(display):
    m = Missile(display, MissileType.PLAYER)
    m.launch_player(display.width // 2, 100)
    m.tick()
    run_until(m, lambda mm: not mm.is_moving())
    assert m.is_impacted()
    assert m.position() == (display.width // 2, 100)
    m.tick()
    assert m.is_exploding()
    largest = 0.0
    while m.is_exploding():
        largest = max(largest, m.radius)
        m.tick()
    assert EXPLOSION_MAX_RADIUS <= largest < EXPLOSION_MAX_RADIUS + EXPLOSION_RADIUS_CHANGE_PER_TICK
    assert m.is_idle()
    m.tick()
    assert m.is_idle()


def test_explode_while_moving(display):
    m = Missile(display, MissileType.ENEMY)
    m.launch_enemy()
    m.tick()
    assert m.is_moving()
    m.explode()
    m.tick()
    assert m.state is MissileState.EXPLODE_GROW
    assert display.calls_named("fill_circle")


def test_enemy_launch_is_repeatable_and_on_screen(display):
    a = Missile(display)
    b = Missile(display)
    a.launch_enemy()
    b.launch_enemy()
    assert (a.x_origin, a.x_dest) == (b.x_origin, b.x_dest)
    assert 0 <= a.x_origin < display.width
    assert 0 <= a.x_dest < display.width
    assert a.y_origin == 0
    assert a.y_dest == display.height
    assert a.type is MissileType.ENEMY


def test_plane_launch_origin(display):
    m = Missile(display)
    m.launch_plane(123, 45)
    assert m.position() == (123, 45)
    assert m.type is MissileType.PLANE
    assert m.y_dest == display.height


def test_collision_only_while_exploding(display):
    m = Missile(display, MissileType.PLAYER)
    m.launch_player(display.width // 2, 100)
    m.tick()
    x, y = m.position()
    assert not m.is_colliding(x, y)
    m.explode()
    m.tick()
    x, y = m.position()
    assert m.is_colliding(x, y)
    assert not m.is_colliding(x + 100, y)