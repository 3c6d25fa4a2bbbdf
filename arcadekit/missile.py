"""Missile state machine: flight along a line, explosion and impact."""

from __future__ import annotations

import math
import random
from enum import Enum, auto

from .display import BLUE, GREEN, RED, rgb565

GAME_TIMER_PERIOD = 40.0e-3

MAX_PLAYER_MISSILES = 4
MAX_ENEMY_MISSILES = 7
MAX_PLANE_MISSILES = 1
MAX_TOTAL_MISSILES = MAX_ENEMY_MISSILES + MAX_PLAYER_MISSILES + MAX_PLANE_MISSILES

ENEMY_MISSILE_DISTANCE_PER_SECOND = 35
ENEMY_MISSILE_DISTANCE_PER_TICK = ENEMY_MISSILE_DISTANCE_PER_SECOND * GAME_TIMER_PERIOD

PLAYER_MISSILE_DISTANCE_PER_SECOND = 350
PLAYER_MISSILE_DISTANCE_PER_TICK = PLAYER_MISSILE_DISTANCE_PER_SECOND * GAME_TIMER_PERIOD

EXPLOSION_RADIUS_CHANGE_PER_SECOND = 30
EXPLOSION_RADIUS_CHANGE_PER_TICK = EXPLOSION_RADIUS_CHANGE_PER_SECOND * GAME_TIMER_PERIOD
EXPLOSION_MAX_RADIUS = 25

COLOR_BACKGROUND = rgb565(0, 4, 16)
COLOR_ENEMY_MISSILE = RED
COLOR_PLAYER_MISSILE = GREEN
COLOR_PLANE_MISSILE = BLUE

RAND_SEED = 42


class MissileType(Enum):
    PLAYER = 0
    ENEMY = 1
    PLANE = 2


class MissileState(Enum):
    INIT = auto()
    IDLE = auto()
    MOVE = auto()
    EXPLODE_GROW = auto()
    EXPLODE_SHRINK = auto()
    IMPACT = auto()


_COLORS = {
    MissileType.PLAYER: COLOR_PLAYER_MISSILE,
    MissileType.ENEMY: COLOR_ENEMY_MISSILE,
    MissileType.PLANE: COLOR_PLANE_MISSILE,
}


class Missile:
    """One missile; starts idle and does nothing until launched."""

    def __init__(self, display, missile_type=MissileType.ENEMY):
        self.display = display
        self.type = MissileType(missile_type)
        self.state = MissileState.IDLE
        self.x_origin = 0
        self.y_origin = 0
        self.x_dest = 0
        self.y_dest = 0
        self.x_current = 0
        self.y_current = 0
        self.total_length = 0.0
        self.length = 0.0
        self.radius = 0.0
        self._launch_pending = False
        self._explode_pending = False

    @property
    def color(self):
        return _COLORS.get(self.type, COLOR_BACKGROUND)

    # Launching

    def launch_player(self, x_dest, y_dest):
        """Fly from the firing location nearest x_dest to (x_dest, y_dest)."""
        w = self.display.width
        if x_dest < w * 3 // 8:
            self.x_origin = w // 4
        elif x_dest < w * 5 // 8:
            self.x_origin = w // 2
        else:
            self.x_origin = w * 3 // 4
        self.y_origin = self.display.height
        self.x_dest = x_dest
        self.y_dest = y_dest
        self._finalize_launch(MissileType.PLAYER)

    def launch_enemy(self):
        """Fly from a random point on the top edge to one on the bottom edge."""
        rng = random.Random(RAND_SEED)
        self.x_origin = rng.randrange(self.display.width)
        self.y_origin = 0
        self.x_dest = rng.randrange(self.display.width)
        self.y_dest = self.display.height
        self._finalize_launch(MissileType.ENEMY)

    def launch_plane(self, x_orig, y_orig):
        """Fly from the plane's location to a random point on the bottom edge."""
        rng = random.Random(RAND_SEED)
        self.x_origin = x_orig
        self.y_origin = y_orig
        self.x_dest = rng.randrange(self.display.width)
        self.y_dest = self.display.height
        self._finalize_launch(MissileType.PLANE)

    def _finalize_launch(self, missile_type):
        self.type = missile_type
        self.length = 0.0
        self.radius = 0.0
        self._launch_pending = True
        self._explode_pending = False
        self.total_length = math.hypot(
            self.x_dest - self.x_origin, self.y_dest - self.y_origin
        )
        self.x_current = self.x_origin
        self.y_current = self.y_origin

    # Control

    def explode(self):
        """Detonate the missile on its next tick if it is moving."""
        self._explode_pending = True

    def tick(self):
        """Advance the state machine by one step."""
        state = self.state
        if state is MissileState.INIT:
            self._launch_pending = False
            state = MissileState.IDLE
        elif state is MissileState.IDLE:
            if self._launch_pending:
                self._launch_pending = False
                state = MissileState.MOVE
        elif state is MissileState.MOVE:
            if self._explode_pending:
                state = MissileState.EXPLODE_GROW
            elif self.length >= self.total_length:
                state = MissileState.IMPACT
        elif state is MissileState.EXPLODE_GROW:
            if self.radius >= EXPLOSION_MAX_RADIUS:
                state = MissileState.EXPLODE_SHRINK
        elif state is MissileState.EXPLODE_SHRINK:
            if self.radius <= 0:
                state = MissileState.IDLE
        elif state is MissileState.IMPACT:
            state = MissileState.EXPLODE_GROW
        self.state = state

        if state is MissileState.MOVE:
            self._move()
        elif state is MissileState.EXPLODE_GROW:
            self.radius += EXPLOSION_RADIUS_CHANGE_PER_TICK
            self._draw_explosion()
        elif state is MissileState.EXPLODE_SHRINK:
            self.radius -= EXPLOSION_RADIUS_CHANGE_PER_TICK
            self._draw_explosion()

    def _move(self):
        speed = (
            PLAYER_MISSILE_DISTANCE_PER_TICK
            if self.type is MissileType.PLAYER
            else ENEMY_MISSILE_DISTANCE_PER_TICK
        )
        self.length += speed
        if self.total_length > 0:
            fraction = min(1.0, self.length / self.total_length)
        else:
            fraction = 1.0
        self.x_current = int(self.x_origin + fraction * (self.x_dest - self.x_origin))
        self.y_current = int(self.y_origin + fraction * (self.y_dest - self.y_origin))
        self.display.draw_line(
            self.x_origin, self.y_origin, self.x_current, self.y_current, self.color
        )

    def _draw_explosion(self):
        self.display.fill_circle(
            self.x_current, self.y_current, max(0, int(self.radius)), self.color
        )

    # Status

    def position(self):
        """Return the current (x, y) position."""
        return self.x_current, self.y_current

    def is_moving(self):
        return self.state is MissileState.MOVE

    def is_exploding(self):
        return self.state in (MissileState.EXPLODE_GROW, MissileState.EXPLODE_SHRINK)

    def is_idle(self):
        return self.state is MissileState.IDLE

    def is_impacted(self):
        return self.state is MissileState.IMPACT

    def is_colliding(self, x, y):
        """True if (x, y) lies within this missile's explosion."""
        if not self.is_exploding():
            return False
        dx = self.x_current - x
        dy = self.y_current - y
        return dx * dx + dy * dy <= self.radius * self.radius