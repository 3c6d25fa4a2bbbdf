"""Missile Command game controller: enemy, player and plane missiles plus a plane."""

from __future__ import annotations

import random

from .missile import (
    MAX_ENEMY_MISSILES,
    MAX_PLANE_MISSILES,
    MAX_PLAYER_MISSILES,
    Missile,
    MissileType,
)
from .plane import Plane

CURSOR_SIZE = 7


def draw_cursor(display, x, y, color, size=CURSOR_SIZE):
    """Draw a plus-shaped cursor centred on (x, y)."""
    if size <= 0:
        raise ValueError("cursor size must be positive")
    half = size >> 1
    display.draw_hline(x - half, y, size, color)
    display.draw_vline(x, y - half, size, color)


class MissileCommand:
    """Owns every missile and the plane and advances them once per game tick."""

    def __init__(self, display, rng=None):
        self.display = display
        self.rng = rng if rng is not None else random.Random()
        self.enemy_missiles = [
            Missile(display, MissileType.ENEMY) for _ in range(MAX_ENEMY_MISSILES)
        ]
        self.player_missiles = [
            Missile(display, MissileType.PLAYER) for _ in range(MAX_PLAYER_MISSILES)
        ]
        plane_missiles = [
            Missile(display, MissileType.PLANE) for _ in range(MAX_PLANE_MISSILES)
        ]
        self.plane_missile = plane_missiles[0]
        self.missiles = self.enemy_missiles + self.player_missiles + plane_missiles
        self.plane = Plane(self.plane_missile, display)

    def tick(self):
        """Tick all missiles and the plane, then relaunch idle missiles."""
        for missile in self.missiles:
            missile.tick()
        self.plane.tick()

        for missile in self.enemy_missiles:
            if missile.is_idle():
                missile.launch_enemy()

        for missile in self.player_missiles:
            if missile.is_idle():
                missile.launch_player(
                    self.rng.randrange(self.display.width),
                    self.rng.randrange(self.display.height),
                )