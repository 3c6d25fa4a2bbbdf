"""Enemy plane that crosses the screen and fires one missile."""

from __future__ import annotations

from enum import Enum, auto

from .display import WHITE
from .missile import GAME_TIMER_PERIOD

PLANE_IDLE_TIME_SECONDS = 4.0
PLANE_IDLE_TIME_TICKS = round(PLANE_IDLE_TIME_SECONDS / GAME_TIMER_PERIOD)

PLANE_WIDTH = 20
PLANE_HEIGHT = 10
COLOR_PLANE = WHITE

LEFT_BOUNDARY = 0


class _PlaneState(Enum):
    INIT = auto()
    IDLE = auto()
    FLY = auto()


class Plane:
    """Flies right to left, launching its missile halfway across."""

    def __init__(self, missile, display):
        self.missile = missile
        self.display = display
        self._state = _PlaneState.INIT
        self._reset_position()
        self._explode_pending = False
        self._idle_ticks = PLANE_IDLE_TIME_TICKS

    def _reset_position(self):
        self.x = self.display.width
        self.y = self.display.height // 4

    def explode(self):
        """Bring the plane down on its next tick."""
        self._explode_pending = True

    def tick(self):
        """Advance the state machine by one step."""
        state = self._state
        if state is _PlaneState.INIT:
            state = _PlaneState.IDLE
        elif state is _PlaneState.IDLE:
            if self._idle_ticks >= PLANE_IDLE_TIME_TICKS:
                state = _PlaneState.FLY
        elif state is _PlaneState.FLY:
            if self._explode_pending or self.x <= LEFT_BOUNDARY:
                self._idle_ticks = 0
                self._explode_pending = False
                self._reset_position()
                state = _PlaneState.IDLE
        self._state = state

        if state is _PlaneState.IDLE:
            self._idle_ticks += 1
        elif state is _PlaneState.FLY:
            self.x -= 1
            half = PLANE_HEIGHT // 2
            self.display.draw_triangle(
                self.x, self.y,
                self.x + PLANE_WIDTH, self.y + half,
                self.x + PLANE_WIDTH, self.y - half,
                COLOR_PLANE,
            )
            if self.x == self.display.width // 2:
                self.missile.launch_plane(self.x, self.y)

    def position(self):
        """Return the plane's (x, y) nose position."""
        return self.x, self.y

    def is_flying(self):
        return self._state is _PlaneState.FLY