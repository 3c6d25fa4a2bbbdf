"""Grid navigator moved by joystick displacement."""

from __future__ import annotations

from typing import Protocol

DEFAULT_THRESHOLD = 0.75
CELLS_PER_SECOND = 3.0


class Joystick(Protocol):
    """Source of joystick displacement from centre in raw units."""

    def displacement(self) -> tuple[int, int]: ...


def _clip(value, lo, hi):
    return lo if value < lo else hi if value > hi else value


class Navigator:
    """Tracks a grid location that follows the joystick each tick."""

    def __init__(self, joystick, period_ms, rows, cols, max_displacement):
        if period_ms <= 0:
            raise ValueError("update period must be positive")
        if rows <= 0 or cols <= 0 or max_displacement <= 0:
            raise ValueError("grid size and displacement must be positive")
        self.joystick = joystick
        self.period_ms = period_ms
        self.rows = rows
        self.cols = cols
        self.max_displacement = max_displacement
        self._last_move = False
        self.set_sensitivity(CELLS_PER_SECOND / cols)
        self.set_threshold(DEFAULT_THRESHOLD)
        self._row = float(rows // 2)
        self._col = float(cols // 2)

    def tick(self):
        """Move the location according to the current joystick displacement."""
        dx, dy = self.joystick.displacement()
        if abs(dx) < self.threshold and abs(dy) < self.threshold:
            self._row = float(int(self._row + 0.5))
            self._col = float(int(self._col + 0.5))
            self._last_move = False
            return
        if self._last_move:
            self._row += dy * self._factor
            self._col += dx * self._factor
        else:
            if abs(dy) >= self.threshold:
                self._row += -0.5 if dy < 0 else 0.5
            if abs(dx) >= self.threshold:
                self._col += -0.5 if dx < 0 else 0.5
        self._row = _clip(self._row, 0, self.rows - 1)
        self._col = _clip(self._col, 0, self.cols - 1)
        self._last_move = True

    def set_sensitivity(self, sens):
        """Set speed in grid widths per second at full displacement."""
        rate = sens * self.cols
        self._factor = rate / self.max_displacement * self.period_ms / 1000

    def set_threshold(self, thr):
        """Set the displacement needed to move, as a fraction of the maximum."""
        self.threshold = int(thr * self.max_displacement)

    def location(self):
        """Return the (row, column) grid location."""
        return int(self._row + 0.5), int(self._col + 0.5)

    def set_location(self, r, c):
        """Move to a location, clipped to the grid."""
        self._row = float(_clip(r, 0, self.rows - 1))
        self._col = float(_clip(c, 0, self.cols - 1))