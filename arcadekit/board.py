"""Game board of marks with a connect-N winner check."""

from __future__ import annotations

from enum import Enum
from itertools import product

DEFAULT_ROWS = 3
DEFAULT_COLS = 3
DEFAULT_N = 3

_DIRECTIONS = ((0, 1), (1, 0), (-1, 1), (1, 1))


class Mark(Enum):
    NONE = 0
    X = 1
    O = 2


class Board:
    """A rows x cols grid where a player wins with n contiguous marks."""

    def __init__(self, rows=DEFAULT_ROWS, cols=DEFAULT_COLS, n=DEFAULT_N):
        if rows <= 0 or cols <= 0 or n <= 0:
            raise ValueError("rows, cols and n must be positive")
        self.rows = rows
        self.cols = cols
        self.n = n
        self.clear()

    @property
    def spaces(self):
        return self.rows * self.cols

    def clear(self):
        """Remove every mark."""
        self._cells = [[Mark.NONE] * self.cols for _ in range(self.rows)]
        self._count = 0

    def _check(self, r, c):
        if not (0 <= r < self.rows and 0 <= c < self.cols):
            raise IndexError(f"location ({r}, {c}) is off the board")

    def _inside(self, r, c):
        return 0 <= r < self.rows and 0 <= c < self.cols

    def get(self, r, c):
        """Return the mark at a location."""
        self._check(r, c)
        return self._cells[r][c]

    def set(self, r, c, mark):
        """Place a mark if the location is empty; return whether it was placed."""
        self._check(r, c)
        if mark is Mark.NONE:
            raise ValueError("cannot place an empty mark")
        if self._cells[r][c] is not Mark.NONE:
            return False
        self._cells[r][c] = mark
        self._count += 1
        return True

    def winner(self, mark):
        """Return True if mark has n contiguous cells in any line."""
        for r, c in product(range(self.rows), range(self.cols)):
            for dr, dc in _DIRECTIONS:
                if not self._inside(r + dr * (self.n - 1), c + dc * (self.n - 1)):
                    continue
                if all(self._cells[r + dr * k][c + dc * k] is mark for k in range(self.n)):
                    return True
        return False

    def mark_count(self):
        """Number of marks placed."""
        return self._count

    def is_full(self):
        """True when every space holds a mark."""
        return self._count >= self.spaces