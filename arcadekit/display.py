"""Drawing surface interface, colour helpers and a recording display."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

DEFAULT_WIDTH = 320
DEFAULT_HEIGHT = 240
DEFAULT_CHAR_WIDTH = 6
DEFAULT_CHAR_HEIGHT = 8


def rgb565(r, g, b):
    """Pack 8-bit red, green and blue components into a 16-bit RGB565 value."""
    for component in (r, g, b):
        if not 0 <= component <= 255:
            raise ValueError(f"colour component out of range: {component}")
    return ((r & 0xF8) << 8) | ((g & 0xFC) << 3) | (b >> 3)


BLACK = rgb565(0, 0, 0)
WHITE = rgb565(255, 255, 255)
RED = rgb565(255, 0, 0)
GREEN = rgb565(0, 255, 0)
BLUE = rgb565(0, 0, 255)
YELLOW = rgb565(255, 255, 0)
CYAN = rgb565(0, 255, 255)
MAGENTA = rgb565(255, 0, 255)
GRAY = rgb565(128, 128, 128)

# Tic-tac-toe palette.
BOARD_BACK_COLOR = rgb565(0, 16, 42)
BOARD_GRID_COLOR = WHITE
BOARD_MARK_COLOR = YELLOW
BOARD_HIGHLIGHT_COLOR = GREEN
BOARD_MESSAGE_COLOR = CYAN


class Display(ABC):
    """A pixel display with primitive drawing operations and a text font."""

    width: int
    height: int
    char_width: int
    char_height: int

    @abstractmethod
    def fill_screen(self, color): ...

    @abstractmethod
    def fill_rect(self, x, y, w, h, color): ...

    @abstractmethod
    def draw_rect(self, x, y, w, h, color): ...

    @abstractmethod
    def draw_round_rect2(self, x1, y1, x2, y2, r, color): ...

    @abstractmethod
    def draw_line(self, x0, y0, x1, y1, color): ...

    @abstractmethod
    def draw_hline(self, x, y, w, color): ...

    @abstractmethod
    def draw_vline(self, x, y, h, color): ...

    @abstractmethod
    def draw_circle(self, x, y, r, color): ...

    @abstractmethod
    def fill_circle(self, x, y, r, color): ...

    @abstractmethod
    def draw_triangle(self, x0, y0, x1, y1, x2, y2, color): ...

    @abstractmethod
    def draw_char(self, x, y, char, color): ...

    @abstractmethod
    def draw_string(self, x, y, text, color): ...

    @abstractmethod
    def set_font_size(self, size): ...

    @abstractmethod
    def set_font_background(self, color): ...


@dataclass(frozen=True)
class DrawCall:
    """One recorded drawing operation."""

    name: str
    args: tuple[Any, ...]


class RecordingDisplay(Display):
    """A display that records every operation instead of drawing pixels."""

    def __init__(
        self,
        width=DEFAULT_WIDTH,
        height=DEFAULT_HEIGHT,
        char_width=DEFAULT_CHAR_WIDTH,
        char_height=DEFAULT_CHAR_HEIGHT,
    ):
        if min(width, height, char_width, char_height) <= 0:
            raise ValueError("display and font dimensions must be positive")
        self.width = width
        self.height = height
        self.char_width = char_width
        self.char_height = char_height
        self.font_size = 1
        self.font_background = None
        self.calls: list[DrawCall] = []

    def _record(self, name, *args):
        self.calls.append(DrawCall(name, args))

    def fill_screen(self, color):
        self._record("fill_screen", color)

    def fill_rect(self, x, y, w, h, color):
        self._record("fill_rect", x, y, w, h, color)

    def draw_rect(self, x, y, w, h, color):
        self._record("draw_rect", x, y, w, h, color)

    def draw_round_rect2(self, x1, y1, x2, y2, r, color):
        self._record("draw_round_rect2", x1, y1, x2, y2, r, color)

    def draw_line(self, x0, y0, x1, y1, color):
        self._record("draw_line", x0, y0, x1, y1, color)

    def draw_hline(self, x, y, w, color):
        self._record("draw_hline", x, y, w, color)

    def draw_vline(self, x, y, h, color):
        self._record("draw_vline", x, y, h, color)

    def draw_circle(self, x, y, r, color):
        self._record("draw_circle", x, y, r, color)

    def fill_circle(self, x, y, r, color):
        self._record("fill_circle", x, y, r, color)

    def draw_triangle(self, x0, y0, x1, y1, x2, y2, color):
        self._record("draw_triangle", x0, y0, x1, y1, x2, y2, color)

    def draw_char(self, x, y, char, color):
        if len(char) != 1:
            raise ValueError("draw_char takes exactly one character")
        self._record("draw_char", x, y, char, color)

    def draw_string(self, x, y, text, color):
        self._record("draw_string", x, y, text, color)

    def set_font_size(self, size):
        if size < 1:
            raise ValueError(f"font size must be at least 1: {size}")
        self.font_size = size
        self._record("set_font_size", size)

    def set_font_background(self, color):
        self.font_background = color
        self._record("set_font_background", color)

    def calls_named(self, name):
        """Return the argument tuples of every recorded call with this name."""
        return [call.args for call in self.calls if call.name == name]

    def clear_calls(self):
        """Forget all recorded calls."""
        self.calls.clear()