"""Stopwatch counting hundredths of a second and its on-screen face."""

from __future__ import annotations

from .display import BLACK, WHITE, YELLOW, rgb565

TICKS_PER_SECOND = 100
TICK_PERIOD_US = 10_000

IN_MARGIN = 30
OUT_MARGIN = 8
CLOCK_CHARS = 8

CLOCK_COLOR = YELLOW
FACE_COLOR = WHITE
FACE_BACKGROUND = BLACK
ANNOTATION_COLOR = rgb565(50, 220, 40)

_UINT32 = 0xFFFFFFFF
_BLANK_DIGITS = "XX*XX*XX"


def format_ticks(ticks):
    """Render hundredths of a second as 'MM:SS.hh', wrapping at 100 minutes."""
    if ticks < 0:
        raise ValueError("ticks must not be negative")
    t = ticks & _UINT32
    t, hundredths = divmod(t, 10)
    t, tenths = divmod(t, 10)
    t, seconds = divmod(t, 10)
    t, ten_seconds = divmod(t, 6)
    t, minutes = divmod(t, 10)
    ten_minutes = t % 10
    return f"{ten_minutes}{minutes}:{ten_seconds}{seconds}.{tenths}{hundredths}"


class WatchFace:
    """Draws the stopwatch face and redraws only digits that changed."""

    def __init__(self, display):
        self.display = display
        cw, ch = display.char_width, display.char_height
        self.font_size = ((display.width - 2 * IN_MARGIN - 2 * OUT_MARGIN) // CLOCK_CHARS) // cw
        if self.font_size < 1:
            raise ValueError("display too small for the watch face")
        self.char_w = cw * self.font_size
        clock_w = self.char_w * CLOCK_CHARS
        clock_h = ch * self.font_size
        self.clock_x = (display.width - clock_w) // 2
        self.clock_y = (display.height - clock_h) // 2
        expand = self.clock_x - OUT_MARGIN
        self.face = (
            self.clock_x - expand,
            self.clock_y - expand,
            self.clock_x + clock_w - 1 + expand,
            self.clock_y + clock_h - 1 + expand,
        )
        self.face_radius = (self.face[3] - self.face[1] + 1) // 4
        self.annotation_y = self.clock_y + clock_h + ch
        self.minutes_x = self.clock_x + self.char_w * 1 - cw * 3 // 2
        self.seconds_x = self.clock_x + self.char_w * 4 - cw * 3 // 2
        self._last_ticks = _UINT32
        self._last_digits = list(_BLANK_DIGITS)

    def draw_face(self):
        """Clear the display and draw the face outline and labels."""
        d = self.display
        d.fill_screen(FACE_BACKGROUND)
        d.set_font_background(FACE_BACKGROUND)
        d.draw_round_rect2(*self.face, self.face_radius, FACE_COLOR)
        d.set_font_size(1)
        d.draw_string(self.minutes_x, self.annotation_y, "MIN", ANNOTATION_COLOR)
        d.draw_string(self.seconds_x, self.annotation_y, "SEC", ANNOTATION_COLOR)
        d.set_font_size(self.font_size)

    def update(self, ticks):
        """Show the time given in hundredths of a second."""
        ticks &= _UINT32
        if ticks == self._last_ticks:
            return
        self._last_ticks = ticks
        for i, digit in enumerate(format_ticks(ticks)):
            if digit != self._last_digits[i]:
                self.display.draw_char(
                    self.clock_x + i * self.char_w, self.clock_y, digit, CLOCK_COLOR
                )
                self._last_digits[i] = digit


class Stopwatch:
    """Tick counter driven by a periodic alarm and three buttons."""

    def __init__(self):
        self.ticks = 0
        self.running = False

    def on_alarm(self, a_pressed, b_pressed, start_pressed):
        """Handle one timer alarm; A runs, B stops, START stops and resets."""
        if a_pressed:
            self.running = True
        elif b_pressed:
            self.running = False
        elif start_pressed:
            self.running = False
            self.ticks = 0
        if self.running:
            self.ticks += 1
        return self.ticks