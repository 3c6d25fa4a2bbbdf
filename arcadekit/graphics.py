"""Drawing of the tic-tac-toe grid, marks, highlight box and message line."""

from __future__ import annotations

from .board import DEFAULT_COLS, DEFAULT_ROWS

MESSAGE_FONT_SIZE = 1
SMALL_CELL = 35


class BoardGraphics:
    """Lays out a rows x cols grid above a one-line message area."""

    def __init__(self, display, rows=DEFAULT_ROWS, cols=DEFAULT_COLS):
        if rows <= 0 or cols <= 0:
            raise ValueError("rows and cols must be positive")
        self.display = display
        self.rows = rows
        self.cols = cols

        char_w = display.char_width * MESSAGE_FONT_SIZE
        char_h = display.char_height * MESSAGE_FONT_SIZE
        self.message_x = char_w
        self.message_h = char_h
        self.message_y = display.height - char_h
        self.message_w = display.width - 2 * char_w

        self.view_x = char_w
        self.view_y = 0
        self.view_w = display.width - 2 * char_w
        self.view_h = display.height - char_h

        self.cell_w = self.view_w // cols
        self.cell_h = self.view_h // rows
        if self.cell_w <= 0 or self.cell_h <= 0:
            raise ValueError("grid is too fine for the display")

        if self.cell_w < SMALL_CELL or self.cell_h < SMALL_CELL:
            self.high_margin, mark_margin = 2, 4
        else:
            self.high_margin, mark_margin = 6, 12
        side = self.cell_h if display.height < display.width else self.cell_w
        self.mark_size = side - 2 * mark_margin

    def _origin(self, r, c):
        return self.view_x + c * self.cell_w, self.view_y + r * self.cell_h

    def _centre(self, r, c):
        x, y = self._origin(r, c)
        return x + self.cell_w // 2, y + self.cell_h // 2

    def draw_grid(self, color):
        """Draw the lines separating the cells."""
        for i in range(1, self.cols):
            self.display.draw_vline(self.view_x + i * self.cell_w, self.view_y, self.view_h, color)
        for i in range(1, self.rows):
            self.display.draw_hline(self.view_x, self.view_y + i * self.cell_h, self.view_w, color)

    def draw_message(self, text, color, bg):
        """Replace the message line with text."""
        d = self.display
        d.fill_rect(self.message_x, self.message_y, self.message_w, self.message_h, bg)
        d.set_font_size(MESSAGE_FONT_SIZE)
        d.draw_string(self.message_x, self.message_y, text, color)

    def draw_x(self, r, c, color):
        """Draw an X in the cell at row r, column c."""
        xc, yc = self._centre(r, c)
        h = self.mark_size // 2
        self.display.draw_line(xc - h, yc - h, xc + h, yc + h, color)
        self.display.draw_line(xc - h, yc + h, xc + h, yc - h, color)

    def draw_o(self, r, c, color):
        """Draw an O in the cell at row r, column c."""
        xc, yc = self._centre(r, c)
        self.display.draw_circle(xc, yc, self.mark_size // 2, color)

    def draw_highlight(self, r, c, color):
        """Draw a box inside the cell at row r, column c."""
        x, y = self._origin(r, c)
        m = self.high_margin
        self.display.draw_rect(
            x + m, y + m, self.cell_w - 2 * m + 1, self.cell_h - 2 * m + 1, color
        )