"""Two-player tic-tac-toe state machine with marks exchanged over a channel."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from .board import Mark
from .display import (
    BOARD_BACK_COLOR,
    BOARD_GRID_COLOR,
    BOARD_HIGHLIGHT_COLOR,
    BOARD_MARK_COLOR,
    BOARD_MESSAGE_COLOR,
)

PERIOD_MS = 40

MSG_NEW_GAME = "Welcome to Tic-Tac-Toe! Player X will begin."
MSG_NEXT_PLAYER_X = "It is now Player X's turn."
MSG_NEXT_PLAYER_O = "It is now Player O's turn."
MSG_WIN_X = "Player X wins!"
MSG_WIN_O = "Player O wins!"
MSG_DRAW = "The game ends in a draw."

_SHIFT = 4
_ROW_MASK = 0xF0
_COL_MASK = 0x0F


def encode_location(r, c):
    """Pack a location into one byte: row in the high nibble, column in the low."""
    return ((r << _SHIFT) + (c & _COL_MASK)) & 0xFF


def decode_location(byte):
    """Unpack a byte made by encode_location."""
    return (byte & _ROW_MASK) >> _SHIFT, byte & _COL_MASK


@dataclass
class Buttons:
    """Current pressed state of the handheld's buttons."""

    a: bool = False
    b: bool = False
    menu: bool = False
    option: bool = False
    select: bool = False
    start: bool = False


class GameState(Enum):
    INIT = auto()
    NEW_GAME = auto()
    WAIT_MARK = auto()
    MARK = auto()
    WAIT_RESTART = auto()


class TicTacToe:
    """Game controller ticked once per timer period."""

    def __init__(self, board, graphics, navigator, channel=None, buttons=None):
        self.board = board
        self.graphics = graphics
        self.navigator = navigator
        self.channel = channel
        self.buttons = buttons if buttons is not None else Buttons()
        self._state = GameState.INIT
        self._turn = Mark.X
        self._r = 0
        self._c = 0
        self._received = None
        self._highlighted = None

    def state(self):
        """Current state of the game."""
        return self._state

    def current_turn(self):
        """Mark of the player whose turn it is."""
        return self._turn

    def _message(self, text):
        self.graphics.draw_message(text, BOARD_MESSAGE_COLOR, BOARD_BACK_COLOR)

    def _read_byte(self):
        if self.channel is None:
            return None
        data = self.channel.read(1)
        return data[0] if data else None

    def _try_mark(self):
        if self._received is None:
            self._r, self._c = self.navigator.location()
        else:
            self._r, self._c = self._received
        try:
            return self.board.set(self._r, self._c, self._turn)
        except IndexError:
            return False

    def _wait_mark(self):
        if self.buttons.a and self._try_mark():
            if self.channel is not None:
                self.channel.write(bytes([encode_location(self._r, self._c)]))
            return GameState.MARK
        byte = self._read_byte()
        if byte is not None:
            self._received = decode_location(byte)
            if self._try_mark():
                return GameState.MARK
        return GameState.WAIT_MARK

    def _game_over(self):
        if self.board.winner(self._turn):
            self._message(MSG_WIN_X if self._turn is Mark.X else MSG_WIN_O)
            return True
        if self.board.is_full():
            self._message(MSG_DRAW)
            return True
        return False

    def _start_new_game(self):
        while self._read_byte() is not None:
            pass
        self.board.clear()
        self.graphics.display.fill_screen(BOARD_BACK_COLOR)
        self.graphics.draw_grid(BOARD_GRID_COLOR)
        self._turn = Mark.X
        self.navigator.set_location(self.board.rows // 2, self.board.cols // 2)

    def _process_mark(self):
        if self._turn is Mark.X:
            self.graphics.draw_x(self._r, self._c, BOARD_MARK_COLOR)
        else:
            self.graphics.draw_o(self._r, self._c, BOARD_MARK_COLOR)
        self._received = None

    def tick(self):
        """Advance the state machine by one step."""
        state = self._state
        if state is GameState.INIT:
            state = GameState.NEW_GAME
        elif state is GameState.NEW_GAME:
            state = GameState.WAIT_MARK
            self._message(MSG_NEW_GAME)
        elif state is GameState.WAIT_MARK:
            state = self._wait_mark()
        elif state is GameState.MARK:
            if self._game_over():
                state = GameState.WAIT_RESTART
            else:
                state = GameState.WAIT_MARK
                self._turn = Mark.O if self._turn is Mark.X else Mark.X
                self._message(MSG_NEXT_PLAYER_X if self._turn is Mark.X else MSG_NEXT_PLAYER_O)
        elif state is GameState.WAIT_RESTART and self.buttons.start:
            state = GameState.NEW_GAME
        self._state = state

        if state is GameState.NEW_GAME:
            self._start_new_game()
        elif state is GameState.MARK:
            self._process_mark()

    def frame(self):
        """Run one period: tick the game and navigator and redraw the highlight."""
        self.tick()
        self.navigator.tick()
        loc = self.navigator.location()
        if loc != self._highlighted:
            if self._highlighted is not None:
                self.graphics.draw_highlight(*self._highlighted, BOARD_BACK_COLOR)
            self._highlighted = loc
        self.graphics.draw_highlight(*loc, BOARD_HIGHLIGHT_COLOR)