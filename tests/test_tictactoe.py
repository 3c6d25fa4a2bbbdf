import pytest

from arcadekit.board import Board, Mark
from arcadekit.com import loopback_pair
from arcadekit.display import BOARD_BACK_COLOR, BOARD_HIGHLIGHT_COLOR, RecordingDisplay
from arcadekit.graphics import BoardGraphics
from arcadekit.nav import Navigator
from arcadekit.tictactoe import (
    MSG_DRAW,
    MSG_NEW_GAME,
    MSG_NEXT_PLAYER_O,
    MSG_WIN_X,
    Buttons,
    GameState,
    TicTacToe,
    decode_location,
    encode_location,
)


class StillJoystick:
    def __init__(self):
        self.dx = 0
        self.dy = 0

    def displacement(self):
        return self.dx, self.dy


@pytest.fixture
def setup():
    display = RecordingDisplay()
    board = Board()
    graphics = BoardGraphics(display, 3, 3)
    joystick = StillJoystick()
    nav = Navigator(joystick, 40, 3, 3, 2048)
    local, remote = loopback_pair()
    buttons = Buttons()
    game = TicTacToe(board, graphics, nav, local, buttons)
    return game, board, display, remote, buttons, joystick


def started(game):
    game.tick()
    game.tick()
    return game


def messages(display):
    return [args[2] for args in display.calls_named("draw_string")]


def remote_move(game, remote, r, c):
    remote.write(bytes([encode_location(r, c)]))
    game.tick()
    game.tick()


def test_location_encoding_round_trip():
    assert encode_location(1, 2) == 0x12
    for r in range(16):
        for c in range(16):
            assert decode_location(encode_location(r, c)) == (r, c)


def test_start_sequence(setup):
    game, board, display, *_ = setup
    assert game.state() is GameState.INIT
    game.tick()
    assert game.state() is GameState.NEW_GAME
    assert display.calls_named("fill_screen") == [(BOARD_BACK_COLOR,)]
    game.tick()
    assert game.state() is GameState.WAIT_MARK
    assert messages(display) == [MSG_NEW_GAME]
    assert game.current_turn() is Mark.X


def test_idle_stays_waiting(setup):
    game, board, *_ = setup
    started(game)
    game.tick()
    assert game.state() is GameState.WAIT_MARK
    assert board.mark_count() == 0


def test_a_press_marks_centre_and_sends(setup):
    game, board, display, remote, buttons, _ = setup
    started(game)
    buttons.a = True
    game.tick()
    assert game.state() is GameState.MARK
    assert board.get(1, 1) is Mark.X
    assert remote.read(1) == bytes([encode_location(1, 1)])
    assert len(display.calls_named("draw_line")) == 2
    buttons.a = False
    game.tick()
    assert game.state() is GameState.WAIT_MARK
    assert game.current_turn() is Mark.O
    assert messages(display)[-1] == MSG_NEXT_PLAYER_O


def test_a_press_on_occupied_cell_is_ignored(setup):
    game, board, display, remote, buttons, _ = setup
    started(game)
    remote_move(game, remote, 1, 1)
    buttons.a = True
    game.tick()
    assert game.state() is GameState.WAIT_MARK
    assert board.mark_count() == 1
    assert remote.read(1) == b""


def test_received_location_marks_board(setup):
    game, board, display, remote, *_ = setup
    started(game)
    remote.write(bytes([encode_location(0, 2)]))
    game.tick()
    assert board.get(0, 2) is Mark.X
    game.tick()
    remote_move(game, remote, 2, 0)
    assert board.get(2, 0) is Mark.O
    assert len(display.calls_named("draw_circle")) == 1


def test_off_board_received_is_invalid(setup):
    game, board, _, remote, *_ = setup
    started(game)
    remote.write(bytes([encode_location(5, 5)]))
    game.tick()
    assert game.state() is GameState.WAIT_MARK
    assert board.mark_count() == 0


def test_win_and_restart(setup):
    game, board, display, remote, buttons, _ = setup
    started(game)
    for r, c in [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)]:
        remote_move(game, remote, r, c)
    assert game.state() is GameState.WAIT_RESTART
    assert messages(display)[-1] == MSG_WIN_X
    game.tick()
    assert game.state() is GameState.WAIT_RESTART
    remote.write(b"\x00\x01")
    buttons.start = True
    game.tick()
    assert game.state() is GameState.NEW_GAME
    assert board.mark_count() == 0
    assert game.current_turn() is Mark.X
    buttons.start = False
    game.tick()
    game.tick()
    assert board.mark_count() == 0


def test_draw(setup):
    game, board, display, remote, *_ = setup
    started(game)
    moves = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]
    for r, c in moves:
        remote_move(game, remote, r, c)
    assert game.state() is GameState.WAIT_RESTART
    assert board.is_full()
    assert messages(display)[-1] == MSG_DRAW


def test_frame_highlights_navigator_location(setup):
    game, board, display, remote, buttons, joystick = setup
    game.frame()
    rects = display.calls_named("draw_rect")
    assert rects[-1][4] == BOARD_HIGHLIGHT_COLOR
    display.clear_calls()
    joystick.dx = 2000
    game.frame()
    colors = [args[4] for args in display.calls_named("draw_rect")]
    assert colors == [BOARD_BACK_COLOR, BOARD_HIGHLIGHT_COLOR]
    assert game.navigator.location() == (1, 2)


def test_works_without_channel():
    display = RecordingDisplay()
    board = Board()
    nav = Navigator(StillJoystick(), 40, 3, 3, 2048)
    buttons = Buttons(a=True)
    game = TicTacToe(board, BoardGraphics(display), nav, None, buttons)
    started(game)
    game.tick()
    assert board.get(1, 1) is Mark.X