# arcadekit

Small games and gadgets built as tick-driven state machines. Every drawing
operation goes through a `Display` object, so the game logic can be driven
by any screen that implements the interface, or inspected in tests with
`RecordingDisplay`.

## Modules

- `arcadekit.display`: the abstract `Display` interface, the `rgb565`
  helper that packs 8-bit red, green and blue into a 16-bit value (and
  raises `ValueError` for components outside 0–255), a few named colours,
  and `RecordingDisplay`, which stores every call as a `DrawCall` instead
  of drawing. Use `calls_named(name)` to get the argument tuples of one
  kind of call and `clear_calls()` to forget them.
- `arcadekit.watch`: a stopwatch counting hundredths of a second.
  - `format_ticks(ticks)` renders ticks as `MM:SS.hh`, wrapping after
    99:59.99.
  - `Stopwatch.on_alarm(a_pressed, b_pressed, start_pressed)` is meant to
    be called at 100 Hz: A starts it, B stops it, START stops and resets
    it; it returns the tick count.
  - `WatchFace(display)` sizes the digits to the display; `draw_face()`
    draws the rounded outline and the `MIN`/`SEC` labels, and
    `update(ticks)` redraws only the digits that changed.
- `arcadekit.board`: `Board(rows, cols, n)` holds `Mark.X`, `Mark.O` or
  `Mark.NONE` in each cell. `set` places a mark only on an empty cell and
  returns whether it did; `winner(mark)` looks for `n` in a row
  horizontally, vertically or diagonally; `mark_count()` and `is_full()`
  detect a draw. Locations off the board raise `IndexError`.
- `arcadekit.nav`: `Navigator(joystick, period_ms, rows, cols,
  max_displacement)` moves a cell cursor over a grid. The joystick is any
  object with a `displacement()` method returning `(dx, dy)` (the
  `Joystick` protocol). The first move past the threshold bumps half a
  cell; held moves scale with `set_sensitivity`; releasing snaps to the
  nearest cell. `set_threshold`, `location()` and `set_location(r, c)`
  complete the interface.
- `arcadekit.graphics`: `BoardGraphics(display, rows, cols)` draws the
  grid, X and O marks, a highlight box and a one-line message area at the
  bottom of the screen.
- `arcadekit.com`: non-blocking byte channels. `loopback_pair()` returns
  two connected in-memory `LoopbackChannel`s (a single one echoes to
  itself); `SerialChannel(port, baudrate)` opens a serial port at 8N1
  with reads that never wait. Channels are context managers and raise
  `ChannelClosedError` once closed.
- `arcadekit.tictactoe`: `TicTacToe(board, graphics, navigator, channel,
  buttons)` is the game state machine (`GameState`). Pressing A on a free
  cell places the current player's mark and sends it to the other side as
  one byte, row in the high nibble and column in the low nibble
  (`encode_location` / `decode_location`); a byte arriving on the channel
  places a mark the same way. After a win or draw, START begins a new
  game. `tick()` advances the game; `frame()` also ticks the navigator and
  redraws the highlight. Button state is read from the `Buttons`
  dataclass, which the caller updates.
- `arcadekit.missile`: `Missile(display, missile_type)` with
  `launch_player`, `launch_enemy`, `launch_plane`, `explode`, `tick` and
  the status checks `is_moving`, `is_exploding`, `is_idle`,
  `is_impacted` and `is_colliding(x, y)`. Missiles fly along a straight
  line, impact at their destination, then grow and shrink an explosion.
  Enemy and plane launches draw their random points from a generator
  seeded with a fixed value, so every such launch uses the same points.
- `arcadekit.plane`: `Plane(missile, display)` waits about four seconds,
  flies from the right edge to the left one pixel per tick, launches its
  missile halfway across, and returns to waiting when it reaches the edge
  or after `explode()`.
- `arcadekit.missile_command`: `MissileCommand(display, rng)` owns seven
  enemy missiles, four player missiles, one plane missile and the plane;
  `tick()` ticks them all and relaunches idle enemy and player missiles,
  player missiles toward random points. `draw_cursor` draws a plus-shaped
  cursor.

## Example

```python
from arcadekit.display import RecordingDisplay
from arcadekit.watch import Stopwatch, WatchFace, format_ticks

print(format_ticks(12345))  # 02:03.45

display = RecordingDisplay(320, 240, 5, 8)
face = WatchFace(display)
face.draw_face()

watch = Stopwatch()
for _ in range(150):
    face.update(watch.on_alarm(True, False, False))  # A held: running
print(display.calls_named("draw_char")[-1])
```

```python
from arcadekit.board import Board, Mark

board = Board(3, 3, 3)
for c in range(3):
    board.set(0, c, Mark.X)
print(board.winner(Mark.X), board.mark_count(), board.is_full())
```

## What it does not do

- There is no command to run and no window or screen backend: the only
  `Display` in the package is `RecordingDisplay`. Showing the games needs
  a `Display` implementation of your own.
- There is no joystick or button driver; supply a `Joystick` object and
  update `Buttons` yourself, and call `tick()`/`frame()` on your own
  timer.
- `MissileCommand` does not read buttons, detect collisions, keep score or
  play sounds; player missiles are launched automatically at random
  targets.

## Tests

The test suite uses pytest and is installed with the `test` extra.