# lofz

Lights Out, with a twist: a 4×4 board of lights, an extra "offset" cell off to
the side, and an evil Flipper opponent who flips tiles after your moves. Turn
every board tile dark to win. If every board tile ends up lit, Flipper wins.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
lofz
```

The game is driven by key presses typed as letters, one character per key.
Type a line of letters and press Enter; the screen is printed after each line.
Whitespace is ignored and `q` quits.

| Character | Key   |
|-----------|-------|
| `U`       | Up    |
| `D`       | Down  |
| `L`       | Left  |
| `R`       | Right |
| `O`       | OK    |
| `B`       | Back  |

After the loading screen, press OK to start the intro crawl and OK again to
reach the board. Move with the direction keys and press OK to flip the
selected tile and its neighbours. The offset cell, shown to the right of the
top row, is reached by pressing Right from the right edge; flipping it also
flips the four centre tiles. After each of your moves Flipper announces itself
and flips the lit tiles nearest your cursor. Press Back twice in a row to leave.

Options:

- `--keys KEYS` — play the given key letters without waiting for input, then
  print the final screen.
- `--seed N` — seed Flipper's random choices, for repeatable games.
- `--leaderboard PATH` — leaderboard file (default `lofz_leaderboard.txt` in
  the current directory). It is written when you win and when you leave, and
  keeps the ten best results as `wins:flips` lines.

Time in the command runs on a simulated clock that moves 25 ms per step, so
animations and waits pass without delay.

There are hidden key sequences on the credits screen as well; the game hints at
them if you look around.

## Using it from Python

```python
import random

from lofz.board import Board, Key, move_cursor
from lofz.game import Game, State
from lofz.render import render

board = Board()          # all off except the offset block
board.toggle(5)          # flips cell 5 and its four neighbours
print(board.is_solved(), move_cursor(3, Key.RIGHT))   # False 16

now = [0]
game = Game(clock=lambda: now[0], rng=random.Random(1))
now[0] = 8000
game.tick()              # loading finishes
game.press(Key.OK)       # on to the intro crawl
print(game.state is State.INTRO_CRAWL)
print(render(game))
```

- `lofz.board` — `Board` (cells, `toggle`, `is_solved`, `is_lost`,
  `nearest_lit`, ...), `Key`, and `move_cursor`.
- `lofz.game` — `Game`, the state machine driven by `press(key)` and `tick()`,
  with the `State` enum. It takes an optional millisecond `clock`, a
  `random.Random`, and a `leaderboard` or `leaderboard_path`.
- `lofz.leaderboard` — `Leaderboard` and `Entry`, with `insert`, `load`,
  `save`, `loads` and `dumps`.
- `lofz.layout` — crawl positions, popup scrolling and the score label.
- `lofz.texts` — the crawl texts, Flipper's phrases, secret codes and the
  mascot bitmap (`mascot_pixels()`).
- `lofz.render` — `render(game)` and `render_board(game)` draw the screen as
  plain text.
- `lofz.cli` — `main`, `run_script` and `key_from_char`.

## What it does not do

The screen is plain text: there is no graphical display, and the mascot is
only marked beside the "Flipper" label when it bounces. There is no sound;
pressing Left three times quickly toggles `Game.audio_enabled`, but nothing
plays either way.