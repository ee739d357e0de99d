"""Command line entry point: play in the terminal or run a key script."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import Iterable, Sequence

from .board import Key
from .game import Game, State
from .leaderboard import DEFAULT_PATH
from .render import render

TICK_MS = 25
MAX_SETTLE_TICKS = 20_000

# States that advance on their own and wait for no key.
_BUSY = frozenset(
    {
        State.LOADING,
        State.INTRO_FADE,
        State.WIN_FADE,
        State.LOST_FADE,
        State.LOST_NULLS,
        State.FLIPPER_POPUP,
        State.FLIPPER_TURN,
        State.EXIT_SCREEN,
    }
)


class _ManualClock:
    """A millisecond clock that only moves when told to."""

    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line options."""
    parser = argparse.ArgumentParser(
        prog="lofz", description="Lights-out against Flipper."
    )
    parser.add_argument(
        "--keys",
        help="play these keys (U, D, L, R, O, B) and print the final screen",
    )
    parser.add_argument("--seed", type=int, help="seed for Flipper's choices")
    parser.add_argument(
        "--leaderboard",
        default=str(DEFAULT_PATH),
        help="leaderboard file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def key_from_char(ch: str) -> Key:
    """The key named by one letter, case-insensitive."""
    if len(ch) != 1:
        raise ValueError(f"expected one character, got {ch!r}")
    try:
        return Key(ch.upper())
    except ValueError:
        raise ValueError(f"unknown key {ch!r}") from None


def _step(game: Game) -> None:
    advance = getattr(game.clock, "advance", None)
    if advance is not None:
        advance(TICK_MS)
    else:
        time.sleep(TICK_MS / 1000)
    game.tick()


def _settle(game: Game) -> None:
    for _ in range(MAX_SETTLE_TICKS):
        if game.state not in _BUSY:
            return
        _step(game)


def run_script(game: Game, keys: Iterable[Key | str]) -> list[State]:
    """Press each key, letting the game run in between; return the states reached."""
    presses = [
        key if isinstance(key, Key) else key_from_char(key)
        for key in keys
        if isinstance(key, Key) or not key.isspace()
    ]
    states: list[State] = []
    _settle(game)
    for key in presses:
        if game.state is State.FINISHED:
            break
        game.press(key)
        _step(game)
        _settle(game)
        states.append(game.state)
    return states


def _interactive(game: Game) -> int:
    run_script(game, [])
    print(render(game))
    for line in sys.stdin:
        for ch in line:
            if ch.isspace():
                continue
            if ch in "qQ":
                return 0
            try:
                key = key_from_char(ch)
            except ValueError as error:
                print(error, file=sys.stderr)
                continue
            run_script(game, [key])
            if game.state is State.FINISHED:
                print(render(game))
                return 0
        print(render(game))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; returns the exit status."""
    args = parse_args(argv)
    keys = None
    if args.keys is not None:
        try:
            keys = [key_from_char(ch) for ch in args.keys if not ch.isspace()]
        except ValueError as error:
            print(f"lofz: {error}", file=sys.stderr)
            return 2
    game = Game(
        clock=_ManualClock(),
        rng=random.Random(args.seed),
        leaderboard_path=args.leaderboard,
    )
    if keys is None:
        return _interactive(game)
    run_script(game, keys)
    print(render(game))
    return 0