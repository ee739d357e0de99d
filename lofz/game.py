"""Game state machine: turns, Flipper's moves, menus, crawls and secret codes."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Sequence

from .board import GRID_COUNT, OFFSET_BLOCK, OFFSET_CURSOR, Board, Key, move_cursor
from .layout import crawl_end, popup_display_time, scroll_limit
from .leaderboard import LEADERBOARD_ENTRIES, Leaderboard
from .layout import LINE_HEIGHT, SCROLL_SPEED, SCREEN_HEIGHT
from .texts import (
    CREDITS_LINES,
    DEAD_LINES,
    DEAD_SEQUENCE,
    FLIPPER_MOVE_SEQUENCE,
    FLIPPER_PHRASES,
    INTRO_LINES,
    MISCHIEF_LINES,
    MISCHIEF_SEQUENCE,
    SECRET_CODE_LINES,
    SECRET_CODES,
    SEQUENCE_LENGTH,
    WIN_LINES,
    WIN_SEQUENCE,
)

MASCOT_X = 92
MASCOT_Y = 14
POPUP_WIDTH = 100
POPUP_TEXT_WIDTH = POPUP_WIDTH - 4
CRAWL_SPEED = 40
CREDITS_COOLDOWN_MS = 180_000
CREDITS_MOVE_THRESHOLD = 4
MASCOT_MOVE_INTERVAL = 200
LOADING_TIME = 7280
EXIT_TIME = 3140
BOUNCE_TIME = 300
BOUNCE_OFFSET = 6
REPEAT_WINDOW = 1800
FADE_STEP = 8
FADE_FULL = 128
SCORE_LIMIT = 999
STRESS_SCORE = 981


class State(Enum):
    """Screens and phases of the game."""

    LOADING = auto()
    PRESS_TO_PLAY = auto()
    INTRO_CRAWL = auto()
    INTRO_FADE = auto()
    PLAYER_TURN = auto()
    FLIPPER_TURN = auto()
    FLIPPER_POPUP = auto()
    FINISHED = auto()
    EXIT_SCREEN = auto()
    LOST_NULLS = auto()
    LOST_FADE = auto()
    LOST_MENU = auto()
    WIN_SCREEN = auto()
    CREDITS = auto()
    SECRET_CODE = auto()
    DEAD_SCREEN = auto()
    WIN_FADE = auto()
    MISCHIEF_SCREEN = auto()
    WIN_MENU = auto()


_INPUT_BLOCKED = frozenset(
    {State.LOADING, State.INTRO_FADE, State.LOST_FADE, State.WIN_FADE}
)
_COUNTING_STATES = frozenset(
    {
        State.PLAYER_TURN,
        State.PRESS_TO_PLAY,
        State.INTRO_CRAWL,
        State.WIN_SCREEN,
        State.LOST_MENU,
        State.WIN_MENU,
    }
)
_OK_RETURNS_TO_INTRO = frozenset(
    {State.SECRET_CODE, State.DEAD_SCREEN, State.MISCHIEF_SCREEN}
)
_CRAWL_STATES = frozenset(
    {
        State.INTRO_CRAWL,
        State.CREDITS,
        State.MISCHIEF_SCREEN,
        State.DEAD_SCREEN,
        State.WIN_SCREEN,
        State.SECRET_CODE,
        State.LOST_NULLS,
    }
)
_SEQUENCE_SCREENS = {
    DEAD_SEQUENCE: State.DEAD_SCREEN,
    WIN_SEQUENCE: State.WIN_SCREEN,
    MISCHIEF_SEQUENCE: State.MISCHIEF_SCREEN,
}


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


@dataclass
class _Snapshot:
    board: Board
    player_cursor: int
    flipper_cursor: int
    solved: bool


class Game:
    """The whole game, driven by key presses and periodic ticks."""

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        rng: random.Random | None = None,
        leaderboard: Leaderboard | None = None,
        leaderboard_path: str | Path | None = None,
    ) -> None:
        self.clock = clock if clock is not None else _monotonic_ms
        self.rng = rng if rng is not None else random.Random()
        self.leaderboard_path = Path(leaderboard_path) if leaderboard_path else None
        if leaderboard is None:
            leaderboard = (
                Leaderboard.load(self.leaderboard_path)
                if self.leaderboard_path is not None
                else Leaderboard()
            )
        self.leaderboard = leaderboard

        self.board = Board()
        self.player_cursor = OFFSET_CURSOR
        self.flipper_cursor = 0
        self.solved = False
        self.state = State.LOADING
        self.state_tick = self.clock()

        self.popup_timer = 0
        self.popup_phrase = 0
        self.scroll_start_tick = 0
        self.scroll_offset = 0
        self.intro_crawl_y = SCREEN_HEIGHT
        self.fade_level = 0
        self.menu_sel = 0
        self.flipper_move_index = 0
        self.flipper_moves_left = 0

        self.right_key_count = 0
        self.last_right_key_tick = 0
        self.left_key_count = 0
        self.last_left_key_tick = 0
        self.back_key_count = 0
        self.last_back_key_tick = 0
        self.up_key_count = 0
        self.last_up_key_tick = 0

        self.mascot_bounce_offset = 0
        self.bounce_start_tick = 0
        self.bounce_up = False
        self.mascot_x = MASCOT_X
        self.mascot_y = MASCOT_Y
        self.last_mascot_move_tick = 0

        self.saved = _Snapshot(self.board.copy(), self.player_cursor, 0, False)
        self.credits_access_count = 0
        self.last_credits_tick = 0
        self.user_move_count = 0
        self.total_flips = 0
        self.wins = 0
        self.score = 0
        self.audio_enabled = True
        self.secret_code_index = 0
        self.input_sequence: list[Key] = []
        self._loading_done = False

    # --- helpers -------------------------------------------------------

    def _now(self) -> int:
        return self.clock()

    def _enter(self, state: State) -> None:
        self.state = state
        self.state_tick = self._now()

    def _start_crawl(self, state: State) -> None:
        self._enter(state)
        self.intro_crawl_y = SCREEN_HEIGHT

    def _snapshot(self) -> None:
        self.saved = _Snapshot(
            self.board.copy(), self.player_cursor, self.flipper_cursor, self.solved
        )

    def _save_leaderboard(self) -> None:
        self.leaderboard.insert(self.wins, self.total_flips)
        if self.leaderboard_path is not None:
            self.leaderboard.save(self.leaderboard_path)

    def _enter_exit(self) -> None:
        self._enter(State.EXIT_SCREEN)
        self._save_leaderboard()

    def _win(self) -> None:
        self.solved = True
        self.wins += 1
        self._save_leaderboard()
        self._enter(State.WIN_FADE)
        self.fade_level = 0
        self._snapshot()

    def _repeat(self, count: int, last: int, now: int) -> int:
        return count + 1 if now - last <= REPEAT_WINDOW else 1

    def _player_toggle(self) -> None:
        cell = OFFSET_BLOCK if self.player_cursor == OFFSET_CURSOR else self.player_cursor
        self.board.toggle(cell, self.rng)
        self.score += 1
        self.user_move_count += 1
        self.total_flips += 1
        if self.score > SCORE_LIMIT:
            self.score = 1

    # --- public API ----------------------------------------------------

    def restart(self) -> None:
        """Start a fresh board with the cursor on the player cell."""
        self.board.reset()
        self.player_cursor = OFFSET_CURSOR
        self.flipper_cursor = 0
        self.solved = False
        self.flipper_move_index = 0
        self.user_move_count = 0
        self.score = 0
        self.state = State.PLAYER_TURN

    def flipper_move(self) -> int:
        """Flip the lit cell nearest the player's cursor; return its index."""
        best = self.board.nearest_lit(self.player_cursor)
        self.flipper_cursor = best
        self.board.toggle(best, self.rng)
        self.bounce_start_tick = self._now()
        self.mascot_bounce_offset = BOUNCE_OFFSET
        self.bounce_up = self.rng.randrange(2) == 0
        return best

    def crawl_lines(self) -> Sequence[str]:
        """The lines of the crawl shown in the current state, if any."""
        if self.state is State.CREDITS:
            return CREDITS_LINES
        if self.state is State.MISCHIEF_SCREEN:
            return MISCHIEF_LINES
        if self.state in (State.DEAD_SCREEN, State.LOST_NULLS):
            return DEAD_LINES
        if self.state is State.WIN_SCREEN:
            return WIN_LINES
        if self.state is State.SECRET_CODE:
            return SECRET_CODE_LINES
        if self.state is State.INTRO_CRAWL:
            if self.up_key_count >= 10:
                return self.leaderboard.crawl_lines()
            return INTRO_LINES
        return ()

    @property
    def secret_code(self) -> str:
        """The secret code picked for the secret-code screen."""
        return SECRET_CODES[self.secret_code_index]

    @property
    def is_stressed(self) -> bool:
        """True when the board is nearly all lit or the score is very high."""
        few_off = self.board.off_count() < GRID_COUNT * 20 // 100
        return (few_off or self.score > STRESS_SCORE) and self.score != 1

    def update_mascot(self) -> None:
        """Jitter the mascot while stressed, otherwise put it back in place."""
        stressed = self.is_stressed
        now = self._now()
        if (
            stressed
            and self.mascot_bounce_offset > 0
            and now - self.last_mascot_move_tick > MASCOT_MOVE_INTERVAL
        ):
            move = self.rng.randrange(4)
            x, y = self.mascot_x, self.mascot_y
            if move == 0 and x > 80:
                x -= 2
            elif move == 1 and x < 100:
                x += 2
            elif move == 2 and y > 10:
                y -= 2
            elif move == 3 and y < 20:
                y += 2
            self.mascot_x, self.mascot_y = x, y
            self.last_mascot_move_tick = now
        elif not stressed:
            self.mascot_x, self.mascot_y = MASCOT_X, MASCOT_Y

    def press(self, key: Key) -> None:
        """Handle one key press."""
        if self.state in _INPUT_BLOCKED:
            return
        now = self._now()

        if self.state in _OK_RETURNS_TO_INTRO and key is Key.OK:
            self._start_crawl(State.INTRO_CRAWL)
            self.left_key_count = 0
            return

        if key is Key.UP and self.state in _COUNTING_STATES:
            self.up_key_count = self._repeat(self.up_key_count, self.last_up_key_tick, now)
            if self.up_key_count >= 10:
                self._start_crawl(State.INTRO_CRAWL)
                self.up_key_count = 0
                return
            self.last_up_key_tick = now
        else:
            self.up_key_count = 0

        if key is Key.LEFT and self.state is State.CREDITS:
            self.left_key_count = self._repeat(
                self.left_key_count, self.last_left_key_tick, now
            )
            if self.left_key_count >= 9:
                self._start_crawl(State.SECRET_CODE)
                self.secret_code_index = (self.secret_code_index + 1) % len(SECRET_CODES)
                self.left_key_count = 0
                return
            self.last_left_key_tick = now
        elif key is Key.LEFT and self.state in _COUNTING_STATES:
            self.left_key_count = self._repeat(
                self.left_key_count, self.last_left_key_tick, now
            )
            if self.left_key_count >= 3:
                self.audio_enabled = not self.audio_enabled
                self.left_key_count = 0
            self.last_left_key_tick = now
        else:
            self.left_key_count = 0

        if self.state is State.CREDITS:
            self._credits_key(key)
            return

        if self.state is State.PRESS_TO_PLAY and key is Key.OK:
            self._enter(State.INTRO_CRAWL)
            return
        if self.state is State.INTRO_CRAWL and key is Key.OK:
            self._enter(State.INTRO_FADE)
            self.fade_level = 0
            return
        if self.state in (State.LOST_MENU, State.WIN_MENU):
            self._menu_key(key)
            return
        if self.state is State.WIN_SCREEN and key is Key.OK:
            self._enter(State.WIN_MENU)
            self.menu_sel = 0
            return
        if self.state is State.WIN_SCREEN and key is Key.BACK:
            self._back_key(now)
            return
        if self.state is State.PLAYER_TURN and not self.solved:
            self._player_key(key, now)

    def _credits_key(self, key: Key) -> None:
        if len(self.input_sequence) < SEQUENCE_LENGTH:
            self.input_sequence.append(key)
        if key is not Key.OK and len(self.input_sequence) < SEQUENCE_LENGTH:
            return
        matched = False
        if len(self.input_sequence) == SEQUENCE_LENGTH:
            code = "".join(k.value for k in self.input_sequence)
            target = _SEQUENCE_SCREENS.get(code)
            if target is not None:
                self._start_crawl(target)
                matched = True
        if not matched and key is Key.OK:
            self._start_crawl(State.INTRO_CRAWL)
            self._snapshot()
        self.input_sequence.clear()

    def _menu_key(self, key: Key) -> None:
        if key in (Key.UP, Key.RIGHT):
            self.menu_sel = 0
        elif key in (Key.DOWN, Key.LEFT):
            self.menu_sel = 1
        elif key is Key.OK:
            if self.menu_sel == 0:
                self.restart()
            else:
                self._enter_exit()

    def _back_key(self, now: int) -> bool:
        self.back_key_count = self._repeat(self.back_key_count, self.last_back_key_tick, now)
        if self.back_key_count >= 2:
            self._enter_exit()
            self.back_key_count = 0
            return True
        self.last_back_key_tick = now
        return False

    def _try_credits(self, now: int) -> bool:
        allow = False
        if (
            now - self.last_credits_tick >= CREDITS_COOLDOWN_MS
            or self.user_move_count >= CREDITS_MOVE_THRESHOLD
        ):
            allow = True
            self.credits_access_count = 0
            self.user_move_count = 0
        elif self.credits_access_count % 2 == 0:
            allow = True
        self.right_key_count = 0
        if allow:
            self._start_crawl(State.CREDITS)
            self._snapshot()
            self.credits_access_count += 1
            self.last_credits_tick = now
        return allow

    def _player_key(self, key: Key, now: int) -> None:
        if key is Key.RIGHT:
            self.right_key_count = self._repeat(
                self.right_key_count, self.last_right_key_tick, now
            )
            if self.right_key_count >= 3 and self._try_credits(now):
                return
            self.last_right_key_tick = now
        if key is Key.BACK:
            self._back_key(now)
            return
        if key is Key.OK:
            self._player_ok(now)
        else:
            self.player_cursor = move_cursor(self.player_cursor, key)

    def _player_ok(self, now: int) -> None:
        self._player_toggle()
        if self.board.is_solved():
            self._win()
        elif self.board.is_lost():
            self._enter(State.LOST_FADE)
            self.fade_level = 0
            self._snapshot()
        else:
            self.state = State.FLIPPER_POPUP
            self.popup_timer = now
            self.popup_phrase = self.rng.randrange(len(FLIPPER_PHRASES))
            self.scroll_offset = 0
            self.scroll_start_tick = now

    def tick(self) -> bool:
        """Advance timers and animations; return False once the game is over."""
        if self.state is State.FINISHED:
            return False
        now = self._now()

        if self.mascot_bounce_offset > 0 and now - self.bounce_start_tick > BOUNCE_TIME:
            self.mascot_bounce_offset = 0

        if self.state is State.LOADING:
            if not self._loading_done and now - self.state_tick >= LOADING_TIME:
                self.state = State.PRESS_TO_PLAY
                self._loading_done = True
        elif self.state in _CRAWL_STATES:
            self._crawl_step(now)
        elif self.state in (State.INTRO_FADE, State.WIN_FADE):
            if self.fade_level < FADE_FULL:
                self.fade_level += FADE_STEP
                self.state_tick = now
            else:
                self.state = (
                    State.WIN_SCREEN if self.state is State.WIN_FADE else State.PLAYER_TURN
                )
                self.fade_level = 0
                self.intro_crawl_y = SCREEN_HEIGHT
        elif self.state is State.LOST_FADE:
            if self.fade_level < FADE_FULL:
                self.fade_level += FADE_STEP
                self.state_tick = now
            else:
                self._start_crawl(State.LOST_NULLS)
        elif self.state is State.FLIPPER_POPUP and not self.solved:
            text = FLIPPER_PHRASES[self.popup_phrase]
            if now - self.popup_timer > popup_display_time(text, POPUP_TEXT_WIDTH):
                self.state = State.FLIPPER_TURN
                self.flipper_moves_left = FLIPPER_MOVE_SEQUENCE[self.flipper_move_index]
                self.flipper_move_index = (self.flipper_move_index + 1) % len(
                    FLIPPER_MOVE_SEQUENCE
                )
                if self.flipper_moves_left > 0:
                    self.flipper_move()
        elif self.state is State.FLIPPER_TURN and not self.solved:
            self._flipper_turn_step(now)
        elif self.state is State.EXIT_SCREEN:
            if now - self.state_tick > EXIT_TIME:
                self.state = State.FINISHED

        if self.state is State.FLIPPER_POPUP:
            self._scroll_step(now)
        self.update_mascot()
        return self.state is not State.FINISHED

    def _crawl_step(self, now: int) -> None:
        lines = self.crawl_lines()
        if self.state is State.INTRO_CRAWL and self.up_key_count >= 10:
            end = -(LEADERBOARD_ENTRIES * 2 * LINE_HEIGHT)
        else:
            end = crawl_end(lines)
        if self.intro_crawl_y > end:
            if now - self.state_tick > CRAWL_SPEED:
                self.intro_crawl_y -= 1
                self.state_tick = now
        elif self.state is State.WIN_SCREEN:
            self._enter(State.WIN_MENU)
            self.menu_sel = 0
        elif self.state is State.LOST_NULLS:
            self._enter(State.LOST_MENU)
            self.menu_sel = 0
        else:
            self._start_crawl(State.INTRO_CRAWL)

    def _flipper_turn_step(self, now: int) -> None:
        if self.flipper_moves_left > 0:
            if now - self.bounce_start_tick > BOUNCE_TIME:
                self.flipper_move()
                self.flipper_moves_left -= 1
        elif self.board.is_solved():
            self._win()
        elif self.board.is_lost():
            self._enter(State.LOST_FADE)
            self.fade_level = 0
            self._snapshot()
            self.solved = self.saved.solved
        else:
            self.state = State.PLAYER_TURN

    def _scroll_step(self, now: int) -> None:
        if now - self.scroll_start_tick > SCROLL_SPEED:
            self.scroll_start_tick = now
            self.scroll_offset += 1
            limit = scroll_limit(FLIPPER_PHRASES[self.popup_phrase], POPUP_TEXT_WIDTH)
            if self.scroll_offset > limit:
                self.scroll_offset = 0