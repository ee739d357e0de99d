"""Text rendering of the game screen."""

from __future__ import annotations

from typing import Sequence

from .board import GRID_SIZE, OFFSET_BLOCK, OFFSET_CURSOR
from .game import FADE_FULL, POPUP_TEXT_WIDTH, Game, State
from .layout import crawl_positions, score_label, scroll_window
from .texts import FLIPPER_PHRASES

CONTINUE = "Press OK to continue"

_CRAWL_SCREENS = frozenset(
    {
        State.INTRO_CRAWL,
        State.CREDITS,
        State.MISCHIEF_SCREEN,
        State.DEAD_SCREEN,
        State.WIN_SCREEN,
        State.LOST_NULLS,
    }
)
_FADES = frozenset({State.INTRO_FADE, State.LOST_FADE, State.WIN_FADE})


def _cell(lit: bool, cursor: bool) -> str:
    if cursor:
        return f"[{'-' if lit else '+'}]"
    return f" {'#' if lit else '.'} "


def render_board(game: Game) -> list[str]:
    """The board as text rows; the player cell sits to the right of the top row."""
    active = game.state is State.PLAYER_TURN
    cells = list(game.board)
    rows = []
    for row in range(GRID_SIZE):
        start = row * GRID_SIZE
        rows.append(
            "".join(
                _cell(lit, active and game.player_cursor == index)
                for index, lit in enumerate(cells[start : start + GRID_SIZE], start)
            )
        )
    rows[0] += "  " + _cell(
        cells[OFFSET_BLOCK], active and game.player_cursor == OFFSET_CURSOR
    )
    return rows


def _crawl(game: Game, lines: Sequence[str]) -> list[str]:
    shown = [
        placed.text
        for placed in crawl_positions(game.intro_crawl_y, lines)
        if placed.fade > 0
    ]
    return shown + [CONTINUE]


def _menu(title: str, selection: int) -> list[str]:
    no = ">No" if selection == 1 else " No"
    yes = ">Yes" if selection == 0 else " Yes"
    return [title, f"{no}        {yes}"]


def _hud(game: Game) -> list[str]:
    marker = ""
    if game.mascot_bounce_offset > 0:
        marker = " ^" if game.bounce_up else " v"
    return [
        f"Flipper{marker}",
        f"WINS: {game.wins}",
        f"[{score_label(game.score)}]",
    ]


def _faded_board(game: Game) -> list[str]:
    board = render_board(game)
    covered = min(len(board), game.fade_level * len(board) // FADE_FULL)
    return [" " * len(row) for row in board[:covered]] + board[covered:]


def _lines(game: Game) -> list[str]:
    state = game.state
    if state is State.LOADING:
        return ["Loading..."]
    if state is State.PRESS_TO_PLAY:
        return ["Press OK to Play"]
    if state in _CRAWL_SCREENS:
        return _crawl(game, game.crawl_lines())
    if state is State.SECRET_CODE:
        if not game.secret_code:
            return [CONTINUE]
        return _crawl(game, game.crawl_lines())
    if state in _FADES:
        return _faded_board(game)
    if state is State.LOST_MENU:
        return _menu("You Died, Play Again?", game.menu_sel)
    if state is State.WIN_MENU:
        return _menu("Victory, Play Again?", game.menu_sel)
    if state in (State.EXIT_SCREEN, State.FINISHED):
        return [
            "Enjoy your day",
            f"WINS: {game.wins}",
            f"FLIPS: {game.total_flips}",
        ]
    lines = render_board(game)
    if state in (State.FLIPPER_POPUP, State.FLIPPER_TURN):
        text = FLIPPER_PHRASES[game.popup_phrase]
        lines.append("> " + scroll_window(text, POPUP_TEXT_WIDTH, game.scroll_offset))
    return lines + _hud(game)


def render(game: Game) -> str:
    """The current screen as text."""
    return "\n".join(_lines(game))