import random

import pytest

from lofz.board import OFFSET_CURSOR
from lofz.game import Game, State
from lofz.layout import scroll_window
from lofz.render import CONTINUE, render, render_board
from lofz.texts import FLIPPER_PHRASES


@pytest.fixture
def game():
    return Game(clock=lambda: 0, rng=random.Random(0))


def test_loading_screen(game):
    assert render(game) == "Loading..."


def test_press_to_play(game):
    game.state = State.PRESS_TO_PLAY
    assert render(game) == "Press OK to Play"


def test_board_cursor_on_player_cell(game):
    game.state = State.PLAYER_TURN
    rows = render_board(game)
    assert len(rows) == 4
    assert rows[0].endswith("[-]")
    assert rows[3].endswith(" # ")
    assert "".join(rows).count("#") == 1


def test_board_cursor_on_grid(game):
    game.state = State.PLAYER_TURN
    game.player_cursor = 0
    rows = render_board(game)
    assert rows[0].startswith("[+]")
    assert "[" not in rows[0][3:]


def test_board_hides_cursor_outside_player_turn(game):
    game.state = State.FLIPPER_TURN
    game.player_cursor = OFFSET_CURSOR
    assert "[" not in "".join(render_board(game))


def test_board_counts_lit_cells(game):
    game.state = State.FLIPPER_TURN
    game.board.toggle(15)
    text = "".join(render_board(game))
    lit_grid = sum(game.board)
    # the offset block is drawn both in the grid and as the player cell
    assert text.count("#") == lit_grid + (1 if game.board[15] else 0)


def test_intro_crawl_shows_title(game):
    game.state = State.INTRO_CRAWL
    game.intro_crawl_y = 10
    lines = render(game).splitlines()
    assert "LOFZ" in lines
    assert lines[-1] == CONTINUE


def test_intro_crawl_at_bottom_shows_only_footer(game):
    game.state = State.INTRO_CRAWL
    game.intro_crawl_y = 64
    assert render(game) == CONTINUE


def test_leaderboard_crawl(game):
    game.state = State.INTRO_CRAWL
    game.up_key_count = 10
    game.intro_crawl_y = 10
    assert game.leaderboard.crawl_lines()[0] in render(game).splitlines()


def test_secret_code_black_screen(game):
    game.state = State.SECRET_CODE
    game.secret_code_index = 3
    game.intro_crawl_y = 10
    assert render(game) == CONTINUE


def test_secret_code_lines(game):
    game.state = State.SECRET_CODE
    game.secret_code_index = 0
    game.intro_crawl_y = 10
    assert "Secret Codes:" in render(game).splitlines()


@pytest.mark.parametrize(
    "state,title",
    [(State.LOST_MENU, "You Died, Play Again?"), (State.WIN_MENU, "Victory, Play Again?")],
)
def test_menus(game, state, title):
    game.state = state
    game.menu_sel = 0
    lines = render(game).splitlines()
    assert lines[0] == title
    assert ">Yes" in lines[1] and " No" in lines[1]
    game.menu_sel = 1
    lines = render(game).splitlines()
    assert ">No" in lines[1] and " Yes" in lines[1]


def test_exit_screen(game):
    game.state = State.EXIT_SCREEN
    game.wins = 2
    game.total_flips = 17
    assert render(game).splitlines() == ["Enjoy your day", "WINS: 2", "FLIPS: 17"]


def test_fade_covers_board(game):
    game.state = State.INTRO_FADE
    game.fade_level = 0
    assert render(game) == "\n".join(render_board(game))
    game.fade_level = 128
    assert render(game).strip() == ""


def test_popup_shows_phrase_window(game):
    game.state = State.FLIPPER_POPUP
    game.popup_phrase = 2
    game.scroll_offset = 0
    expected = "> " + scroll_window(FLIPPER_PHRASES[2], 96, 0)
    assert expected in render(game).splitlines()


def test_main_screen_hud(game):
    game.state = State.PLAYER_TURN
    game.score = 150
    game.wins = 3
    lines = render(game).splitlines()
    assert "WINS: 3" in lines
    assert "[+50]" in lines
    assert lines[4] == "Flipper"