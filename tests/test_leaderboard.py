import pytest

from lofz.leaderboard import LEADERBOARD_ENTRIES, Entry, Leaderboard


def test_empty_board_has_ten_zero_rows():
    board = Leaderboard()
    assert len(board.entries) == LEADERBOARD_ENTRIES
    assert all(e == Entry(0, 0) for e in board)


def test_insert_into_empty_goes_first():
    board = Leaderboard()
    assert board.insert(3, 40) == 0
    assert board[0] == Entry(3, 40)
    assert board[1] == Entry(0, 0)


def test_more_wins_rank_higher():
    board = Leaderboard()
    board.insert(1, 10)
    board.insert(5, 20)
    board.insert(3, 30)
    assert [e.wins for e in board.entries[:3]] == [5, 3, 1]


def test_equal_wins_more_presses_goes_before():
    board = Leaderboard()
    board.insert(2, 10)
    position = board.insert(2, 10)
    assert position == 0
    board.insert(2, 50)
    assert board[0] == Entry(2, 50)
    board.insert(2, 5)
    assert board[3] == Entry(2, 5)


def test_insert_keeps_ten_rows_and_drops_last():
    board = Leaderboard()
    for wins in range(1, 12):
        board.insert(wins, wins)
    assert len(board.entries) == LEADERBOARD_ENTRIES
    assert board[0] == Entry(11, 11)
    assert Entry(1, 1) not in board.entries


def test_insert_that_does_not_fit_returns_none():
    board = Leaderboard([Entry(9, 9)] * LEADERBOARD_ENTRIES)
    assert board.insert(1, 1) is None
    assert all(e == Entry(9, 9) for e in board)


def test_insert_negative_raises():
    with pytest.raises(ValueError):
        Leaderboard().insert(-1, 0)


def test_too_many_entries_rejected():
    with pytest.raises(ValueError):
        Leaderboard([Entry(1, 1)] * (LEADERBOARD_ENTRIES + 1))


def test_dumps_empty_format():
    assert Leaderboard().dumps() == "0:0\n  \n" * LEADERBOARD_ENTRIES


def test_dumps_loads_round_trip():
    board = Leaderboard()
    for wins, presses in [(4, 100), (2, 7), (9, 12)]:
        board.insert(wins, presses)
    assert Leaderboard.loads(board.dumps()) == board


def test_loads_skips_garbage_and_blank_lines():
    board = Leaderboard.loads("\n  \nnot a row\n7:8\n\n")
    assert board[0] == Entry(7, 8)
    assert board[1] == Entry(0, 0)


def test_loads_reads_at_most_ten_rows():
    text = "".join(f"{i}:{i}\n" for i in range(1, 15))
    board = Leaderboard.loads(text)
    assert len(board.entries) == LEADERBOARD_ENTRIES
    assert board[-1] == Entry(10, 10)


def test_save_and_load(tmp_path):
    path = tmp_path / "board.txt"
    board = Leaderboard()
    board.insert(6, 33)
    board.save(path)
    assert Leaderboard.load(path) == board


def test_load_missing_file_is_empty(tmp_path):
    assert Leaderboard.load(tmp_path / "missing.txt") == Leaderboard()


def test_crawl_lines_alternate_with_empty():
    board = Leaderboard()
    board.insert(2, 15)
    lines = board.crawl_lines()
    assert len(lines) == 2 * LEADERBOARD_ENTRIES
    assert lines[0] == "1 : 2 :: 15"
    assert all(line == "" for line in lines[1::2])
    assert lines[2] == "2 : 0 :: 0"