import pytest

from lofz.layout import (
    LINE_HEIGHT,
    SCREEN_HEIGHT,
    crawl_end,
    crawl_positions,
    popup_display_time,
    scroll_limit,
    scroll_window,
    score_label,
    visible_lines,
)
from lofz.texts import DEAD_LINES, FLIPPER_PHRASES, INTRO_LINES

POPUP_TEXT_WIDTH = 96


def test_visible_lines_drop_empty_only():
    assert visible_lines(["a", "", "  ", "b"]) == ["a", "  ", "b"]


def test_crawl_end_matches_visible_count():
    for lines in (INTRO_LINES, DEAD_LINES, ["x", "", "y"]):
        assert crawl_end(lines) == -LINE_HEIGHT * len(visible_lines(lines))


def test_crawl_positions_spacing_and_range():
    placed = crawl_positions(0, INTRO_LINES)
    assert placed[0].y == 0
    assert all(b.y - a.y == LINE_HEIGHT for a, b in zip(placed, placed[1:]))
    assert all(-LINE_HEIGHT <= p.y <= SCREEN_HEIGHT for p in placed)
    assert placed[0].text == INTRO_LINES[0]


def test_crawl_positions_fade_at_edges():
    placed = crawl_positions(SCREEN_HEIGHT, ["first", "second"])
    assert len(placed) == 1
    assert placed[0].fade == 0.0
    middle = crawl_positions(30, ["mid"])
    assert middle[0].fade == 1.0


def test_crawl_positions_skip_empty_lines():
    placed = crawl_positions(20, ["a", "", "b"])
    assert [p.text for p in placed] == ["a", "b"]
    assert placed[1].y == 20 + LINE_HEIGHT


def test_crawl_offscreen_gives_nothing():
    assert crawl_positions(crawl_end(DEAD_LINES) - LINE_HEIGHT, DEAD_LINES) == []


def test_short_text_does_not_scroll():
    assert scroll_limit("My TURN!", POPUP_TEXT_WIDTH) == 0
    assert scroll_window("My TURN!", POPUP_TEXT_WIDTH, 5) == "My TURN!"
    assert popup_display_time("My TURN!", POPUP_TEXT_WIDTH) == 2000


@pytest.mark.parametrize("text", FLIPPER_PHRASES)
def test_scroll_window_invariants(text):
    fit = POPUP_TEXT_WIDTH // 7
    limit = scroll_limit(text, POPUP_TEXT_WIDTH)
    for offset in range(limit + 3):
        window = scroll_window(text, POPUP_TEXT_WIDTH, offset)
        assert len(window) <= fit
        assert window in text
    assert scroll_window(text, POPUP_TEXT_WIDTH, 0) == text[:fit]
    assert scroll_window(text, POPUP_TEXT_WIDTH, limit + 5) == scroll_window(
        text, POPUP_TEXT_WIDTH, limit
    )


def test_long_text_stays_longer():
    long_text = FLIPPER_PHRASES[0]
    assert scroll_limit(long_text, POPUP_TEXT_WIDTH) > 0
    assert popup_display_time(long_text, POPUP_TEXT_WIDTH) > popup_display_time(
        FLIPPER_PHRASES[1], POPUP_TEXT_WIDTH
    )


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        scroll_limit("abc", -1)


def test_score_label_below_hundred_is_plain():
    assert score_label(0) == "0"
    assert score_label(99) == "99"


def test_score_label_above_hundred():
    assert score_label(150) == "+50"
    assert score_label(200) == "+100"