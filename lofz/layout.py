"""Positions and labels for crawling text, the scrolling popup and the score."""

from __future__ import annotations

from typing import NamedTuple, Sequence

SCREEN_HEIGHT = 64
LINE_HEIGHT = 11
CHAR_WIDTH = 7
SCROLL_SPEED = 650
_FADE_BAND = 10


class CrawlLine(NamedTuple):
    """A line of crawling text placed on screen with its fade factor."""

    y: int
    text: str
    fade: float


def visible_lines(lines: Sequence[str]) -> list[str]:
    """Lines that take up space in a crawl; empty strings are skipped."""
    return [line for line in lines if line]


def crawl_positions(y: int, lines: Sequence[str]) -> list[CrawlLine]:
    """Place the crawl's lines starting at ``y``, keeping only those on screen."""
    placed = []
    for offset, text in enumerate(visible_lines(lines)):
        y_pos = y + offset * LINE_HEIGHT
        if y_pos < -LINE_HEIGHT or y_pos > SCREEN_HEIGHT:
            continue
        if y_pos < _FADE_BAND:
            fade = y_pos / _FADE_BAND
        elif y_pos > SCREEN_HEIGHT - _FADE_BAND:
            fade = (SCREEN_HEIGHT - y_pos) / _FADE_BAND
        else:
            fade = 1.0
        placed.append(CrawlLine(y_pos, text, fade))
    return placed


def crawl_end(lines: Sequence[str]) -> int:
    """The top position at which a crawl of ``lines`` has scrolled away."""
    return -(len(visible_lines(lines)) * LINE_HEIGHT)


def _chars_fit(width: int) -> int:
    if width < 0:
        raise ValueError("width must not be negative")
    return width // CHAR_WIDTH


def scroll_limit(text: str, width: int) -> int:
    """The largest scroll offset for ``text`` in a box ``width`` pixels wide."""
    return max(0, len(text) - _chars_fit(width) + 1)


def scroll_window(text: str, width: int, offset: int) -> str:
    """The part of ``text`` shown at scroll ``offset``, clamped to the limit."""
    fit = _chars_fit(width)
    scroll = min(offset, scroll_limit(text, width))
    if scroll >= len(text):
        return ""
    return text[scroll : scroll + fit]


def popup_display_time(text: str, width: int) -> int:
    """Milliseconds the popup stays up before Flipper moves."""
    limit = scroll_limit(text, width)
    return limit * SCROLL_SPEED + 1000 if limit > 0 else 2000


def score_label(score: int) -> str:
    """The score as shown in the score box."""
    if score >= 100:
        return f"+{score % 100 or 100}"
    return str(score)