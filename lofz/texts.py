"""Fixed texts, codes and the mascot bitmap shown by the game."""

from __future__ import annotations

_SPACER = "  "


def _crawl(spec: str) -> tuple[str, ...]:
    """Split a ``|``-separated crawl spec; empty parts become spacer lines."""
    return tuple(part or _SPACER for part in spec.split("|"))


def _items(spec: str) -> tuple[str, ...]:
    """Split a ``|``-separated list, keeping every part exactly as written."""
    return tuple(spec.split("|"))


# Key sequences entered on the credits screen, one letter per key.
DEAD_SEQUENCE = "UUUDULUDL"
WIN_SEQUENCE = "UUUDURUDR"
MISCHIEF_SEQUENCE = "DUDUDUDUO"
SEQUENCE_LENGTH = 9

FLIPPER_PHRASES: tuple[str, ...] = _items(
    "Flipper is Playing his Move|Analyzing Board...|Flipper's Turn!|"
    "Diffusion in Progress|Watch My Move!|  WMM!  |Flipper is Thinking...|"
    "Hold up, its my move|Wait...Oh yeah!| Hmmm... |That's a good one|"
    "I got this|Please let me move|My TURN!"
)

INTRO_LINES: tuple[str, ...] = _crawl(
    "|LOFZ|Lights Out Flipper Zero||"
    "|A long time ago in a|galaxy far, far away....||"
    "|The evil |Flipper Zero, Sith Lord,|"
    "|has covered the |galaxy in light!|"
    "|No one has slept in ages||"
    "|You are the last Jedi,|"
    "|your mission is |to turn the|lights out |and vanquish Flipper!||"
    "|Use D-pad to move. |OK to select.|"
    "|Back button 2x+ Exits|"
    "|Game Goal:|Turn all boxes dark.|"
    "|If all tiles are lit, the Sith wins.|"
    "|May the Force be with You|"
    "|Press OK to continue|"
)

CREDITS_LINES: tuple[str, ...] = _crawl(
    "|LOFZ Credits|"
    "|Created by 3DPihl|Inspired by Star Wars|Powered by Flipper Zero|"
    "|Assisted by:|Github|Copilot AI|Grok AI|xTwitter|"
    "|:Special Thanks:|Thanks to the |Flipper community|for your support|"
    "|May the Force be with You||"
    f"|{MISCHIEF_SEQUENCE}|"
    "|Press OK to continue|"
)

MISCHIEF_LINES: tuple[str, ...] = _crawl(
    "|I solemnly swear|I'm up to|to no good!||"
    "|UUUDU_UD_|"
    "|...L or R...|"
)

DEAD_LINES: tuple[str, ...] = _crawl(
    "|You Died!|Flipper Wins!|"
    "|The Dark Side prevails|"
    "|Press OK to continue|"
)

WIN_LINES: tuple[str, ...] = _crawl(
    "|Victory!|The Jedi Triumph!|"
    "|The galaxy is dark||"
    "|Press U 5x to See|"
)

SECRET_CODE_LINES: tuple[str, ...] = _crawl(
    "|Secret Codes:|"
    f"Win: {WIN_SEQUENCE}|Dead: {DEAD_SEQUENCE}|Mischief: {MISCHIEF_SEQUENCE}|"
    f"This: {'L' * SEQUENCE_LENGTH}|Board: {'U' * SEQUENCE_LENGTH}|"
    "|Press OK to continue|"
)

# Cycled through on the secret-code screen; the empty entry is a black screen.
SECRET_CODES: tuple[str, ...] = (WIN_SEQUENCE, DEAD_SEQUENCE, MISCHIEF_SEQUENCE, "")

# How many moves Flipper makes on each of its successive turns.
FLIPPER_MOVE_SEQUENCE: tuple[int, ...] = tuple(int(ch) for ch in "01302410")

MASCOT_SIZE = 16

# 16x16 one-bit image, two bytes per row, most significant bit leftmost.
MASCOT_BITMAP = bytes.fromhex(
    "07e0 1ff8 3ffc 700e 6006 c7e3 cff3 ffff"
    " ffff fe7f 7c3e 381c 1008 2004 43c2 1ff8"
)


def mascot_pixels() -> list[tuple[int, int]]:
    """Return the set pixels of the mascot as (x, y) pairs in row-major order."""
    pixels = []
    for row in range(MASCOT_SIZE):
        bits = int.from_bytes(MASCOT_BITMAP[row * 2 : row * 2 + 2], "big")
        pixels.extend(
            (col, row) for col in range(MASCOT_SIZE) if bits & (0x8000 >> col)
        )
    return pixels


def phrase(index: int) -> str:
    """Return Flipper's phrase number ``index``."""
    if not 0 <= index < len(FLIPPER_PHRASES):
        raise IndexError(f"phrase index {index} out of range")
    return FLIPPER_PHRASES[index]