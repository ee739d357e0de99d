"""The ten-entry leaderboard of wins and flips, and its text file format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

LEADERBOARD_ENTRIES = 10
DEFAULT_PATH = Path("lofz_leaderboard.txt")

_ENTRY_RE = re.compile(r"\s*(\d+):(\d+)")


@dataclass(frozen=True)
class Entry:
    """One leaderboard row: games won and cells flipped."""

    wins: int = 0
    presses: int = 0

    @property
    def is_empty(self) -> bool:
        return self.wins == 0


def _empty_entries() -> list[Entry]:
    return [Entry() for _ in range(LEADERBOARD_ENTRIES)]


@dataclass
class Leaderboard:
    """A fixed list of ten entries, best first; unused rows are zero."""

    entries: list[Entry] = field(default_factory=_empty_entries)

    def __post_init__(self) -> None:
        if len(self.entries) > LEADERBOARD_ENTRIES:
            raise ValueError(
                f"a leaderboard holds at most {LEADERBOARD_ENTRIES} entries"
            )
        self.entries = list(self.entries) + [
            Entry() for _ in range(LEADERBOARD_ENTRIES - len(self.entries))
        ]

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return LEADERBOARD_ENTRIES

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def insert(self, wins: int, presses: int) -> int | None:
        """Place a new result, dropping the last row; return its position."""
        if wins < 0 or presses < 0:
            raise ValueError("wins and presses must not be negative")
        new = Entry(wins, presses)
        for position, entry in enumerate(self.entries):
            if (
                entry.is_empty
                or new.wins > entry.wins
                or (new.wins == entry.wins and new.presses >= entry.presses)
            ):
                self.entries.insert(position, new)
                del self.entries[LEADERBOARD_ENTRIES:]
                return position
        return None

    def dumps(self) -> str:
        """Return the file text: each row as ``wins:presses`` then a spacer line."""
        return "".join(f"{e.wins}:{e.presses}\n  \n" for e in self.entries)

    @classmethod
    def loads(cls, text: str) -> Leaderboard:
        """Parse file text, skipping blank lines and lines that do not match."""
        entries: list[Entry] = []
        for line in text.splitlines():
            if len(entries) >= LEADERBOARD_ENTRIES:
                break
            if not line.strip():
                continue
            match = _ENTRY_RE.match(line)
            if match:
                entries.append(Entry(int(match.group(1)), int(match.group(2))))
        return cls(entries)

    @classmethod
    def load(cls, path: str | Path = DEFAULT_PATH) -> Leaderboard:
        """Read a leaderboard file; a missing file gives an empty board."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return cls()
        return cls.loads(text)

    def save(self, path: str | Path = DEFAULT_PATH) -> None:
        """Write the leaderboard, replacing any existing file."""
        Path(path).write_text(self.dumps(), encoding="utf-8")

    def crawl_lines(self) -> list[str]:
        """Lines for the scrolling leaderboard screen, each followed by an empty one."""
        lines: list[str] = []
        for rank, entry in enumerate(self.entries, start=1):
            lines.append(f"{rank} : {entry.wins} :: {entry.presses}")
            lines.append("")
        return lines