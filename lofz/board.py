"""The 4x4 lights-out board, its offset block and cursor movement."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum

GRID_SIZE = 4
GRID_COUNT = GRID_SIZE * GRID_SIZE
OFFSET_BLOCK = GRID_COUNT - 1
# Cursor position of the separate player cell beside the board.
OFFSET_CURSOR = GRID_COUNT
# Cells flipped together with the offset block.
OFFSET_LINKED = (5, 6, 9, 10)

_NEIGHBOUR_STEPS = ((0, -1), (-1, 0), (0, 1), (1, 0))


class Key(Enum):
    """Input keys, valued by the letter used in secret codes."""

    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"
    OK = "O"
    BACK = "B"


def _initial_cells() -> list[bool]:
    cells = [False] * GRID_COUNT
    cells[OFFSET_BLOCK] = True
    return cells


@dataclass
class Board:
    """Lit state of the sixteen cells; the last one is the offset block."""

    cells: list[bool] = field(default_factory=_initial_cells)

    def __post_init__(self) -> None:
        if len(self.cells) != GRID_COUNT:
            raise ValueError(f"a board has {GRID_COUNT} cells, got {len(self.cells)}")
        self.cells = [bool(c) for c in self.cells]

    def __len__(self) -> int:
        return GRID_COUNT

    def __iter__(self):
        return iter(self.cells)

    def __getitem__(self, index: int) -> bool:
        return self.cells[index]

    def reset(self) -> None:
        """Turn every cell off except the offset block."""
        self.cells = _initial_cells()

    def _flip(self, index: int) -> None:
        self.cells[index] = not self.cells[index]

    def toggle(self, index: int, rng: random.Random | None = None) -> None:
        """Flip a cell together with its neighbours."""
        if not 0 <= index < GRID_COUNT:
            raise ValueError(f"cell index {index} out of range")
        rng = rng if rng is not None else random
        self._flip(index)
        if index == OFFSET_BLOCK:
            for linked in OFFSET_LINKED:
                self._flip(linked)
            return
        x, y = index % GRID_SIZE, index // GRID_SIZE
        for n, (dx, dy) in enumerate(_NEIGHBOUR_STEPS):
            nx, ny = x + dx, y + dy
            if 0 <= nx < GRID_SIZE and 0 <= ny < GRID_SIZE:
                self._flip(ny * GRID_SIZE + nx)
            elif index in OFFSET_LINKED and n == rng.randrange(4):
                self._flip(OFFSET_BLOCK)

    def is_solved(self) -> bool:
        """True when every cell but the offset block is off."""
        return not any(self.cells[:OFFSET_BLOCK])

    def is_lost(self) -> bool:
        """True when every cell but the offset block is lit."""
        return all(self.cells[:OFFSET_BLOCK])

    def off_count(self) -> int:
        """Number of cells, offset block included, that are off."""
        return sum(not c for c in self.cells)

    def nearest_lit(self, cursor: int) -> int:
        """Index of the lit cell closest to ``cursor``; 0 when none is lit."""
        px, py = cursor % GRID_SIZE, cursor // GRID_SIZE
        best, best_dist = 0, None
        for i, lit in enumerate(self.cells):
            if not lit:
                continue
            dist = abs(px - i % GRID_SIZE) + abs(py - i // GRID_SIZE)
            if best_dist is None or dist < best_dist:
                best, best_dist = i, dist
        return best

    def copy(self) -> Board:
        """Return an independent copy of the board."""
        return Board(list(self.cells))


def move_cursor(cursor: int, key: Key) -> int:
    """Return the cursor position after pressing a direction key."""
    on_offset = cursor == OFFSET_CURSOR
    if key is Key.UP:
        if on_offset:
            return 4
        return cursor - GRID_SIZE if cursor >= GRID_SIZE else cursor
    if key is Key.DOWN:
        if on_offset:
            return 12
        return cursor + GRID_SIZE if cursor < GRID_COUNT - GRID_SIZE else cursor
    if key is Key.LEFT:
        if on_offset:
            return 3
        return cursor - 1 if cursor % GRID_SIZE else cursor
    if key is Key.RIGHT:
        if on_offset:
            return 0
        if cursor % GRID_SIZE < GRID_SIZE - 1:
            return cursor + 1
        return OFFSET_CURSOR
    return cursor