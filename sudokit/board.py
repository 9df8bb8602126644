"""Sudoku board state: tiles holding candidate values and the full-board check."""

from __future__ import annotations

import copy as _copy
from collections.abc import Iterator
from dataclasses import dataclass, field

SIZE = 9
DIGITS = frozenset(range(1, SIZE + 1))


def _fresh_candidates() -> set[int]:
    return set(DIGITS)


@dataclass
class Tile:
    """A single cell: remaining candidates, whether it was given, and its value."""

    candidates: set[int] = field(default_factory=_fresh_candidates)
    predefined: bool = False
    value: int | None = None

    def set(self, value: int, predefined: bool) -> None:
        """Collapse the tile to ``value``."""
        self.predefined = predefined
        self.value = value
        self.candidates = {value}


def _peers(row: int, col: int) -> Iterator[tuple[int, int]]:
    """Yield every position sharing a column, row or 3x3 box with (row, col)."""
    box_row, box_col = row // 3 * 3, col // 3 * 3
    for x in range(SIZE):
        yield x, col
        yield row, x
        yield box_row + x // 3, box_col + x % 3


class Board:
    """A 9x9 grid of tiles with candidate propagation."""

    def __init__(self) -> None:
        self.tiles: list[list[Tile]] = [[Tile() for _ in range(SIZE)] for _ in range(SIZE)]
        self.next = -1
        self.nextval = -1

    def __getitem__(self, key: int | tuple[int, int]) -> Tile:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < SIZE and 0 <= col < SIZE):
                raise IndexError(f"position {key} is outside the board")
            return self.tiles[row][col]
        if not 0 <= key < SIZE * SIZE:
            raise IndexError(f"index {key} is outside the board")
        row, col = divmod(key, SIZE)
        return self.tiles[row][col]

    def copy(self) -> Board:
        """Return a board with copies of this board's tiles; search state is reset."""
        clone = Board()
        clone.tiles = _copy.deepcopy(self.tiles)
        return clone

    def _eliminate(self, row: int, col: int, value: int) -> None:
        for r, c in _peers(row, col):
            self.tiles[r][c].candidates.discard(value)

    def reset_tile_positions(self) -> None:
        """Rebuild every open tile's candidates from the collapsed tiles."""
        collapsed = []
        for row, line in enumerate(self.tiles):
            for col, tile in enumerate(line):
                if tile.value is not None:
                    collapsed.append((row, col))
                else:
                    line[col] = Tile()
        for row, col in collapsed:
            self._eliminate(row, col, self.tiles[row][col].value)

    def update_at_pos(self, row: int, col: int, value: int, predefined: bool, reset: bool) -> None:
        """Collapse the tile at (row, col) and update candidates."""
        self.tiles[row][col].set(value, predefined)
        if reset:
            self.reset_tile_positions()
        else:
            self._eliminate(row, col, value)

    def update_at_index(self, index: int, value: int, predefined: bool, reset: bool) -> None:
        """Collapse the tile at flat index ``index`` (row-major)."""
        row, col = divmod(index, SIZE)
        self.update_at_pos(row, col, value, predefined, reset)


def check_board(board: Board) -> bool:
    """Return True if every tile is filled and each row and column holds 1-9."""
    tiles = board.tiles
    for i in range(SIZE):
        row = [tiles[i][j].value for j in range(SIZE)]
        column = [tiles[j][i].value for j in range(SIZE)]
        if None in row or None in column:
            return False
        if set(row) != DIGITS or set(column) != DIGITS:
            return False
    return True