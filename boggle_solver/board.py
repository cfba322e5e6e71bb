"""Letter grid for the solver, plus the board-file reader.

Board files start with ``rows cols`` followed by ``rows * cols`` tiles
separated by whitespace. The ``Qu`` tile is written as ``Qu`` in the file
and stored as a plain ``Q``; the solver expands it back when tracing words.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


def _normalize_tile(tile: str) -> str:
    if not isinstance(tile, str):
        raise ValueError(f"Invalid tile {tile!r}: expected a string")
    letter = tile.strip().upper()
    if letter == "QU":
        return "Q"
    if len(letter) != 1 or not ("A" <= letter <= "Z"):
        raise ValueError(f"Invalid tile {tile!r}: expected a single letter A-Z or 'Qu'")
    return letter


class Board:
    """Read-only rows x cols grid of uppercase letters."""

    def __init__(self, grid: Sequence[Sequence[str]]):
        if grid is None:
            raise ValueError("grid must not be None")
        cells: list[list[str]] = []
        for r, row in enumerate(grid):
            # A row may be a plain string like "CATS"; "Qu" tiles need a list
            letters = [_normalize_tile(t) for t in row]
            if cells and len(letters) != len(cells[0]):
                raise ValueError(
                    f"Row {r} has {len(letters)} tiles, expected {len(cells[0])}"
                )
            cells.append(letters)
        self._cells = cells
        self._rows = len(cells)
        self._cols = len(cells[0]) if cells else 0

    def rows(self) -> int:
        return self._rows

    def cols(self) -> int:
        return self._cols

    def letter_at(self, row: int, col: int) -> str:
        return self._cells[row][col]

    def to_lists(self) -> list[list[str]]:
        """Copy of the grid, with Q shown as the Qu tile."""
        return [["QU" if ch == "Q" else ch for ch in row] for row in self._cells]

    def __str__(self) -> str:
        lines = [f"{self._rows} {self._cols}"]
        for row in self._cells:
            lines.append(" ".join("Qu" if ch == "Q" else ch for ch in row))
        return "\n".join(lines)


def parse_board(text: str) -> Board:
    tokens = text.split()
    if len(tokens) < 2:
        raise ValueError("Board text must start with '<rows> <cols>'")
    try:
        rows, cols = int(tokens[0]), int(tokens[1])
    except ValueError:
        raise ValueError(f"Invalid board header: {tokens[0]!r} {tokens[1]!r}") from None
    if rows < 0 or cols < 0:
        raise ValueError(f"Board dimensions must be non-negative, got {rows}x{cols}")

    tiles = tokens[2:]
    if len(tiles) != rows * cols:
        raise ValueError(f"Expected {rows * cols} tiles for a {rows}x{cols} board, got {len(tiles)}")
    if cols == 0:
        return Board([[] for _ in range(rows)])
    return Board([tiles[r * cols:(r + 1) * cols] for r in range(rows)])


def load_board(path: str | Path) -> Board:
    with open(path, "r", encoding="utf-8") as f:
        return parse_board(f.read())
