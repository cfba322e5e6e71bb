from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import numpy as np

from boggle_solver.board import Board
from boggle_solver.tst import TernarySearchTrie

logger = logging.getLogger("boggle")

MIN_WORD_LENGTH = 3


def build_trie(words: Iterable[str]) -> TernarySearchTrie:
    """Insert each word, keyed upper-case, with its position in the list as value."""
    trie = TernarySearchTrie()
    for i, word in enumerate(words):
        word = word.strip().upper()
        if word:
            trie.insert(word, i)
    return trie


def load_trie(path: str | Path) -> TernarySearchTrie:
    with open(path, "r", encoding="utf-8") as f:
        trie = build_trie(f.read().split())
    logger.info("Loaded %d words from %s", len(trie), path)
    return trie


def solve(board: Board, trie: TernarySearchTrie) -> list[str]:
    """Find every dictionary word traceable on the board.

    Runs a depth-first search from each cell over the 8 neighbours, never
    reusing a cell within one path. A branch is abandoned as soon as the
    trie has no key starting with the letters traced so far. A ``Q`` cell
    contributes ``QU``.

    Returns distinct words of at least MIN_WORD_LENGTH letters in the
    order the search first reaches them.
    """
    if board is None:
        raise ValueError("board must not be None")

    rows, cols = board.rows(), board.cols()
    found: dict[str, None] = {}
    if rows == 0 or cols == 0:
        return []

    def dfs(row: int, col: int, visited: np.ndarray, prefix: str):
        visited[row, col] = True
        letter = board.letter_at(row, col)
        word = prefix + ("QU" if letter == "Q" else letter)

        if not trie.has_prefix(word):
            return

        if len(word) >= MIN_WORD_LENGTH and trie.contains(word):
            found.setdefault(word)

        for nr in range(max(row - 1, 0), min(row + 2, rows)):
            for nc in range(max(col - 1, 0), min(col + 2, cols)):
                if not visited[nr, nc]:
                    dfs(nr, nc, visited, word)
                    visited[nr, nc] = False

    for r in range(rows):
        for c in range(cols):
            dfs(r, c, np.zeros((rows, cols), dtype=bool), "")

    logger.debug("Solved %dx%d board: %d words", rows, cols, len(found))
    return list(found)
