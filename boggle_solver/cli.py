"""
Command-line solver.

Usage:
    boggle-solve <dictionary> <board> [--mode score|words]

Examples:
    boggle-solve dictionary-yawl.txt board-q.txt
    boggle-solve dictionary-algs4.txt board4x4.txt --mode words

The board file starts with "<rows> <cols>" followed by one tile per cell
("Qu" for the Q tile). Prints "Score = N" for the words found.
"""
import argparse
import logging
import sys

from boggle_solver.board import load_board
from boggle_solver.metrics import StageTimer
from boggle_solver.scoring import score_of, total_score
from boggle_solver.settings import LOG_LEVELS, settings
from boggle_solver.solver import load_trie, solve

logger = logging.getLogger("boggle")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Boggle Solver")
    parser.add_argument("dictionary", help="Word list, one or more words per line")
    parser.add_argument("board", help="Board file")
    parser.add_argument("--mode", choices=["score", "words"], default="score",
                        help="'score' prints the total, 'words' also lists each word (default: score)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default=settings.LOG_LEVEL.upper(),
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    timer = StageTimer(label="cli")
    try:
        with timer.stage("load_dictionary"):
            trie = load_trie(args.dictionary)
        with timer.stage("load_board"):
            board = load_board(args.board)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    with timer.stage("solve"):
        words = solve(board, trie)

    if args.mode == "words":
        for word in words:
            print(f"{score_of(word):>3}  {word}")

    print(f"Score = {total_score(words)}")
    logger.debug("Timings: %s", timer.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
