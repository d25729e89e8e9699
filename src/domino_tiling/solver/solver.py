"""Main solver module for domino tiling puzzles."""

import sys
from datetime import datetime
from pathlib import Path
from time import time
from typing import TextIO

from domino_tiling.board import Board
from domino_tiling.puzzle_input import Puzzle
from domino_tiling.solver.config import config as solver_config
from domino_tiling.solver.search import SolverStats, search
from domino_tiling.solver.utils import TIMESTAMP_FMT, int_comma, time_str

PIECE_ID_HEADER = "Printing board with unique piece IDs:"
PIECE_ID_NOTE = "NOTE: capital X correlates to an unoccupied spot"
KEY_HEADER = "Printing board:"


def print_board(board: Board, *, show_piece_ids: bool = False, file: TextIO | None = None) -> None:
    """Print a board with its header lines."""
    if show_piece_ids:
        print(PIECE_ID_HEADER, file=file)
        print(PIECE_ID_NOTE, file=file)
    else:
        print(KEY_HEADER, file=file)
    print(board.render(show_piece_ids=show_piece_ids), file=file, flush=True)


def run(puzzle: Puzzle) -> Board | None:
    """Run the solver on the given puzzle.

    Args:
        puzzle (Puzzle): The puzzle to solve.

    Returns:
        The covered board, or None if no covering was found.
    """
    print(f"puzzle: {puzzle}")

    logfile = Path(solver_config.log_dir) / f"{puzzle.name}.log"
    print(f"Log file: {logfile}")

    logfile.parent.mkdir(parents=True, exist_ok=True)

    with open(logfile, "w", encoding="utf-8") as logf:
        try:
            return solve_one(puzzle, logf=logf)
        except KeyboardInterrupt:
            print("Solver interrupted by user.", file=logf, flush=True)
            print("Solver interrupted by user.")
            sys.exit(1)


def solve_one(puzzle: Puzzle, *, logf: TextIO) -> Board | None:
    """Attempt to cover the puzzle's board with its pieces.

    Args:
        puzzle (Puzzle): The puzzle to solve.
        logf: File object to log the solving process.

    Returns:
        The covered board, or None if the puzzle is infeasible or no covering exists.
    """
    print(f"Selected puzzle: {puzzle.name}", file=logf, flush=True)
    print(f"Pieces: {' '.join(str(piece) for piece in puzzle.pieces)}", file=logf, flush=True)
    print("Initial grid:", file=logf, flush=True)
    print("", file=logf, flush=True)

    board = puzzle.build_board()
    print(board.render(), file=logf, flush=True)
    print("", file=logf, flush=True)
    print(f"Number of cells: {len(board)}", file=logf, flush=True)
    print(f"Number of pieces: {len(puzzle.pieces)}", file=logf, flush=True)

    if not board.is_solution_feasible(puzzle.pieces):
        message = (
            f"No solution possible: {len(board)} cells cannot be covered "
            f"by {len(puzzle.pieces)} pieces."
        )
        print(message, file=logf, flush=True)
        print(message)
        return None

    stats = SolverStats(report_interval=solver_config.report_interval, logf=logf)
    start_time_str = datetime.fromtimestamp(stats.start_time).astimezone().strftime(TIMESTAMP_FMT)
    print(f"Start time: {start_time_str}", file=logf, flush=True)

    sys.setrecursionlimit(max(sys.getrecursionlimit(), solver_config.recursion_limit))

    print(f"Attempting to solve: {puzzle.name}")
    result = search(puzzle.pieces, board, stats=stats)

    elapsed = time_str(time() - stats.start_time)
    print(f"Boards checked: {int_comma(stats.boards_checked)}", file=logf, flush=True)
    print(f"Placements tried: {int_comma(stats.placements_tried)}", file=logf, flush=True)
    print(f"Time taken: {elapsed}", file=logf, flush=True)

    if not result.is_complete():
        print("No solution found.", file=logf, flush=True)
        print_board(result, show_piece_ids=True, file=logf)

        print("No solution found.")
        print_board(result)
        if solver_config.show_piece_ids:
            print_board(result, show_piece_ids=True)
        print(f"Boards checked: {int_comma(stats.boards_checked)}")
        print(f"Time taken: {elapsed}")
        return None

    print("Solution found!", file=logf, flush=True)
    print_board(result, show_piece_ids=True, file=logf)

    print("Solution found!")
    print_board(result)
    if solver_config.show_piece_ids:
        print_board(result, show_piece_ids=True)
    print(f"Boards checked: {int_comma(stats.boards_checked)}")
    print(f"Time taken: {elapsed}")
    return result
