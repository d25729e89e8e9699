"""Domino Tiling Puzzle Solver.

Attempts to cover every cell of a board with a set of domino pieces, where each piece
must lie on two adjacent cells whose keys match the piece's keys.  The board may have
holes (positions with no cell).  Uses backtracking over piece orientations and
placements to find the first complete covering.
"""

from sys import argv, exit

from .puzzle_input import load_puzzle
from .solver import solver


def main() -> None:
    """Main entry point for the domino tiling solver."""
    # Expect two arguments: the piece file, then the board file
    if len(argv) != 3:
        print("Usage: python -m domino_tiling <path_to_pieces_file> <path_to_board_file>")
        exit(1)
    pieces_path, board_path = argv[1:3]

    try:
        puzzle = load_puzzle(pieces_path, board_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        exit(1)

    if solver.run(puzzle) is None:
        exit(1)
