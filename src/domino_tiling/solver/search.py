"""Recursive backtracking search for domino coverings."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from time import time
from typing import TextIO

from domino_tiling.board import Board, Orientation
from domino_tiling.pieces import Domino
from domino_tiling.solver.config import config as solver_config
from domino_tiling.solver.utils import int_comma, time_str


@dataclass
class SolverStats:
    """Statistics collected during solving."""

    boards_checked: int = 0
    """Number of search states visited."""

    placements_tried: int = 0
    """Number of pieces placed on a branch copy of the board."""

    start_time: float = field(default_factory=time)
    """Timestamp when solving started."""

    fewest_pieces_left: int | None = None
    """Smallest number of unplaced pieces seen in any search state."""

    report_interval: int = field(default_factory=lambda: solver_config.report_interval)
    """Log a progress line every this many board states."""

    logf: TextIO | None = None
    """Stream for progress lines, or None to stay silent."""

    def __post_init__(self) -> None:
        if self.report_interval <= 0:
            raise ValueError(f"report_interval must be positive, got {self.report_interval}.")

    def visit(self, pieces_left: int, orientation: int) -> None:
        """Record a visited search state, reporting progress when due."""
        self.boards_checked += 1
        if self.fewest_pieces_left is None or pieces_left < self.fewest_pieces_left:
            self.fewest_pieces_left = pieces_left

        if self.logf is not None and self.boards_checked % self.report_interval == 0:
            elapsed_time = time() - self.start_time
            print(
                f"Checked {int_comma(self.boards_checked)} board states "
                f"after {time_str(elapsed_time)}; {pieces_left} pieces left at orientation "
                f"{orientation}, fewest pieces left {self.fewest_pieces_left}.",
                file=self.logf,
                flush=True,
            )


def search(
    remaining_pieces: Sequence[Domino],
    board: Board,
    orientation: int = Orientation.RIGHT,
    *,
    stats: SolverStats | None = None,
) -> Board:
    """Search for a placement of `remaining_pieces` covering the rest of `board`.

    Pieces are taken from the end of `remaining_pieces`.  For the current piece, every
    later orientation is explored first (recursively, for the same piece); only if that
    fails are the placements at `orientation` tried, in the board's scan order.  Each
    placement is made on a copy of the board and the search continues with the next
    piece from orientation 0.  The first complete board found is returned.

    A symmetric piece is not tried in the UP orientation, since it covers the same cell
    pairs as DOWN.

    Neither `remaining_pieces` nor `board` is modified.

    Args:
        remaining_pieces: Pieces still to be placed.
        board: Current board state.
        orientation: First orientation to try for the last piece in `remaining_pieces`.
        stats: Optional statistics collector.

    Returns:
        A complete board if one was found, otherwise `board` itself.  Callers must check
        `is_complete()` on the result.
    """
    if stats is not None:
        stats.visit(len(remaining_pieces), orientation)

    if not remaining_pieces:
        return board
    if orientation > Orientation.UP:
        return board

    piece = remaining_pieces[-1]
    if piece.is_symmetric and orientation == Orientation.UP:
        return board

    result = search(remaining_pieces, board, orientation + 1, stats=stats)
    if result.is_complete():
        return result

    rest = remaining_pieces[:-1]
    for location in board.candidate_placements(piece, orientation):
        branch = board.copy()
        branch.place(piece, location, orientation)
        if stats is not None:
            stats.placements_tried += 1

        result = search(rest, branch, Orientation.RIGHT, stats=stats)
        if result.is_complete():
            return result

    return board
