"""Loader for piece and board files."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from domino_tiling.board import Board
from domino_tiling.pieces import Domino, create_pieces

VALID_PIECE_PATTERN = re.compile(r"^([0-9])-([0-9])$")
"""Regex pattern for a piece line: two single decimal digits separated by a hyphen."""

HOLE = " "
"""Board file character marking a position with no cell."""


@dataclass
class Puzzle:
    """A puzzle instance: the pieces and the cells of the board."""

    name: str
    """Puzzle name, taken from the board file name."""

    pieces: list[Domino]
    """The pieces to place, numbered in file order."""

    cells: list[tuple[int, int, int]]
    """Board cells as `(x, y, key)` triples, in file order."""

    def __str__(self) -> str:
        """Return a string representation of the Puzzle."""
        return (
            f"{self.name}: {len(self.cells)} cells, {len(self.pieces)} pieces "
            f"({' '.join(str(piece) for piece in self.pieces)})"
        )

    def build_board(self) -> Board:
        """Create a fresh board with all cells registered."""
        return Board(self.cells)


def parse_pieces(lines: Iterable[str]) -> list[tuple[int, int]]:
    """Parse piece specifications of the form `a-b`, one per line.

    Blank lines are skipped.

    Raises:
        ValueError: If a line is not a valid piece specification.
    """
    pairs = []
    for line_no, line in enumerate(lines, start=1):
        text = line.rstrip("\r\n")
        if not text.strip():
            continue
        match = VALID_PIECE_PATTERN.match(text)
        if match is None:
            raise ValueError(
                f"Invalid piece on line {line_no}: {text!r} (expected two digits like '3-5')."
            )
        pairs.append((int(match.group(1)), int(match.group(2))))
    return pairs


def parse_board(lines: Iterable[str]) -> list[tuple[int, int, int]]:
    """Parse a board layout into `(x, y, key)` cell triples.

    Every digit at text row `y`, column `x` is a cell with that digit as its key.
    Spaces are holes.

    Raises:
        ValueError: If the layout contains any other character.
    """
    cells = []
    for y, line in enumerate(lines):
        for x, ch in enumerate(line.rstrip("\r\n")):
            if ch == HOLE:
                continue
            if ch not in "0123456789":
                raise ValueError(f"Invalid board character {ch!r} at row {y + 1}, column {x + 1}.")
            cells.append((x, y, int(ch)))
    return cells


def load_puzzle(pieces_path: PathLike | str, board_path: PathLike | str) -> Puzzle:
    """Load a puzzle from a piece file and a board file.

    Args:
        pieces_path: Path to the piece file (one `a-b` piece per line).
        board_path: Path to the board layout file.

    Raises:
        FileNotFoundError: If either file does not exist.
        ValueError: If either file is malformed.
    """
    pieces_file = Path(pieces_path)
    board_file = Path(board_path)

    with pieces_file.open("r", encoding="utf-8") as f:
        try:
            pairs = parse_pieces(f)
        except ValueError as e:
            raise ValueError(f"{pieces_file}: {e}") from None

    with board_file.open("r", encoding="utf-8") as f:
        try:
            cells = parse_board(f)
        except ValueError as e:
            raise ValueError(f"{board_file}: {e}") from None

    return Puzzle(name=board_file.stem, pieces=create_pieces(pairs), cells=cells)
