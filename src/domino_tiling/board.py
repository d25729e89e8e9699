"""Classes and functions for representing the game board."""

from array import array
from collections.abc import Collection, Iterable
from enum import IntEnum
from typing import NamedTuple, TypeAlias

import numpy as np
from bitarray import bitarray
from sortedcontainers import SortedDict

from domino_tiling.pieces import Domino

Location: TypeAlias = tuple[int, int]
"""An `(x, y)` board coordinate."""

CELL_WIDTH = 5
"""Width (in characters) of a single rendered cell."""

UNOCCUPIED_MARKER = "X"
"""Marker rendered for unoccupied cells when showing piece IDs."""


class Orientation(IntEnum):
    """Direction from a piece's first key (origin cell) to its second key."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


_OFFSETS: dict[int, tuple[int, int]] = {
    # (dx, dy) from the origin cell to the neighbor cell
    Orientation.RIGHT: (1, 0),
    Orientation.DOWN: (0, 1),
    Orientation.LEFT: (-1, 0),
    Orientation.UP: (0, -1),
}


def _offset(orientation: int) -> tuple[int, int]:
    offset = _OFFSETS.get(orientation)
    if offset is None:
        raise RuntimeError(f"Invalid orientation: {orientation!r}")
    return offset


class Cell(NamedTuple):
    """Snapshot of a single registered cell."""

    occupied: bool
    placed_piece_id: int
    key: int


class Board:
    """A sparse 2D grid of numbered cells.

    Coordinates that were never registered are holes.  Registered cells are kept in
    x-major order (x first, then y), which is the scan order used when looking for
    placements.  Cell data is stored in flat arrays indexed by registration slot, so
    that copying a board for a search branch is cheap.
    """

    def __init__(self, cells: Iterable[tuple[int, int, int]] = ()) -> None:
        self._slots: SortedDict = SortedDict()
        """Mapping from registered locations to indexes into the cell arrays."""

        self._keys: array[int] = array("i")
        self._placed: array[int] = array("i")
        self._occupied: bitarray = bitarray()

        self.n_cols: int = 0
        """Width of the bounding rectangle (one past the largest x registered)."""

        self.n_rows: int = 0
        """Height of the bounding rectangle (one past the largest y registered)."""

        for x, y, key in cells:
            self.register_cell(x, y, key)

    def copy(self) -> "Board":
        """Generate an independent copy of the board."""
        board = Board()
        board._slots = self._slots.copy()
        board._keys = array("i", self._keys)
        board._placed = array("i", self._placed)
        board._occupied = self._occupied.copy()
        board.n_cols = self.n_cols
        board.n_rows = self.n_rows
        return board

    def register_cell(self, x: int, y: int, key: int) -> None:
        """Add an unoccupied cell with the given key at `(x, y)`.

        Registering the same location twice overwrites the earlier cell, including
        its occupancy.
        """
        if x < 0 or y < 0:
            raise ValueError(f"Cell coordinates must be non-negative, got ({x}, {y}).")

        slot = self._slots.get((x, y))
        if slot is None:
            self._slots[(x, y)] = len(self._keys)
            self._keys.append(key)
            self._placed.append(0)
            self._occupied.append(0)
        else:
            self._keys[slot] = key
            self._placed[slot] = 0
            self._occupied[slot] = 0

        self.n_cols = max(self.n_cols, x + 1)
        self.n_rows = max(self.n_rows, y + 1)

    def __len__(self) -> int:
        """Number of registered cells."""
        return len(self._keys)

    def __contains__(self, location: object) -> bool:
        return location in self._slots

    def __repr__(self) -> str:
        return (
            f"Board(cells={len(self)}, occupied={self.occupied_count()}, "
            f"size={self.n_cols}x{self.n_rows})"
        )

    def cell(self, x: int, y: int) -> Cell | None:
        """Get the cell at `(x, y)`, or None if there is no cell there."""
        slot = self._slots.get((x, y))
        if slot is None:
            return None
        return Cell(bool(self._occupied[slot]), self._placed[slot], self._keys[slot])

    def cell_at(self, index: int) -> Cell:
        """Get the `index`-th registered cell in scan order."""
        if not 0 <= index < len(self):
            raise IndexError(f"Cell index {index} out of range for {len(self)} cells.")
        _, slot = self._slots.peekitem(index)
        return Cell(bool(self._occupied[slot]), self._placed[slot], self._keys[slot])

    def occupied_count(self) -> int:
        """Number of registered cells covered by a piece."""
        return self._occupied.count()

    def neighbor(self, location: Location, orientation: int) -> Location | None:
        """Get the registered location adjacent to `location` in the given orientation.

        Returns None if the adjacent coordinate is a hole or lies outside the board.

        Raises:
            RuntimeError: If `orientation` is not one of the four orientations.
        """
        dx, dy = _offset(orientation)
        x, y = location
        adjacent = (x + dx, y + dy)
        return adjacent if adjacent in self else None

    def candidate_placements(self, piece: Domino, orientation: int) -> list[Location]:
        """Get all origin locations where `piece` fits in the given orientation.

        A location qualifies if its cell is unoccupied with key `piece.key_a`, and its
        neighbor in the direction of `orientation` exists, is unoccupied and has key
        `piece.key_b`.  Locations are returned in scan order.
        """
        _offset(orientation)

        placements: list[Location] = []
        for location, slot in self._slots.items():
            if self._occupied[slot] or self._keys[slot] != piece.key_a:
                continue
            adjacent = self.neighbor(location, orientation)
            if adjacent is None:
                continue
            other = self._slots[adjacent]
            if not self._occupied[other] and self._keys[other] == piece.key_b:
                placements.append(location)
        return placements

    def place(self, piece: Domino, location: Location, orientation: int) -> None:
        """Cover `location` and its neighbor in the given orientation with `piece`.

        The placement is not re-validated: `location` should come from
        `candidate_placements()` for the same piece and orientation.
        """
        adjacent = self.neighbor(location, orientation)
        if adjacent is None:
            raise ValueError(f"No cell adjacent to {location} in orientation {orientation}.")
        for slot in (self._slots[location], self._slots[adjacent]):
            self._occupied[slot] = 1
            self._placed[slot] = piece.unique_id

    def is_complete(self) -> bool:
        """Check if every registered cell is occupied."""
        return self._occupied.all()

    def is_solution_feasible(self, pieces: Collection[Domino]) -> bool:
        """Check whether the pieces could possibly cover the board.

        This only compares counts (two cells per piece); it does not guarantee that a
        key-compatible covering exists.
        """
        return len(self) == 2 * len(pieces)

    def render(self, show_piece_ids: bool = False) -> str:
        """Return a text grid of the board, one line per row (y) from top to bottom.

        Each cell is a fixed-width field showing the cell's key, or the ID of the piece
        covering it if `show_piece_ids` is True (unoccupied cells then show
        `UNOCCUPIED_MARKER`).  Holes are left blank.
        """
        grid = np.full((self.n_rows, self.n_cols), " " * CELL_WIDTH, dtype=object)
        for (x, y), slot in self._slots.items():
            if not show_piece_ids:
                value = str(self._keys[slot])
            elif self._occupied[slot]:
                value = str(self._placed[slot])
            else:
                value = UNOCCUPIED_MARKER
            grid[y, x] = f"{value:^{CELL_WIDTH}}"
        return "\n".join("".join(row) for row in grid)
