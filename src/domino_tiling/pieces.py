"""Domino pieces."""

from collections.abc import Iterable
from typing import NamedTuple


class Domino(NamedTuple):
    """A domino piece bearing two keys.

    When placed, `key_a` must match the origin cell and `key_b` the neighboring cell
    in the direction of the placement's orientation.
    """

    key_a: int
    """Key matched against the origin cell."""

    key_b: int
    """Key matched against the neighbor cell."""

    unique_id: int
    """Creation-order index of the piece.  Only used for display."""

    @property
    def is_symmetric(self) -> bool:
        """Whether both keys are equal (the piece looks the same when flipped)."""
        return self.key_a == self.key_b

    def __str__(self) -> str:
        return f"{self.key_a}-{self.key_b}"


def create_pieces(pairs: Iterable[tuple[int, int]]) -> list[Domino]:
    """Create dominoes from `(key_a, key_b)` pairs, numbering them in input order."""
    return [Domino(key_a, key_b, unique_id) for unique_id, (key_a, key_b) in enumerate(pairs)]
