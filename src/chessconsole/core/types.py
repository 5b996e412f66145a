"""Coordinate type and notation helpers.

Board layout (row 0 at the top, as displayed)::

    a8=(0, 0), b8=(1, 0), ..., h8=(7, 0)
    ...
    a1=(0, 7), b1=(1, 7), ..., h1=(7, 7)

``file`` runs a–h left to right, ``rank`` is the row index counted from the
top, so algebraic rank = 8 - ``rank``.
"""

from __future__ import annotations

from typing import NamedTuple


class Coordinate(NamedTuple):
    """A (file, rank) pair. May lie off the board; see :func:`is_valid_coordinate`."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Coordinate:
        return Coordinate(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        if is_valid_coordinate(self):
            return square_name(self)
        return f"({self.file}, {self.rank})"


# Returned by input collaborators for anything that is not a square.
INVALID_COORDINATE = Coordinate(-1, -1)

FILES = "abcdefgh"
RANKS = "12345678"


def is_valid_coordinate(coord: Coordinate) -> bool:
    """Range check only: both components in [0, 8)."""
    return 0 <= coord.file < 8 and 0 <= coord.rank < 8


def square_name(coord: Coordinate) -> str:
    """Algebraic name, e.g. (4, 6) → 'e2'."""
    return chr(ord("a") + coord.file) + str(8 - coord.rank)


def parse_square(name: str) -> Coordinate:
    """Parse a square name, e.g. 'e2' → (4, 6)."""
    text = name.strip().lower()
    if len(text) != 2 or text[0] not in FILES or text[1] not in RANKS:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(ord(text[0]) - ord("a"), 8 - int(text[1]))


def move_name(from_sq: Coordinate, to_sq: Coordinate) -> str:
    """Human-readable move string, e.g. 'e2-e4'."""
    return f"{square_name(from_sq)}-{square_name(to_sq)}"


def all_coordinates() -> list[Coordinate]:
    """Every on-board coordinate, row by row from the top."""
    return [Coordinate(f, r) for r in range(8) for f in range(8)]


# ── Named square constants ──────────────────────────────────────────────────

A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 0) for f in range(8))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 1) for f in range(8))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 2) for f in range(8))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 3) for f in range(8))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 4) for f in range(8))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 5) for f in range(8))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 6) for f in range(8))
A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 7) for f in range(8))
