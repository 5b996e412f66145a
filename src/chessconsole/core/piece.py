"""Piece — kind, color and cached board position."""

from __future__ import annotations

from dataclasses import dataclass

from chessconsole.core.enums import Color, PieceType
from chessconsole.core.types import INVALID_COORDINATE, Coordinate

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {
    "P": (Color.WHITE, PieceType.PAWN),
    "N": (Color.WHITE, PieceType.KNIGHT),
    "B": (Color.WHITE, PieceType.BISHOP),
    "R": (Color.WHITE, PieceType.ROOK),
    "Q": (Color.WHITE, PieceType.QUEEN),
    "K": (Color.WHITE, PieceType.KING),
    "p": (Color.BLACK, PieceType.PAWN),
    "n": (Color.BLACK, PieceType.KNIGHT),
    "b": (Color.BLACK, PieceType.BISHOP),
    "r": (Color.BLACK, PieceType.ROOK),
    "q": (Color.BLACK, PieceType.QUEEN),
    "k": (Color.BLACK, PieceType.KING),
}

_SYMBOLS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}

# Row index pawns start on.
PAWN_HOME_RANK: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


@dataclass(eq=False, slots=True)
class Piece:
    """A piece on (or captured from) the board.

    Pieces compare by identity: two white knights are different pieces.
    ``position`` is owned by :class:`~chessconsole.core.board.Board`, which
    writes it together with the grid cell.
    """

    color: Color
    piece_type: PieceType
    position: Coordinate = INVALID_COORDINATE
    has_moved: bool = False

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"Piece({self.symbol!r} at {self.position})"

    @property
    def symbol(self) -> str:
        """Uppercase for White, lowercase for Black, e.g. 'N' / 'n'."""
        return _SYMBOLS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str, position: Coordinate = INVALID_COORDINATE) -> Piece:
        """Create piece from its symbol, e.g. 'n' → black knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype, position)

    # ── Pawn double-step bookkeeping ─────────────────────────────────────

    @property
    def can_double_step(self) -> bool:
        """Pawn that has never moved and still stands on its home rank."""
        return (
            self.piece_type == PieceType.PAWN
            and not self.has_moved
            and self.position.rank == PAWN_HOME_RANK[self.color]
        )

    def mark_moved(self) -> None:
        """Record a committed move. One-way; never reset."""
        self.has_moved = True
