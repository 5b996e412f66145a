"""Board — the 8x8 grid and the raw move primitives built on it."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Protocol

from chessconsole.core.enums import Color, PieceType
from chessconsole.core.errors import KingNotFoundError
from chessconsole.core.move_generator import attacks_square, pseudo_legal_moves
from chessconsole.core.piece import Piece
from chessconsole.core.types import Coordinate, is_valid_coordinate, move_name

BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class MoveRecorder(Protocol):
    """Anything :meth:`Board.move_piece` can report captures and moves to."""

    last_move: str

    def add_captured_piece(self, piece: Piece) -> None: ...


@dataclass(slots=True)
class _ScratchRecord:
    """Throwaway recorder for speculative moves."""

    last_move: str = ""
    captured: list[Piece] = field(default_factory=list)

    def add_captured_piece(self, piece: Piece) -> None:
        self.captured.append(piece)


class Board:
    """Mutable 8x8 grid of optional pieces.

    The board is the only writer of piece placement: every grid write that
    moves a piece also updates ``piece.position``.
    """

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        # [rank][file], rank 0 is the top row (algebraic rank 8).
        self._grid: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]

    # -- Element access -----------------------------------------------------

    @staticmethod
    def is_valid(coord: Coordinate) -> bool:
        return is_valid_coordinate(coord)

    def piece_at(self, coord: Coordinate) -> Piece | None:
        if not is_valid_coordinate(coord):
            raise ValueError(f"Coordinate off board: {coord}")
        return self._grid[coord.rank][coord.file]

    def is_empty(self, coord: Coordinate) -> bool:
        return self.piece_at(coord) is None

    def place(self, piece: Piece, coord: Coordinate) -> None:
        """Put *piece* on an empty square."""
        if self.piece_at(coord) is not None:
            raise ValueError(f"Square {coord} is already occupied")
        self._grid[coord.rank][coord.file] = piece
        piece.position = coord

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> list[Piece]:
        """Pieces on the board, top row first; optionally only *color*'s."""
        return [
            piece
            for row in self._grid
            for piece in row
            if piece is not None and (color is None or piece.color == color)
        ]

    def king_position(self, color: Color) -> Coordinate:
        for piece in self.pieces(color):
            if piece.piece_type == PieceType.KING:
                return piece.position
        raise KingNotFoundError(color)

    # -- Raw move primitives ------------------------------------------------

    def move_piece(
        self, from_sq: Coordinate, to_sq: Coordinate, state: MoveRecorder
    ) -> Piece | None:
        """Relocate the occupant of *from_sq* to *to_sq* without any checks.

        Whatever stood on *to_sq* is reported to *state* as captured and
        returned. ``state.last_move`` receives the move in ``e2-e4`` form.
        """
        piece = self.piece_at(from_sq)
        if piece is None:
            raise ValueError(f"No piece on {from_sq}")

        captured = self.piece_at(to_sq)
        if captured is not None:
            state.add_captured_piece(captured)

        self._grid[to_sq.rank][to_sq.file] = piece
        self._grid[from_sq.rank][from_sq.file] = None
        piece.position = to_sq

        state.last_move = move_name(from_sq, to_sq)
        return captured

    def undo_move(
        self,
        from_sq: Coordinate,
        to_sq: Coordinate,
        previously_captured: Piece | None,
    ) -> None:
        """Inverse of :meth:`move_piece`, for rolling back a simulation."""
        piece = self.piece_at(to_sq)
        if piece is None:
            raise ValueError(f"No piece on {to_sq} to take back")

        self._grid[from_sq.rank][from_sq.file] = piece
        self._grid[to_sq.rank][to_sq.file] = previously_captured
        piece.position = from_sq
        if previously_captured is not None:
            previously_captured.position = to_sq

    @contextmanager
    def simulate(
        self, from_sq: Coordinate, to_sq: Coordinate
    ) -> Iterator[Piece | None]:
        """Apply a move for the duration of the ``with`` block.

        Captures are recorded against a scratch recorder, never the real
        game state. The board is restored on exit, including on error.
        """
        captured = self.piece_at(to_sq)
        self.move_piece(from_sq, to_sq, _ScratchRecord())
        try:
            yield captured
        finally:
            self.undo_move(from_sq, to_sq, captured)

    # -- Check / mate detection ---------------------------------------------

    def is_in_check(self, color: Color) -> bool:
        """Is *color*'s king attacked by the opponent?"""
        return attacks_square(self, self.king_position(color), color.opposite)

    def has_legal_move(self, color: Color) -> bool:
        """Whether *color* has any move that does not leave its king in check.

        Stops at the first such move.
        """
        for piece in self.pieces(color):
            from_sq = piece.position
            for to_sq in pseudo_legal_moves(piece, self):
                with self.simulate(from_sq, to_sq):
                    safe = not self.is_in_check(color)
                if safe:
                    return True
        return False

    def is_checkmate(self, color: Color) -> bool:
        return self.is_in_check(color) and not self.has_legal_move(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.is_in_check(color) and not self.has_legal_move(color)

    # -- Mutation / copying -------------------------------------------------

    def clear(self) -> None:
        self._grid = [[None] * 8 for _ in range(8)]

    def initialize(self) -> None:
        """Reset to the standard starting position."""
        self.clear()
        for f in range(8):
            self.place(Piece(Color.BLACK, PieceType.PAWN), Coordinate(f, 1))
            self.place(Piece(Color.WHITE, PieceType.PAWN), Coordinate(f, 6))
        for f, pt in enumerate(BACK_RANK):
            self.place(Piece(Color.BLACK, pt), Coordinate(f, 0))
            self.place(Piece(Color.WHITE, pt), Coordinate(f, 7))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        b.initialize()
        return b

    def copy(self) -> Board:
        """Independent board with copies of every piece."""
        b = Board()
        for piece in self.pieces():
            b._grid[piece.position.rank][piece.position.file] = replace(piece)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def _layout(self) -> list[tuple[Color, PieceType] | None]:
        return [
            None if p is None else (p.color, p.piece_type)
            for row in self._grid
            for p in row
        ]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._layout() == other._layout()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(8):
            row = [str(p) if p else "." for p in self._grid[rank]]
            rows.append(f"{8 - rank} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
