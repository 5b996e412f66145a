"""Pseudo-legal move generation, one generator per piece kind.

Generators only look at movement patterns and occupancy. Whether a move
leaves the mover's king in check is decided on top of them by
:class:`~chessconsole.core.rules.Rules`. Generators never mutate pieces.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessconsole.core.enums import Color, PieceType
from chessconsole.core.types import Coordinate, is_valid_coordinate

if TYPE_CHECKING:
    from chessconsole.core.board import Board
    from chessconsole.core.piece import Piece


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White advances toward row 0, Black toward row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}

MoveGenFn = Callable[["Piece", "Board"], list[Coordinate]]


# -- Public API -------------------------------------------------------------


def pseudo_legal_moves(piece: Piece, board: Board) -> list[Coordinate]:
    """Destinations reachable by *piece* ignoring king safety."""
    return _GENERATORS[piece.piece_type](piece, board)


def attacks_square(board: Board, target: Coordinate, by_color: Color) -> bool:
    """Does any *by_color* piece have *target* among its pseudo-legal moves?"""
    for piece in board.pieces(by_color):
        if target in pseudo_legal_moves(piece, board):
            return True
    return False


# -- Piece-specific generators ---------------------------------------------


def _gen_pawn(piece: Piece, board: Board) -> list[Coordinate]:
    moves: list[Coordinate] = []
    direction = PAWN_DIRECTION[piece.color]
    origin = piece.position

    one_step = origin.offset(0, direction)
    if is_valid_coordinate(one_step) and board.is_empty(one_step):
        moves.append(one_step)
        if piece.can_double_step:
            two_step = origin.offset(0, 2 * direction)
            if is_valid_coordinate(two_step) and board.is_empty(two_step):
                moves.append(two_step)

    for df in (-1, 1):
        cap_sq = origin.offset(df, direction)
        if not is_valid_coordinate(cap_sq):
            continue
        target = board.piece_at(cap_sq)
        if target is not None and target.color != piece.color:
            moves.append(cap_sq)
    return moves


def _gen_steps(
    piece: Piece, board: Board, offsets: tuple[tuple[int, int], ...]
) -> list[Coordinate]:
    moves: list[Coordinate] = []
    for df, dr in offsets:
        to_sq = piece.position.offset(df, dr)
        if not is_valid_coordinate(to_sq):
            continue
        target = board.piece_at(to_sq)
        if target is None or target.color != piece.color:
            moves.append(to_sq)
    return moves


def _gen_sliding(
    piece: Piece, board: Board, directions: tuple[tuple[int, int], ...]
) -> list[Coordinate]:
    moves: list[Coordinate] = []
    for df, dr in directions:
        to_sq = piece.position.offset(df, dr)
        while is_valid_coordinate(to_sq):
            target = board.piece_at(to_sq)
            if target is None:
                moves.append(to_sq)
                to_sq = to_sq.offset(df, dr)
                continue
            if target.color != piece.color:
                moves.append(to_sq)
            break
    return moves


def _gen_knight(piece: Piece, board: Board) -> list[Coordinate]:
    return _gen_steps(piece, board, KNIGHT_OFFSETS)


def _gen_king(piece: Piece, board: Board) -> list[Coordinate]:
    return _gen_steps(piece, board, KING_OFFSETS)


def _gen_bishop(piece: Piece, board: Board) -> list[Coordinate]:
    return _gen_sliding(piece, board, BISHOP_DIRS)


def _gen_rook(piece: Piece, board: Board) -> list[Coordinate]:
    return _gen_sliding(piece, board, ROOK_DIRS)


def _gen_queen(piece: Piece, board: Board) -> list[Coordinate]:
    return _gen_sliding(piece, board, QUEEN_DIRS)


_GENERATORS: dict[PieceType, MoveGenFn] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: _gen_knight,
    PieceType.BISHOP: _gen_bishop,
    PieceType.ROOK: _gen_rook,
    PieceType.QUEEN: _gen_queen,
    PieceType.KING: _gen_king,
}
