"""High-level chess rules: move legality and game status."""

from __future__ import annotations

from chessconsole.core.board import Board
from chessconsole.core.enums import Color, GameStatus
from chessconsole.core.move_generator import pseudo_legal_moves
from chessconsole.core.piece import Piece
from chessconsole.core.types import Coordinate, is_valid_coordinate


class Rules:
    """Static rule-checker that operates on a :class:`Board`.

    Rule subset: no castling, en passant or promotion, and no draws other
    than stalemate.
    """

    @staticmethod
    def is_move_legal(board: Board, from_sq: Coordinate, to_sq: Coordinate) -> bool:
        """Pseudo-legal for the piece on *from_sq* and keeps its king safe."""
        if not (is_valid_coordinate(from_sq) and is_valid_coordinate(to_sq)):
            return False
        piece = board.piece_at(from_sq)
        if piece is None:
            return False
        if to_sq not in pseudo_legal_moves(piece, board):
            return False
        with board.simulate(from_sq, to_sq):
            return not board.is_in_check(piece.color)

    @staticmethod
    def legal_moves(board: Board, piece: Piece) -> list[Coordinate]:
        """Destinations of *piece* that do not expose its own king."""
        from_sq = piece.position
        legal: list[Coordinate] = []
        for to_sq in pseudo_legal_moves(piece, board):
            with board.simulate(from_sq, to_sq):
                if not board.is_in_check(piece.color):
                    legal.append(to_sq)
        return legal

    @staticmethod
    def all_legal_moves(board: Board, color: Color) -> list[tuple[Coordinate, Coordinate]]:
        """Every legal (from, to) pair for *color*."""
        return [
            (piece.position, to_sq)
            for piece in board.pieces(color)
            for to_sq in Rules.legal_moves(board, piece)
        ]

    @staticmethod
    def game_status(board: Board, color: Color) -> GameStatus:
        """Status of *color* as the side to move."""
        if board.is_in_check(color):
            if board.has_legal_move(color):
                return GameStatus.CHECK
            return GameStatus.CHECKMATE
        if board.has_legal_move(color):
            return GameStatus.ONGOING
        return GameStatus.STALEMATE
