"""Core domain layer — pure chess logic with zero external dependencies.

Quick start::

    from chessconsole.core import Board, Color, Rules, parse_square

    board = Board.initial()
    Rules.is_move_legal(board, parse_square("e2"), parse_square("e4"))  # True
    Rules.game_status(board, Color.WHITE)  # GameStatus.ONGOING
"""

from chessconsole.core.board import Board, MoveRecorder
from chessconsole.core.enums import Color, GameStatus, PieceType
from chessconsole.core.errors import ChessConsoleError, KingNotFoundError
from chessconsole.core.move_generator import attacks_square, pseudo_legal_moves
from chessconsole.core.notation import (
    STARTING_PLACEMENT,
    board_from_placement,
    board_to_placement,
)
from chessconsole.core.piece import Piece
from chessconsole.core.rules import Rules
from chessconsole.core.types import (
    INVALID_COORDINATE,
    Coordinate,
    is_valid_coordinate,
    move_name,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Types / helpers
    "INVALID_COORDINATE",
    "Coordinate",
    "is_valid_coordinate",
    "move_name",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "MoveRecorder",
    "Piece",
    "Rules",
    "attacks_square",
    "pseudo_legal_moves",
    # Errors
    "ChessConsoleError",
    "KingNotFoundError",
    # Notation
    "STARTING_PLACEMENT",
    "board_from_placement",
    "board_to_placement",
]
