"""Piece-placement notation (the first field of FEN)."""

from __future__ import annotations

from chessconsole.core.board import Board
from chessconsole.core.piece import Piece
from chessconsole.core.types import Coordinate

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def board_from_placement(placement: str) -> Board:
    """Build a board from a FEN placement field, e.g. ``"4k3/8/.../4K3"``.

    Only the placement field is read; anything after the first space is
    ignored so full FEN strings are accepted too.
    """
    fields = placement.split()
    if not fields:
        raise ValueError("Empty placement string")
    ranks = fields[0].split("/")
    if len(ranks) != 8:
        raise ValueError(f"Invalid placement (must contain 8 ranks): {placement!r}")

    board = Board()
    for rank_idx, rank_text in enumerate(ranks):
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= 8):
                    raise ValueError(f"Invalid placement digit {ch!r}: {placement!r}")
                file += step
            else:
                if file >= 8:
                    raise ValueError(f"Invalid placement rank width: {placement!r}")
                board.place(Piece.from_char(ch), Coordinate(file, rank_idx))
                file += 1
            if file > 8:
                raise ValueError(f"Invalid placement rank width: {placement!r}")
        if file != 8:
            raise ValueError(f"Invalid placement rank width: {placement!r}")
    return board


def board_to_placement(board: Board) -> str:
    """Serialise the board as a FEN placement field."""
    ranks: list[str] = []
    for rank_idx in range(8):
        text = ""
        empty = 0
        for file in range(8):
            piece = board.piece_at(Coordinate(file, rank_idx))
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += piece.symbol
        if empty:
            text += str(empty)
        ranks.append(text)
    return "/".join(ranks)
