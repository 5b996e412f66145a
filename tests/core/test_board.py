"""Tests for Board."""

from collections import Counter

import pytest

from chessconsole.core.board import Board
from chessconsole.core.enums import Color, PieceType
from chessconsole.core.errors import KingNotFoundError
from chessconsole.core.notation import board_from_placement
from chessconsole.core.piece import Piece
from chessconsole.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    A8, B8, C8, D8, E8, F8, G8, H8,
    D5, E2, E4, E5,
    Coordinate,
    all_coordinates,
)
from chessconsole.game.state import GameState


def _cells(board: Board) -> list[Piece | None]:
    return [board.piece_at(c) for c in all_coordinates()]


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        king = board.piece_at(E1)
        assert king is not None
        assert (king.color, king.piece_type) == (Color.WHITE, PieceType.KING)

    def test_black_king_position(self) -> None:
        board = Board.initial()
        king = board.piece_at(E8)
        assert king is not None
        assert (king.color, king.piece_type) == (Color.BLACK, PieceType.KING)

    def test_back_ranks(self) -> None:
        board = Board.initial()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for white_sq, black_sq, pt in zip(
            (A1, B1, C1, D1, E1, F1, G1, H1), (A8, B8, C8, D8, E8, F8, G8, H8), expected
        ):
            white = board.piece_at(white_sq)
            black = board.piece_at(black_sq)
            assert white is not None and white.color == Color.WHITE
            assert black is not None and black.color == Color.BLACK
            assert white.piece_type == pt
            assert black.piece_type == pt

    def test_piece_counts(self) -> None:
        board = Board.initial()
        counts = Counter(p.piece_type for p in board.pieces())
        assert counts == {
            PieceType.PAWN: 16,
            PieceType.ROOK: 4,
            PieceType.KNIGHT: 4,
            PieceType.BISHOP: 4,
            PieceType.QUEEN: 2,
            PieceType.KING: 2,
        }
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_mirror_symmetry(self) -> None:
        board = Board.initial()
        for coord in all_coordinates():
            piece = board.piece_at(coord)
            mirror = board.piece_at(Coordinate(coord.file, 7 - coord.rank))
            if piece is None:
                assert mirror is None
                continue
            assert mirror is not None
            assert mirror.piece_type == piece.piece_type
            assert mirror.color == piece.color.opposite

    def test_positions_match_cells(self) -> None:
        board = Board.initial()
        for coord in all_coordinates():
            piece = board.piece_at(coord)
            if piece is not None:
                assert piece.position == coord

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for rank in range(2, 6):
            for file in range(8):
                assert board.is_empty(Coordinate(file, rank))

    def test_initialize_resets(self) -> None:
        board = Board.initial()
        board.move_piece(E2, E4, GameState())
        board.initialize()
        assert board == Board.initial()


class TestBoardAccess:
    def test_place_and_get(self) -> None:
        board = Board()
        piece = Piece(Color.WHITE, PieceType.PAWN)
        board.place(piece, E4)
        assert board.piece_at(E4) is piece
        assert piece.position == E4

    def test_place_on_occupied_raises(self) -> None:
        board = Board.initial()
        with pytest.raises(ValueError, match="already occupied"):
            board.place(Piece(Color.WHITE, PieceType.PAWN), E2)

    def test_piece_at_off_board_raises(self) -> None:
        with pytest.raises(ValueError, match="off board"):
            Board().piece_at(Coordinate(8, 0))

    def test_is_valid(self) -> None:
        assert Board.is_valid(E4)
        assert not Board.is_valid(Coordinate(-1, 3))

    def test_king_position(self) -> None:
        board = Board.initial()
        assert board.king_position(Color.WHITE) == E1
        assert board.king_position(Color.BLACK) == E8

    def test_king_missing_raises(self) -> None:
        with pytest.raises(KingNotFoundError, match="No white king"):
            Board().king_position(Color.WHITE)

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy.move_piece(E2, E4, GameState())
        assert board != copy
        assert board.piece_at(E2) is not None
        assert board.piece_at(E2).position == E2  # type: ignore[union-attr]

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert board.pieces() == []

    def test_repr(self) -> None:
        text = repr(Board.initial())
        assert text.splitlines()[0] == "8 r n b q k b n r"
        assert "a b c d e f g h" in text


class TestMovePiece:
    def test_relocates_and_records(self) -> None:
        board = Board.initial()
        state = GameState()
        pawn = board.piece_at(E2)
        captured = board.move_piece(E2, E4, state)
        assert captured is None
        assert board.piece_at(E4) is pawn
        assert board.is_empty(E2)
        assert pawn is not None and pawn.position == E4
        assert state.last_move == "e2-e4"

    def test_capture_goes_to_state(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        state = GameState()
        victim = board.piece_at(D5)
        captured = board.move_piece(E4, D5, state)
        assert captured is victim
        assert state.captured_by(Color.WHITE) == [victim]
        assert state.captured_by(Color.BLACK) == []

    def test_empty_origin_raises(self) -> None:
        with pytest.raises(ValueError, match="No piece on e4"):
            Board.initial().move_piece(E4, E5, GameState())


class TestSimulateRestore:
    @pytest.mark.parametrize(
        ("from_sq", "to_sq"),
        [(E4, E5), (E4, D5), (E1, E2), (D5, E4)],
    )
    def test_move_then_undo_restores(self, from_sq: Coordinate, to_sq: Coordinate) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        before = _cells(board)
        positions = [p.position for p in board.pieces()]
        occupant = board.piece_at(to_sq)

        board.move_piece(from_sq, to_sq, GameState())
        board.undo_move(from_sq, to_sq, occupant)

        assert _cells(board) == before
        assert [p.position for p in board.pieces()] == positions

    def test_simulate_applies_inside_block(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        pawn = board.piece_at(E4)
        victim = board.piece_at(D5)
        with board.simulate(E4, D5) as captured:
            assert captured is victim
            assert board.piece_at(D5) is pawn
            assert board.is_empty(E4)
        assert board.piece_at(E4) is pawn
        assert board.piece_at(D5) is victim
        assert pawn is not None and pawn.position == E4
        assert victim is not None and victim.position == D5

    def test_simulate_restores_on_error(self) -> None:
        board = Board.initial()
        before = _cells(board)
        with pytest.raises(RuntimeError):
            with board.simulate(E2, E4):
                raise RuntimeError("boom")
        assert _cells(board) == before

    def test_simulate_does_not_touch_real_state(self) -> None:
        board = board_from_placement("4k3/8/8/3p4/4P3/8/8/4K3")
        state = GameState()
        with board.simulate(E4, D5):
            pass
        assert state.captured_by(Color.WHITE) == []
        assert state.last_move == "N/A"

    def test_undo_from_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="take back"):
            Board.initial().undo_move(E2, E4, None)


class TestCheckDetection:
    def test_initial_not_in_check(self) -> None:
        board = Board.initial()
        assert not board.is_in_check(Color.WHITE)
        assert not board.is_in_check(Color.BLACK)

    def test_rook_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r3K3")
        assert board.is_in_check(Color.WHITE)
        assert not board.is_checkmate(Color.WHITE)
        assert not board.is_stalemate(Color.WHITE)

    def test_blocked_rook_no_check(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/r1N1K3")
        assert not board.is_in_check(Color.WHITE)

    def test_pawn_gives_check_diagonally(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/3p4/4K3")
        assert board.is_in_check(Color.WHITE)

    def test_pawn_does_not_check_straight_ahead(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/4p3/4K3")
        assert not board.is_in_check(Color.WHITE)

    def test_fools_mate(self) -> None:
        board = board_from_placement("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        assert board.is_in_check(Color.WHITE)
        assert board.is_checkmate(Color.WHITE)
        assert not board.is_stalemate(Color.WHITE)

    def test_stalemate(self) -> None:
        board = board_from_placement("k7/P7/1K6/8/8/8/8/8")
        assert not board.is_in_check(Color.BLACK)
        assert board.is_stalemate(Color.BLACK)
        assert not board.is_checkmate(Color.BLACK)

    def test_checks_leave_board_untouched(self) -> None:
        board = board_from_placement("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR")
        before = _cells(board)
        board.is_checkmate(Color.WHITE)
        board.is_stalemate(Color.BLACK)
        assert _cells(board) == before

    def test_missing_king_is_fatal(self) -> None:
        board = board_from_placement("4k3/8/8/8/8/8/8/8")
        with pytest.raises(KingNotFoundError):
            board.is_in_check(Color.WHITE)
