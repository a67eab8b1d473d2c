"""Tests for Board and Cell."""

from collections.abc import Callable

import pytest

from chess2d.core.board import Board
from chess2d.core.enums import PieceKind, Relationship, Side
from chess2d.core.errors import OutOfBounds
from chess2d.core.piece import Piece

PlacePiece = Callable[[PieceKind, Side, tuple[int, int]], Piece]


class TestBoardLayout:
    def test_sixty_four_cells(self, board: Board) -> None:
        cells = list(board)
        assert len(cells) == 64
        assert cells[0].square == (0, 0)
        assert cells[-1].square == (7, 7)

    def test_cell_knows_its_square(self, board: Board) -> None:
        assert board.cell_at((3, 5)).square == (3, 5)

    def test_cells_are_stable(self, board: Board) -> None:
        assert board.cell_at((2, 2)) is board.cell_at((2, 2))

    def test_new_board_is_empty(self, board: Board) -> None:
        assert board.occupied_cells() == []
        assert all(board.is_empty(cell.square) for cell in board)

    @pytest.mark.parametrize("square", [(-1, 0), (0, 8), (8, 8)])
    def test_cell_at_out_of_bounds(self, board: Board, square: tuple[int, int]) -> None:
        with pytest.raises(OutOfBounds):
            board.cell_at(square)


class TestRelationship:
    def test_empty(self, board: Board, place: PlacePiece) -> None:
        rook = place(PieceKind.ROOK, Side.WHITE, (0, 0))
        assert board.relationship(rook, (4, 4)) == Relationship.EMPTY
        assert board.is_reachable(rook, (4, 4))

    def test_friend(self, board: Board, place: PlacePiece) -> None:
        rook = place(PieceKind.ROOK, Side.WHITE, (0, 0))
        place(PieceKind.PAWN, Side.WHITE, (0, 1))
        assert board.relationship(rook, (0, 1)) == Relationship.FRIEND
        assert not board.is_reachable(rook, (0, 1))
        assert not board.is_enemy(rook, (0, 1))

    def test_enemy(self, board: Board, place: PlacePiece) -> None:
        rook = place(PieceKind.ROOK, Side.WHITE, (0, 0))
        place(PieceKind.PAWN, Side.BLACK, (0, 6))
        assert board.relationship(rook, (0, 6)) == Relationship.ENEMY
        assert board.is_reachable(rook, (0, 6))
        assert board.is_enemy(rook, (0, 6))

    def test_enemy_king(self, board: Board, place: PlacePiece) -> None:
        rook = place(PieceKind.ROOK, Side.WHITE, (0, 0))
        place(PieceKind.KING, Side.BLACK, (4, 7))
        place(PieceKind.KING, Side.WHITE, (4, 0))
        assert board.is_enemy_king(rook, (4, 7))
        assert not board.is_enemy_king(rook, (4, 0))
        assert not board.is_enemy_king(rook, (5, 5))

    def test_relationship_out_of_bounds(self, board: Board, place: PlacePiece) -> None:
        rook = place(PieceKind.ROOK, Side.WHITE, (0, 0))
        with pytest.raises(OutOfBounds):
            board.relationship(rook, (0, 8))


class TestBoardHelpers:
    def test_piece_at(self, board: Board, place: PlacePiece) -> None:
        queen = place(PieceKind.QUEEN, Side.BLACK, (3, 7))
        assert board.piece_at((3, 7)) is queen
        assert board[(3, 7)] is queen
        assert board.piece_at((3, 6)) is None

    def test_clear(self, board: Board, place: PlacePiece) -> None:
        place(PieceKind.QUEEN, Side.BLACK, (3, 7))
        board.clear()
        assert board.is_empty((3, 7))

    def test_repr(self, board: Board, place: PlacePiece) -> None:
        place(PieceKind.KING, Side.WHITE, (4, 0))
        place(PieceKind.KING, Side.BLACK, (4, 7))
        lines = repr(board).splitlines()
        assert lines[0] == "8 . . . . ♚ . . ."
        assert lines[7] == "1 . . . . ♔ . . ."
        assert lines[8] == "  a b c d e f g h"
