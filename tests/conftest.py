"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chess2d.core.board import Board
from chess2d.core.enums import PieceKind, Side
from chess2d.core.piece import Piece, create_piece
from chess2d.core.types import Square
from chess2d.game.controller import GameController

PlacePiece = Callable[[PieceKind, Side, tuple[int, int]], Piece]


@pytest.fixture
def board() -> Board:
    """An empty board."""
    return Board()


@pytest.fixture
def place(board: Board) -> PlacePiece:
    """Put a fresh piece on the ``board`` fixture and return it."""

    def _place(kind: PieceKind, side: Side, square: tuple[int, int]) -> Piece:
        piece = create_piece(kind, side)
        board.cell_at(square).piece = piece
        piece.square = Square(*square)
        return piece

    return _place


@pytest.fixture
def ctrl() -> GameController:
    """A controller in the starting position, White to move."""
    controller = GameController()
    controller.setup(Side.WHITE)
    return controller
