"""Core rules layer - board, pieces and move generation, no external dependencies.

Quick start::

    from chess2d.core import Board, MoveGenerator, PieceKind, Side, create_piece

    board = Board()
    rook = create_piece(PieceKind.ROOK, Side.WHITE)
    board.cell_at((0, 0)).piece = rook
    rook.square = (0, 0)
    print(MoveGenerator(board).destinations(rook))
"""

from chess2d.core.board import Board, Cell
from chess2d.core.enums import (
    Direction,
    GamePhase,
    MoveOutcome,
    MoveType,
    PieceKind,
    Relationship,
    Side,
    StepPolicy,
)
from chess2d.core.errors import Chess2DError, NoCurrentSquare, OutOfBounds
from chess2d.core.move_generator import MoveGenerator
from chess2d.core.path import path_between
from chess2d.core.piece import (
    CAPABILITIES,
    STARTING_ORDER,
    MovementRule,
    Piece,
    create_piece,
    create_side,
    kind_from_letter,
)
from chess2d.core.types import (
    Square,
    all_squares,
    general_direction,
    in_bounds,
    make_square,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "Direction",
    "GamePhase",
    "MoveOutcome",
    "MoveType",
    "PieceKind",
    "Relationship",
    "Side",
    "StepPolicy",
    # Errors
    "Chess2DError",
    "NoCurrentSquare",
    "OutOfBounds",
    # Types / helpers
    "Square",
    "all_squares",
    "general_direction",
    "in_bounds",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "CAPABILITIES",
    "Cell",
    "MoveGenerator",
    "MovementRule",
    "Piece",
    "STARTING_ORDER",
    "create_piece",
    "create_side",
    "kind_from_letter",
    "path_between",
]
