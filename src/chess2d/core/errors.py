"""Contract-violation exceptions raised by the rules engine.

Rejected moves are not errors: they come back as
:attr:`MoveOutcome.REJECTED <chess2d.core.enums.MoveOutcome.REJECTED>`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chess2d.core.piece import Piece


class Chess2DError(Exception):
    """Base class for every error raised by :mod:`chess2d`."""


class OutOfBounds(Chess2DError, IndexError):
    """A coordinate outside the 8x8 board was dereferenced directly."""

    def __init__(self, square: tuple[int, int]) -> None:
        super().__init__(f"Square {tuple(square)!r} is outside the board")
        self.square = square


class NoCurrentSquare(Chess2DError, LookupError):
    """An operation needed the board position of a piece that has none."""

    def __init__(self, piece: Piece) -> None:
        super().__init__(f"{piece!r} is not on the board")
        self.piece = piece
