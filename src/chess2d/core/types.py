"""Square type and coordinate helpers.

Squares are ``(file, rank)`` pairs with both components in 0-7.
File 0 is the a-file, rank 0 is White's back rank::

    a1=(0, 0), b1=(1, 0), ..., h1=(7, 0)
    ...
    a8=(0, 7), ..., h8=(7, 7)
"""

from __future__ import annotations

from typing import NamedTuple

from chess2d.core.enums import Direction
from chess2d.core.errors import OutOfBounds

BOARD_SIZE = 8


class Square(NamedTuple):
    """Board coordinate. Compares equal to a plain ``(file, rank)`` tuple."""

    file: int
    rank: int

    def __str__(self) -> str:
        if not in_bounds(self):
            return f"({self.file}, {self.rank})"
        return square_name(self)


def in_bounds(square: tuple[int, int]) -> bool:
    """True iff both coordinates lie in 0-7."""
    file, rank = square
    return 0 <= file < BOARD_SIZE and 0 <= rank < BOARD_SIZE


def make_square(file: int, rank: int) -> Square:
    """Create a square, raising :class:`OutOfBounds` if it is off the board."""
    square = Square(file, rank)
    if not in_bounds(square):
        raise OutOfBounds(square)
    return square


def offset(square: tuple[int, int], df: int, dr: int) -> Square:
    """Square displaced by ``(df, dr)``. The result may be out of bounds."""
    return Square(square[0] + df, square[1] + dr)


def square_name(square: tuple[int, int]) -> str:
    """Human-readable name, e.g. ``(0, 0)`` -> ``'a1'``."""
    if not in_bounds(square):
        raise OutOfBounds(square)
    file, rank = square
    return chr(ord("a") + file) + str(rank + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` -> ``Square(4, 3)``."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ord(name[0]) - ord("a"), int(name[1]) - 1)


def all_squares() -> list[Square]:
    """Every square, rank by rank from a1 to h8."""
    return [Square(f, r) for r in range(BOARD_SIZE) for f in range(BOARD_SIZE)]


def general_direction(origin: tuple[int, int], target: tuple[int, int]) -> Direction:
    """Eight-way compass direction of *target* seen from *origin*.

    Only the signs of the deltas matter, so a knight jump to ``(+1, +2)``
    is classified ``NE``. Returns ``Direction.NONE`` when both squares match.
    """
    df = target[0] - origin[0]
    dr = target[1] - origin[1]
    sign_f = (df > 0) - (df < 0)
    sign_r = (dr > 0) - (dr < 0)
    return Direction((sign_f, sign_r))
