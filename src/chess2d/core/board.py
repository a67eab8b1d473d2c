"""Board - an 8x8 grid of cells, each holding at most one piece."""

from __future__ import annotations

from collections.abc import Iterator

from chess2d.core.enums import Relationship
from chess2d.core.errors import OutOfBounds
from chess2d.core.piece import Piece
from chess2d.core.types import BOARD_SIZE, Square, in_bounds


class Cell:
    """A single board location with an optional occupant."""

    __slots__ = ("_square", "piece")

    def __init__(self, square: Square) -> None:
        self._square = square
        self.piece: Piece | None = None

    @property
    def square(self) -> Square:
        return self._square

    def is_empty(self) -> bool:
        return self.piece is None

    def clear(self) -> None:
        self.piece = None

    def relationship(self, inquirer: Piece) -> Relationship:
        """Classify the occupant relative to *inquirer*."""
        occupant = self.piece
        if occupant is None:
            return Relationship.EMPTY
        if occupant.side == inquirer.side:
            return Relationship.FRIEND
        return Relationship.ENEMY

    def __repr__(self) -> str:
        return f"Cell({self._square}, {self.piece!r})"


class Board:
    """Fixed 64-cell board. Read-only apart from cell occupancy.

    Occupancy is changed only by the game controller, which keeps
    ``cell.piece`` and ``piece.square`` consistent.
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        # [file][rank]
        self._cells: tuple[tuple[Cell, ...], ...] = tuple(
            tuple(Cell(Square(f, r)) for r in range(BOARD_SIZE))
            for f in range(BOARD_SIZE)
        )

    # -- Element access -----------------------------------------------------

    def cell_at(self, square: tuple[int, int]) -> Cell:
        if not in_bounds(square):
            raise OutOfBounds(square)
        return self._cells[square[0]][square[1]]

    def __getitem__(self, square: tuple[int, int]) -> Piece | None:
        return self.cell_at(square).piece

    def piece_at(self, square: tuple[int, int]) -> Piece | None:
        return self.cell_at(square).piece

    def __iter__(self) -> Iterator[Cell]:
        """Cells rank by rank from a1 to h8."""
        for r in range(BOARD_SIZE):
            for f in range(BOARD_SIZE):
                yield self._cells[f][r]

    # -- Query helpers ------------------------------------------------------

    def is_empty(self, square: tuple[int, int]) -> bool:
        return self.cell_at(square).is_empty()

    def relationship(self, inquirer: Piece, square: tuple[int, int]) -> Relationship:
        return self.cell_at(square).relationship(inquirer)

    def is_reachable(self, inquirer: Piece, square: tuple[int, int]) -> bool:
        """Whether *inquirer* may land on *square* (empty or enemy)."""
        return self.relationship(inquirer, square) != Relationship.FRIEND

    def is_enemy(self, inquirer: Piece, square: tuple[int, int]) -> bool:
        return self.relationship(inquirer, square) == Relationship.ENEMY

    def is_enemy_king(self, inquirer: Piece, square: tuple[int, int]) -> bool:
        occupant = self.cell_at(square).piece
        return (
            occupant is not None
            and occupant.side != inquirer.side
            and occupant.is_king
        )

    def occupied_cells(self) -> list[Cell]:
        return [cell for cell in self if cell.piece is not None]

    # -- Mutation -----------------------------------------------------------

    def clear(self) -> None:
        """Empty every cell. Does not touch the pieces' own square links."""
        for cell in self:
            cell.clear()

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(BOARD_SIZE - 1, -1, -1):
            row = []
            for file in range(BOARD_SIZE):
                p = self._cells[file][rank].piece
                row.append(p.symbol if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
