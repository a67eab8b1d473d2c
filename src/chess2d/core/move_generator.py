"""Destination-square generation for a single piece.

Every piece kind is described by its movement rules (see
:data:`chess2d.core.piece.CAPABILITIES`); the generator interprets each
rule against the current board and concatenates the results in rule order.
"""

from __future__ import annotations

from collections.abc import Callable

from chess2d.core.board import Board
from chess2d.core.enums import Direction, MoveType, StepPolicy
from chess2d.core.errors import NoCurrentSquare
from chess2d.core.piece import MovementRule, Piece
from chess2d.core.types import Square, in_bounds, offset

RAY_DIRECTIONS: dict[MoveType, tuple[Direction, ...]] = {
    MoveType.VERTICAL: (Direction.N, Direction.S),
    MoveType.HORIZONTAL: (Direction.W, Direction.E),
    MoveType.DIAGONAL: (Direction.NW, Direction.NE, Direction.SE, Direction.SW),
}

# Both magnitude orderings of the knight jump, per quadrant.
L_MAGNITUDES: tuple[tuple[int, int], ...] = ((1, 2), (2, 1))
QUADRANT_SIGNS: tuple[tuple[int, int], ...] = ((1, 1), (-1, 1), (-1, -1), (1, -1))

# Sign adjustment applied to every offset: the south-facing side sees the
# board flipped vertically.
_FACING_SCALE: dict[Direction, tuple[int, int]] = {
    Direction.N: (1, 1),
    Direction.S: (1, -1),
}


def oriented(direction: Direction, facing: Direction) -> tuple[int, int]:
    """Unit offset of *direction* as seen by a piece facing *facing*."""
    df, dr = direction.vector
    sf, sr = _FACING_SCALE[facing]
    return df * sf, dr * sr


class MoveGenerator:
    """Computes reachable squares for pieces on a :class:`Board`.

    Args:
        board: Board to read occupancy from. Never mutated.
        include_friendly_l_squares: Keep knight targets occupied by a
            friendly piece in the result. They are never legal landings;
            this only matters for callers that display raw candidates.
    """

    __slots__ = ("_board", "_include_friendly_l_squares", "_handlers")

    def __init__(self, board: Board, *, include_friendly_l_squares: bool = False) -> None:
        self._board = board
        self._include_friendly_l_squares = include_friendly_l_squares
        self._handlers: dict[MoveType, Callable[[Piece, Square, MovementRule], list[Square]]] = {
            MoveType.VERTICAL: self._gen_rays,
            MoveType.HORIZONTAL: self._gen_rays,
            MoveType.DIAGONAL: self._gen_rays,
            MoveType.L_SHAPED: self._gen_l_shaped,
            MoveType.PAWN_FORWARD: self._gen_pawn,
        }

    @property
    def board(self) -> Board:
        return self._board

    # -- Public API ---------------------------------------------------------

    def destinations(self, piece: Piece) -> list[Square]:
        """All squares *piece* can reach, in rule order.

        Squares reachable by more than one rule may appear more than once.

        Raises:
            NoCurrentSquare: *piece* is not on the board.
        """
        result: list[Square] = []
        for rule in piece.rules:
            result.extend(self.destinations_for_rule(piece, rule))
        return result

    def destinations_for_rule(self, piece: Piece, rule: MovementRule) -> list[Square]:
        origin = self._require_square(piece)
        return self._handlers[rule.move_type](piece, origin, rule)

    def attacks_enemy_king(self, piece: Piece) -> bool:
        """Whether an opposing king sits on one of *piece*'s destinations."""
        board = self._board
        return any(board.is_enemy_king(piece, sq) for sq in self.destinations(piece))

    # -- Move-type generators (private) -------------------------------------

    def _gen_rays(self, piece: Piece, origin: Square, rule: MovementRule) -> list[Square]:
        result: list[Square] = []
        for direction in RAY_DIRECTIONS[rule.move_type]:
            step = oriented(direction, piece.facing)
            result.extend(self._walk(piece, origin, step, rule.step_policy))
        return result

    def _walk(
        self,
        piece: Piece,
        origin: Square,
        step: tuple[int, int],
        policy: StepPolicy,
    ) -> list[Square]:
        """Squares along one ray up to and including the first obstruction."""
        board = self._board
        remaining = policy.step_limit
        ray: list[Square] = []
        current = origin
        while remaining is None or remaining > 0:
            current = offset(current, *step)
            if not in_bounds(current) or not board.is_reachable(piece, current):
                break
            ray.append(current)
            if not board.is_empty(current):
                break  # capture square terminates the ray
            if remaining is not None:
                remaining -= 1
        return ray

    def _gen_l_shaped(self, piece: Piece, origin: Square, _rule: MovementRule) -> list[Square]:
        board = self._board
        result: list[Square] = []
        for sign_f, sign_r in QUADRANT_SIGNS:
            for mag_f, mag_r in L_MAGNITUDES:
                target = offset(origin, sign_f * mag_f, sign_r * mag_r)
                if not in_bounds(target):
                    continue
                if self._include_friendly_l_squares or board.is_reachable(piece, target):
                    result.append(target)
        return result

    def _gen_pawn(self, piece: Piece, origin: Square, _rule: MovementRule) -> list[Square]:
        board = self._board
        result: list[Square] = []

        forward = oriented(Direction.N, piece.facing)
        current = origin
        for _ in range(2):
            current = offset(current, *forward)
            if not in_bounds(current) or not board.is_empty(current):
                break
            result.append(current)
            if not piece.first_move:
                break

        for direction in (Direction.NW, Direction.NE):
            target = offset(origin, *oriented(direction, piece.facing))
            if in_bounds(target) and board.is_enemy(piece, target):
                result.append(target)
        return result

    # -- Helpers ------------------------------------------------------------

    @staticmethod
    def _require_square(piece: Piece) -> Square:
        if piece.square is None:
            raise NoCurrentSquare(piece)
        return piece.square
