"""Core enumerations for the rules engine."""

from __future__ import annotations

from enum import Enum, IntEnum, auto


class Side(IntEnum):
    """One of the two opposing players."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def facing(self) -> Direction:
        """Board direction this side's "forward" maps to."""
        return Direction.N if self is Side.WHITE else Direction.S

    def __str__(self) -> str:
        return self.name.lower()


class Direction(Enum):
    """Compass directions on the board (rank 7 is north)."""

    NONE = (0, 0)
    NW = (-1, 1)
    N = (0, 1)
    NE = (1, 1)
    E = (1, 0)
    SE = (1, -1)
    S = (0, -1)
    SW = (-1, -1)
    W = (-1, 0)

    @property
    def vector(self) -> tuple[int, int]:
        return self.value


class PieceKind(IntEnum):
    """Closed set of piece kinds."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6


class MoveType(IntEnum):
    """Shape template for candidate offsets."""

    VERTICAL = auto()
    HORIZONTAL = auto()
    DIAGONAL = auto()
    L_SHAPED = auto()
    PAWN_FORWARD = auto()


class StepPolicy(IntEnum):
    """How many steps along a move type are attempted."""

    SINGLE = 1
    DOUBLE = 2
    MULTIPLE = -1  # until blocked
    FLEXIBLE = 0  # pawn-forward only

    @property
    def step_limit(self) -> int | None:
        """Maximum number of ray steps, ``None`` when unbounded."""
        if self is StepPolicy.SINGLE:
            return 1
        if self is StepPolicy.DOUBLE:
            return 2
        if self is StepPolicy.FLEXIBLE:
            return 0  # meaningless outside pawn-forward
        return None


class Relationship(IntEnum):
    """Occupancy of a square relative to an inquiring piece."""

    EMPTY = 0
    FRIEND = 1
    ENEMY = 2


class MoveOutcome(IntEnum):
    """Result of :meth:`GameController.attempt_move`."""

    REJECTED = 0
    MOVED = auto()
    MOVED_AND_CAPTURED = auto()
    MOVED_AND_GAME_OVER = auto()

    @property
    def is_accepted(self) -> bool:
        return self is not MoveOutcome.REJECTED


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    MOVE_IN_PROGRESS = auto()
    GAME_OVER = auto()
