"""Piece entity and the static movement-capability table."""

from __future__ import annotations

from dataclasses import dataclass, field

from chess2d.core.enums import Direction, MoveType, PieceKind, Side, StepPolicy
from chess2d.core.types import Square


@dataclass(frozen=True, slots=True)
class MovementRule:
    """One (move-type, step-policy) pair of a piece's capability."""

    move_type: MoveType
    step_policy: StepPolicy


_DIAGONAL_MULTIPLE = MovementRule(MoveType.DIAGONAL, StepPolicy.MULTIPLE)
_HORIZONTAL_MULTIPLE = MovementRule(MoveType.HORIZONTAL, StepPolicy.MULTIPLE)
_VERTICAL_MULTIPLE = MovementRule(MoveType.VERTICAL, StepPolicy.MULTIPLE)

CAPABILITIES: dict[PieceKind, tuple[MovementRule, ...]] = {
    PieceKind.PAWN: (MovementRule(MoveType.PAWN_FORWARD, StepPolicy.FLEXIBLE),),
    PieceKind.ROOK: (_HORIZONTAL_MULTIPLE, _VERTICAL_MULTIPLE),
    PieceKind.KNIGHT: (MovementRule(MoveType.L_SHAPED, StepPolicy.SINGLE),),
    PieceKind.BISHOP: (_DIAGONAL_MULTIPLE,),
    PieceKind.QUEEN: (_DIAGONAL_MULTIPLE, _HORIZONTAL_MULTIPLE, _VERTICAL_MULTIPLE),
    PieceKind.KING: (
        MovementRule(MoveType.DIAGONAL, StepPolicy.SINGLE),
        MovementRule(MoveType.HORIZONTAL, StepPolicy.SINGLE),
        MovementRule(MoveType.VERTICAL, StepPolicy.SINGLE),
    ),
}

# Short codes used by the piece layout table.
_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.ROOK: "R",
    PieceKind.KNIGHT: "KN",
    PieceKind.BISHOP: "B",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}
_KINDS_BY_LETTER: dict[str, PieceKind] = {v: k for k, v in _LETTERS.items()}

_UNICODE: dict[tuple[Side, PieceKind], str] = {
    (Side.WHITE, PieceKind.PAWN): "♙",
    (Side.WHITE, PieceKind.KNIGHT): "♘",
    (Side.WHITE, PieceKind.BISHOP): "♗",
    (Side.WHITE, PieceKind.ROOK): "♖",
    (Side.WHITE, PieceKind.QUEEN): "♕",
    (Side.WHITE, PieceKind.KING): "♔",
    (Side.BLACK, PieceKind.PAWN): "♟",
    (Side.BLACK, PieceKind.KNIGHT): "♞",
    (Side.BLACK, PieceKind.BISHOP): "♝",
    (Side.BLACK, PieceKind.ROOK): "♜",
    (Side.BLACK, PieceKind.QUEEN): "♛",
    (Side.BLACK, PieceKind.KING): "♚",
}

# Per side: 8 pawns (files a-h) then the back rank (files a-h).
STARTING_ORDER: tuple[PieceKind, ...] = (PieceKind.PAWN,) * 8 + (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


@dataclass(eq=False, slots=True)
class Piece:
    """One chess unit.

    Pieces are compared by identity: two white pawns are different pieces.
    ``square`` only records where the piece sits; the board's cell holds
    the matching back-reference.
    """

    kind: PieceKind
    side: Side
    facing: Direction = field(init=False)
    square: Square | None = field(default=None, init=False)
    first_move: bool = field(default=True, init=False)
    active: bool = field(default=True, init=False)

    def __post_init__(self) -> None:
        self.facing = self.side.facing

    # ── Capability ───────────────────────────────────────────────────────

    @property
    def rules(self) -> tuple[MovementRule, ...]:
        return CAPABILITIES[self.kind]

    @property
    def is_pawn(self) -> bool:
        return self.kind is PieceKind.PAWN

    @property
    def is_king(self) -> bool:
        return self.kind is PieceKind.KING

    @property
    def on_board(self) -> bool:
        return self.square is not None

    # ── State ────────────────────────────────────────────────────────────

    def clear_square(self) -> None:
        self.square = None

    def reset(self) -> None:
        """Return to the state of a freshly created piece (off the board)."""
        self.square = None
        self.first_move = True
        self.active = True

    # ── Display ──────────────────────────────────────────────────────────

    @property
    def letter(self) -> str:
        return _LETTERS[self.kind]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.side, self.kind)]

    def __repr__(self) -> str:
        where = str(self.square) if self.square is not None else "-"
        return f"Piece({self.side} {self.kind.name.lower()} @ {where})"


def create_piece(kind: PieceKind, side: Side) -> Piece:
    """Factory returning a configured piece of *kind* for *side*."""
    if not isinstance(kind, PieceKind):
        raise ValueError(f"Unknown piece kind: {kind!r}")
    return Piece(kind, side)


def kind_from_letter(letter: str) -> PieceKind:
    """Map a short code (``P``, ``R``, ``KN``, ``B``, ``Q``, ``K``) to a kind."""
    try:
        return _KINDS_BY_LETTER[letter.upper()]
    except KeyError:
        raise ValueError(f"Invalid piece code: {letter!r}") from None


def create_side(side: Side) -> list[Piece]:
    """All 16 pieces of *side* in :data:`STARTING_ORDER`."""
    return [create_piece(kind, side) for kind in STARTING_ORDER]
