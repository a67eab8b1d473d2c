"""GameController - owns the board, both piece sets and the turn order.

Move execution is a single synchronous call: :meth:`GameController.attempt_move`
validates, captures, relocates, runs check detection and advances the turn,
then reports what happened as a :class:`MoveOutcome`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chess2d.core.board import Board
from chess2d.core.enums import GamePhase, MoveOutcome, PieceKind, Relationship, Side
from chess2d.core.errors import NoCurrentSquare
from chess2d.core.move_generator import MoveGenerator
from chess2d.core.path import path_between
from chess2d.core.piece import Piece, create_side
from chess2d.core.types import Square, make_square
from chess2d.game.config import GameConfig

_LOGGER = logging.getLogger(__name__)

PAWN_RANKS: dict[Side, int] = {Side.WHITE: 1, Side.BLACK: 6}
BACK_RANKS: dict[Side, int] = {Side.WHITE: 0, Side.BLACK: 7}


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Everything the presentation layer needs to narrate one completed move."""

    piece: Piece
    origin: Square
    destination: Square
    path: tuple[Square, ...]
    captured: Piece | None = None
    gives_check: bool = False

    @property
    def is_capture(self) -> bool:
        return self.captured is not None


class GameController:
    """Orchestrates a game: turn order, move execution and the win condition.

    Lifecycle::

        NOT_STARTED --setup()--> AWAITING_MOVE --attempt_move()--> AWAITING_MOVE
                                                  \\--king captured--> GAME_OVER

    ``reset()`` returns to ``AWAITING_MOVE`` from any state, reusing the
    same board and piece objects.

    Thread-safety: single-threaded use only.
    """

    __slots__ = (
        "_config",
        "_board",
        "_generator",
        "_pieces",
        "_initial_side",
        "_side_to_move",
        "_phase",
        "_winner",
        "_history",
        "_checked_king",
    )

    def __init__(self, config: GameConfig | None = None) -> None:
        self._config = config if config is not None else GameConfig()
        self._board = Board()
        self._generator = MoveGenerator(
            self._board,
            include_friendly_l_squares=self._config.include_friendly_l_squares,
        )
        self._pieces: dict[Side, list[Piece]] = {}
        self._initial_side = self._config.initial_side
        self._side_to_move = self._initial_side
        self._phase = GamePhase.NOT_STARTED
        self._winner: Side | None = None
        self._history: list[MoveRecord] = []
        self._checked_king: Piece | None = None

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    @property
    def generator(self) -> MoveGenerator:
        return self._generator

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def initial_side(self) -> Side:
        return self._initial_side

    @property
    def winner(self) -> Side | None:
        """Side that captured the opposing king, ``None`` while playing."""
        return self._winner

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def last_move(self) -> MoveRecord | None:
        return self._history[-1] if self._history else None

    @property
    def checked_king(self) -> Piece | None:
        """King threatened by the last move, if any (highlight only)."""
        return self._checked_king

    def current_side(self) -> Side:
        return self._side_to_move

    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    # ── Setup / reset ────────────────────────────────────────────────────

    def setup(self, initial_side: Side | None = None) -> None:
        """Create all 32 pieces (first call only) and seat them.

        Args:
            initial_side: Side to move first. Defaults to the configured
                side; once given it also applies to later resets.
        """
        if initial_side is not None:
            self._initial_side = initial_side
        if not self._pieces:
            self._pieces = {side: create_side(side) for side in Side}
        _LOGGER.debug("Setting up game, %s moves first", self._initial_side)
        self._restart()

    def reset(self) -> None:
        """Return board and pieces to the starting configuration ("play again")."""
        if not self._pieces:
            self.setup()
            return
        _LOGGER.debug("Resetting game")
        self._restart()

    def _restart(self) -> None:
        for piece in self._all_pieces():
            if piece.square is not None:
                self._board.cell_at(piece.square).clear()
            piece.reset()

        for side in Side:
            self._seat(side)

        self._history.clear()
        self._checked_king = None
        self._winner = None
        self._side_to_move = self._initial_side
        self._phase = GamePhase.AWAITING_MOVE

    def _seat(self, side: Side) -> None:
        pieces = self._pieces[side]
        pawn_rank = PAWN_RANKS[side]
        back_rank = BACK_RANKS[side]
        for file, piece in enumerate(pieces[:8]):
            self._place(piece, make_square(file, pawn_rank))
        for file, piece in enumerate(pieces[8:]):
            self._place(piece, make_square(file, back_rank))

    # ── Queries ──────────────────────────────────────────────────────────

    def pieces(self, side: Side) -> list[Piece]:
        """All pieces of *side*, captured ones included."""
        return list(self._pieces.get(side, ()))

    def active_pieces(self, side: Side) -> list[Piece]:
        return [p for p in self._pieces.get(side, ()) if p.active]

    def king(self, side: Side) -> Piece:
        for piece in self._pieces.get(side, ()):
            if piece.kind is PieceKind.KING:
                return piece
        raise LookupError(f"No {side} king; call setup() first")

    def piece_at(self, square: tuple[int, int]) -> Piece | None:
        return self._board.piece_at(square)

    def can_move(self, piece: Piece) -> bool:
        """Whether *piece* currently accepts input (active side, still on board)."""
        return (
            self._phase == GamePhase.AWAITING_MOVE
            and piece.side == self._side_to_move
            and piece.active
            and piece.square is not None
        )

    def get_legal_destinations(self, piece: Piece) -> set[Square]:
        """Squares to highlight for *piece*.

        Raises:
            NoCurrentSquare: *piece* is not on the board.
        """
        return set(self._generator.destinations(piece))

    def get_path(self, origin: tuple[int, int], destination: tuple[int, int]) -> list[Square]:
        """Squares from *origin* to *destination* for display/animation."""
        return path_between(make_square(*origin), make_square(*destination))

    def is_checking(self, piece: Piece) -> bool:
        """Whether *piece* can reach the square of the opposing king."""
        return self._generator.attacks_enemy_king(piece)

    # ── Move execution ───────────────────────────────────────────────────

    def attempt_move(self, piece: Piece, destination: tuple[int, int]) -> MoveOutcome:
        """Try to move *piece* to *destination*.

        Returns ``MoveOutcome.REJECTED`` (with no state change) when the game
        is not awaiting a move, *piece* belongs to the side not on move, or
        *destination* is friendly-occupied or not among its destinations.

        Raises:
            NoCurrentSquare: *piece* is not on the board.
            OutOfBounds: *destination* is off the board.
        """
        if self._phase != GamePhase.AWAITING_MOVE:
            _LOGGER.debug("Rejected %r: game phase is %s", piece, self._phase.name)
            return MoveOutcome.REJECTED
        if piece.square is None:
            raise NoCurrentSquare(piece)
        if piece.side != self._side_to_move:
            _LOGGER.debug("Rejected %r: %s to move", piece, self._side_to_move)
            return MoveOutcome.REJECTED

        target = self._board.cell_at(destination)
        relationship = target.relationship(piece)
        if relationship == Relationship.FRIEND:
            _LOGGER.debug("Rejected %r: %s is friendly-occupied", piece, target.square)
            return MoveOutcome.REJECTED
        if target.square not in self._generator.destinations(piece):
            _LOGGER.debug("Rejected %r: %s is not reachable", piece, target.square)
            return MoveOutcome.REJECTED

        self._phase = GamePhase.MOVE_IN_PROGRESS
        origin = piece.square
        path = tuple(path_between(origin, target.square))

        captured: Piece | None = None
        if relationship == Relationship.ENEMY:
            captured = target.piece
            assert captured is not None
            self._capture(captured)

        self._place(piece, target.square)
        if piece.is_pawn:
            piece.first_move = False

        if captured is not None and captured.is_king:
            self._history.append(MoveRecord(piece, origin, target.square, path, captured))
            self._checked_king = None
            self._winner = piece.side
            self._phase = GamePhase.GAME_OVER
            _LOGGER.info("%s captured the %s king, game over", piece.side, captured.side)
            return MoveOutcome.MOVED_AND_GAME_OVER

        gives_check = self.is_checking(piece)
        self._checked_king = self.king(piece.side.opposite) if gives_check else None
        self._history.append(
            MoveRecord(piece, origin, target.square, path, captured, gives_check)
        )
        if gives_check:
            _LOGGER.info("%r checks the %s king", piece, piece.side.opposite)

        self._next_turn()
        return MoveOutcome.MOVED if captured is None else MoveOutcome.MOVED_AND_CAPTURED

    # ── Internal helpers ─────────────────────────────────────────────────

    def _place(self, piece: Piece, square: Square) -> None:
        """Relocate *piece*, keeping cell and piece links in step."""
        if piece.square is not None:
            self._board.cell_at(piece.square).clear()
        piece.clear_square()
        cell = self._board.cell_at(square)
        cell.piece = piece
        piece.square = cell.square

    def _capture(self, victim: Piece) -> None:
        if victim.square is not None:
            self._board.cell_at(victim.square).clear()
        victim.clear_square()
        victim.active = False
        _LOGGER.info("Captured %s %s", victim.side, victim.kind.name.lower())

    def _next_turn(self) -> None:
        self._side_to_move = self._side_to_move.opposite
        self._phase = GamePhase.AWAITING_MOVE
        _LOGGER.debug("%s to move", self._side_to_move)

    def _all_pieces(self) -> list[Piece]:
        return [p for side in Side for p in self._pieces.get(side, ())]
