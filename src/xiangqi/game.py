"""
The GameState is the entrypoint into the domain layer.

It holds the board, whose turn it is and whether the game has ended, and implements the turn state machine:
    IN_PROGRESS --(capture of a General)--> GENERAL_CAPTURED (terminal)

The module level functions at the bottom are the interface the caller (service / UI layer) is expected to use.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self

from src.core.exceptions import (
    GameOverError,
    IllegalMoveError,
    NoPieceAtOriginError,
    NotYourTurnError,
)
from src.xiangqi.board import Board
from src.xiangqi.fen import FENState
from src.xiangqi.moves import Move
from src.xiangqi.pieces import Color, Piece, PieceKind
from src.xiangqi.square import Square

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    GENERAL_CAPTURED = auto()


@dataclass
class MoveOutcome:
    """What the caller needs to know after a move was executed"""

    state: "GameState"
    move: Move
    captured: Optional[Piece]
    winner: Optional[Color]


@dataclass
class GameState:
    board: Board
    turn: Color
    over: bool = False
    winner: Optional[Color] = None
    moves: list[Move] = field(default_factory=list)
    half_move_clock: int = 0
    num_turns: int = 1
    # When set, execute_move re-validates what the caller should have checked already (see execute_move)
    strict: bool = False

    @classmethod
    def new_game(cls, starting_fen: Optional[str] = None, strict: bool = False) -> Self:
        """Fresh game. Canonical opening position with Red to move, unless a FEN to start from is supplied."""
        state = (
            FENState.from_fen(starting_fen)
            if starting_fen
            else FENState.starting_position()
        )
        return cls(
            board=Board.from_fen(state.position),
            turn=state.color_to_move,
            half_move_clock=state.half_move_clock,
            num_turns=state.num_turns,
            strict=strict,
        )

    def to_fen(self) -> str:
        return FENState(
            position=self.board.to_fen(),
            color_to_move=self.turn,
            half_move_clock=self.half_move_clock,
            num_turns=self.num_turns,
        ).to_fen()

    @property
    def status(self) -> Status:
        return Status.GENERAL_CAPTURED if self.over else Status.IN_PROGRESS

    def piece_at(self, square: Square) -> Optional[Piece]:
        return self.board.piece(square)

    def legal_moves(self, square: Square) -> list[Square]:
        """
        Destinations for the piece on the square, in the order the movement rule produces them.
        ----

        Empty when the square is empty or the piece belongs to the side that is not to move.
        NOTE: a move that leaves your own General capturable is still listed.
        """
        piece = self.board.piece(square)
        if piece is None or piece.color != self.turn:
            return []
        return [move.to_square for move in self.board.candidate_moves(square)]

    def execute_move(self, from_square: Square, to_square: Square) -> MoveOutcome:
        """
        Execute a move
        -----

        1. read the piece on the origin square (must exist)
        2. capture whatever stands on the target square
        3. relocate the piece
        4. General captured? --> game over, the mover wins. Otherwise --> the other side is to move.

        The caller is trusted to only request moves from legal_moves() for the side to move.
        With `strict` set, the game being over, the turn and the legality of the move get checked here as well.
        """
        moving_piece = self.board.piece(from_square)
        to_square.assert_within_bounds()
        if self.strict and self.over:
            raise GameOverError(
                f"Game is over. {self._winner_name()} captured the General."
            )
        if moving_piece is None:
            raise NoPieceAtOriginError(
                f"No piece to move on {from_square.to_iccs()}."
            )

        if self.strict:
            self._assert_move_allowed(moving_piece, from_square, to_square)

        move = Move(from_square, to_square)
        captured = self.board.move_piece(move)
        self.moves.append(move)
        logger.debug(
            "%s %s %s%s",
            moving_piece.color.name,
            moving_piece.kind.name,
            move.to_iccs(),
            f" captures {captured.color.name} {captured.kind.name}" if captured else "",
        )

        self._update_counters(moving_piece, captured)

        if captured is not None and captured.kind == PieceKind.GENERAL:
            self._end_game(winner=moving_piece.color)
        else:
            self.turn = self.turn.opponent

        return MoveOutcome(state=self, move=move, captured=captured, winner=self.winner)

    # -- PRIVATE HELPERS ---
    def _assert_move_allowed(
        self, moving_piece: Piece, from_square: Square, to_square: Square
    ) -> None:
        if moving_piece.color != self.turn:
            raise NotYourTurnError(
                f"It is not {moving_piece.color.name.lower()}'s turn. Waiting for {self.turn.name.lower()} to move."
            )

        if to_square not in self.legal_moves(from_square):
            raise IllegalMoveError(
                f"Move not allowed: {Move(from_square, to_square).to_iccs()}"
            )

    def _update_counters(self, moving_piece: Piece, captured: Optional[Piece]) -> None:
        """half move clock counts moves since the last capture, the turn number goes up after Black moved."""
        if captured is None:
            self.half_move_clock += 1
        else:
            self.half_move_clock = 0

        if moving_piece.color == Color.BLACK:
            self.num_turns += 1

    def _end_game(self, winner: Color) -> None:
        """Terminal: there is no way back once a General is captured."""
        self.over = True
        self.winner = winner
        logger.info("%s captured the General and wins.", self._winner_name())

    def _winner_name(self) -> str:
        return self.winner.name.capitalize() if self.winner else "Nobody"


# --- DOMAIN LAYER API ---
def new_game(starting_fen: Optional[str] = None, strict: bool = False) -> GameState:
    """Reset is simply replacing the held state with a new one."""
    return GameState.new_game(starting_fen, strict=strict)


def legal_moves(state: GameState, square: Square) -> list[Square]:
    return state.legal_moves(square)


def apply_move(state: GameState, from_square: Square, to_square: Square) -> MoveOutcome:
    """Mutates the state in place; the outcome refers to that same state."""
    return state.execute_move(from_square, to_square)


def piece_at(state: GameState, square: Square) -> Optional[Piece]:
    return state.piece_at(square)


def turn_of(state: GameState) -> Color:
    return state.turn


def is_over(state: GameState) -> bool:
    return state.over
