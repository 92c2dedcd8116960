"""
Orchestration of communication from the caller (UI) to the business logic (and the reverse direction).

One service instance owns one game session. The engine trusts its caller, so the gating the board UI used to do lives here:
* only pieces of the side to move can be selected
* only moves that were generated for the selected piece are executed
* nothing is accepted once a General has been captured
"""

import logging
from typing import Optional

from src.api.models import (
    GameResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    PieceResponse,
)
from src.core.config import Settings
from src.core.exceptions import GameOverError, IllegalMoveError, NotYourTurnError
from src.core.logger import setup_logger
from src.core.shared_types import Color, PieceKind, Status
from src.xiangqi.game import GameState, apply_move, legal_moves, new_game
from src.xiangqi.pieces import Piece
from src.xiangqi.square import Square

logger = logging.getLogger(__name__)


class XiangqiService:
    """Holds the single GameState of a session."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or Settings.from_env()
        setup_logger(self.settings.log_level)
        self.game: GameState = new_game(strict=self.settings.strict_moves)

    # -- caller facing logic ---
    def new_game(self, request: NewGameRequest) -> GameResponse:
        """Replace the held game. Optionally start from the supplied position."""
        self.game = new_game(request.starting_fen, strict=self.settings.strict_moves)
        logger.info("New game started from %s", self.game.to_fen())
        return self._create_game_response()

    def reset(self) -> GameResponse:
        return self.new_game(NewGameRequest())

    def get_game_state(self) -> GameResponse:
        return self._create_game_response()

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Selecting a piece: list where it can go."""
        self._assert_in_progress()

        square = Square.from_iccs(request.square)
        piece = self.game.piece_at(square)
        if piece is not None:
            self._assert_your_turn(piece)

        return LegalMovesResponse(
            square=request.square,
            color=Color[piece.color.name] if piece else None,
            legal_moves=[target.to_iccs() for target in legal_moves(self.game, square)],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt. Only moves offered by legal_moves() are accepted."""
        self._assert_in_progress()

        from_square = Square.from_iccs(request.from_square)
        to_square = Square.from_iccs(request.to_square)
        piece = self.game.piece_at(from_square)
        if piece is not None:
            self._assert_your_turn(piece)

        if to_square not in legal_moves(self.game, from_square):
            raise IllegalMoveError(
                f"Move not allowed: {request.from_square}{request.to_square}"
            )

        outcome = apply_move(self.game, from_square, to_square)
        return MoveResponse(
            game=self._create_game_response(),
            move=outcome.move.to_iccs(),
            captured=self._create_piece_response(outcome.captured),
            winner=Color[outcome.winner.name] if outcome.winner else None,
        )

    # -- Internal helpers --
    def _assert_in_progress(self) -> None:
        if self.game.over:
            raise GameOverError("Game is over. Start a new game to keep playing.")

    def _assert_your_turn(self, piece: Piece) -> None:
        if piece.color != self.game.turn:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {self.game.turn.name.lower()} to make a move first."
            )

    def _create_game_response(self) -> GameResponse:
        return GameResponse(
            fen_state=self.game.to_fen(),
            turn=Color[self.game.turn.name],
            status=Status[self.game.status.name],
            winner=Color[self.game.winner.name] if self.game.winner else None,
            move_history=[move.to_iccs() for move in self.game.moves],
        )

    def _create_piece_response(self, piece: Optional[Piece]) -> Optional[PieceResponse]:
        if piece is None:
            return None
        return PieceResponse(
            kind=PieceKind[piece.kind.name],
            color=Color[piece.color.name],
            glyph=piece.glyph,
        )
