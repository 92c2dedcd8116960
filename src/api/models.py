"""Requests and Response models"""

from string import digits
from typing import Optional

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceKind, Status

ICCS_FILES = "abcdefghi"


def _is_iccs_notation(value: str) -> bool:
    if len(value) != 2:
        return False
    return value[0] in ICCS_FILES and value[1] in digits


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    starting_fen: Optional[str] = None

    @field_validator("starting_fen")
    @classmethod
    def validate_starting_fen(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        parts = value.strip().split(" ")
        if len(parts) != 6:
            raise InvalidRequestError(
                "FEN string must contain 6 space-separated parts."
            )
        return value.strip()


class LegalMovesRequest(BaseModel):
    square: str

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_iccs_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


class MoveRequest(BaseModel):
    from_square: str
    to_square: str

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        if not _is_iccs_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret square: {value!r} as a valid square name."
            )
        return value


# --- RESPONSE MODELS ---
class PieceResponse(BaseModel):
    kind: PieceKind
    color: Color
    glyph: str


class GameResponse(BaseModel):
    fen_state: str
    turn: Color
    status: Status
    winner: Optional[Color]
    move_history: list[str]


class LegalMovesResponse(BaseModel):
    square: str
    color: Optional[Color]
    legal_moves: list[str]


class MoveResponse(BaseModel):
    game: GameResponse
    move: str
    captured: Optional[PieceResponse]
    winner: Optional[Color]
