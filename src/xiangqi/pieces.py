"""Defines the xiangqi pieces"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Self


class PieceKind(Enum):
    CHARIOT = auto()
    HORSE = auto()
    ELEPHANT = auto()
    ADVISOR = auto()
    GENERAL = auto()
    CANNON = auto()
    SOLDIER = auto()


class Color(Enum):
    RED = auto()
    BLACK = auto()

    @property
    def opponent(self) -> "Color":
        return Color.BLACK if self == Color.RED else Color.RED


# WXF style FEN letters. Elephant is 'b' (bishop) and Horse is 'n' (knight) for historical reasons.
FEN_TO_KIND: dict[str, PieceKind] = {
    "r": PieceKind.CHARIOT,
    "n": PieceKind.HORSE,
    "b": PieceKind.ELEPHANT,
    "a": PieceKind.ADVISOR,
    "k": PieceKind.GENERAL,
    "c": PieceKind.CANNON,
    "p": PieceKind.SOLDIER,
}

KIND_TO_FEN: dict[PieceKind, str] = {value: key for key, value in FEN_TO_KIND.items()}

# Traditional characters. Some pieces use a different character for each side.
GLYPHS: dict[PieceKind, dict[Color, str]] = {
    PieceKind.CHARIOT: {Color.RED: "車", Color.BLACK: "車"},
    PieceKind.HORSE: {Color.RED: "馬", Color.BLACK: "馬"},
    PieceKind.ELEPHANT: {Color.RED: "相", Color.BLACK: "象"},
    PieceKind.ADVISOR: {Color.RED: "仕", Color.BLACK: "士"},
    PieceKind.GENERAL: {Color.RED: "帥", Color.BLACK: "將"},
    PieceKind.CANNON: {Color.RED: "炮", Color.BLACK: "炮"},
    PieceKind.SOLDIER: {Color.RED: "兵", Color.BLACK: "卒"},
}


@dataclass(frozen=True)
class Piece:
    """Pieces have no identity: two red horses are equal. No promotion exists, hence frozen."""

    kind: PieceKind
    color: Color

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # upper case: Red pieces, lower case: Black pieces
        color = Color.RED if character.isupper() else Color.BLACK
        kind = FEN_TO_KIND[character.lower()]
        return cls(kind, color)

    def to_fen(self) -> str:
        return (
            KIND_TO_FEN[self.kind].upper()
            if self.color == Color.RED
            else KIND_TO_FEN[self.kind]
        )

    @property
    def glyph(self) -> str:
        return GLYPHS[self.kind][self.color]
