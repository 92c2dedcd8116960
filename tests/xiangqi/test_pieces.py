"""Unit tests for /src/xiangqi/pieces.py"""

import pytest

from src.xiangqi.pieces import FEN_TO_KIND, GLYPHS, KIND_TO_FEN, Color, Piece, PieceKind


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_KIND.keys()])
def test_creating_red_piece_from_fen(char: str) -> None:
    """Capital letters are used for red pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_KIND[char.lower()]
    assert piece.color == Color.RED


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_KIND.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.kind == FEN_TO_KIND[char]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("kind", list(PieceKind))
def test_pieces_to_fen(kind: PieceKind) -> None:
    assert Piece(kind, Color.RED).to_fen() == KIND_TO_FEN[kind].upper()
    assert Piece(kind, Color.BLACK).to_fen() == KIND_TO_FEN[kind].lower()


def test_every_kind_has_a_fen_letter_and_glyphs() -> None:
    assert set(KIND_TO_FEN) == set(PieceKind)
    assert set(GLYPHS) == set(PieceKind)
    assert all(set(glyphs) == set(Color) for glyphs in GLYPHS.values())


@pytest.mark.parametrize(
    "kind, red_glyph, black_glyph",
    [
        (PieceKind.GENERAL, "帥", "將"),
        (PieceKind.ELEPHANT, "相", "象"),
        (PieceKind.CHARIOT, "車", "車"),
    ],
)
def test_glyphs(kind: PieceKind, red_glyph: str, black_glyph: str) -> None:
    assert Piece(kind, Color.RED).glyph == red_glyph
    assert Piece(kind, Color.BLACK).glyph == black_glyph


def test_pieces_are_values() -> None:
    """No identity: two red horses are interchangeable (and usable as dictionary keys)"""
    assert Piece(PieceKind.HORSE, Color.RED) == Piece(PieceKind.HORSE, Color.RED)
    assert Piece(PieceKind.HORSE, Color.RED) != Piece(PieceKind.HORSE, Color.BLACK)
    assert len({Piece(PieceKind.HORSE, Color.RED), Piece(PieceKind.HORSE, Color.RED)}) == 1


def test_opponent() -> None:
    assert Color.RED.opponent == Color.BLACK
    assert Color.BLACK.opponent == Color.RED
