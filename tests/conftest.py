"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures required for testing multiple layers.
"""

from typing import Callable

import pytest

from src.xiangqi.board import Board
from src.xiangqi.pieces import Piece
from src.xiangqi.square import Square

PlacedPieces = dict[tuple[int, int], str]


@pytest.fixture
def board_with_pieces() -> Callable[[PlacedPieces], Board]:
    """
    Call the inner function with {(row, col): fen character} to get an otherwise empty board.
    Upper case characters are red pieces, lower case characters black pieces.
    """

    def _create_board(pieces: PlacedPieces) -> Board:
        board = Board.empty()
        for (row, col), fen_char in pieces.items():
            board.place_piece(Piece.from_fen(fen_char), Square(row, col))
        return board

    return _create_board
