"""The Board implements all rules that affect the `position` (the configuration of pieces on the board)"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import InvalidFENError
from src.xiangqi.fen import STARTING_POSITION, is_valid_position
from src.xiangqi.moves import MOVEMENT_RULES, CandidateMovesFn, Move
from src.xiangqi.pieces import Color, Piece, PieceKind
from src.xiangqi.square import BOARD_DIMENSIONS, Square


@dataclass
class Board:
    position: dict[Square, Optional[Piece]]

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board using the board part of a xiangqi FEN string.

        ex. standard starting position:
        rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR
        means:
        * black pieces are on the top row (row 0), chariot, horse, elephant, advisor, general, ... read left-to-right
        * row 1 is empty, row 2 holds the black cannons on the 2nd and 8th file, row 3 the five black soldiers
        * rows 4 and 5 (either side of the river) are empty
        * upper case letters are the red pieces, mirrored on rows 6 to 9
        """
        if not is_valid_position(fen_str):
            raise InvalidFENError(f"Cannot interpret supplied string as a board position: {fen_str}")

        position: dict[Square, Optional[Piece]] = {}
        for row, fen_one_row in enumerate(fen_str.split("/")):
            col = 0
            for character in fen_one_row:
                if character.isalpha():
                    position[Square(row, col)] = Piece.from_fen(character)
                    col += 1
                else:
                    # A digit denotes the amount of empty squares after each other
                    for _ in range(int(character)):
                        position[Square(row, col)] = None
                        col += 1
        return cls(position)

    @classmethod
    def initial(cls) -> Self:
        """The canonical opening position"""
        return cls.from_fen(STARTING_POSITION)

    @classmethod
    def empty(cls) -> Self:
        rows, cols = BOARD_DIMENSIONS
        return cls({Square(row, col): None for row in range(rows) for col in range(cols)})

    def to_fen(self) -> str:
        """Rows are separated by slashes in the FEN string, top row (Black's back rank) first."""
        return "/".join(self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0]))

    def _row_to_fen(self, row: int) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for col in range(BOARD_DIMENSIONS[1]):
            piece = self.piece(Square(row, col))
            if piece is None:
                empty_count += 1
                continue

            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    def piece(self, square: Square) -> Optional[Piece]:
        square.assert_within_bounds()
        return self.position[square]

    def locate_pieces(self, kind: PieceKind, color: Optional[Color] = None) -> list[Square]:
        return [
            square
            for square, piece in self.position.items()
            if piece is not None
            and piece.kind == kind
            and (color is None or piece.color == color)
        ]

    def locate_color(self, color: Color) -> list[Square]:
        return [
            square
            for square, piece in self.position.items()
            if piece is not None and piece.color == color
        ]

    def empty_squares(self) -> list[Square]:
        return [square for square, piece in self.position.items() if piece is None]

    def candidate_moves(self, square: Square) -> list[Move]:
        """Moves of the piece standing on the square. Empty if there is no piece."""
        piece = self.piece(square)
        if piece is None:
            return []
        movement_rule: CandidateMovesFn = MOVEMENT_RULES[piece.kind]
        return movement_rule(square, self)

    def generate_candidate_moves(self, color: Color) -> list[Move]:
        """All moves for the pieces of one side. No check-safety filtering takes place."""
        candidate_moves: list[Move] = []
        for starting_square in self.locate_color(color):
            candidate_moves.extend(self.candidate_moves(starting_square))
        return candidate_moves

    def move_piece(self, move: Move) -> Optional[Piece]:
        """Update the position on the board and hand back whatever got captured."""
        piece_that_moved = self.piece(move.from_square)
        captured = self.piece(move.to_square)
        self.position[move.from_square] = None
        self.position[move.to_square] = piece_that_moved
        return captured

    def place_piece(self, piece: Piece, square: Square) -> None:
        """Set up helper (positions for tests, puzzles)"""
        square.assert_within_bounds()
        self.position[square] = piece

    def remove_piece(self, square: Square) -> Optional[Piece]:
        removed = self.piece(square)
        self.position[square] = None
        return removed

    def has_general(self, color: Color) -> bool:
        return bool(self.locate_pieces(PieceKind.GENERAL, color))
