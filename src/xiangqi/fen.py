"""
Representation of a single position. The part that can be encoded in a (xiangqi) FEN string.
"""

from dataclasses import dataclass
from string import digits
from typing import Self

from src.core.exceptions import InvalidFENError
from src.xiangqi.pieces import FEN_TO_KIND, Color
from src.xiangqi.square import BOARD_DIMENSIONS

NUM_ROWS, NUM_COLS = BOARD_DIMENSIONS

STARTING_POSITION = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR"
STARTING_FEN = f"{STARTING_POSITION} w - - 0 1"

# Red is traditionally written as 'w' (inherited from chess), some tools write 'r'.
COLOR_CODES: dict[str, Color] = {"w": Color.RED, "r": Color.RED, "b": Color.BLACK}
UNUSED_FIELD = "-"


def is_valid_fen(fen: str) -> bool:
    """
    Check if given string follows xiangqi FEN notation.

    <board position> <side to move> - - <half move clock> <full move number>
    """
    parts = fen.split(" ")
    if len(parts) != 6:
        return False

    position, color, unused_1, unused_2, half_move_counter, full_move_counter = parts
    if not is_valid_position(position):
        return False

    if not is_valid_color_code(color):
        return False

    # castling / en passant fields only exist to stay compatible with chess FEN parsers
    if unused_1 != UNUSED_FIELD or unused_2 != UNUSED_FIELD:
        return False

    return is_valid_move_counter(half_move_counter) and is_valid_move_counter(
        full_move_counter
    )


def is_valid_position(position: str) -> bool:
    """Only check the part of the FEN encoding for the board position."""
    row_fens = position.split("/")
    if len(row_fens) != NUM_ROWS:
        return False

    for row_fen in row_fens:
        col_count = 0
        for character in row_fen:
            if character in digits:
                col_count += int(character)
            elif character.lower() in FEN_TO_KIND:
                col_count += 1
            else:
                return False

        if col_count != NUM_COLS:
            return False
    return True


def is_valid_color_code(color: str) -> bool:
    return color in COLOR_CODES


def is_valid_move_counter(counter: str) -> bool:
    return counter != "" and all(character in digits for character in counter)


@dataclass
class FENState:
    """
    Data that can be constructed from a FEN string.
    ----

    <board position string> <active color> - - <half move clock> <number of turns played>

    * The board position string is described in the Board class
    * The active color is "w" (Red) or "b" (Black)
    * The two dashes are placeholders (xiangqi has no castling or en passant)
    * The half move clock counts the number of moves since the last capture
    * The number of turns starts at 1 and increments after every move Black makes.

    ex) The standard starting position has a FEN
    rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1
    """

    position: str
    color_to_move: Color
    half_move_clock: int
    num_turns: int

    @classmethod
    def from_fen(cls, fen: str) -> Self:
        if not is_valid_fen(fen):
            raise InvalidFENError(f"Cannot interpret supplied string as FEN: {fen}")

        position, active_color, _, _, half_move_clock, num_turns = fen.split(" ")
        return cls(
            position,
            COLOR_CODES[active_color],
            int(half_move_clock),
            int(num_turns),
        )

    def to_fen(self) -> str:
        active_color = "w" if self.color_to_move == Color.RED else "b"
        return f"{self.position} {active_color} - - {self.half_move_clock} {self.num_turns}"

    @classmethod
    def starting_position(cls) -> Self:
        return cls.from_fen(STARTING_FEN)
