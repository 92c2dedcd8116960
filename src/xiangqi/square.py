"""
A square (intersection) on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import digits

from src.core.exceptions import InvalidSquareError
from src.xiangqi.pieces import Color

# (rows, columns). Row 0 is Black's back rank, row 9 is Red's back rank.
BOARD_DIMENSIONS = (10, 9)

# Black owns rows 0-4, Red owns rows 5-9. The river runs in between.
RIVER_ROW = 5
PALACE_COLUMNS = range(3, 6)
PALACE_ROWS: dict[Color, range] = {
    Color.BLACK: range(0, 3),
    Color.RED: range(7, 10),
}

ICCS_FILES = "abcdefghi"


@dataclass(frozen=True)
class Square:
    row: int
    col: int

    @classmethod
    def from_iccs(cls, sq: str) -> Square:
        """
        ICCS notation: file letter a-i (left to right, seen from Red) + rank digit 0-9 counted from Red's back rank.
        So 'a0' is row 9, column 0 and 'i9' is row 0, column 8.
        """
        if len(sq) != 2 or sq[0] not in ICCS_FILES or sq[1] not in digits:
            raise InvalidSquareError(f"Cannot interpret {sq!r} as a square name.")
        col = ICCS_FILES.index(sq[0])
        row = BOARD_DIMENSIONS[0] - 1 - int(sq[1])
        return cls(row, col)

    def to_iccs(self) -> str:
        self.assert_within_bounds()
        return f"{ICCS_FILES[self.col]}{BOARD_DIMENSIONS[0] - 1 - self.row}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.col < BOARD_DIMENSIONS[1]
        )

    def assert_within_bounds(self) -> None:
        if not self.is_within_bounds():
            raise InvalidSquareError(
                f"Square {self} lies outside of the {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
            )

    def offset(self, drow: int, dcol: int) -> Square:
        return Square(self.row + drow, self.col + dcol)

    def in_palace(self, color: Color) -> bool:
        return self.col in PALACE_COLUMNS and self.row in PALACE_ROWS[color]

    def on_own_side(self, color: Color) -> bool:
        """Elephants never leave their own side of the river"""
        if color == Color.BLACK:
            return self.row < RIVER_ROW
        return self.row >= RIVER_ROW

    def across_river(self, color: Color) -> bool:
        return not self.on_own_side(color)
