"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the move set for each piece kind.

There is no check-safety filtering in xiangqi as played here: a move that leaves your own General capturable is still a move.
The order in which directions are listed below is the order in which moves are reported.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Self

from src.core.exceptions import InvalidSquareError
from src.xiangqi.pieces import Color, Piece, PieceKind
from src.xiangqi.square import Square


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def piece(self, square: Square) -> Optional[Piece]: ...


Vector = tuple[int, int]


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Square
    to_square: Square

    @classmethod
    def from_iccs(cls, iccs: str) -> Self:
        """
        ICCS coordinate notation: <from square><to square>

        examples:
        * "h2e2": the cannon on h2 moves to the centre file (the classic opening)
        * "b0c2": the horse on b0 develops to c2
        """
        if len(iccs) != 4:
            raise InvalidSquareError(f"Cannot interpret {iccs!r} as a move.")
        return cls(Square.from_iccs(iccs[:2]), Square.from_iccs(iccs[2:]))

    def to_iccs(self) -> str:
        return f"{self.from_square.to_iccs()}{self.to_square.to_iccs()}"


# (row, col) steps. Orthogonal directions in the order: right, left, down, up
ORTHOGONALS: list[Vector] = [(0, 1), (0, -1), (1, 0), (-1, 0)]
DIAGONALS: list[Vector] = [(-1, -1), (-1, 1), (1, -1), (1, 1)]

# Horse jumps as (jump, leg): the leg is the square one step along the primary direction of the jump
HORSE_JUMPS: list[tuple[Vector, Vector]] = [
    ((-2, -1), (-1, 0)),
    ((-2, 1), (-1, 0)),
    ((2, -1), (1, 0)),
    ((2, 1), (1, 0)),
    ((-1, -2), (0, -1)),
    ((1, -2), (0, -1)),
    ((-1, 2), (0, 1)),
    ((1, 2), (0, 1)),
]

ELEPHANT_STEPS: list[Vector] = [(-2, -2), (-2, 2), (2, -2), (2, 2)]


# --- SHARED HELPERS ---
def is_available(square: Square, target_square: Square, board: Board) -> bool:
    """
    The single capture rule: a target is available if it is on the board and not occupied by your own piece.
    Any piece may capture any enemy piece, the General included.
    """
    if not target_square.is_within_bounds():
        return False
    target = board.piece(target_square)
    return target is None or target.color != _moving_piece(square, board).color


def single_step_move(
    square: Square,
    board: Board,
    deltas: list[Vector],
    zone: Optional[Callable[[Square], bool]] = None,
) -> list[Move]:
    """Bounded step for every delta. `zone` restricts destinations further (palace, own side of the river)"""
    moves: list[Move] = []
    for drow, dcol in deltas:
        target_square = square.offset(drow, dcol)
        if zone is not None and not zone(target_square):
            continue
        if is_available(square, target_square, board):
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting algorithm
    -----

    Move along each direction until we hit another piece or the edge of the board.
    The first occupied square is only included if the opponent stands on it.
    """
    player_color = _moving_piece(square, board).color

    moves: list[Move] = []
    for drow, dcol in directions:
        target_square = square
        while True:
            target_square = target_square.offset(drow, dcol)
            if not target_square.is_within_bounds():
                break

            target = board.piece(target_square)
            if target is not None:
                if target.color != player_color:
                    moves.append(Move(from_square=square, to_square=target_square))
                break

            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def hurdle_raycasting_move(
    square: Square, board: Board, directions: list[Vector]
) -> list[Move]:
    """
    Raycasting for the cannon
    -----

    Before the first piece on the ray (the mount, any color), every empty square is a move.
    Past the mount, empty squares are skipped and the next occupied square ends the ray.
    That square is a capture if it holds an enemy piece. Friend or foe, scanning stops there.
    """
    player_color = _moving_piece(square, board).color

    moves: list[Move] = []
    for drow, dcol in directions:
        target_square = square
        mounted = False
        while True:
            target_square = target_square.offset(drow, dcol)
            if not target_square.is_within_bounds():
                break

            target = board.piece(target_square)
            if not mounted:
                if target is None:
                    moves.append(Move(from_square=square, to_square=target_square))
                else:
                    mounted = True
                continue

            if target is not None:
                if target.color != player_color:
                    moves.append(Move(from_square=square, to_square=target_square))
                break
    return moves


def _moving_piece(square: Square, board: Board) -> Piece:
    piece = board.piece(square)
    # for the type checker: strategies are only ever dispatched for occupied squares
    assert piece is not None
    return piece


# --- MOVEMENT RULES ---
def candidate_chariot_moves(square: Square, board: Board) -> list[Move]:
    """Chariots slide horizontally or vertically"""
    return raycasting_move(square, board, ORTHOGONALS)


def candidate_horse_moves(square: Square, board: Board) -> list[Move]:
    """
    Horses move one step orthogonally, then one step diagonally outwards (|delta_row| + |delta_col| = 3).
    Unlike the chess knight they can be blocked: any piece on the leg square ('hobbling the horse') prevents the jump.
    """
    moves: list[Move] = []
    for (drow, dcol), (leg_row, leg_col) in HORSE_JUMPS:
        target_square = square.offset(drow, dcol)
        if not target_square.is_within_bounds():
            continue

        # blocked regardless of the color of the piece on the leg
        if board.piece(square.offset(leg_row, leg_col)) is not None:
            continue

        if is_available(square, target_square, board):
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def candidate_elephant_moves(square: Square, board: Board) -> list[Move]:
    """
    Elephants move exactly two points diagonally and never cross the river.
    A piece on the midpoint ('blocking the elephant's eye') prevents the move.
    """
    color = _moving_piece(square, board).color
    moves: list[Move] = []
    for drow, dcol in ELEPHANT_STEPS:
        target_square = square.offset(drow, dcol)
        if not target_square.is_within_bounds():
            continue

        if not target_square.on_own_side(color):
            continue

        eye = square.offset(drow // 2, dcol // 2)
        if board.piece(eye) is not None:
            continue

        if is_available(square, target_square, board):
            moves.append(Move(from_square=square, to_square=target_square))
    return moves


def candidate_advisor_moves(square: Square, board: Board) -> list[Move]:
    """Advisors step one point diagonally and stay inside the palace"""
    color = _moving_piece(square, board).color
    return single_step_move(
        square, board, DIAGONALS, zone=lambda target: target.in_palace(color)
    )


def candidate_general_moves(square: Square, board: Board) -> list[Move]:
    """
    The General steps one point orthogonally and stays inside the palace.

    NOTE: The 'flying general' rule (generals may not face each other on an open file) is not enforced.
    """
    color = _moving_piece(square, board).color
    return single_step_move(
        square, board, ORTHOGONALS, zone=lambda target: target.in_palace(color)
    )


def candidate_cannon_moves(square: Square, board: Board) -> list[Move]:
    """Cannons move like chariots, but capture by jumping over exactly one piece"""
    return hurdle_raycasting_move(square, board, ORTHOGONALS)


def candidate_soldier_moves(square: Square, board: Board) -> list[Move]:
    """
    A soldier:
    - moves a single point forward (Red moves up the board, Black moves down)
    - after crossing the river, may also step a single point sideways
    - never moves backwards
    """
    color = _moving_piece(square, board).color
    forward = -1 if color == Color.RED else 1
    deltas: list[Vector] = [(forward, 0)]
    if square.across_river(color):
        deltas.extend([(0, -1), (0, 1)])
    return single_step_move(square, board, deltas)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Square, Board], list[Move]]
MOVEMENT_RULES: dict[PieceKind, CandidateMovesFn] = {
    PieceKind.CHARIOT: candidate_chariot_moves,
    PieceKind.HORSE: candidate_horse_moves,
    PieceKind.ELEPHANT: candidate_elephant_moves,
    PieceKind.ADVISOR: candidate_advisor_moves,
    PieceKind.GENERAL: candidate_general_moves,
    PieceKind.CANNON: candidate_cannon_moves,
    PieceKind.SOLDIER: candidate_soldier_moves,
}
