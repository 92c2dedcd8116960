"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE the domain layer has its own Color / PieceKind enums (src/xiangqi/pieces.py).
# --- These string versions are what the boundary (request / response models) speaks. Names are kept identical,
# --- so converting between the two is a lookup by member name.


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    GENERAL_CAPTURED = "general captured"


class Color(StrEnum):
    RED = "red"
    BLACK = "black"


class PieceKind(StrEnum):
    CHARIOT = "chariot"
    HORSE = "horse"
    ELEPHANT = "elephant"
    ADVISOR = "advisor"
    GENERAL = "general"
    CANNON = "cannon"
    SOLDIER = "soldier"
