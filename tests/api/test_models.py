"""Unit tests for src/api/models.py"""

import pytest

from src.api.models import LegalMovesRequest, MoveRequest, NewGameRequest
from src.core.exceptions import InvalidRequestError

STARTING_FEN = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1"


# -- Validation - NewGameRequest --
def test_valid_fen() -> None:
    request = NewGameRequest(starting_fen=STARTING_FEN)
    assert request.starting_fen == STARTING_FEN


def test_starting_fen_is_optional() -> None:
    """Should be able to not supply a starting FEN, and validator just returns None."""
    assert NewGameRequest().starting_fen is None
    assert NewGameRequest(starting_fen=None).starting_fen is None


@pytest.mark.parametrize(
    "invalid_fen",
    [
        "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0",  # only 5 space-separated values
        "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1 extra",  # too many
    ],
)
def test_invalid_fen(invalid_fen: str) -> None:
    """Structurally invalid FEN: more or less than 6 space-separated fields."""
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(starting_fen=invalid_fen)


# -- Validation - squares --
def test_valid_square_names() -> None:
    request = MoveRequest(from_square="h2", to_square="e2")
    assert request.from_square == "h2"
    assert request.to_square == "e2"
    assert LegalMovesRequest(square="i9").square == "i9"


INVALID_SQUARES = [
    "nonsense",  # anything more than two characters.
    "11",  # first character is not a file letter
    "aa",  # second character is not a number
    "j0",  # only files a-i exist
    "E2",  # file letters are lower case
    "a²",  # superscripts are not rank numbers
]


@pytest.mark.parametrize("square", INVALID_SQUARES)
def test_invalid_from_square(square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square=square, to_square="e2")


@pytest.mark.parametrize("square", INVALID_SQUARES)
def test_invalid_to_square(square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(from_square="e2", to_square=square)


@pytest.mark.parametrize("square", INVALID_SQUARES)
def test_invalid_selected_square(square: str) -> None:
    with pytest.raises(InvalidRequestError):
        _ = LegalMovesRequest(square=square)
