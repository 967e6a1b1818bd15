from enum import Enum


class TransitionField(str, Enum):
    """Top-level fields of the structural form."""

    BOARD = "board"
    HANDS = "hands"
    TOGGLE = "toggle"


class ErrorKind(str, Enum):
    """
    Discriminant carried by every validation error:
    - VALIDATION: malformed shape (not a mapping, wrong container, non-boolean toggle)
    - COORDINATE: a board key fails the coordinate grammar
    - PIECE: a board value or hand key fails the piece grammar
    - DELTA: a hand value is not a non-zero integer
    """

    VALIDATION = "validation"
    COORDINATE = "coordinate"
    PIECE = "piece"
    DELTA = "delta"


class GrammarKind(str, Enum):
    COORDINATE = "coordinate"
    PIECE = "piece"
