from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .. import grammars  # noqa: F401  (registers the default grammars)
from ..core.grammar_registry import is_valid_coordinate, is_valid_piece_id
from ..errors import CoordinateError, DeltaError, PieceError, ValidationError
from .normalize import stringify_map


def validate_board(board: Any) -> Dict[str, Optional[str]]:
    out = stringify_map(board, "board")
    for cell, piece in out.items():
        if not is_valid_coordinate(cell):
            raise CoordinateError(f"Invalid coordinate: {cell!r}")
        if piece is not None and not is_valid_piece_id(piece):
            raise PieceError(f"Invalid piece identifier for cell {cell}: {piece!r}")
    return out


def validate_hands(hands: Any) -> Dict[str, int]:
    out = stringify_map(hands, "hands")
    for piece, delta in out.items():
        if not is_valid_piece_id(piece):
            raise PieceError(f"Invalid piece identifier in hands: {piece!r}")
        # bool is an int subclass but never a delta
        if isinstance(delta, bool) or not isinstance(delta, int) or delta == 0:
            raise DeltaError(f"Hand delta must be a non-zero integer for {piece!r}, got: {delta!r}")
    return out


def validate_toggle(toggle: Any) -> bool:
    if toggle is not True and toggle is not False:
        raise ValidationError(f"toggle must be a boolean, got: {toggle!r}")
    return toggle


def validate_fields(board: Any = None, hands: Any = None, toggle: Any = False) -> Tuple[Dict[str, Optional[str]], Dict[str, int], bool]:
    """Validate all three fields; the first offending one raises."""
    return validate_board(board), validate_hands(hands), validate_toggle(toggle)
