from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict

from ..errors import ValidationError
from ..models.enums import TransitionField

# Accepted spellings per field, in precedence order. Keys are compared after
# normalize_key, so TransitionField members match the canonical name.
_SPELLINGS: Dict[TransitionField, tuple[str, ...]] = {
    TransitionField.BOARD: ("board", "board_changes"),
    TransitionField.HANDS: ("hands", "hand_changes"),
    TransitionField.TOGGLE: ("toggle",),
}

_MISSING = object()


def normalize_key(key: Any) -> Any:
    if isinstance(key, Enum):
        key = key.value
    if isinstance(key, str):
        return str(key)
    if isinstance(key, bytes):
        try:
            return key.decode("ascii")
        except UnicodeDecodeError:
            return key
    return key


def stringify_map(m: Any, field: str) -> Dict[Any, Any]:
    """Fresh dict with normalized keys; None means an empty map."""
    if m is None:
        return {}
    if not isinstance(m, Mapping):
        raise ValidationError(f"{field} must be a mapping, got: {type(m).__name__}")
    return {normalize_key(k): v for k, v in m.items()}


def _lookup(data: Mapping, keys: Dict[Any, Any], field: TransitionField) -> Any:
    for spelling in _SPELLINGS[field]:
        if spelling in keys:
            return data[keys[spelling]]
    return _MISSING


def normalize_root(data: Any) -> Dict[str, Any]:
    """Map a raw payload onto canonical "board"/"hands"/"toggle" keys.

    Unknown top-level keys are dropped. Fields that are absent stay absent.
    """
    if not isinstance(data, Mapping):
        raise ValidationError(f"transition must be a mapping, got: {type(data).__name__}")

    keys: Dict[Any, Any] = {}
    for k in data:
        keys.setdefault(normalize_key(k), k)

    out: Dict[str, Any] = {}
    board = _lookup(data, keys, TransitionField.BOARD)
    if board is not _MISSING:
        out["board"] = stringify_map(board, "board")
    hands = _lookup(data, keys, TransitionField.HANDS)
    if hands is not _MISSING:
        out["hands"] = stringify_map(hands, "hands")
    toggle = _lookup(data, keys, TransitionField.TOGGLE)
    if toggle is not _MISSING:
        out["toggle"] = toggle
    return out
