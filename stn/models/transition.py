from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as SchemaError

from ..core.primitives import ABSENT
from ..engine.normalize import normalize_key, normalize_root
from ..engine.validation import validate_fields
from ..errors import ValidationError


class Transition(BaseModel):
    """Net difference between two positions.

    - board: final content of every changed cell (piece identifier, or None when the cell empties)
    - hands: non-zero reserve deltas per piece identifier
    - toggle: True when the side to move switches

    Instances are frozen; every "modifying" method returns a new Transition.
    """

    model_config = ConfigDict(frozen=True)

    board: Mapping[str, Optional[str]] = Field(default_factory=dict)
    hands: Mapping[str, int] = Field(default_factory=dict)
    toggle: bool = False

    @model_validator(mode="before")
    @classmethod
    def check_fields(cls, data: Any) -> Dict[str, Any]:
        # Errors from here are not ValueErrors, so pydantic lets them through as-is.
        norm = normalize_root(data)
        board, hands, toggle = validate_fields(
            norm.get("board"), norm.get("hands"), norm.get("toggle", False)
        )
        return {"board": board, "hands": hands, "toggle": toggle}

    @model_validator(mode="after")
    def freeze_maps(self) -> Transition:
        # frozen=True only blocks reassignment; the maps themselves must be read-only too
        object.__setattr__(self, "board", MappingProxyType(dict(self.board)))
        object.__setattr__(self, "hands", MappingProxyType(dict(self.hands)))
        return self

    # ----- parsing -----

    @classmethod
    def parse(cls, data: Any) -> Transition:
        if isinstance(data, Transition):
            return data
        return cls.model_validate(data)

    @classmethod
    def is_valid(cls, data: Any) -> bool:
        try:
            cls.parse(data)
        except (ValidationError, SchemaError):
            return False
        return True

    # ----- queries -----

    @property
    def board_changes(self) -> Mapping[str, Optional[str]]:
        return self.board

    @property
    def hand_changes(self) -> Mapping[str, int]:
        return self.hands

    @property
    def is_empty(self) -> bool:
        return not self.board and not self.hands and not self.toggle

    @property
    def is_pass(self) -> bool:
        return not self.board and not self.hands and self.toggle

    def board_change(self, cell: Any):
        """Piece identifier, None (cell becomes empty) or ABSENT (cell not in the delta)."""
        return self.board.get(normalize_key(cell), ABSENT)

    def hand_change(self, piece: Any) -> Optional[int]:
        return self.hands.get(normalize_key(piece))

    def has_board_change(self, cell: Any) -> bool:
        return normalize_key(cell) in self.board

    def has_hand_change(self, piece: Any) -> bool:
        return normalize_key(piece) in self.hands

    # ----- copy-with -----

    def with_board_change(self, cell: Any, value: Optional[str]) -> Transition:
        return type(self)(board={**self.board, normalize_key(cell): value}, hands=self.hands, toggle=self.toggle)

    def with_hand_change(self, piece: Any, delta: int) -> Transition:
        return type(self)(board=self.board, hands={**self.hands, normalize_key(piece): delta}, toggle=self.toggle)

    def with_toggle(self, value: bool) -> Transition:
        return type(self)(board=self.board, hands=self.hands, toggle=value)

    def without_board_change(self, cell: Any) -> Transition:
        key = normalize_key(cell)
        if key not in self.board:
            return self
        board = {k: v for k, v in self.board.items() if k != key}
        return type(self)(board=board, hands=self.hands, toggle=self.toggle)

    def without_hand_change(self, piece: Any) -> Transition:
        key = normalize_key(piece)
        if key not in self.hands:
            return self
        hands = {k: v for k, v in self.hands.items() if k != key}
        return type(self)(board=self.board, hands=hands, toggle=self.toggle)

    # ----- algebra -----

    def combine(self, other: Transition) -> Transition:
        from ..engine.compose import combine_pair

        return combine_pair(self, other)

    def invert(self) -> Transition:
        from ..engine.compose import invert

        return invert(self)

    def invert_board_against(self, previous_board: Mapping[str, Optional[str]], *, strict: bool = False) -> Transition:
        from ..engine.compose import invert_board_against

        return invert_board_against(self, previous_board, strict=strict)

    # ----- structural form -----

    def to_structural(self) -> Dict[str, Any]:
        """Minimal structural form: fields appear only when non-default."""
        out: Dict[str, Any] = {}
        if self.board:
            out["board"] = dict(self.board)
        if self.hands:
            out["hands"] = dict(self.hands)
        if self.toggle:
            out["toggle"] = True
        return out

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transition):
            return NotImplemented
        return dict(self.board) == dict(other.board) and dict(self.hands) == dict(other.hands) and self.toggle == other.toggle

    def __hash__(self) -> int:
        return hash((frozenset(self.board.items()), frozenset(self.hands.items()), self.toggle))


# Canonical instances; frozen, so safe to share.
EMPTY_TRANSITION = Transition()
PASS_TRANSITION = Transition(toggle=True)
