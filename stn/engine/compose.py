"""Composition and inversion of transitions.

- board: last write wins per cell
- hands: deltas are summed; entries summing to zero are dropped
- toggle: XOR
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Dict, Optional

from ..errors import ValidationError
from ..models.transition import EMPTY_TRANSITION, Transition
from .normalize import stringify_map

logger = logging.getLogger(__name__)


def combine_pair(a: Transition, b: Transition) -> Transition:
    if not isinstance(a, Transition) or not isinstance(b, Transition):
        bad = b if isinstance(a, Transition) else a
        raise ValidationError(f"Expected Transition, got: {type(bad).__name__}")

    board = {**a.board, **b.board}

    hands: Dict[str, int] = {}
    for piece in list(a.hands) + [k for k in b.hands if k not in a.hands]:
        total = a.hands.get(piece, 0) + b.hands.get(piece, 0)
        if total:
            hands[piece] = total

    return Transition(board=board, hands=hands, toggle=a.toggle ^ b.toggle)


def fold(transitions: Iterable[Transition]) -> Transition:
    """Left fold of combine_pair; the empty transition is the identity."""
    acc = EMPTY_TRANSITION
    for t in transitions:
        acc = combine_pair(acc, t)
    return acc


def _negated_hands(t: Transition) -> Dict[str, int]:
    return {piece: -delta for piece, delta in t.hands.items()}


def invert(t: Transition) -> Transition:
    """Negate hands, keep toggle; the board is left untouched (the prior content is unknown)."""
    return Transition(board=t.board, hands=_negated_hands(t), toggle=t.toggle)


def invert_board_against(
    t: Transition,
    previous_board: Mapping[str, Optional[str]],
    *,
    strict: bool = False,
) -> Transition:
    """Inverse of t given the content of its cells before t was applied.

    Cells missing from previous_board are restored as empty; with strict=True
    an incomplete snapshot raises instead.
    """
    if not isinstance(previous_board, Mapping):
        raise ValidationError(
            f"previous_board must be a mapping of coordinate to piece or None, got: {type(previous_board).__name__}"
        )
    before = stringify_map(previous_board, "previous_board")

    missing = [cell for cell in t.board if cell not in before]
    if missing:
        if strict:
            raise ValidationError(f"previous_board is missing changed cells: {missing}")
        logger.warning("previous_board lacks %d changed cell(s), restoring as empty: %s", len(missing), missing)

    board = {cell: before.get(cell) for cell in t.board}
    return Transition(board=board, hands=_negated_hands(t), toggle=t.toggle)
