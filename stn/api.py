"""Module-level helpers tying normalization, validation and composition together.

Payloads are mappings with optional "board", "hands" and "toggle" fields, e.g.

    {"board": {"e2": None, "e4": "C:P"}, "toggle": True}

or Transition instances, which pass through unchanged.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Optional

from .engine import compose as composition
from .errors import ValidationError
from .events import TransitionRejected, TransitionsCombined, event_bus
from .models.transition import EMPTY_TRANSITION, PASS_TRANSITION, Transition


def is_valid(data: Any) -> bool:
    """True if data is a Transition or a payload that parses.

    Never raises for bad payloads. A grammar name in settings that is not
    registered is a configuration error and still raises KeyError.
    """
    if isinstance(data, Transition):
        return True
    if not isinstance(data, Mapping):
        return False
    return Transition.is_valid(data)


def parse(data: Any) -> Transition:
    if isinstance(data, Transition):
        return data
    try:
        if not isinstance(data, Mapping):
            raise ValidationError(f"transition must be a mapping or a Transition, got: {type(data).__name__}")
        return Transition.model_validate(data)
    except ValidationError as e:
        event_bus.emit(TransitionRejected(payload_type=type(data).__name__, kind=e.kind, message=e.message))
        raise


def transition(
    board: Optional[Mapping[Any, Optional[str]]] = None,
    hands: Optional[Mapping[Any, int]] = None,
    toggle: bool = False,
) -> Transition:
    """Build a Transition from structured arguments; keys are normalized, values validated."""
    return Transition(board=board, hands=hands, toggle=toggle)


def empty() -> Transition:
    return EMPTY_TRANSITION


def pass_() -> Transition:
    """Toggle-only transition (`pass` is a keyword)."""
    return PASS_TRANSITION


def _flatten(items: Any) -> List[Any]:
    out: List[Any] = []
    for it in items:
        if it is None:
            continue
        # Transitions are pydantic models and iterate over their fields
        if isinstance(it, Iterable) and not isinstance(it, (Transition, Mapping, str, bytes)):
            out.extend(_flatten(it))
        else:
            out.append(it)
    return out


def combine(*transitions: Any) -> Transition:
    """Compose transitions or payloads left to right.

    Nested iterables (lists, tuples, generators) are flattened and None
    operands skipped; no operands yields the empty transition.
    """
    parsed = [parse(t) for t in _flatten(transitions)]
    result = composition.fold(parsed)
    event_bus.emit(TransitionsCombined(operands=len(parsed), result=result))
    return result


compose = combine


def to_structural(t: Transition) -> Dict[str, Any]:
    return t.to_structural()


def invert(data: Any) -> Transition:
    return composition.invert(parse(data))


def invert_board_against(data: Any, previous_board: Mapping[Any, Optional[str]], *, strict: bool = False) -> Transition:
    return composition.invert_board_against(parse(data), previous_board, strict=strict)
