from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Callable

    from stn.models.enums import ErrorKind
    from stn.models.transition import Transition


@dataclass
class TransitionRejected:
    payload_type: str
    kind: ErrorKind
    message: str


@dataclass
class TransitionsCombined:
    operands: int
    result: Transition


T = TypeVar("T")


class EventBus:
    """In-process pub/sub for library events.

    parse() emits TransitionRejected before re-raising a validation error;
    combine() emits TransitionsCombined with the operand count and result.
    Handlers are keyed by exact event type and registered at most once.
    """

    def __init__(self) -> None:
        self._subs: dict[type[Any], list[object]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.setdefault(event_type, [])
        if handler not in lst:
            lst.append(cast("object", handler))

    def unsubscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        lst = self._subs.get(event_type, [])
        if handler in lst:
            lst.remove(handler)

    def emit(self, event: Any) -> None:
        et = type(event)
        for h in list(self._subs.get(et, [])):
            # Let exceptions propagate; callers decide how to handle them
            cast("Callable[[Any], None]", h)(event)


# Global bus instance
event_bus = EventBus()
