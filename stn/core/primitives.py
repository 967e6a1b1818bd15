from __future__ import annotations

from typing import Optional, Protocol

from ..models.enums import GrammarKind

# Board value meaning "this cell becomes empty"; serialized as JSON null.
EMPTY = None

PieceOrEmpty = Optional[str]


class _Absent:
    """Marker for a coordinate that is not part of a transition's board delta."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class IGrammar(Protocol):
    """External validity predicate for coordinates or piece identifiers."""
    name: str
    kind: GrammarKind
    def valid(self, value: object) -> bool: ...
