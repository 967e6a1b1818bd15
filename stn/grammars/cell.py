from __future__ import annotations

import re

from ..core.grammar_registry import register_grammar
from ..models.enums import GrammarKind

# Dimensions cycle: lowercase letters, positive integer, uppercase letters, ...
_DIMENSIONS = (
    re.compile(r"[a-z]+"),
    re.compile(r"[1-9][0-9]*"),
    re.compile(r"[A-Z]+"),
)


def dimensions(coord: str) -> list[str]:
    """Split a coordinate into its dimension tokens, e.g. "a1A" -> ["a", "1", "A"].

    Raises ValueError if the string does not follow the dimension cycle.
    """
    if not coord:
        raise ValueError("empty coordinate")
    parts: list[str] = []
    pos = 0
    while pos < len(coord):
        m = _DIMENSIONS[len(parts) % 3].match(coord, pos)
        if m is None:
            raise ValueError(f"bad coordinate at offset {pos}: {coord!r}")
        parts.append(m.group())
        pos = m.end()
    return parts


class CellGrammar:
    name = "cell"
    kind = GrammarKind.COORDINATE

    def valid(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        try:
            dimensions(value)
        except ValueError:
            return False
        return True


grammar = register_grammar(CellGrammar())
