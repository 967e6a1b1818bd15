from __future__ import annotations

import re

from ..core.grammar_registry import register_grammar
from ..models.enums import GrammarKind

# <style letter>:<state modifier?><type letter><terminal marker?>
_QPI = re.compile(r"(?P<sin>[A-Za-z]):(?P<state>[-+]?)(?P<type>[A-Za-z])(?P<terminal>\^?)")


class QpiGrammar:
    """Qualified piece identifiers such as "C:P", "c:p" or "S:+N".

    Style and type letters must share case: the case encodes the side.
    """

    name = "qpi"
    kind = GrammarKind.PIECE

    def valid(self, value: object) -> bool:
        if not isinstance(value, str):
            return False
        m = _QPI.fullmatch(value)
        if m is None:
            return False
        return m.group("sin").isupper() == m.group("type").isupper()


grammar = register_grammar(QpiGrammar())
