from __future__ import annotations

from typing import Dict

from .. import settings
from ..models.enums import GrammarKind
from .primitives import IGrammar

_REG: Dict[GrammarKind, Dict[str, IGrammar]] = {kind: {} for kind in GrammarKind}


def register_grammar(g: IGrammar):
    _REG[GrammarKind(g.kind)][g.name] = g
    return g


def get_grammar(kind: GrammarKind, name: str) -> IGrammar:
    reg = _REG[GrammarKind(kind)]
    if name not in reg:
        raise KeyError(f"Unknown {GrammarKind(kind).value} grammar: {name}")
    return reg[name]


def list_grammars() -> Dict[str, list[str]]:
    return {kind.value: sorted(reg) for kind, reg in _REG.items()}


def is_valid_coordinate(value: object) -> bool:
    return get_grammar(GrammarKind.COORDINATE, settings.COORDINATE_GRAMMAR).valid(value)


def is_valid_piece_id(value: object) -> bool:
    return get_grammar(GrammarKind.PIECE, settings.PIECE_GRAMMAR).valid(value)
