"""State Transition Notation: net differences between two game positions.

- api.py: is_valid, parse, transition, empty, pass_, combine/compose, to_structural
- models/transition.py: the immutable Transition value type
- engine/: key normalization, field validation, composition and inversion
- grammars/: default coordinate ("cell") and piece identifier ("qpi") grammars
"""

from . import settings
from .api import (
    combine,
    compose,
    empty,
    invert,
    invert_board_against,
    is_valid,
    parse,
    pass_,
    to_structural,
    transition,
)
from .core.grammar_registry import get_grammar, list_grammars, register_grammar
from .core.primitives import ABSENT, EMPTY
from .errors import CoordinateError, DeltaError, PieceError, ValidationError
from .logging_listeners import register_listeners
from .models.enums import ErrorKind, GrammarKind, TransitionField
from .models.transition import EMPTY_TRANSITION, PASS_TRANSITION, Transition

if settings.REGISTER_LOG_LISTENERS:
    register_listeners()

__all__ = [
    "ABSENT",
    "EMPTY",
    "EMPTY_TRANSITION",
    "PASS_TRANSITION",
    "CoordinateError",
    "DeltaError",
    "ErrorKind",
    "GrammarKind",
    "PieceError",
    "Transition",
    "TransitionField",
    "ValidationError",
    "combine",
    "compose",
    "empty",
    "get_grammar",
    "invert",
    "invert_board_against",
    "is_valid",
    "list_grammars",
    "parse",
    "pass_",
    "register_grammar",
    "register_listeners",
    "to_structural",
    "transition",
]
