from __future__ import annotations

from .models.enums import ErrorKind


class ValidationError(Exception):
    """Raised when a transition payload fails structural or semantic validation.

    Not a ValueError: pydantic wraps ValueError raised inside validators, and
    callers should see these types unchanged.
    """

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind.value!r}, message={self.message!r})"


class CoordinateError(ValidationError):
    kind = ErrorKind.COORDINATE


class PieceError(ValidationError):
    kind = ErrorKind.PIECE


class DeltaError(ValidationError):
    kind = ErrorKind.DELTA
