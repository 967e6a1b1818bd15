import pytest

from stn.engine.validation import validate_board, validate_fields, validate_hands, validate_toggle
from stn.errors import CoordinateError, DeltaError, PieceError, ValidationError
from stn.models.enums import ErrorKind


def test_board_ok_with_empty_marker():
    assert validate_board({"e2": None, "e4": "C:P"}) == {"e2": None, "e4": "C:P"}


def test_board_bad_coordinate():
    with pytest.raises(CoordinateError) as ei:
        validate_board({"a0": "C:P"})
    assert ei.value.kind is ErrorKind.COORDINATE
    assert "a0" in str(ei.value)


def test_board_bad_piece():
    with pytest.raises(PieceError):
        validate_board({"e4": "invalid"})


def test_hands_bad_key():
    with pytest.raises(PieceError):
        validate_hands({"invalid": 1})


@pytest.mark.parametrize("delta", [0, "x", 1.0, True, None])
def test_hands_bad_delta(delta):
    with pytest.raises(DeltaError):
        validate_hands({"S:P": delta})


@pytest.mark.parametrize("toggle", ["yes", 1, 0, None])
def test_toggle_must_be_strict_bool(toggle):
    with pytest.raises(ValidationError, match="boolean") as ei:
        validate_toggle(toggle)
    assert ei.value.kind is ErrorKind.VALIDATION


def test_specializations_share_base():
    for cls in (CoordinateError, PieceError, DeltaError):
        assert issubclass(cls, ValidationError)
        assert not issubclass(cls, ValueError)


def test_first_offending_field_wins():
    # board is checked before hands and toggle
    with pytest.raises(CoordinateError):
        validate_fields({"a0": "C:P"}, {"S:P": 0}, "yes")
    with pytest.raises(DeltaError):
        validate_fields({"e4": "C:P"}, {"S:P": 0}, "yes")
