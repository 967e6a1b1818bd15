import logging

import pytest

import stn
from stn.events import EventBus, TransitionRejected, TransitionsCombined
from stn.models.enums import ErrorKind


def test_parse_emits_rejection(events):
    with pytest.raises(stn.ValidationError):
        stn.parse({"board": {"a0": "C:P"}})
    rejected = [e for e in events if isinstance(e, TransitionRejected)]
    assert len(rejected) == 1
    assert rejected[0].kind is ErrorKind.COORDINATE
    assert rejected[0].payload_type == "dict"


def test_is_valid_is_silent(events):
    assert not stn.is_valid({"hands": {"S:P": 0}})
    assert events == []


def test_combine_emits_summary(events, move, reply):
    result = stn.combine(move, reply)
    combined = [e for e in events if isinstance(e, TransitionsCombined)]
    assert combined == [TransitionsCombined(operands=2, result=result)]


def test_handler_errors_propagate():
    bus = EventBus()

    def boom(ev):
        raise RuntimeError("listener failed")

    bus.subscribe(TransitionRejected, boom)
    with pytest.raises(RuntimeError):
        bus.emit(TransitionRejected(payload_type="str", kind=ErrorKind.VALIDATION, message="x"))
    bus.unsubscribe(TransitionRejected, boom)
    bus.emit(TransitionRejected(payload_type="str", kind=ErrorKind.VALIDATION, message="x"))


def test_logging_listeners(caplog):
    stn.register_listeners()  # idempotent
    with caplog.at_level(logging.DEBUG, logger="stn"):
        with pytest.raises(stn.ValidationError):
            stn.parse({"toggle": "yes"})
        stn.combine(stn.pass_(), stn.pass_())
    rejected = [r for r in caplog.records if r.levelno == logging.INFO and "rejected" in r.getMessage()]
    assert len(rejected) == 1
    assert "validation" in rejected[0].getMessage()
    assert any("combined 2 transition(s)" in r.getMessage() for r in caplog.records)
