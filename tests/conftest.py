# Shared fixtures: a few typical transitions and an event recorder.

import logging
from typing import Iterator

import pytest

import stn
from stn.events import TransitionRejected, TransitionsCombined, event_bus

logger = logging.getLogger(__name__)


@pytest.fixture()
def move() -> stn.Transition:
    # White pawn e2 -> e4
    return stn.transition(board={"e2": None, "e4": "C:P"}, toggle=True)


@pytest.fixture()
def reply() -> stn.Transition:
    # Black pawn e7 -> e5
    return stn.transition(board={"e7": None, "e5": "c:p"}, toggle=True)


@pytest.fixture()
def capture() -> stn.Transition:
    # Piece on e4 captured and sent to the opponent's hand
    return stn.transition(board={"e4": None}, hands={"c:p": 1}, toggle=True)


@pytest.fixture()
def drop() -> stn.Transition:
    # Shogi-style drop from hand
    return stn.transition(board={"e5": "S:P"}, hands={"S:P": -1}, toggle=True)


@pytest.fixture()
def events() -> Iterator[list]:
    seen: list = []
    handler = seen.append
    event_bus.subscribe(TransitionRejected, handler)
    event_bus.subscribe(TransitionsCombined, handler)
    try:
        yield seen
    finally:
        event_bus.unsubscribe(TransitionRejected, handler)
        event_bus.unsubscribe(TransitionsCombined, handler)
        logger.debug("[tests] recorded %d event(s)", len(seen))
