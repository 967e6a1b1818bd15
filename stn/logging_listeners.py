from __future__ import annotations

import logging

from .events import TransitionRejected, TransitionsCombined, event_bus

logger = logging.getLogger("stn")


def _on_rejected(ev: TransitionRejected) -> None:
    logger.info("rejected %s payload (%s): %s", ev.payload_type, ev.kind.value, ev.message)


def _on_combined(ev: TransitionsCombined) -> None:
    logger.debug("combined %d transition(s) -> %s", ev.operands, ev.result.to_structural())


def register_listeners() -> None:
    event_bus.subscribe(TransitionRejected, _on_rejected)
    event_bus.subscribe(TransitionsCombined, _on_combined)
