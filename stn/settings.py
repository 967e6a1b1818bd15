from __future__ import annotations

import os

COORDINATE_GRAMMAR = os.getenv("STN_COORDINATE_GRAMMAR", "cell")
PIECE_GRAMMAR = os.getenv("STN_PIECE_GRAMMAR", "qpi")
REGISTER_LOG_LISTENERS = os.getenv("STN_REGISTER_LOG_LISTENERS", "true").lower() != "false"
