"""chessfen: Forsyth–Edwards Notation codec for an immutable chess board state.

- core: piece model, board state, FEN decoder/encoder, error taxonomy
- records: pydantic wire records (JSON) for board states, loaded on first use
"""

from __future__ import annotations

import importlib
from typing import Any

from chessfen.core import (
    STARTING_FEN,
    BoardState,
    Color,
    FenError,
    FenOptions,
    Piece,
    PieceType,
    decode,
    encode,
)

__version__ = "0.1.0"

_RECORD_NAMES = frozenset({"BoardStateRecord", "PieceRecord", "state_from_json", "state_to_json"})


def __getattr__(name: str) -> Any:
    # Keeps pydantic out of the import graph until a wire record is needed.
    if name in _RECORD_NAMES:
        return getattr(importlib.import_module("chessfen.records"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "STARTING_FEN",
    "BoardState",
    "BoardStateRecord",
    "Color",
    "FenError",
    "FenOptions",
    "Piece",
    "PieceRecord",
    "PieceType",
    "decode",
    "encode",
    "state_from_json",
    "state_to_json",
]
