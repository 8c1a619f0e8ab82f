"""Decoder configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class FenOptions:
    """Knobs for :func:`chessfen.core.notation.fen.decode`.

    ``strict_castling`` rejects unknown or repeated castling characters.
    Turn it off to accept records from producers that emit extra flags.
    """

    strict_castling: bool = True


DEFAULT_OPTIONS = FenOptions()
