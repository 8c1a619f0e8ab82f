"""FEN decoding errors.

Every error derives from :class:`FenError`, itself a :class:`ValueError`, and
keeps the raw text of the field that failed in :attr:`FenError.field`.
"""

from __future__ import annotations


class FenError(ValueError):
    """Base class for all FEN decoding failures."""

    label = "FEN error"

    def __init__(self, field: str, detail: str = "") -> None:
        self.field = field
        self.detail = detail
        message = f"{self.label}: {field!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)

    def __reduce__(self) -> tuple[type[FenError], tuple[str, str]]:
        return (type(self), (self.field, self.detail))


class MalformedRecord(FenError):
    """The record does not split into exactly six fields."""

    label = "Malformed FEN record"


class BadPieceNotation(FenError):
    label = "Invalid FEN piece placement"


class BadActiveColor(FenError):
    label = "Invalid FEN side-to-move field"


class BadCastling(FenError):
    label = "Invalid FEN castling field"


class BadEnPassant(FenError):
    label = "Invalid FEN en-passant field"


class BadHalfmove(FenError):
    label = "Invalid FEN halfmove clock"


class BadFullmove(FenError):
    label = "Invalid FEN fullmove number"
