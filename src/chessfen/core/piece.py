"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessfen.core.enums import Color, PieceType

# FEN letters in PieceType order; uppercase = white, lowercase = black.
_LETTERS = "PNBRQK"
_WHITE_GLYPHS = "♙♘♗♖♕♔"
_BLACK_GLYPHS = "♟♞♝♜♛♚"

_CHAR_MAP: dict[str, tuple[Color, PieceType]] = {}
_UNICODE: dict[tuple[Color, PieceType], str] = {}
for _ptype, _letter, _white, _black in zip(PieceType, _LETTERS, _WHITE_GLYPHS, _BLACK_GLYPHS):
    _CHAR_MAP[_letter] = (Color.WHITE, _ptype)
    _CHAR_MAP[_letter.lower()] = (Color.BLACK, _ptype)
    _UNICODE[(Color.WHITE, _ptype)] = _white
    _UNICODE[(Color.BLACK, _ptype)] = _black

_FEN_CHARS: dict[tuple[Color, PieceType], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable (color, piece type) pair occupying a square."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        """FEN character."""
        return _FEN_CHARS[(self.color, self.piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from FEN character, e.g. 'N' → white knight."""
        try:
            color, ptype = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(color, ptype)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.color, self.piece_type)]
