"""Notation package: FEN decoding and encoding."""

from chessfen.core.notation.fen import (
    STARTING_FEN,
    decode,
    encode,
    format_castling,
    format_placement,
    parse_active_color,
    parse_castling,
    parse_en_passant,
    parse_fullmove,
    parse_halfmove,
    parse_placement,
)
from chessfen.core.notation.options import DEFAULT_OPTIONS, FenOptions

__all__ = [
    "DEFAULT_OPTIONS",
    "STARTING_FEN",
    "FenOptions",
    "decode",
    "encode",
    "format_castling",
    "format_placement",
    "parse_active_color",
    "parse_castling",
    "parse_en_passant",
    "parse_fullmove",
    "parse_halfmove",
    "parse_placement",
]
