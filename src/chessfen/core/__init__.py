"""Core domain layer: FEN codec and board state with zero external dependencies.

Quick start::

    from chessfen.core import BoardState, decode, encode, STARTING_FEN

    state = decode(STARTING_FEN)
    assert encode(state) == STARTING_FEN
"""

from chessfen.core.board_state import MAX_CLOCK, BoardState, empty_squares, squares_from
from chessfen.core.enums import Color, PieceType
from chessfen.core.errors import (
    BadActiveColor,
    BadCastling,
    BadEnPassant,
    BadFullmove,
    BadHalfmove,
    BadPieceNotation,
    FenError,
    MalformedRecord,
)
from chessfen.core.notation import STARTING_FEN, FenOptions, decode, encode
from chessfen.core.piece import Piece
from chessfen.core.types import (
    Square,
    file_of,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Types / helpers
    "Square",
    "file_of",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Domain objects
    "MAX_CLOCK",
    "BoardState",
    "Piece",
    "empty_squares",
    "squares_from",
    # Errors
    "FenError",
    "MalformedRecord",
    "BadPieceNotation",
    "BadActiveColor",
    "BadCastling",
    "BadEnPassant",
    "BadHalfmove",
    "BadFullmove",
    # Notation
    "STARTING_FEN",
    "FenOptions",
    "decode",
    "encode",
]
