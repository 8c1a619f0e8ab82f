"""FEN parsing and serialization."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chessfen.core.board_state import MAX_CLOCK, BoardState
from chessfen.core.enums import Color
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
from chessfen.core.notation.options import DEFAULT_OPTIONS, FenOptions
from chessfen.core.piece import Piece
from chessfen.core.types import Square, parse_square, square_name

_LOGGER = logging.getLogger(__name__)

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

_FIELD_COUNT = 6
_CASTLING_CHARS = "KQkq"
_DIGITS = "0123456789"


# ── Decoding ────────────────────────────────────────────────────────────────


def parse_placement(field: str) -> tuple[Piece | None, ...]:
    """Parse the piece-placement field into 64 squares, a8 first."""
    ranks = field.split("/")
    if len(ranks) != 8:
        raise BadPieceNotation(field, "must contain 8 ranks")

    squares: list[Piece | None] = []
    for rank_text in ranks:
        width = 0
        for ch in rank_text:
            if ch in _DIGITS:
                step = int(ch)
                if not (1 <= step <= 8):
                    raise BadPieceNotation(field, f"bad empty-square run {ch!r}")
                squares.extend([None] * step)
                width += step
            else:
                try:
                    squares.append(Piece.from_char(ch))
                except ValueError:
                    raise BadPieceNotation(field, f"unknown piece {ch!r}") from None
                width += 1
            if width > 8:
                raise BadPieceNotation(field, f"rank {rank_text!r} is too wide")
        if width != 8:
            raise BadPieceNotation(field, f"rank {rank_text!r} is too narrow")

    return tuple(squares)


def parse_active_color(field: str) -> Color:
    if field == "w":
        return Color.WHITE
    if field == "b":
        return Color.BLACK
    raise BadActiveColor(field, "expected 'w' or 'b'")


def parse_castling(
    field: str, options: FenOptions = DEFAULT_OPTIONS
) -> tuple[bool, bool, bool, bool]:
    """Castling rights in K, Q, k, q order."""
    if field == "-":
        return (False, False, False, False)

    if options.strict_castling:
        if not field:
            raise BadCastling(field, "empty field")
        seen: set[str] = set()
        for ch in field:
            if ch not in _CASTLING_CHARS:
                raise BadCastling(field, f"unknown flag {ch!r}")
            if ch in seen:
                raise BadCastling(field, f"repeated flag {ch!r}")
            seen.add(ch)

    wk, wq, bk, bq = (ch in field for ch in _CASTLING_CHARS)
    return (wk, wq, bk, bq)


def parse_en_passant(field: str) -> Square | None:
    if field == "-":
        return None
    try:
        return parse_square(field)
    except ValueError:
        raise BadEnPassant(field, "expected '-' or a square such as 'e3'") from None


def _parse_clock(field: str) -> int | None:
    # ASCII digits only; int() also takes signs and underscores.
    if not field or not field.isascii() or not field.isdigit():
        return None
    value = int(field)
    if value > MAX_CLOCK:
        return None
    return value


def parse_halfmove(field: str) -> int:
    value = _parse_clock(field)
    if value is None:
        raise BadHalfmove(field, "expected a non-negative integer")
    return value


def parse_fullmove(field: str) -> int:
    value = _parse_clock(field)
    if value is None or value < 1:
        raise BadFullmove(field, "expected a positive integer")
    return value


def decode(fen: str, options: FenOptions | None = None) -> BoardState:
    """Parse a FEN string into a :class:`BoardState`.

    Raises a :class:`~chessfen.core.errors.FenError` subclass naming the
    offending field. Chess legality (king count, pawn ranks, castling
    rights vs. piece placement) is not checked.
    """
    opts = options if options is not None else DEFAULT_OPTIONS
    parts = fen.split(" ")
    try:
        if len(parts) != _FIELD_COUNT:
            raise MalformedRecord(fen, f"need {_FIELD_COUNT} fields, got {len(parts)}")

        placement, side_part, castling_part, ep_part, half_part, full_part = parts

        squares = parse_placement(placement)
        side = parse_active_color(side_part)
        wk, wq, bk, bq = parse_castling(castling_part, opts)
        ep = parse_en_passant(ep_part)
        halfmove = parse_halfmove(half_part)
        fullmove = parse_fullmove(full_part)
    except FenError as exc:
        _LOGGER.debug("Rejected FEN %r: %s", fen, exc)
        raise

    return BoardState(
        squares,
        side,
        white_castle_kingside=wk,
        white_castle_queenside=wq,
        black_castle_kingside=bk,
        black_castle_queenside=bq,
        en_passant_target=ep,
        halfmove_clock=halfmove,
        fullmove_clock=fullmove,
    )


# ── Encoding ────────────────────────────────────────────────────────────────


def format_placement(squares: Sequence[Piece | None]) -> str:
    rows: list[str] = []
    for start in range(0, 64, 8):
        empty = 0
        row = ""
        for piece in squares[start : start + 8]:
            if piece is None:
                empty += 1
            else:
                if empty:
                    row += str(empty)
                    empty = 0
                row += str(piece)
        if empty:
            row += str(empty)
        rows.append(row)
    return "/".join(rows)


def format_castling(
    white_kingside: bool,
    white_queenside: bool,
    black_kingside: bool,
    black_queenside: bool,
) -> str:
    flags = (white_kingside, white_queenside, black_kingside, black_queenside)
    castling_str = "".join(ch for ch, on in zip(_CASTLING_CHARS, flags) if on)
    return castling_str or "-"


def encode(state: BoardState) -> str:
    """Serialise a :class:`BoardState` to canonical FEN."""
    board_str = format_placement(state.squares)
    side_str = "w" if state.active_color == Color.WHITE else "b"
    castling_str = format_castling(*state.castling_rights)
    ep_str = (
        square_name(state.en_passant_target)
        if state.en_passant_target is not None
        else "-"
    )
    return (
        f"{board_str} {side_str} {castling_str} {ep_str} "
        f"{state.halfmove_clock} {state.fullmove_clock}"
    )
