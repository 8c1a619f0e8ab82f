"""Structured wire records for :class:`~chessfen.core.BoardState`.

The JSON layout mirrors the board state field for field and keeps the
established field names (``piece_placement``, ``active_color``, ...) so
existing consumers can read it. Empty squares are ``null``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from chessfen.core.board_state import MAX_CLOCK, BoardState
from chessfen.core.enums import Color, PieceType
from chessfen.core.piece import Piece

ColorName = Literal["White", "Black"]
PieceTypeName = Literal["Pawn", "Knight", "Bishop", "Rook", "Queen", "King"]
SquareIndex = Annotated[int, Field(ge=0, le=63)]


def _wire_name(member: Color | PieceType) -> str:
    return member.name.capitalize()


class PieceRecord(BaseModel):
    color: ColorName
    piece_type: PieceTypeName

    @classmethod
    def from_piece(cls, piece: Piece) -> PieceRecord:
        return cls(color=_wire_name(piece.color), piece_type=_wire_name(piece.piece_type))

    def to_piece(self) -> Piece:
        return Piece(Color[self.color.upper()], PieceType[self.piece_type.upper()])


class BoardStateRecord(BaseModel):
    piece_placement: list[PieceRecord | None] = Field(min_length=64, max_length=64)
    active_color: ColorName
    white_castle_kingside: bool
    white_castle_queenside: bool
    black_castle_kingside: bool
    black_castle_queenside: bool
    en_passant_target: SquareIndex | None = None
    halfmove_clock: int = Field(ge=0, le=MAX_CLOCK)
    fullmove_clock: int = Field(ge=1, le=MAX_CLOCK)

    @classmethod
    def from_state(cls, state: BoardState) -> BoardStateRecord:
        return cls(
            piece_placement=[
                PieceRecord.from_piece(p) if p is not None else None for p in state.squares
            ],
            active_color=_wire_name(state.active_color),
            white_castle_kingside=state.white_castle_kingside,
            white_castle_queenside=state.white_castle_queenside,
            black_castle_kingside=state.black_castle_kingside,
            black_castle_queenside=state.black_castle_queenside,
            en_passant_target=state.en_passant_target,
            halfmove_clock=state.halfmove_clock,
            fullmove_clock=state.fullmove_clock,
        )

    def to_state(self) -> BoardState:
        return BoardState(
            tuple(p.to_piece() if p is not None else None for p in self.piece_placement),
            Color[self.active_color.upper()],
            white_castle_kingside=self.white_castle_kingside,
            white_castle_queenside=self.white_castle_queenside,
            black_castle_kingside=self.black_castle_kingside,
            black_castle_queenside=self.black_castle_queenside,
            en_passant_target=self.en_passant_target,
            halfmove_clock=self.halfmove_clock,
            fullmove_clock=self.fullmove_clock,
        )


def state_to_json(state: BoardState) -> str:
    """Serialise *state* as a JSON wire record."""
    return BoardStateRecord.from_state(state).model_dump_json()


def state_from_json(text: str | bytes) -> BoardState:
    """Parse a JSON wire record.

    Raises :class:`pydantic.ValidationError` for malformed JSON or a record
    that does not match the schema.
    """
    return BoardStateRecord.model_validate_json(text).to_state()
