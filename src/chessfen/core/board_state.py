"""BoardState: complete FEN position record (placement + metadata)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessfen.core.enums import Color, PieceType
from chessfen.core.piece import Piece
from chessfen.core.types import FILES, Square, is_valid_square, make_square

if TYPE_CHECKING:
    from chessfen.core.notation.options import FenOptions

# Clocks are stored as unsigned 32-bit values on the wire.
MAX_CLOCK = 2**32 - 1

_BACK_RANK = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class BoardState:
    """Immutable chess position as described by one FEN record.

    ``squares`` always holds exactly 64 entries, index 0 = a8 and
    index 63 = h1. Derive modified copies with :func:`dataclasses.replace`,
    which re-runs the construction checks.
    """

    squares: tuple[Piece | None, ...]
    active_color: Color = Color.WHITE
    white_castle_kingside: bool = False
    white_castle_queenside: bool = False
    black_castle_kingside: bool = False
    black_castle_queenside: bool = False
    en_passant_target: Square | None = None
    halfmove_clock: int = 0
    fullmove_clock: int = 1

    def __post_init__(self) -> None:
        squares = tuple(self.squares)
        if len(squares) != 64:
            raise ValueError(f"Board must have 64 squares, got {len(squares)}")
        for piece in squares:
            if piece is not None and not isinstance(piece, Piece):
                raise ValueError(f"Invalid square content: {piece!r}")
        object.__setattr__(self, "squares", squares)

        if not isinstance(self.active_color, Color):
            raise ValueError(f"Invalid active color: {self.active_color!r}")
        for flag in self.castling_rights:
            if not isinstance(flag, bool):
                raise ValueError(f"Invalid castling flag: {flag!r}")
        ep = self.en_passant_target
        if ep is not None and not (_is_int(ep) and is_valid_square(ep)):
            raise ValueError(f"Invalid en-passant square: {ep!r}")
        if not (_is_int(self.halfmove_clock) and 0 <= self.halfmove_clock <= MAX_CLOCK):
            raise ValueError(f"Invalid halfmove clock: {self.halfmove_clock!r}")
        if not (_is_int(self.fullmove_clock) and 1 <= self.fullmove_clock <= MAX_CLOCK):
            raise ValueError(f"Invalid fullmove number: {self.fullmove_clock!r}")

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def initial(cls) -> BoardState:
        """Standard starting position."""
        squares: list[Piece | None] = [None] * 64
        for f, pt in enumerate(_BACK_RANK):
            squares[make_square(f, 0)] = Piece(Color.WHITE, pt)
            squares[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            squares[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)
            squares[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return cls(
            tuple(squares),
            Color.WHITE,
            white_castle_kingside=True,
            white_castle_queenside=True,
            black_castle_kingside=True,
            black_castle_queenside=True,
        )

    @classmethod
    def from_fen(cls, fen: str, options: FenOptions | None = None) -> BoardState:
        """Decode *fen*; see :func:`chessfen.core.notation.fen.decode`."""
        from chessfen.core.notation.fen import decode

        return decode(fen, options)

    def to_fen(self) -> str:
        """Encode as canonical FEN."""
        from chessfen.core.notation.fen import encode

        return encode(self)

    # ── Queries ──────────────────────────────────────────────────────────

    def piece_at(self, sq: Square) -> Piece | None:
        return self.squares[sq]

    @property
    def castling_rights(self) -> tuple[bool, bool, bool, bool]:
        """Rights in FEN order: K, Q, k, q."""
        return (
            self.white_castle_kingside,
            self.white_castle_queenside,
            self.black_castle_kingside,
            self.black_castle_queenside,
        )

    def diagram(self, unicode: bool = False) -> str:
        """Text board, rank 8 on top; *unicode* draws glyphs instead of FEN letters."""
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self.squares[make_square(file, rank)]
                if p is None:
                    row.append(".")
                else:
                    row.append(p.symbol if unicode else str(p))
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  " + " ".join(FILES))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.to_fen()


def empty_squares() -> tuple[Piece | None, ...]:
    """A board with no pieces on it."""
    return (None,) * 64


def squares_from(mapping: dict[Square, Piece]) -> tuple[Piece | None, ...]:
    """Build a 64-square tuple from a sparse ``{square: piece}`` mapping."""
    squares: list[Piece | None] = [None] * 64
    for sq, piece in mapping.items():
        if not is_valid_square(sq):
            raise ValueError(f"Invalid square index: {sq!r}")
        squares[sq] = piece
    return tuple(squares)
