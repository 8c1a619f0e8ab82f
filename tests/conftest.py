"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessfen.core import STARTING_FEN, BoardState, decode

MIDGAME_FEN = "8/5pkp/4b3/p3P1b1/1p5P/1P1R2B1/P5PK/2rB4 b - - 0 33"


@pytest.fixture
def starting_state() -> BoardState:
    """Decoded standard starting position."""
    return decode(STARTING_FEN)


@pytest.fixture
def midgame_state() -> BoardState:
    """Decoded middle-game position with Black to move."""
    return decode(MIDGAME_FEN)
