"""Piece kinds and side colours."""

from __future__ import annotations

from enum import Enum, IntEnum


class Color(Enum):
    """Owner of a piece or side to move. White moves first."""

    WHITE = 0
    BLACK = 1

    def opponent(self) -> Color:
        """Return the other side."""
        return Color.BLACK if self is Color.WHITE else Color.WHITE


class Piece(IntEnum):
    """Kind of piece standing on a square; EMPTY marks a vacant square."""

    EMPTY = 0
    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6