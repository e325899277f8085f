"""A single chess move together with the state needed to take it back."""

from __future__ import annotations

from dataclasses import dataclass, field

from chess_engine.pieces import Piece
from chess_engine.square import Square

_PROMOTION_LETTERS = {
    Piece.QUEEN: "q",
    Piece.ROOK: "r",
    Piece.BISHOP: "b",
    Piece.KNIGHT: "n",
}


@dataclass
class Move:
    """A move of ``piece`` from ``from_square`` to ``to_square``.

    The ``white_castle_*``, ``black_castle_*``, ``previous_en_passant`` and
    ``previous_halfmove_clock`` fields record the board state before the
    move was made, so that it can be undone.
    """

    from_square: Square
    to_square: Square
    piece: Piece
    captured: Piece = Piece.EMPTY
    is_promotion: bool = False
    promotion_piece: Piece = Piece.EMPTY
    is_castling: bool = False
    castling_rook_from: Square = field(default_factory=lambda: Square(0, 0))
    castling_rook_to: Square = field(default_factory=lambda: Square(0, 0))

    white_castle_kingside: bool = False
    white_castle_queenside: bool = False
    black_castle_kingside: bool = False
    black_castle_queenside: bool = False
    previous_en_passant: Square = field(default_factory=lambda: Square(0, 0))
    previous_halfmove_clock: int = 0

    def to_uci(self) -> str:
        """Render the move in UCI long algebraic form, e.g. ``e2e4`` or ``a7a8q``."""
        text = (
            chr(ord("a") + self.from_square.file)
            + chr(ord("1") + self.from_square.rank)
            + chr(ord("a") + self.to_square.file)
            + chr(ord("1") + self.to_square.rank)
        )
        if self.is_promotion:
            text += _PROMOTION_LETTERS.get(self.promotion_piece, "")
        return text