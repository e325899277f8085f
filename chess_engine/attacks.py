"""Square safety and attack detection on any board exposing piece lookups."""

from __future__ import annotations

from typing import Protocol

from chess_engine.pieces import Color, Piece
from chess_engine.square import Square

KNIGHT_OFFSETS = ((2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2))
KING_OFFSETS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
ORTHOGONAL_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
DIAGONAL_DIRECTIONS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


class BoardView(Protocol):
    """What attack detection needs from a board."""

    def get_piece(self, square: Square) -> Piece: ...

    def get_color(self, square: Square) -> Color: ...


def _holds(board: BoardView, square: Square, kind: Piece) -> bool:
    return square.is_valid() and board.get_piece(square) == kind


def _first_piece_on_ray(
    board: BoardView, square: Square, file_delta: int, rank_delta: int
) -> tuple[Square, Piece] | None:
    current = square.offset(file_delta, rank_delta)
    while current.is_valid():
        piece = board.get_piece(current)
        if piece != Piece.EMPTY:
            return current, piece
        current = current.offset(file_delta, rank_delta)
    return None


def _slider_reaches(board: BoardView, square: Square, color: Color) -> bool:
    """Whether the first piece along some line is a matching slider not of ``color``."""
    for directions, kinds in (
        (ORTHOGONAL_DIRECTIONS, (Piece.ROOK, Piece.QUEEN)),
        (DIAGONAL_DIRECTIONS, (Piece.BISHOP, Piece.QUEEN)),
    ):
        for file_delta, rank_delta in directions:
            hit = _first_piece_on_ray(board, square, file_delta, rank_delta)
            if hit is None:
                continue
            found, piece = hit
            if board.get_color(found) != color and piece in kinds:
                return True
    return False


def is_square_safe(board: BoardView, square: Square, color: Color) -> bool:
    """Whether no enemy of ``color`` attacks ``square``."""

    def enemy(target: Square, kind: Piece) -> bool:
        return _holds(board, target, kind) and board.get_color(target) != color

    pawn_rank = square.rank + (1 if color is Color.WHITE else -1)
    if 0 <= pawn_rank < 8 and any(
        enemy(Square(square.file + file_delta, pawn_rank), Piece.PAWN) for file_delta in (-1, 1)
    ):
        return False
    if any(enemy(square.offset(*delta), Piece.KNIGHT) for delta in KNIGHT_OFFSETS):
        return False
    if any(enemy(square.offset(*delta), Piece.KING) for delta in KING_OFFSETS):
        return False
    return not _slider_reaches(board, square, color)


def is_square_attacked(board: BoardView, square: Square, attacker: Color) -> bool:
    """Whether ``square`` counts as attacked from the side of ``attacker``.

    Pawns are looked for one rank ahead in the attacker's direction of
    travel; along lines the first piece met counts when its colour differs
    from ``attacker``.
    """

    def own(target: Square, kind: Piece) -> bool:
        return _holds(board, target, kind) and board.get_color(target) == attacker

    pawn_direction = 1 if attacker is Color.WHITE else -1
    if any(own(square.offset(file_delta, pawn_direction), Piece.PAWN) for file_delta in (-1, 1)):
        return True
    if any(own(square.offset(*delta), Piece.KNIGHT) for delta in KNIGHT_OFFSETS):
        return True
    if any(own(square.offset(*delta), Piece.KING) for delta in KING_OFFSETS):
        return True
    return _slider_reaches(board, square, attacker)