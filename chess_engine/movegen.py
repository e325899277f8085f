"""Per-piece move generation, without the check-legality filter."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Protocol

from chess_engine.attacks import (
    DIAGONAL_DIRECTIONS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    ORTHOGONAL_DIRECTIONS,
    BoardView,
    is_square_safe,
)
from chess_engine.move import Move
from chess_engine.pieces import Color, Piece
from chess_engine.square import Square

_PROMOTION_ORDER = (Piece.QUEEN, Piece.ROOK, Piece.BISHOP, Piece.KNIGHT)
_BISHOP_STEPS = ((1, 1), (-1, 1), (1, -1), (-1, -1))
_ROOK_RAYS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_QUEEN_STEPS = DIAGONAL_DIRECTIONS + ORTHOGONAL_DIRECTIONS


class MoveGenBoard(BoardView, Protocol):
    """What move generation needs from a board."""

    side_to_move: Color
    en_passant_square: Square
    white_castle_kingside: bool
    white_castle_queenside: bool
    black_castle_kingside: bool
    black_castle_queenside: bool


def _promotions(origin: Square, target: Square, captured: Piece) -> list[Move]:
    return [
        Move(origin, target, Piece.PAWN, captured, True, promotion)
        for promotion in _PROMOTION_ORDER
    ]


def pawn_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """Pushes, double pushes, captures, en passant and promotions of a pawn."""
    color = board.get_color(square)
    white = color is Color.WHITE
    direction = 1 if white else -1
    starting_rank = 1 if white else 6
    promotion_rank = 7 if white else 0
    moves: list[Move] = []

    one_forward = square.offset(0, direction)
    if 0 <= one_forward.rank < 8 and board.get_piece(one_forward) == Piece.EMPTY:
        if one_forward.rank == promotion_rank:
            moves.extend(_promotions(square, one_forward, Piece.EMPTY))
        else:
            moves.append(Move(square, one_forward, Piece.PAWN))
        if square.rank == starting_rank:
            two_forward = square.offset(0, 2 * direction)
            if board.get_piece(two_forward) == Piece.EMPTY:
                moves.append(Move(square, two_forward, Piece.PAWN))

    for file_delta in (-1, 1):
        target = square.offset(file_delta, direction)
        if not target.is_valid():
            continue
        target_piece = board.get_piece(target)
        if target_piece != Piece.EMPTY and board.get_color(target) != color:
            if target.rank == promotion_rank:
                moves.extend(_promotions(square, target, target_piece))
            else:
                moves.append(Move(square, target, Piece.PAWN, target_piece))
        if target == board.en_passant_square:
            moves.append(Move(square, target, Piece.PAWN, Piece.PAWN))
    return moves


def _step_moves(
    board: BoardView, square: Square, offsets: Iterable[tuple[int, int]], piece: Piece
) -> list[Move]:
    color = board.get_color(square)
    moves: list[Move] = []
    for delta in offsets:
        target = square.offset(*delta)
        if not target.is_valid():
            continue
        target_piece = board.get_piece(target)
        if target_piece == Piece.EMPTY:
            moves.append(Move(square, target, piece))
        elif board.get_color(target) != color:
            moves.append(Move(square, target, piece, target_piece))
    return moves


def _slide(
    board: BoardView,
    origin: Square,
    start: Square,
    step: tuple[int, int],
    piece: Piece,
    record_capture: bool,
) -> list[Move]:
    color = board.get_color(origin)
    moves: list[Move] = []
    current = start
    while current.is_valid():
        target_piece = board.get_piece(current)
        if target_piece == Piece.EMPTY:
            moves.append(Move(origin, current, piece))
        else:
            if board.get_color(current) != color:
                captured = target_piece if record_capture else Piece.EMPTY
                moves.append(Move(origin, current, piece, captured))
            break
        current = current.offset(*step)
    return moves


def knight_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """L-shaped jumps of a knight onto empty or enemy squares."""
    return _step_moves(board, square, KNIGHT_OFFSETS, Piece.KNIGHT)


def bishop_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """Diagonal slides of a bishop.

    Captures are generated with ``captured`` left as ``Piece.EMPTY``; the
    captured piece is filled in when the move is made.
    """
    moves: list[Move] = []
    for step in _BISHOP_STEPS:
        moves.extend(_slide(board, square, square.offset(*step), step, Piece.BISHOP, False))
    return moves


def rook_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """Slides of a rook.

    Each ray's first square is taken from the origin with file and rank
    exchanged, and the ray then advances with the step's components
    exchanged; captures record the captured piece.
    """
    transposed = Square(square.rank, square.file)
    moves: list[Move] = []
    for first, second in _ROOK_RAYS:
        start = transposed.offset(first, second)
        moves.extend(_slide(board, square, start, (second, first), Piece.ROOK, True))
    return moves


def queen_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """Slides of a queen along all eight lines."""
    moves: list[Move] = []
    for step in _QUEEN_STEPS:
        moves.extend(_slide(board, square, square.offset(*step), step, Piece.QUEEN, True))
    return moves


def _castling_rights(board: MoveGenBoard, color: Color) -> tuple[bool, bool]:
    if color is Color.WHITE:
        return board.white_castle_kingside, board.white_castle_queenside
    return board.black_castle_kingside, board.black_castle_queenside


def _castle(
    board: MoveGenBoard,
    king_square: Square,
    color: Color,
    passing_files: range,
    rook_file: int,
    king_to_file: int,
    rook_to_file: int,
) -> Move | None:
    rank = king_square.rank
    for file in passing_files:
        between = Square(file, rank)
        if board.get_piece(between) != Piece.EMPTY or not is_square_safe(board, between, color):
            return None
    rook_square = Square(rook_file, rank)
    if board.get_piece(rook_square) != Piece.ROOK or board.get_color(rook_square) != color:
        return None
    return Move(
        king_square,
        Square(king_to_file, rank),
        Piece.KING,
        is_castling=True,
        castling_rook_from=rook_square,
        castling_rook_to=Square(rook_to_file, rank),
    )


def king_moves(board: MoveGenBoard, square: Square) -> list[Move]:
    """Single steps of a king onto safe squares, plus castling.

    Castling is only offered while the king stands on its home square and
    that square is not safe.
    """
    color = board.get_color(square)
    moves: list[Move] = []
    for delta in KING_OFFSETS:
        target = square.offset(*delta)
        if not target.is_valid() or not is_square_safe(board, target, color):
            continue
        target_piece = board.get_piece(target)
        if target_piece == Piece.EMPTY:
            moves.append(Move(square, target, Piece.KING))
        elif board.get_color(target) != color:
            moves.append(Move(square, target, Piece.KING, target_piece))

    home_rank = 0 if color is Color.WHITE else 7
    if square == Square(4, home_rank) and not is_square_safe(board, square, color):
        kingside, queenside = _castling_rights(board, color)
        candidates = []
        if kingside:
            candidates.append(_castle(board, square, color, range(5, 7), 7, 6, 5))
        if queenside:
            candidates.append(_castle(board, square, color, range(1, 4), 0, 2, 3))
        moves.extend(move for move in candidates if move is not None)
    return moves


_GENERATORS: dict[Piece, Callable[[MoveGenBoard, Square], list[Move]]] = {
    Piece.PAWN: pawn_moves,
    Piece.KNIGHT: knight_moves,
    Piece.BISHOP: bishop_moves,
    Piece.ROOK: rook_moves,
    Piece.QUEEN: queen_moves,
    Piece.KING: king_moves,
}


def pseudo_legal_moves(board: MoveGenBoard) -> list[Move]:
    """All moves of the side to move, square by square from a1 to h8."""
    moves: list[Move] = []
    for rank in range(8):
        for file in range(8):
            square = Square(file, rank)
            piece = board.get_piece(square)
            if piece == Piece.EMPTY or board.get_color(square) != board.side_to_move:
                continue
            moves.extend(_GENERATORS[piece](board, square))
    return moves