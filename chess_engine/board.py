"""Board state: piece placement, FEN, making moves and evaluation."""

from __future__ import annotations

from chess_engine import attacks
from chess_engine.move import Move
from chess_engine.movegen import pseudo_legal_moves
from chess_engine.pieces import Color, Piece
from chess_engine.square import Square

_FEN_PIECES = {
    "p": Piece.PAWN,
    "n": Piece.KNIGHT,
    "b": Piece.BISHOP,
    "r": Piece.ROOK,
    "q": Piece.QUEEN,
    "k": Piece.KING,
}
_PIECE_LETTERS = {piece: letter for letter, piece in _FEN_PIECES.items()}

_PROMOTION_PIECES = {
    "q": Piece.QUEEN,
    "r": Piece.ROOK,
    "b": Piece.BISHOP,
    "n": Piece.KNIGHT,
}

_PIECE_VALUES = {
    Piece.EMPTY: 0,
    Piece.PAWN: 100,
    Piece.KNIGHT: 320,
    Piece.BISHOP: 330,
    Piece.ROOK: 500,
    Piece.QUEEN: 900,
    Piece.KING: 20000,
}

_DIGITS = "0123456789"


class Board:
    """An 8x8 chess board with side to move, castling rights and move counters.

    Every square carries a colour, even an empty one; a square's colour is
    only meaningful while a piece stands on it.
    """

    STANDARD_STARTING_POSITION = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

    def __init__(self) -> None:
        self._pieces: list[list[Piece]] = [[Piece.EMPTY] * 8 for _ in range(8)]
        self._colors: list[list[Color]] = [[Color.WHITE] * 8 for _ in range(8)]
        self.side_to_move = Color.WHITE
        self.white_castle_kingside = True
        self.white_castle_queenside = True
        self.black_castle_kingside = True
        self.black_castle_queenside = True
        self.en_passant_square = Square(0, 0)
        self.halfmove_clock = 0
        self.fullmove_number = 1

    def copy(self) -> Board:
        """Return an independent copy of this board."""
        clone = Board()
        clone._pieces = [row[:] for row in self._pieces]
        clone._colors = [row[:] for row in self._colors]
        clone.side_to_move = self.side_to_move
        clone.white_castle_kingside = self.white_castle_kingside
        clone.white_castle_queenside = self.white_castle_queenside
        clone.black_castle_kingside = self.black_castle_kingside
        clone.black_castle_queenside = self.black_castle_queenside
        clone.en_passant_square = self.en_passant_square
        clone.halfmove_clock = self.halfmove_clock
        clone.fullmove_number = self.fullmove_number
        return clone

    # -- square access -------------------------------------------------

    def get_piece(self, square: Square) -> Piece:
        """The piece on ``square``, ``Piece.EMPTY`` if vacant."""
        if not square.is_valid():
            raise IndexError(f"Square off the board: {square.file}, {square.rank}")
        return self._pieces[square.rank][square.file]

    def get_color(self, square: Square) -> Color:
        """The colour recorded for ``square``."""
        if not square.is_valid():
            raise IndexError(f"Square off the board: {square.file}, {square.rank}")
        return self._colors[square.rank][square.file]

    def _set(self, square: Square, piece: Piece) -> None:
        self._pieces[square.rank][square.file] = piece

    def _paint(self, square: Square, color: Color) -> None:
        self._colors[square.rank][square.file] = color

    def _squares(self):
        for rank in range(8):
            for file in range(8):
                yield Square(file, rank)

    # -- FEN -----------------------------------------------------------

    def load_fen(self, fen: str) -> None:
        """Place pieces and set game state from a FEN string.

        Squares the placement field does not mention keep their contents,
        and an en passant field of ``-`` leaves the en passant square as it
        was. Fields missing from the end of the string leave their state
        unchanged.
        """
        fields = fen.split()
        placement = fields[0] if fields else ""
        rank, file = 7, 0
        for char in placement:
            if char == "/":
                rank -= 1
                file = 0
            elif char in _DIGITS:
                file += int(char)
            else:
                piece = _FEN_PIECES.get(char.lower())
                if piece is None:
                    raise ValueError("Invalid FEN piece")
                if not (0 <= rank < 8 and 0 <= file < 8):
                    raise ValueError("FEN piece placement out of range")
                color = Color.WHITE if char.isupper() else Color.BLACK
                self._pieces[rank][file] = piece
                self._colors[rank][file] = color
                file += 1

        if len(fields) > 1:
            self.side_to_move = Color.WHITE if fields[1] == "w" else Color.BLACK
        if len(fields) > 2:
            rights = fields[2]
            self.white_castle_kingside = "K" in rights
            self.white_castle_queenside = "Q" in rights
            self.black_castle_kingside = "k" in rights
            self.black_castle_queenside = "q" in rights
        if len(fields) > 3 and fields[3] != "-":
            self.en_passant_square = Square.from_notation(fields[3])
        if len(fields) > 4:
            self.halfmove_clock = int(fields[4])
        if len(fields) > 5:
            self.fullmove_number = int(fields[5])

    def get_fen(self) -> str:
        """Describe the position as a FEN string."""
        rows = []
        for rank in range(7, -1, -1):
            row = ""
            empty = 0
            for file in range(8):
                piece = self._pieces[rank][file]
                if piece == Piece.EMPTY:
                    empty += 1
                    continue
                if empty:
                    row += str(empty)
                    empty = 0
                letter = _PIECE_LETTERS[piece]
                row += letter.upper() if self._colors[rank][file] is Color.WHITE else letter
            if empty:
                row += str(empty)
            rows.append(row)

        side = "w" if self.side_to_move is Color.WHITE else "b"
        castling = "".join(
            letter
            for letter, allowed in (
                ("K", self.white_castle_kingside),
                ("Q", self.white_castle_queenside),
                ("k", self.black_castle_kingside),
                ("q", self.black_castle_queenside),
            )
            if allowed
        ) or "-"
        en_passant = str(self.en_passant_square) if self.en_passant_square.is_valid() else "-"
        return " ".join(
            ("/".join(rows), side, castling, en_passant, str(self.halfmove_clock), str(self.fullmove_number))
        )

    # -- moves ---------------------------------------------------------

    def generate_legal_moves(self) -> list[Move]:
        """All moves of the side to move that do not leave its king in check."""
        return [move for move in pseudo_legal_moves(self) if self.is_move_legal(move)]

    def _clear_castling(self, color: Color) -> None:
        if color is Color.WHITE:
            self.white_castle_kingside = False
            self.white_castle_queenside = False
        else:
            self.black_castle_kingside = False
            self.black_castle_queenside = False

    def make_move(self, move: Move) -> None:
        """Play ``move``, recording in it the state needed to take it back."""
        move.white_castle_kingside = self.white_castle_kingside
        move.white_castle_queenside = self.white_castle_queenside
        move.black_castle_kingside = self.black_castle_kingside
        move.black_castle_queenside = self.black_castle_queenside
        move.previous_en_passant = self.en_passant_square
        move.previous_halfmove_clock = self.halfmove_clock

        side = self.side_to_move
        origin, target = move.from_square, move.to_square
        move.captured = self.get_piece(target)
        self._set(target, move.piece)
        self._paint(target, side)
        self._set(origin, Piece.EMPTY)

        if move.piece == Piece.PAWN:
            if target == self.en_passant_square:
                behind = target.rank - (1 if side is Color.WHITE else -1)
                self._pieces[behind][target.file] = Piece.EMPTY
            if move.is_promotion:
                self._set(target, move.promotion_piece)
        elif move.is_castling:
            self._set(move.castling_rook_to, Piece.ROOK)
            self._paint(move.castling_rook_to, side)
            self._set(move.castling_rook_from, Piece.EMPTY)
            self._clear_castling(side)
        elif move.piece == Piece.KING:
            self._clear_castling(side)
        elif move.piece == Piece.ROOK:
            if side is Color.WHITE:
                if origin.file == 0:
                    self.white_castle_queenside = False
                elif origin.file == 7:
                    self.white_castle_kingside = False
            else:
                if origin.file == 0:
                    self.black_castle_queenside = False
                elif origin.file == 7:
                    self.black_castle_kingside = False

        self.side_to_move = side.opponent()
        if self.side_to_move is Color.WHITE:
            self.fullmove_number += 1

    def unmake_move(self, move: Move) -> None:
        """Take back ``move`` using the state recorded when it was made."""
        side = self.side_to_move
        other = side.opponent()
        origin, target = move.from_square, move.to_square

        self._set(origin, move.piece)
        self._paint(origin, side)
        self._set(target, move.captured)
        if move.captured != Piece.EMPTY:
            self._paint(target, other)

        if move.piece == Piece.PAWN:
            if target == self.en_passant_square:
                capture_rank = target.rank - 1 if side is Color.WHITE else target.rank + 1
                self._pieces[capture_rank][target.file] = Piece.PAWN
                self._colors[capture_rank][target.file] = other
            if move.is_promotion:
                self._set(origin, Piece.PAWN)
        elif move.is_castling:
            self._set(move.castling_rook_from, Piece.ROOK)
            self._paint(move.castling_rook_from, side)
            self._set(move.castling_rook_to, Piece.EMPTY)
            if side is Color.WHITE:
                self.white_castle_kingside = move.white_castle_kingside
                self.white_castle_queenside = move.white_castle_queenside
            else:
                self.black_castle_kingside = move.black_castle_kingside
                self.black_castle_queenside = move.black_castle_queenside

        self.en_passant_square = move.previous_en_passant
        self.halfmove_clock = move.previous_halfmove_clock
        if side is Color.BLACK:
            self.fullmove_number -= 1
        self.side_to_move = other

    # -- evaluation and state queries ----------------------------------

    def evaluate(self) -> int:
        """Material balance in centipawns; positive favours White."""
        score = 0
        for square in self._squares():
            piece = self.get_piece(square)
            if piece == Piece.EMPTY:
                continue
            value = _PIECE_VALUES[piece]
            score += value if self.get_color(square) is Color.WHITE else -value
        return score

    def uci_to_move(self, uci_move: str) -> Move:
        """Parse a UCI move such as ``e2e4`` or ``a7a8q`` against this board."""
        if not 4 <= len(uci_move) <= 5:
            raise ValueError("Invalid UCI move format")
        origin = Square.from_notation(uci_move[0:2])
        target = Square.from_notation(uci_move[2:4])
        move = Move(origin, target, self.get_piece(origin))
        if len(uci_move) == 5:
            move.is_promotion = True
            promotion = _PROMOTION_PIECES.get(uci_move[4])
            if promotion is None:
                raise ValueError("Invalid promotion piece")
            move.promotion_piece = promotion
        return move

    def move_to_uci(self, move: Move) -> str:
        """Render ``move`` in UCI notation."""
        return move.to_uci()

    def is_game_over(self) -> bool:
        """Whether the side to move has no legal move (checkmate or stalemate).

        Raises ``LookupError`` when there is no legal move and the side to
        move has no king.
        """
        if self.generate_legal_moves():
            return False
        self.get_king_square(self.side_to_move)
        return True

    def is_square_safe(self, square: Square, color: Color) -> bool:
        """Whether no enemy of ``color`` attacks ``square``."""
        return attacks.is_square_safe(self, square, color)

    def is_square_attacked(self, square: Square, attacker: Color) -> bool:
        """Whether ``square`` counts as attacked from the side of ``attacker``."""
        return attacks.is_square_attacked(self, square, attacker)

    def is_in_check(self, color: Color) -> bool:
        """Whether the king of ``color`` is attacked by the other side."""
        king_square = Square(0, 0)
        for rank in range(8):
            found = next(
                (
                    Square(file, rank)
                    for file in range(8)
                    if self._pieces[rank][file] == Piece.KING and self._colors[rank][file] is color
                ),
                None,
            )
            if found is not None:
                king_square = found
        return self.is_square_attacked(king_square, color.opponent())

    def is_move_legal(self, move: Move) -> bool:
        """Whether ``move`` belongs to the side to move and keeps its king safe.

        The move is tried on a copy of the board, which fills in its
        captured piece and recorded state.
        """
        if not move.from_square.is_valid() or not move.to_square.is_valid():
            return False
        if (
            self.get_piece(move.from_square) != move.piece
            or self.get_color(move.from_square) is not self.side_to_move
        ):
            return False
        if (
            self.get_piece(move.to_square) != Piece.EMPTY
            and self.get_color(move.to_square) is self.side_to_move
        ):
            return False
        trial = self.copy()
        trial.make_move(move)
        return not trial.is_in_check(self.side_to_move)

    def get_king_square(self, color: Color) -> Square:
        """The square of the first king of ``color`` scanning from a1 to h8."""
        for square in self._squares():
            if self.get_piece(square) == Piece.KING and self.get_color(square) is color:
                return square
        raise LookupError("King not found")