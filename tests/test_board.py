import pytest

from chess_engine.board import Board
from chess_engine.move import Move
from chess_engine.pieces import Color, Piece
from chess_engine.square import Square


@pytest.fixture
def start_board():
    board = Board()
    board.load_fen(Board.STANDARD_STARTING_POSITION)
    return board


def test_default_constructor():
    board = Board()
    for rank in range(8):
        for file in range(8):
            assert board.get_piece(Square(file, rank)) == Piece.EMPTY
    assert board.side_to_move is Color.WHITE


BACK_RANK = [
    Piece.ROOK,
    Piece.KNIGHT,
    Piece.BISHOP,
    Piece.QUEEN,
    Piece.KING,
    Piece.BISHOP,
    Piece.KNIGHT,
    Piece.ROOK,
]


@pytest.mark.parametrize("file", range(8))
def test_load_fen_starting_position_white_pieces(start_board, file):
    assert start_board.get_piece(Square(file, 0)) == BACK_RANK[file]
    assert start_board.get_color(Square(file, 0)) is Color.WHITE


@pytest.mark.parametrize("file", range(8))
def test_load_fen_starting_position_black_pieces(start_board, file):
    assert start_board.get_piece(Square(file, 7)) == BACK_RANK[file]
    assert start_board.get_color(Square(file, 7)) is Color.BLACK


def test_load_fen_starting_position_empty_squares(start_board):
    for rank in range(2, 6):
        for file in range(8):
            assert start_board.get_piece(Square(file, rank)) == Piece.EMPTY
    assert start_board.side_to_move is Color.WHITE


def test_make_move_from_starting_position(start_board):
    origin, target = Square(4, 1), Square(4, 3)
    start_board.make_move(Move(origin, target, Piece.PAWN))
    assert start_board.get_piece(origin) == Piece.EMPTY
    assert start_board.get_piece(target) == Piece.PAWN
    assert start_board.side_to_move is Color.BLACK


def test_evaluate_starting_position_is_zero(start_board):
    assert start_board.evaluate() == 0


def test_evaluate_advantage_to_white(start_board):
    start_board.make_move(Move(Square(0, 1), Square(0, 6), Piece.PAWN, Piece.PAWN))
    assert start_board.evaluate() > 0


def test_evaluate_material_value():
    board = Board()
    board.load_fen("4k3/8/8/8/8/8/8/3QK3 w - - 0 1")
    assert board.evaluate() == 900


def test_uci_to_move(start_board):
    move = start_board.uci_to_move("e2e4")
    assert (move.from_square.file, move.from_square.rank) == (4, 1)
    assert (move.to_square.file, move.to_square.rank) == (4, 3)
    assert move.piece == Piece.PAWN


def test_uci_to_move_promotion(start_board):
    move = start_board.uci_to_move("a7a8q")
    assert move.is_promotion is True
    assert move.promotion_piece == Piece.QUEEN
    assert move.piece == Piece.PAWN


@pytest.mark.parametrize("text", ["e2", "e2e4e5x", "e2e4x"])
def test_uci_to_move_rejects_bad_input(start_board, text):
    with pytest.raises(ValueError):
        start_board.uci_to_move(text)


def test_move_to_uci(start_board):
    move = Move(Square(4, 1), Square(4, 3), Piece.PAWN)
    assert start_board.move_to_uci(move) == "e2e4"


def test_checkmate_position_is_game_over():
    board = Board()
    board.load_fen("rnb1kbnr/pppp1ppp/8/4p3/6Pq/5P2/PPPPP2P/RNBQKBNR w KQkq - 0 1")
    assert board.is_game_over() is True


def test_game_over_without_king_raises():
    with pytest.raises(LookupError):
        Board().is_game_over()


def test_safe_squares(start_board):
    assert start_board.is_square_safe(Square(4, 0), Color.WHITE) is True
    assert start_board.is_square_safe(Square(4, 7), Color.BLACK) is True


def test_square_attacked_by_knight(start_board):
    assert start_board.is_square_attacked(Square(5, 2), Color.WHITE) is True
    assert start_board.is_square_attacked(Square(4, 3), Color.BLACK) is False


def test_kings_only_legal_moves():
    board = Board()
    board.load_fen("k7/8/8/8/8/8/8/7K w - - 0 1")
    moves = board.generate_legal_moves()
    assert sorted(move.to_uci() for move in moves) == ["h1g1", "h1g2", "h1h2"]
    assert board.is_in_check(Color.WHITE) is False


def test_generate_legal_moves_leaves_board_unchanged(start_board):
    before = start_board.get_fen()
    start_board.generate_legal_moves()
    assert start_board.get_fen() == before


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1",
        "r3k2r/8/8/2pP4/8/8/8/R3K2R w - c6 5 12",
    ],
)
def test_fen_round_trip(fen):
    board = Board()
    board.load_fen(fen)
    assert board.get_fen() == fen


def test_load_fen_invalid_piece():
    with pytest.raises(ValueError):
        Board().load_fen("rnbxkbnr/8/8/8/8/8/8/8 w - - 0 1")


def test_fullmove_number_increments_after_black(start_board):
    start_board.make_move(start_board.uci_to_move("e2e4"))
    start_board.make_move(start_board.uci_to_move("e7e5"))
    fields = start_board.get_fen().split()
    assert fields[1] == "w"
    assert fields[5] == "2"
    assert fields[0] == "rnbqkbnr/pppp1ppp/8/4p3/4P3/8/PPPP1PPP/RNBQKBNR"


def test_castling_moves_rook_and_clears_rights():
    board = Board()
    board.load_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    move = Move(
        Square(4, 0),
        Square(6, 0),
        Piece.KING,
        is_castling=True,
        castling_rook_from=Square(7, 0),
        castling_rook_to=Square(5, 0),
    )
    board.make_move(move)
    assert board.get_piece(Square(6, 0)) == Piece.KING
    assert board.get_piece(Square(5, 0)) == Piece.ROOK
    assert board.get_piece(Square(7, 0)) == Piece.EMPTY
    assert board.get_piece(Square(4, 0)) == Piece.EMPTY
    assert board.get_fen().split()[2] == "kq"
    assert move.white_castle_kingside is True


def test_rook_move_clears_one_right():
    board = Board()
    board.load_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    board.make_move(Move(Square(7, 0), Square(7, 3), Piece.ROOK))
    assert board.get_fen().split()[2] == "Qkq"


def test_king_move_clears_both_rights():
    board = Board()
    board.load_fen("r3k2r/8/8/8/8/8/8/R3K2R w KQkq - 0 1")
    board.make_move(Move(Square(4, 0), Square(5, 0), Piece.KING))
    assert board.get_fen().split()[2] == "kq"


def test_promotion_places_new_piece():
    board = Board()
    board.load_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
    board.make_move(Move(Square(0, 6), Square(0, 7), Piece.PAWN, Piece.EMPTY, True, Piece.QUEEN))
    assert board.get_piece(Square(0, 7)) == Piece.QUEEN
    assert board.get_color(Square(0, 7)) is Color.WHITE
    assert board.get_piece(Square(0, 6)) == Piece.EMPTY


def test_make_move_records_capture(start_board):
    move = Move(Square(0, 1), Square(0, 6), Piece.PAWN)
    start_board.make_move(move)
    assert move.captured == Piece.PAWN


def test_unmake_move_restores_pieces_and_side(start_board):
    move = start_board.uci_to_move("e2e4")
    start_board.make_move(move)
    start_board.unmake_move(move)
    assert start_board.get_piece(Square(4, 1)) == Piece.PAWN
    assert start_board.get_piece(Square(4, 3)) == Piece.EMPTY
    assert start_board.side_to_move is Color.WHITE


def test_is_move_legal_rejects_wrong_side(start_board):
    assert start_board.is_move_legal(Move(Square(4, 6), Square(4, 4), Piece.PAWN)) is False


def test_is_move_legal_rejects_off_board(start_board):
    assert start_board.is_move_legal(Move(Square(8, 0), Square(4, 4), Piece.PAWN)) is False


def test_get_king_square(start_board):
    assert start_board.get_king_square(Color.WHITE) == Square(4, 0)
    assert start_board.get_king_square(Color.BLACK) == Square(4, 7)


def test_get_king_square_missing():
    with pytest.raises(LookupError):
        Board().get_king_square(Color.BLACK)


def test_copy_is_independent(start_board):
    clone = start_board.copy()
    clone.make_move(clone.uci_to_move("e2e4"))
    assert start_board.get_piece(Square(4, 1)) == Piece.PAWN
    assert start_board.side_to_move is Color.WHITE
    assert clone.get_piece(Square(4, 3)) == Piece.PAWN


def test_get_piece_off_board_raises():
    with pytest.raises(IndexError):
        Board().get_piece(Square(-1, 0))