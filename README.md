# chess_engine

A small chess engine library. It provides:

- `chess_engine.pieces`: the `Color` (`WHITE`, `BLACK`) and `Piece`
  (`EMPTY`, `PAWN`, `KNIGHT`, `BISHOP`, `ROOK`, `QUEEN`, `KING`) enums
- `chess_engine.square`: `Square`, a file/rank pair with
  `Square.from_notation("e4")`, `is_valid()`, `offset()` and `str()`
- `chess_engine.move`: `Move`, a dataclass holding the moving piece,
  capture, promotion and castling details, with `to_uci()`
- `chess_engine.attacks`: `is_square_safe()` and `is_square_attacked()`
- `chess_engine.movegen`: per-piece generators (`pawn_moves`, `knight_moves`,
  `bishop_moves`, `rook_moves`, `queen_moves`, `king_moves`) and
  `pseudo_legal_moves()` for the side to move
- `chess_engine.board`: `Board`, which loads and writes FEN, generates legal
  moves, makes and unmakes moves, evaluates material and converts UCI strings
- `chess_engine.uci`: `uci_loop()` and the `main()` behind the
  `chess-engine-uci` command

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Library usage

```python
from chess_engine.board import Board
from chess_engine.square import Square

board = Board()
board.load_fen(Board.STANDARD_STARTING_POSITION)

moves = board.generate_legal_moves()
print([board.move_to_uci(m) for m in moves])

move = board.uci_to_move("e2e4")
board.make_move(move)
print(board.get_fen())
print(board.evaluate())            # 0: material is level

print(board.get_piece(Square.from_notation("e4")))   # Piece.PAWN
print(board.is_game_over())        # False

board.unmake_move(move)
```

`Board()` starts empty; `load_fen` fills it. `evaluate()` sums material
values (pawn 100, knight 320, bishop 330, rook 500, queen 900, king 20000)
from White's side: positive means White is ahead, negative means Black is.

`generate_legal_moves()` keeps the moves from `pseudo_legal_moves()` for which
`is_move_legal()` holds: the piece belongs to the side to move, the target is
not a friendly piece, and the side's king is not attacked once the move is
tried on a copy of the board. `is_game_over()` is true when no such move
exists; it raises `LookupError` if the side to move then has no king.

Invalid input raises `ValueError`: bad square notation, an unknown FEN piece
letter, a UCI string that is not 4 or 5 characters long, or an unknown
promotion letter.

## UCI engine

The package installs a command that speaks a subset of the Universal Chess
Interface on standard input and output:

```
chess-engine-uci
```

It answers `uci` with `id name ChessEngine`, `id author Hardcode` and
`uciok`, `isready` with `readyok`, and `go` with `bestmove e2e4`. It stops on
`quit` or at the end of its input. `ucinewgame`, `position`, `stop`, blank
lines and unknown commands produce no output.

The loop can also be driven from Python with any text streams:

```python
import io
from chess_engine.uci import uci_loop

out = io.StringIO()
uci_loop(io.StringIO("isready\nquit\n"), out)
print(out.getvalue())              # "readyok\n"
```

## What it does not do

- There is no search: the UCI loop does not consult the board and always
  answers `go` with `bestmove e2e4`.
- The `position` and `ucinewgame` commands are accepted but ignored, so the
  engine keeps no game state between commands.
- `make_move` does not update the en passant square or the halfmove clock;
  they change only through `load_fen` and `unmake_move`.
- There is no detection of draws by repetition, the fifty-move rule or
  insufficient material beyond the absence of legal moves.