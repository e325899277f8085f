"""A basic chess engine: pieces, squares, moves, attack detection, move generation, board and UCI loop."""

__version__ = "0.1.0"
__all__ = ["pieces", "square", "move", "attacks", "movegen", "board", "uci"]