"""Board coordinates expressed as file (a-h) and rank (1-8)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Square:
    """A board square. ``file`` 0-7 maps to a-h, ``rank`` 0-7 maps to 1-8.

    Squares produced by :meth:`offset` may lie off the board; use
    :meth:`is_valid` to check.
    """

    file: int
    rank: int

    @classmethod
    def from_notation(cls, notation: str) -> Square:
        """Parse algebraic notation such as ``"e4"``."""
        if len(notation) != 2:
            raise ValueError("Invalid square notation")
        square = cls(ord(notation[0]) - ord("a"), ord(notation[1]) - ord("1"))
        if not square.is_valid():
            raise ValueError("Square out of bounds")
        return square

    def is_valid(self) -> bool:
        """Whether the square lies on the 8x8 board."""
        return 0 <= self.file < 8 and 0 <= self.rank < 8

    def offset(self, file_delta: int, rank_delta: int) -> Square:
        """Return the square shifted by the given deltas, possibly off the board."""
        return Square(self.file + file_delta, self.rank + rank_delta)

    def __str__(self) -> str:
        return f"{chr(ord('a') + self.file)}{self.rank + 1}"