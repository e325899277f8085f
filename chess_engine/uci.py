"""Command loop speaking the Universal Chess Interface protocol."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

ENGINE_NAME = "ChessEngine"
ENGINE_AUTHOR = "Hardcode"

# Reply lines for each command the engine understands. Commands accepted
# without a reply are listed with an empty tuple.
_RESPONSES: dict[str, tuple[str, ...]] = {
    "uci": (f"id name {ENGINE_NAME}", f"id author {ENGINE_AUTHOR}", "uciok"),
    "isready": ("readyok",),
    "ucinewgame": (),
    "position": (),
    "go": ("bestmove e2e4",),
    "stop": (),
}

_QUIT = "quit"


def uci_loop(input: TextIO | None = None, output: TextIO | None = None) -> None:
    """Read UCI commands line by line from ``input`` and reply on ``output``.

    Blank lines and unknown commands are ignored; ``quit`` ends the loop.
    Defaults to standard input and standard output.
    """
    source = sys.stdin if input is None else input
    sink = sys.stdout if output is None else output

    for line in source:
        tokens = line.split()
        if not tokens:
            continue
        command = tokens[0]
        if command == _QUIT:
            break
        replies = _RESPONSES.get(command, ())
        for reply in replies:
            sink.write(reply + "\n")
        if replies:
            sink.flush()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the UCI loop on standard input and output."""
    uci_loop(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())