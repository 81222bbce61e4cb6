from __future__ import annotations

from typing import Iterable, List

from tetris_board import Board, new_board
from tetris_piece import Piece

BLOCK = (90, 90, 90)


class FixedSource:
    """Piece source that replays ``kinds`` in order, then repeats the last one."""

    def __init__(self, kinds: Iterable[str]) -> None:
        self.kinds: List[str] = list(kinds)
        self.drawn = 0

    def next_piece(self) -> Piece:
        kind = self.kinds[min(self.drawn, len(self.kinds) - 1)]
        self.drawn += 1
        return Piece.create(kind)


def board_from(rows: List[str], width: int = 10, height: int = 20) -> Board:
    """Build a board whose bottom rows are given as strings, '#' for filled."""
    board = new_board(height, width)
    for i, text in enumerate(reversed(rows)):
        y = height - 1 - i
        for x, ch in enumerate(text):
            if ch == "#":
                board[y][x] = BLOCK
    return board
