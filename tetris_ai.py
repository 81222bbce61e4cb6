"""
Heuristic evaluator and exhaustive placement search for the automated side.

The search tries every distinct rotation of a piece at every column where it
fits, drops it, locks it onto a scratch copy of the board and scores the
result with a fixed linear combination of board features. With ``depth=1``
the best placement of the pending-next piece on that scratch board is added
at half weight.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, NamedTuple, Optional

from tetris_board import Board, clear_lines, clone_board, collides, lock_piece, simulate_drop
from tetris_piece import Piece, unique_rotations

logger = logging.getLogger(__name__)

WEIGHTS: Dict[str, float] = {
    "aggregate_height": -0.510066,
    "complete_lines":    0.760666,
    "holes":            -0.35663,
    "bumpiness":        -0.184483,
    "max_height":       -0.02,
}

LOOKAHEAD_DISCOUNT = 0.5


class Features(NamedTuple):
    aggregate_height: int
    complete_lines: int
    holes: int
    bumpiness: int
    max_height: int


@dataclass
class Move:
    column: int
    row: int
    rotation: int  # clockwise turns from the searched piece's shape
    score: float


def column_heights(board: Board) -> List[int]:
    rows = len(board)
    heights = [0] * len(board[0])
    for y, row in enumerate(board):
        for x, v in enumerate(row):
            if v is not None and heights[x] == 0:
                heights[x] = rows - y
    return heights


def features(board: Board) -> Features:
    heights = column_heights(board)
    complete = sum(1 for row in board if all(v is not None for v in row))
    holes = 0
    for x in range(len(board[0])):
        seen_block = False
        for row in board:
            if row[x] is not None:
                seen_block = True
            elif seen_block:
                holes += 1
    bumpiness = sum(abs(a - b) for a, b in zip(heights, heights[1:]))
    return Features(sum(heights), complete, holes, bumpiness, max(heights))


def fitness(board: Board, weights: Optional[Mapping[str, float]] = None) -> float:
    w = weights or WEIGHTS
    f = features(board)
    return sum(w[name] * getattr(f, name) for name in Features._fields)


def evaluate_placement(board: Board, rested: Piece, next_piece: Optional[Piece] = None,
                       depth: int = 1) -> float:
    """Score a resting piece on a scratch copy; the caller's board is untouched."""
    scratch = clone_board(board)
    lock_piece(scratch, rested)
    clear_lines(scratch)
    score = fitness(scratch)
    if depth > 0 and next_piece is not None:
        follow = best_move(scratch, next_piece, None, depth - 1)
        score += LOOKAHEAD_DISCOUNT * follow.score
    return score


def _column_range(shape, cols: int) -> range:
    # whole matrix inside the board, padding included
    return range(0, cols - len(shape[0]) + 1)


def placements(board: Board, piece: Piece):
    """Yield (turns, candidate at row 0) for every legal column of every rotation."""
    cols = len(board[0])
    for turns, shape in unique_rotations(piece):
        for x in _column_range(shape, cols):
            candidate = Piece(piece.kind, shape, piece.color, x, 0)
            if collides(board, candidate):
                continue
            yield turns, candidate


def best_move(board: Board, piece: Piece, next_piece: Optional[Piece] = None,
              depth: int = 1) -> Move:
    best: Optional[Move] = None
    for turns, candidate in placements(board, piece):
        landed = simulate_drop(board, candidate)
        score = evaluate_placement(board, landed, next_piece, depth)
        if best is None or score > best.score:
            best = Move(landed.x, landed.y, turns, score)
    if best is None:
        logger.debug("no legal placement for %s", piece.kind)
        return Move(piece.x, piece.y, 0, float("-inf"))
    return best
