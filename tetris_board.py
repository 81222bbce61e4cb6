"""Board helpers: collide, lock, clear, drop"""
from typing import Optional, List
from tetris_piece import Piece, Color

Board = List[List[Optional[Color]]]


def new_board(rows: int, cols: int) -> Board:
    assert rows > 0 and cols > 0, (rows, cols)
    return [[None] * cols for _ in range(rows)]


def clone_board(board: Board) -> Board:
    return [row[:] for row in board]


def collides(board: Board, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    rows, cols = len(board), len(board[0])
    for bx, by in piece.cells():
        bx, by = bx + dx, by + dy
        if bx < 0 or bx >= cols or by >= rows: return True
        if by >= 0 and board[by][bx] is not None: return True
    return False


def lock_piece(board: Board, piece: Piece) -> None:
    """Write the piece color into the board; cells above the top are dropped."""
    for bx, by in piece.cells():
        if by >= 0:
            board[by][bx] = piece.color


def clear_lines(board: Board) -> int:
    cols = len(board[0])
    c = 0; y = len(board) - 1
    while y >= 0:
        if all(v is not None for v in board[y]):
            del board[y]; board.insert(0, [None] * cols); c += 1
        else: y -= 1
    return c


def full_rows(board: Board) -> int:
    return sum(1 for row in board if all(v is not None for v in row))


def simulate_drop(board: Board, piece: Piece) -> Piece:
    """Copy of the piece moved down until the next row would collide."""
    t = piece.copy()
    while not collides(board, t, 0, 1):
        t.y += 1
    return t
