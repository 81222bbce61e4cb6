import pytest

from tetris_board import (clear_lines, clone_board, collides, full_rows, lock_piece,
                          new_board, simulate_drop)
from tetris_piece import KINDS, Piece, unique_rotations
from tests.helpers import BLOCK, board_from


def test_new_board_dimensions():
    b = new_board(20, 10)
    assert len(b) == 20 and all(len(r) == 10 for r in b)
    assert all(v is None for r in b for v in r)


def test_new_board_rejects_empty_dimensions():
    with pytest.raises(AssertionError):
        new_board(0, 10)


def test_collides_with_walls_and_floor():
    b = new_board(20, 10)
    i = Piece.create("I")  # occupied row 1 of its matrix
    assert not collides(b, i)
    assert collides(b, i, -1, 0)
    i.x = 6
    assert not collides(b, i)
    assert collides(b, i, 1, 0)
    i.x, i.y = 0, 18
    assert not collides(b, i)
    assert collides(b, i, 0, 1)


def test_cells_above_the_top_never_collide():
    b = board_from([".#........"])
    t = Piece.create("T")
    t.y = -1  # nub on row -1, base on row 0
    assert not collides(b, t)
    b[0][5] = BLOCK
    t.x = 4
    assert collides(b, t)  # base hits row 0, col 5


def test_collides_with_occupied_cell():
    b = board_from(["....#....."])
    o = Piece.create("O")
    o.x, o.y = 3, 17
    assert not collides(b, o)
    assert collides(b, o, 0, 1)


def test_lock_piece_drops_cells_above_board():
    b = new_board(20, 10)
    t = Piece.create("T")
    t.y = -1
    lock_piece(b, t)
    assert b[0][:3] == [t.color] * 3
    assert sum(v is not None for r in b for v in r) == 3


def test_clear_lines_on_board_without_full_rows():
    b = board_from(["#.#.#.#.#.", "##########"[:9] + "."])
    before = clone_board(b)
    assert clear_lines(b) == 0
    assert b == before


def test_clear_lines_preserves_order_of_remaining_rows():
    height, width = 8, 4
    b = new_board(height, width)
    for y in range(height):
        if y in (2, 5):
            b[y] = [BLOCK] * width
        else:
            b[y][y % width] = (y, y, y)
    survivors = [b[y][:] for y in range(height) if y not in (2, 5)]

    assert clear_lines(b) == 2
    assert len(b) == height
    assert b[0] == [None] * width and b[1] == [None] * width
    assert b[2:] == survivors


def test_clear_lines_catches_adjacent_full_rows():
    b = board_from(["#.........", "##########", "##########"])
    assert clear_lines(b) == 2
    assert b[19] == [BLOCK] + [None] * 9
    assert full_rows(b) == 0


def test_full_rows_counts_without_clearing():
    b = board_from(["##########", "#########."])
    assert full_rows(b) == 1
    assert b[18] == [BLOCK] * 10


def test_simulate_drop_lands_on_floor_and_copies():
    b = new_board(20, 10)
    i = Piece.create("I")
    landed = simulate_drop(b, i)
    assert landed.y == 18
    assert i.y == 0
    assert not collides(b, landed)
    assert collides(b, landed, 0, 1)


@pytest.mark.parametrize("kind", KINDS)
def test_dropped_piece_never_overlaps(kind):
    b = board_from(["...##.....", ".#.###..#.", "##.####.##"])
    for _, shape in unique_rotations(Piece.create(kind)):
        for x in range(-2, 10):
            p = Piece(kind, shape, (1, 1, 1), x, 0)
            if collides(b, p):
                continue
            landed = simulate_drop(b, p)
            assert not collides(b, landed)
            scratch = clone_board(b)
            lock_piece(scratch, landed)
            assert sum(v is not None for r in scratch for v in r) == \
                sum(v is not None for r in b for v in r) + 4
