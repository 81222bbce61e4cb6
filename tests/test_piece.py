import pytest

from tetris_piece import KINDS, Piece, rotate, unique_rotations


def test_rotate_turns_clockwise_without_moving():
    t = Piece.create("T")
    t.x, t.y = 4, 7
    r = rotate(t)
    assert r.shape == [[0, 1, 0],
                       [0, 1, 1],
                       [0, 1, 0]]
    assert (r.x, r.y, r.state) == (4, 7, 1)


def test_rotate_does_not_mutate_input():
    t = Piece.create("L")
    before = [row[:] for row in t.shape]
    rotate(t)
    assert t.shape == before
    assert t.state == 0


@pytest.mark.parametrize("kind", KINDS)
def test_four_turns_return_to_start(kind):
    p = Piece.create(kind)
    r = p
    for _ in range(4):
        r = rotate(r)
    assert r.shape == p.shape
    assert r.state == 0


# S and Z look the same after a half turn once padding is trimmed, so 2
@pytest.mark.parametrize("kind,expected", [
    ("O", 1), ("I", 2), ("S", 2), ("Z", 2), ("T", 4), ("J", 4), ("L", 4),
])
def test_unique_rotations(kind, expected):
    rotations = unique_rotations(Piece.create(kind))
    assert len(rotations) == expected
    assert [turns for turns, _ in rotations] == sorted(turns for turns, _ in rotations)
    assert rotations[0][0] == 0


@pytest.mark.parametrize("kind,x", [("I", 3), ("O", 4), ("T", 4)])
def test_spawn_is_centered_on_row_zero(kind, x):
    p = Piece.spawn(Piece.create(kind), 10)
    assert (p.x, p.y, p.state) == (x, 0, 0)
    assert p.kind == kind


def test_create_rejects_unknown_kind():
    with pytest.raises(KeyError):
        Piece.create("X")
