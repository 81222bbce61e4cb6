"""Piece model, shapes, naive clockwise rotation"""
from dataclasses import dataclass
from typing import List, Tuple

Color = Tuple[int, int, int]

SHAPES = {
    "I": [[0,0,0,0],[1,1,1,1],[0,0,0,0],[0,0,0,0]],
    "O": [[1,1],[1,1]],
    "T": [[0,1,0],[1,1,1],[0,0,0]],
    "S": [[0,1,1],[1,1,0],[0,0,0]],
    "Z": [[1,1,0],[0,1,1],[0,0,0]],
    "J": [[1,0,0],[1,1,1],[0,0,0]],
    "L": [[0,0,1],[1,1,1],[0,0,0]],
}

COLORS = {
    "I": (0, 245, 255),
    "O": (255, 255, 0),
    "T": (160, 0, 240),
    "S": (0, 240, 0),
    "Z": (240, 0, 0),
    "J": (0, 0, 240),
    "L": (255, 127, 0),
}

KINDS = list(SHAPES)


def rotate_cw(m): return [list(r) for r in zip(*m[::-1])]


def trim(m):
    """Occupancy pattern with empty padding rows/columns removed."""
    rows = [r for r in m if any(r)]
    cols = [c for c in zip(*rows) if any(c)]
    return tuple(tuple(r) for r in zip(*cols))


@dataclass
class Piece:
    kind: str
    shape: List[List[int]]
    color: Color
    x: int = 0
    y: int = 0
    state: int = 0  # clockwise turns since spawn

    @staticmethod
    def create(kind: str) -> "Piece":
        shape = [row[:] for row in SHAPES[kind]]
        assert shape and all(len(r) == len(shape) for r in shape), kind
        return Piece(kind, shape, COLORS[kind])

    @staticmethod
    def spawn(template: "Piece", cols: int) -> "Piece":
        """Place a pending piece horizontally centered on row 0."""
        x = cols // 2 - len(template.shape[0]) // 2
        return Piece(template.kind, [r[:] for r in template.shape], template.color, x, 0)

    def copy(self, dx: int = 0, dy: int = 0) -> "Piece":
        return Piece(self.kind, [r[:] for r in self.shape], self.color,
                     self.x + dx, self.y + dy, self.state)

    def cells(self):
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r


def rotate(piece: Piece) -> Piece:
    """Return a copy turned 90° clockwise inside its matrix; no kicks."""
    return Piece(piece.kind, rotate_cw(piece.shape), piece.color,
                 piece.x, piece.y, (piece.state + 1) % 4)


def unique_rotations(piece: Piece) -> List[Tuple[int, List[List[int]]]]:
    """Distinct rotations of the piece as (turns, shape), first occurrence wins."""
    seen = set()
    out = []
    shape = [r[:] for r in piece.shape]
    for turns in range(4):
        key = trim(shape)
        if key not in seen:
            seen.add(key)
            out.append((turns, shape))
        shape = rotate_cw(shape)
    return out
