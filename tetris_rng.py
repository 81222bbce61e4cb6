"""Uniform piece randomizer"""
import random
from typing import Optional
from tetris_piece import KINDS, Piece


class UniformRandom:
    """Every kind is equally likely on every draw; no bag, no repeat rejection."""
    PIECES = KINDS

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def next_kind(self) -> str:
        return self.rng.choice(self.PIECES)

    def next_piece(self) -> Piece:
        return Piece.create(self.next_kind())
