"""Piece randomizer module"""
import random
from typing import Iterable, Optional

from tetris_piece import MovingPiece, Shape, shape_extent


class PieceRandom:
    """Uniform draw over the allowed shapes and orientations.

    spawn_column pins every new piece to one column; None picks a column
    where the drawn shape fits. A fixed seed replays the same sequence.
    """
    def __init__(self, seed: Optional[int] = None,
                 shapes: Iterable[int] = tuple(Shape),
                 orientations: Iterable[int] = (0, 1, 2, 3),
                 spawn_column: Optional[int] = 8):
        self.shapes = tuple(sorted(set(int(s) for s in shapes)))
        self.orientations = tuple(sorted(set(int(o) for o in orientations)))
        if not self.shapes:
            raise ValueError("allowed shape set is empty")
        if not self.orientations:
            raise ValueError("allowed orientation set is empty")
        bad = [s for s in self.shapes if s not in set(Shape)]
        if bad:
            raise ValueError(f"unknown shape ids: {bad}")
        bad = [o for o in self.orientations if not 0 <= o <= 3]
        if bad:
            raise ValueError(f"orientations must be in 0..3, got {bad}")
        self.spawn_column = spawn_column
        self.seed = seed
        self._rng = random.Random(seed)

    def next_shape(self) -> Shape:
        return Shape(self._rng.choice(self.shapes))

    def next_orientation(self) -> int:
        return self._rng.choice(self.orientations)

    def widest(self) -> int:
        return max(shape_extent(s, o) for s in self.shapes for o in self.orientations)

    def check_fits(self, width: int) -> None:
        """Reject a fixed spawn column that some allowed piece cannot fit at."""
        if self.spawn_column is None:
            if self.widest() > width:
                raise ValueError(f"grid width {width} is narrower than the widest allowed piece")
            return
        if self.spawn_column < 0 or self.spawn_column + self.widest() > width:
            raise ValueError(
                f"spawn column {self.spawn_column} does not fit every allowed piece in width {width}")

    def next_piece(self, width: int) -> MovingPiece:
        shape = self.next_shape()
        orientation = self.next_orientation()
        column = self.spawn_column
        if column is None:
            column = self._rng.randint(0, max(0, width - shape_extent(shape, orientation)))
        return MovingPiece(shape, orientation, column, 0)
