"""Piece model, shape catalog, geometry"""
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Dict, Iterable, Optional, Tuple

Cell = Tuple[int, int]  # (column, row)


class Shape(IntEnum):
    O = 0
    I = 1
    Z = 2
    T = 3
    S = 4


# Offsets are (column, row), top-left relative. Shapes with only two distinct
# rotations repeat them for orientations 2 and 3.
_O = ((0, 0), (1, 0), (0, 1), (1, 1))
_I_FLAT = ((0, 0), (1, 0), (2, 0), (3, 0))
_I_TALL = ((0, 0), (0, 1), (0, 2), (0, 3))
_Z_FLAT = ((0, 0), (1, 0), (1, 1), (2, 1))
_Z_TALL = ((1, 0), (0, 1), (1, 1), (0, 2))
_S_FLAT = ((1, 0), (2, 0), (0, 1), (1, 1))
_S_TALL = ((0, 0), (0, 1), (1, 1), (1, 2))

SHAPES: Dict[Shape, Tuple[Tuple[Cell, ...], ...]] = {
    Shape.O: (_O, _O, _O, _O),
    Shape.I: (_I_FLAT, _I_TALL, _I_FLAT, _I_TALL),
    Shape.Z: (_Z_FLAT, _Z_TALL, _Z_FLAT, _Z_TALL),
    Shape.T: (
        ((0, 0), (1, 0), (2, 0), (1, 1)),
        ((0, 1), (1, 0), (1, 1), (1, 2)),
        ((1, 0), (0, 1), (1, 1), (2, 1)),
        ((2, 1), (1, 0), (1, 1), (1, 2)),
    ),
    Shape.S: (_S_FLAT, _S_TALL, _S_FLAT, _S_TALL),
}

# Bounding widths as tabulated for the game, indexed by orientation.
WIDTHS: Dict[Shape, Tuple[int, int, int, int]] = {
    Shape.O: (2, 2, 2, 2),
    Shape.I: (4, 1, 4, 1),
    Shape.Z: (3, 2, 3, 2),
    Shape.T: (3, 2, 3, 2),
    Shape.S: (3, 2, 3, 2),
}


def shape_cells(shape: int, orientation: int) -> Tuple[Cell, ...]:
    return SHAPES[Shape(shape)][orientation % 4]


def shape_width(shape: int, orientation: int) -> int:
    return WIDTHS[Shape(shape)][orientation % 4]


def shape_extent(shape: int, orientation: int) -> int:
    """Columns the shape really spans; never less than its tabulated width."""
    rightmost = max(c for c, _ in shape_cells(shape, orientation))
    return max(shape_width(shape, orientation), rightmost + 1)


@dataclass(frozen=True)
class MovingPiece:
    shape: Shape
    orientation: int
    column: int
    row: int

    @property
    def position(self) -> Cell:
        return (self.column, self.row)

    def moved(self, dc: int = 0, dr: int = 0) -> "MovingPiece":
        return replace(self, column=self.column + dc, row=self.row + dr)

    def rotated(self) -> "MovingPiece":
        return replace(self, orientation=(self.orientation + 1) % 4)


# geometry

def translate(offsets: Optional[Iterable[Cell]], position: Cell) -> Tuple[Cell, ...]:
    """Shift every offset by position; no offsets (no piece) gives no cells."""
    if offsets is None:
        return ()
    pc, pr = position
    return tuple((c + pc, r + pr) for c, r in offsets)


def piece_cells(piece: Optional[MovingPiece]) -> Tuple[Cell, ...]:
    if piece is None:
        return ()
    return translate(shape_cells(piece.shape, piece.orientation), piece.position)
