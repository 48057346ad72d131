"""Game state value and input events"""
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from tetris_piece import Cell, MovingPiece


class InputEvent(Enum):
    ROTATE = "rotate"
    LEFT = "left"
    RIGHT = "right"
    DROP = "drop"


@dataclass(frozen=True)
class GameState:
    """One immutable snapshot of the game.

    Every transition builds a new GameState from the previous one; nothing
    outside a transition ever sees a partially updated value.

      • piece is None while no piece is falling (Absent)
      • locked holds the settled cells, at most one entry per (column, row)
      • score only grows, +1 per cleared row
      • game_over is set when a new piece cannot be placed
    """
    width: int
    height: int
    score: int = 0
    piece: Optional[MovingPiece] = None
    locked: FrozenSet[Cell] = frozenset()
    game_over: bool = False


def initial_state(width: int, height: int) -> GameState:
    if width <= 0 or height <= 0:
        raise ValueError(f"grid size must be positive, got {width}x{height}")
    return GameState(width=width, height=height)
