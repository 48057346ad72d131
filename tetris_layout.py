# tetris_layout.py
from dataclasses import dataclass
from typing import Tuple

from tetris_config import CONFIG
from tetris_piece import piece_cells
from tetris_state import GameState

Grid = Tuple[Tuple[bool, ...], ...]


@dataclass(frozen=True)
class Frame:
    grid: Grid
    score: int
    game_over: bool = False


def occupancy_grid(state: GameState) -> Grid:
    """height x width booleans: locked cells plus the moving piece."""
    filled = set(state.locked)
    filled.update(piece_cells(state.piece))
    return tuple(
        tuple((column, row) in filled for column in range(state.width))
        for row in range(state.height)
    )


def frame_of(state: GameState) -> Frame:
    return Frame(occupancy_grid(state), state.score, state.game_over)


def grid_to_text(grid: Grid) -> str:
    return "\n".join(" ".join("■" if v else "□" for v in row) for row in grid)


@dataclass
class Dims:
    cell: int
    margin: int
    panel_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int


def compute_dims(width: int, height: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 8
    panel_h = 24

    board_w = width * cell
    board_h = height * cell

    total_w = margin + board_w + margin
    total_h = margin + panel_h + board_h + margin

    panel_x = margin
    panel_y = margin
    board_x = margin
    board_y = panel_y + panel_h

    return Dims(
        cell=cell, margin=margin, panel_h=panel_h,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
