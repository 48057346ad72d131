"""Board helpers: collides, invalid_move, filled_rows, clear_rows"""
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Set

from tetris_piece import Cell, MovingPiece, piece_cells, shape_width
from tetris_state import GameState


def collides(piece: Optional[MovingPiece], locked: Iterable[Cell], height: int) -> bool:
    """True if the piece breaches the floor or overlaps a locked cell."""
    cells = piece_cells(piece)
    if not cells:
        return False
    if any(r > height - 1 for _, r in cells):
        return True
    locked = locked if isinstance(locked, (set, frozenset)) else set(locked)
    return any(c in locked for c in cells)


def invalid_move(state: GameState) -> bool:
    piece = state.piece
    if piece is None:
        return False
    if collides(piece, state.locked, state.height):
        return True
    cells = piece_cells(piece)
    if min(c for c, _ in cells) < 0:
        return True
    if piece.column + shape_width(piece.shape, piece.orientation) > state.width:
        return True
    return max(c for c, _ in cells) >= state.width


def filled_rows(width: int, locked: Iterable[Cell]) -> List[int]:
    """Rows whose distinct occupied columns cover the whole width, top to bottom."""
    columns: Dict[int, Set[int]] = {}
    for c, r in locked:
        columns.setdefault(r, set()).add(c)
    if not columns:
        return []
    return [r for r in range(min(columns), max(columns) + 1)
            if len(columns.get(r, ())) == width]


def clear_rows(state: GameState) -> GameState:
    """Remove filled rows, drop the cells above them, add one point per row."""
    cleared = filled_rows(state.width, state.locked)
    if not cleared:
        return state
    gone = set(cleared)
    locked = frozenset(
        (c, r + sum(1 for y in cleared if y > r))
        for c, r in state.locked
        if r not in gone
    )
    return replace(state, locked=locked, score=state.score + len(cleared))
