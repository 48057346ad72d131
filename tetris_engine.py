"""Transition engine: next_state, tick, apply_input, lock_and_clear, spawn"""
import logging
from dataclasses import replace
from typing import Optional

from tetris_board import clear_rows, collides, invalid_move
from tetris_piece import piece_cells
from tetris_rng import PieceRandom
from tetris_state import GameState, InputEvent

log = logging.getLogger(__name__)

SHIFTS = {InputEvent.LEFT: -1, InputEvent.RIGHT: 1}


def spawn(state: GameState, rng: PieceRandom) -> GameState:
    """Place a fresh piece at row 0; a piece landing on locked cells ends the game."""
    piece = rng.next_piece(state.width)
    if collides(piece, state.locked, state.height):
        log.info("game over: cannot spawn %s at column %d (score %d)",
                 piece.shape.name, piece.column, state.score)
        return replace(state, piece=None, game_over=True)
    log.debug("spawn %s/%d at column %d", piece.shape.name, piece.orientation, piece.column)
    return replace(state, piece=piece)


def lock_and_clear(state: GameState) -> GameState:
    """Merge the current piece into the locked cells, clear rows, go Absent."""
    cells = piece_cells(state.piece)
    locked = replace(state, piece=None, locked=state.locked | frozenset(cells))
    log.debug("lock %s at %s", state.piece and state.piece.shape.name, cells)
    cleared = clear_rows(locked)
    if cleared.score != locked.score:
        log.info("cleared %d row(s), score %d", cleared.score - locked.score, cleared.score)
    return cleared


def fall(state: GameState) -> GameState:
    """Move the piece one row down, or lock it where it was if that collides."""
    below = state.piece.moved(dr=1)
    if collides(below, state.locked, state.height):
        return lock_and_clear(state)
    return replace(state, piece=below)


def tick(state: GameState, rng: PieceRandom) -> GameState:
    if state.game_over:
        return state
    if state.piece is None:
        return spawn(state, rng)
    return fall(state)


def apply_input(state: GameState, event: InputEvent) -> GameState:
    if state.game_over or state.piece is None:
        return state
    if event is InputEvent.DROP:
        return fall(state)
    if event is InputEvent.ROTATE:
        candidate = replace(state, piece=state.piece.rotated())
    else:
        candidate = replace(state, piece=state.piece.moved(dc=SHIFTS[event]))
    return state if invalid_move(candidate) else candidate


def next_state(state: GameState, rng: PieceRandom, event: Optional[InputEvent] = None) -> GameState:
    """Advance by one tick (event None) or by one player input.

    Anything that is not an InputEvent leaves the state unchanged.
    """
    if event is None:
        return tick(state, rng)
    if not isinstance(event, InputEvent):
        return state
    return apply_input(state, event)
