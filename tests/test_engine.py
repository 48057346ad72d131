from __future__ import annotations

import pytest

from tetris_engine import apply_input, lock_and_clear, next_state, spawn, tick
from tetris_piece import MovingPiece, Shape, piece_cells
from tetris_rng import PieceRandom
from tetris_state import GameState, InputEvent, initial_state


def only_o(column: int = 0) -> PieceRandom:
    return PieceRandom(seed=0, shapes=(0,), orientations=(0,), spawn_column=column)


def test_tick_spawns_absent_piece_at_row_zero() -> None:
    state = tick(initial_state(20, 40), only_o(8))
    assert state.piece == MovingPiece(Shape.O, 0, 8, 0)
    assert state.locked == frozenset()


def test_repeated_spawns_draw_from_allowed_sets() -> None:
    rng = PieceRandom(seed=123, shapes=(1, 3), orientations=(2,), spawn_column=8)
    empty = initial_state(20, 40)
    for _ in range(50):
        piece = tick(empty, rng).piece
        assert piece.shape in (Shape.I, Shape.T)
        assert piece.orientation == 2
        assert (piece.column, piece.row) == (8, 0)


def test_piece_falls_then_locks_on_floor() -> None:
    rng = only_o()
    state = initial_state(4, 4)
    states = [state]
    for _ in range(4):
        states.append(tick(states[-1], rng))
    assert [s.piece.row for s in states[1:4]] == [0, 1, 2]
    locked = states[4]
    assert locked.piece is None
    assert locked.locked == frozenset({(0, 2), (1, 2), (0, 3), (1, 3)})
    assert locked.score == 0


def test_piece_locks_on_top_of_locked_blocks() -> None:
    rng = only_o()
    state = GameState(width=4, height=4, locked=frozenset({(0, 2), (1, 2), (0, 3), (1, 3)}))
    state = tick(state, rng)
    assert state.piece.row == 0
    state = tick(state, rng)
    assert state.piece is None
    assert {(0, 0), (1, 0), (0, 1), (1, 1)} <= state.locked


def test_lock_clears_completed_row_and_drops_rest() -> None:
    state = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 0, 2),
                      locked=frozenset({(2, 3), (3, 3)}))
    after = tick(state, only_o())
    assert after.piece is None
    assert after.locked == frozenset({(0, 3), (1, 3)})
    assert after.score == 1


def test_lock_and_clear_merges_previous_piece() -> None:
    piece = MovingPiece(Shape.T, 0, 3, 5)
    state = GameState(width=10, height=10, piece=piece)
    after = lock_and_clear(state)
    assert after.piece is None
    assert after.locked == frozenset(piece_cells(piece))


def test_drop_input_matches_tick_path() -> None:
    rng = only_o()
    falling = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 0, 1))
    assert apply_input(falling, InputEvent.DROP) == tick(falling, rng)
    landed = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 0, 2))
    assert apply_input(landed, InputEvent.DROP) == tick(landed, rng)


def test_rotate_increments_orientation() -> None:
    state = GameState(width=10, height=10, piece=MovingPiece(Shape.T, 3, 2, 2))
    assert apply_input(state, InputEvent.ROTATE).piece.orientation == 0


def test_rotate_rejected_at_right_wall() -> None:
    state = GameState(width=4, height=10, piece=MovingPiece(Shape.I, 1, 2, 0))
    assert apply_input(state, InputEvent.ROTATE) is state


def test_rotate_rejected_through_floor() -> None:
    state = GameState(width=10, height=10, piece=MovingPiece(Shape.I, 0, 0, 9))
    assert apply_input(state, InputEvent.ROTATE) is state


@pytest.mark.parametrize(
    "column,event,expected",
    [
        (1, InputEvent.LEFT, 0),
        (0, InputEvent.LEFT, 0),
        (1, InputEvent.RIGHT, 2),
        (2, InputEvent.RIGHT, 2),
    ],
)
def test_shift_moves_or_reverts(column: int, event: InputEvent, expected: int) -> None:
    state = GameState(width=4, height=10, piece=MovingPiece(Shape.O, 0, column, 0))
    assert apply_input(state, event).piece.column == expected


def test_shift_rejected_into_locked_block() -> None:
    state = GameState(width=6, height=10, piece=MovingPiece(Shape.O, 0, 2, 0),
                      locked=frozenset({(4, 1)}))
    assert apply_input(state, InputEvent.RIGHT) is state


def test_input_without_piece_is_ignored() -> None:
    state = initial_state(4, 4)
    for event in InputEvent:
        assert apply_input(state, event) is state


@pytest.mark.parametrize("event", ["rotate", 42, object()])
def test_malformed_event_leaves_state(event: object) -> None:
    state = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 0, 0))
    assert next_state(state, only_o(), event) is state


def test_next_state_dispatches_tick_and_input() -> None:
    state = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 1, 0))
    assert next_state(state, only_o()).piece.row == 1
    assert next_state(state, only_o(), InputEvent.LEFT).piece.column == 0


def test_spawn_onto_locked_blocks_ends_game() -> None:
    state = GameState(width=4, height=4, locked=frozenset({(1, 1)}))
    over = spawn(state, only_o())
    assert over.game_over
    assert over.piece is None
    assert tick(over, only_o()) is over
    assert next_state(over, only_o(), InputEvent.DROP) is over


def test_transitions_do_not_mutate_previous_state() -> None:
    state = GameState(width=4, height=4, piece=MovingPiece(Shape.O, 0, 0, 2),
                      locked=frozenset({(2, 3), (3, 3)}))
    tick(state, only_o())
    assert state.piece == MovingPiece(Shape.O, 0, 0, 2)
    assert state.locked == frozenset({(2, 3), (3, 3)})
    assert state.score == 0


def test_same_seed_replays_same_game() -> None:
    def play(seed: int) -> GameState:
        rng = PieceRandom(seed=seed, spawn_column=None)
        state = initial_state(10, 12)
        events = [None, InputEvent.LEFT, InputEvent.ROTATE, None, InputEvent.RIGHT, InputEvent.DROP]
        for i in range(300):
            state = next_state(state, rng, events[i % len(events)])
        return state

    assert play(7) == play(7)


def test_score_never_decreases() -> None:
    rng = PieceRandom(seed=3, spawn_column=None)
    state = initial_state(6, 10)
    for i in range(500):
        event = InputEvent.LEFT if i % 3 == 0 else None
        after = next_state(state, rng, event)
        assert after.score >= state.score
        if after.piece is not None:
            assert not set(piece_cells(after.piece)) & after.locked
        state = after


def test_random_column_never_ends_game_on_empty_grid() -> None:
    rng = PieceRandom(seed=0, shapes=(3,), orientations=(3,), spawn_column=None)
    empty = initial_state(6, 10)
    for _ in range(200):
        state = tick(empty, rng)
        assert not state.game_over
        assert all(0 <= c < 6 for c, _ in piece_cells(state.piece))


def test_spawn_ends_game_only_on_locked_overlap() -> None:
    rng = PieceRandom(shapes=(1,), orientations=(0,), spawn_column=6)
    state = tick(initial_state(10, 20), rng)
    assert not state.game_over
    assert state.piece == MovingPiece(Shape.I, 0, 6, 0)
    blocked = tick(GameState(width=10, height=20, locked=frozenset({(9, 0)})), rng)
    assert blocked.game_over


def two_row_setup() -> GameState:
    # rows 4 and 5 miss only column 3; (0,3) and (1,2) sit above them
    locked = frozenset({(0, 4), (1, 4), (2, 4), (0, 5), (1, 5), (2, 5), (0, 3), (1, 2)})
    return GameState(width=4, height=6, score=1, locked=locked,
                     piece=MovingPiece(Shape.I, 1, 3, 2))


@pytest.mark.parametrize("event", [None, InputEvent.DROP])
def test_lock_clearing_two_rows_drops_cells_above_by_two(event: object) -> None:
    after = next_state(two_row_setup(), only_o(), event)
    assert after.piece is None
    assert after.score == 3
    assert after.locked == frozenset({(0, 5), (1, 4), (3, 4), (3, 5)})
