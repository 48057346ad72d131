"""Game session: owns the current state, the tick timer and render listeners"""
import logging
from typing import Callable, List, Optional, Protocol

from tetris_engine import next_state
from tetris_layout import Frame, frame_of, grid_to_text
from tetris_rng import PieceRandom
from tetris_state import GameState, InputEvent, initial_state

log = logging.getLogger(__name__)

Listener = Callable[[Frame], None]


class Timer(Protocol):
    def cancel(self) -> None: ...


class GameSession:
    """
    Serializes every transition through one current-state reference.

    Each call to tick() or handle_input() reads the state, computes the next
    one and replaces it before returning, so a timer firing and a key press
    never both build on the same stale value. After a manual drop the next
    timer tick is skipped once, so a drop never double-advances the piece.
    """
    def __init__(self, width: int, height: int, rng: PieceRandom,
                 state: Optional[GameState] = None):
        self.rng = rng
        self.state = state if state is not None else initial_state(width, height)
        rng.check_fits(self.state.width)
        self.skip = False
        self.timer: Optional[Timer] = None
        self.listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def start(self, timer: Timer) -> None:
        self.stop()
        self.timer = timer

    def stop(self) -> None:
        if self.timer is not None:
            self.timer.cancel()
            self.timer = None

    @property
    def game_over(self) -> bool:
        return self.state.game_over

    def tick(self) -> GameState:
        if self.skip:
            self.skip = False
            return self.state
        return self._commit(next_state(self.state, self.rng))

    def handle_input(self, event) -> GameState:
        if not isinstance(event, InputEvent):
            log.debug("ignoring input %r", event)
            return self.state
        state = next_state(self.state, self.rng, event)
        if state is self.state:
            return state
        if event is InputEvent.DROP:
            self.skip = True
        return self._commit(state)

    def _commit(self, state: GameState) -> GameState:
        ended = state.game_over and not self.state.game_over
        self.state = state
        frame = frame_of(state)
        for listener in self.listeners:
            listener(frame)
        if ended:
            log.debug("final board:\n%s", grid_to_text(frame.grid))
            self.stop()
        return state
