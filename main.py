import argparse
import logging
import sys
import time

import pygame
from rich.console import Console

from tetris_config import CONFIG
from tetris_input import event_for_key
from tetris_layout import compute_dims, frame_of, grid_to_text
from tetris_log import setup_logger
from tetris_render import RenderAssets
from tetris_rng import PieceRandom
from tetris_session import GameSession

log = logging.getLogger(__name__)

TICK_EVENT = pygame.USEREVENT + 1


class TickTimer:
    """Posts TICK_EVENT every interval_ms until cancelled."""
    def __init__(self, interval_ms: int):
        self.interval_ms = interval_ms
        pygame.time.set_timer(TICK_EVENT, interval_ms)

    def cancel(self) -> None:
        pygame.time.set_timer(TICK_EVENT, 0)


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Falling-block puzzle (pygame).")
    ap.add_argument("--seed", type=int, default=CONFIG["SEED"])
    ap.add_argument("--tick-ms", type=int, default=CONFIG["TICK_MS"], help="ms between automatic descents")
    ap.add_argument("--width", type=int, default=CONFIG["GRID_WIDTH"])
    ap.add_argument("--height", type=int, default=CONFIG["GRID_HEIGHT"])
    ap.add_argument("--log-level", type=str, default=CONFIG["LOG_LEVEL"])
    ap.add_argument("--console", action="store_true", help="print frames to the terminal instead of a window")
    return ap.parse_args(argv)


def new_session(args: argparse.Namespace) -> GameSession:
    rng = PieceRandom(
        seed=args.seed,
        shapes=CONFIG["ALLOWED_SHAPES"],
        orientations=CONFIG["ALLOWED_ORIENTATIONS"],
        spawn_column=CONFIG["SPAWN_COLUMN"],
    )
    log.info("new game %dx%d, seed %s", args.width, args.height, args.seed)
    return GameSession(args.width, args.height, rng)


def run_console(args: argparse.Namespace) -> None:
    console = Console()
    session = new_session(args)

    def paint(frame):
        console.clear()
        console.print(grid_to_text(frame.grid))
        console.print(f"Score: {frame.score}")

    session.subscribe(paint)
    try:
        while not session.game_over:
            session.tick()
            time.sleep(args.tick_ms / 1000.0)
    except KeyboardInterrupt:
        pass
    console.print(f"Final score: {session.state.score}")


def run_window(args: argparse.Namespace) -> None:
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, TICK_EVENT])

    dims = compute_dims(args.width, args.height)
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Blocks")
    font = pygame.font.SysFont(None, 22)
    render = RenderAssets(dims, args.width, args.height, font)
    clock = pygame.time.Clock()

    frames = []

    def start():
        s = new_session(args)
        s.subscribe(frames.append)
        s.start(TickTimer(args.tick_ms))
        frames.append(frame_of(s.state))
        return s

    session = start()
    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                session.stop()
                pygame.quit()
                return
            if e.type == TICK_EVENT:
                session.tick()
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_r:
                    session.stop()
                    session = start()
                    continue
                ev = event_for_key(e.key)
                if ev is not None:
                    session.handle_input(ev)

        if frames:
            render.draw_frame(screen, frames[-1])
            frames.clear()
            pygame.display.flip()
        clock.tick(60)


def main(argv=None) -> None:
    args = parse_args(argv)
    setup_logger(use_rich=CONFIG["USE_RICH"], level=args.log_level)
    if args.console:
        run_console(args)
    else:
        run_window(args)


if __name__ == '__main__':
    main(sys.argv[1:])
