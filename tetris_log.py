# tetris_log.py
import logging

from rich.logging import RichHandler


def setup_logger(*, name: str = "", use_rich: bool = True, level: str = "info") -> logging.Logger:
    """Configure one logger (the root logger by default) with a single handler."""
    logger = logging.getLogger(name or None)
    logger.handlers.clear()

    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logger.setLevel(lvl)

    if use_rich:
        handler: logging.Handler = RichHandler(
            rich_tracebacks=True,
            show_time=True,
            show_level=True,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s %(name)s %(message)s"))

    logger.addHandler(handler)
    return logger
