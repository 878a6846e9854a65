"""Entry point running the game loop and the keyboard reader on two threads."""

from __future__ import annotations

import argparse
import logging
import threading
from typing import Any, Callable, List, Optional

from blessed import Terminal

from . import constants
from .channel import channel
from .game import Game, game_loop
from .input import handle_input, read_keys
from .render import Renderer

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


class Worker(threading.Thread):
    """Thread that keeps the exception raised by its target for the joiner."""

    def __init__(self, name: str, target: Callable[..., Any], *args: Any) -> None:
        super().__init__(name=name)
        self._target_fn = target
        self._target_args = args
        self.error: Optional[Exception] = None

    def run(self) -> None:
        try:
            self._target_fn(*self._target_args)
        except Exception as exc:
            logger.exception("%s thread failed", self.name)
            self.error = exc


def run(args: argparse.Namespace, term: Optional[Terminal] = None) -> None:
    """Take over the terminal and run the game until it quits."""

    term = term if term is not None else Terminal()
    with term.fullscreen(), term.raw(), term.hidden_cursor():
        game = Game.from_terminal(term)
        logger.info("Terminal size %sx%s", game.width, game.height)
        renderer = Renderer(term)
        sender, receiver = channel()
        workers = [
            Worker("game", game_loop, receiver, renderer, game, args.fps),
            Worker("input", handle_input, read_keys(term), sender),
        ]
        try:
            for worker in workers:
                worker.start()
        finally:
            _join_all(workers)
    for worker in workers:
        if worker.error is not None:
            raise worker.error


def _join_all(workers: List[Worker]) -> None:
    for worker in workers:
        if worker.ident is not None:
            worker.join()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Steer a snake around the terminal")
    parser.add_argument(
        "--fps", type=float, default=constants.TICK_RATE, help="Target frame rate"
    )
    parser.add_argument("--log-file", default=None, help="Write log records to this file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level used with --log-file",
    )
    args = parser.parse_args(argv)
    if args.fps <= 0:
        parser.error("--fps must be positive")
    return args


def configure_logging(log_file: Optional[str], level: str) -> None:
    """Send records to ``log_file``; without one only warnings reach stderr."""

    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_file, args.log_level)
    run(args)


if __name__ == "__main__":
    main()
