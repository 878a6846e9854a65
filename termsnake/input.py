"""Keyboard reader feeding commands into the game loop."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from blessed import Terminal
from blessed.keyboard import Keystroke

from .channel import Disconnected, Sender
from .commands import Command, Quit, command_from_key

logger = logging.getLogger(__name__)


def read_keys(term: Terminal) -> Iterator[Keystroke]:
    """Yield keystrokes from ``term``, blocking until each one arrives.

    Stops at once when stdin is not a terminal, since ``inkey`` would return
    immediately instead of waiting.
    """

    if term._keyboard_fd is None:
        logger.info("No keyboard attached to stdin")
        return
    while True:
        key = term.inkey()
        if key:
            yield key


def handle_input(keys: Iterable[str], sender: Sender[Command]) -> None:
    """Forward bound keys as commands until quit or until the receiver is gone.

    Unbound keys are ignored. The sender is closed on return so the game loop
    sees the channel as disconnected.
    """

    with sender:
        for key in keys:
            command = command_from_key(key)
            if command is None:
                continue
            try:
                sender.send(command)
            except Disconnected:
                logger.info("Game loop is gone, input reader stopping")
                return
            logger.debug("Forwarded %r", command)
            if isinstance(command, Quit):
                logger.info("Quit requested")
                return
        logger.info("Keyboard input exhausted")
