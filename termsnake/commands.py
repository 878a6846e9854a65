"""Translate keystrokes into commands for the game loop."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from . import constants


@dataclass(frozen=True)
class RotatePlayer:
    """Turn the player's heading by ``angle`` radians."""

    angle: float


@dataclass(frozen=True)
class Extend:
    """Grow the player by one segment."""


@dataclass(frozen=True)
class Shrink:
    """Remove the player's oldest segment."""


@dataclass(frozen=True)
class Quit:
    """Stop the game."""


Command = Union[RotatePlayer, Extend, Shrink, Quit]

_CHAR_COMMANDS = {
    "q": Quit(),
    "e": Extend(),
    "r": Shrink(),
    "d": RotatePlayer(constants.ROTATION_STEP),
    "l": RotatePlayer(constants.ROTATION_STEP),
    "a": RotatePlayer(-constants.ROTATION_STEP),
    "h": RotatePlayer(-constants.ROTATION_STEP),
}

_NAMED_COMMANDS = {
    "KEY_RIGHT": RotatePlayer(constants.ROTATION_STEP),
    "KEY_LEFT": RotatePlayer(-constants.ROTATION_STEP),
}


def command_from_key(key: str) -> Optional[Command]:
    """Return the command bound to ``key`` or ``None`` for unbound keys.

    ``key`` is a blessed ``Keystroke``; arrow keys are recognised by their
    ``name``. Plain strings work too, which keeps the mapping easy to test.
    """

    name = getattr(key, "name", None)
    if name in _NAMED_COMMANDS:
        return _NAMED_COMMANDS[name]
    if getattr(key, "is_sequence", False):
        return None
    return _CHAR_COMMANDS.get(str(key))
