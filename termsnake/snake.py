"""Snake entity implementation."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque

from . import constants
from .utils import Vec2

_EXTEND_LOW = Vec2(-constants.EXTEND_STEP, -constants.EXTEND_STEP)
_EXTEND_HIGH = Vec2(constants.EXTEND_STEP, constants.EXTEND_STEP)


@dataclass
class Snake:
    """The player's body: a head, a heading and the trail of vacated positions.

    ``segments`` is ordered from the most recently vacated head position
    (front) to the oldest one (back). ``length`` is informational only; the
    drawn body is always derived from ``segments``.
    """

    head: Vec2
    forward: Vec2
    length: int = 1
    segments: Deque[Vec2] = field(default_factory=deque)

    @classmethod
    def spawn(cls) -> "Snake":
        """Create a snake in the starting position."""

        return cls(head=Vec2(*constants.START_HEAD), forward=Vec2(*constants.START_FORWARD))

    @property
    def body_length(self) -> int:
        """Number of drawn cells, head included."""

        return len(self.segments) + 1

    def extend(self) -> None:
        """Grow by one segment, nudging the head at most one step along ``forward``."""

        new_head = self.head + self.forward.clamp(_EXTEND_LOW, _EXTEND_HIGH)
        self.segments.appendleft(self.head)
        self.head = new_head
        self.length += 1

    def shrink(self) -> None:
        """Drop the oldest segment. Does nothing when there is none."""

        if not self.segments:
            return
        self.segments.pop()
        self.length = max(1, self.length - 1)

    def move(self, dt: float) -> None:
        """Translate the body by ``forward * dt`` keeping the segment count."""

        self.segments.appendleft(self.head)
        self.head = self.head + self.forward * dt
        self.segments.pop()

    def move_back(self) -> None:
        """Step the head back by one full ``forward`` vector."""

        self.head = self.head - self.forward

    def rotate(self, angle: float) -> None:
        """Turn the heading by ``angle`` radians."""

        self.forward.rotate(angle)
