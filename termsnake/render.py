"""Terminal renderer for the game."""

from __future__ import annotations

from typing import Optional, TextIO, Tuple

from blessed import Terminal

from . import constants
from .utils import Vec2


class Renderer:
    """Responsible for all drawing tasks.

    Cells are 1-based ``(column, row)`` pairs. Lines end in ``\\r\\n`` because
    the terminal is in raw mode while the game runs. Write errors are not
    caught.
    """

    def __init__(self, term: Terminal, stream: Optional[TextIO] = None) -> None:
        self.term = term
        self.stream = stream if stream is not None else term.stream

    def clear(self) -> None:
        self.stream.write(self.term.clear + self.term.home)

    def draw_diagnostics(self, head: Vec2, cell: Tuple[int, int]) -> None:
        self.stream.write(f"snake head gamecoord: ({head.x:0.2f},{head.y:0.2f})\r\n")
        self.stream.write(f"snake head termcoord: ({cell[0]},{cell[1]})\r\n")

    def draw_block(self, cell: Tuple[int, int]) -> None:
        column, row = cell
        self.stream.write(
            self.term.move_xy(column - 1, row - 1) + constants.BLOCK_GLYPH + self.term.hide_cursor
        )

    def present(self) -> None:
        self.stream.flush()
