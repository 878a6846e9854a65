"""Game state and the fixed-rate simulate/render loop."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from blessed import Terminal

from . import constants
from .channel import Disconnected, Empty, Receiver
from .clock import Clock
from .commands import Command, Extend, Quit, RotatePlayer, Shrink
from .render import Renderer
from .snake import Snake
from .utils import Vec2

logger = logging.getLogger(__name__)

_FIELD_MIN = Vec2(*constants.FIELD_MIN)
_FIELD_MAX = Vec2(*constants.FIELD_MAX)


class Game:
    """Holds the player and advances it on every frame.

    The terminal size is captured once; resizing the terminal while the game
    runs is not picked up.
    """

    def __init__(
        self,
        width: int,
        height: int,
        player: Optional[Snake] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.player = player if player is not None else Snake.spawn()
        self.clock = clock if clock is not None else Clock()

    @classmethod
    def from_terminal(cls, term: Terminal) -> "Game":
        return cls(term.width, term.height)

    def apply(self, command: Command) -> bool:
        """Apply ``command`` to the player. Returns ``False`` when the game should stop."""

        if isinstance(command, Quit):
            return False
        if isinstance(command, RotatePlayer):
            self.player.rotate(command.angle)
        elif isinstance(command, Extend):
            self.player.extend()
        elif isinstance(command, Shrink):
            self.player.shrink()
        else:
            raise TypeError(f"Unknown command: {command!r}")
        logger.debug("Applied %r", command)
        return True

    def update(self, dt: float) -> None:
        player = self.player
        if (player.head + player.forward * dt).inside_rectangle(_FIELD_MIN, _FIELD_MAX):
            player.move(dt)

    def term_coord(self, v: Vec2) -> Tuple[int, int]:
        """Map a logical position to a 1-based ``(column, row)`` terminal cell."""

        column = max(0, int(v.x * self.width))
        row = max(0, int(v.y * self.height))
        return column + 1, row + 1

    def game_coord(self, column: int, row: int) -> Vec2:
        """Map a 1-based terminal cell to the logical position of its top-left corner."""

        return Vec2((column - 1) / self.width, (row - 1) / self.height)

    def draw(self, renderer: Renderer) -> None:
        head = self.player.head
        head_cell = self.term_coord(head)
        renderer.clear()
        renderer.draw_diagnostics(head, head_cell)
        renderer.draw_block(head_cell)
        for segment in self.player.segments:
            renderer.draw_block(self.term_coord(segment))
        renderer.present()


def game_loop(
    receiver: Receiver[Command],
    renderer: Renderer,
    game: Game,
    fps: float = constants.TICK_RATE,
) -> int:
    """Run the game until a quit command arrives or the input side disconnects.

    Each frame polls the channel once without blocking, advances the game by
    the time the previous frame took, redraws and paces itself with the game
    clock. Returns the number of frames drawn.
    """

    frames = 0
    dt = 0.0
    with receiver:
        game.draw(renderer)
        logger.info("Game loop started at %.1f fps", fps)
        while True:
            try:
                command = receiver.try_recv()
            except Empty:
                pass
            except Disconnected:
                logger.info("Input disconnected, stopping game loop")
                break
            else:
                if not game.apply(command):
                    logger.info("Quit received, stopping game loop")
                    break
            game.update(dt)
            game.draw(renderer)
            frames += 1
            dt = game.clock.tick(fps)
    return frames
