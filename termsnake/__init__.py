"""Terminal snake game driven by an input thread and a fixed-rate game loop."""

__all__ = [
    "channel",
    "clock",
    "commands",
    "constants",
    "game",
    "input",
    "main",
    "render",
    "snake",
    "utils",
]
