"""Gameplay constants shared across the game modules."""

import math

TICK_RATE: float = 30.0
ROTATION_STEP: float = math.radians(90.0)
EXTEND_STEP: float = 0.01
START_HEAD: tuple[float, float] = (0.03, 0.03)
START_FORWARD: tuple[float, float] = (0.11, 0.0)
FIELD_MIN: tuple[float, float] = (0.0, 0.0)
FIELD_MAX: tuple[float, float] = (1.0, 1.0)
BLOCK_GLYPH: str = "\u2588"
