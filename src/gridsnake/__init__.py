"""Grid Snake: a tick-driven Snake simulation with a pygame shell."""

from .config import Config
from .game import GameState, GridFullError, SnakeEngine, Status
from .pacing import StepAccumulator
from .rng import RandomSource

__all__ = [
    "Config",
    "GameState",
    "GridFullError",
    "RandomSource",
    "SnakeEngine",
    "Status",
    "StepAccumulator",
]
