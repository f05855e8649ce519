from collections import deque

import pytest

from gridsnake import Config, RandomSource, SnakeEngine


class ScriptedRandom(RandomSource):
    """RandomSource that hands out queued values first, then falls back to a seeded stream."""

    def __init__(self, values=(), seed=1234):
        super().__init__(seed)
        self.queue = deque(values)

    def push_cell(self, x, y):
        self.queue.extend((x, y))

    def next_int(self, low, high):
        if self.queue:
            value = self.queue.popleft()
            assert low <= value <= high, f"scripted {value} outside [{low}, {high}]"
            return value
        return super().next_int(low, high)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def make_engine():
    """Build an engine on a 10x10 grid with a length-3 snake at (5, 5) facing right."""

    def _make(foods=((0, 0),), **overrides):
        params = dict(cols=10, rows=10, initial_length=3)
        params.update(overrides)
        rng = ScriptedRandom([v for cell in foods for v in cell])
        return SnakeEngine(Config(**params), rng)

    return _make
