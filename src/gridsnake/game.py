# game.py
from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import Deque, Optional, Tuple

from .config import Config, DIRECTIONS, RIGHT
from .rng import RandomSource

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


class Status(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    ENDED = "ended"


class GridFullError(RuntimeError):
    """Raised when food has nowhere to go because the snake covers the grid."""


# ---------- Helpers ----------
def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]


def initial_body(cfg: Config) -> Deque[Cell]:
    """Head at the start position, the rest trailing off to the left."""
    sx, sy = cfg.start_position
    return deque((sx - i, sy) for i in range(cfg.initial_length))


# ---------- State ----------
@dataclass
class GameState:
    snake: Deque[Cell]             # head at index 0
    direction: Cell                # direction used by the last step
    pending: Cell                  # direction the next step will use
    food: Optional[Cell]
    score: int
    move_interval: float           # seconds per step
    status: Status = Status.RUNNING
    grow_next: bool = False
    end_reason: Optional[str] = None   # "wall", "self" or "full"


class SnakeEngine:
    """
    Discrete Snake simulation.

    The engine owns the snake, the food and the round counters. A shell drives
    it by forwarding direction requests and calling step() once per elapsed
    move interval, then reads the properties below to draw a frame.
    """

    def __init__(self, cfg: Optional[Config] = None, rng: Optional[RandomSource] = None):
        self.cfg = cfg if cfg is not None else Config()
        self.cfg.validate()
        self.rng = rng if rng is not None else RandomSource(self.cfg.seed)
        self.state: GameState = self._new_state()
        logger.info(
            "New round on %dx%d grid, food at %s",
            self.cfg.cols, self.cfg.rows, self.state.food,
        )

    def _new_state(self) -> GameState:
        self.state = GameState(
            snake=initial_body(self.cfg),
            direction=RIGHT,
            pending=RIGHT,
            food=None,
            score=0,
            move_interval=self.cfg.move_interval,
        )
        self.place_food()
        return self.state

    # ---------- Read-only view ----------
    @property
    def snake_segments(self) -> Tuple[Cell, ...]:
        return tuple(self.state.snake)

    @property
    def food_position(self) -> Optional[Cell]:
        return self.state.food

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def grid_dimensions(self) -> Tuple[int, int]:
        return (self.cfg.cols, self.cfg.rows)

    @property
    def direction(self) -> Cell:
        return self.state.direction

    @property
    def pending_direction(self) -> Cell:
        return self.state.pending

    @property
    def move_interval(self) -> float:
        return self.state.move_interval

    @property
    def head(self) -> Cell:
        return self.state.snake[0]

    @property
    def length(self) -> int:
        return len(self.state.snake)

    @property
    def growing(self) -> bool:
        return self.state.grow_next

    @property
    def end_reason(self) -> Optional[str]:
        return self.state.end_reason

    def occupies(self, cell: Cell) -> bool:
        return cell in self.state.snake

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.cfg.cols and 0 <= y < self.cfg.rows

    # ---------- Round control ----------
    def pause(self) -> None:
        if self.state.status is Status.RUNNING:
            self.state.status = Status.PAUSED

    def resume(self) -> None:
        if self.state.status is Status.PAUSED:
            self.state.status = Status.RUNNING

    def toggle_pause(self) -> None:
        if self.state.status is Status.RUNNING:
            self.pause()
        else:
            self.resume()

    def restart(self) -> None:
        self._new_state()
        logger.info("Round restarted, food at %s", self.state.food)

    def request_direction(self, direction: Cell) -> bool:
        """
        Queue a direction for the next step. Returns False when the request is
        ignored: the round is over, or it would reverse a multi-segment snake.
        """
        direction = tuple(direction)
        if direction not in DIRECTIONS:
            raise ValueError(f"Not a unit direction: {direction}")
        st = self.state
        if st.status is Status.ENDED:
            return False
        if len(st.snake) > 1 and is_opposite(direction, st.direction):
            logger.debug("Rejected reversal %s while heading %s", direction, st.direction)
            return False
        st.pending = direction
        return True

    # ---------- Simulation ----------
    def place_food(self) -> Cell:
        st = self.state
        if len(st.snake) >= self.cfg.cols * self.cfg.rows:
            raise GridFullError("Snake covers the whole grid")
        while True:
            fx = self.rng.next_int(0, self.cfg.cols - 1)
            fy = self.rng.next_int(0, self.cfg.rows - 1)
            if (fx, fy) not in st.snake:
                st.food = (fx, fy)
                return st.food

    def step(self) -> Status:
        """Advance one tick. Does nothing unless the round is running."""
        st = self.state
        if st.status is not Status.RUNNING:
            return st.status

        # Commit direction once per tick
        st.direction = st.pending
        hx, hy = st.snake[0]
        dx, dy = st.direction
        new_head = (hx + dx, hy + dy)

        # Move / grow
        st.snake.appendleft(new_head)
        if st.grow_next:
            st.grow_next = False
        else:
            st.snake.pop()

        # Collisions end the round before food is considered
        if not self.in_bounds(new_head):
            self._end("wall")
        elif new_head in islice(st.snake, 1, None):
            self._end("self")
        elif new_head == st.food:
            self._eat()
        return st.status

    def _eat(self) -> None:
        st = self.state
        cfg = self.cfg
        previous = st.score
        st.grow_next = True
        st.score += cfg.food_reward

        try:
            self.place_food()
        except GridFullError:
            st.food = None
            self._end("full")
            return

        crossed = st.score // cfg.speedup_every > previous // cfg.speedup_every
        if crossed and st.move_interval > cfg.min_move_interval:
            st.move_interval = max(cfg.min_move_interval, st.move_interval * cfg.speedup_factor)
            logger.info("Score %d: move interval now %.4fs", st.score, st.move_interval)

    def _end(self, reason: str) -> None:
        self.state.status = Status.ENDED
        self.state.end_reason = reason
        logger.info("Round over (%s) with score %d, length %d", reason, self.state.score, len(self.state.snake))
