# gridsnake/rl/env.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

import numpy as np  # type: ignore
import pygame       # type: ignore

from gridsnake.config import Config, UP, DOWN, LEFT, RIGHT
from gridsnake.game import SnakeEngine, Status
from gridsnake.main import draw_board
from gridsnake.rng import RandomSource

# -----------------------------------------------------------------------------
# Actions: integers -> grid directions (dx, dy)
# -----------------------------------------------------------------------------
ACTIONS = {
    0: UP,
    1: DOWN,
    2: LEFT,
    3: RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(direction):
    """Rotate a direction 90° CCW (screen coordinates, y grows downward)."""
    dx, dy = direction
    return (dy, -dx)

def right_of(direction):
    """Rotate a direction 90° CW (screen coordinates, y grows downward)."""
    dx, dy = direction
    return (-dy, dx)

def would_hit(engine: SnakeEngine, direction) -> bool:
    """
    True if moving the head one cell in 'direction' would hit a wall or the
    body. The tail cell counts as free unless the snake is about to grow.
    """
    hx, hy = engine.head
    cell = (hx + direction[0], hy + direction[1])
    if not engine.in_bounds(cell):
        return True
    body = engine.snake_segments
    if not engine.growing:
        body = body[:-1]
    return cell in body

def manhattan(ax: int, ay: int, bx: int, by: int) -> int:
    return abs(ax - bx) + abs(ay - by)

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(engine: SnakeEngine) -> np.ndarray:
    """
    Return a compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current direction x component in {-1, 0, 1}
      5: dy    - current direction y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal

    After a wall death the head sits outside the grid, so positions are
    clipped into [0, 1]. With no food left (grid full) food mirrors the head.
    """
    cols, rows = engine.grid_dimensions
    hx, hy = engine.head
    fx, fy = engine.food_position if engine.food_position is not None else (hx, hy)

    denom_w = max(cols - 1, 1)
    denom_h = max(rows - 1, 1)
    pos = np.clip(
        np.array([hx / denom_w, hy / denom_h, fx / denom_w, fy / denom_h], dtype=np.float32),
        0.0, 1.0,
    )

    heading = engine.direction
    dx, dy = heading
    dangers = [
        float(would_hit(engine, heading)),
        float(would_hit(engine, left_of(heading))),
        float(would_hit(engine, right_of(heading))),
    ]
    return np.concatenate([pos, np.array([dx, dy, *dangers], dtype=np.float32)])

# -----------------------------------------------------------------------------
# RL Environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Minimal Gym-like environment over SnakeEngine. Every step() advances the
    engine by exactly one tick, with no wall-clock pacing.

    Rewards:
      + eat_reward  when food is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step (tiny negative to discourage dithering)
      + death_reward on death
    """
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: Optional[int] = 0
    cfg: Config = field(default_factory=Config)
    render_enabled: bool = False
    render_fps: int = 15

    def __post_init__(self):
        self.rng = RandomSource(self.seed_value)
        np.random.seed(self.seed_value)
        self.engine = SnakeEngine(self.cfg, self.rng)

        # --- Rendering state (pygame) ---
        self.screen = None
        self.clock = None
        if self.render_enabled:
            pygame.init()
            self.screen = pygame.display.set_mode(
                (self.cfg.cols * self.cfg.cell_size, self.cfg.rows * self.cfg.cell_size)
            )
            pygame.display.set_caption("Snake agent")
            self.clock = pygame.time.Clock()

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: Optional[int] = None) -> np.ndarray:
        """Start a new episode and return the initial observation."""
        if seed is not None:
            self.rng = RandomSource(seed)
            np.random.seed(seed)
            self.engine.rng = self.rng
        self.engine.restart()
        return observe(self.engine)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one grid step, and return:
          (obs, reward, terminated, info)
        """
        if action not in ACTIONS:
            raise ValueError(f"Invalid action {action}")
        engine = self.engine
        if engine.status is Status.ENDED:
            raise RuntimeError("Episode is over; call reset() first.")

        # Reversals are silently ignored by the engine
        engine.request_direction(ACTIONS[action])

        hx, hy = engine.head
        fx, fy = engine.food_position
        d_before = manhattan(hx, hy, fx, fy)
        score_before = engine.score

        engine.step()

        info = {"score": engine.score}
        ate = engine.score > score_before

        if engine.status is Status.ENDED:
            info["reason"] = engine.end_reason
            # "full" means the last food filled the board
            reward = self.eat_reward if engine.end_reason == "full" else self.death_reward
            return observe(engine), reward, True, info

        reward = self.step_penalty
        if ate:
            reward += self.eat_reward
        else:
            # Only shape plain moves; fresh food makes the distance jump
            hx2, hy2 = engine.head
            fx2, fy2 = engine.food_position
            reward += self.shaping_coef * (d_before - manhattan(hx2, hy2, fx2, fy2))

        return observe(engine), reward, False, info

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------
    def render(self) -> None:
        """Draw the board if render_enabled=True, otherwise do nothing."""
        if not self.render_enabled or self.screen is None:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                raise SystemExit

        draw_board(self.screen, self.engine)
        pygame.display.flip()
        if self.clock is not None:
            self.clock.tick(self.render_fps)

    def close(self) -> None:
        if self.render_enabled:
            pygame.quit()

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        return (9,)
