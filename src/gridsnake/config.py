from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Colors -----
BG = (30, 30, 30)
CHECKER_A = (38, 38, 38)
CHECKER_B = (34, 34, 34)
FOOD = (200, 40, 40)
SNAKE_HEAD = (120, 220, 120)
SNAKE_BODY = (80, 180, 80)
TEXT = (220, 220, 230)


# ----- Tunables (what you'd tweak for difficulty) -----
@dataclass
class Config:
    cell_size: int = 20            # pixels, shell only
    cols: int = 32
    rows: int = 24
    move_interval: float = 0.12    # seconds per step (smaller => faster)
    initial_length: int = 5
    food_reward: int = 10
    speedup_every: int = 50        # score multiple that triggers a speed-up
    speedup_factor: float = 0.92
    min_move_interval: float = 0.04
    start: Optional[Tuple[int, int]] = None   # head at round start; None = grid centre
    seed: Optional[int] = None

    @property
    def start_position(self) -> Tuple[int, int]:
        if self.start is not None:
            return self.start
        return (self.cols // 2, self.rows // 2)

    def validate(self) -> None:
        """Raise ValueError if the config cannot describe a playable round."""
        if self.cols <= 0 or self.rows <= 0:
            raise ValueError(f"Grid must be positive, got {self.cols}x{self.rows}")
        if self.initial_length < 1:
            raise ValueError(f"initial_length must be >= 1, got {self.initial_length}")
        if self.move_interval <= 0:
            raise ValueError(f"move_interval must be positive, got {self.move_interval}")
        if self.food_reward <= 0 or self.speedup_every <= 0:
            raise ValueError("food_reward and speedup_every must be positive")
        if not 0 < self.speedup_factor < 1:
            raise ValueError(f"speedup_factor must be in (0, 1), got {self.speedup_factor}")
        if self.min_move_interval < 0:
            raise ValueError(f"min_move_interval must be >= 0, got {self.min_move_interval}")
        if self.move_interval < self.min_move_interval:
            raise ValueError(
                f"move_interval {self.move_interval} is below the floor {self.min_move_interval}"
            )

        # The starting body extends to the left of the head.
        sx, sy = self.start_position
        tail_x = sx - (self.initial_length - 1)
        if not (0 <= tail_x and sx < self.cols and 0 <= sy < self.rows):
            raise ValueError(
                f"Initial snake of length {self.initial_length} at {(sx, sy)} "
                f"does not fit a {self.cols}x{self.rows} grid"
            )
        if self.initial_length >= self.cols * self.rows:
            raise ValueError("Initial snake leaves no free cell for food")

