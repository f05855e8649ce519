# pacing.py
from .game import SnakeEngine, Status


class StepAccumulator:
    """
    Turns frame times into engine steps at a fixed interval, so game speed
    does not depend on frame rate.
    """

    def __init__(self) -> None:
        self.elapsed = 0.0

    def reset(self) -> None:
        self.elapsed = 0.0

    def advance(self, engine: SnakeEngine, dt: float) -> int:
        """Feed `dt` seconds in and return how many steps were taken."""
        if engine.status is not Status.RUNNING:
            # Drop time spent paused or on the game-over screen
            self.elapsed = 0.0
            return 0

        self.elapsed += dt
        steps = 0
        # move_interval is re-read each pass: a speed-up applies immediately
        while self.elapsed >= engine.move_interval:
            self.elapsed -= engine.move_interval
            engine.step()
            steps += 1
            if engine.status is not Status.RUNNING:
                self.elapsed = 0.0
                break
        return steps
