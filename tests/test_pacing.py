"""Tests for the fixed-interval StepAccumulator."""

from gridsnake import Status, StepAccumulator


class TestStepAccumulator:
    """Tests for the fixed-interval StepAccumulator."""

    def test_no_step_before_interval_elapses(self, make_engine):
        """No step fires until a full move interval has accumulated."""
        engine = make_engine(move_interval=0.125)
        ticker = StepAccumulator()
        assert ticker.advance(engine, 0.0625) == 0
        assert engine.head == (5, 5)
        assert ticker.advance(engine, 0.0625) == 1
        assert engine.head == (6, 5)
        assert ticker.elapsed == 0.0

    def test_long_frame_runs_several_steps(self, make_engine):
        """A long frame drains several steps and keeps the remainder."""
        engine = make_engine(move_interval=0.125)
        ticker = StepAccumulator()
        assert ticker.advance(engine, 0.4375) == 3
        assert engine.head == (8, 5)
        assert ticker.elapsed == 0.0625

    def test_paused_time_is_discarded(self, make_engine):
        """Time spent paused does not cause a burst of steps on resume."""
        engine = make_engine(move_interval=0.125)
        ticker = StepAccumulator()
        ticker.advance(engine, 0.0625)
        engine.pause()
        assert ticker.advance(engine, 5.0) == 0
        assert ticker.elapsed == 0.0

        engine.resume()
        assert ticker.advance(engine, 0.0625) == 0
        assert engine.head == (5, 5)

    def test_draining_stops_when_round_ends(self, make_engine):
        """Draining stops at the step that ends the round."""
        engine = make_engine(move_interval=0.125)
        ticker = StepAccumulator()
        assert ticker.advance(engine, 10 * 0.125) == 5
        assert engine.status is Status.ENDED
        assert engine.head == (10, 5)
        assert ticker.elapsed == 0.0
        assert ticker.advance(engine, 1.0) == 0

    def test_speed_up_applies_within_the_same_frame(self, make_engine):
        """A speed-up mid-frame shortens the remaining steps in that frame."""
        engine = make_engine(
            foods=((6, 5), (0, 0)),
            move_interval=0.125, speedup_every=10, speedup_factor=0.5,
            min_move_interval=0.0,
        )
        ticker = StepAccumulator()
        # First step eats and halves the interval, so 0.25s covers three steps
        assert ticker.advance(engine, 0.25) == 3
        assert engine.move_interval == 0.0625

    def test_reset_clears_elapsed_time(self, make_engine):
        """reset() drops any accumulated time."""
        engine = make_engine(move_interval=0.125)
        ticker = StepAccumulator()
        ticker.advance(engine, 0.0625)
        ticker.reset()
        assert ticker.elapsed == 0.0
