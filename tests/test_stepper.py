"""Tests for the playback Stepper, driven by a fake clock."""

import pytest

import config
from algorithms.mathematical import gcd_steps
from engine.stepper import MIN_INTERVAL_MS, SPEED_PRESETS, Stepper, StepperState


class FakeClock:
    def __init__(self, now=100.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000.0


@pytest.fixture
def trace():
    return gcd_steps(48, 18)        # 7 steps


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def stepper(trace, clock):
    s = Stepper(interval_ms=100, clock=clock)
    s.load(trace)
    return s


class TestLifecycle:
    """load / reset / clear."""

    def test_starts_idle(self):
        s = Stepper()
        assert s.state == StepperState.IDLE
        assert s.current_step is None
        assert s.interval_ms == config.PLAYBACK_INTERVAL_MS

    def test_load_shows_first_step_paused(self, stepper, trace):
        assert stepper.state == StepperState.PAUSED
        assert stepper.current_idx == 0
        assert stepper.current_step == trace[0]
        assert stepper.total_steps == len(trace)

    def test_load_empty_goes_idle(self, stepper):
        stepper.load([])
        assert stepper.state == StepperState.IDLE
        assert stepper.current_idx == -1

    def test_reset_keeps_trace(self, stepper):
        stepper.jump_to_end()
        stepper.reset()
        assert stepper.current_idx == 0
        assert stepper.state == StepperState.PAUSED
        assert stepper.total_steps == 7

    def test_clear(self, stepper):
        stepper.clear()
        assert stepper.state == StepperState.IDLE
        assert stepper.total_steps == 0


class TestNavigation:
    """Manual stepping."""

    def test_next_and_prev_are_clamped(self, stepper):
        assert not stepper.prev_step()
        for _ in range(6):
            assert stepper.next_step()
        assert not stepper.next_step()
        assert stepper.current_idx == 6
        assert stepper.is_finished

    def test_prev_from_end_unfinishes(self, stepper):
        stepper.jump_to_end()
        assert stepper.prev_step()
        assert stepper.state == StepperState.PAUSED

    def test_goto(self, stepper):
        assert stepper.goto_step(3)
        assert stepper.current_idx == 3
        assert not stepper.goto_step(7)
        assert not stepper.goto_step(-1)
        assert stepper.current_idx == 3

    def test_goto_last_finishes(self, stepper):
        stepper.goto_step(6)
        assert stepper.is_finished

    def test_on_step_callback(self, trace, clock):
        seen = []
        s = Stepper(on_step=seen.append, clock=clock)
        s.load(trace)
        s.next_step()
        s.prev_step()
        assert [step.step_number for step in seen] == [0, 1, 0]


class TestPlayback:
    """play / pause / tick."""

    def test_tick_advances_one_step_per_interval(self, stepper, clock):
        stepper.play()
        assert stepper.tick() == 0
        clock.advance(100)
        assert stepper.tick() == 1
        clock.advance(250)
        assert stepper.tick() == 2
        assert stepper.current_idx == 3
        clock.advance(50)
        assert stepper.tick() == 1

    def test_tick_stops_at_last_step(self, stepper, clock):
        stepper.play()
        clock.advance(10_000)
        assert stepper.tick() == 6
        assert stepper.state == StepperState.FINISHED
        clock.advance(1_000)
        assert stepper.tick() == 0

    def test_tick_accepts_explicit_now(self, stepper, clock):
        stepper.play()
        assert stepper.tick(now=clock.now + 0.2) == 2

    def test_tick_ignored_when_paused(self, stepper, clock):
        clock.advance(1_000)
        assert stepper.tick() == 0
        assert stepper.current_idx == 0

    def test_pause_and_toggle(self, stepper):
        stepper.toggle_play()
        assert stepper.is_playing
        stepper.toggle_play()
        assert stepper.state == StepperState.PAUSED

    def test_play_at_end_rewinds(self, stepper):
        stepper.jump_to_end()
        stepper.play()
        assert stepper.current_idx == 0
        assert stepper.is_playing

    def test_single_step_trace_cannot_play(self, clock):
        s = Stepper(clock=clock)
        s.load(gcd_steps(48, 18)[:1])
        s.play()
        assert s.state == StepperState.FINISHED


class TestSpeed:
    """Presets and interval floor."""

    def test_presets(self, stepper):
        for name, ms in SPEED_PRESETS.items():
            stepper.set_speed(name)
            assert stepper.interval_ms == ms

    def test_unknown_preset(self, stepper):
        with pytest.raises(ValueError):
            stepper.set_speed("ludicrous")

    def test_non_string_preset(self, stepper):
        with pytest.raises(ValueError):
            stepper.set_speed(["fast"])

    def test_interval_floor(self, stepper):
        stepper.set_interval_ms(1)
        assert stepper.interval_ms == MIN_INTERVAL_MS

    def test_to_dict(self, stepper):
        data = stepper.to_dict()
        assert data["state"] == "paused"
        assert data["current_index"] == 0
        assert data["total_steps"] == 7
        assert data["step"]["kind"] == "gcd"
