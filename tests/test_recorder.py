"""Tests for the Recorder: run, metrics, export."""

import json

import pytest

from engine import Recorder, StepperState


class TestRecorder:
    """Full-run recording."""

    def test_unknown_algorithm(self):
        with pytest.raises(ValueError, match="Unknown algorithm"):
            Recorder().start("teleport", {})

    def test_bad_params_raise_on_start(self):
        with pytest.raises(ValueError):
            Recorder().start("gcd", {"a": "x"})

    def test_run_before_start(self):
        with pytest.raises(RuntimeError):
            Recorder().run_to_completion()

    def test_metrics(self):
        rec = Recorder()
        rec.start("gcd", {"a": 48, "b": 18})
        metrics = rec.run_to_completion()
        assert metrics.algo_key == "gcd"
        assert metrics.algo_label == "Euclidean GCD"
        assert metrics.category == "mathematical"
        assert metrics.total_steps == len(rec.steps) == 7
        assert metrics.wall_time_ms >= 0
        assert metrics.memory_bytes > 0
        assert "GCD(48, 18) = 6" in metrics.final_explanation
        assert rec.get_metrics() is metrics

    def test_stepper_loaded(self):
        rec = Recorder()
        rec.start("bubble_sort", {"array": "3,1,2"})
        rec.run_to_completion()
        assert rec.stepper.state == StepperState.PAUSED
        assert rec.stepper.total_steps == len(rec.steps)

    def test_empty_trace_metrics(self):
        rec = Recorder()
        rec.start("bfs", {"start": "99"})
        metrics = rec.run_to_completion()
        assert metrics.total_steps == 0
        assert metrics.final_explanation == ""
        assert rec.stepper.state == StepperState.IDLE

    def test_export_is_json_safe(self):
        rec = Recorder()
        rec.start("dijkstra", {})
        rec.run_to_completion()
        data = rec.export()
        json.dumps(data)
        assert data["algo_key"] == "dijkstra"
        assert data["params"]["start"] == "1"
        assert len(data["params"]["graph"]["nodes"]) == 6
        assert data["metrics"]["total_steps"] == len(data["steps"])
        assert data["steps"][-1]["is_final"] is True
