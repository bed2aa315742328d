"""
recorder.py — Run Recorder & Analytics
========================================
Records a complete algorithm run (all Steps), then computes the
analytics metrics the API reports alongside the trace.

Usage:
    rec = Recorder()
    rec.start("gcd", {"a": 48, "b": 18})
    rec.run_to_completion()          # runs the tracer, loads the stepper
    metrics = rec.get_metrics()      # the analytics card
    rec.export()                     # serialisable snapshot for save/replay
"""

import logging
import sys
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo, coerce_params, get_algorithm
from algorithms.step import Step, to_plain
from engine.stepper import Stepper

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Metrics dataclass: what the analytics card renders
# ---------------------------------------------------------------------------
@dataclass
class RunMetrics:
    algo_key:          str   = ""
    algo_label:        str   = ""
    category:          str   = ""
    total_steps:       int   = 0          # number of Steps produced
    wall_time_ms:      float = 0.0        # wall-clock time to run to completion
    memory_bytes:      int   = 0          # approx size of the step buffer (sys.getsizeof)
    final_explanation: str   = ""         # explanation text of the last step


# ---------------------------------------------------------------------------
# Recorder
# ---------------------------------------------------------------------------
class Recorder:
    """
    Attributes:
        steps       : Full list of Steps from the run.
        metrics     : Computed RunMetrics (available after run_to_completion).
        stepper     : Stepper loaded with the trace, ready for playback.
        params      : The coerced arguments the tracer was called with.
    """

    def __init__(self):
        self.steps:   List[Step]           = []
        self.metrics: Optional[RunMetrics] = None
        self.stepper: Optional[Stepper]    = None
        self.params:  Dict[str, Any]       = {}

        self._algo_info: Optional[AlgoInfo] = None

    # ------------------------------------------------------------------
    # Setup & run
    # ------------------------------------------------------------------
    def start(self, algo_key: str, params: Optional[dict] = None) -> None:
        """Look up the algorithm and coerce its params.  Raises ValueError."""
        info = get_algorithm(algo_key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {algo_key}")

        self._algo_info = info
        self.params     = coerce_params(info, params)
        self.steps      = []
        self.metrics    = None
        self.stepper    = None

    def run_to_completion(self, stepper: Optional[Stepper] = None) -> RunMetrics:
        """Run the tracer, record every step, compute metrics."""
        if self._algo_info is None:
            raise RuntimeError("Call start() first.")

        info = self._algo_info
        log.debug("running %s with %s", info.key, sorted(self.params))

        started    = time.monotonic()
        self.steps = info.fn(**self.params)
        wall_ms    = (time.monotonic() - started) * 1000

        self.stepper = stepper or Stepper()
        self.stepper.load(self.steps)

        self.metrics = self._compute_metrics(wall_ms)
        log.info("%s finished: %d steps in %.2f ms",
                 info.key, self.metrics.total_steps, self.metrics.wall_time_ms)
        return self.metrics

    def get_metrics(self) -> Optional[RunMetrics]:
        return self.metrics

    @property
    def algo_info(self) -> Optional[AlgoInfo]:
        return self._algo_info

    # ------------------------------------------------------------------
    # Export (serialisable snapshot)
    # ------------------------------------------------------------------
    def export(self) -> Dict[str, Any]:
        return {
            "algo_key": self._algo_info.key if self._algo_info else "",
            "params":   to_plain(self.params),
            "metrics":  asdict(self.metrics) if self.metrics else {},
            "steps":    [s.to_dict() for s in self.steps],
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _compute_metrics(self, wall_ms: float) -> RunMetrics:
        info = self._algo_info
        last = self.steps[-1] if self.steps else None

        # approximate memory: sizeof the steps buffer
        mem = sys.getsizeof(self.steps)
        for s in self.steps:
            mem += sys.getsizeof(s)

        return RunMetrics(
            algo_key=info.key,
            algo_label=info.label,
            category=info.category,
            total_steps=len(self.steps),
            wall_time_ms=round(wall_ms, 2),
            memory_bytes=mem,
            final_explanation=last.explanation if last else "",
        )
