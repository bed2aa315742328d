"""
step.py — Algorithm Step Snapshot
==================================
Every tracer returns an ordered list of Step objects (a *trace*).
A Step is a frozen-in-time picture of everything a renderer needs to
draw one frame, plus a plain-English explanation of *why* this step
happened.

Design decisions:
  - Step is a frozen dataclass.  Each algorithm family subclasses it
    with its own state fields (sieve array, DP table, visited edges, …),
    so a trace is a list of one tagged variant; `kind` names the tag.
  - Tracers hand in *copies* of their working state.  A step never
    aliases a list the tracer keeps mutating.
  - TraceBuilder is the only writer of step numbers and the `is_final`
    flag, so individual tracers never count.
"""

import math
from dataclasses import dataclass, fields, is_dataclass, replace
from typing import Any, ClassVar, List, Optional


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number : 0-based index of this step in the trace.
        explanation : Human-readable "why" text.
        is_final    : True on the very last step of the trace.
    """

    kind: ClassVar[str] = "step"

    step_number: int  = 0
    explanation: str  = ""
    is_final:    bool = False

    def to_dict(self) -> dict:
        """JSON-safe dict: infinities become None, edges use from/to."""
        data = {"kind": self.kind}
        for f in fields(self):
            data[f.name] = to_plain(getattr(self, f.name))
        return data


def to_plain(value: Any) -> Any:
    """Recursively convert step payloads into JSON-serialisable data."""
    if hasattr(value, "to_dict") and not isinstance(value, type):
        return value.to_dict()
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_plain(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, float) and (math.isinf(value) or math.isnan(value)):
        return None
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_plain(v) for v in value]
    return value


# ---------------------------------------------------------------------------
# Trace collector
# ---------------------------------------------------------------------------
class TraceBuilder:
    """
    Collects steps for one run.

    Usage inside a tracer:
        trace = TraceBuilder()
        trace.add(GCDStep(a=48, b=18, explanation="…"))
        return trace.build()
    """

    def __init__(self):
        self._steps: List[Step] = []

    def add(self, step: Step) -> Step:
        numbered = replace(step, step_number=len(self._steps))
        self._steps.append(numbered)
        return numbered

    @property
    def last(self) -> Optional[Step]:
        return self._steps[-1] if self._steps else None

    def amend_last(self, **changes) -> None:
        """Attach closing data (a result, a summary clause) to the latest step."""
        if self._steps:
            self._steps[-1] = replace(self._steps[-1], **changes)

    def __len__(self) -> int:
        return len(self._steps)

    def build(self) -> List[Step]:
        if self._steps:
            self._steps[-1] = replace(self._steps[-1], is_final=True)
        return list(self._steps)
