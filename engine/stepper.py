"""
stepper.py — Step-by-Step Playback Engine
==========================================
The Stepper is the ONLY object the web layer drives during playback.
It holds a finished trace (a list of Steps) and an index cursor, and
exposes a play/pause/next/prev/speed API over it.

State machine:
    IDLE     →  load(steps)      →  PAUSED
    PAUSED   →  play()           →  PLAYING
    PLAYING  →  pause()          →  PAUSED
    PLAYING  →  (last step shown) → FINISHED
    FINISHED →  play()           →  rewinds to step 0, PLAYING
    any      →  clear()          →  IDLE

Timing:
  There is no background thread.  Callers invoke tick() whenever they
  like (a poll request, a timer); tick() advances one step for every
  full interval elapsed since the previous advance.  The clock is
  injectable so tests control time exactly.

Thread safety:
  This class is NOT thread-safe.  The web layer keeps one Stepper per
  stored run and touches it from one request at a time.
"""

import time
from enum import Enum
from typing import Callable, List, Optional

import config
from algorithms.step import Step


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class StepperState(Enum):
    IDLE     = "idle"
    PAUSED   = "paused"
    PLAYING  = "playing"
    FINISHED = "finished"


# ---------------------------------------------------------------------------
# Speed presets (milliseconds per step)
# ---------------------------------------------------------------------------
SPEED_PRESETS = {
    "slow":   1500,   # teaching mode
    "medium": 900,
    "fast":   300,    # demo mode
    "turbo":  120,
}

MIN_INTERVAL_MS = 20


# ---------------------------------------------------------------------------
# Stepper
# ---------------------------------------------------------------------------
class Stepper:
    """
    Attributes:
        state       : Current StepperState.
        steps       : The loaded trace.
        current_idx : Index into `steps` that is currently displayed (-1 when empty).
        interval_ms : Milliseconds between auto-advance ticks.
        on_step     : Optional callback(Step) fired every time the cursor moves.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[Step], None]] = None,
        interval_ms: Optional[int] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.steps:       List[Step]   = []
        self.current_idx: int          = -1
        self.state:       StepperState = StepperState.IDLE
        self.interval_ms: int          = config.PLAYBACK_INTERVAL_MS
        self.on_step:     Optional[Callable[[Step], None]] = on_step

        self._clock     = clock
        self._last_tick = 0.0

        if interval_ms is not None:
            self.set_interval_ms(interval_ms)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, steps: List[Step]) -> None:
        """Attach a trace and show its first step (paused)."""
        self.steps = list(steps)
        if not self.steps:
            self.clear()
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def reset(self) -> None:
        """Stop playback and return to step 0, keeping the trace."""
        if not self.steps:
            return
        self.state = StepperState.PAUSED
        self._goto(0)

    def clear(self) -> None:
        """Drop the trace entirely.  Back to IDLE."""
        self.steps       = []
        self.current_idx = -1
        self.state       = StepperState.IDLE

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def next_step(self) -> bool:
        """Advance one step forward.  Returns False if already at end."""
        if not self.steps or self.at_end:
            return False
        self._goto(self.current_idx + 1)
        if self.at_end:
            self.state = StepperState.FINISHED
        return True

    def prev_step(self) -> bool:
        """Rewind one step.  Returns False if already at start."""
        if self.current_idx <= 0:
            return False
        self._goto(self.current_idx - 1)
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def goto_step(self, idx: int) -> bool:
        """Jump to an arbitrary step index.  False if out of range."""
        if not 0 <= idx < len(self.steps):
            return False
        self._goto(idx)
        if self.at_end:
            self.state = StepperState.FINISHED
        elif self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        return True

    def rewind(self) -> None:
        """Jump back to step 0 without changing play state."""
        if not self.steps:
            return
        if self.state == StepperState.FINISHED:
            self.state = StepperState.PAUSED
        self._goto(0)

    def jump_to_end(self) -> None:
        """Jump to the final step."""
        if not self.steps:
            return
        self._goto(len(self.steps) - 1)
        self.state = StepperState.FINISHED

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if not self.steps:
            return
        if self.at_end:
            self._goto(0)
        if self.at_end:
            # a one-step trace has nothing to play
            self.state = StepperState.FINISHED
            return
        self.state      = StepperState.PLAYING
        self._last_tick = self._clock()

    def pause(self) -> None:
        if self.state == StepperState.PLAYING:
            self.state = StepperState.PAUSED

    def toggle_play(self) -> None:
        if self.state == StepperState.PLAYING:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from a poll handler / timer)
    # ------------------------------------------------------------------
    def tick(self, now: Optional[float] = None) -> int:
        """
        If playing, advance one step per full interval elapsed since the
        last advance.  Playback stops on the last step.  Returns the
        number of steps taken.
        """
        if self.state != StepperState.PLAYING:
            return 0
        if now is None:
            now = self._clock()

        # the epsilon absorbs float rounding in clock arithmetic
        elapsed_ms = (now - self._last_tick) * 1000.0
        due = int((elapsed_ms + 1e-6) // self.interval_ms)
        if due <= 0:
            return 0
        self._last_tick += due * self.interval_ms / 1000.0

        taken = 0
        while taken < due and self.next_step():
            taken += 1
        return taken

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, preset: str) -> None:
        if not isinstance(preset, str) or preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset '{preset}'. Choose from {', '.join(SPEED_PRESETS)}")
        self.set_interval_ms(SPEED_PRESETS[preset])

    def set_interval_ms(self, ms: int) -> None:
        self.interval_ms = max(MIN_INTERVAL_MS, int(ms))

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def current_step(self) -> Optional[Step]:
        if 0 <= self.current_idx < len(self.steps):
            return self.steps[self.current_idx]
        return None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def at_end(self) -> bool:
        return bool(self.steps) and self.current_idx == len(self.steps) - 1

    @property
    def is_finished(self) -> bool:
        return self.state == StepperState.FINISHED

    @property
    def is_playing(self) -> bool:
        return self.state == StepperState.PLAYING

    def to_dict(self) -> dict:
        step = self.current_step
        return {
            "state":         self.state.value,
            "current_index": self.current_idx,
            "total_steps":   self.total_steps,
            "interval_ms":   self.interval_ms,
            "step":          step.to_dict() if step else None,
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _goto(self, idx: int) -> None:
        self.current_idx = idx
        self._notify(self.steps[idx] if 0 <= idx < len(self.steps) else None)

    def _notify(self, step: Optional[Step]) -> None:
        if self.on_step and step is not None:
            self.on_step(step)
