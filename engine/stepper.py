"""
stepper.py — Playback Cursor
=============================
The cursor is the ONLY object the UI moves during playback.  It owns one
integer position into a finished StepLog and the play / pause / speed
flags that advance it.  It never runs an algorithm and never folds
state; the host asks a reconstructor for the snapshot at `position`.

State machine:
    IDLE (-1)  →  step_forward / seek  →  AT_STEP(i)
    AT_STEP(i) →  step_forward         →  AT_STEP(i + 1)
    AT_STEP(last)                      ==  FINISHED   (play disabled)
    any        →  load(new log)        →  IDLE, auto-play stopped

Auto-advance:
  Cooperative, single-threaded.  While playing, the cursor holds one
  deadline (the scoped timer).  The host calls tick() from its event
  loop; when the deadline has passed, tick() steps forward once and
  re-arms.  Pausing, loading a new log, reaching the end and close()
  all cancel the deadline, so a stale timer can never advance a cursor
  over a log it no longer belongs to.

Thread safety:
  This class is NOT thread-safe.  Drive it from a single thread.
"""

import logging
import math
import time
from enum import Enum
from typing import Callable, Optional

from algorithms.step import StepEvent
from config import BASE_DELAY, MIN_DELAY, SPEED_PRESETS
from engine.recorder import StepLog

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class CursorState(Enum):
    IDLE     = "idle"       # before step 0
    AT_STEP  = "at_step"
    FINISHED = "finished"   # at the last step


def delay_for(speed: float) -> float:
    """Seconds between auto-advance ticks at a given speed multiplier."""
    return max(MIN_DELAY, BASE_DELAY / speed)


# ---------------------------------------------------------------------------
# PlaybackCursor
# ---------------------------------------------------------------------------
class PlaybackCursor:
    """
    Attributes:
        log        : The StepLog being replayed (None until load()).
        position   : -1 before any step, else index of the step shown.
        speed      : Speed multiplier (1.0 = BASE_DELAY per step).
        is_playing : Auto-advance flag.
        on_step    : Optional callback(position) fired every time the
                     position changes.  The host hooks its re-render here.
    """

    def __init__(
        self,
        on_step: Optional[Callable[[int], None]] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.log:        Optional[StepLog] = None
        self.position:   int               = -1
        self.speed:      float             = 1.0
        self.is_playing: bool              = False
        self.on_step:    Optional[Callable[[int], None]] = on_step

        self._clock = clock
        self._deadline: Optional[float] = None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def load(self, log: StepLog) -> None:
        """Attach a fresh log; always back to IDLE with auto-play stopped."""
        self._cancel_timer()
        self.is_playing = False
        self.log = log
        self._goto(-1)
        logger.debug("cursor loaded %s (%d steps)", log.algo_key, len(log))

    def close(self) -> None:
        """Host teardown: stop the timer and drop the log."""
        self._cancel_timer()
        self.is_playing = False
        self.log = None
        self.position = -1

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def step_forward(self) -> bool:
        """Advance one step.  At the last step this is a no-op that also stops auto-play."""
        if self.position >= self.last_index:
            if self.is_playing:
                self.pause()
            return False
        self._goto(self.position + 1)
        return True

    def step_backward(self) -> bool:
        """Rewind one step.  Returns False if already before step 0."""
        if self.position <= -1:
            return False
        self._goto(self.position - 1)
        return True

    def seek(self, idx: int) -> int:
        """Jump anywhere; out-of-range targets are clamped to [-1, last]."""
        clamped = max(-1, min(int(idx), self.last_index))
        self._goto(clamped)
        return clamped

    def jump_to_end(self) -> None:
        self._goto(self.last_index)

    # ------------------------------------------------------------------
    # Play / Pause
    # ------------------------------------------------------------------
    def play(self) -> None:
        if self.log is None or self.position >= self.last_index:
            return
        self.is_playing = True
        self._arm_timer()

    def pause(self) -> None:
        self.is_playing = False
        self._cancel_timer()

    def toggle_play(self) -> None:
        if self.is_playing:
            self.pause()
        else:
            self.play()

    # ------------------------------------------------------------------
    # Tick  (call this from your event loop / timer)
    # ------------------------------------------------------------------
    def tick(self) -> bool:
        """
        Call periodically (e.g. every 20 ms).  If playing and the deadline
        has passed, advances one step.  Returns True if a step was taken.
        """
        if not self.is_playing or self._deadline is None:
            return False
        if self._clock() < self._deadline:
            return False
        moved = self.step_forward()
        if self.is_playing:
            self._arm_timer()
        return moved

    # ------------------------------------------------------------------
    # Speed
    # ------------------------------------------------------------------
    def set_speed(self, multiplier: float) -> None:
        if (isinstance(multiplier, bool) or not isinstance(multiplier, (int, float))
                or not math.isfinite(multiplier) or multiplier <= 0):
            raise ValueError(f"Speed must be a positive number, got {multiplier!r}")
        self.speed = float(multiplier)
        if self.is_playing:
            self._arm_timer()

    def set_speed_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed preset: {preset}")
        self.set_speed(SPEED_PRESETS[preset])

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def delay(self) -> float:
        return delay_for(self.speed)

    @property
    def last_index(self) -> int:
        return len(self.log) - 1 if self.log is not None else -1

    @property
    def state(self) -> CursorState:
        if self.position < 0:
            return CursorState.IDLE
        if self.position >= self.last_index:
            return CursorState.FINISHED
        return CursorState.AT_STEP

    @property
    def current_event(self) -> Optional[StepEvent]:
        if self.log is not None and 0 <= self.position < len(self.log):
            return self.log[self.position]
        return None

    @property
    def timer_armed(self) -> bool:
        return self._deadline is not None

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _arm_timer(self) -> None:
        self._deadline = self._clock() + self.delay

    def _cancel_timer(self) -> None:
        self._deadline = None

    def _goto(self, idx: int) -> None:
        self.position = idx
        if self.on_step:
            self.on_step(idx)
