#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/utils/timing.py
-----------------------------------------------
Millisecond timing helpers for the x/y controller.

Purpose
-------
- monotonic millisecond timestamps for sampling-interval (dt) calculations
- a manually stepped clock so tests and offline replays control dt exactly
- periodic gating for throttled warnings inside a fast control loop

Why monotonic
-------------
Wall-clock time can jump (NTP sync, manual clock changes), which would show
up as a huge or negative dt in the derivative and integral terms. Monotonic
time does not jump.
"""

from __future__ import annotations

import time
from typing import Callable, Optional


# Any zero-argument callable returning milliseconds can serve as a clock
MsClock = Callable[[], float]


# =============================================================================
# Core clock functions
# =============================================================================

def now_mono_ms() -> int:
    """
    Current monotonic time in whole milliseconds.

    Use for:
    - controller sample timestamps
    - dt calculations
    - throttling
    """
    return time.monotonic_ns() // 1_000_000


def elapsed_ms(since_ms: float, now_ms: Optional[float] = None) -> float:
    """
    Elapsed milliseconds since `since_ms`, clamped at 0.0.
    """
    if now_ms is None:
        now_ms = now_mono_ms()
    dt = float(now_ms) - float(since_ms)
    return dt if dt > 0.0 else 0.0


# =============================================================================
# Manual clock (tests / offline replay)
# =============================================================================

class ManualClock:
    """
    Callable clock whose time only moves when told to.

    Example
    -------
    >>> clock = ManualClock(start_ms=1000)
    >>> pid = XyPid(kp=1.0, ki=0.0, kd=0.0, clock=clock)
    >>> clock.advance(50)
    >>> pid.process({"x": 1.0, "y": 0.0})
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self._now_ms = float(start_ms)

    def __call__(self) -> float:
        return self._now_ms

    @property
    def now_ms(self) -> float:
        return self._now_ms

    def advance(self, delta_ms: float) -> float:
        """Move time forward (or backward, for jitter tests) and return the new time."""
        self._now_ms += float(delta_ms)
        return self._now_ms

    def set(self, now_ms: float) -> None:
        self._now_ms = float(now_ms)


# =============================================================================
# Periodic trigger helper (for loops / diagnostics)
# =============================================================================

class PeriodicTrigger:
    """
    Fire-at-most-once-per-period helper.

    Useful for:
    - throttled warnings (e.g. log every 1s)
    - low-rate diagnostics inside faster loops

    Example
    -------
    >>> trig = PeriodicTrigger(period_ms=1000.0, fire_immediately=True)
    >>> if trig.ready():
    ...     print("1 Hz message")
    """

    def __init__(
        self,
        period_ms: float,
        *,
        fire_immediately: bool = True,
        clock: Optional[MsClock] = None,
    ) -> None:
        p = float(period_ms)
        if p <= 0.0:
            raise ValueError("PeriodicTrigger period_ms must be > 0")
        self._period_ms = p
        self._clock: MsClock = clock if clock is not None else now_mono_ms
        self._last_fire_ms = 0.0
        self._initialized = False
        self._fire_immediately = bool(fire_immediately)

    @property
    def period_ms(self) -> float:
        return self._period_ms

    def reset(self) -> None:
        self._last_fire_ms = 0.0
        self._initialized = False

    def ready(self, *, now_ms: Optional[float] = None) -> bool:
        """
        Returns True if the period elapsed, and consumes the trigger.
        """
        if now_ms is None:
            now_ms = self._clock()

        if not self._initialized:
            self._initialized = True
            self._last_fire_ms = float(now_ms)
            return self._fire_immediately

        if elapsed_ms(self._last_fire_ms, now_ms) >= self._period_ms:
            self._last_fire_ms = float(now_ms)
            return True
        return False


__all__ = [
    "MsClock",
    "now_mono_ms",
    "elapsed_ms",
    "ManualClock",
    "PeriodicTrigger",
]
