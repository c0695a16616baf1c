#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control.controllers.error_history
=========================================================

Purpose
-------
Fixed-capacity, lock-step history of error samples and their timestamps for
the x/y controller.

Layout
------
Both rings live in preallocated slots indexed by one rotating head, so an
error and its timestamp can never drift apart and a push allocates no new
list structure. Indices are most-recent-first:

    k = 0  current sample  (CUR)
    k = 1  previous sample (PREV)
    k = 2  only used to form the finite difference at PREV
"""

from __future__ import annotations

from typing import List, Tuple

from ..constants import HISTORY_SIZE
from ..models.vec2 import Vec2


class ErrorHistory:
    """
    Lock-step ring of (timestamp_ms, error) samples.
    """

    def __init__(self, now_ms: float = 0.0, capacity: int = HISTORY_SIZE) -> None:
        cap = int(capacity)
        if cap < 2:
            raise ValueError("ErrorHistory capacity must be >= 2")
        self._capacity = cap
        self._errors: List[Vec2] = [Vec2.zero() for _ in range(cap)]
        self._times: List[float] = [0.0] * cap
        self._head = 0
        self.reset(now_ms)

    # -------------------------------------------------------------------------
    # State management
    # -------------------------------------------------------------------------
    def reset(self, now_ms: float) -> None:
        """Zero every error slot and stamp every time slot with `now_ms`."""
        for i in range(self._capacity):
            self._errors[i].x = 0.0
            self._errors[i].y = 0.0
            self._times[i] = float(now_ms)
        self._head = 0

    def push(self, time_ms: float, error: Vec2) -> None:
        """
        Make (time_ms, error) the current sample, dropping the oldest one.
        """
        self._head = (self._head - 1) % self._capacity
        slot = self._errors[self._head]
        slot.x = float(error.x)
        slot.y = float(error.y)
        self._times[self._head] = float(time_ms)

    # -------------------------------------------------------------------------
    # Indexed access (k = 0 is most recent)
    # -------------------------------------------------------------------------
    def _slot(self, k: int) -> int:
        if not 0 <= k < self._capacity:
            raise IndexError(f"history index {k} out of range [0, {self._capacity})")
        return (self._head + k) % self._capacity

    def error_at(self, k: int) -> Vec2:
        return self._errors[self._slot(k)].copy()

    def time_at(self, k: int) -> float:
        return self._times[self._slot(k)]

    def dt_ms(self, k: int, floor_ms: float) -> float:
        """
        Interval between sample k and the one before it, floored at `floor_ms`.
        """
        return max(float(floor_ms), self.time_at(k) - self.time_at(k + 1))

    def de(self, k: int) -> Vec2:
        """
        Finite difference error[k] - error[k + 1].
        """
        a = self._errors[self._slot(k)]
        b = self._errors[self._slot(k + 1)]
        return Vec2(a.x - b.x, a.y - b.y)

    # -------------------------------------------------------------------------
    # Snapshots
    # -------------------------------------------------------------------------
    def errors(self) -> Tuple[Vec2, ...]:
        return tuple(self.error_at(k) for k in range(self._capacity))

    def times(self) -> Tuple[float, ...]:
        return tuple(self.time_at(k) for k in range(self._capacity))

    def __len__(self) -> int:
        return self._capacity


__all__ = ["ErrorHistory"]
