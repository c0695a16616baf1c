#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/models/pid_result.py
----------------------------------------------------
Debug/result bundle returned by `XyPid.update()`.

`XyPid.process()` only hands back the velocity. Tuning tools and tests use
this bundle to see each term per axis and the sampling intervals that were
applied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from ..interfaces.control_modes import ControlMode
from .vec2 import Vec2


@dataclass
class AxisTerms:
    # Terms (already multiplied by their gains)
    p: float = 0.0
    i: float = 0.0
    d: float = 0.0
    dd: float = 0.0

    # p + i + d + dd
    total: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"p": self.p, "i": self.i, "d": self.d, "dd": self.dd, "total": self.total}


@dataclass
class XyPidResult:
    # Final command
    velocity: Vec2 = field(default_factory=Vec2)

    # Input echo
    error: Vec2 = field(default_factory=Vec2)

    # Term breakdown
    x: AxisTerms = field(default_factory=AxisTerms)
    y: AxisTerms = field(default_factory=AxisTerms)

    # Internal state after the update
    error_sum: Vec2 = field(default_factory=Vec2)
    dt_cur_ms: float = 0.0
    dt_prev_ms: float = 0.0

    # Flags
    mode: ControlMode = ControlMode.NORMAL
    bypassed: bool = False
    finite: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "velocity": self.velocity.to_dict(),
            "error": self.error.to_dict(),
            "x": self.x.to_dict(),
            "y": self.y.to_dict(),
            "error_sum": self.error_sum.to_dict(),
            "dt_cur_ms": self.dt_cur_ms,
            "dt_prev_ms": self.dt_prev_ms,
            "mode": self.mode.value,
            "bypassed": self.bypassed,
            "finite": self.finite,
        }


__all__ = [
    "AxisTerms",
    "XyPidResult",
]
