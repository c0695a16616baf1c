# -*- coding: utf-8 -*-
"""
Sphero Control — sphero_control/__init__.py
-------------------------------------------
Package root exports for `sphero_control`.

Typical usage
-------------
from sphero_control import XyPid

pid = XyPid()                                  # default tuned gains
vel = pid.process({"x": dx_cm, "y": dy_cm})    # once per control tick
pid.reset()                                    # new goal
"""

from __future__ import annotations

from .version import __version__, VERSION, get_version, get_package_version_info
from .constants import (
    DEFAULT_KP,
    DEFAULT_KI,
    DEFAULT_KD,
    DEFAULT_KDD,
    MIN_DT_MS,
    MAX_EFFORT_SPEED,
)
from .interfaces.control_modes import ControlMode, SecondDerivativeSource
from .models import Vec2, Vec2TypeError, AxisTerms, XyPidResult
from .controllers import ErrorHistory, XyPidConfig, XyPid, PID, xy_pid_config_from_params
from .utils.timing import ManualClock

__all__ = [
    # version
    "__version__",
    "VERSION",
    "get_version",
    "get_package_version_info",
    # defaults
    "DEFAULT_KP",
    "DEFAULT_KI",
    "DEFAULT_KD",
    "DEFAULT_KDD",
    "MIN_DT_MS",
    "MAX_EFFORT_SPEED",
    # modes
    "ControlMode",
    "SecondDerivativeSource",
    # models
    "Vec2",
    "Vec2TypeError",
    "AxisTerms",
    "XyPidResult",
    # controller
    "ErrorHistory",
    "XyPidConfig",
    "XyPid",
    "PID",
    "xy_pid_config_from_params",
    # testing / replay
    "ManualClock",
]
