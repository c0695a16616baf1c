# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/constants.py
--------------------------------------------
Centralized package-wide constants for `sphero_control`.

Purpose
-------
Keep the tuned default gains, the sampling-interval floor and the history
layout in one place so the controller, the parameter loader and the tests use
the same names and values.

Notes
-----
- This file is intentionally dependency-free.
- These are *code defaults* only. Callers override them through
  `XyPid.set_parameters(...)` or a parameter mapping.
"""

from __future__ import annotations

from typing import Final


# =============================================================================
# Package / Identity
# =============================================================================
PACKAGE_NAME: Final[str] = "sphero_control"
LOGGER_NAME: Final[str] = "sphero_control"


# =============================================================================
# Default gains (tuned on the rolling robot, error in cm, velocity in speed units)
# =============================================================================
DEFAULT_KP: Final[float] = 0.300086
DEFAULT_KI: Final[float] = 0.00002
DEFAULT_KD: Final[float] = 20.079
DEFAULT_KDD: Final[float] = 0.0

# Proportional gain value that selects MAX_EFFORT when the sentinel is enabled
KP_MAX_EFFORT_SENTINEL: Final[float] = -1.0
KP_SENTINEL_ENABLED_DEFAULT: Final[bool] = True


# =============================================================================
# Timing
# =============================================================================
# Floor applied to every sampling interval (ms). Two calls in the same clock
# tick, or a clock that steps backwards, still divide by this value.
MIN_DT_MS: Final[float] = 35.0

# Non-finite output warnings are throttled to one per period
NON_FINITE_WARN_PERIOD_MS: Final[float] = 1000.0


# =============================================================================
# Max-effort (bang-bang) override
# =============================================================================
MAX_EFFORT_SPEED: Final[float] = 20.0


# =============================================================================
# Error / time history layout
# =============================================================================
HISTORY_SIZE: Final[int] = 3
CUR: Final[int] = 0
PREV: Final[int] = 1


# =============================================================================
# Second-derivative term source
# =============================================================================
# "LEGACY_KD" keeps the field-proven formula where the second-derivative term
# is scaled by Kd. "KDD" scales it by Kdd instead.
SECOND_DERIVATIVE_SOURCE_DEFAULT: Final[str] = "LEGACY_KD"


__all__ = [
    "PACKAGE_NAME",
    "LOGGER_NAME",
    "DEFAULT_KP",
    "DEFAULT_KI",
    "DEFAULT_KD",
    "DEFAULT_KDD",
    "KP_MAX_EFFORT_SENTINEL",
    "KP_SENTINEL_ENABLED_DEFAULT",
    "MIN_DT_MS",
    "NON_FINITE_WARN_PERIOD_MS",
    "MAX_EFFORT_SPEED",
    "HISTORY_SIZE",
    "CUR",
    "PREV",
    "SECOND_DERIVATIVE_SOURCE_DEFAULT",
]
