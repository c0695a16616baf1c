#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control.controllers

The x/y PID controller and its error/time history.
"""

# Lock-step 3-sample error/time ring
from .error_history import ErrorHistory

# Two-axis PID controller
from .xy_pid import (
    XyPidConfig,
    XyPid,
    xy_pid_config_from_params,
)

# Optional alias for naming consistency with callers that say "PID"
PID = XyPid

__all__ = [
    "ErrorHistory",
    "XyPidConfig",
    "XyPid",
    "PID",
    "xy_pid_config_from_params",
]
