# -*- coding: utf-8 -*-
"""
Sphero Control — sphero_control/models/__init__.py
--------------------------------------------------
Pure-Python data models for `sphero_control` (no I/O).

Example
-------
from sphero_control.models import Vec2, XyPidResult
"""

from __future__ import annotations

from .vec2 import Vec2, Vec2TypeError, sign
from .pid_result import AxisTerms, XyPidResult

__all__ = [
    "Vec2",
    "Vec2TypeError",
    "sign",
    "AxisTerms",
    "XyPidResult",
]
