# -*- coding: utf-8 -*-
"""
Sphero Control — sphero_control/utils/__init__.py
-------------------------------------------------
Shared helpers: millisecond clocks, logging adapter, parameter loading.
"""

from __future__ import annotations

from .timing import (
    MsClock,
    now_mono_ms,
    elapsed_ms,
    ManualClock,
    PeriodicTrigger,
)
from .logging import (
    LoggerAdapter,
    get_logger_adapter,
    format_kv,
)
from .param_loader import (
    ParamRecord,
    ParamLoadSummary,
    ParamLoader,
)

__all__ = [
    # timing
    "MsClock",
    "now_mono_ms",
    "elapsed_ms",
    "ManualClock",
    "PeriodicTrigger",
    # logging
    "LoggerAdapter",
    "get_logger_adapter",
    "format_kv",
    # params
    "ParamRecord",
    "ParamLoadSummary",
    "ParamLoader",
]
