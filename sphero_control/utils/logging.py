#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/utils/logging.py
------------------------------------------------
Lightweight logging helpers for `sphero_control`.

Purpose
-------
Let the controller log consistently whether it runs:
- inside a ROS-style node (node logger with info/warn/error), or
- in plain Python scripts, tuning tools and tests (stdlib logging)

Typical usage
-------------
from sphero_control.utils.logging import get_logger_adapter, format_kv

logger = get_logger_adapter()            # stdlib "sphero_control" logger
logger = get_logger_adapter(node)        # node.get_logger()
logger.info(format_kv(kp=0.3, ki=2e-5))
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Any

from ..constants import LOGGER_NAME


# =============================================================================
# Stdlib logger setup
# =============================================================================

def _ensure_std_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Return a configured stdlib logger (idempotent).

    A stream handler is only attached when neither this logger nor the root
    logger has one, so applications that configure logging keep control.
    """
    logger = logging.getLogger(name)
    if not logger.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = logging.Formatter(
            fmt="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(fmt)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    return logger


# =============================================================================
# Logger adapter (ROS-style logger or stdlib logger)
# =============================================================================

@dataclass
class LoggerAdapter:
    """
    Small adapter that hides whether the underlying logger is:
    - a stdlib logging.Logger instance, or
    - a ROS-style logger (rclpy node logger and similar)

    Methods match common ROS logger style:
      debug(), info(), warn(), error()
    """
    target: Any = None
    name: str = LOGGER_NAME

    def __post_init__(self) -> None:
        if self.target is None:
            self.target = _ensure_std_logger(self.name)

    @property
    def is_std_logger(self) -> bool:
        return isinstance(self.target, logging.Logger)

    def debug(self, msg: Any) -> None:
        self.target.debug(str(msg))

    def info(self, msg: Any) -> None:
        self.target.info(str(msg))

    def warn(self, msg: Any) -> None:
        # stdlib spells it warning(); ROS loggers spell it warn()
        if self.is_std_logger:
            self.target.warning(str(msg))
        else:
            self.target.warn(str(msg))


# =============================================================================
# Public helper constructors
# =============================================================================

def get_logger_adapter(source: Any = None, *, name: str = LOGGER_NAME) -> LoggerAdapter:
    """
    Create a LoggerAdapter from a source object.

    Supported sources
    -----------------
    - LoggerAdapter (returned as-is)
    - node-like object (`source.get_logger()`)
    - ROS-style logger or stdlib logging.Logger
    - None (stdlib logger named `name`)
    """
    if isinstance(source, LoggerAdapter):
        return source
    if source is None:
        return LoggerAdapter(target=_ensure_std_logger(name), name=name)
    if hasattr(source, "get_logger") and callable(source.get_logger):
        return LoggerAdapter(target=source.get_logger(), name=name)
    return LoggerAdapter(target=source, name=name)


def format_kv(**kwargs: Any) -> str:
    """
    Format key=value pairs into a compact stable string.

    Example:
      format_kv(kp=0.3, mode="NORMAL") -> "kp=0.3 mode=NORMAL"
    """
    return " ".join(f"{k}={v}" for k, v in kwargs.items())


__all__ = [
    "LoggerAdapter",
    "get_logger_adapter",
    "format_kv",
]
