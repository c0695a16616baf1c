#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/utils/param_loader.py
-----------------------------------------------------
Typed parameter reads from a plain mapping.

Why this exists
---------------
Controller gains usually arrive as loosely typed values: a YAML section, a
ROS parameter dump, a JSON blob from a tuning UI. This module turns those
into typed values with:
- string/float/bool parsing helpers
- safe fallback to the default on malformed values (never raises)
- optional numeric bounds
- a record of what was loaded, for logging and tests

Usage example
-------------
from sphero_control.utils.param_loader import ParamLoader

pl = ParamLoader({"kp": "0.5", "kp_sentinel_enabled": "off"}, component="xy_pid")
kp = pl.get_float("kp", default=0.300086)               # -> 0.5
sentinel = pl.get_bool("kp_sentinel_enabled", default=True)   # -> False
pl.log_loaded()
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .logging import LoggerAdapter, format_kv, get_logger_adapter


# =============================================================================
# Generic parsing helpers
# =============================================================================

_TRUE_TEXT = ("1", "true", "t", "yes", "y", "on")
_FALSE_TEXT = ("0", "false", "f", "no", "n", "off")


def _clamp_num(value: float, lo: Optional[float], hi: Optional[float]) -> float:
    if lo is not None and value < lo:
        value = lo
    if hi is not None and value > hi:
        value = hi
    return value


def _to_bool(value: Any, default: bool = False) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return bool(default)
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_TEXT:
        return True
    if text in _FALSE_TEXT:
        return False
    return bool(default)


def _to_float(value: Any, default: float = 0.0) -> float:
    if value is None:
        return float(default)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError:
        return float(default)


def _to_str(value: Any, default: str = "") -> str:
    if value is None:
        return str(default)
    return str(value)


# =============================================================================
# Structured records
# =============================================================================

@dataclass
class ParamRecord:
    """
    Stores final loaded parameter value and metadata for diagnostics/logging.
    """
    name: str
    declared_default: Any
    loaded_value: Any
    kind: str
    provided: bool = False
    clamped: bool = False
    parse_fallback_used: bool = False


@dataclass
class ParamLoadSummary:
    """
    Aggregate summary for logs / tests.
    """
    component: str = "sphero_control"
    records: Dict[str, ParamRecord] = field(default_factory=dict)

    def values_dict(self) -> Dict[str, Any]:
        return {k: v.loaded_value for k, v in self.records.items()}

    def fallbacks(self) -> Dict[str, Any]:
        """Names whose provided value could not be parsed, with the value used instead."""
        return {k: v.loaded_value for k, v in self.records.items() if v.parse_fallback_used}


# =============================================================================
# ParamLoader
# =============================================================================

class ParamLoader:
    """
    Typed reader over a caller-supplied parameter mapping.

    Notes
    -----
    - Missing keys return the default (not a fallback).
    - Malformed values return the default and are flagged in the summary.
    - Unknown keys in the mapping are ignored.
    """

    def __init__(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        component: str = "sphero_control",
        logger: Any = None,
    ) -> None:
        self.params: Mapping[str, Any] = params if params is not None else {}
        self.component = component
        self.logger: LoggerAdapter = get_logger_adapter(logger)
        self.summary = ParamLoadSummary(component=component)

    def has(self, name: str) -> bool:
        return name in self.params and self.params[name] is not None

    def _read_raw(self, name: str, default: Any) -> Any:
        if not self.has(name):
            return default
        return self.params[name]

    def _record(self, name: str, default: Any, value: Any, kind: str, **flags: bool) -> None:
        self.summary.records[name] = ParamRecord(
            name=name,
            declared_default=default,
            loaded_value=value,
            kind=kind,
            provided=self.has(name),
            **flags,
        )

    # -------------------------------------------------------------------------
    # Typed getters
    # -------------------------------------------------------------------------
    def get_bool(self, name: str, *, default: bool = False) -> bool:
        raw = self._read_raw(name, default)
        val = _to_bool(raw, default=default)
        fallback = not isinstance(raw, (bool, int, float)) and str(raw).strip().lower() not in (
            _TRUE_TEXT + _FALSE_TEXT
        )
        self._record(name, default, val, "bool", parse_fallback_used=fallback)
        return val

    def get_float(
        self,
        name: str,
        *,
        default: float = 0.0,
        lo: Optional[float] = None,
        hi: Optional[float] = None,
    ) -> float:
        raw = self._read_raw(name, default)
        val_before = _to_float(raw, default=default)
        val = float(_clamp_num(val_before, lo, hi))
        fallback = False
        if not isinstance(raw, (int, float)) or isinstance(raw, bool):
            try:
                float(str(raw).strip())
            except ValueError:
                fallback = True
        self._record(
            name,
            default,
            val,
            "float",
            clamped=(val != val_before),
            parse_fallback_used=fallback,
        )
        return val

    def get_str(self, name: str, *, default: str = "") -> str:
        raw = self._read_raw(name, default)
        val = _to_str(raw, default=default)
        self._record(name, default, val, "str")
        return val

    # -------------------------------------------------------------------------
    # Logging helpers
    # -------------------------------------------------------------------------
    def log_loaded(self) -> None:
        """Log one compact line with every loaded value, and warn about fallbacks."""
        self.logger.info(f"[{self.component}] params loaded {format_kv(**self.summary.values_dict())}")
        bad = self.summary.fallbacks()
        if bad:
            self.logger.warn(f"[{self.component}] malformed params replaced by defaults {format_kv(**bad)}")


__all__ = [
    "ParamRecord",
    "ParamLoadSummary",
    "ParamLoader",
]
