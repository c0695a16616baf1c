#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control.interfaces.control_modes
========================================================

Purpose
-------
Lean control-mode contract for the x/y controller.

The controller has exactly two behaviors:
- NORMAL      full PID law (P + I + D + second-derivative term)
- MAX_EFFORT  bang-bang override, fixed speed in the sign direction of error

Historically MAX_EFFORT was selected by setting Kp to -1. That trigger is
still honored by `XyPid` when its sentinel option is enabled, but the mode is
an explicit field here so a tuned Kp of -1 can be used when the sentinel is
turned off.

This module also carries the choice of gain for the second-derivative term
(`SecondDerivativeSource`), and parsing helpers for both enums so config
mappings and tuning tools can use plain text.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


# =============================================================================
# Modes
# =============================================================================

class ControlMode(str, Enum):
    """
    Runtime behavior of the x/y controller.
    """
    NORMAL = "NORMAL"
    MAX_EFFORT = "MAX_EFFORT"


class SecondDerivativeSource(str, Enum):
    """
    Gain applied to the one-step-older finite difference.

    LEGACY_KD reproduces the field-tuned formula (Kd on both derivative
    terms, Kdd stored but unused). KDD applies Kdd to the second term.
    """
    LEGACY_KD = "LEGACY_KD"
    KDD = "KDD"


# =============================================================================
# Parsing aliases
# =============================================================================

_MODE_ALIASES = {
    # canonical
    "NORMAL": ControlMode.NORMAL,
    "MAX_EFFORT": ControlMode.MAX_EFFORT,

    # accepted aliases
    "PID": ControlMode.NORMAL,
    "DEFAULT": ControlMode.NORMAL,
    "BANG_BANG": ControlMode.MAX_EFFORT,
    "BANGBANG": ControlMode.MAX_EFFORT,
    "BYPASS": ControlMode.MAX_EFFORT,
    "MAX": ControlMode.MAX_EFFORT,
}

_SECOND_DERIVATIVE_ALIASES = {
    "LEGACY_KD": SecondDerivativeSource.LEGACY_KD,
    "LEGACY": SecondDerivativeSource.LEGACY_KD,
    "KD": SecondDerivativeSource.LEGACY_KD,
    "KDD": SecondDerivativeSource.KDD,
}


# =============================================================================
# Core helpers
# =============================================================================

def normalize_mode_text(value: object) -> str:
    """
    Normalize incoming text:
    - strip whitespace
    - uppercase
    - convert '-' and spaces to '_'
    """
    if value is None:
        return ""
    s = str(value).strip().upper()
    s = s.replace("-", "_").replace(" ", "_")
    return s


def parse_control_mode(
    value: object,
    default: Optional[ControlMode] = None,
) -> ControlMode:
    """
    Parse a mode string/object into ControlMode.

    Examples
    --------
    parse_control_mode("pid")        -> ControlMode.NORMAL
    parse_control_mode("bang-bang")  -> ControlMode.MAX_EFFORT

    Parameters
    ----------
    value:
        Input mode text or enum.
    default:
        If provided, returned when parsing fails. If None, ValueError is raised.
    """
    if isinstance(value, ControlMode):
        return value

    mode = _MODE_ALIASES.get(normalize_mode_text(value))
    if mode is not None:
        return mode

    if default is not None:
        return default

    valid = ", ".join(m.value for m in ControlMode)
    raise ValueError(f"Invalid control mode '{value}'. Valid modes: {valid}")


def parse_second_derivative_source(
    value: object,
    default: Optional[SecondDerivativeSource] = None,
) -> SecondDerivativeSource:
    """
    Parse text such as "kd", "legacy" or "kdd" into SecondDerivativeSource.
    """
    if isinstance(value, SecondDerivativeSource):
        return value

    source = _SECOND_DERIVATIVE_ALIASES.get(normalize_mode_text(value))
    if source is not None:
        return source

    if default is not None:
        return default

    valid = ", ".join(s.value for s in SecondDerivativeSource)
    raise ValueError(f"Invalid second-derivative source '{value}'. Valid values: {valid}")


def mode_display_label(mode: object) -> str:
    """
    Human-friendly stable label for tuning tools and logs.
    """
    m = parse_control_mode(mode, default=ControlMode.NORMAL)
    labels = {
        ControlMode.NORMAL: "NORMAL (PID)",
        ControlMode.MAX_EFFORT: "MAX_EFFORT (bang-bang override)",
    }
    return labels[m]


__all__ = [
    "ControlMode",
    "SecondDerivativeSource",
    "normalize_mode_text",
    "parse_control_mode",
    "parse_second_derivative_source",
    "mode_display_label",
]
