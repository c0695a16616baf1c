# -*- coding: utf-8 -*-
"""
Sphero Control — sphero_control.interfaces

Mode enums and parsing helpers shared by the controller and config loading.
"""

from .control_modes import (
    ControlMode,
    SecondDerivativeSource,
    normalize_mode_text,
    parse_control_mode,
    parse_second_derivative_source,
    mode_display_label,
)

__all__ = [
    "ControlMode",
    "SecondDerivativeSource",
    "normalize_mode_text",
    "parse_control_mode",
    "parse_second_derivative_source",
    "mode_display_label",
]
