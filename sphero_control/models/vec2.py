#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control/models/vec2.py
----------------------------------------------
Planar x/y value type shared by the controller input (positional error) and
output (velocity command).

Scope
- Pure Python data model (no I/O)
- Accepts the shapes callers typically hold: `{"x": .., "y": ..}` dicts,
  message-like objects with `.x`/`.y`, and `(x, y)` pairs
- Non-finite components are carried through unchanged; filtering NaN/inf
  before actuation is the caller's job
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Dict
import math


# =============================================================================
# Exceptions
# =============================================================================
class Vec2TypeError(TypeError):
    """Raised when a value cannot be interpreted as an x/y pair."""
    pass


# =============================================================================
# Helpers
# =============================================================================
def sign(value: float) -> float:
    """
    Sign of `value` as a float: -1.0, 0.0 or +1.0.

    NaN maps to NaN so a bad input stays visible downstream.
    """
    v = float(value)
    if math.isnan(v):
        return math.nan
    if v > 0.0:
        return 1.0
    if v < 0.0:
        return -1.0
    return 0.0


def _to_component(value: Any) -> float:
    """
    float(value), saturating to +/-inf for integers too large for a float.
    """
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


# =============================================================================
# Vec2
# =============================================================================
@dataclass
class Vec2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def zero(cls) -> "Vec2":
        return cls(0.0, 0.0)

    @classmethod
    def coerce(cls, value: Any) -> "Vec2":
        """
        Build a new Vec2 from a vector-like value.

        Supported
        ---------
        - Vec2 (copied)
        - Mapping with "x" and "y" keys
        - object exposing `.x` and `.y` (e.g. geometry_msgs Vector3)
        - sequence of exactly two numbers
        """
        if isinstance(value, Vec2):
            return value.copy()

        try:
            if isinstance(value, Mapping):
                return cls(_to_component(value["x"]), _to_component(value["y"]))
            if hasattr(value, "x") and hasattr(value, "y"):
                return cls(_to_component(value.x), _to_component(value.y))
            if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
                if len(value) != 2:
                    raise Vec2TypeError(f"expected 2 components, got {len(value)}")
                return cls(_to_component(value[0]), _to_component(value[1]))
        except (KeyError, TypeError, ValueError) as e:
            raise Vec2TypeError(f"cannot interpret {value!r} as an x/y vector") from e

        raise Vec2TypeError(f"cannot interpret {type(value).__name__} as an x/y vector")

    def copy(self) -> "Vec2":
        return Vec2(float(self.x), float(self.y))

    def swapped(self) -> "Vec2":
        return Vec2(self.y, self.x)

    def scaled(self, k: float) -> "Vec2":
        return Vec2(self.x * k, self.y * k)

    def sign(self) -> "Vec2":
        return Vec2(sign(self.x), sign(self.y))

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}


__all__ = [
    "Vec2TypeError",
    "sign",
    "Vec2",
]
