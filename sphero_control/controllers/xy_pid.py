#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Sphero Control — sphero_control.controllers.xy_pid
==================================================

Purpose
-------
Two-axis PID controller that turns the robot's positional error (signed
distance to the target along x and y) into a velocity command along x and y.

Control law (per axis, x shown)
-------------------------------
    vel.x = Kp * err[CUR].x
          + Ki * errSum.x
          + Kd * de(CUR).x  / dt(CUR)
          + K2 * de(PREV).x / dt(PREV)

    de(t) = err[t] - err[t + 1]
    dt(t) = max(MIN_DT_MS, time[t] - time[t + 1])     (milliseconds)
    errSum.x += dt(CUR) * err[CUR].x                   (after each push)

K2 is Kd in the legacy formula the default gains were tuned with, and Kdd
when `second_derivative_source` is KDD.

Modes
-----
- NORMAL      the law above
- MAX_EFFORT  `MAX_EFFORT_SPEED * sign(error)` per axis, history untouched

MAX_EFFORT is selected explicitly through `set_mode()`, or by Kp == -1 while
`kp_sentinel_enabled` is True (the default).

Caller responsibilities
-----------------------
- call `process()` once per control tick, in chronological order
- call `reset()` when pursuit of a new goal starts
- filter non-finite commands before actuation
- one XyPid per control loop (not thread-safe)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple

from ..constants import (
    CUR,
    DEFAULT_KD,
    DEFAULT_KDD,
    DEFAULT_KI,
    DEFAULT_KP,
    KP_MAX_EFFORT_SENTINEL,
    KP_SENTINEL_ENABLED_DEFAULT,
    MAX_EFFORT_SPEED,
    MIN_DT_MS,
    NON_FINITE_WARN_PERIOD_MS,
    PREV,
    SECOND_DERIVATIVE_SOURCE_DEFAULT,
)
from ..interfaces.control_modes import (
    ControlMode,
    SecondDerivativeSource,
    mode_display_label,
    parse_control_mode,
    parse_second_derivative_source,
)
from ..models.pid_result import AxisTerms, XyPidResult
from ..models.vec2 import Vec2
from ..utils.logging import format_kv, get_logger_adapter
from ..utils.param_loader import ParamLoader
from ..utils.timing import MsClock, PeriodicTrigger, now_mono_ms
from .error_history import ErrorHistory


# =============================================================================
# Config
# =============================================================================

@dataclass
class XyPidConfig:
    # Gains
    kp: float = DEFAULT_KP
    ki: float = DEFAULT_KI
    kd: float = DEFAULT_KD
    kdd: float = DEFAULT_KDD

    # Explicit mode; MAX_EFFORT ignores every gain
    mode: ControlMode = ControlMode.NORMAL

    # Kp == -1 also selects MAX_EFFORT while this is True
    kp_sentinel_enabled: bool = KP_SENTINEL_ENABLED_DEFAULT

    # Gain for the one-step-older derivative term
    second_derivative_source: SecondDerivativeSource = SecondDerivativeSource(
        SECOND_DERIVATIVE_SOURCE_DEFAULT
    )

    # Sampling-interval floor (ms)
    min_dt_ms: float = MIN_DT_MS

    # Per-axis magnitude commanded in MAX_EFFORT
    max_effort_speed: float = MAX_EFFORT_SPEED

    def gains(self) -> Tuple[float, float, float, float]:
        return (self.kp, self.ki, self.kd, self.kdd)


def xy_pid_config_from_params(
    params: Optional[Mapping[str, Any]],
    *,
    component: str = "xy_pid",
    logger: Any = None,
) -> XyPidConfig:
    """
    Build an XyPidConfig from a loosely typed parameter mapping.

    Recognized keys: kp, ki, kd, kdd, mode, kp_sentinel_enabled,
    second_derivative_source, min_dt_ms, max_effort_speed. Missing or
    malformed values fall back to the package defaults.
    """
    pl = ParamLoader(params, component=component, logger=logger)

    mode_text = pl.get_str("mode", default=ControlMode.NORMAL.value)
    try:
        mode = parse_control_mode(mode_text)
    except ValueError:
        pl.logger.warn(f"[{component}] unknown mode {mode_text!r}, using {ControlMode.NORMAL.value}")
        mode = ControlMode.NORMAL

    source_text = pl.get_str("second_derivative_source", default=SECOND_DERIVATIVE_SOURCE_DEFAULT)
    try:
        source = parse_second_derivative_source(source_text)
    except ValueError:
        pl.logger.warn(
            f"[{component}] unknown second_derivative_source {source_text!r}, "
            f"using {SECOND_DERIVATIVE_SOURCE_DEFAULT}"
        )
        source = SecondDerivativeSource(SECOND_DERIVATIVE_SOURCE_DEFAULT)

    cfg = XyPidConfig(
        kp=pl.get_float("kp", default=DEFAULT_KP),
        ki=pl.get_float("ki", default=DEFAULT_KI),
        kd=pl.get_float("kd", default=DEFAULT_KD),
        kdd=pl.get_float("kdd", default=DEFAULT_KDD),
        mode=mode,
        kp_sentinel_enabled=pl.get_bool("kp_sentinel_enabled", default=KP_SENTINEL_ENABLED_DEFAULT),
        second_derivative_source=source,
        # 1 ms is the clock resolution; a zero floor would divide by zero
        min_dt_ms=pl.get_float("min_dt_ms", default=MIN_DT_MS, lo=1.0),
        max_effort_speed=pl.get_float("max_effort_speed", default=MAX_EFFORT_SPEED),
    )
    pl.log_loaded()
    return cfg


# =============================================================================
# Two-axis PID controller
# =============================================================================

class XyPid:
    """
    Two-axis PID controller with a 3-sample error/time history.

    Gains passed to the constructor are applied through `set_parameters()`.
    When `config` is given its gains and options are used instead.
    `clock` is any zero-argument callable returning milliseconds.
    """

    def __init__(
        self,
        kp: float = DEFAULT_KP,
        ki: float = DEFAULT_KI,
        kd: float = DEFAULT_KD,
        kdd: float = DEFAULT_KDD,
        *,
        config: Optional[XyPidConfig] = None,
        clock: Optional[MsClock] = None,
        logger: Any = None,
    ) -> None:
        self._clock: MsClock = clock if clock is not None else now_mono_ms
        self._logger = get_logger_adapter(logger)
        self._warn_trigger = PeriodicTrigger(NON_FINITE_WARN_PERIOD_MS, clock=self._clock)

        self._config = config if config is not None else XyPidConfig()
        self._normalize_config()

        self._history = ErrorHistory(self._clock())
        self._error_sum = Vec2.zero()

        if config is None:
            self.set_parameters(kp, ki, kd, kdd)
        else:
            self.set_parameters(*config.gains())

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------
    def set_parameters(
        self,
        kp: float = DEFAULT_KP,
        ki: float = DEFAULT_KI,
        kd: float = DEFAULT_KD,
        kdd: float = DEFAULT_KDD,
    ) -> None:
        """
        Reset all history, then store the four gains (no validation).
        """
        self.reset()
        self._config.kp = kp
        self._config.ki = ki
        self._config.kd = kd
        self._config.kdd = kdd
        self._logger.info(
            "xy_pid parameters "
            + format_kv(kp=kp, ki=ki, kd=kd, kdd=kdd, mode=self.effective_mode().value)
        )

    @property
    def config(self) -> XyPidConfig:
        return self._config

    def gains(self) -> Tuple[float, float, float, float]:
        return self._config.gains()

    @property
    def mode(self) -> ControlMode:
        return self._config.mode

    def set_mode(self, mode: Any) -> None:
        """
        Select NORMAL or MAX_EFFORT explicitly. Accepts enum or text aliases.
        History is kept.
        """
        new_mode = parse_control_mode(mode)
        if new_mode is not self._config.mode:
            self._logger.info(
                f"xy_pid mode {mode_display_label(self._config.mode)} -> {mode_display_label(new_mode)}"
            )
        self._config.mode = new_mode

    def set_second_derivative_source(self, source: Any) -> None:
        self._config.second_derivative_source = parse_second_derivative_source(source)

    def effective_mode(self) -> ControlMode:
        c = self._config
        if c.mode is ControlMode.MAX_EFFORT:
            return ControlMode.MAX_EFFORT
        if c.kp_sentinel_enabled and c.kp == KP_MAX_EFFORT_SENTINEL:
            return ControlMode.MAX_EFFORT
        return ControlMode.NORMAL

    # -------------------------------------------------------------------------
    # State management
    # -------------------------------------------------------------------------
    def reset(self) -> None:
        """
        Zero the error history and integral, and stamp the time history with now.
        Gains are untouched.
        """
        self._history.reset(self._clock())
        self._error_sum = Vec2.zero()
        self._logger.debug("xy_pid history reset")

    def error_sum(self) -> Vec2:
        return self._error_sum.copy()

    def error_history(self) -> Tuple[Vec2, ...]:
        return self._history.errors()

    def time_history(self) -> Tuple[float, ...]:
        return self._history.times()

    # -------------------------------------------------------------------------
    # Control tick
    # -------------------------------------------------------------------------
    def process(self, error: Any) -> Vec2:
        """
        Velocity command for the latest positional error `{x, y}`.
        """
        return self.update(error).velocity

    def update(self, error: Any) -> XyPidResult:
        """
        Same as `process()`, returning the full per-axis term breakdown.
        """
        e = Vec2.coerce(error)
        mode = self.effective_mode()

        if mode is ControlMode.MAX_EFFORT:
            r = XyPidResult(
                velocity=e.sign().scaled(self._config.max_effort_speed),
                error=e,
                error_sum=self._error_sum.copy(),
                mode=mode,
                bypassed=True,
            )
            return self._finish(r)

        self._unshift_error(e)

        dt_cur = self._dt(CUR)
        dt_prev = self._dt(PREV)
        de_cur = self._history.de(CUR)
        de_prev = self._history.de(PREV)
        cur = self._history.error_at(CUR)

        r = XyPidResult(
            error=e,
            error_sum=self._error_sum.copy(),
            dt_cur_ms=dt_cur,
            dt_prev_ms=dt_prev,
            mode=mode,
        )
        r.x = self._axis_terms(cur.x, self._error_sum.x, de_cur.x, de_prev.x, dt_cur, dt_prev)
        r.y = self._axis_terms(cur.y, self._error_sum.y, de_cur.y, de_prev.y, dt_cur, dt_prev)
        r.velocity = Vec2(r.x.total, r.y.total)
        return self._finish(r)

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------
    def _unshift_error(self, e: Vec2) -> None:
        # Integral uses the interval that ends at the sample just pushed
        self._history.push(self._clock(), e)
        dt = self._dt(CUR)
        cur = self._history.error_at(CUR)
        self._error_sum.x += dt * cur.x
        self._error_sum.y += dt * cur.y

    def _dt(self, k: int) -> float:
        return self._history.dt_ms(k, self._config.min_dt_ms)

    def _second_derivative_gain(self) -> float:
        if self._config.second_derivative_source is SecondDerivativeSource.KDD:
            return self._config.kdd
        return self._config.kd

    def _axis_terms(
        self,
        err: float,
        err_sum: float,
        de_cur: float,
        de_prev: float,
        dt_cur: float,
        dt_prev: float,
    ) -> AxisTerms:
        c = self._config
        t = AxisTerms(
            p=c.kp * err,
            i=c.ki * err_sum,
            d=c.kd * de_cur / dt_cur,
            dd=self._second_derivative_gain() * de_prev / dt_prev,
        )
        t.total = t.p + t.i + t.d + t.dd
        return t

    def _finish(self, r: XyPidResult) -> XyPidResult:
        r.finite = r.velocity.is_finite()
        if not r.finite and self._warn_trigger.ready():
            self._logger.warn(
                "xy_pid non-finite velocity "
                + format_kv(error=r.error.to_dict(), velocity=r.velocity.to_dict(), mode=r.mode.value)
            )
        return r

    def _normalize_config(self) -> None:
        c = self._config
        c.mode = parse_control_mode(c.mode, default=ControlMode.NORMAL)
        c.second_derivative_source = parse_second_derivative_source(
            c.second_derivative_source,
            default=SecondDerivativeSource(SECOND_DERIVATIVE_SOURCE_DEFAULT),
        )
        # A non-positive floor would let dt reach zero
        if not (c.min_dt_ms > 0.0):
            c.min_dt_ms = MIN_DT_MS


# =============================================================================
# Self-test
# =============================================================================

if __name__ == "__main__":
    from ..utils.timing import ManualClock

    clock = ManualClock(start_ms=0.0)
    pid = XyPid(clock=clock)

    print("=== xy_pid.py self-test ===")
    errors = [(50.0, -20.0), (45.0, -18.0), (38.0, -15.0), (30.0, -11.0), (20.0, -7.0), (9.0, -3.0), (0.0, 0.0)]

    for i, (ex, ey) in enumerate(errors, start=1):
        clock.advance(50.0)
        r = pid.update({"x": ex, "y": ey})
        print(
            f"step={i:02d} err=({ex:+6.1f},{ey:+6.1f}) dt={r.dt_cur_ms:.0f}ms "
            f"P={r.x.p:+.3f} I={r.x.i:+.3f} D={r.x.d:+.3f} DD={r.x.dd:+.3f} "
            f"vel=({r.velocity.x:+.3f},{r.velocity.y:+.3f})"
        )

    pid.set_mode("bang-bang")
    r = pid.update((-3.0, 0.0))
    print(f"max-effort vel=({r.velocity.x:+.1f},{r.velocity.y:+.1f}) bypassed={r.bypassed}")
