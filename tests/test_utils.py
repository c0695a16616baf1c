import logging

import pytest

from sphero_control import __version__, get_package_version_info
from sphero_control.utils.logging import LoggerAdapter, format_kv, get_logger_adapter
from sphero_control.utils.timing import ManualClock, PeriodicTrigger, elapsed_ms, now_mono_ms


# -----------------------------------------------------------------------------
# timing
# -----------------------------------------------------------------------------

def test_now_mono_ms_is_non_decreasing_int():
    a = now_mono_ms()
    b = now_mono_ms()
    assert isinstance(a, int)
    assert b >= a


def test_elapsed_ms_clamps_at_zero():
    assert elapsed_ms(100.0, now_ms=160.0) == 60.0
    assert elapsed_ms(100.0, now_ms=40.0) == 0.0


def test_manual_clock():
    clock = ManualClock(start_ms=5.0)
    assert clock() == 5.0
    assert clock.advance(10) == 15.0
    clock.set(2.0)
    assert clock.now_ms == 2.0


def test_periodic_trigger():
    clock = ManualClock(0.0)
    trig = PeriodicTrigger(100.0, clock=clock)
    assert trig.ready()
    assert not trig.ready()
    clock.advance(99)
    assert not trig.ready()
    clock.advance(1)
    assert trig.ready()
    trig.reset()
    assert trig.ready()


def test_periodic_trigger_without_immediate_fire():
    trig = PeriodicTrigger(50.0, fire_immediately=False)
    assert not trig.ready(now_ms=0.0)
    assert trig.ready(now_ms=50.0)


def test_periodic_trigger_ignores_backwards_clock():
    clock = ManualClock(1_000.0)
    trig = PeriodicTrigger(100.0, clock=clock)
    assert trig.ready()
    clock.set(0.0)
    assert not trig.ready()
    clock.set(1_100.0)
    assert trig.ready()


def test_periodic_trigger_rejects_bad_period():
    with pytest.raises(ValueError):
        PeriodicTrigger(0.0)


# -----------------------------------------------------------------------------
# logging
# -----------------------------------------------------------------------------

class _RosStyleLogger:
    def __init__(self):
        self.lines = []

    def debug(self, msg):
        self.lines.append(("debug", msg))

    def info(self, msg):
        self.lines.append(("info", msg))

    def warn(self, msg):
        self.lines.append(("warn", msg))


class _Node:
    def __init__(self):
        self.logger = _RosStyleLogger()

    def get_logger(self):
        return self.logger


def test_adapter_uses_node_logger():
    node = _Node()
    log = get_logger_adapter(node)
    log.warn("stale")
    log.info(42)
    assert node.logger.lines == [("warn", "stale"), ("info", "42")]
    assert not log.is_std_logger


def test_adapter_defaults_to_stdlib(caplog):
    log = get_logger_adapter(name="sphero_control.test")
    assert log.is_std_logger
    with caplog.at_level(logging.WARNING, logger="sphero_control.test"):
        log.warn("careful")
    assert [rec.levelno for rec in caplog.records] == [logging.WARNING]


def test_adapter_passthrough():
    log = LoggerAdapter()
    assert get_logger_adapter(log) is log


def test_format_kv():
    assert format_kv(kp=0.5, mode="NORMAL") == "kp=0.5 mode=NORMAL"


# -----------------------------------------------------------------------------
# version
# -----------------------------------------------------------------------------

def test_version_info():
    info = get_package_version_info()
    assert info.version == __version__
    assert info.short() == f"sphero_control {__version__}"
    assert info.to_dict()["package_name"] == "sphero_control"
