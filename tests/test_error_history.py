import pytest

from sphero_control.controllers.error_history import ErrorHistory
from sphero_control.models.vec2 import Vec2


def test_reset_fills_zero_errors_and_now():
    h = ErrorHistory(now_ms=500.0)
    assert len(h) == 3
    assert h.errors() == (Vec2(0.0, 0.0),) * 3
    assert h.times() == (500.0, 500.0, 500.0)


def test_push_shifts_both_rings_together():
    h = ErrorHistory(now_ms=0.0)
    h.push(10.0, Vec2(1.0, 2.0))
    h.push(25.0, Vec2(3.0, 4.0))
    assert h.errors() == (Vec2(3.0, 4.0), Vec2(1.0, 2.0), Vec2(0.0, 0.0))
    assert h.times() == (25.0, 10.0, 0.0)

    h.push(90.0, Vec2(5.0, 6.0))
    h.push(100.0, Vec2(7.0, 8.0))
    assert h.errors() == (Vec2(7.0, 8.0), Vec2(5.0, 6.0), Vec2(3.0, 4.0))
    assert h.times() == (100.0, 90.0, 25.0)


def test_push_copies_the_sample():
    h = ErrorHistory(now_ms=0.0)
    e = Vec2(1.0, 1.0)
    h.push(1.0, e)
    e.x = 99.0
    assert h.error_at(0) == Vec2(1.0, 1.0)

    snapshot = h.error_at(0)
    snapshot.y = -5.0
    assert h.error_at(0) == Vec2(1.0, 1.0)


def test_dt_is_floored():
    h = ErrorHistory(now_ms=0.0)
    h.push(100.0, Vec2())
    h.push(101.0, Vec2())
    assert h.dt_ms(0, 35.0) == 35.0
    assert h.dt_ms(1, 35.0) == 100.0


def test_de_is_componentwise_difference():
    h = ErrorHistory(now_ms=0.0)
    h.push(1.0, Vec2(4.0, -1.0))
    h.push(2.0, Vec2(1.5, 2.0))
    assert h.de(0) == Vec2(-2.5, 3.0)
    assert h.de(1) == Vec2(4.0, -1.0)


def test_reset_after_pushes():
    h = ErrorHistory(now_ms=0.0)
    h.push(10.0, Vec2(1.0, 1.0))
    h.reset(77.0)
    assert h.errors() == (Vec2(0.0, 0.0),) * 3
    assert h.times() == (77.0,) * 3


def test_out_of_range_index():
    h = ErrorHistory(now_ms=0.0)
    with pytest.raises(IndexError):
        h.error_at(3)
    with pytest.raises(IndexError):
        h.de(2)


def test_capacity_must_hold_a_difference():
    with pytest.raises(ValueError):
        ErrorHistory(capacity=1)
