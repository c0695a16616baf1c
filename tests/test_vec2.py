import math
from collections import namedtuple

import pytest

from sphero_control.models.vec2 import Vec2, Vec2TypeError, sign


def test_sign():
    assert sign(3.2) == 1.0
    assert sign(-0.001) == -1.0
    assert sign(0.0) == 0.0
    assert sign(-0.0) == 0.0
    assert sign(math.inf) == 1.0
    assert math.isnan(sign(math.nan))


def test_coerce_shapes():
    Point = namedtuple("Point", "x y")
    assert Vec2.coerce({"x": 1, "y": -2}) == Vec2(1.0, -2.0)
    assert Vec2.coerce((3, 4)) == Vec2(3.0, 4.0)
    assert Vec2.coerce([5.5, 6.5]) == Vec2(5.5, 6.5)
    assert Vec2.coerce(Point(7, 8)) == Vec2(7.0, 8.0)


def test_coerce_copies_vec2():
    v = Vec2(1.0, 2.0)
    c = Vec2.coerce(v)
    assert c == v
    assert c is not v


@pytest.mark.parametrize("bad", [None, 3.0, "xy", (1.0,), (1.0, 2.0, 3.0), {"x": 1.0}, {"x": "a", "y": 1}])
def test_coerce_rejects_non_vectors(bad):
    with pytest.raises(Vec2TypeError):
        Vec2.coerce(bad)


def test_coerce_saturates_oversized_ints():
    Point = namedtuple("Point", "x y")
    assert Vec2.coerce((10**400, -10**400)) == Vec2(math.inf, -math.inf)
    assert Vec2.coerce({"x": 10**400, "y": 0}) == Vec2(math.inf, 0.0)
    assert Vec2.coerce(Point(-10**400, 3)) == Vec2(-math.inf, 3.0)


def test_vec2_type_error_is_a_type_error():
    assert issubclass(Vec2TypeError, TypeError)


def test_helpers():
    v = Vec2(2.0, -3.0)
    assert v.swapped() == Vec2(-3.0, 2.0)
    assert v.scaled(2.0) == Vec2(4.0, -6.0)
    assert v.sign() == Vec2(1.0, -1.0)
    assert v - Vec2(1.0, 1.0) == Vec2(1.0, -4.0)
    assert v.to_dict() == {"x": 2.0, "y": -3.0}
    assert v.is_finite()
    assert not Vec2(math.nan, 0.0).is_finite()
