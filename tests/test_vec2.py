from __future__ import annotations

import pytest

from cubicseg import vec2
from cubicseg.logging import CubicSegValueError


class _Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


def test_vec2_difference():
    a = vec2(1, 2)
    b = vec2(4.5, -1)

    assert b - a == vec2(3.5, -3.0)
    assert isinstance(a.x, float)


def test_vec2_equality():
    assert vec2(1, 2) == vec2(1.0, 2.0)
    assert vec2(1, 2) != vec2(2, 1)
    assert vec2(1, 2) != (1.0, 2.0)
    assert repr(vec2(1, 2)) == "vec2(1.0, 2.0)"


@pytest.mark.parametrize(
    "point",
    [
        vec2(1.5, -2.0),
        (1.5, -2.0),
        [1.5, -2.0],
        _Point(1.5, -2.0),
    ],
)
def test_from_point(point):
    assert vec2.from_point(point) == vec2(1.5, -2.0)


def test_from_point_returns_same_instance():
    a = vec2(0, 1)
    assert vec2.from_point(a) is a


@pytest.mark.parametrize("point", [(1.0, 2.0, 3.0), (1.0,), 5.0, None])
def test_from_point_invalid(point):
    with pytest.raises(CubicSegValueError):
        vec2.from_point(point)
