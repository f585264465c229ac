import dataclasses

import pytest

from forradia.geometry import Point, RectF, Size


def test_point_defaults_to_origin():
    assert Point() == Point(0, 0)


def test_rect_defaults_to_zero():
    rect = RectF()
    assert (rect.x, rect.y, rect.w, rect.h) == (0.0, 0.0, 0.0, 0.0)


def test_size_fields():
    size = Size(640, 480)
    assert (size.w, size.h) == (640, 480)


def test_rect_fields_and_equality_by_content():
    rect = RectF(0.3, 0.2, 0.4, 0.2)
    assert (rect.x, rect.y, rect.w, rect.h) == (0.3, 0.2, 0.4, 0.2)
    assert rect == RectF(0.3, 0.2, 0.4, 0.2)
    assert (rect == RectF(0.3, 0.2, 0.4, 0.3)) is False


def test_points_are_immutable():
    point = Point(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.x = 5
    assert (point.x, point.y) == (1, 2)