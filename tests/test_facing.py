import math

import pytest

from core.vector import UNIT_X, UNIT_Y, UNIT_Z, ZERO, Vector3
from geometry.facing import (angle_between, in_field_of_view, is_facing,
                             is_perpendicular, side_of)

FORWARD = Vector3(0, 0, -1)


def test_is_facing():
    assert is_facing(FORWARD, Vector3(0.5, 0, -1))
    assert not is_facing(FORWARD, Vector3(0, 0, 1))
    assert not is_facing(FORWARD, UNIT_X)


def test_basis_vectors_are_perpendicular():
    assert is_perpendicular(UNIT_X, UNIT_Y)
    assert is_perpendicular(UNIT_Y, UNIT_Z)
    assert is_perpendicular(UNIT_Z, UNIT_X)
    assert not is_perpendicular(UNIT_X, Vector3(1, 1, 0))


@pytest.mark.parametrize("a, b, expected", [
    (UNIT_X, UNIT_Y, math.pi / 2),
    (UNIT_X, UNIT_X, 0.0),
    (UNIT_X, -UNIT_X, math.pi),
    (UNIT_Z, Vector3(0, 1, 1), math.pi / 4),
    (ZERO, UNIT_X, 0.0),
])
def test_angle_between(a, b, expected):
    assert angle_between(a, b) == pytest.approx(expected, abs=1e-6)


def test_field_of_view():
    eye = Vector3(0, 0, 0)
    fov = math.radians(90)
    assert in_field_of_view(eye, FORWARD, Vector3(1, 0, -3), fov)
    assert not in_field_of_view(eye, FORWARD, Vector3(4, 0, -1), fov)
    assert not in_field_of_view(eye, FORWARD, Vector3(0, 0, 5), fov)


def test_field_of_view_uses_unnormalized_facing():
    eye = Vector3(2, 0, 2)
    assert in_field_of_view(eye, Vector3(0, 0, -10), Vector3(2, 0, -8), math.radians(10))


def test_field_of_view_target_at_eye_is_visible():
    eye = Vector3(1, 2, 3)
    assert in_field_of_view(eye, FORWARD, eye, math.radians(30))


def test_field_of_view_cannot_tell_left_from_right():
    eye = Vector3(0, 0, 0)
    fov = math.radians(60)
    left = Vector3(-1, 0, -2)
    right = Vector3(1, 0, -2)
    assert in_field_of_view(eye, FORWARD, left, fov) == in_field_of_view(eye, FORWARD, right, fov)
    assert side_of(FORWARD, UNIT_Y, left) == -1
    assert side_of(FORWARD, UNIT_Y, right) == 1
    assert side_of(FORWARD, UNIT_Y, Vector3(0, 0, -4)) == 0
