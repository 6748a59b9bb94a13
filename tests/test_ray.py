import math
from dataclasses import FrozenInstanceError

import pytest

from raymath import Ray, Vec3


@pytest.fixture
def ray() -> Ray:
    return Ray(Vec3(1, 1, 0), Vec3(0, 3, 0))


def test_ctor(ray):
    assert ray.origin == Vec3(1, 1, 0)
    assert ray.dir == Vec3(0, 3, 0)


def test_point_at(ray):
    assert ray.point_at(2) == Vec3(1, 7, 0)


def test_point_at_zero_is_origin(ray):
    assert ray.point_at(0) == ray.origin


def test_point_at_negative(ray):
    assert ray.point_at(-1) == Vec3(1, -2, 0)


@pytest.mark.parametrize("t", [-10.0, -0.5, 0.0, 0.25, 1.0, 1e6])
def test_point_at_matches_origin_plus_scaled_dir(t):
    o = Vec3(0.5, -2, 3)
    d = Vec3(1, 0.125, -4)
    assert Ray(o, d).point_at(t) == o + d * t


def test_direction_not_normalized():
    ray = Ray(Vec3(0, 0, 0), Vec3(2, 0, 0))
    assert ray.dir.length_squared() == 4
    assert ray.point_at(1) == Vec3(2, 0, 0)


def test_point_at_does_not_mutate(ray):
    ray.point_at(5)
    assert ray.origin == Vec3(1, 1, 0)
    assert ray.dir == Vec3(0, 3, 0)


def test_ray_copies_its_vectors():
    o = Vec3(1, 1, 0)
    d = Vec3(0, 3, 0)
    ray = Ray(o, d)
    o += Vec3(10, 10, 10)
    d *= 2
    assert ray.origin == Vec3(1, 1, 0)
    assert ray.dir == Vec3(0, 3, 0)


def test_frozen(ray):
    with pytest.raises(FrozenInstanceError):
        ray.origin = Vec3(0, 0, 0)


def test_equality(ray):
    assert ray == Ray(Vec3(1, 1, 0), Vec3(0, 3, 0))
    assert ray != Ray(Vec3(1, 1, 0), Vec3(0, 3, 1))


def test_nan_ray_is_not_equal_to_itself():
    ray = Ray(Vec3(math.nan, 0, 0), Vec3(0, 0, 1))
    assert ray.origin != ray.origin
    assert ray != ray
    assert not (ray == ray)


def test_equality_with_other_types(ray):
    assert ray != (Vec3(1, 1, 0), Vec3(0, 3, 0))


def test_unhashable(ray):
    assert Ray.__hash__ is None
    with pytest.raises(TypeError):
        hash(ray)
