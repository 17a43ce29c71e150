import math

import pytest

from tristram.vectors import get_vec, get_vec_dir


def _at(degrees, length=3.0):
    rad = math.radians(degrees)
    return (length * math.cos(rad), length * math.sin(rad))


def test_zero_vector_has_no_direction():
    assert get_vec_dir((0, 0)) is None
    assert get_vec_dir((0.0, -0.0)) is None


def test_positive_x_axis_is_seven():
    assert get_vec_dir((1.0, 0.0)) == 7


def test_sector_boundary_belongs_to_seven():
    assert get_vec_dir(_at(22.4)) == get_vec_dir((5.0, 0.0))
    assert get_vec_dir(_at(-22.4)) == get_vec_dir((5.0, 0.0))


@pytest.mark.parametrize("degrees", [d * 45.0 for d in range(8)])
def test_results_are_in_range(degrees):
    assert get_vec_dir(_at(degrees)) in range(8)


def test_directions_step_by_one_per_45_degrees():
    dirs = [get_vec_dir(_at(k * 45.0)) for k in range(8)]
    for current, following in zip(dirs, dirs[1:] + dirs[:1]):
        assert (current + 1) % 8 == following


def test_opposite_vectors_differ_by_four():
    for degrees in (0.0, 45.0, 90.0, 135.0, 170.0, 300.0):
        a = get_vec_dir(_at(degrees))
        b = get_vec_dir(_at(degrees + 180.0))
        assert (a - b) % 8 == 4


def test_direction_ignores_length():
    for degrees in (10.0, 60.0, 100.0, 200.0, 250.0, 330.0):
        assert get_vec_dir(_at(degrees, 1.0)) == get_vec_dir(_at(degrees, 50.0))


def test_get_vec_subtracts():
    assert get_vec((1, 2), (4, 6)) == (3.0, 4.0)


def test_get_vec_returns_floats():
    dx, dy = get_vec((1, 1), (2, 3))
    assert isinstance(dx, float) and dx == 1.0
    assert isinstance(dy, float) and dy == 2.0


def test_get_vec_reversed_is_negated():
    a, b = (3, -7), (10, 4)
    forward = get_vec(a, b)
    backward = get_vec(b, a)
    assert forward == (-backward[0], -backward[1])


def test_get_vec_same_point_is_zero_with_no_direction():
    vec = get_vec((5, 5), (5, 5))
    assert vec == (0.0, 0.0)
    assert get_vec_dir(vec) is None