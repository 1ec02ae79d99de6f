import numpy as np
import pytest


## ###############################################################
## Angles
## ###############################################################

def test_angle_between(va):
    assert va.angle_between([1, 0], [0, 1]) == np.pi / 2
    assert va.angle_between([0, 1], [1, 0]) == -np.pi / 2


def test_angle_between_wraps_into_range(va):
    # atan2 gives 3pi/4 and -3pi/4, the raw difference is -3pi/2
    result = va.angle_between([-1, 1], [-1, -1])
    assert np.isclose(result, np.pi / 2)
    result = va.angle_between([-1, -1], [-1, 1])
    assert np.isclose(result, -np.pi / 2)


def test_angle_between_uses_xy_only(va):
    assert va.angle_between([1, 0, 7], [0, 1, -3]) == np.pi / 2


@pytest.mark.parametrize("theta", np.linspace(-3.0, 3.0, 13))
def test_angle_between_after_rotation(va, theta):
    p = [2.0, 0.5]
    assert np.isclose(va.angle_between(p, va.rotate(p, theta)), theta)


def test_angle(va):
    assert va.angle([0, 1]) == np.pi / 2
    assert va.angle([1, 0]) == 0.0
    assert np.isclose(va.angle([-1, 0]), np.pi)
    assert np.isclose(va.angle([1, 1, 0]), np.pi / 4)


def test_angle_of_zero_vector_is_nan(va):
    assert np.isnan(va.angle([0, 0]))


## ###############################################################
## Transformations
## ###############################################################

def test_transform(va):
    matrix = [[1, 2], [3, 4], [5, 6]]
    np.testing.assert_array_equal(va.transform([1, 1], matrix), [3, 7, 11])


def test_transform_matches_matmul(va, rng):
    m = rng.standard_normal((4, 3))
    x = rng.standard_normal(3)
    assert np.allclose(va.transform(x, m), m @ x)


def test_transform_ragged_rows(va):
    # extra vector components past a row's width are ignored
    np.testing.assert_array_equal(va.transform([1, 1, 100], [[1, 2], [3]]), [3, 3])
    # a row wider than the vector reads nan
    result = va.transform([5], [[1], [1, 2]])
    assert result[0] == 5.0
    assert np.isnan(result[1])


def test_transform_no_rows(va):
    assert va.transform([1, 2], []).shape == (0,)


def test_rotate(va):
    result = va.rotate([1, 1], np.pi / 2)
    np.testing.assert_array_equal(np.round(result), [-1, 1])


def test_rotate_truncates_to_2d(va):
    result = va.rotate([1, 0, 5], np.pi)
    assert result.shape == (2,)
    assert np.allclose(result, [-1, 0])


def test_rotate_preserves_norm(va, rng):
    v = rng.standard_normal(2)
    assert np.isclose(va.norm(va.rotate(v, 1.234)), va.norm(v))


def test_shear(va):
    np.testing.assert_array_equal(va.shear([1, 1], 2, True), [3, 1])
    np.testing.assert_array_equal(va.shear([1, 1], 2, False), [1, 3])
