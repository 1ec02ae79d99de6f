import numpy as np
import pytest

import VECalgebra
from VECalgebra import VectorAlgebra


def test_invalid_precision():
    with pytest.raises(ValueError):
        VectorAlgebra(precision='float16')


@pytest.mark.parametrize("use_numba", [True, False])
def test_float32_precision(use_numba):
    va = VectorAlgebra(use_numba=use_numba, precision='float32')
    assert va.add([1, 2], [3, 4]).dtype == np.float32
    assert va.cross([1, 0, 0], [0, 1, 0]).dtype == np.float32
    assert va.shear([1, 1], 2, True).dtype == np.float32
    assert isinstance(va.dot([1, 2], [3, 4]), np.float32)
    assert va.dot([3, 4, 5], [4, 3, 5]) == 49.0


def test_kernel_paths_agree(rng):
    nb = VectorAlgebra(use_numba=True)
    np_ = VectorAlgebra(use_numba=False)
    a, b, c = rng.standard_normal((3, 5))
    m = rng.standard_normal((3, 5))

    assert np.isclose(nb.dot(a, b), np_.dot(a, b))
    assert np.isclose(nb.norm(a), np_.norm(a))
    assert np.isclose(nb.distance(a, b), np_.distance(a, b))
    assert np.allclose(nb.cross(a, b), np_.cross(a, b))
    assert np.isclose(nb.scalar_triple_product(a, b, c),
                      np_.scalar_triple_product(a, b, c))
    assert np.allclose(nb.vector_triple_product(a, b, c),
                       np_.vector_triple_product(a, b, c))
    assert np.isclose(nb.angle_between(a, b), np_.angle_between(a, b))
    assert np.allclose(nb.transform(a, m), np_.transform(a, m))
    assert np.allclose(nb.rotate(a, 0.3), np_.rotate(a, 0.3))


def test_debug_reports_kernel(capsys):
    va = VectorAlgebra(use_numba=False, debug=True)
    va.dot([1, 2], [3, 4])
    out = capsys.readouterr().out
    assert "VectorAlgebra: use_numba=False" in out
    assert "vector_dot_product_np_core" in out


def test_quiet_without_debug(capsys):
    VectorAlgebra().dot([1, 2], [3, 4])
    assert capsys.readouterr().out == ""


def test_module_level_functions():
    np.testing.assert_array_equal(VECalgebra.add([0, 0], [1, 1]), [1, 1])
    assert VECalgebra.norm([1, 1]) == np.sqrt(2)
    assert VECalgebra.length([3, 4]) == 5.0
    assert VECalgebra.distance([1, 1], [3, 1]) == 2.0
    assert VECalgebra.dot([3, 4, 5], [4, 3, 5]) == 49.0
    np.testing.assert_array_equal(VECalgebra.cross([3, 4, 5], [4, 3, 5]), [5, 5, -7])
    assert VECalgebra.scalar_triple_product([3, 4, 5], [4, 3, 5], [-5, -12, -13]) == 6.0
    assert VECalgebra.angle_between([1, 0], [0, 1]) == np.pi / 2
    assert VECalgebra.angle([0, 1]) == np.pi / 2
    np.testing.assert_array_equal(VECalgebra.shear([1, 1], 2, False), [1, 3])
