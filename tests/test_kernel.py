import pytest
import numpy as np

from hybridizer import make_kernel
from hybridizer.models.kernel import IDENTITY_MINUS_LAPLACIAN


def test_unit_amount_is_identity_minus_laplacian():
    np.testing.assert_array_equal(make_kernel(1.0), IDENTITY_MINUS_LAPLACIAN)


def test_zero_amount_is_negative_laplacian():
    expected = np.array([[0, -1, 0], [-1, 0, -1], [0, -1, 0]], dtype=np.float32)
    np.testing.assert_array_equal(make_kernel(0.0), expected)


def test_only_center_weight_changes():
    kernel = make_kernel(0.545)
    assert kernel.shape == (3, 3)
    assert kernel[1, 1] == pytest.approx(5.0 * 0.545, rel=1e-6)
    for y, x in [(0, 1), (1, 0), (1, 2), (2, 1)]:
        assert kernel[y, x] == -1.0
    for y, x in [(0, 0), (0, 2), (2, 0), (2, 2)]:
        assert kernel[y, x] == 0.0


def test_base_template_is_not_mutated():
    make_kernel(3.0)[0, 0] = 42.0
    assert IDENTITY_MINUS_LAPLACIAN[1, 1] == 5.0
    assert IDENTITY_MINUS_LAPLACIAN[0, 0] == 0.0
