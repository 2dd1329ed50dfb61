import numpy as np
import pytest

from hybridizer import saturating_add, saturating_subtract, InvalidParameterError

ALL = np.arange(256, dtype=np.uint8)
A, B = np.meshgrid(ALL, ALL, indexing="ij")


def test_add_bounds_for_every_pair():
    out = saturating_add(A, B, 255)
    assert out.dtype == np.uint8
    assert np.all(out >= np.maximum(A, B))
    assert np.all(out <= 255)


def test_subtract_bounds_for_every_pair():
    out = saturating_subtract(A, B, 255)
    assert out.dtype == np.uint8
    assert np.all(out <= A)
    assert np.all(out >= 0)


def test_add_is_commutative():
    assert np.array_equal(saturating_add(A, B, 255), saturating_add(B, A, 255))


@pytest.mark.parametrize("a,b,expected", [
    (0, 0, 0),
    (100, 55, 155),
    (200, 55, 255),
    (200, 100, 255),
    (255, 255, 255),
])
def test_add_scalars(a, b, expected):
    assert saturating_add(a, b, 255) == expected


@pytest.mark.parametrize("a,b,expected", [
    (10, 20, 0),
    (20, 10, 10),
    (255, 0, 255),
    (0, 255, 0),
    (128, 128, 0),
])
def test_subtract_scalars(a, b, expected):
    assert saturating_subtract(a, b, 255) == expected


def test_smaller_max_clamps_both_ways():
    assert saturating_add(100, 50, 120) == 120
    assert saturating_subtract(200, 10, 100) == 100


def test_uint8_inputs_do_not_wrap():
    a = np.array([250], dtype=np.uint8)
    b = np.array([10], dtype=np.uint8)
    assert saturating_add(a, b)[0] == 255
    assert saturating_subtract(b, a)[0] == 0


@pytest.mark.parametrize("max_value", [-1, 256, 300])
def test_max_outside_8_bit_range_is_rejected(max_value):
    with pytest.raises(InvalidParameterError):
        saturating_add(200, 100, max_value)
    with pytest.raises(InvalidParameterError):
        saturating_subtract(200, 100, max_value)
