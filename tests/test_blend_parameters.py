import pytest

from hybridizer import BlendParameters, InvalidParameterError


def test_defaults():
    params = BlendParameters()
    assert params.a_blur == 4.5
    assert params.b_sharpen == 0.545
    assert params.c_sharpen == 0.0
    assert params.b_low_pass_amount == 4.5
    assert params.c_low_pass_amount == 4.5


def test_high_pass_radii_follow_a_blur_unless_set():
    params = BlendParameters(a_blur=2.0, c_low_pass=7.0)
    assert params.b_low_pass_amount == 2.0
    assert params.c_low_pass_amount == 7.0


def test_from_env(monkeypatch):
    monkeypatch.setenv("HYBRID_A_BLUR", "3.0")
    monkeypatch.setenv("HYBRID_B_SHARPEN", "0.9")
    monkeypatch.delenv("HYBRID_C_SHARPEN", raising=False)
    params = BlendParameters.from_env()
    assert (params.a_blur, params.b_sharpen, params.c_sharpen) == (3.0, 0.9, 0.0)


def test_explicit_values_beat_env(monkeypatch):
    monkeypatch.setenv("HYBRID_A_BLUR", "3.0")
    params = BlendParameters.from_env(a_blur=1.0, b_sharpen=None)
    assert params.a_blur == 1.0
    assert params.b_sharpen == 0.545


@pytest.mark.parametrize("kwargs", [
    {"a_blur": -1.0},
    {"b_low_pass": -0.5},
    {"a_blur": float("nan")},
    {"b_sharpen": float("inf")},
])
def test_invalid_values(kwargs):
    with pytest.raises(InvalidParameterError):
        BlendParameters(**kwargs)
