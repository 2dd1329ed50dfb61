"""Shared pytest fixtures for the hybrid image tests."""
import numpy as np
import pytest

from hybridizer.models.image import Image


@pytest.fixture
def solid():
    """Factory: solid(h, w, value, channels=4) -> Image filled with *value*."""
    def _make(h, w, value, channels=4):
        shape = (h, w) if channels == 1 else (h, w, channels)
        return Image(pixels=np.full(shape, value, dtype=np.uint8))
    return _make


@pytest.fixture
def random_rgba():
    """Factory: random_rgba(h, w, seed) -> reproducible noisy RGBA Image."""
    def _make(h, w, seed=0):
        rng = np.random.default_rng(seed)
        return Image(pixels=rng.integers(0, 256, size=(h, w, 4), dtype=np.uint8))
    return _make


@pytest.fixture
def square_on_dark():
    """A 32x32 RGB image: dark background with a bright centered square."""
    px = np.full((32, 32, 3), 50, dtype=np.uint8)
    px[8:24, 8:24] = 200
    return Image(pixels=px)


@pytest.fixture(autouse=True)
def _no_font_override(monkeypatch):
    monkeypatch.delenv("FONT_PATH", raising=False)
