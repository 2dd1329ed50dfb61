"""
Function-style entry points to the hybrid image core.

All take and return Image objects; none touch the filesystem.
"""
import numpy as np

from .models.image import Image
from .models.blend_parameters import DEFAULT_A_BLUR, DEFAULT_B_SHARPEN
from .services.filter_service import FilterService
from .services.overlay_service import OverlayService
from .services.spectrum_service import SpectrumService

_filters = FilterService()
_overlays = OverlayService()
_spectra = SpectrumService()


def low_pass(image: Image, sigma: float = DEFAULT_A_BLUR) -> Image:
    return _filters.low_pass(image, sigma)


def sharpen_pass(image: Image, kernel: np.ndarray) -> Image:
    return _filters.sharpen_pass(image, kernel)


def high_pass(
    image: Image,
    sharpen_amount: float = DEFAULT_B_SHARPEN,
    low_pass_amount: float = DEFAULT_A_BLUR,
) -> Image:
    return _filters.high_pass(image, sharpen_amount, low_pass_amount)


def fft_visualize(image: Image) -> Image:
    return _spectra.fft_visualize(image)


def overlay2(a: Image, b: Image) -> Image:
    return _overlays.overlay2(a, b)


def overlay3(a: Image, b: Image, c: Image) -> Image:
    return _overlays.overlay3(a, b, c)
