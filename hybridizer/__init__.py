"""Hybrid images: one picture's low frequencies plus another's high frequencies."""

__version__ = "1.0.0"

from .models import (
    Image,
    make_kernel,
    BlendParameters,
    PairSources,
    TripleSources,
    HybridResult,
    HybridError,
    DimensionMismatchError,
    InvalidParameterError,
)
from .services.pixel_arithmetic import saturating_add, saturating_subtract
from .operations import low_pass, sharpen_pass, high_pass, fft_visualize, overlay2, overlay3
