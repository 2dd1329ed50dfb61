import logging

import numpy as np

from ..models.image import Image
from .image_service import ImageService

logger = logging.getLogger(__name__)


class SpectrumService:
    """
    Diagnostic log-magnitude view of an image's 2-D Fourier transform.
    Output never feeds back into filtering.
    """

    def __init__(self):
        self.image_service = ImageService()

    def fft_visualize(self, img: Image) -> Image:
        """
        Returns a (H, W) uint8 image of log|F| scaled by its maximum.
        Unshifted: the DC term sits at (0, 0).
        Magnitudes <= 1 map to 0; a spectrum with no magnitude above 1
        gives an all-zero image.
        """
        gray = self.image_service.to_grayscale(img).astype(np.float64) / 255.0
        spectrum = np.fft.fft2(gray)

        with np.errstate(divide="ignore"):
            log_mag = np.log(np.abs(spectrum))

        finite = log_mag[np.isfinite(log_mag)]
        max_log = max(0.0, float(finite.max())) if finite.size else 0.0
        if max_log <= 0.0:
            logger.debug("Degenerate spectrum for %s, returning zeros", gray.shape)
            return self.image_service.create_image(np.zeros(gray.shape, dtype=np.uint8))

        scaled = np.nan_to_num(log_mag / max_log * 255.0, nan=0.0, posinf=255.0, neginf=0.0)
        # truncation, not rounding
        return self.image_service.create_image(np.clip(scaled, 0.0, 255.0).astype(np.uint8))
