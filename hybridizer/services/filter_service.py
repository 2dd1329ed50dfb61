import math
import logging

import cv2
import numpy as np

from ..models.image import Image
from ..models.kernel import make_kernel
from ..models.errors import InvalidParameterError
from ..models.blend_parameters import DEFAULT_A_BLUR, DEFAULT_B_SHARPEN
from .image_service import ImageService
from .pixel_arithmetic import saturating_subtract, CHANNEL_MAX

logger = logging.getLogger(__name__)


def _to_u8(arr: np.ndarray) -> np.ndarray:
    # truncate like an integer cast; float32 noise (122.99999) is snapped off first
    return np.clip(np.trunc(np.round(arr, 3)), 0, CHANNEL_MAX).astype(np.uint8)


class FilterService:
    """
    Spatial filters on RGBA pixel grids.
    *   Every method returns a new Image; inputs are never modified.
    *   Borders are handled by replicating the edge pixels.
    """

    def __init__(self):
        self.image_service = ImageService()

    @staticmethod
    def _check_sigma(sigma: float, name: str = "sigma") -> None:
        if not (math.isfinite(sigma) and sigma >= 0):
            raise InvalidParameterError(f"{name} must be a finite value >= 0, got {sigma}")

    # ─── Low pass ──────────────────────────────────────────────────
    def low_pass(self, img: Image, sigma: float = DEFAULT_A_BLUR) -> Image:
        """
        Separable Gaussian blur of every channel (alpha included).
        sigma = 0 returns an RGBA copy of the input.
        """
        self._check_sigma(sigma)
        rgba = self.image_service.to_rgba(img)
        if sigma == 0:
            return self.image_service.create_image(rgba)

        blurred = cv2.GaussianBlur(
            rgba.astype(np.float32), (0, 0),
            sigmaX=sigma, sigmaY=sigma,
            borderType=cv2.BORDER_REPLICATE,
        )
        logger.debug("low_pass sigma=%.3f on %s", sigma, rgba.shape)
        return self.image_service.create_image(_to_u8(blurred))

    # ─── Impulse (3x3 kernel) ──────────────────────────────────────
    def sharpen_pass(self, img: Image, kernel: np.ndarray) -> Image:
        """
        Apply a 3x3 kernel to every channel.

        The kernel is normalised by the sum of its weights unless that sum
        is zero, so flat regions keep their value.
        """
        kernel = np.asarray(kernel, dtype=np.float32)
        if kernel.shape != (3, 3):
            raise InvalidParameterError(f"Kernel must be 3x3, got {kernel.shape}")
        if not np.all(np.isfinite(kernel)):
            raise InvalidParameterError("Kernel weights must be finite")

        total = float(kernel.sum())
        if abs(total) > 1e-6:
            kernel = kernel / total

        rgba = self.image_service.to_rgba(img).astype(np.float32)
        filtered = cv2.filter2D(rgba, cv2.CV_32F, kernel, borderType=cv2.BORDER_REPLICATE)
        return self.image_service.create_image(_to_u8(filtered))

    # ─── High pass ─────────────────────────────────────────────────
    def high_pass(
        self,
        img: Image,
        sharpen_amount: float = DEFAULT_B_SHARPEN,
        low_pass_amount: float = DEFAULT_A_BLUR,
    ) -> Image:
        """
        sharpened - blurred, clamped at 0 per color channel; alpha = 255.

        Args:
            img: Source image (any supported channel layout).
            sharpen_amount: Scale of the sharpen kernel's center weight.
            low_pass_amount: Gaussian sigma of the subtracted blur.

        Returns:
            A new RGBA Image holding the high-frequency detail.
        """
        self._check_sigma(low_pass_amount, "low_pass_amount")
        if not math.isfinite(sharpen_amount):
            raise InvalidParameterError(f"sharpen_amount must be finite, got {sharpen_amount}")

        impulse = self.sharpen_pass(img, make_kernel(sharpen_amount)).pixels
        low = self.low_pass(img, low_pass_amount).pixels

        out = np.empty_like(impulse)
        out[:, :, :3] = saturating_subtract(impulse[:, :, :3], low[:, :, :3])
        out[:, :, 3] = CHANNEL_MAX
        logger.debug("high_pass sharpen=%.3f low_pass=%.3f", sharpen_amount, low_pass_amount)
        return self.image_service.create_image(out)
