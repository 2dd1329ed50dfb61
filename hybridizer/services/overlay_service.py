from functools import reduce
import logging

import numpy as np

from ..models.image import Image
from .image_service import ImageService
from .pixel_arithmetic import saturating_add, CHANNEL_MAX

logger = logging.getLogger(__name__)


class OverlayService:
    """
    Saturating per-pixel sums of same-size images (RGBA out, alpha 255).
    """

    def __init__(self):
        self.image_service = ImageService()

    def _overlay(self, *images: Image) -> Image:
        self.image_service.require_same_size(*images)
        layers = [self.image_service.to_rgba(img) for img in images]

        out = np.empty_like(layers[0])
        # add left to right, clamping after every step
        out[:, :, :3] = reduce(saturating_add, (layer[:, :, :3] for layer in layers))
        out[:, :, 3] = CHANNEL_MAX
        logger.debug("Overlaid %d images of shape %s", len(images), out.shape)
        return self.image_service.create_image(out)

    def overlay2(self, a: Image, b: Image) -> Image:
        return self._overlay(a, b)

    def overlay3(self, a: Image, b: Image, c: Image) -> Image:
        return self._overlay(a, b, c)
