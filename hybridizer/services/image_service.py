from pathlib import Path
from typing import Union, Tuple
import logging

import cv2
import numpy as np

from ..models.image import Image
from ..models.errors import DimensionMismatchError
from ..repositories.image_repository import ImageRepository

logger = logging.getLogger(__name__)

# Rec. 709 R, G, B weights scaled by 10000
_REC709_LUMA = np.array([2126, 7152, 722], dtype=np.uint32)


class ImageService:
    """I/O and channel-layout helpers.  No filtering logic here."""
    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image) -> None:
        self.image_repository.save(image)

    def get_image_dimensions(self, img: Image) -> Tuple[int, int]:
        return self.image_repository.retrieve_image_dimensions(img)

    def with_path(self, img: Image, path: Union[str, Path]) -> Image:
        """Same pixels (shared, read-only use), new destination."""
        return self.create_image(img.pixels, path)

    @staticmethod
    def to_rgba(img: Image) -> np.ndarray:
        """
        Return a new (H, W, 4) uint8 array.
        Gray is replicated into RGB, missing alpha becomes 255.
        """
        pixels = img.pixels
        if pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        pixels = np.ascontiguousarray(pixels)
        if pixels.ndim == 2:
            return cv2.cvtColor(pixels, cv2.COLOR_GRAY2RGBA)
        if pixels.shape[2] == 3:
            return cv2.cvtColor(pixels, cv2.COLOR_RGB2RGBA)
        return pixels.copy()

    def to_grayscale(self, img: Image) -> np.ndarray:
        """
        Single-channel (H, W) Rec. 709 luma, alpha ignored.
        Integer weights sum to 10000 and the result is truncated,
        so gray input maps back to itself.
        """
        rgb = self.to_rgba(img)[:, :, :3].astype(np.uint32)
        luma = rgb @ _REC709_LUMA // 10000
        return luma.astype(np.uint8)

    def require_same_size(self, *images: Image) -> None:
        """
        Raises DimensionMismatchError unless every image has the same H x W.
        """
        dims = [self.get_image_dimensions(img) for img in images]
        if any(d != dims[0] for d in dims[1:]):
            shapes = ", ".join(f"{w}x{h}" for h, w in dims)
            raise DimensionMismatchError(f"Images must share width and height, got {shapes}")
