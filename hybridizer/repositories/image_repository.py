from pathlib import Path
from typing import Union, Tuple
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image

logger = logging.getLogger(__name__)

# Pillow cannot write an alpha channel into these
_NO_ALPHA_EXTS = {".jpg", ".jpeg", ".bmp"}


class ImageRepository:
    """
    Handles file I/O and construction of Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        pixels = np.asarray(pixels)
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        if pixels.ndim not in (2, 3) or (pixels.ndim == 3 and pixels.shape[2] not in (1, 3, 4)):
            raise ValueError(f"Unsupported pixel array shape {pixels.shape}; "
                             "expected (H, W) or (H, W, C) with C in {1, 3, 4}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"Image must not be empty, got shape {pixels.shape}")
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image) -> Tuple[int, int]:
        return img.pixels.shape[:2]

    @classmethod
    def load(cls, path: Union[str, Path]) -> Image:
        path = Path(path)
        arr = cv2.imread(str(path), cv2.IMREAD_UNCHANGED)
        if arr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        # OpenCV decodes to BGR(A); everything downstream is RGB(A)
        if arr.dtype != np.uint8:
            logger.warning("%s is %s, scaling to 8 bit", path.name, arr.dtype)
            arr = cv2.convertScaleAbs(arr, alpha=255.0 / max(1.0, float(arr.max())))
        if arr.ndim == 3 and arr.shape[2] == 3:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGR2RGB)
        elif arr.ndim == 3 and arr.shape[2] == 4:
            arr = cv2.cvtColor(arr, cv2.COLOR_BGRA2RGBA)

        logger.debug("Loaded %s with shape %s", path, arr.shape)
        return cls.create_image(arr, path)

    @staticmethod
    def save(image: Image) -> None:
        if image.path is None:
            raise ValueError("Cannot save an image without a path")
        pixels = image.pixels
        if pixels.ndim == 3 and pixels.shape[2] == 1:
            pixels = pixels[:, :, 0]
        if pixels.ndim == 3 and pixels.shape[2] == 4 and image.path.suffix.lower() in _NO_ALPHA_EXTS:
            pixels = pixels[:, :, :3]
        PILImage.fromarray(np.ascontiguousarray(pixels)).save(image.path)
        logger.debug("Saved %s", image.path)
