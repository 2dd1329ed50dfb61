import os
import logging
from typing import Tuple

import numpy as np
from dotenv import load_dotenv
from PIL import Image as PILImage, ImageDraw, ImageFont

from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class TextRepository:
    """
    Rasterizes short messages into RGBA seed images.
    """

    def __init__(self, font_path: str = None):
        self.font_path = font_path or os.getenv("FONT_PATH")

    def _font(self, size: float):
        if self.font_path:
            return ImageFont.truetype(self.font_path, size=size)
        # Pillow >= 10.1 ships a scalable default font
        return ImageFont.load_default(size=size)

    def render_message(
        self,
        msg: str,
        width: int,
        height: int,
        x: int,
        y: int,
        size: float,
        color: Tuple[int, int, int, int],
    ) -> Image:
        """
        Draw *msg* at (x, y) on a transparent black (height, width, 4) canvas.
        """
        canvas = PILImage.new("RGBA", (width, height), (0, 0, 0, 0))
        ImageDraw.Draw(canvas).text((x, y), msg, fill=tuple(color), font=self._font(size))
        logger.debug("Rendered %r on a %dx%d canvas", msg, width, height)
        return Image(pixels=np.asarray(canvas, dtype=np.uint8).copy())
