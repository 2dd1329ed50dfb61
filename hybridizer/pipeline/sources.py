"""
Builds the 2- or 3-image source set a hybrid run starts from:
either decoded files or rasterized messages.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

from ..models.sources import PairSources, TripleSources, HybridSources
from ..repositories.text_repository import TextRepository
from ..services.image_service import ImageService

# ------------------------------------------------------------------
# env‑vars
load_dotenv()
TEXT_SIZE      = float(os.getenv("TEXT_SIZE", "150"))
TEXT_HEIGHT    = int(os.getenv("TEXT_CANVAS_HEIGHT", "200"))
TEXT_X, TEXT_Y = 20, 35
PX_PER_CHAR    = 100

TEXT_COLOR_R = (255, 0, 0, 255)
TEXT_COLOR_G = (0, 255, 0, 255)
TEXT_COLOR_B = (0, 0, 255, 255)


# ------------------------------------------------------------------
def load_file_sources(
    file_a: Union[str, Path],
    file_b: Union[str, Path],
    *,
    image_service: ImageService = None,
) -> PairSources:
    """Decode two image files; A becomes the low-pass, B the high-pass image."""
    image_service = image_service or ImageService()
    return PairSources(a=image_service.load(file_a), b=image_service.load(file_b))


def render_text_sources(
    msg1: str,
    msg2: str,
    msg3: str | None = None,
    *,
    text_repository: TextRepository = None,
) -> HybridSources:
    """
    Render each message on its own canvas (red, green, blue).
    All canvases share one width, sized for the longest message.
    """
    text_repository = text_repository or TextRepository()
    longest = max(len(msg1), len(msg2), len(msg3) if msg3 is not None else 0)
    width = max(1, PX_PER_CHAR * longest)

    def render(msg, color):
        return text_repository.render_message(
            msg, width, TEXT_HEIGHT, TEXT_X, TEXT_Y, TEXT_SIZE, color
        )

    a = render(msg1, TEXT_COLOR_R)
    b = render(msg2, TEXT_COLOR_G)
    if msg3 is None:
        return PairSources(a=a, b=b)
    return TripleSources(a=a, b=b, c=render(msg3, TEXT_COLOR_B))
