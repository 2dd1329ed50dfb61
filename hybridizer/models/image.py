from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: 8-bit pixels (+ optional path for bookkeeping).
    No filtering logic in this file.
    """
    pixels: np.ndarray # Shape (H, W), (H, W, 1), (H, W, 3) or (H, W, 4), dtype uint8.
    path: Path | None = None # Source or destination of the image.
