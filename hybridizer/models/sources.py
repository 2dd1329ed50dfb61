from __future__ import annotations
from dataclasses import dataclass
from typing import Union

from .image import Image


@dataclass
class PairSources:
    """A low-frequency image *a* and a high-frequency image *b*."""
    a: Image
    b: Image


@dataclass
class TripleSources:
    """Like PairSources, with a second high-frequency image *c*."""
    a: Image
    b: Image
    c: Image


HybridSources = Union[PairSources, TripleSources]
