from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from .image import Image


@dataclass
class HybridResult:
    """
    Every stage of one pipeline run, keyed by stage name
    (insertion order = production order). The final composite is under "t".
    """
    stages: Dict[str, Image] = field(default_factory=dict)

    @property
    def hybrid(self) -> Image:
        return self.stages["t"]
