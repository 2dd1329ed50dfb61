from __future__ import annotations
from dataclasses import dataclass
import math
import os

from dotenv import load_dotenv

from .errors import InvalidParameterError

# Load environment variables
load_dotenv()

DEFAULT_A_BLUR = 4.5
DEFAULT_B_SHARPEN = 0.545
DEFAULT_C_SHARPEN = 0.0


@dataclass
class BlendParameters:
    """
    Value-object holding the filter amounts of one hybrid run.

    a_blur      : Gaussian sigma of the low-pass image A
    b_sharpen   : center weight scale of B's sharpen kernel
    c_sharpen   : center weight scale of C's sharpen kernel
    b_low_pass  : sigma subtracted in B's high pass (None → a_blur)
    c_low_pass  : sigma subtracted in C's high pass (None → a_blur)
    """
    a_blur:     float = DEFAULT_A_BLUR
    b_sharpen:  float = DEFAULT_B_SHARPEN
    c_sharpen:  float = DEFAULT_C_SHARPEN
    b_low_pass: float | None = None
    c_low_pass: float | None = None

    def __post_init__(self):
        for name in ("a_blur", "b_low_pass", "c_low_pass"):
            value = getattr(self, name)
            if value is not None and not (math.isfinite(value) and value >= 0):
                raise InvalidParameterError(f"{name} must be a finite sigma >= 0, got {value}")
        for name in ("b_sharpen", "c_sharpen"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidParameterError(f"{name} must be finite, got {getattr(self, name)}")

    # ── Resolved low-pass radii for the high-pass images ─────────────
    @property
    def b_low_pass_amount(self) -> float:
        return self.a_blur if self.b_low_pass is None else self.b_low_pass

    @property
    def c_low_pass_amount(self) -> float:
        return self.a_blur if self.c_low_pass is None else self.c_low_pass

    @classmethod
    def from_env(cls, **overrides) -> "BlendParameters":
        """
        Build parameters from HYBRID_* environment variables;
        keyword overrides that are not None win over the environment.
        """
        values = {
            "a_blur": float(os.getenv("HYBRID_A_BLUR", str(DEFAULT_A_BLUR))),
            "b_sharpen": float(os.getenv("HYBRID_B_SHARPEN", str(DEFAULT_B_SHARPEN))),
            "c_sharpen": float(os.getenv("HYBRID_C_SHARPEN", str(DEFAULT_C_SHARPEN))),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
