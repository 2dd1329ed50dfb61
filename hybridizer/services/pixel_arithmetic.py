"""
Saturating 8-bit channel arithmetic.

Both helpers accept Python ints, numpy scalars or whole arrays and work
element-wise. Sums and differences are formed in int32 so nothing wraps
before it is clamped.
"""
import numpy as np

from ..models.errors import InvalidParameterError

CHANNEL_MAX = 255


def _check_max(max_value: int) -> None:
    # results are stored as uint8
    if not 0 <= max_value <= CHANNEL_MAX:
        raise InvalidParameterError(f"max_value must be within 0..{CHANNEL_MAX}, got {max_value}")


def _unwrap(arr: np.ndarray):
    # 0-d results come back as numpy scalars, arrays stay arrays
    return arr[()]


def saturating_add(a, b, max_value: int = CHANNEL_MAX):
    """max_value if a + b exceeds it, else a + b."""
    _check_max(max_value)
    total = np.asarray(a, dtype=np.int32) + np.asarray(b, dtype=np.int32)
    return _unwrap(np.minimum(total, max_value).astype(np.uint8))


def saturating_subtract(a, b, max_value: int = CHANNEL_MAX):
    """0 if a < b, else min(max_value, a - b)."""
    _check_max(max_value)
    diff = np.asarray(a, dtype=np.int32) - np.asarray(b, dtype=np.int32)
    return _unwrap(np.clip(diff, 0, max_value).astype(np.uint8))
