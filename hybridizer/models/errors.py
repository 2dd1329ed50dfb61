class HybridError(Exception):
    """Base class for every error raised by the hybrid image core."""


class DimensionMismatchError(HybridError, ValueError):
    """Images that must share width and height do not."""


class InvalidParameterError(HybridError, ValueError):
    """A blur or sharpen amount cannot be used by the filters."""
