from .pixel_arithmetic import saturating_add, saturating_subtract, CHANNEL_MAX
from .image_service import ImageService
from .filter_service import FilterService
from .spectrum_service import SpectrumService
from .overlay_service import OverlayService
