"""
Hybrid Image Pipeline
Low-passes image A, high-passes B (and C), overlays them, and keeps every
intermediate stage plus its spectrum for inspection.
"""
import os
import logging
from pathlib import Path
from typing import Union

from dotenv import load_dotenv
from tqdm import tqdm

from ..models.blend_parameters import BlendParameters
from ..models.hybrid_result import HybridResult
from ..models.image import Image
from ..models.sources import HybridSources, PairSources, TripleSources
from ..services.filter_service import FilterService
from ..services.image_service import ImageService
from ..services.overlay_service import OverlayService
from ..services.spectrum_service import SpectrumService

# Load environment variables
load_dotenv()

OUTPUT_DIR = os.getenv("OUTPUT_DIR_PATH", ".")
OUTPUT_EXT = os.getenv("OUTPUT_IMG_EXT", ".jpg")

logger = logging.getLogger(__name__)


class HybridPipeline:
    """
    One run = one source set (pair or triple) → HybridResult.
    No I/O here; see save_result.
    """

    def __init__(self):
        self.image_service = ImageService()
        self.filter_service = FilterService()
        self.spectrum_service = SpectrumService()
        self.overlay_service = OverlayService()

    def _add(self, result: HybridResult, name: str, img: Image, *, spectrum: bool = True) -> Image:
        result.stages[name] = img
        if spectrum:
            result.stages[f"fft_{name}"] = self.spectrum_service.fft_visualize(img)
        return img

    def run(self, sources: HybridSources, params: BlendParameters = None) -> HybridResult:
        params = params or BlendParameters.from_env()
        if isinstance(sources, TripleSources):
            raws = [sources.a, sources.b, sources.c]
        elif isinstance(sources, PairSources):
            raws = [sources.a, sources.b]
        else:
            raise TypeError(f"Expected PairSources or TripleSources, got {type(sources).__name__}")

        # fail before any filtering work
        self.image_service.require_same_size(*raws)
        h, w = self.image_service.get_image_dimensions(sources.a)
        logger.info("Building %d-image hybrid (%dx%d) with %s", len(raws), w, h, params)

        result = HybridResult()
        self._add(result, "aa", sources.a)
        self._add(result, "bb", sources.b)

        low = self._add(result, "a", self.filter_service.low_pass(sources.a, params.a_blur))
        high_b = self._add(result, "b", self.filter_service.high_pass(
            sources.b, params.b_sharpen, params.b_low_pass_amount))

        if isinstance(sources, TripleSources):
            self._add(result, "cc", sources.c)
            high_c = self._add(result, "c", self.filter_service.high_pass(
                sources.c, params.c_sharpen, params.c_low_pass_amount))
            self._add(result, "before", self.overlay_service.overlay3(*raws), spectrum=False)
            hybrid = self.overlay_service.overlay3(low, high_b, high_c)
        else:
            self._add(result, "before", self.overlay_service.overlay2(*raws), spectrum=False)
            hybrid = self.overlay_service.overlay2(low, high_b)

        self._add(result, "t", hybrid)
        logger.info("Hybrid ready: %d stages", len(result.stages))
        return result


def save_result(
    result: HybridResult,
    *,
    image_service: ImageService = None,
    out_dir: Union[str, Path] = OUTPUT_DIR,
    ext: str = OUTPUT_EXT,
    progress: bool = True,
) -> dict:
    """
    Write every stage as <out_dir>/<name><ext>.
    Returns {stage name: written path}.
    """
    image_service = image_service or ImageService()
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    if not ext.startswith("."):
        ext = f".{ext}"

    written = {}
    for name, img in tqdm(result.stages.items(), desc="save", ncols=70, disable=not progress):
        path = out_dir / f"{name}{ext}"
        image_service.save(image_service.with_path(img, path))
        written[name] = path
    logger.info("Wrote %d images to %s", len(written), out_dir)
    return written
