from .hybrid_builder import HybridPipeline, save_result
from .sources import load_file_sources, render_text_sources
