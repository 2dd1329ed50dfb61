from .image import Image
from .kernel import IDENTITY_MINUS_LAPLACIAN, make_kernel
from .errors import HybridError, DimensionMismatchError, InvalidParameterError
from .blend_parameters import BlendParameters
from .sources import PairSources, TripleSources, HybridSources
from .hybrid_result import HybridResult
