from .image_repository import ImageRepository
from .text_repository import TextRepository
