from .converters import SUPPORTED_EXTENSIONS, export, load_bw, load_raster
from .renderer import bw_to_image, image_to_bw

__all__ = ["SUPPORTED_EXTENSIONS", "bw_to_image", "export", "image_to_bw", "load_bw", "load_raster"]
