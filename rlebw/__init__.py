"""Black and white raster images kept in run-length encoded form."""

from .errors import AllocError, ContractError, FormatError, ImageIOError, RLEBWError
from .image import (
    BLACK,
    WHITE,
    BWImage,
    Row,
    combine,
    decode_row,
    encode_row,
    horizontal_mirror,
    image_and,
    image_neg,
    image_or,
    image_xor,
    is_different,
    is_equal,
    replicate_at_bottom,
    replicate_at_right,
    vertical_mirror,
)
from .instrumentation import Counters
from .pbm import load, save
from .settings import Settings

__version__ = "0.1.0"

__all__ = [
    "AllocError",
    "BLACK",
    "BWImage",
    "ContractError",
    "Counters",
    "FormatError",
    "ImageIOError",
    "RLEBWError",
    "Row",
    "Settings",
    "WHITE",
    "combine",
    "decode_row",
    "encode_row",
    "horizontal_mirror",
    "image_and",
    "image_neg",
    "image_or",
    "image_xor",
    "is_different",
    "is_equal",
    "load",
    "replicate_at_bottom",
    "replicate_at_right",
    "save",
    "vertical_mirror",
]
