from .boolean import (
    METHOD_PIXELS,
    METHOD_RUNS,
    METHODS,
    OPERATORS,
    combine,
    combine_pixel_rows,
    image_and,
    image_neg,
    image_or,
    image_xor,
    merge_rows,
)
from .codec import copy_row, decode_row, encode_row, encoded_size, iter_runs, run_count
from .geometry import horizontal_mirror, replicate_at_bottom, replicate_at_right, vertical_mirror
from .store import BWImage, is_different, is_equal, raw_text, rle_text
from .types import BLACK, WHITE, Row

__all__ = [
    "BLACK",
    "BWImage",
    "METHOD_PIXELS",
    "METHOD_RUNS",
    "METHODS",
    "OPERATORS",
    "Row",
    "WHITE",
    "combine",
    "combine_pixel_rows",
    "copy_row",
    "decode_row",
    "encode_row",
    "encoded_size",
    "horizontal_mirror",
    "image_and",
    "image_neg",
    "image_or",
    "image_xor",
    "is_different",
    "is_equal",
    "iter_runs",
    "merge_rows",
    "raw_text",
    "replicate_at_bottom",
    "replicate_at_right",
    "rle_text",
    "run_count",
    "vertical_mirror",
]
