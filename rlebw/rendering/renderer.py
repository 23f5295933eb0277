from __future__ import annotations

from typing import List

from PIL import Image

from ..image.codec import decode_row, encode_row
from ..image.store import BWImage
from ..image.types import BLACK, WHITE, Row
from ..pbm.bits import bytes_per_row, pack_bits, unpack_bits
from ..settings import DEFAULT_THRESHOLD_BIAS

# Pillow's inverted 1-bit raw mode packs rows exactly like PBM: MSB first, 1 = black.
PBM_RAWMODE = "1;I"


def image_to_bw(img: Image.Image, dither: bool, threshold_bias: int = DEFAULT_THRESHOLD_BIAS) -> BWImage:
    """Convert a Pillow image to a BW image.

    With ``dither`` the conversion uses Pillow's Floyd-Steinberg mode "1";
    otherwise pixels darker than the mean gray minus ``threshold_bias`` become
    BLACK.
    """
    width, height = img.size
    rows: List[Row] = []
    if dither:
        data = img.convert("1").tobytes("raw", PBM_RAWMODE)
        stride = bytes_per_row(width)
        for y in range(height):
            rows.append(encode_row(width, unpack_bits(data[y * stride : (y + 1) * stride])))
        return BWImage(width, height, rows)
    data = img.convert("L").tobytes()
    avg = sum(data) / len(data) if data else 0
    threshold = int(max(0, min(255, avg - threshold_bias)))
    for y in range(height):
        line = data[y * width : (y + 1) * width]
        rows.append(encode_row(width, [BLACK if p <= threshold else WHITE for p in line]))
    return BWImage(width, height, rows)


def bw_to_image(bw: BWImage) -> Image.Image:
    """Return a Pillow mode "1" image (BLACK pixels become 0)."""
    width = bw.width
    padded = bytes_per_row(width) * 8
    data = b"".join(pack_bits(decode_row(width, row, pad_to=padded)) for row in bw.rows)
    return Image.frombytes("1", (width, bw.height), data, "raw", PBM_RAWMODE)
