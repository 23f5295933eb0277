from __future__ import annotations

from ..errors import require
from .codec import copy_row, decode_row, encode_row
from .store import BWImage


def horizontal_mirror(img: BWImage) -> BWImage:
    """Flip top-bottom. Rows are copied without decoding."""
    rows = img.rows
    return BWImage(img.width, img.height, [copy_row(row) for row in reversed(rows)])


def vertical_mirror(img: BWImage) -> BWImage:
    """Flip left-right."""
    width = img.width
    rows = []
    for row in img.rows:
        raw_row = decode_row(width, row)
        raw_row.reverse()
        rows.append(encode_row(width, raw_row))
    return BWImage(width, img.height, rows)


def replicate_at_bottom(a: BWImage, b: BWImage) -> BWImage:
    """Stack ``b`` below ``a``. Both images must have the same width."""
    require(a.width == b.width, f"Image widths differ: {a.width} vs {b.width}")
    rows = [copy_row(row) for row in a.rows]
    rows.extend(copy_row(row) for row in b.rows)
    return BWImage(a.width, a.height + b.height, rows)


def replicate_at_right(a: BWImage, b: BWImage) -> BWImage:
    """Place ``b`` to the right of ``a``. Both images must have the same height."""
    require(a.height == b.height, f"Image heights differ: {a.height} vs {b.height}")
    width = a.width + b.width
    rows = []
    for row_a, row_b in zip(a.rows, b.rows):
        raw_row = decode_row(a.width, row_a) + decode_row(b.width, row_b)
        rows.append(encode_row(width, raw_row))
    return BWImage(width, a.height, rows)
