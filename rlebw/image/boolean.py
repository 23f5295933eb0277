from __future__ import annotations

import operator
from typing import Callable, Dict, List, Optional

from ..errors import require
from ..instrumentation import RUNS, Counters, bump
from .codec import copy_row, decode_row, encode_row
from .store import BWImage
from .types import Row

BitOp = Callable[[int, int], int]

OPERATORS: Dict[str, BitOp] = {
    "and": operator.and_,
    "or": operator.or_,
    "xor": operator.xor,
}

METHOD_RUNS = "runs"
METHOD_PIXELS = "pixels"
METHODS = (METHOD_RUNS, METHOD_PIXELS)


def merge_rows(row_a: Row, row_b: Row, op: BitOp, counters: Optional[Counters] = None) -> Row:
    """Combine two rows of equal width by walking both run lists.

    Each step consumes the pixels up to the nearer run boundary and either
    extends the last output run or opens a new one, so the output runs are
    maximal. ``RUNS`` is incremented once per step.
    """
    runs_a = row_a.runs
    runs_b = row_b.runs
    value_a = row_a.value
    value_b = row_b.value
    left_a = runs_a[0]
    left_b = runs_b[0]
    i = j = 0

    first = op(value_a, value_b)
    current = first
    out: List[int] = [0]
    while i < len(runs_a):
        span = min(left_a, left_b)
        combined = op(value_a, value_b)
        if combined == current:
            out[-1] += span
        else:
            out.append(span)
            current = combined
        bump(counters, RUNS)

        left_a -= span
        left_b -= span
        if left_b == 0:
            j += 1
            if j == len(runs_b):
                if left_a == 0:
                    i += 1
                break
            left_b = runs_b[j]
            value_b ^= 1
        if left_a == 0:
            i += 1
            if i < len(runs_a):
                left_a = runs_a[i]
                value_a ^= 1
    require(i == len(runs_a) and j == len(runs_b), "Rows have different widths")
    return Row(first, tuple(out))


def combine_pixel_rows(
    width: int, row_a: Row, row_b: Row, op: BitOp, counters: Optional[Counters] = None
) -> Row:
    """Decode both rows, apply ``op`` to each pixel pair and re-encode."""
    raw_a = decode_row(width, row_a)
    raw_b = decode_row(width, row_b)
    raw = bytearray(width)
    for x in range(width):
        raw[x] = op(raw_a[x], raw_b[x])
        bump(counters, RUNS)
    return encode_row(width, raw)


def combine(
    a: BWImage,
    b: BWImage,
    op: str,
    method: str = METHOD_RUNS,
    counters: Optional[Counters] = None,
) -> BWImage:
    """Return a new image holding ``a <op> b`` for every pixel."""
    require(
        a.width == b.width and a.height == b.height,
        f"Image sizes differ: {a.width}x{a.height} vs {b.width}x{b.height}",
    )
    func = OPERATORS.get(op)
    if func is None:
        raise ValueError(f"Unknown boolean operator: {op}")
    width = a.width
    if method == METHOD_RUNS:
        rows = [merge_rows(ra, rb, func, counters) for ra, rb in zip(a.rows, b.rows)]
    elif method == METHOD_PIXELS:
        rows = [combine_pixel_rows(width, ra, rb, func, counters) for ra, rb in zip(a.rows, b.rows)]
    else:
        raise ValueError(f"Unknown boolean method: {method}")
    return BWImage(width, a.height, rows)


def image_neg(img: BWImage) -> BWImage:
    """Complement every pixel by flipping each row's initial value."""
    return BWImage(img.width, img.height, [copy_row(row, negate=True) for row in img.rows])


def image_and(
    a: BWImage, b: BWImage, method: str = METHOD_RUNS, counters: Optional[Counters] = None
) -> BWImage:
    return combine(a, b, "and", method, counters)


def image_or(
    a: BWImage, b: BWImage, method: str = METHOD_RUNS, counters: Optional[Counters] = None
) -> BWImage:
    return combine(a, b, "or", method, counters)


def image_xor(
    a: BWImage, b: BWImage, method: str = METHOD_RUNS, counters: Optional[Counters] = None
) -> BWImage:
    return combine(a, b, "xor", method, counters)
