from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import require
from .types import WHITE, Row


def encode_row(width: int, raw_row: Sequence[int]) -> Row:
    """RLE-encode the first ``width`` pixels (0/1 values) of a raw row."""
    require(width > 0, "Row width must be greater than zero")
    require(len(raw_row) >= width, f"Raw row has {len(raw_row)} pixels, expected {width}")
    prev = raw_row[0]
    require(prev in (0, 1), f"Invalid pixel value: {prev!r}")
    runs: List[int] = []
    count = 1
    for i in range(1, width):
        pix = raw_row[i]
        if pix == prev:
            count += 1
            continue
        require(pix in (0, 1), f"Invalid pixel value: {pix!r}")
        runs.append(count)
        prev = pix
        count = 1
    runs.append(count)
    return Row(int(raw_row[0]), tuple(runs))


def decode_row(width: int, row: Row, pad_to: Optional[int] = None) -> bytearray:
    """Expand a row into ``width`` bytes of 0/1, optionally WHITE-padded."""
    row.validate(width)
    size = width if pad_to is None else pad_to
    require(size >= width, "Padding must not truncate the row")
    # bytearray() zero-fills, so WHITE runs and padding need no writes.
    out = bytearray(size)
    pos = 0
    for value, length in iter_runs(row):
        if value != WHITE:
            out[pos : pos + length] = b"\x01" * length
        pos += length
    return out


def run_count(row: Row) -> int:
    return len(row.runs)


def encoded_size(row: Row) -> int:
    """Number of integers in the encoded row: value, run count and runs."""
    return len(row.runs) + 2


def iter_runs(row: Row) -> Iterator[Tuple[int, int]]:
    """Yield ``(value, length)`` for each run."""
    value = row.value
    for length in row.runs:
        yield value, length
        value ^= 1


def copy_row(row: Row, negate: bool = False) -> Row:
    """Return a new Row with the same run boundaries."""
    return Row(row.value ^ 1 if negate else row.value, row.runs)
