from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from ..errors import ContractError, require
from ..instrumentation import MEMORY, RUNS, Counters, bump
from .codec import decode_row, encode_row, encoded_size, iter_runs, run_count
from .types import BLACK, WHITE, Row

logger = logging.getLogger(__name__)

# Sizes used when reporting encoded memory to the counters.
IMAGE_HEADER_BYTES = 16
ROW_POINTER_BYTES = 8
RUN_BYTES = 4


def _check_value(value: int) -> None:
    require(value in (WHITE, BLACK), f"Pixel value must be WHITE or BLACK, got {value!r}")


class BWImage:
    """Black and white image stored as one RLE Row per scan line."""

    def __init__(self, width: int, height: int, rows: Sequence[Row]) -> None:
        require(width > 0 and height > 0, f"Invalid image size {width}x{height}")
        require(len(rows) == height, f"Expected {height} rows, got {len(rows)}")
        for row in rows:
            row.validate(width)
        self._width = width
        self._height = height
        self._rows: Optional[Tuple[Row, ...]] = tuple(rows)

    @classmethod
    def create(cls, width: int, height: int, value: int) -> "BWImage":
        """Create an image with every pixel set to ``value``."""
        require(width > 0 and height > 0, f"Invalid image size {width}x{height}")
        _check_value(value)
        return cls(width, height, [Row(value, (width,)) for _ in range(height)])

    @classmethod
    def create_chessboard(
        cls,
        width: int,
        height: int,
        edge: int,
        first_value: int,
        counters: Optional[Counters] = None,
    ) -> "BWImage":
        """Create a chessboard of ``edge`` x ``edge`` squares.

        The top-left square has color ``first_value``. Both dimensions must be
        multiples of ``edge``. When ``counters`` is given, the run count of
        every row is added to ``RUNS`` and the encoded size in bytes to
        ``MEMORY``.
        """
        require(width > 0 and height > 0, f"Invalid image size {width}x{height}")
        require(edge > 0, "Square edge must be greater than zero")
        require(
            width % edge == 0 and height % edge == 0,
            f"Square edge {edge} must divide both {width} and {height}",
        )
        _check_value(first_value)
        bump(counters, MEMORY, IMAGE_HEADER_BYTES + height * ROW_POINTER_BYTES)
        rows: List[Row] = []
        for i in range(height):
            color = first_value ^ ((i // edge) % 2)
            raw_row = bytearray(width)
            for j in range(width):
                raw_row[j] = color
                if (j + 1) % edge == 0:
                    color ^= 1
            row = encode_row(width, raw_row)
            bump(counters, MEMORY, encoded_size(row) * RUN_BYTES)
            bump(counters, RUNS, run_count(row))
            rows.append(row)
        logger.debug("Built %dx%d chessboard with edge %d", width, height, edge)
        return cls(width, height, rows)

    @classmethod
    def from_pixels(cls, rows: Sequence[Sequence[int]]) -> "BWImage":
        """Encode a list of equally long 0/1 pixel rows."""
        require(len(rows) > 0, "At least one row is required")
        width = len(rows[0])
        for raw_row in rows:
            require(len(raw_row) == width, "All rows must have the same width")
        return cls(width, len(rows), [encode_row(width, raw_row) for raw_row in rows])

    @classmethod
    def from_rows(cls, width: int, rows: Sequence[Row]) -> "BWImage":
        """Build an image from copies of prebuilt rows."""
        return cls(width, len(rows), [Row(row.value, tuple(row.runs)) for row in rows])

    def _alive_rows(self) -> Tuple[Row, ...]:
        require(self._rows is not None, "Image has been destroyed")
        return self._rows

    @property
    def width(self) -> int:
        self._alive_rows()
        return self._width

    @property
    def height(self) -> int:
        self._alive_rows()
        return self._height

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._alive_rows()

    @property
    def destroyed(self) -> bool:
        return self._rows is None

    def destroy(self) -> None:
        """Release the rows. Calling it again does nothing."""
        self._rows = None

    def row_pixels(self, y: int) -> bytearray:
        rows = self._alive_rows()
        require(0 <= y < self._height, f"Row {y} out of range")
        return decode_row(self._width, rows[y])

    def iter_raw_rows(self) -> Iterator[bytearray]:
        for row in self._alive_rows():
            yield decode_row(self._width, row)

    def pixel(self, x: int, y: int) -> int:
        rows = self._alive_rows()
        require(0 <= x < self._width and 0 <= y < self._height, f"Pixel ({x}, {y}) out of range")
        pos = 0
        for value, length in iter_runs(rows[y]):
            pos += length
            if x < pos:
                return value
        raise ContractError(f"Row {y} does not cover the image width")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BWImage):
            return NotImplemented
        return is_equal(self, other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._rows is None:
            return "BWImage(destroyed)"
        return f"BWImage(width={self._width}, height={self._height})"


def is_equal(a: BWImage, b: BWImage) -> bool:
    """Compare two images pixel by pixel."""
    rows_a = a.rows
    rows_b = b.rows
    if a.width != b.width or a.height != b.height:
        return False
    width = a.width
    for row_a, row_b in zip(rows_a, rows_b):
        if row_a == row_b:
            continue
        if decode_row(width, row_a) != decode_row(width, row_b):
            return False
    return True


def is_different(a: BWImage, b: BWImage) -> bool:
    return not is_equal(a, b)


def raw_text(img: BWImage) -> str:
    """Dump the decoded pixels, one line of 0/1 digits per row."""
    lines = [f"width = {img.width} height = {img.height}", "RAW image:"]
    for raw_row in img.iter_raw_rows():
        lines.append("".join("1" if pix else "0" for pix in raw_row))
    return "\n".join(lines) + "\n"


def rle_text(img: BWImage) -> str:
    """Dump each row as its initial value followed by the run lengths."""
    lines = [f"width = {img.width} height = {img.height}", "RLE encoding:"]
    for row in img.rows:
        lines.append(" ".join(str(item) for item in (row.value,) + row.runs))
    return "\n".join(lines) + "\n"
