"""Binary PBM (P4) reader and writer.

See http://netpbm.sourceforge.net/doc/pbm.html. The header is the magic
``P4``, the width and the height as ASCII decimals separated by whitespace
(comment lines starting with ``#`` may appear before each number) and a
single whitespace byte. Each row follows as ``ceil(width / 8)`` bytes, most
significant bit first, 1 meaning black.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from ..errors import AllocError, FormatError, ImageIOError
from ..image.codec import decode_row, encode_row
from ..image.store import BWImage
from ..image.types import Row
from .bits import bytes_per_row, pack_bits, unpack_bits

logger = logging.getLogger(__name__)

MAGIC = b"P4"
WHITESPACE = b" \t\n\r\x0b\x0c"
# Dimensions are stored as at most 10 decimal digits.
MAX_DIGITS = 10

PathLike = Union[str, Path]


class _HeaderReader:
    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending: Optional[bytes] = None

    def read_byte(self) -> bytes:
        if self._pending is not None:
            byte, self._pending = self._pending, None
            return byte
        return self._stream.read(1)

    def unread(self, byte: bytes) -> None:
        self._pending = byte

    def skip_separators(self) -> int:
        """Skip whitespace and comments; return how many were skipped."""
        skipped = 0
        while True:
            byte = self.read_byte()
            if not byte:
                raise FormatError("Unexpected end of file in header")
            if byte == b"#":
                self._skip_comment()
            elif byte not in WHITESPACE:
                self.unread(byte)
                return skipped
            skipped += 1

    def _skip_comment(self) -> None:
        while True:
            byte = self.read_byte()
            if not byte:
                raise FormatError("Unexpected end of file in header comment")
            if byte == b"\n":
                return

    def read_number(self, label: str) -> int:
        if self.skip_separators() == 0:
            raise FormatError(f"Whitespace expected before {label}")
        digits = bytearray()
        while True:
            byte = self.read_byte()
            if byte and byte.isdigit():
                digits += byte
                if len(digits) > MAX_DIGITS:
                    raise FormatError(f"Invalid {label}: more than {MAX_DIGITS} digits")
                continue
            if byte:
                self.unread(byte)
            break
        if not digits:
            raise FormatError(f"Invalid {label}: expected a non-negative decimal number")
        return int(digits)


def read_header(stream: BinaryIO) -> Tuple[int, int]:
    """Parse the P4 header and leave ``stream`` at the first pixel byte."""
    magic = stream.read(2)
    if magic != MAGIC:
        raise FormatError(f"Invalid file format: expected {MAGIC!r} magic, got {magic!r}")
    reader = _HeaderReader(stream)
    width = reader.read_number("width")
    height = reader.read_number("height")
    byte = reader.read_byte()
    if not byte or byte not in WHITESPACE:
        raise FormatError("Whitespace expected after height")
    if width <= 0 or height <= 0:
        raise FormatError(f"Invalid image size {width}x{height}")
    return width, height


def read_pbm(stream: BinaryIO) -> BWImage:
    width, height = read_header(stream)
    nbytes = bytes_per_row(width)
    rows: List[Row] = []
    try:
        for y in range(height):
            data = stream.read(nbytes)
            if len(data) != nbytes:
                raise FormatError(f"Truncated pixel data: row {y} has {len(data)} of {nbytes} bytes")
            rows.append(encode_row(width, unpack_bits(data)))
    except OverflowError as exc:
        raise FormatError(f"Image size {width}x{height} is too large") from exc
    except MemoryError as exc:
        raise AllocError(f"Out of memory loading a {width}x{height} image") from exc
    return BWImage(width, height, rows)


def write_pbm(img: BWImage, stream: BinaryIO) -> None:
    width = img.width
    stream.write(f"P4\n{width} {img.height}\n".encode("ascii"))
    padded = bytes_per_row(width) * 8
    for row in img.rows:
        stream.write(pack_bits(decode_row(width, row, pad_to=padded)))


def loads(data: bytes) -> BWImage:
    return read_pbm(io.BytesIO(data))


def dumps(img: BWImage) -> bytes:
    buf = io.BytesIO()
    write_pbm(img, buf)
    return buf.getvalue()


def load(path: PathLike) -> BWImage:
    """Load a binary PBM file."""
    try:
        with open(path, "rb") as handle:
            img = read_pbm(handle)
    except OSError as exc:
        raise ImageIOError(f"Cannot read {path}: {exc}") from exc
    logger.debug("Loaded %s (%dx%d)", path, img.width, img.height)
    return img


def save(img: BWImage, path: PathLike) -> None:
    """Save an image as binary PBM. A failed write may leave a partial file."""
    try:
        with open(path, "wb") as handle:
            write_pbm(img, handle)
    except OSError as exc:
        raise ImageIOError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Saved %s (%dx%d)", path, img.width, img.height)
