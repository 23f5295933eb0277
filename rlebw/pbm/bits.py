from __future__ import annotations

from typing import Sequence


def bytes_per_row(width: int) -> int:
    return (width + 7) // 8


def pack_bits(raw_row: Sequence[int]) -> bytes:
    """Pack 0/1 pixels into bytes, most significant bit first.

    A trailing partial byte is padded with 0 (WHITE) bits.
    """
    out = bytearray()
    for i in range(0, len(raw_row), 8):
        chunk = raw_row[i : i + 8]
        value = 0
        for bit, pix in enumerate(chunk):
            if pix:
                value |= 1 << (7 - bit)
        out.append(value)
    return bytes(out)


def unpack_bits(data: bytes) -> bytearray:
    """Expand each byte into 8 pixels, most significant bit first."""
    out = bytearray(len(data) * 8)
    for b, byte in enumerate(data):
        base = 8 * b
        for bit in range(8):
            out[base + bit] = (byte >> (7 - bit)) & 1
    return out
