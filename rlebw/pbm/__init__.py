from .bits import bytes_per_row, pack_bits, unpack_bits
from .codec import MAGIC, dumps, load, loads, read_header, read_pbm, save, write_pbm

__all__ = [
    "MAGIC",
    "bytes_per_row",
    "dumps",
    "load",
    "loads",
    "pack_bits",
    "read_header",
    "read_pbm",
    "save",
    "unpack_bits",
    "write_pbm",
]
