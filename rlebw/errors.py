from __future__ import annotations


class ContractError(AssertionError):
    """Raised when a caller breaks a precondition (programming error)."""


class RLEBWError(Exception):
    """Base class for recoverable failures."""


class FormatError(RLEBWError, ValueError):
    """Malformed PBM header or pixel data."""


class ImageIOError(RLEBWError, OSError):
    """A file could not be opened, read or written."""


class AllocError(RLEBWError, MemoryError):
    """Not enough memory to build an image."""


def require(condition: bool, message: str) -> None:
    """Raise ContractError with message unless condition holds."""
    if not condition:
        raise ContractError(message)
