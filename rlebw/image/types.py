from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..errors import require

WHITE = 0
BLACK = 1


@dataclass(frozen=True)
class Row:
    """Run-length encoded scan line.

    ``value`` is the color of the first run; run colors alternate from there.
    The run count is ``len(runs)``.
    """

    value: int
    runs: Tuple[int, ...]

    def validate(self, width: int) -> None:
        """Check the row encodes exactly ``width`` pixels."""
        require(self.value in (WHITE, BLACK), f"Invalid initial pixel value: {self.value!r}")
        require(len(self.runs) > 0, "Row has no runs")
        require(all(length >= 1 for length in self.runs), "Run lengths must be positive")
        require(sum(self.runs) == width, f"Runs cover {sum(self.runs)} pixels, expected {width}")
