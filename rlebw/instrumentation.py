from __future__ import annotations

from typing import List, Optional

NUM_COUNTERS = 10

RUNS = 0
MEMORY = 1


class Counters:
    """Operation counters filled in by the image functions that accept them.

    Nothing is shared between instances; callers decide when to reset.
    """

    def __init__(self, size: int = NUM_COUNTERS) -> None:
        if size <= 0:
            raise ValueError("Counter count must be greater than zero")
        self._counts: List[int] = [0] * size
        self._names: List[str] = [""] * size

    def __len__(self) -> int:
        return len(self._counts)

    def increment(self, index: int, amount: int = 1) -> None:
        self._counts[index] += amount

    def reset(self) -> None:
        for index in range(len(self._counts)):
            self._counts[index] = 0

    def set_name(self, index: int, label: str) -> None:
        self._names[index] = label

    def count(self, index: int) -> int:
        return self._counts[index]

    def name(self, index: int) -> str:
        return self._names[index]

    def report(self) -> str:
        """Return one "name: value" line per named counter."""
        lines = []
        for index, label in enumerate(self._names):
            if label:
                lines.append(f"{label}: {self._counts[index]}")
        return "\n".join(lines)


def bump(counters: Optional[Counters], index: int, amount: int = 1) -> None:
    if counters is not None:
        counters.increment(index, amount)
