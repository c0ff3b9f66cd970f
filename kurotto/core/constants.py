"""Shared constants for the Kurotto CNF compiler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


NO_CLUE = -1
ISOLATED = 0

# Literal width of the target solver format (signed 32-bit).
MAX_LITERAL = 2**31 - 1

# Column/row steps: left, up, right, down.
ORTHOGONAL_STEPS: Tuple[Tuple[int, int], ...] = ((-1, 0), (0, -1), (1, 0), (0, 1))


@dataclass(frozen=True)
class Bounds:
    """Square grid bounds helper."""

    size: int

    def contains(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size
