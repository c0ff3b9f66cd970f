"""Grid geometry and 4-adjacency."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from ..core.constants import MAX_LITERAL, ORTHOGONAL_STEPS, Bounds
from ..core.exceptions import ConfigurationError
from ..core.models import Cell
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values describing the puzzle grid."""

    size: int
    max_literal: int = MAX_LITERAL

    def bounds(self) -> Bounds:
        return Bounds(size=self.size)

    def largest_literal(self) -> int:
        # Last cell of the selector block for value size-1 (block index size+1).
        return self.size * self.size * (self.size + 2)


class KurottoGrid:
    """Square ``size x size`` grid; owns no state besides its geometry."""

    def __init__(self, config: GridConfig) -> None:
        if config.size < 1:
            raise ConfigurationError(f"Grid size must be positive, got {config.size}")
        largest = config.largest_literal()
        if largest > config.max_literal:
            raise ConfigurationError(
                f"Grid size {config.size} needs literal ids up to {largest}, "
                f"exceeding the {config.max_literal} limit"
            )
        self.config = config
        self.size = config.size
        self.bounds = config.bounds()
        LOGGER.debug("Grid %sx%s, literal ids up to %s", self.size, self.size, largest)

    @classmethod
    def of_size(cls, size: int) -> "KurottoGrid":
        return cls(GridConfig(size=size))

    def contains(self, col: int, row: int) -> bool:
        return self.bounds.contains(col, row)

    def neighbors(self, col: int, row: int) -> List[Cell]:
        """In-bounds orthogonal neighbours in left, up, right, down order."""
        result: List[Cell] = []
        for dc, dr in ORTHOGONAL_STEPS:
            nc, nr = col + dc, row + dr
            if self.bounds.contains(nc, nr):
                result.append((nc, nr))
        return result

    def cells(self) -> Iterator[Cell]:
        """Every cell in row-major order."""
        for row in range(self.size):
            for col in range(self.size):
                yield col, row

    def __repr__(self) -> str:
        return f"KurottoGrid(size={self.size})"
