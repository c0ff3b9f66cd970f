"""Append-only, ordered store of clue constraints."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Tuple

from ..core.exceptions import KurottoError
from ..core.models import Constraint
from ..utils.logger import get_logger
from .grid import KurottoGrid
from .literals import LiteralAllocator


LOGGER = get_logger(__name__)


class ConstraintStore:
    """Clues in insertion order. Duplicates are kept; each yields its own group."""

    def __init__(self, grid: KurottoGrid) -> None:
        self.grid = grid
        self._allocator = LiteralAllocator(grid)
        self._constraints: List[Constraint] = []
        self._frozen = False

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def add(self, col: int, row: int, value: int) -> Constraint:
        if self._frozen:
            raise KurottoError("Constraint store is read-only once compilation has started")
        self.validate(col, row, value)
        constraint = Constraint(column=col, row=row, value=value)
        self._constraints.append(constraint)
        return constraint

    def extend(self, triples: Iterable[Sequence[int]]) -> None:
        for col, row, value in triples:
            self.add(col, row, value)

    def freeze(self) -> None:
        if not self._frozen:
            LOGGER.debug("Freezing constraint store with %s clues", len(self._constraints))
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def validate(self, col: int, row: int, value: int) -> None:
        self._allocator.check_cell(col, row)
        self._allocator.check_value(value)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Constraint]:
        return iter(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def __getitem__(self, index: int) -> Constraint:
        return self._constraints[index]

    def as_tuples(self) -> List[Tuple[int, int, int]]:
        return [constraint.as_tuple() for constraint in self._constraints]
