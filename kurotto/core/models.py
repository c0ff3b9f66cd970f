"""Data models shared by the compiler, the clue sources and the exporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Tuple

Cell = Tuple[int, int]
Region = FrozenSet[Cell]
Clause = Tuple[int, ...]
ClauseGroup = Tuple[Clause, ...]


def row_major(cell: Cell) -> Tuple[int, int]:
    """Sort key ordering cells the way cell literals are numbered."""
    col, row = cell
    return row, col


def canonical_key(region: Region) -> Tuple[Tuple[int, int], ...]:
    """Deterministic identity of a region, independent of how it was grown.

    The key is the sorted ``(row, col)`` sequence, so comparing keys orders
    regions by their row-major cell literals.
    """
    return tuple(sorted(row_major(cell) for cell in region))


@dataclass(frozen=True)
class Constraint:
    """A clue attached to a cell: ``value`` ranges over ``[-1, size-1]``."""

    column: int
    row: int
    value: int

    @property
    def cell(self) -> Cell:
        return self.column, self.row

    def as_tuple(self) -> Tuple[int, int, int]:
        return self.column, self.row, self.value


@dataclass(frozen=True)
class LiteralInfo:
    """Decoded meaning of a literal."""

    column: int
    row: int
    value: Optional[int]
    positive: bool

    @property
    def is_selector(self) -> bool:
        return self.value is not None


@dataclass(frozen=True)
class Formula:
    """Flat CNF with clause-group boundaries kept as metadata.

    ``group_lengths[k]`` is the number of clauses emitted for the k-th
    constraint; the clauses of all groups are stored back to back.
    """

    num_variables: int
    clauses: Tuple[Clause, ...] = ()
    group_lengths: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if sum(self.group_lengths) != len(self.clauses):
            raise ValueError(
                f"Group lengths cover {sum(self.group_lengths)} clauses, "
                f"formula holds {len(self.clauses)}"
            )

    @classmethod
    def from_groups(cls, num_variables: int, groups: List[ClauseGroup]) -> "Formula":
        clauses: List[Clause] = []
        for group in groups:
            clauses.extend(group)
        return cls(
            num_variables=num_variables,
            clauses=tuple(clauses),
            group_lengths=tuple(len(group) for group in groups),
        )

    @property
    def num_clauses(self) -> int:
        return len(self.clauses)

    def groups(self) -> Iterator[ClauseGroup]:
        start = 0
        for length in self.group_lengths:
            yield self.clauses[start:start + length]
            start += length


@dataclass
class PuzzleInstance:
    """What a clue source supplies: the grid size and its clues in order."""

    size: int
    constraints: List[Tuple[int, int, int]] = field(default_factory=list)
