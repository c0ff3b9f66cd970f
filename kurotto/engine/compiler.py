"""Clause assembly: one clause-group per clue, in clue order.

Each clue ``(i, j, p)`` contributes:

* ``p == -1``: the cell is unmarked, and the "no clue" selector is off.
* ``p == 0``: some neighbour is marked, and the isolated selector is off.
  On a 1x1 grid the neighbour clause is empty, i.e. always false.
* ``p > 0``: the size-``p`` selector is off, plus one clause per connected
  region of ``p + 1`` cells anchored at ``(i, j)``: the other members' cell
  literals, the negated anchor, and the negated boundary cells.
"""

from __future__ import annotations

import time
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from ..core.constants import ISOLATED, NO_CLUE
from ..core.exceptions import ConfigurationError
from ..core.models import Clause, ClauseGroup, Constraint, Formula, row_major
from ..utils.logger import get_logger
from .constraint_store import ConstraintStore
from .grid import KurottoGrid
from .literals import LiteralAllocator
from .regions import enumerate_regions, region_boundary


LOGGER = get_logger(__name__)


@dataclass
class CompilerConfig:
    """Tuning knobs for formula compilation."""

    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ConfigurationError(f"workers must be at least 1, got {self.workers}")


class ClauseAssembler:
    """Builds the clause-group for individual constraints of one grid."""

    def __init__(self, grid: KurottoGrid) -> None:
        self.grid = grid
        self.literals = LiteralAllocator(grid)

    def assemble(self, constraint: Constraint) -> ClauseGroup:
        col, row, value = constraint.as_tuple()
        selector = self.literals.selector_literal(col, row, value)
        if value == NO_CLUE:
            return ((-self.literals.cell_literal(col, row),), (-selector,))
        if value == ISOLATED:
            around: Clause = tuple(
                self.literals.cell_literal(nc, nr) for nc, nr in self.grid.neighbors(col, row)
            )
            return (around, (-selector,))
        return ((-selector,),) + self._region_clauses(constraint)

    def _region_clauses(self, constraint: Constraint) -> ClauseGroup:
        anchor = constraint.cell
        anchor_literal = self.literals.cell_literal(*anchor)
        clauses: List[Clause] = []
        for region in enumerate_regions(self.grid, anchor, constraint.value):
            members = [
                self.literals.cell_literal(*cell)
                for cell in sorted(region, key=row_major)
                if cell != anchor
            ]
            boundary = [
                -self.literals.cell_literal(*cell)
                for cell in sorted(region_boundary(self.grid, region), key=row_major)
            ]
            clauses.append(tuple(members) + (-anchor_literal,) + tuple(boundary))
        if not clauses:
            LOGGER.debug("No region of size %s fits at %s", constraint.value + 1, anchor)
        return tuple(clauses)


def compile_formula(
    grid: KurottoGrid,
    store: ConstraintStore,
    config: Optional[CompilerConfig] = None,
) -> Formula:
    """Compile every clue in ``store`` into a single CNF formula.

    All clues are validated before any clause is built, so a failure never
    leaves a partial formula behind. With ``config.workers > 1`` the groups
    are computed in worker processes and reassembled in store order.
    """

    config = config or CompilerConfig()
    if store.grid.size != grid.size:
        raise ConfigurationError(
            f"Constraint store was built for size {store.grid.size}, grid has size {grid.size}"
        )
    store.freeze()
    for constraint in store:
        store.validate(*constraint.as_tuple())

    assembler = ClauseAssembler(grid)
    started = time.perf_counter()
    if config.workers > 1 and len(store) > 1:
        chunksize = max(1, len(store) // (config.workers * 4))
        with ProcessPoolExecutor(max_workers=config.workers) as executor:
            groups = list(executor.map(assembler.assemble, store, chunksize=chunksize))
    else:
        groups = [assembler.assemble(constraint) for constraint in store]

    formula = Formula.from_groups(assembler.literals.num_variables, groups)
    LOGGER.info(
        "Compiled %d clues into %d clauses over %d variables in %.3fs",
        len(groups),
        formula.num_clauses,
        formula.num_variables,
        time.perf_counter() - started,
    )
    return formula
