"""Variable numbering shared by cell and selector literals.

Ids are laid out in blocks of ``size**2``. Block 0 holds the cell literals
(is this cell marked), numbered row-major from 1. Block ``value + 2`` holds
the selector literals for clue ``value`` (is this clue value the active one
at this cell), so values ``-1 .. size-1`` occupy blocks ``1 .. size+1``.
Block boundaries only hold for in-range values, which is why every entry
point checks the value before computing an id.
"""

from __future__ import annotations

from ..core.constants import NO_CLUE
from ..core.exceptions import ConstraintValueError
from ..core.models import LiteralInfo
from .grid import KurottoGrid


class LiteralAllocator:
    """Stateless mapping from (cell, category) to a DIMACS variable id."""

    def __init__(self, grid: KurottoGrid) -> None:
        self.grid = grid
        self.size = grid.size
        self.block = grid.size * grid.size

    @property
    def num_variables(self) -> int:
        return self.block * (self.size + 2)

    @property
    def min_value(self) -> int:
        return NO_CLUE

    @property
    def max_value(self) -> int:
        return self.size - 1

    def check_cell(self, col: int, row: int) -> None:
        if not self.grid.contains(col, row):
            raise ConstraintValueError(
                f"Cell {(col, row)} is outside the {self.size}x{self.size} grid"
            )

    def check_value(self, value: int) -> None:
        if not self.min_value <= value <= self.max_value:
            raise ConstraintValueError(
                f"Clue value {value} outside [{self.min_value}, {self.max_value}] "
                f"for grid size {self.size}"
            )

    def cell_literal(self, col: int, row: int) -> int:
        self.check_cell(col, row)
        return self.size * row + col + 1

    def selector_literal(self, col: int, row: int, value: int) -> int:
        self.check_value(value)
        return self.cell_literal(col, row) + self.block * (value + 2)

    def decode(self, literal: int) -> LiteralInfo:
        """Recover the cell and category a literal refers to."""
        variable = abs(literal)
        if literal == 0 or variable > self.num_variables:
            raise ConstraintValueError(f"Literal {literal} is not allocated for size {self.size}")
        block_index, offset = divmod(variable - 1, self.block)
        row, col = divmod(offset, self.size)
        value = None if block_index == 0 else block_index - 2
        return LiteralInfo(column=col, row=row, value=value, positive=literal > 0)

    def describe(self, literal: int) -> str:
        info = self.decode(literal)
        sign = "" if info.positive else "~"
        if info.value is None:
            return f"{sign}marked({info.column},{info.row})"
        return f"{sign}clue({info.column},{info.row})={info.value}"
