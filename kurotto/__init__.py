"""CNF compiler for Kurotto grid puzzles.

This package exposes the public API surface via:

- ``kurotto.engine.compiler.compile_formula``: turns clues into a CNF formula.
- ``kurotto.engine.grid.KurottoGrid``: grid geometry and adjacency.
- ``kurotto.engine.constraint_store.ConstraintStore``: ordered clue storage.
- ``kurotto.io`` helpers: clue sources and DIMACS export.
"""

from .engine.compiler import ClauseAssembler, CompilerConfig, compile_formula
from .engine.constraint_store import ConstraintStore
from .engine.grid import GridConfig, KurottoGrid
from .engine.literals import LiteralAllocator

__all__ = [
    "ClauseAssembler",
    "CompilerConfig",
    "compile_formula",
    "ConstraintStore",
    "GridConfig",
    "KurottoGrid",
    "LiteralAllocator",
]

__version__ = "0.1.0"
