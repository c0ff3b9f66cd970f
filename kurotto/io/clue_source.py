"""Clue source interfaces.

A clue source supplies one puzzle instance: the grid size and its clues in
order. ``JsonClueSource`` reads a concrete puzzle from disk;
``ExhaustiveClueSource`` synthesizes every possible clue for every cell and is
only meant for demonstrations and benchmarks.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Protocol, Tuple

from ..core.constants import NO_CLUE
from ..core.exceptions import ClueSourceError
from ..core.models import PuzzleInstance
from ..engine.constraint_store import ConstraintStore
from ..engine.grid import GridConfig, KurottoGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


class ClueSource(Protocol):
    """Protocol implemented by all clue providers."""

    def load(self) -> PuzzleInstance:
        ...


class JsonClueSource:
    """Load a puzzle from ``{"size": N, "clues": [...]}``.

    Each clue is either ``[col, row, value]`` or an object with ``col`` (or
    ``column``), ``row`` and ``value`` keys.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> PuzzleInstance:
        try:
            doc = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as exc:
            raise ClueSourceError(f"Cannot read clue file {self.path}: {exc}") from exc
        instance = parse_puzzle(doc)
        LOGGER.info(
            "Loaded %d clues for a %dx%d grid from %s",
            len(instance.constraints),
            instance.size,
            instance.size,
            self.path,
        )
        return instance


class ExhaustiveClueSource:
    """Every ``(col, row, value)`` combination for every cell of the grid."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ClueSourceError(f"Grid size must be positive, got {size}")
        # Fails on literal-width overflow before any clue is synthesized.
        self.grid = KurottoGrid(GridConfig(size=size))
        self.size = size

    def load(self) -> PuzzleInstance:
        constraints = [
            (col, row, value)
            for col in range(self.size)
            for row in range(self.size)
            for value in range(NO_CLUE, self.size)
        ]
        LOGGER.info("Synthesized %d demonstration clues", len(constraints))
        return PuzzleInstance(size=self.size, constraints=constraints)


def parse_puzzle(doc: Any) -> PuzzleInstance:
    if not isinstance(doc, dict):
        raise ClueSourceError("Puzzle document must be a JSON object")
    size = doc.get("size")
    if not isinstance(size, int) or isinstance(size, bool):
        raise ClueSourceError(f"Puzzle 'size' must be an integer, got {size!r}")
    raw_clues = doc.get("clues", [])
    if not isinstance(raw_clues, list):
        raise ClueSourceError("Puzzle 'clues' must be a list")
    constraints = [_parse_clue(index, raw) for index, raw in enumerate(raw_clues)]
    return PuzzleInstance(size=size, constraints=constraints)


def _parse_clue(index: int, raw: Any) -> Tuple[int, int, int]:
    if isinstance(raw, dict):
        col = raw.get("col", raw.get("column"))
        values: List[Any] = [col, raw.get("row"), raw.get("value")]
    elif isinstance(raw, list) and len(raw) == 3:
        values = list(raw)
    else:
        raise ClueSourceError(f"Clue #{index} must be [col, row, value] or an object: {raw!r}")
    for item in values:
        if not isinstance(item, int) or isinstance(item, bool):
            raise ClueSourceError(f"Clue #{index} has a non-integer field: {raw!r}")
    col, row, value = values
    return col, row, value


def build_store(instance: PuzzleInstance) -> Tuple[KurottoGrid, ConstraintStore]:
    """Create the grid and a populated constraint store for ``instance``."""

    grid = KurottoGrid(GridConfig(size=instance.size))
    store = ConstraintStore(grid)
    store.extend(instance.constraints)
    return grid, store
