"""Connected-region enumeration and region boundaries."""

from __future__ import annotations

from typing import Dict, List, Set, Tuple

from ..core.models import Cell, Region, canonical_key
from ..utils.logger import get_logger
from .grid import KurottoGrid


LOGGER = get_logger(__name__)


def enumerate_regions(grid: KurottoGrid, anchor: Cell, p: int) -> List[Region]:
    """Return every connected region of ``p + 1`` cells that contains ``anchor``.

    Regions are grown one cell per round from the singleton ``{anchor}``. Each
    round extends every held region by every non-member neighbour of each of
    its members, keeping a candidate only if no other path already produced
    the same cell set in that round. The result is sorted by canonical key and
    is empty when fewer than ``p + 1`` cells are reachable.
    """

    if p < 0:
        raise ValueError(f"Region growth count must be non-negative, got {p}")

    frontier: List[Region] = [frozenset((anchor,))]
    for round_no in range(1, p + 1):
        accepted: Dict[Tuple[Tuple[int, int], ...], Region] = {}
        for region in frontier:
            for col, row in region:
                for neighbor in grid.neighbors(col, row):
                    if neighbor in region:
                        continue
                    candidate = region | {neighbor}
                    key = canonical_key(candidate)
                    if key not in accepted:
                        accepted[key] = candidate
        frontier = list(accepted.values())
        LOGGER.debug(
            "Anchor %s round %s/%s: %s distinct regions", anchor, round_no, p, len(frontier)
        )
        if not frontier:
            break

    return sorted(frontier, key=canonical_key)


def region_boundary(grid: KurottoGrid, region: Region) -> Region:
    """Cells adjacent to at least one member of ``region`` but not in it."""

    boundary: Set[Cell] = set()
    for col, row in region:
        for neighbor in grid.neighbors(col, row):
            if neighbor not in region:
                boundary.add(neighbor)
    return frozenset(boundary)
