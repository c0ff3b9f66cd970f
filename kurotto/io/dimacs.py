"""DIMACS CNF export and parsing."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from pysat.formula import CNF

from ..core.exceptions import DimacsError
from ..core.models import Clause, Formula
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def to_dimacs(formula: Formula, comments: Iterable[str] = ()) -> str:
    """Render ``formula`` as DIMACS text; an empty clause is the line ``0``."""

    lines = [f"c {comment}" for comment in comments]
    lines.append(f"p cnf {formula.num_variables} {formula.num_clauses}")
    for clause in formula.clauses:
        lines.append(" ".join([*map(str, clause), "0"]))
    return "\n".join(lines) + "\n"


def write_dimacs(formula: Formula, path: Path | str, comments: Iterable[str] = ()) -> Path:
    target = Path(path)
    target.write_text(to_dimacs(formula, comments), encoding="utf-8")
    LOGGER.info("Wrote %d clauses to %s", formula.num_clauses, target)
    return target


def parse_dimacs(text: str) -> Formula:
    """Parse DIMACS text into a single-group :class:`Formula`.

    Clauses may span lines or share one; ``c`` lines are ignored.
    """

    num_variables = None
    declared_clauses = 0
    clauses: List[Clause] = []
    current: List[int] = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("c"):
            continue
        if line.startswith("p"):
            parts = line.split()
            if len(parts) != 4 or parts[1] != "cnf" or num_variables is not None:
                raise DimacsError(f"Line {line_no}: invalid problem line {line!r}")
            try:
                num_variables, declared_clauses = int(parts[2]), int(parts[3])
            except ValueError as exc:
                raise DimacsError(f"Line {line_no}: invalid problem line {line!r}") from exc
            if num_variables < 0 or declared_clauses < 0:
                raise DimacsError(f"Line {line_no}: negative count in problem line {line!r}")
            continue
        if num_variables is None:
            raise DimacsError(f"Line {line_no}: clause before problem line")
        for token in line.split():
            try:
                literal = int(token)
            except ValueError as exc:
                raise DimacsError(f"Line {line_no}: invalid literal {token!r}") from exc
            if literal == 0:
                clauses.append(tuple(current))
                current = []
            elif abs(literal) > num_variables:
                raise DimacsError(
                    f"Line {line_no}: literal {literal} exceeds {num_variables} variables"
                )
            else:
                current.append(literal)

    if num_variables is None:
        raise DimacsError("Missing problem line")
    if current:
        raise DimacsError("Missing terminating 0 on last clause")
    if len(clauses) != declared_clauses:
        raise DimacsError(f"Header declares {declared_clauses} clauses, found {len(clauses)}")
    return Formula(
        num_variables=num_variables,
        clauses=tuple(clauses),
        group_lengths=(len(clauses),) if clauses else (),
    )


def to_pysat(formula: Formula) -> CNF:
    """Convert to a PySAT CNF formula for in-process solver use."""

    cnf = CNF()
    cnf.nv = formula.num_variables
    cnf.clauses = [list(clause) for clause in formula.clauses]
    return cnf
