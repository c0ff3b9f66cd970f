"""CLI entrypoint for the Kurotto CNF compiler."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from kurotto.core.exceptions import KurottoError
from kurotto.engine.compiler import CompilerConfig, compile_formula
from kurotto.engine.literals import LiteralAllocator
from kurotto.io.clue_source import ClueSource, ExhaustiveClueSource, JsonClueSource, build_store
from kurotto.io.dimacs import to_dimacs, write_dimacs
from kurotto.utils.logger import configure_logging, get_logger


LOGGER = get_logger("kurotto.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compile Kurotto puzzle clues into DIMACS CNF",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--clues",
        type=Path,
        metavar="FILE",
        help='JSON puzzle file: {"size": N, "clues": [[col, row, value], ...]}',
    )
    source.add_argument(
        "--exhaustive",
        action="store_true",
        help="Synthesize every clue value for every cell (demonstration only, needs --size)",
    )
    parser.add_argument("--size", type=int, help="Grid size for --exhaustive")
    parser.add_argument("--output", type=Path, help="Optional path for the DIMACS output")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Compile clue groups in this many worker processes (default 1)",
    )
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Log every clause with decoded literal names",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if args.exhaustive and args.size is None:
        parser.error("--exhaustive requires --size")
    if args.clues and args.size is not None:
        parser.error("--size is taken from the clue file; drop --size")
    if args.workers < 1:
        parser.error("--workers must be at least 1")

    clue_source: ClueSource
    try:
        if args.exhaustive:
            clue_source = ExhaustiveClueSource(args.size)
        else:
            clue_source = JsonClueSource(args.clues)
        instance = clue_source.load()
        grid, store = build_store(instance)
        formula = compile_formula(grid, store, CompilerConfig(workers=args.workers))
    except KurottoError as exc:
        LOGGER.error("Compilation failed: %s", exc)
        return 1

    if args.explain:
        literals = LiteralAllocator(grid)
        for constraint, group in zip(store, formula.groups()):
            LOGGER.info("Clue %s", constraint.as_tuple())
            for clause in group:
                rendered = " | ".join(literals.describe(lit) for lit in clause) or "<false>"
                LOGGER.info("    %s", rendered)

    comments = [f"kurotto size={grid.size} clues={len(store)}"]
    if args.output:
        write_dimacs(formula, args.output, comments)
    else:
        sys.stdout.write(to_dimacs(formula, comments))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
