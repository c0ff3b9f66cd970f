import tempfile
import unittest
from pathlib import Path

from kurotto.core.exceptions import DimacsError
from kurotto.engine.compiler import compile_formula
from kurotto.io.clue_source import ExhaustiveClueSource, build_store
from kurotto.io.dimacs import parse_dimacs, to_dimacs, to_pysat, write_dimacs
from kurotto.core.models import Formula, PuzzleInstance


def _corner_formula() -> Formula:
    return compile_formula(*build_store(PuzzleInstance(size=2, constraints=[(0, 0, 1)])))


class DimacsExportTests(unittest.TestCase):
    def test_text_layout(self) -> None:
        text = to_dimacs(_corner_formula(), comments=["corner clue"])
        self.assertEqual(
            text,
            "c corner clue\n"
            "p cnf 16 3\n"
            "-13 0\n"
            "2 -1 -3 -4 0\n"
            "3 -1 -2 -4 0\n",
        )

    def test_round_trip_preserves_clauses(self) -> None:
        formula = compile_formula(*build_store(ExhaustiveClueSource(3).load()))
        parsed = parse_dimacs(to_dimacs(formula))
        self.assertEqual(parsed.num_variables, formula.num_variables)
        self.assertEqual(parsed.clauses, formula.clauses)
        self.assertEqual(parsed.group_lengths, (formula.num_clauses,))

    def test_empty_clause_round_trip(self) -> None:
        formula = compile_formula(*build_store(PuzzleInstance(size=1, constraints=[(0, 0, 0)])))
        text = to_dimacs(formula)
        self.assertEqual(text, "p cnf 3 2\n0\n-3 0\n")
        self.assertEqual(parse_dimacs(text).clauses, ((), (-3,)))

    def test_parse_handles_comments_and_split_clauses(self) -> None:
        parsed = parse_dimacs("c hello\np cnf 3 2\n1 -2\n3 0 2 0\n")
        self.assertEqual(parsed.clauses, ((1, -2, 3), (2,)))

    def test_parse_errors(self) -> None:
        bad_inputs = [
            "1 2 0\n",
            "p cnf 2 1\n1 2\n",
            "p cnf 2 2\n1 2 0\n",
            "p cnf 2 1\n1 x 0\n",
            "p cnf 2 1\n1 3 0\n",
            "p dnf 2 1\n1 0\n",
            "p cnf -1 0\n",
            "p cnf 2 -1\n",
            "",
        ]
        for text in bad_inputs:
            with self.assertRaises(DimacsError, msg=repr(text)):
                parse_dimacs(text)

    def test_write_dimacs(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            target = write_dimacs(_corner_formula(), Path(tmpdir) / "corner.cnf")
            self.assertTrue(target.read_text(encoding="utf-8").startswith("p cnf 16 3\n"))

    def test_to_pysat(self) -> None:
        cnf = to_pysat(_corner_formula())
        self.assertEqual(cnf.nv, 16)
        self.assertEqual(cnf.clauses, [[-13], [2, -1, -3, -4], [3, -1, -2, -4]])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
