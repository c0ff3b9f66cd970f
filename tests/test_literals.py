import unittest

from kurotto.core.exceptions import ConfigurationError, ConstraintValueError
from kurotto.engine.grid import GridConfig, KurottoGrid
from kurotto.engine.literals import LiteralAllocator


class LiteralNumberingTests(unittest.TestCase):
    def test_cell_literals_are_row_major_bijection(self) -> None:
        for size in range(1, 9):
            literals = LiteralAllocator(KurottoGrid.of_size(size))
            ids = [literals.cell_literal(col, row) for col, row in literals.grid.cells()]
            self.assertEqual(ids, list(range(1, size * size + 1)))

    def test_selector_blocks_never_collide(self) -> None:
        for size in range(1, 9):
            literals = LiteralAllocator(KurottoGrid.of_size(size))
            cells = list(literals.grid.cells())
            seen = {literals.cell_literal(c, r) for c, r in cells}
            for value in range(-1, size):
                block = {literals.selector_literal(c, r, value) for c, r in cells}
                self.assertEqual(len(block), size * size)
                self.assertFalse(block & seen, f"size={size} value={value}")
                seen |= block
            self.assertNotIn(0, seen)
            self.assertEqual(max(seen), literals.num_variables)
            self.assertEqual(len(seen), literals.num_variables)

    def test_selector_formula(self) -> None:
        literals = LiteralAllocator(KurottoGrid.of_size(3))
        self.assertEqual(literals.cell_literal(2, 1), 6)
        self.assertEqual(literals.selector_literal(2, 1, -1), 15)
        self.assertEqual(literals.selector_literal(2, 1, 0), 24)
        self.assertEqual(literals.selector_literal(2, 1, 2), 42)
        self.assertEqual(literals.num_variables, 45)

    def test_out_of_range_value_is_rejected(self) -> None:
        literals = LiteralAllocator(KurottoGrid.of_size(3))
        for value in (-2, 3, 10):
            with self.assertRaises(ConstraintValueError):
                literals.selector_literal(0, 0, value)
        with self.assertRaises(ValueError):
            literals.selector_literal(0, 0, 3)

    def test_out_of_bounds_cell_is_rejected(self) -> None:
        literals = LiteralAllocator(KurottoGrid.of_size(2))
        with self.assertRaises(ConstraintValueError):
            literals.cell_literal(2, 0)
        with self.assertRaises(ConstraintValueError):
            literals.selector_literal(0, -1, 0)

    def test_decode_and_describe(self) -> None:
        literals = LiteralAllocator(KurottoGrid.of_size(3))
        info = literals.decode(24)
        self.assertEqual((info.column, info.row, info.value, info.positive), (2, 1, 0, True))
        self.assertTrue(info.is_selector)
        info = literals.decode(-6)
        self.assertEqual((info.column, info.row, info.value, info.positive), (2, 1, None, False))
        self.assertEqual(literals.decode(15).value, -1)
        self.assertEqual(literals.describe(-24), "~clue(2,1)=0")
        self.assertEqual(literals.describe(6), "marked(2,1)")
        with self.assertRaises(ConstraintValueError):
            literals.decode(46)
        with self.assertRaises(ConstraintValueError):
            literals.decode(0)


class GridTests(unittest.TestCase):
    def test_neighbors_exclude_wraparound(self) -> None:
        grid = KurottoGrid.of_size(3)
        self.assertEqual(grid.neighbors(0, 0), [(1, 0), (0, 1)])
        self.assertEqual(grid.neighbors(1, 1), [(0, 1), (1, 0), (2, 1), (1, 2)])
        self.assertEqual(grid.neighbors(2, 1), [(1, 1), (2, 0), (2, 2)])
        self.assertEqual(KurottoGrid.of_size(1).neighbors(0, 0), [])

    def test_non_positive_size_is_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            KurottoGrid(GridConfig(size=0))

    def test_literal_width_is_enforced(self) -> None:
        KurottoGrid(GridConfig(size=3, max_literal=45))
        with self.assertRaises(ConfigurationError):
            KurottoGrid(GridConfig(size=3, max_literal=44))
        KurottoGrid(GridConfig(size=1289))
        with self.assertRaises(ConfigurationError):
            KurottoGrid(GridConfig(size=1290))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
