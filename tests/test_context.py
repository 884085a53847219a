# tests/test_context.py
import unittest

from core.context import SearchContext
from core.lattice import is_root, root_point


class TestSearchContext(unittest.TestCase):
    def setUp(self):
        self.ctx = SearchContext(["ABC", "AC", "BAC"])

    def test_initial_bookkeeping(self):
        ctx = self.ctx
        self.assertEqual(ctx.d, 3)
        self.assertEqual(ctx.alphabet, ["A", "C"])
        self.assertEqual(ctx.root, root_point(3))
        self.assertTrue(is_root(ctx.root))
        self.assertIsNone(ctx.parents[ctx.root])
        self.assertEqual(ctx.g[ctx.root], 0)
        self.assertEqual(ctx.f[ctx.root], 0)

    def test_starting_points_in_alphabet_order(self):
        self.assertEqual(self.ctx.starting_points(), [(0, 0, 1), (2, 1, 2)])

    def test_heuristic(self):
        ctx = self.ctx
        self.assertEqual(ctx.heuristic(ctx.root), 0)
        self.assertEqual(ctx.heuristic((0, 0, 1)), 1)
        self.assertEqual(ctx.heuristic((2, 1, 2)), 0)

    def test_successors_skip_unreachable_symbols(self):
        # A never occurs again in "AC" after index 0, only C survives
        self.assertEqual(self.ctx.successors((0, 0, 1)), [(2, 1, 2)])
        # nothing is left after the last positions
        self.assertEqual(self.ctx.successors((2, 1, 2)), [])

    def test_update_and_common_sequence(self):
        ctx = self.ctx
        a = (0, 0, 1)
        c = (2, 1, 2)
        ctx.update_successor(ctx.root, a)
        ctx.update_successor(a, c)
        self.assertEqual(ctx.g[a], 1)
        self.assertEqual(ctx.f[a], 2)
        self.assertEqual(ctx.g[c], 2)
        self.assertEqual(ctx.f[c], 2)
        self.assertEqual(ctx.parents[c], a)
        self.assertEqual(ctx.common_sequence(c), "AC")
        self.assertEqual(ctx.common_sequence(ctx.root), "")

    def test_reorder_puts_maximum_last(self):
        ctx = self.ctx
        pts = ctx.starting_points()
        for q in pts:
            ctx.update_successor(ctx.root, q)
        ctx.reorder(pts)
        # C: f = 1 + 0, A: f = 1 + 1
        self.assertEqual(pts, [(2, 1, 2), (0, 0, 1)])

    def test_reorder_breaks_f_ties_by_heuristic(self):
        ctx = self.ctx
        a, c = (0, 0, 1), (2, 1, 2)
        ctx.update_successor(ctx.root, a)
        ctx.update_successor(a, c)
        # both f = 2; h(a) = 1, h(c) = 0
        self.assertEqual(ctx.f[a], ctx.f[c])
        for order in ([a, c], [c, a]):
            with self.subTest(order=order):
                pts = list(order)
                ctx.reorder(pts)
                self.assertEqual(pts, [c, a])

    def test_reorder_is_stable_on_equal_keys(self):
        ctx = SearchContext(["abc", "bac"])
        pts = ctx.starting_points()
        for q in pts:
            ctx.update_successor(ctx.root, q)
        # a = (0, 1) and b = (1, 0) share f = 2, h = 1
        for order in ([(0, 1), (1, 0), (2, 2)], [(1, 0), (0, 1), (2, 2)]):
            with self.subTest(order=order):
                pts = list(order)
                ctx.reorder(pts)
                self.assertEqual(pts, [(2, 2)] + order[:2])

    def test_empty_string_collapses_alphabet(self):
        ctx = SearchContext(["", "ABC"])
        self.assertEqual(ctx.alphabet, [])
        self.assertEqual(ctx.starting_points(), [])

    def test_unicode_symbols(self):
        ctx = SearchContext(["串🚀文", "🚀串文"])
        self.assertEqual(ctx.alphabet, sorted(["串", "🚀", "文"]))
        pts = ctx.starting_points()
        self.assertEqual(len(pts), 3)
        for p in pts:
            self.assertEqual(len(p), 2)


if __name__ == "__main__":
    unittest.main()
