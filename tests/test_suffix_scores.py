# tests/test_suffix_scores.py
import unittest
import numpy as np

from core.lattice import to_linear_index
from core.suffix_scores import matrices_score, score_matrix


def naive_score_matrix(s1: str, s2: str) -> np.ndarray:
    """Cell-by-cell version of the suffix recurrence."""
    m, n = len(s1), len(s2)
    M = np.zeros((m + 1, n + 1), dtype=int)
    if m == 0 or n == 0:
        return M
    for i in range(m - 2, -1, -1):
        for j in range(n - 2, -1, -1):
            if s1[i + 1] == s2[j + 1]:
                M[i, j] = M[i + 1, j + 1] + 1
            else:
                M[i, j] = max(M[i, j + 1], M[i + 1, j])
    return M


def random_string(rng: np.random.Generator, alphabet: str, lo: int, hi: int) -> str:
    n = int(rng.integers(lo, hi + 1))
    return "".join(alphabet[int(k)] for k in rng.integers(0, len(alphabet), size=n))


class TestScoreMatrix(unittest.TestCase):
    def test_known_small_table(self):
        M = score_matrix("ABC", "AC")
        expected = np.array([
            [1, 0, 0],
            [1, 0, 0],
            [0, 0, 0],
            [0, 0, 0],
        ])
        np.testing.assert_array_equal(M, expected)

    def test_empty_inputs_give_zero_tables(self):
        np.testing.assert_array_equal(score_matrix("", "ABC"), np.zeros((1, 4), dtype=int))
        np.testing.assert_array_equal(score_matrix("AB", ""), np.zeros((3, 1), dtype=int))
        np.testing.assert_array_equal(score_matrix("", ""), np.zeros((1, 1), dtype=int))

    def test_single_symbol_strings(self):
        np.testing.assert_array_equal(score_matrix("a", "a"), np.zeros((2, 2), dtype=int))
        np.testing.assert_array_equal(score_matrix("a", "abc"), np.zeros((2, 4), dtype=int))

    def test_identical_strings_on_diagonal(self):
        s = "abcdef"
        M = score_matrix(s, s)
        for i in range(len(s)):
            # after position i, the rest of s is still fully matchable
            self.assertEqual(int(M[i, i]), len(s) - i - 1)

    def test_matches_cell_by_cell_recurrence(self):
        rng = np.random.default_rng(2024)
        for _ in range(60):
            a = random_string(rng, "abcd", 0, 12)
            b = random_string(rng, "abcd", 0, 12)
            np.testing.assert_array_equal(
                score_matrix(a, b), naive_score_matrix(a, b),
                err_msg=f"Mismatch for a={a!r} b={b!r}",
            )

    def test_unicode_symbols(self):
        M = score_matrix("x串🚀文", "y串文")
        np.testing.assert_array_equal(M, naive_score_matrix("x串🚀文", "y串文"))
        self.assertEqual(int(M[0, 0]), 2)


class TestMatricesScore(unittest.TestCase):
    def test_layout_and_transpose(self):
        chains = ["ABC", "AC", "BAC"]
        d = len(chains)
        ms = matrices_score(chains)
        self.assertEqual(len(ms), d * d)
        for i in range(d):
            for j in range(d):
                M = ms[to_linear_index(i, j, d)]
                self.assertEqual(M.shape, (len(chains[i]) + 1, len(chains[j]) + 1))
                np.testing.assert_array_equal(M, score_matrix(chains[i], chains[j]))
                np.testing.assert_array_equal(M, ms[to_linear_index(j, i, d)].T)


if __name__ == "__main__":
    unittest.main()
