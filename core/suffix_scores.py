# core/suffix_scores.py
from __future__ import annotations
from typing import List, Sequence
import numpy as np

from core.lattice import to_linear_index


def score_matrix(s1: Sequence[str], s2: Sequence[str]) -> np.ndarray:
    """
    Suffix table M of shape (m+1, n+1) for the pair (s1, s2):
        M[i, j] = LCS length of s1[i+1:] and s2[j+1:]
    i.e. what can still be matched strictly after positions i and j.
    Rows m-1, m and columns n-1, n stay zero; empty input -> all-zero table.

    Row i is filled right-to-left by the recurrence
        M[i, j] = M[i+1, j+1] + 1                 if s1[i+1] == s2[j+1]
                = max(M[i, j+1], M[i+1, j])       otherwise
    A diagonal match never loses against M[i, j+1], so both branches equal
    max(t[j], M[i, j+1]) with t[j] the branch-free candidate, which is a
    reverse running maximum over t.
    """
    m = len(s1)
    n = len(s2)
    M = np.zeros((m + 1, n + 1), dtype=np.int64)
    if m == 0 or n == 0:
        return M

    b = np.asarray(list(s2[1:]), dtype=object)  # s2[j+1] for j = 0..n-2
    for i in range(m - 2, -1, -1):
        nxt = M[i + 1]
        match = b == s1[i + 1]
        t = np.where(match, nxt[1:n] + 1, nxt[0:n - 1])
        M[i, 0:n - 1] = np.maximum.accumulate(t[::-1])[::-1]
    return M


def matrices_score(chains: Sequence[Sequence[str]]) -> List[np.ndarray]:
    """
    All d*d pairwise suffix tables, flat-indexed by to_linear_index(i, j, d).
    The (j, i) table is the transpose of (i, j); self-pairs are kept so the
    indexing stays dense, although the heuristic never reads them.
    """
    d = len(chains)
    scores: List[np.ndarray] = [None] * (d * d)  # type: ignore[list-item]
    for i in range(d):
        for j in range(i, d):
            M = score_matrix(chains[i], chains[j])
            scores[to_linear_index(i, j, d)] = M
            if i != j:
                scores[to_linear_index(j, i, d)] = M.T
    return scores
