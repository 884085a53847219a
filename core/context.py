# core/context.py
from __future__ import annotations
from typing import Dict, List, Optional, Sequence
import numpy as np

from core.alphabet import get_alphabet, next_occurrence_table
from core.lattice import NO_POS, Point, as_position, root_point, to_linear_index
from core.suffix_scores import matrices_score


class SearchContext:
    """
    Per-instance state of one MLCS search.

    Static tables (built once):
      - alphabet: symbols common to every string, sorted
      - ms: pairwise suffix tables, ms[to_linear_index(i, j, d)]
      - mt: next-occurrence table, mt[c, i, k]
    Bookkeeping (grows during the search), keyed by lattice point:
      - g: number of matched symbols on the path to the point
      - f: g + heuristic
      - parents: predecessor on the chosen path (None for the root)
    """

    def __init__(self, strings: Sequence[str]):
        self.chains: List[str] = list(strings)
        self.d = len(self.chains)

        candidates = get_alphabet(self.chains)
        self.ms: List[np.ndarray] = matrices_score(self.chains)
        self.alphabet, self.mt = next_occurrence_table(self.chains, candidates)

        self.root: Point = root_point(self.d)
        self.parents: Dict[Point, Optional[Point]] = {self.root: None}
        self.g: Dict[Point, int] = {self.root: 0}
        self.f: Dict[Point, int] = {self.root: 0}

    # -------------------------
    # Heuristic
    # -------------------------
    def heuristic(self, p: Point) -> int:
        """
        min over pairs (i, j), i != j, of ms[i, j][p[i], p[j]].
        Pairs with an unset component are skipped; no usable pair -> 0.
        The (j, i) table is the transpose of (i, j), so i < j covers all.
        """
        best: Optional[int] = None
        d = self.d
        for i in range(d):
            pi = p[i]
            if pi is None:
                continue
            for j in range(i + 1, d):
                pj = p[j]
                if pj is None:
                    continue
                v = int(self.ms[to_linear_index(i, j, d)][pi, pj])
                if best is None or v < best:
                    best = v
                    if best == 0:
                        return 0
        return 0 if best is None else best

    # -------------------------
    # Successors
    # -------------------------
    def successors(self, p: Point) -> List[Point]:
        """
        For each alphabet symbol c (alphabet order), the point reached by
        jumping every string to its next c strictly after p. A symbol that
        does not occur again in some string contributes nothing.
        """
        out: List[Point] = []
        for c in range(len(self.alphabet)):
            table = self.mt[c]
            succ: List[int] = []
            for i, pi in enumerate(p):
                nxt = int(table[i, pi + 1])
                if nxt == NO_POS:
                    break
                succ.append(nxt)
            if len(succ) == self.d:
                out.append(tuple(succ))
        return out

    def starting_points(self) -> List[Point]:
        """First match of every common symbol, in alphabet order."""
        return [
            tuple(as_position(v) for v in self.mt[c, :, 0])
            for c in range(len(self.alphabet))
        ]

    # -------------------------
    # Bookkeeping
    # -------------------------
    def update_successor(self, p: Point, q: Point) -> None:
        """Mark p as parent of q and cache g(q), f(q)."""
        gq = self.g[p] + 1
        self.g[q] = gq
        self.f[q] = self.heuristic(q) + gq
        self.parents[q] = p

    def sort_key(self, p: Point):
        return (self.f[p], self.heuristic(p))

    def reorder(self, frontier: List[Point]) -> None:
        # ascending (f, h); stable, so the maximum ends up last
        frontier.sort(key=self.sort_key)

    # -------------------------
    # Path reconstruction
    # -------------------------
    def common_sequence(self, p: Point) -> str:
        ref = self.chains[0]
        out: List[str] = []
        cur: Optional[Point] = p
        while cur is not None and self.parents.get(cur) is not None:
            out.append(ref[cur[0]])
            cur = self.parents[cur]
        return "".join(reversed(out))
