# core/alphabet.py
from __future__ import annotations
from typing import List, Sequence, Tuple
import numpy as np

from core.lattice import NO_POS


def get_alphabet(chains: Sequence[Sequence[str]]) -> List[str]:
    """
    Candidate alphabet: the distinct symbols of the shortest string, sorted.
    Any common subsequence only uses these; the list is filtered further by
    next_occurrence_table().
    """
    if len(chains) == 0:
        return []
    shortest = min(chains, key=len)
    return sorted(set(shortest))


def next_occurrence_table(
    chains: Sequence[Sequence[str]],
    alphabet: Sequence[str],
) -> Tuple[List[str], np.ndarray]:
    """
    Build the lookup table mt and the common alphabet in one pass.

    mt[c, i, k] = smallest index >= k where alphabet'[c] occurs in chains[i],
                  or NO_POS if there is none.
    Shape (|alphabet'|, d, L+1) with L the longest string length; columns at
    or past len(chains[i]) are NO_POS.

    A symbol missing from any string is dropped: the returned alphabet' is a
    new list, the input is left untouched.
    """
    d = len(chains)
    L = max((len(s) for s in chains), default=0)

    kept: List[str] = []
    rows: List[np.ndarray] = []
    for ch in alphabet:
        table = np.full((d, L + 1), NO_POS, dtype=np.int64)
        common = True
        for i, s in enumerate(chains):
            lpos = NO_POS
            # backward scan: remember the last encounter with ch
            for k in range(len(s) - 1, -1, -1):
                if s[k] == ch:
                    lpos = k
                table[i, k] = lpos
            if lpos == NO_POS:
                common = False
                break
        if common:
            kept.append(ch)
            rows.append(table)

    if rows:
        mt = np.stack(rows, axis=0)
    else:
        mt = np.full((0, d, L + 1), NO_POS, dtype=np.int64)
    return kept, mt
