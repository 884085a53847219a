# alg/verify.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List


def is_subsequence(candidate: str, s: str) -> bool:
    it = iter(s)
    return all(ch in it for ch in candidate)


def is_common_subsequence(candidate: str, strings: Iterable[str]) -> bool:
    return all(is_subsequence(candidate, s) for s in strings)


def verify_common_subsequence(candidate: str, strings: Iterable[str], verbose: bool = False) -> Dict[str, Any]:
    """
    Check that candidate occurs, in order, in every string.
    Returns {"ok", "failed_indices", "length"}.
    """
    chains = list(strings)
    failed: List[int] = [k for k, s in enumerate(chains) if not is_subsequence(candidate, s)]
    ok = len(failed) == 0
    if verbose:
        print("[verify] OK" if ok else "[verify] MISMATCH")
        print(f"  length   = {len(candidate)}")
        print(f"  strings  = {len(chains)}")
        if not ok:
            print(f"  failed   = {failed}")
    return {"ok": ok, "failed_indices": failed, "length": len(candidate)}
