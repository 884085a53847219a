# alg/exhaustive_search.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple
import time

from core.context import SearchContext
from core.lattice import Point


@dataclass
class ExhaustiveSearchParams:
    """
    Parameters for the exact MLCS reference search.
    """
    # Safety guard: stop after visiting this many nodes (partial search)
    max_nodes: Optional[int] = None

    # If False, only the dominance check is used (no heuristic cut-off).
    enable_pruning: bool = True

    # Print progress every this many visited nodes
    progress_every: int = 0


def exhaustive_mlcs(
    strings: Iterable[str],
    params: Optional[ExhaustiveSearchParams] = None,
) -> Dict[str, Any]:
    """
    Exact MLCS by depth-first branch and bound over the match lattice.

    - Same lattice and successor rule as the windowed search.
    - A point is skipped when it was already reached with at least the same
      depth (dominance).
    - With pruning enabled, a point is cut when depth + heuristic cannot beat
      the incumbent; the pairwise heuristic never underestimates, so the
      result stays exact.
    - Children are pushed so that the largest bound is popped first.

    Returns:
      {
        "best_sequence": str,
        "best_length": int,
        "visited_nodes": int,
        "generated_nodes": int,
        "pruned_nodes": int,
        "complete": bool,  # False when max_nodes stopped the search
        "params": {...},
        "runtime_sec": float,
      }
    """
    if params is None:
        params = ExhaustiveSearchParams()

    t0 = time.perf_counter()
    chains = list(strings)

    def _out(seq: str, visited: int, generated: int, pruned: int, complete: bool) -> Dict[str, Any]:
        return {
            "best_sequence": seq,
            "best_length": len(seq),
            "visited_nodes": int(visited),
            "generated_nodes": int(generated),
            "pruned_nodes": int(pruned),
            "complete": bool(complete),
            "params": params.__dict__,
            "runtime_sec": float(time.perf_counter() - t0),
        }

    if len(chains) == 0:
        return _out("", 0, 0, 0, True)
    if len(chains) == 1:
        return _out(chains[0], 0, 0, 0, True)

    ctx = SearchContext(chains)

    best_len = 0
    best_path: List[Point] = []
    best_depth: Dict[Point, int] = {}

    visited = 0
    generated = 0
    pruned = 0
    complete = True

    # stack items: (depth, point, path) ; path excludes the root
    stack: List[Tuple[int, Point, List[Point]]] = [(0, ctx.root, [])]

    while stack:
        if params.max_nodes is not None and visited >= int(params.max_nodes):
            complete = False
            break

        depth, p, path = stack.pop()
        visited += 1
        if params.progress_every and (visited % int(params.progress_every) == 0):
            print(f"[exhaustive] visited={visited}  best_len={best_len}  depth={depth}")

        # incumbent may have improved since this point was pushed
        if params.enable_pruning and depth > 0 and depth + ctx.heuristic(p) <= best_len:
            pruned += 1
            continue

        if depth > best_len:
            best_len = depth
            best_path = path

        children = ctx.starting_points() if depth == 0 else ctx.successors(p)
        scored: List[Tuple[int, Point]] = []
        for q in children:
            generated += 1
            if best_depth.get(q, -1) >= depth + 1:
                continue
            ub = depth + 1 + ctx.heuristic(q)
            if params.enable_pruning and ub <= best_len:
                pruned += 1
                continue
            best_depth[q] = depth + 1
            scored.append((ub, q))

        # ascending push -> the largest bound is popped first
        scored.sort(key=lambda x: x[0])
        for _ub, q in scored:
            stack.append((depth + 1, q, path + [q]))

    ref = chains[0]
    seq = "".join(ref[q[0]] for q in best_path)
    return _out(seq, visited, generated, pruned, complete)
