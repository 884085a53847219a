# alg/astar_search.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple
import time

from core.context import SearchContext
from core.lattice import Point
from core.results import MLCSResult


class ContractViolation(ValueError):
    """Raised (strict mode only) when the caller supplies no strings at all."""


@dataclass
class AStarParams:
    # Relaxation window C: each round keeps every point with f >= max_f - C
    # (or f >= max_f when max_f <= C).
    window: int = 20

    # Optional budgets, checked between two rounds. When one trips the search
    # stops with status "truncated" and returns the partial path of the best
    # frontier point.
    max_rounds: Optional[int] = None
    time_limit_sec: Optional[float] = None

    # Distinguish "no strings supplied" from "no common subsequence".
    strict: bool = False

    # Print progress every this many rounds (0 = silent)
    progress_every: int = 0


@dataclass
class SearchStats:
    rounds: int = 0
    expanded: int = 0
    generated: int = 0
    max_frontier: int = 0


def _as_chains(strings: Iterable[str]) -> List[str]:
    if isinstance(strings, str):
        raise TypeError("expected a collection of strings, got a single str")
    chains = list(strings)
    for k, s in enumerate(chains):
        if not isinstance(s, str):
            raise TypeError(f"input #{k} is {type(s).__name__}, expected str")
    return chains


def _deadline(params: AStarParams, t_start: float) -> Optional[float]:
    tl = params.time_limit_sec
    if tl is None:
        return None
    tl = float(tl)
    if tl <= 0:
        return t_start  # immediate timeout
    return t_start + tl


def _budget_exhausted(params: AStarParams, stats: SearchStats, deadline: Optional[float]) -> bool:
    if params.max_rounds is not None and stats.rounds >= int(params.max_rounds):
        return True
    if deadline is not None and time.perf_counter() >= deadline:
        return True
    return False


def _init_queue(ctx: SearchContext) -> List[Point]:
    """Starting points hang off the root with g = 1, then get sorted."""
    queue = ctx.starting_points()
    for q in queue:
        ctx.update_successor(ctx.root, q)
    ctx.reorder(queue)
    return queue


def window_threshold(y: int, window: int) -> int:
    """Lowest f kept in a round whose maximum f is y."""
    return y - window if y > window else y


def expand_round(
    ctx: SearchContext,
    active: List[Point],
    stats: Optional[SearchStats] = None,
) -> Tuple[Optional[Point], List[Point]]:
    """
    Expand the kept points of one round, in order.

    Returns (terminal, new_frontier). terminal is the first kept point with
    heuristic 0, in which case the expansion stops there. A successor shared
    by several kept points keeps the first of them as parent; a point that
    was already reached in an earlier round is re-parented.
    The new frontier is returned unsorted.
    """
    if stats is None:
        stats = SearchStats()
    new_queue: List[Point] = []
    seen: Set[Point] = set()
    for p in active:
        stats.expanded += 1
        if ctx.heuristic(p) == 0:
            return p, new_queue

        for q in ctx.successors(p):
            stats.generated += 1
            if q in seen:
                continue
            seen.add(q)
            ctx.update_successor(p, q)
            new_queue.append(q)
    return None, new_queue


def _meta(chains: List[str], params: AStarParams, ctx: Optional[SearchContext]) -> Dict[str, Any]:
    return {
        "d": len(chains),
        "lengths": [len(s) for s in chains],
        "window": int(params.window),
        "alphabet": list(ctx.alphabet) if ctx is not None else [],
    }


def run_astar_search(strings: Iterable[str], params: Optional[AStarParams] = None) -> MLCSResult:
    """
    Windowed A* over the match lattice.

    Every round takes the current frontier (all points share the same depth),
    reads y = f of its last (maximum) member, keeps the points with
    f >= y - window (f >= y when y <= window) and expands them:
      - a kept point with heuristic 0 ends the search; its parent chain
        spells the answer
      - otherwise each successor not yet in this round's new frontier gets
        the point as parent and joins the new frontier
    The new frontier is sorted by (f, heuristic) and the next round starts.
    An empty frontier means no common symbol is left: the answer is "".

    This is a batched relaxation of A*, not exact A*: points that fall out
    of the window are dropped for good.
    """
    if params is None:
        params = AStarParams()
    if int(params.window) < 0:
        raise ValueError(f"window must be >= 0, got {params.window}")

    t0 = time.perf_counter()
    chains = _as_chains(strings)
    stats = SearchStats()

    def _done(sequence: str, status: str, ctx: Optional[SearchContext], **extra: Any) -> MLCSResult:
        meta = _meta(chains, params, ctx)
        meta.update(extra)
        return MLCSResult(
            sequence=sequence,
            status=status,
            rounds=stats.rounds,
            expanded=stats.expanded,
            generated=stats.generated,
            max_frontier=stats.max_frontier,
            runtime_sec=float(time.perf_counter() - t0),
            meta=meta,
        )

    if len(chains) == 0:
        if params.strict:
            raise ContractViolation("no input strings supplied")
        return _done("", "exhausted", None)

    if len(chains) == 1:
        s = chains[0]
        return _done(s, "found" if s else "exhausted", None)

    ctx = SearchContext(chains)
    C = int(params.window)
    deadline = _deadline(params, t0)

    queue = _init_queue(ctx)
    stats.max_frontier = len(queue)

    while queue:
        if _budget_exhausted(params, stats, deadline):
            best = queue[-1]
            if params.progress_every:
                print(f"[astar] budget exhausted after {stats.rounds} rounds, partial g={ctx.g[best]}")
            return _done(ctx.common_sequence(best), "truncated", ctx)

        stats.rounds += 1

        y = window_threshold(ctx.f[queue[-1]], C)
        active = [p for p in queue if ctx.f[p] >= y]

        terminal, queue = expand_round(ctx, active, stats)
        if terminal is not None:
            if params.progress_every:
                print(f"[astar] match at round={stats.rounds} g={ctx.g[terminal]}")
            return _done(ctx.common_sequence(terminal), "found", ctx, terminal_g=ctx.g[terminal])

        ctx.reorder(queue)
        stats.max_frontier = max(stats.max_frontier, len(queue))

        if params.progress_every and (stats.rounds % int(params.progress_every) == 0):
            top_f = ctx.f[queue[-1]] if queue else None
            print(f"[astar] round={stats.rounds}  active={len(active)}  frontier={len(queue)}  max_f={top_f}")

    return _done("", "exhausted", ctx)


def multiple_longest_common_subsequence(strings: Iterable[str], params: Optional[AStarParams] = None) -> str:
    """One longest common subsequence of all strings ("" when there is none)."""
    return run_astar_search(strings, params).sequence
