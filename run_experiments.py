#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Experiment runner for the windowed A* MLCS search.

What it does (per instance, per window C):
  1) Runs the windowed search and checks the answer is a common subsequence.
  2) Optionally runs the exhaustive baseline (bounded by --exact_max_nodes)
     and records the optimality gap.
  3) Appends one row per (instance, window) to a CSV.
"""

from __future__ import annotations

import os
import argparse
import traceback
from typing import Any, Dict

import pandas as pd

from alg.astar_search import AStarParams, run_astar_search
from alg.exhaustive_search import ExhaustiveSearchParams, exhaustive_mlcs
from alg.verify import is_common_subsequence
from examples.instances import INSTANCES, build_instance

# Fixed column order so appended rows stay aligned, errors included.
COLUMNS = [
    "instance", "d", "min_len", "max_len", "window",
    "status", "sequence", "length", "expected_length", "matches_expected", "is_common",
    "rounds", "expanded", "generated", "max_frontier", "runtime_sec", "alphabet_size",
    "exact_length", "exact_complete", "exact_visited", "exact_runtime_sec", "gap",
    "error", "traceback",
]


def _error_fields(e: Exception, prefix: str = "") -> Dict[str, Any]:
    return {"error": f"{prefix}{type(e).__name__}: {e}", "traceback": traceback.format_exc()}


def run_one(name: str, window: int, exact: bool, exact_max_nodes: int, time_limit: float) -> Dict[str, Any]:
    row: Dict[str, Any] = {"instance": name, "window": int(window)}
    try:
        inst = build_instance(name)
    except Exception as e:
        row.update({"status": "error", **_error_fields(e)})
        return row

    strings = inst["strings"]
    expected = inst.get("expected", None)
    row.update({
        "d": len(strings),
        "min_len": min((len(s) for s in strings), default=0),
        "max_len": max((len(s) for s in strings), default=0),
    })

    params = AStarParams(
        window=int(window),
        time_limit_sec=None if time_limit < 0 else float(time_limit),
    )
    try:
        res = run_astar_search(strings, params)
        row.update({
            "status": res.status,
            "sequence": res.sequence,
            "length": res.length,
            "expected_length": len(expected) if expected is not None else None,
            "matches_expected": (res.sequence == expected) if expected is not None else None,
            "is_common": is_common_subsequence(res.sequence, strings),
            "rounds": res.rounds,
            "expanded": res.expanded,
            "generated": res.generated,
            "max_frontier": res.max_frontier,
            "runtime_sec": res.runtime_sec,
            "alphabet_size": len(res.meta.get("alphabet", [])),
        })
    except Exception as e:
        row.update({"status": "error", **_error_fields(e)})
        return row

    if exact:
        # the windowed result stays in the row when only the baseline fails
        try:
            ep = ExhaustiveSearchParams(max_nodes=None if exact_max_nodes < 0 else int(exact_max_nodes))
            ex = exhaustive_mlcs(strings, ep)
            row.update({
                "exact_length": ex["best_length"],
                "exact_complete": ex["complete"],
                "exact_visited": ex["visited_nodes"],
                "exact_runtime_sec": ex["runtime_sec"],
                "gap": int(ex["best_length"]) - int(row["length"]),
            })
        except Exception as e:
            row.update(_error_fields(e, prefix="exact: "))

    return row


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--out_csv", type=str, default="experiment_results.csv")
    ap.add_argument("--window_list", type=str, default="0,5,20",
                    help="comma-separated window values, e.g. 0,5,20")
    ap.add_argument("--instances", type=str, default="all",
                    help="comma-separated instance names, or 'all'")
    ap.add_argument("--exact", action="store_true", help="also run the exhaustive baseline")
    ap.add_argument("--exact_max_nodes", type=int, default=200_000)
    ap.add_argument("--time_limit", type=float, default=-1.0)
    args = ap.parse_args()

    windows = [int(x.strip()) for x in args.window_list.split(",") if x.strip()]
    if args.instances.strip().lower() == "all":
        names = sorted(INSTANCES.keys())
    else:
        names = [x.strip() for x in args.instances.split(",") if x.strip()]

    out_csv = args.out_csv
    # If file exists and is non-empty, we will append without header.
    need_header = (not os.path.exists(out_csv)) or (os.path.getsize(out_csv) == 0)

    num_written = 0
    for name in names:
        for C in windows:
            print(f"[run] instance={name}  window={C}")
            row = run_one(name, C, exact=args.exact, exact_max_nodes=args.exact_max_nodes,
                          time_limit=args.time_limit)

            df_row = pd.DataFrame([row]).reindex(columns=COLUMNS)
            df_row.to_csv(
                out_csv,
                mode="a",
                header=need_header,
                index=False,
            )
            need_header = False
            num_written += 1
            print(f"[saved] appended 1 row -> {out_csv}  (total={num_written})")

    print(f"[done] wrote {num_written} rows -> {out_csv}")


if __name__ == "__main__":
    main()
